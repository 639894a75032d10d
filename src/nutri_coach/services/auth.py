"""Token authentication service."""

from dataclasses import dataclass
from typing import Protocol

from nutri_coach.domain.models import AuthUser


class AuthClient(Protocol):
    """Interface for the hosted auth provider."""

    def get_user(self, token: str) -> AuthUser | None:
        """Return the user owning the access token, or None if it is invalid."""


@dataclass
class AuthService:
    """Resolves bearer tokens to users."""

    client: AuthClient

    def authenticate(self, token: str) -> AuthUser | None:
        """Return the authenticated user for a token."""
        if not token:
            return None
        return self.client.get_user(token)


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    parts = authorization.split(" ", maxsplit=1)
    if len(parts) != 2:  # noqa: PLR2004
        return None
    token = parts[1].strip()
    return token or None
