"""Supabase Auth token verification."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from nutri_coach.domain.models import AuthUser
from nutri_coach.services.auth import AuthClient

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Verifies access tokens against Supabase Auth."""

    client: Client

    def get_user(self, token: str) -> AuthUser | None:
        """Return the user owning the token, or None when Supabase rejects it."""
        try:
            response = self.client.auth.get_user(token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        user = response.user
        return AuthUser(id=UUID(str(user.id)), email=getattr(user, "email", None))
