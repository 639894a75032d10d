"""Domain models for the nutrition coach."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """Identity returned by the hosted auth provider."""

    id: UUID
    email: str | None = None
