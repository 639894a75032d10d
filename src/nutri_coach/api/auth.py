"""Bearer token authentication for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status

from nutri_coach.domain.models import AuthUser  # noqa: TC001
from nutri_coach.services.auth import parse_bearer_token

if TYPE_CHECKING:
    from nutri_coach.containers import AppContainer


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> AuthUser:
    """Resolve the request's bearer token to an authenticated user."""
    token = parse_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token"
        )
    container: AppContainer = request.app.state.container
    user = container.auth_service.authenticate(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        )
    return user
