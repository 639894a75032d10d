"""Tests for bearer token authentication."""

from uuid import uuid4

from nutri_coach.domain.models import AuthUser
from nutri_coach.services.auth import AuthService, parse_bearer_token
from tests.conftest import FakeAuthClient


def test_parse_bearer_token() -> None:
    assert parse_bearer_token("Bearer abc.def") == "abc.def"
    assert parse_bearer_token("Bearer ") is None
    assert parse_bearer_token("abc") is None
    assert parse_bearer_token(None) is None


def test_authenticate_resolves_known_token() -> None:
    user = AuthUser(id=uuid4())
    service = AuthService(FakeAuthClient(users={"token": user}))

    assert service.authenticate("token") == user
    assert service.authenticate("other") is None
    assert service.authenticate("") is None
