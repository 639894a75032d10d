"""Tests for configuration helpers."""

from nutri_coach.config import parse_cors_origins


def test_parse_cors_origins_defaults_to_wildcard() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins(" * ") == ["*"]
    assert parse_cors_origins("") == ["*"]


def test_parse_cors_origins_splits_list() -> None:
    raw = "http://localhost:5173/, https://coach.example.com,"

    assert parse_cors_origins(raw) == [
        "http://localhost:5173",
        "https://coach.example.com",
    ]
