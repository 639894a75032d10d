"""Helpers shared by the Supabase repositories."""

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from postgrest.exceptions import APIError

from nutri_coach.services.errors import RepositoryError

T = TypeVar("T")


def run_query(query: Callable[[], T]) -> T:
    """Execute a PostgREST query, mapping API errors to RepositoryError."""
    try:
        return query()
    except APIError as exc:
        raise RepositoryError(exc.message or str(exc)) from exc


def parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def to_str_list(value: object) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    return []
