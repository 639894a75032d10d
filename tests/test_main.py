"""Tests for the server entrypoint."""

import pytest

from nutri_coach import main as main_module


def test_main_runs_uvicorn_with_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, str, int]] = []
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "header.payload.signature")
    monkeypatch.setenv("PORT", "4100")
    monkeypatch.setattr(
        main_module.uvicorn,
        "run",
        lambda app, host, port: calls.append((app, host, port)),
    )

    main_module.main()

    assert calls == [("nutri_coach.api.asgi:app", "0.0.0.0", 4100)]
