"""Tests for the console entry point."""

import uvicorn

from caloriv_admin import main as main_module


def test_main_serves_asgi_app(monkeypatch) -> None:
    calls: list[tuple[str, dict[str, object]]] = []
    monkeypatch.setenv("ADMIN_API_KEY", "admin-key")
    monkeypatch.setenv("ADMIN_EMAIL", "admin@caloriv.app")
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("ENVIRONMENT", "local")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setattr(
        uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    main_module.main()

    assert calls == [
        (
            "caloriv_admin.api.asgi:app",
            {"host": "127.0.0.1", "port": 9100, "reload": True},
        )
    ]
