"""Unit tests for the uvicorn server entry point"""

import uvicorn

from surety_gateway.api import __main__ as entrypoint
from surety_gateway.config import settings


def test_main_serves_app_with_configured_address(monkeypatch):
    """Test the console script hands the app import path and bind address to uvicorn"""
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entrypoint.main()

    assert calls == [
        (
            "surety_gateway.api.main:app",
            {"host": settings.host, "port": settings.port, "log_config": None},
        )
    ]
