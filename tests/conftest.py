import logging

import pytest

from lccallnumber.core.settings import Settings, get_settings

_SETTINGS_ENV = ("APP_NAME", "APP_ENV", "APP_VERSION", "LOG_LEVEL")


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Return a callable that applies env overrides and reloads settings."""
    root = logging.getLogger()
    root_level = root.level
    root_handlers = root.handlers[:]

    def _apply(**env: str) -> Settings:
        for name in _SETTINGS_ENV:
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        get_settings.cache_clear()
        return get_settings()

    yield _apply

    get_settings.cache_clear()
    root.setLevel(root_level)
    root.handlers[:] = root_handlers
