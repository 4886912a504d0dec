from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from eks_demo.core.config import Settings, get_settings
from eks_demo.main import create_app

_ENV_VARS = ("PORT", "HOST", "NODE_ENV", "APP_ENV", "ENV", "PYTHON_ENV", "LOG_LEVEL", "SENTRY_DSN")


class FakeSystemInfo:
    """Deterministic host facts; uptime advances by one second per call."""

    def __init__(self, total=8 * 1024**3, free=3 * 1024**3 + 512 * 1024**2):
        self._total = total
        self._free = free
        self._uptime = 41.5
        self.now_value = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)

    def hostname(self) -> str:
        return "demo-pod-7f9c"

    def platform(self) -> str:
        return "linux"

    def runtime_version(self) -> str:
        return "3.12.4"

    def total_memory(self) -> int:
        return self._total

    def free_memory(self) -> int:
        return self._free

    def uptime(self) -> float:
        self._uptime += 1.0
        return self._uptime

    def now(self) -> datetime:
        return self.now_value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Settings come from the environment; start each test from a blank slate
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_info() -> FakeSystemInfo:
    return FakeSystemInfo()


@pytest.fixture
def app(fake_info):
    return create_app(Settings(), system_info=fake_info)


@pytest.fixture
def client(app):
    return TestClient(app)
