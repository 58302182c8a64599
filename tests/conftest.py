from typing import Any, Dict, Optional

import pytest

from error_loader.application.domain import SettingsProvider

FAULT_ID = "6d5f4c5a-3e2b-4f1a-9c8d-7b6a5f4e3d2c"
LOOKUP_BASE_URL = "https://app.honeybadger.io/notice/"
API_BASE_URL = "https://api.honeybadger.io"
REDIRECT = "https://app.honeybadger.io/projects/42/faults/99/7"
DETAILS_URL = "https://app.honeybadger.io/v1/projects/42/faults/99/notices/7/"


class FakeSettingsProvider(SettingsProvider):
    """Settings provider backed by plain dictionaries."""

    def __init__(
        self,
        env: Optional[Dict[str, str]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ):
        self.environ = env or {}
        self.settings = settings or {}

    def env(self, name: str) -> Optional[str]:
        return self.environ.get(name)

    def setting(self, name: str, default: Any = None) -> Any:
        return self.settings.get(name, default)


@pytest.fixture
def fault_id() -> str:
    return FAULT_ID


@pytest.fixture
def settings_with_key() -> FakeSettingsProvider:
    return FakeSettingsProvider(env={"HONEYBADGER_READ_API_KEY": "secret-token"})


@pytest.fixture
def settings_without_key() -> FakeSettingsProvider:
    return FakeSettingsProvider()
