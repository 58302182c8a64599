"""
Dynaconf implementation of the SettingsProvider port, and the lookups
built on top of it (read API key, HTTP proxy).
"""

import os
from typing import Any, Mapping, Optional

from dynaconf import Dynaconf

from ..application.domain import SettingsProvider
from ..application.exceptions import ConfigurationError

READ_API_KEY_ENV = "HONEYBADGER_READ_API_KEY"
READ_API_KEY_SETTING = "honeybadger.read_api_key"
PROXY_HOST_SETTING = "http.proxy_host"
PROXY_PORT_SETTING = "http.proxy_port"
_DEFAULT_PROXY_PORT = 80


class DynaconfSettingsProvider(SettingsProvider):
    """Reads settings from Dynaconf and variables from the process environment."""

    def __init__(
        self,
        settings: Dynaconf,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings
        self.environ = os.environ if environ is None else environ

    def env(self, name: str) -> Optional[str]:
        return self.environ.get(name)

    def setting(self, name: str, default: Any = None) -> Any:
        return self.settings.get(name, default)


def _is_unset(value: Optional[str]) -> bool:
    return not value or "YOUR_" in value.upper()


def resolve_read_api_key(provider: SettingsProvider) -> str:
    """
    Finds the Read API key, preferring the environment to settings files.

    Raises:
        ConfigurationError: If the key is missing, empty or a placeholder
                            in both places.
    """

    env_key = provider.env(READ_API_KEY_ENV)
    if not _is_unset(env_key):
        return env_key

    setting_key = provider.setting(READ_API_KEY_SETTING)
    if setting_key is not None:
        setting_key = str(setting_key)
    if _is_unset(setting_key):
        raise ConfigurationError(
            f"Environment variable {READ_API_KEY_ENV} or setting "
            f"{READ_API_KEY_SETTING} must be set if you are going to be "
            f"accessing the Read API"
        )

    return setting_key


def proxy_url(provider: SettingsProvider) -> Optional[str]:
    """
    Builds the HTTP proxy URL from settings.

    Returns:
        ``http://host:port``, or None when no proxy host is configured.

    Raises:
        ConfigurationError: If the proxy port is not a number.
    """

    host = provider.setting(PROXY_HOST_SETTING)
    if not host:
        return None

    port = provider.setting(PROXY_PORT_SETTING) or _DEFAULT_PROXY_PORT
    try:
        port = int(port)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Setting {PROXY_PORT_SETTING} must be a number, got {port!r}"
        ) from e

    return f"http://{host}:{port}"
