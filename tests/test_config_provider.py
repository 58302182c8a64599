import pytest
from dynaconf import Dynaconf

from error_loader.application.exceptions import ConfigurationError
from error_loader.infrastructure.config_provider import (
    DynaconfSettingsProvider,
    proxy_url,
    resolve_read_api_key,
)

from conftest import FakeSettingsProvider


def test_read_api_key_prefers_environment():
    provider = FakeSettingsProvider(
        env={"HONEYBADGER_READ_API_KEY": "from-env"},
        settings={"honeybadger.read_api_key": "from-settings"},
    )

    assert resolve_read_api_key(provider) == "from-env"


def test_read_api_key_empty_environment_falls_back_to_settings():
    provider = FakeSettingsProvider(
        env={"HONEYBADGER_READ_API_KEY": ""},
        settings={"honeybadger.read_api_key": "from-settings"},
    )

    assert resolve_read_api_key(provider) == "from-settings"


@pytest.mark.parametrize("value", [None, "", "YOUR_READ_API_KEY"])
def test_read_api_key_unset_raises(value):
    provider = FakeSettingsProvider(settings={"honeybadger.read_api_key": value})

    with pytest.raises(ConfigurationError, match="HONEYBADGER_READ_API_KEY"):
        resolve_read_api_key(provider)


def test_proxy_url_unset_is_none():
    provider = FakeSettingsProvider(settings={"http.proxy_host": ""})

    assert proxy_url(provider) is None


def test_proxy_url_uses_host_and_port():
    provider = FakeSettingsProvider(
        settings={"http.proxy_host": "proxy.local", "http.proxy_port": "3128"}
    )

    assert proxy_url(provider) == "http://proxy.local:3128"


def test_proxy_url_defaults_port():
    provider = FakeSettingsProvider(settings={"http.proxy_host": "proxy.local"})

    assert proxy_url(provider) == "http://proxy.local:80"


def test_proxy_url_bad_port_raises():
    provider = FakeSettingsProvider(
        settings={"http.proxy_host": "proxy.local", "http.proxy_port": "eighty"}
    )

    with pytest.raises(ConfigurationError):
        proxy_url(provider)


def test_dynaconf_provider_reads_dotted_settings_and_environment():
    settings = Dynaconf(settings_files=[], envvar_prefix=False)
    settings.set("honeybadger", {"read_api_key": "from-settings"})
    provider = DynaconfSettingsProvider(settings, environ={"HOSTNAME": "web-1"})

    assert provider.setting("honeybadger.read_api_key") == "from-settings"
    assert provider.setting("honeybadger.missing", "fallback") == "fallback"
    assert provider.env("HOSTNAME") == "web-1"
    assert provider.env("COMPUTERNAME") is None
    assert resolve_read_api_key(provider) == "from-settings"
