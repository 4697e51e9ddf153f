"""
Exo Client -- Configuration store tests.
"""

import pytest

from exoclient import (
    Configuration,
    ConfigurationError,
    ConfigurationStore,
    clear_configuration,
    configure_from_env,
    get_configuration,
    load_configuration,
    set_configuration,
)


class TestConfigurationStore:
    def test_starts_empty(self):
        assert ConfigurationStore().get() is None

    def test_set_returns_and_stores(self):
        store = ConfigurationStore()
        config = store.set("http://h", "tok", {"a": 1})
        assert store.get() is config
        assert config == Configuration(url="http://h", params=(("a", 1),), token="tok")

    def test_set_replaces_previous(self):
        store = ConfigurationStore()
        store.set("http://one")
        store.set("http://two")
        assert store.get().url == "http://two"

    def test_clear(self):
        store = ConfigurationStore(Configuration.create("http://h"))
        store.clear()
        assert store.get() is None

    def test_resolve_prefers_explicit(self):
        store = ConfigurationStore(Configuration.create("http://stored"))
        explicit = Configuration.create("http://explicit")
        assert store.resolve(explicit) is explicit
        assert store.resolve().url == "http://stored"

    def test_resolve_missing(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationStore().resolve()
        assert exc_info.value.message == "missing configuration"
        assert exc_info.value.origin == "client"

    def test_configuration_is_immutable(self):
        config = Configuration.create("http://h")
        with pytest.raises(AttributeError):
            config.url = "http://other"


class TestDefaultStore:
    def test_module_functions(self):
        assert get_configuration() is None
        config = set_configuration("https://api.example.com", "tok123")
        assert get_configuration() is config
        clear_configuration()
        assert get_configuration() is None


class TestFromEnv:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("EXO_URL", "EXO_TOKEN", "EXO_PARAMS", "SHOP_URL"):
            monkeypatch.delenv(name, raising=False)

    def test_reads_all_fields(self, monkeypatch):
        monkeypatch.setenv("EXO_URL", "https://api.example.com")
        monkeypatch.setenv("EXO_TOKEN", "tok")
        monkeypatch.setenv("EXO_PARAMS", "tenant=acme&debug=1")
        config = load_configuration()
        assert config.url == "https://api.example.com"
        assert config.token == "tok"
        assert config.params == (("tenant", "acme"), ("debug", "1"))

    def test_url_only(self, monkeypatch):
        monkeypatch.setenv("EXO_URL", "http://h")
        monkeypatch.setenv("EXO_TOKEN", "")
        config = load_configuration()
        assert config.token is None
        assert config.params == ()

    def test_value_may_contain_equals(self, monkeypatch):
        monkeypatch.setenv("EXO_URL", "http://h")
        monkeypatch.setenv("EXO_PARAMS", "sig=a=b")
        assert load_configuration().params == (("sig", "a=b"),)

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("SHOP_URL", "http://shop")
        assert load_configuration("SHOP_").url == "http://shop"

    def test_missing_url(self):
        with pytest.raises(ConfigurationError, match="missing configuration") as exc_info:
            load_configuration()
        assert exc_info.value.note == "EXO_URL is not set"

    def test_bad_params(self, monkeypatch):
        monkeypatch.setenv("EXO_URL", "http://h")
        monkeypatch.setenv("EXO_PARAMS", "novalue")
        with pytest.raises(ConfigurationError) as exc_info:
            load_configuration()
        assert exc_info.value.message == "invalid configuration"
        assert "novalue" in exc_info.value.note

    def test_configure_from_env_stores(self, monkeypatch):
        monkeypatch.setenv("EXO_URL", "http://env")
        config = configure_from_env()
        assert get_configuration() is config
        assert config.url == "http://env"
