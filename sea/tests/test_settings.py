from sea.settings import LazySettings
from sea.settings.base import DOUBLED, LIVE, Settings
from sea.settings.prod import ProdSettings
from sea.settings.test import TestSettings


def test_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("SEA_INSTALLED_SIGNALS", "a.BSignal, c.DSignal,")
    monkeypatch.setenv("SEA_SIGNALS_DEFAULT", "Doubled")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.INSTALLED_SIGNALS == ["a.BSignal", "c.DSignal"]
    assert settings.default_signal_state == DOUBLED
    assert settings.log_level == "DEBUG"
    assert settings.validate() == {}


def test_validate_reports_bad_values(monkeypatch):
    monkeypatch.setenv("SEA_INSTALLED_SIGNALS", "NoDots")
    monkeypatch.setenv("SEA_SIGNALS_DEFAULT", "sometimes")

    settings = Settings()
    settings.signal_implementations = {"a.BSignal": "nodots"}

    assert set(settings.validate()) == {
        "default_signal_state",
        "installed_signals",
        "signal_implementations",
    }


def test_profiles_pick_their_signal_state(monkeypatch):
    monkeypatch.setenv("SEA_SIGNALS_DEFAULT", DOUBLED)
    assert ProdSettings().default_signal_state == LIVE

    monkeypatch.setenv("SEA_SIGNALS_DEFAULT", LIVE)
    assert TestSettings().default_signal_state == DOUBLED


def test_lazy_settings_load_the_configured_module(monkeypatch):
    monkeypatch.setenv("SEA_SETTINGS_MODULE", "sea.settings.test")
    lazy = LazySettings()

    assert not lazy.configured
    assert lazy.environment == "test"
    assert lazy.configured


def test_lazy_settings_accept_an_explicit_object():
    lazy = LazySettings()
    explicit = Settings()
    explicit.environment = "explicit"

    lazy.configure(explicit)

    assert lazy.environment == "explicit"
