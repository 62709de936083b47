import pytest

from lms_analytics.core.settings import get_settings, reset_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "ANALYTICS_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "LMS Performance Engine"
    assert settings.environment == "development"
    assert settings.log_level == "info"
    assert settings.log_json is False
    assert settings.max_workers == 1


def test_settings_is_cached():
    assert get_settings() is get_settings()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "yes")
    monkeypatch.setenv("ANALYTICS_MAX_WORKERS", " 8 ")
    settings = get_settings()
    assert settings.environment == "production"
    assert settings.log_level == "debug"
    assert settings.log_json is True
    assert settings.max_workers == 8


@pytest.mark.parametrize(
    "name, value",
    [
        ("LOG_LEVEL", "verbose"),
        ("ANALYTICS_MAX_WORKERS", "many"),
        ("ANALYTICS_MAX_WORKERS", "0"),
    ],
)
def test_settings_reject_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        get_settings()
