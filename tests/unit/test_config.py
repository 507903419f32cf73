import pytest

from school_adviser.config import Settings, get_settings, settings


@pytest.mark.unit
def test_settings_defaults(monkeypatch):
    for name in ("API_KEY", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    fresh = Settings(_env_file=None)

    assert fresh.api_key is None
    assert fresh.neis_api_base_url == "https://open.neis.go.kr/hub"
    assert fresh.neis_api_type == "json"
    assert fresh.log_level == "INFO"
    assert fresh.log_format == "json"


@pytest.mark.unit
def test_settings_reads_api_key_from_env(monkeypatch):
    monkeypatch.setenv("API_KEY", "env-neis-key")
    monkeypatch.setenv("LOG_FORMAT", "console")

    fresh = Settings(_env_file=None)

    assert fresh.api_key == "env-neis-key"
    assert fresh.log_format == "console"


@pytest.mark.unit
def test_settings_ignores_unknown_env(monkeypatch):
    monkeypatch.setenv("SOME_OTHER_SETTING", "x")
    fresh = Settings(_env_file=None)
    assert not hasattr(fresh, "some_other_setting")


@pytest.mark.unit
def test_get_settings_is_singleton():
    assert get_settings() is get_settings()
    assert get_settings() is settings
