import pytest

from teamtracker.config import ServiceConfig, config_from_env
from teamtracker.errors import ConfigurationError

_VARS = [
    "AIRTABLE_PAT",
    "AIRTABLE_TOKEN",
    "AIRTABLE_API_KEY",
    "AIRTABLE_BASE_ID",
    "AIRTABLE_TABLE_ID",
    "AIRTABLE_TABLE",
    "AIRTABLE_GAMES_TABLE",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "TRACKER_TIMEOUT_S",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = config_from_env()
    assert config.airtable_table == "Games"
    assert config.openai_model == "gpt-5.2"
    assert config.request_timeout_s == 30
    assert not config.airtable_configured
    assert not config.openai_configured


def test_first_set_alias_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AIRTABLE_TOKEN", "tok")
    monkeypatch.setenv("AIRTABLE_API_KEY", "key")
    monkeypatch.setenv("AIRTABLE_BASE_ID", "app1")
    monkeypatch.setenv("AIRTABLE_GAMES_TABLE", "Season Games")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-5-mini")
    monkeypatch.setenv("TRACKER_TIMEOUT_S", "12.5")

    config = config_from_env()
    assert config.airtable_token == "tok"
    assert config.airtable_table == "Season Games"
    assert config.openai_model == "gpt-5-mini"
    assert config.request_timeout_s == 12.5
    assert config.airtable_configured
    assert config.openai_configured


def test_bad_timeout_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRACKER_TIMEOUT_S", "soon")
    assert config_from_env().request_timeout_s == 30


def test_require_airtable_names_missing_variables() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        ServiceConfig(airtable_token="tok").require_airtable()
    assert excinfo.value.missing == ["AIRTABLE_BASE_ID"]
    assert "Server configuration error" in str(excinfo.value)


def test_require_openai() -> None:
    with pytest.raises(ConfigurationError):
        ServiceConfig().require_openai()
    ServiceConfig(openai_api_key="sk-test").require_openai()
