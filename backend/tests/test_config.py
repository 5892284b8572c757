import pytest

from utils.config import DEFAULT_API_VERSION, MissingCredentialError, get_settings


def test_settings_from_environment(azure_env, monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_MAX_TOKENS", "800")
    monkeypatch.setenv("AZURE_OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("SWOT_OUTPUT_MODE", "Structured")

    settings = get_settings()

    assert settings.api_key == "test-key"
    assert settings.endpoint == "https://example-resource.openai.azure.com"
    assert settings.deployment == "gpt-4o-swot"
    assert settings.max_tokens == 800
    assert settings.temperature == 0.2
    assert settings.output_mode == "structured"
    assert settings.require_api_key() == "test-key"


def test_defaults(missing_credentials, monkeypatch):
    for name in ("AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_API_VERSION", "AZURE_OPENAI_DEPLOYMENT_NAME",
                 "AZURE_OPENAI_MAX_TOKENS", "AZURE_OPENAI_TEMPERATURE", "SWOT_OUTPUT_MODE", "SWOT_STRICT_PARSE"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.api_key is None
    assert settings.endpoint is None
    assert settings.api_version == DEFAULT_API_VERSION
    assert settings.deployment == ""
    assert settings.max_tokens == 2000
    assert settings.temperature == 0.7
    assert settings.output_mode == "delimited"
    assert settings.strict_parse is False


def test_invalid_values_fall_back(azure_env, monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_MAX_TOKENS", "lots")
    monkeypatch.setenv("SWOT_OUTPUT_MODE", "yaml")

    settings = get_settings()

    assert settings.max_tokens == 2000
    assert settings.output_mode == "delimited"
    assert settings.strict_parse is False


@pytest.mark.parametrize("value", [None, ""])
def test_missing_api_key(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    else:
        monkeypatch.setenv("AZURE_OPENAI_API_KEY", value)

    with pytest.raises(MissingCredentialError, match="AZURE_OPENAI_API_KEY"):
        get_settings().require_api_key()


@pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("false", False), ("", False)])
def test_strict_parse_flag(azure_env, monkeypatch, value, expected):
    monkeypatch.setenv("SWOT_STRICT_PARSE", value)
    assert get_settings().strict_parse is expected


def test_settings_are_read_per_call(azure_env, monkeypatch):
    assert get_settings().deployment == "gpt-4o-swot"

    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt-4o-mini-swot")

    assert get_settings().deployment == "gpt-4o-mini-swot"
