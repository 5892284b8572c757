import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-02-01"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7
OUTPUT_MODES = ("delimited", "structured")


class MissingCredentialError(RuntimeError):
    """Raised when the Azure OpenAI API key is not configured"""


def _number_or_default(value, cast, default, name):
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return default
    try:
        return cast(value)
    except (TypeError, ValueError):
        logger.warning(f"⚠️ Invalid value for {name}: {value!r}, using {default}")
        return default


class Settings(BaseSettings):
    # Azure OpenAI
    api_key: Optional[str] = Field(default=None, validation_alias="AZURE_OPENAI_API_KEY")
    endpoint: Optional[str] = Field(default=None, validation_alias="AZURE_OPENAI_ENDPOINT")
    api_version: str = Field(default=DEFAULT_API_VERSION, validation_alias="AZURE_OPENAI_API_VERSION")
    deployment: str = Field(default="", validation_alias="AZURE_OPENAI_DEPLOYMENT_NAME")
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, validation_alias="AZURE_OPENAI_MAX_TOKENS")
    temperature: float = Field(default=DEFAULT_TEMPERATURE, validation_alias="AZURE_OPENAI_TEMPERATURE")

    # Response handling
    output_mode: str = Field(default="delimited", validation_alias="SWOT_OUTPUT_MODE")
    strict_parse: bool = Field(default=False, validation_alias="SWOT_STRICT_PARSE")

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    @field_validator("api_key", "endpoint", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        return value or None

    @field_validator("api_version", mode="before")
    @classmethod
    def default_api_version(cls, value):
        return value or DEFAULT_API_VERSION

    @field_validator("max_tokens", mode="before")
    @classmethod
    def parse_max_tokens(cls, value):
        return _number_or_default(value, int, DEFAULT_MAX_TOKENS, "AZURE_OPENAI_MAX_TOKENS")

    @field_validator("temperature", mode="before")
    @classmethod
    def parse_temperature(cls, value):
        return _number_or_default(value, float, DEFAULT_TEMPERATURE, "AZURE_OPENAI_TEMPERATURE")

    @field_validator("output_mode", mode="before")
    @classmethod
    def known_output_mode(cls, value):
        mode = (value or "delimited").strip().lower()
        if mode not in OUTPUT_MODES:
            logger.warning(f"⚠️ Unknown SWOT_OUTPUT_MODE {mode!r}, using 'delimited'")
            return "delimited"
        return mode

    @field_validator("strict_parse", mode="before")
    @classmethod
    def blank_as_false(cls, value):
        return value or False

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingCredentialError("AZURE_OPENAI_API_KEY is not set")
        return self.api_key


def get_settings() -> Settings:
    """Read the completion service settings from the environment on every call"""
    return Settings()
