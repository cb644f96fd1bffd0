"""Application settings loaded from environment variables.

Values come from the process environment, with a local .env file loaded
first via python-dotenv. Validation errors surface as pydantic.ValidationError.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from domain.model.translation import DEFAULT_MAX_TRANSLATIONS
from services.entry_fetcher import DEFAULT_BASE_URL, DEFAULT_LOCALE, DEFAULT_USER_AGENT

DEFAULT_LANGUAGES = ("en", "fr", "de")
DEFAULT_REFRESH_SECONDS = 60 * 60  # hourly
DEFAULT_HTTP_TIMEOUT = 10.0


class Settings(BaseModel):
    """Runtime configuration for the word-of-the-day service."""
    base_url: str = DEFAULT_BASE_URL
    locale: str = DEFAULT_LOCALE
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    max_translations: int = Field(DEFAULT_MAX_TRANSLATIONS, ge=1)
    refresh_seconds: float = Field(DEFAULT_REFRESH_SECONDS, gt=0)
    http_timeout: float = Field(DEFAULT_HTTP_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    require_translations: bool = False
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("locale cannot be empty")
        return v

    @field_validator("languages", mode="before")
    @classmethod
    def split_languages(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        codes = list(dict.fromkeys(code.strip().lower() for code in v if code.strip()))
        if not codes:
            raise ValueError("at least one language code is required")
        return codes

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v


# Environment variable -> Settings field
ENV_FIELDS = {
    "WOTD_BASE_URL": "base_url",
    "WOTD_LOCALE": "locale",
    "WOTD_LANGUAGES": "languages",
    "WOTD_MAX_TRANSLATIONS": "max_translations",
    "WOTD_REFRESH_SECONDS": "refresh_seconds",
    "WOTD_HTTP_TIMEOUT": "http_timeout",
    "WOTD_USER_AGENT": "user_agent",
    "WOTD_REQUIRE_TRANSLATIONS": "require_translations",
    "LOG_LEVEL": "log_level",
}


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ. When omitted, a
            .env file in the working directory is loaded first.
    """
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    values = {
        field_name: environ[env_name]
        for env_name, field_name in ENV_FIELDS.items()
        if environ.get(env_name, "").strip()
    }
    return Settings(**values)
