from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Environments that must talk to the backend over TLS
_PRODUCTION_ENVIRONMENTS = {"production", "staging"}


class Settings(BaseSettings):
    environment: str = Field(default="development")

    # No default - must be explicitly configured via LARAVEL_API_BASE_URL env var
    base_url: str = Field(min_length=1)

    api_token: str | None = Field(default=None, repr=False)
    auth_scheme: str = Field(default="Bearer", min_length=1)

    @model_validator(mode="after")
    def validate_base_url_for_environment(self) -> "Settings":
        """Validate base_url is appropriate for the environment."""
        if self.environment in _PRODUCTION_ENVIRONMENTS:
            if not self.base_url.startswith("https://"):
                raise ValueError(
                    "Plain HTTP is not allowed in production. "
                    "Use an https:// base_url."
                )
        return self

    timeout_seconds: float = Field(default=30.0, gt=0)
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="laravel-api-client/0.1.0", min_length=1)

    request_id_header: str = Field(default="X-Request-ID")
    default_headers: Annotated[dict[str, str], NoDecode] = Field(default_factory=dict)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="LARAVEL_API_",
        env_file=".env",
        case_sensitive=False,
    )

    @field_validator("default_headers", mode="before")
    @classmethod
    def split_pairs(cls, value: object) -> dict[str, str] | object:
        if isinstance(value, str):
            if not value.strip():
                return {}
            pairs = [item.split("=", 1) for item in value.split(",") if item.strip()]
            if any(len(pair) != 2 for pair in pairs):
                raise ValueError("default_headers must be formatted as name=value pairs")
            return {name.strip(): header.strip() for name, header in pairs}
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
