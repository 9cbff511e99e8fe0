"""Library configuration settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TinSettings(BaseSettings):
    """TIN rendering and reporting configuration."""

    # Redaction character used for area and group in masked renderings
    mask_char: str = Field(default="X")

    # Log rejected candidates from the validator service (masked, DEBUG level)
    log_rejections: bool = True

    model_config = SettingsConfigDict(
        env_prefix="TIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("mask_char")
    @classmethod
    def _single_non_digit(cls, value: str) -> str:
        if len(value) != 1 or value.isdigit():
            raise ValueError("mask_char must be a single non-digit character")
        return value


@lru_cache
def get_settings() -> TinSettings:
    """Get cached settings instance."""
    return TinSettings()
