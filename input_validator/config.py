from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON output, False for colored console
    LOG_VALIDATION_FAILURES: bool = False  # Debug event for every failing validator

    # Date parsing, tried in order after ISO 8601
    DATE_FORMATS: list[str] = Field(
        default_factory=lambda: [
            "%Y/%m/%d",
            "%d %B %Y",
            "%d %b %Y",
            "%B %d %Y",
            "%b %d %Y",
            "%B %d, %Y",
            "%b %d, %Y",
        ]
    )

    model_config = SettingsConfigDict(
        env_prefix="INPUT_VALIDATOR_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
