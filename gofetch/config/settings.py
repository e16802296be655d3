from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_URL = "https://go-fetch.com.au"
TESTING_URL = "http://test.go-fetch.com.au"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # GoFetch API configuration
    gofetch_base_url: str = Field(default=PRODUCTION_URL)
    gofetch_email: Optional[str] = Field(default=None)
    gofetch_token: Optional[str] = Field(default=None)
    gofetch_timeout: float = Field(default=30.0, gt=0)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Global settings instance
settings = Settings()
