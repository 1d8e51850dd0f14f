"""Application settings and configuration management using Pydantic."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    # Environment and deployment
    environment: str = "development"
    debug: bool = False
    use_mock_data: bool = False
    timezone: str = "Europe/Berlin"

    # Congress trades source settings
    congress_trades_url: str = "https://www.capitoltrades.com/trades"
    congress_trades_cache_ttl_hours: float = 6
    congress_trades_timeout_seconds: float = 30
    congress_trades_max_attempts: int = 3
    congress_trades_backoff_seconds: float = 1.0

    # Reference data (politician tiers, committee sectors, ticker sectors)
    reference_data_dir: Optional[str] = None

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "structured"  # 'structured' or 'plain'
    log_file_enabled: bool = False
    log_file_path: str = "data/briefing.log"
    log_max_file_size: str = "10MB"
    log_backup_count: int = 5

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        valid_environments = ["development", "testing", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("congress_trades_url")
    @classmethod
    def validate_url(cls, v):
        """Validate the trades page URL is http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Congress trades URL must start with http:// or https://")
        return v

    @field_validator("congress_trades_cache_ttl_hours")
    @classmethod
    def validate_cache_ttl(cls, v):
        """Validate cache TTL is reasonable."""
        if v < 0 or v > 168:  # up to one week
            raise ValueError("Cache TTL must be between 0 and 168 hours")
        return v

    @field_validator("congress_trades_timeout_seconds", "congress_trades_backoff_seconds")
    @classmethod
    def validate_positive_seconds(cls, v):
        """Validate durations are positive."""
        if v <= 0:
            raise ValueError("Durations must be greater than 0 seconds")
        return v

    @field_validator("congress_trades_max_attempts")
    @classmethod
    def validate_max_attempts(cls, v):
        """Validate retry attempts."""
        if v < 1 or v > 10:
            raise ValueError("Max attempts must be between 1 and 10")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format."""
        valid_formats = ["structured", "plain"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
