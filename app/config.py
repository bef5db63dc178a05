"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="E-Learning Notifications")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Supabase Configuration
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_service_key: Optional[str] = Field(default=None, description="Supabase service role key")
    users_table: str = Field(default="users", description="Table holding user profiles")
    notifications_table: str = Field(default="notifications", description="Table whose inserts trigger emails")

    # Database webhook
    webhook_secret: Optional[str] = Field(
        default=None,
        description="Shared secret expected in the X-Webhook-Secret header"
    )

    # Email Configuration
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587)
    smtp_user: Optional[str] = Field(default=None, description="Sender account")
    smtp_password: Optional[str] = Field(default=None, description="Sender app password")
    smtp_timeout: float = Field(default=30.0)
    email_from_name: str = Field(default="E-Learning App")

    # Localization
    timezone: Optional[str] = Field(default=None, description="IANA zone for email timestamps, server local if unset")
    email_datetime_format: str = Field(default="%m/%d/%Y, %I:%M:%S %p")

    @field_validator("smtp_user", "smtp_password", "webhook_secret", "timezone", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Reject zone names that cannot be loaded."""
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def email_configured(self) -> bool:
        """Both halves of the sender credential pair are present."""
        return bool(self.smtp_user and self.smtp_password)

    @property
    def email_from_address(self) -> Optional[str]:
        """Messages are sent as the authenticated account."""
        return self.smtp_user

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "supabase_url",
            "supabase_service_key",
            "webhook_secret"
        ]

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
