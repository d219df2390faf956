"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (Twilio credentials, JWT secret, code TTL)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Twilio (WhatsApp provider)
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_PHONE_NUMBER: Optional[str] = Field(
        default=None,
        description="WhatsApp-enabled sender number (+14155238886)"
    )
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com/2010-04-01",
        description="Twilio REST API base URL"
    )
    TWILIO_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Twilio request timeout in seconds"
    )

    # Bearer tokens
    JWT_SECRET: str = Field(
        default=DEFAULT_JWT_SECRET,
        description="Secret used to sign and verify bearer tokens"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Bearer token signing algorithm"
    )

    # Verification codes
    CODE_TTL_SECONDS: int = Field(
        default=300,
        description="Lifetime of an issued verification code"
    )
    SWEEP_INTERVAL_SECONDS: float = Field(
        default=60,
        description="Interval between expired-code sweeps"
    )
    EXPOSE_VERIFICATION_CODE: bool = Field(
        default=True,
        description="Echo the issued code in the send-code response (disable in production)"
    )

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Listen address"
    )
    PORT: int = Field(
        default=3000,
        description="Listen port"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("JWT_SECRET")
    def validate_jwt_secret(cls, v, values):
        """Ensure the token secret is changed in production."""
        if values.get("ENVIRONMENT") == "production" and v == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    # Provider credentials are mandatory in every environment
    if not config.TWILIO_ACCOUNT_SID:
        errors.append("TWILIO_ACCOUNT_SID is required")
    if not config.TWILIO_AUTH_TOKEN:
        errors.append("TWILIO_AUTH_TOKEN is required")
    if not config.TWILIO_PHONE_NUMBER:
        errors.append("TWILIO_PHONE_NUMBER is required")

    if config.CODE_TTL_SECONDS <= 0:
        errors.append("CODE_TTL_SECONDS must be positive")
    if config.SWEEP_INTERVAL_SECONDS <= 0:
        errors.append("SWEEP_INTERVAL_SECONDS must be positive")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
