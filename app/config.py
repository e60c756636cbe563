"""
Configuration Management

Uses Pydantic BaseSettings to load configuration from environment variables.
All settings can be overridden via .env file or environment variables.

Environment Variables:
    INFOBIP_BASE_URL: Infobip API base URL (e.g. https://xxxx.api.infobip.com)
    INFOBIP_API_KEY: Infobip API key, must start with "App "
    INFOBIP_SENDER: Sending number in E.164 format
    KIOSK_API_KEY: Shared secret for kiosk endpoints (empty disables auth)
    STAFF_STATUS_URL: Kiosk API that receives barber availability changes
    ROSTER_FILE: Optional JSON roster (built-in roster otherwise)
    BARBER_PHONES: Extra phone -> staff id entries as JSON
    APP_ENV: Environment name (development/staging/production)
    DEBUG: Enable debug mode (default: False)
"""

import logging
import re
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Infobip SMS
    infobip_base_url: str = ""
    """Infobip API base URL.

    Example: https://xxxx.api.infobip.com
    """

    infobip_api_key: str = ""
    """Infobip API key sent verbatim as the Authorization header.

    Must include the "App " prefix (e.g. "App 0123abcd...").
    """

    infobip_sender: str = ""
    """Sender number in E.164 format, e.g. +18333586148."""

    sms_timeout_seconds: float = 15.0
    """Per-request timeout for outbound SMS calls."""

    # Kiosk integration
    kiosk_api_key: str = ""
    """Shared secret expected in the X-API-Key header of kiosk calls.

    Leave empty to disable kiosk authentication (local development only).
    """

    staff_status_url: str = ""
    """Base URL of the kiosk API that records barber availability.

    Availability replies (AVAILABLE / UNAVAILABLE) are forwarded here.
    When empty, status changes are logged and skipped.
    """

    roster_file: str = ""
    """Path to a JSON roster file. Uses the built-in roster when empty."""

    barber_phones: dict[str, str] = {}
    """Additional phone -> staff id entries for availability commands.

    Lets a barber text from a number other than the one on the roster.
    Keys are normalized before use.
    """

    # Branding for SMS copy
    brand_name: str = "Elite Kutz"
    support_phone: str = "(972) 673-0114"
    support_email: str = "support@elitekutzkiosk.com"

    # Application Environment
    app_env: Literal["development", "staging", "production"] = "development"
    """Current application environment."""

    debug: bool = False
    """Enable debug mode (verbose logging, error details in responses)."""

    # Application Configuration
    app_name: str = "elite-kutz-notifier"
    """Application name."""

    host: str = "0.0.0.0"
    """Host to bind the application server."""

    port: int = 3000
    """Port to bind the application server."""

    # CORS Configuration
    cors_origins: str = "http://localhost:3000"
    """Comma-separated list of allowed CORS origins."""

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Split cors_origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def sms_configured(self) -> bool:
        """Check if every Infobip value is present."""
        return bool(self.infobip_base_url and self.infobip_api_key and self.infobip_sender)


def validate_sms_settings(settings: "Settings") -> list[str]:
    """
    Check Infobip settings and log a warning for each problem.

    Runs once at boot so misconfiguration is obvious in the logs.

    Returns:
        List of problems found (empty when configuration looks valid)
    """
    problems = []

    if not settings.infobip_base_url:
        problems.append("INFOBIP_BASE_URL is missing")
    if not settings.infobip_api_key:
        problems.append("INFOBIP_API_KEY is missing")
    elif not re.match(r"^App\s+", settings.infobip_api_key, re.IGNORECASE):
        problems.append('INFOBIP_API_KEY should start with "App " (e.g., App xxxxx)')
    if not settings.infobip_sender:
        problems.append("INFOBIP_SENDER is missing")

    for problem in problems:
        logger.warning(f"[ENV] {problem}")

    return problems


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Example:
        >>> from app.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.brand_name)
        Elite Kutz
    """
    return Settings()


# Module-level settings instance for easy imports
settings = get_settings()
