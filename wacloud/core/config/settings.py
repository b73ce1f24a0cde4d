"""
Settings for the wacloud WhatsApp Cloud API client.

Simple, reliable environment variable configuration. Values are read once at
import time and are never mutated afterwards; per-client overrides go through
ClientOptions instead.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

# Platform defaults
DEFAULT_BASE_URL = "https://graph.facebook.com"
DEFAULT_API_VERSION = "v15.0"
DEFAULT_RATE_LIMIT = 200  # messages per second, documented only
DEFAULT_TIMEOUT = 3  # seconds


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


class Settings:
    """Library settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version
        # ================================================================
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Logging & Environment
        # ================================================================
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # WhatsApp Cloud API Endpoint
        # ================================================================
        self.base_url: str = os.getenv("BASE_URL", DEFAULT_BASE_URL)
        self.api_version: str = os.getenv("API_VERSION", DEFAULT_API_VERSION)
        self.request_timeout: float = float(
            os.getenv("REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
        )
        self.rate_limit: int = int(os.getenv("RATE_LIMIT", str(DEFAULT_RATE_LIMIT)))

        # ================================================================
        # WhatsApp Credentials (optional, used by WhatsAppClient.from_settings)
        # ================================================================
        self.wp_access_token: str | None = os.getenv("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = os.getenv("WP_PHONE_ID")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"  # Default fallback
        self.environment = self.environment.upper()

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

    @property
    def has_credentials(self) -> bool:
        """Check if WhatsApp credentials are configured."""
        return bool(self.wp_access_token and self.wp_phone_id)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"


# Global settings instance
settings = Settings()
