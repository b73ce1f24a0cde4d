"""
wacloud core components.

Provides access to configuration and logging.
"""

# Configuration & Settings
from .config.settings import settings

# Logging System
from .logging import get_logger, setup_app_logging, setup_logging

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_logger",
    "setup_app_logging",
    "setup_logging",
]
