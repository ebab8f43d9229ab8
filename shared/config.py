"""
Environment-driven settings for the function app.
"""

import logging
import os

DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "Development"


def get_app_version() -> str:
    """Get the application version reported by health and keep-alive responses."""
    return os.environ.get("APP_VERSION") or DEFAULT_APP_VERSION


def get_environment() -> str:
    """Get the Azure Functions environment name."""
    return os.environ.get("AZURE_FUNCTIONS_ENVIRONMENT", DEFAULT_ENVIRONMENT)


def get_log_level() -> int:
    """
    Get the root log level from LOG_LEVEL.

    Unknown level names fall back to INFO.
    """
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO
