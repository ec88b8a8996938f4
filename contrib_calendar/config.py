"""
Configuration management for contrib-calendar.

Loads settings from environment variables (and a .env file if present).
"""

import logging
import os

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_TIMEOUT = os.getenv("GITHUB_TIMEOUT", "10")
DEFAULT_USERNAME = os.getenv("DEFAULT_USERNAME", "phototix")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_timeout() -> float:
    """Request timeout in seconds for GitHub API calls."""
    return float(GITHUB_TIMEOUT)


def validate_config():
    """Validate that configuration values are usable."""
    invalid = []

    if not GITHUB_API_URL or not GITHUB_API_URL.strip():
        invalid.append("GITHUB_API_URL")

    try:
        if float(GITHUB_TIMEOUT) <= 0:
            invalid.append("GITHUB_TIMEOUT")
    except (TypeError, ValueError):
        invalid.append("GITHUB_TIMEOUT")

    if str(LOG_LEVEL).upper() not in VALID_LOG_LEVELS:
        invalid.append("LOG_LEVEL")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "GITHUB_TIMEOUT must be a positive number of seconds and "
            f"LOG_LEVEL one of {', '.join(VALID_LOG_LEVELS)}."
        )


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger."""
    level = str(LOG_LEVEL).upper()
    if level not in VALID_LOG_LEVELS:
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
