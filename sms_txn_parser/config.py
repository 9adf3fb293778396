"""
Configuration settings for the SMS transaction parser service.
Values come from environment variables with sensible defaults.
"""

import os


class Config:
    """Application configuration class."""

    APP_NAME = "SMS Transaction Parser"
    VERSION = "1.0.0"

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # API Settings
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: str = os.getenv("API_PORT", "8000")

    # Batch Settings
    MESSAGE_COLUMN: str = os.getenv("MESSAGE_COLUMN", "body")


config = Config()
