"""
Configuration settings for the YouTube transcription and Khmer summary service.
"""

import os
from dotenv import load_dotenv

from khmerscribe.utils.logger import logging, resolve_log_level


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Khmer Scribe"
    APP_VERSION = "0.2.0"

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Models
    TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "whisper-large-v3-turbo")
    TEXT_MODEL = os.getenv("TEXT_MODEL", "llama-3.3-70b-versatile")
    TEXT_MODEL_PROVIDER = os.getenv("TEXT_MODEL_PROVIDER", "groq")

    # Summaries are always written in this language, whatever the video's language
    SUMMARY_LANGUAGE = os.getenv("SUMMARY_LANGUAGE", "Khmer")

    # Ceiling in seconds for a whole job (download + transcribe + clean + summarize)
    MAX_DURATION = int(os.getenv("MAX_DURATION", "300"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not cls.GROQ_API_KEY:
            logging.warning("GROQ_API_KEY environment variable not set.")
            logging.warning("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = resolve_log_level("development", os.getenv("LOG_LEVEL"))


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = resolve_log_level("production", os.getenv("LOG_LEVEL"))


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
