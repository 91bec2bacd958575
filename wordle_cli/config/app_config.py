"""
Configuration Management Module

All runtime configuration is loaded from environment variables with sensible
defaults. A ``config.env`` next to this module and a ``.env`` in the working
directory are read first; real environment variables win over both.
"""

import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_seed():
    value = os.getenv('WORDLE_SEED')
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Forces DEBUG logging regardless of LOG_LEVEL
    DEBUG = _env_flag('DEBUG', 'False')

    # Locale Settings
    LOCALE = os.getenv('WORDLE_LOCALE', 'en')
    DEFAULT_LOCALE = os.getenv('WORDLE_DEFAULT_LOCALE', 'en')

    # Game Settings
    RANDOM_SEED = _env_seed()
    MAX_READ_FAILURES = int(os.getenv('WORDLE_MAX_READ_FAILURES', 3))

    # Display Settings
    USE_COLOR = _env_flag('WORDLE_COLOR', 'True') and 'NO_COLOR' not in os.environ

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    LOCALE = 'en'
    DEFAULT_LOCALE = 'en'
    RANDOM_SEED = 1234
    USE_COLOR = False
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Return the configuration class selected by ``name`` or ``WORDLE_ENV``."""
    name = name or os.getenv('WORDLE_ENV', 'default')
    return config.get(name.lower(), config['default'])
