"""
Configuration Package

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and resource locations
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import WORD_LENGTH, MAX_TRIES, RESOURCE_DIR, LOCALE_DIR, word_list_path

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_TRIES', 'RESOURCE_DIR', 'LOCALE_DIR', 'word_list_path'
]
