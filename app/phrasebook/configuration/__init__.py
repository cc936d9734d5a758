"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class
"""

from phrasebook.configuration.i18n import I18nSettings
from phrasebook.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
