"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation cache using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translation coordinator settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.translation.default_locale
    caching = settings.translation.caching_enabled
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.translation import (
    TranslationSettings,
)

__all__ = ["Settings", "TranslationSettings", "settings"]
