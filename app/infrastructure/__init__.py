"""Infrastructure modules for the translation cache.

Centralized infrastructure components:
- configuration: Settings management (settings, TranslationSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- services: Dependency injection providers (get_settings)
- i18n: Translation cache, fill queue and coordinator
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

# Dependency Injection Services
from infrastructure.services import get_settings, get_translation_settings

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
    # Dependency Injection Services
    "get_settings",
    "get_translation_settings",
]
