"""
Dependency injection services.

Provides provider functions for application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_translation_settings,
)

__all__ = [
    "get_settings",
    "get_translation_settings",
]
