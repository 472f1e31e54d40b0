"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.translation import (
    TranslationSettings,
)

__all__ = [
    "TranslationSettings",
]
