"""Translation cache infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class TranslationSettings(InfrastructureSettings):
    """Translation coordinator configuration.

    Provides the defaults used by ``init_coordinator`` when the caller does
    not pass explicit values.

    Environment Variables:
        TRANSLATION_DEFAULT_LOCALE: Initial active locale (default: en_US)
        TRANSLATION_FALLBACK_LOCALE: Fallback locale (default: en_US)
        TRANSLATION_CACHING_ENABLED: Load and save cache snapshots through
            the provider (default: True)
        TRANSLATION_PERSIST_ON_FILL: Save the full snapshot after every
            successful background fill (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.translation.caching_enabled:
            locale = settings.translation.default_locale
        ```
    """

    default_locale: str = Field(
        default="en_US",
        alias="TRANSLATION_DEFAULT_LOCALE",
        description="Locale used by tr() when no locale is given",
    )
    fallback_locale: str = Field(
        default="en_US",
        alias="TRANSLATION_FALLBACK_LOCALE",
        description="Locale that is never seeded with an empty cache bucket",
    )
    caching_enabled: bool = Field(
        default=True,
        alias="TRANSLATION_CACHING_ENABLED",
        description="Exercise the provider's load/save cache hooks",
    )
    persist_on_fill: bool = Field(
        default=False,
        alias="TRANSLATION_PERSIST_ON_FILL",
        description="Save the cache snapshot after each background fill",
    )

    @field_validator("default_locale", "fallback_locale", mode="before")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Strip whitespace and reject empty locale identifiers."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Locale identifier must be a non-empty string")
        return v.strip()
