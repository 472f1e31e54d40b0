"""Translation models for the i18n cache.

Defines the locale identifier and the composite (locale, key) value used
as cache address and deduplication token.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Locale:
    """Two-part locale identifier (language and optional region).

    The string form (``en_US``, or ``en`` when there is no region) is the
    cache partition id. No validation is done on either part.

    Attributes:
        language: Language code (e.g., "en").
        region: Region code (e.g., "US"), may be empty.
    """

    language: str
    region: str = ""

    def __str__(self) -> str:
        """Return the cache partition id.

        Returns:
            Locale id (e.g., "en_US").
        """
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Create Locale from an id such as "en_US" or "fr-FR".

        Splits on the first underscore or hyphen only.

        Args:
            locale_str: Locale id string.

        Returns:
            Locale instance.
        """
        for separator in ("_", "-"):
            if separator in locale_str:
                language, region = locale_str.split(separator, 1)
                return cls(language=language, region=region)
        return cls(language=locale_str)

    @classmethod
    def coerce(cls, value: Union["Locale", str]) -> "Locale":
        """Return value as a Locale, parsing it when given a string."""
        if isinstance(value, Locale):
            return value
        return cls.from_string(value)


@dataclass(frozen=True)
class LocaleKey:
    """Cache address of one translation: a locale id plus a string key.

    Frozen to ensure immutability and hashability for use as a map key.

    Attributes:
        locale_id: Locale partition id (e.g., "fr_FR").
        key: Translation key, usually the source text itself.
    """

    locale_id: str
    key: str

    @property
    def token(self) -> str:
        """Deduplication token for in-flight fills.

        Returns:
            Token in the form "<locale_id>::<key>".
        """
        return f"{self.locale_id}::{self.key}"

    @classmethod
    def of(cls, locale: Union[Locale, str], key: str) -> "LocaleKey":
        """Build a LocaleKey from a Locale (or locale id) and a key."""
        return cls(locale_id=str(locale), key=key)
