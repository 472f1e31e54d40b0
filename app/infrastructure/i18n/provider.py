"""Translation provider interface and an in-memory implementation.

Defines the contract the coordinator uses to obtain translations and to
load/save its cache snapshot.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Tuple

from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationProvider(ABC):
    """Abstract base for translation providers.

    Only translate() is required. The cache hooks default to "nothing
    stored" so providers without persistence need not implement them.
    """

    @abstractmethod
    async def translate(self, key: str, locale: Locale) -> str:
        """Translate key into locale.

        Args:
            key: Source text or message key.
            locale: Target locale.

        Returns:
            Translated text. Returning key unchanged or an empty string
            means no translation is available.
        """
        raise NotImplementedError()

    def on_translated(self, key: str, value: str) -> None:
        """Called after a translation has been stored in the cache."""
        return None

    async def load_cache(self) -> Optional[str]:
        """Return the last saved snapshot text, or None."""
        return None

    async def save_cache(self, serialized: str) -> None:
        """Persist snapshot text produced by the coordinator."""
        return None


class MappingTranslationProvider(TranslationProvider):
    """Provider backed by a static {locale_id: {key: text}} mapping.

    Unknown keys are returned unchanged. The last saved snapshot is kept
    in memory and handed back by load_cache().

    Attributes:
        translations: Mapping of locale id to key/text pairs.
        saved: Last snapshot text passed to save_cache(), if any.
        translated: (key, value) pairs reported through on_translated().
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, Mapping[str, str]]] = None,
        saved: Optional[str] = None,
    ):
        self.translations: Dict[str, Dict[str, str]] = {
            locale_id: dict(entries)
            for locale_id, entries in (translations or {}).items()
        }
        self.saved = saved
        self.translated: List[Tuple[str, str]] = []

    def add(self, locale: Locale | str, key: str, text: str) -> None:
        self.translations.setdefault(str(locale), {})[key] = text

    async def translate(self, key: str, locale: Locale) -> str:
        return self.translations.get(str(locale), {}).get(key, key)

    def on_translated(self, key: str, value: str) -> None:
        self.translated.append((key, value))

    async def load_cache(self) -> Optional[str]:
        return self.saved

    async def save_cache(self, serialized: str) -> None:
        self.saved = serialized
        logger.debug("mapping_provider_saved_cache", length=len(serialized))
