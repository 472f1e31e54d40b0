"""Translation coordinator.

Serves translations from the in-memory store and fills misses in the
background through a TranslationProvider, one provider call at a time.

Lookups never block: tr() returns the key itself while a fill is pending
and observers are notified once the store has been updated.
"""

import asyncio
from functools import partial
from typing import Callable, Mapping, Optional, Union

from infrastructure.i18n.errors import CoordinatorDisposedError
from infrastructure.i18n.models import Locale, LocaleKey
from infrastructure.i18n.notifier import ChangeNotifier, Listener
from infrastructure.i18n.pending import PendingSet
from infrastructure.i18n.provider import TranslationProvider
from infrastructure.i18n.queue import SequentialQueue
from infrastructure.i18n.store import (
    Snapshot,
    TranslationStore,
    decode_snapshot,
    encode_snapshot,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LOCALE = Locale("en", "US")

ProgressCallback = Callable[[float], None]
LocaleLike = Union[Locale, str]


class TranslationCoordinator:
    """Cache of translations with ordered, deduplicated background fill.

    Attributes:
        provider: Optional TranslationProvider doing the actual translation.
        fallback_locale: Locale that is never seeded with an empty bucket.
        caching_enabled: Whether the provider's load/save hooks are used.
    """

    def __init__(
        self,
        provider: Optional[TranslationProvider] = None,
        default_locale: LocaleLike = DEFAULT_LOCALE,
        fallback_locale: LocaleLike = DEFAULT_LOCALE,
        caching_enabled: bool = False,
        persist_on_fill: bool = False,
    ):
        """Initialize TranslationCoordinator.

        When caching is enabled and a provider is given, the persisted
        snapshot is loaded in the background on the running event loop.
        Lookups made before it completes miss and trigger normal fills.
        Without a running loop the load is deferred until ready().

        Args:
            provider: TranslationProvider used for fills and persistence.
            default_locale: Initial current locale (default: en_US).
            fallback_locale: Fallback locale (default: en_US).
            caching_enabled: Load the snapshot at startup and save it after
                translate_all().
            persist_on_fill: Also save the snapshot after each background
                fill. Only used when caching_enabled is True.
        """
        self._provider = provider
        self._current_locale = Locale.coerce(default_locale)
        self._fallback_locale = Locale.coerce(fallback_locale)
        self._caching_enabled = caching_enabled
        self._persist_on_fill = persist_on_fill

        self._store = TranslationStore()
        self._pending = PendingSet()
        self._queue = SequentialQueue(name="translation")
        self._notifier = ChangeNotifier()
        self._disposed = False

        self._load_requested = provider is not None and caching_enabled
        self._load_task: Optional[asyncio.Task] = None

        if self._load_requested:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.debug("snapshot_load_deferred", reason="no_running_loop")
            else:
                self._load_task = loop.create_task(self._load_snapshot())

        logger.info(
            "initialized_translation_coordinator",
            default_locale=str(self._current_locale),
            fallback_locale=str(self._fallback_locale),
            caching_enabled=caching_enabled,
            has_provider=provider is not None,
        )

    @property
    def provider(self) -> Optional[TranslationProvider]:
        return self._provider

    @property
    def locale(self) -> Locale:
        """Current locale used by tr() when no locale is given."""
        return self._current_locale

    @locale.setter
    def locale(self, value: LocaleLike) -> None:
        self._current_locale = Locale.coerce(value)
        logger.debug("locale_changed", locale=str(self._current_locale))

    @property
    def current_locale(self) -> Locale:
        return self._current_locale

    @property
    def fallback_locale(self) -> Locale:
        return self._fallback_locale

    @property
    def caching_enabled(self) -> bool:
        return self._caching_enabled

    @property
    def store(self) -> TranslationStore:
        return self._store

    @property
    def cache(self) -> Snapshot:
        """Copy of every cached translation: locale id -> key -> text."""
        return self._store.snapshot()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_listener(self, listener: Listener) -> None:
        self._notifier.add_listener(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._notifier.remove_listener(listener)

    @property
    def has_listeners(self) -> bool:
        return self._notifier.has_listeners

    def tr(self, key: str, locale: Optional[LocaleLike] = None) -> str:
        """Return the translation of key, or key itself while it is missing.

        A miss schedules a background fill; observers are notified when the
        store is updated. Never blocks and never raises for a missing
        translation.

        Args:
            key: Translation key, usually the source text.
            locale: Target locale (default: current locale).

        Returns:
            Cached translation, or key as a placeholder.
        """
        self._check_alive("tr")
        target = self._current_locale if locale is None else Locale.coerce(locale)
        locale_id = str(target)

        cached = self._store.get(locale_id, key)
        if cached is not None:
            return cached

        if target != self._fallback_locale:
            self._store.ensure_locale(locale_id)

        self._translate_in_background(key, target)
        return key

    async def translate(self, text: str, locale: LocaleLike) -> Optional[str]:
        """Translate text directly through the provider.

        Bypasses the cache and the fill queue; nothing is stored and no
        observer is notified.

        Args:
            text: Text to translate.
            locale: Target locale.

        Returns:
            Translated text, or None when text is empty, there is no
            provider, or the provider returned nothing usable.
        """
        self._check_alive("translate")
        if not text or self._provider is None:
            return None

        translated = await self._provider.translate(text, Locale.coerce(locale))
        if not translated or translated == text:
            return None
        return translated

    async def translate_all(
        self,
        locale: LocaleLike,
        change_locale: bool = True,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Translate every key known in any locale into locale.

        Keys already cached for locale are counted without a provider call.
        on_progress receives completed / total after each key and ends at
        exactly 1.0. With no known keys (or no provider) nothing happens.

        Args:
            locale: Target locale.
            change_locale: Make locale the current locale when done.
            on_progress: Optional callback taking a fraction in (0.0, 1.0].
        """
        self._check_alive("translate_all")
        if self._provider is None:
            return

        all_keys = self._store.keys()
        if not all_keys:
            logger.debug("translate_all_skipped", reason="no_keys")
            return

        target = Locale.coerce(locale)
        locale_id = str(target)
        total = len(all_keys)
        completed = 0
        translated_count = 0

        logger.info("translate_all_started", locale=locale_id, total=total)

        for key in all_keys:
            if not self._store.contains(locale_id, key):
                translated = await self._provider.translate(key, target)
                if translated and translated != key:
                    self._store.put(locale_id, key, translated)
                    self._provider.on_translated(key, translated)
                    translated_count += 1

            completed += 1
            if on_progress is not None:
                on_progress(completed / total)

        self._store.ensure_locale(locale_id)
        if self._caching_enabled:
            await self._save_snapshot()
        if change_locale:
            self._current_locale = target

        logger.info(
            "translate_all_completed",
            locale=locale_id,
            total=total,
            translated=translated_count,
        )
        self._notifier.notify_listeners()

    async def ready(self) -> int:
        """Wait for the persisted snapshot to be loaded.

        Starts the load now if it was deferred at construction.

        Returns:
            Number of entries restored, 0 when nothing was loaded.
        """
        if self._load_task is None:
            if not self._load_requested or self._disposed:
                return 0
            self._load_task = asyncio.get_running_loop().create_task(
                self._load_snapshot()
            )
        return await self._load_task

    async def wait_idle(self) -> None:
        """Wait until every queued background fill has finished."""
        await self._queue.join()

    async def dispose(self) -> None:
        """Save the full cache through the provider and release resources.

        The snapshot is saved whether or not caching is enabled. The
        coordinator cannot be used afterwards.
        """
        self._check_alive("dispose")
        self._disposed = True
        try:
            if self._provider is not None:
                await self._save_snapshot()
        finally:
            self._queue.close()
            self._pending.clear()
            if self._load_task is not None and not self._load_task.done():
                self._load_task.cancel()
            self._notifier.dispose()
            logger.info("disposed_translation_coordinator", entries=len(self._store))

    def _translate_in_background(
        self, key: str, locale: Locale
    ) -> Optional[asyncio.Future]:
        if not key or self._provider is None:
            return None

        address = LocaleKey.of(locale, key)
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(
                "background_translation_skipped",
                reason="no_running_loop",
                locale=address.locale_id,
                key=key,
            )
            return None

        # Already queued or running
        if not self._pending.try_reserve(address.token):
            return None

        handle = self._queue.enqueue(partial(self._fill, address, locale))
        handle.add_done_callback(partial(self._on_fill_done, address))
        return handle

    async def _fill(self, address: LocaleKey, locale: Locale) -> str:
        try:
            # Another job may have filled it while this one was waiting
            cached = self._store.get(address.locale_id, address.key)
            if cached is not None:
                return cached

            translated = await self._provider.translate(address.key, locale)
            if not translated or translated == address.key:
                logger.debug(
                    "translation_unavailable",
                    locale=address.locale_id,
                    key=address.key,
                )
                return address.key

            self._store.put(address.locale_id, address.key, translated)
            if self._caching_enabled and self._persist_on_fill:
                await self._save_snapshot()
            self._notifier.notify_listeners()
            self._provider.on_translated(address.key, translated)
            return translated
        finally:
            self._pending.release(address.token)

    def _on_fill_done(self, address: LocaleKey, handle: asyncio.Future) -> None:
        if handle.cancelled():
            return
        error = handle.exception()
        if error is not None:
            logger.error(
                "background_translation_failed",
                locale=address.locale_id,
                key=address.key,
                error=str(error),
            )

    async def _load_snapshot(self) -> int:
        try:
            source = await self._provider.load_cache()
        except Exception:
            logger.exception("snapshot_load_failed")
            return 0

        if self._disposed or not source:
            return 0

        data = decode_snapshot(source)
        merged = self._store.restore(data)
        if not isinstance(data, Mapping) or not data:
            return merged

        logger.info(
            "snapshot_restored",
            entries=merged,
            locales=len(self._store.locales()),
        )
        self._notifier.notify_listeners()
        return merged

    async def _save_snapshot(self) -> None:
        serialized = encode_snapshot(self._store.snapshot())
        await self._provider.save_cache(serialized)
        logger.debug("snapshot_saved", entries=len(self._store))

    def _check_alive(self, operation: str) -> None:
        if self._disposed:
            raise CoordinatorDisposedError(operation)
