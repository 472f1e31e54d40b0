"""Process-wide translation coordinator accessors.

Explicitly constructing and passing a TranslationCoordinator is the
preferred API. These accessors exist for code that needs one coordinator
per process:

    # At application startup (inside the running event loop)
    init_coordinator(provider=MyProvider())

    # Anywhere afterwards
    label = get_coordinator().tr("Save")

    # At shutdown
    await get_coordinator().dispose()
    reset_coordinators()

Using an accessor before init_coordinator() raises
CoordinatorNotInitializedError.
"""

from threading import Lock
from typing import Optional

from infrastructure.i18n.coordinator import LocaleLike, TranslationCoordinator
from infrastructure.i18n.errors import CoordinatorNotInitializedError
from infrastructure.i18n.provider import TranslationProvider
from infrastructure.logging import get_module_logger
from infrastructure.services import get_translation_settings

logger = get_module_logger()

_COORDINATOR: Optional[TranslationCoordinator] = None
_SHARED: Optional[TranslationCoordinator] = None
_lock = Lock()


def init_coordinator(
    provider: TranslationProvider,
    default_locale: Optional[LocaleLike] = None,
    fallback_locale: Optional[LocaleLike] = None,
    caching_enabled: Optional[bool] = None,
) -> TranslationCoordinator:
    """Create the process-wide coordinator.

    Values that are not given come from TranslationSettings. Calling it
    again replaces the previous coordinator (and drops the shared one)
    without disposing it.

    Args:
        provider: TranslationProvider used for fills and persistence.
        default_locale: Initial current locale.
        fallback_locale: Fallback locale.
        caching_enabled: Load/save the cache snapshot through the provider.

    Returns:
        The new process-wide TranslationCoordinator.
    """
    global _COORDINATOR, _SHARED
    translation_settings = get_translation_settings()

    coordinator = TranslationCoordinator(
        provider=provider,
        default_locale=default_locale or translation_settings.default_locale,
        fallback_locale=fallback_locale or translation_settings.fallback_locale,
        caching_enabled=(
            translation_settings.caching_enabled
            if caching_enabled is None
            else caching_enabled
        ),
        persist_on_fill=translation_settings.persist_on_fill,
    )

    with _lock:
        if _COORDINATOR is not None:
            logger.warning("coordinator_reinitialized")
        _COORDINATOR = coordinator
        _SHARED = None

    return coordinator


def get_coordinator() -> TranslationCoordinator:
    """Return the process-wide coordinator.

    Raises:
        CoordinatorNotInitializedError: If init_coordinator() was not called.
    """
    coordinator = _COORDINATOR
    if coordinator is None:
        raise CoordinatorNotInitializedError("get_coordinator")
    return coordinator


def get_shared_coordinator() -> TranslationCoordinator:
    """Return a non-persisting coordinator sharing the main one's setup.

    Created on first use with the provider, current locale and fallback
    locale of the process-wide coordinator, but with caching disabled so
    it never loads a snapshot and only saves one on dispose().

    Raises:
        CoordinatorNotInitializedError: If init_coordinator() was not called.
    """
    global _SHARED
    with _lock:
        if _COORDINATOR is None:
            raise CoordinatorNotInitializedError("get_shared_coordinator")
        if _SHARED is None:
            _SHARED = TranslationCoordinator(
                provider=_COORDINATOR.provider,
                default_locale=_COORDINATOR.current_locale,
                fallback_locale=_COORDINATOR.fallback_locale,
                caching_enabled=False,
            )
            logger.debug("created_shared_coordinator")
        return _SHARED


def reset_coordinators() -> None:
    """Forget both process-wide coordinators without disposing them."""
    global _COORDINATOR, _SHARED
    with _lock:
        _COORDINATOR = None
        _SHARED = None
