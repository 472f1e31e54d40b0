"""i18n system - translation cache with asynchronous, ordered fill.

Serves translations for (locale, key) pairs from memory and fills misses
in the background through a pluggable TranslationProvider.

Main components:
- models: Locale, LocaleKey
- store: TranslationStore and snapshot encode/decode
- pending: PendingSet guarding in-flight fills
- queue: SequentialQueue running one fill at a time
- notifier: ChangeNotifier for observers
- provider: TranslationProvider and MappingTranslationProvider
- coordinator: TranslationCoordinator
- factory: process-wide init/get accessors
"""

from infrastructure.i18n.coordinator import TranslationCoordinator
from infrastructure.i18n.errors import (
    CoordinatorDisposedError,
    CoordinatorNotInitializedError,
    TranslationError,
)
from infrastructure.i18n.factory import (
    get_coordinator,
    get_shared_coordinator,
    init_coordinator,
    reset_coordinators,
)
from infrastructure.i18n.models import Locale, LocaleKey
from infrastructure.i18n.notifier import ChangeNotifier
from infrastructure.i18n.pending import PendingSet
from infrastructure.i18n.provider import (
    MappingTranslationProvider,
    TranslationProvider,
)
from infrastructure.i18n.queue import SequentialQueue
from infrastructure.i18n.store import (
    TranslationStore,
    decode_snapshot,
    encode_snapshot,
)

__all__ = [
    "Locale",
    "LocaleKey",
    "TranslationStore",
    "encode_snapshot",
    "decode_snapshot",
    "PendingSet",
    "SequentialQueue",
    "ChangeNotifier",
    "TranslationProvider",
    "MappingTranslationProvider",
    "TranslationCoordinator",
    "TranslationError",
    "CoordinatorNotInitializedError",
    "CoordinatorDisposedError",
    "init_coordinator",
    "get_coordinator",
    "get_shared_coordinator",
    "reset_coordinators",
]
