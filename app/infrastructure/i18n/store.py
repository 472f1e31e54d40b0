"""In-memory translation store and snapshot serialization.

The store maps locale id -> (key -> translated text). Snapshots use the
same nested shape and are exchanged with providers as JSON text.
"""

import json
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

Snapshot = Dict[str, Dict[str, str]]


class TranslationStore:
    """Cache of translated strings partitioned by locale.

    A locale's inner mapping is created on first write. A missing locale
    means it was never looked up; a missing key inside a present locale
    means the key was looked up but is not resolved yet.
    """

    def __init__(self):
        self._entries: Snapshot = {}

    def get(self, locale_id: str, key: str) -> Optional[str]:
        """Return the cached text for (locale_id, key), or None."""
        locale_entries = self._entries.get(locale_id)
        if locale_entries is None:
            return None
        return locale_entries.get(key)

    def contains(self, locale_id: str, key: str) -> bool:
        return key in self._entries.get(locale_id, {})

    def has_locale(self, locale_id: str) -> bool:
        return locale_id in self._entries

    def put(self, locale_id: str, key: str, text: str) -> None:
        """Insert or overwrite the text for (locale_id, key)."""
        self._entries.setdefault(locale_id, {})[key] = text

    def ensure_locale(self, locale_id: str) -> None:
        """Create an empty mapping for locale_id if it does not exist yet."""
        self._entries.setdefault(locale_id, {})

    def keys(self) -> List[str]:
        """Union of keys across every cached locale, in first-seen order."""
        return list(
            dict.fromkeys(
                key for entries in self._entries.values() for key in entries
            )
        )

    def locales(self) -> List[str]:
        return list(self._entries.keys())

    def snapshot(self) -> Snapshot:
        """Deep copy of the store, safe to serialize or keep."""
        return {
            locale_id: dict(entries) for locale_id, entries in self._entries.items()
        }

    def restore(self, data: Any) -> int:
        """Merge a previously captured snapshot into the store.

        Malformed pieces are skipped one by one: a non-mapping top level,
        a non-string locale id, a locale whose value is not a mapping, or a
        key/value pair where either side is not a string. Nothing is raised.

        Args:
            data: Decoded snapshot, usually the output of decode_snapshot().

        Returns:
            Number of key/value entries merged.
        """
        if not isinstance(data, Mapping):
            logger.warning(
                "snapshot_ignored",
                reason="not_a_mapping",
                type=type(data).__name__,
            )
            return 0

        merged = 0
        for locale_id, entries in data.items():
            if not isinstance(locale_id, str) or not isinstance(entries, Mapping):
                logger.debug(
                    "snapshot_locale_skipped",
                    locale=repr(locale_id),
                    type=type(entries).__name__,
                )
                continue

            target = self._entries.setdefault(locale_id, {})
            for key, text in entries.items():
                if not isinstance(key, str) or not isinstance(text, str):
                    logger.debug(
                        "snapshot_entry_skipped",
                        locale=locale_id,
                        key=repr(key),
                    )
                    continue
                target[key] = text
                merged += 1

        return merged

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())


def encode_snapshot(snapshot: Snapshot) -> str:
    """Serialize a snapshot to JSON text."""
    return json.dumps(snapshot, ensure_ascii=False)


def decode_snapshot(source: Optional[str]) -> Any:
    """Parse JSON snapshot text.

    Returns an empty dict when source is None, empty or not valid JSON,
    so a corrupted blob behaves like a missing one.
    """
    if not source:
        return {}
    try:
        return json.loads(source)
    except (TypeError, ValueError) as e:
        logger.warning("snapshot_decode_failed", error=str(e), length=len(source))
        return {}
