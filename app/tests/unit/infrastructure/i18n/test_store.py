"""Tests for infrastructure.i18n.store module."""

import json

from infrastructure.i18n.store import (
    TranslationStore,
    decode_snapshot,
    encode_snapshot,
)
from tests.factories.i18n import make_snapshot


class TestTranslationStore:
    """Tests for TranslationStore."""

    def test_empty_store(self):
        """A new store has no locales and no entries."""
        store = TranslationStore()
        assert store.get("fr_FR", "Hello") is None
        assert store.locales() == []
        assert len(store) == 0

    def test_put_creates_locale_lazily(self):
        """put() creates the locale mapping on first write."""
        store = TranslationStore()
        assert not store.has_locale("fr_FR")

        store.put("fr_FR", "Hello", "Bonjour")

        assert store.has_locale("fr_FR")
        assert store.get("fr_FR", "Hello") == "Bonjour"

    def test_put_overwrites(self):
        """Last write wins for a key."""
        store = TranslationStore()
        store.put("fr_FR", "Hello", "Salut")
        store.put("fr_FR", "Hello", "Bonjour")
        assert store.get("fr_FR", "Hello") == "Bonjour"
        assert len(store) == 1

    def test_get_is_locale_scoped(self):
        """Entries of one locale are not visible from another."""
        store = TranslationStore()
        store.put("fr_FR", "Hello", "Bonjour")
        assert store.get("de_DE", "Hello") is None

    def test_ensure_locale_keeps_existing_entries(self):
        """ensure_locale() creates an empty bucket and never clears one."""
        store = TranslationStore()
        store.ensure_locale("de_DE")
        assert store.has_locale("de_DE")
        assert not store.contains("de_DE", "Hello")

        store.put("de_DE", "Hello", "Hallo")
        store.ensure_locale("de_DE")
        assert store.get("de_DE", "Hello") == "Hallo"

    def test_keys_is_union_in_first_seen_order(self):
        """keys() returns each key once across all locales."""
        store = TranslationStore()
        store.put("fr_FR", "a", "A-fr")
        store.put("fr_FR", "b", "B-fr")
        store.put("de_DE", "b", "B-de")
        store.put("de_DE", "c", "C-de")
        assert store.keys() == ["a", "b", "c"]

    def test_snapshot_is_a_deep_copy(self):
        """Mutating a snapshot does not affect the store."""
        store = TranslationStore()
        store.put("fr_FR", "Hello", "Bonjour")

        snapshot = store.snapshot()
        snapshot["fr_FR"]["Hello"] = "changed"
        snapshot["de_DE"] = {}

        assert store.get("fr_FR", "Hello") == "Bonjour"
        assert not store.has_locale("de_DE")

    def test_snapshot_is_not_affected_by_later_writes(self):
        """A snapshot reflects the store at capture time."""
        store = TranslationStore()
        store.put("fr_FR", "Hello", "Bonjour")
        snapshot = store.snapshot()

        store.put("fr_FR", "Goodbye", "Au revoir")

        assert snapshot == {"fr_FR": {"Hello": "Bonjour"}}


class TestRestore:
    """Tests for TranslationStore.restore()."""

    def test_restore_well_formed(self):
        """restore() merges every entry of a well-formed snapshot."""
        store = TranslationStore()
        merged = store.restore(make_snapshot())

        assert merged == 3
        assert store.get("fr_FR", "Goodbye") == "Au revoir"
        assert store.get("de_DE", "Hello") == "Hallo"

    def test_restore_merges_with_existing_entries(self):
        """restore() keeps keys that are not in the snapshot."""
        store = TranslationStore()
        store.put("fr_FR", "Thanks", "Merci")
        store.put("fr_FR", "Hello", "Salut")

        store.restore({"fr_FR": {"Hello": "Bonjour"}})

        assert store.get("fr_FR", "Thanks") == "Merci"
        assert store.get("fr_FR", "Hello") == "Bonjour"

    def test_restore_skips_malformed_locale(self):
        """A locale whose value is not a mapping is dropped, others kept."""
        store = TranslationStore()
        merged = store.restore(
            {"fr_FR": {"Hello": "Bonjour"}, "de_DE": "not a mapping"}
        )

        assert merged == 1
        assert store.snapshot() == {"fr_FR": {"Hello": "Bonjour"}}

    def test_restore_skips_malformed_pairs(self):
        """Non-string keys or values are dropped pair by pair."""
        store = TranslationStore()
        store.restore(
            {
                "fr_FR": {
                    "Hello": "Bonjour",
                    "Count": 3,
                    "List": ["a"],
                    7: "seven",
                    "Nothing": None,
                }
            }
        )
        assert store.snapshot() == {"fr_FR": {"Hello": "Bonjour"}}

    def test_restore_skips_non_string_locale_ids(self):
        """Non-string locale ids are dropped."""
        store = TranslationStore()
        store.restore({1: {"Hello": "Bonjour"}, "fr_FR": {"Hello": "Bonjour"}})
        assert store.locales() == ["fr_FR"]

    def test_restore_ignores_non_mapping_top_level(self):
        """restore() with a list, string or None changes nothing."""
        store = TranslationStore()
        for data in (["fr_FR"], "fr_FR", None, 42):
            assert store.restore(data) == 0
        assert store.locales() == []

    def test_restore_keeps_empty_locale(self):
        """A well-formed empty locale mapping still creates the locale."""
        store = TranslationStore()
        store.restore({"de_DE": {}})
        assert store.has_locale("de_DE")

    def test_restore_own_snapshot_is_idempotent(self):
        """Restoring a store's own snapshot changes nothing."""
        store = TranslationStore()
        store.restore(make_snapshot())
        before = store.snapshot()

        store.restore(store.snapshot())

        assert store.snapshot() == before
        assert store.keys() == ["Hello", "Goodbye"]


class TestSnapshotSerialization:
    """Tests for encode_snapshot() and decode_snapshot()."""

    def test_encode_produces_json(self):
        """encode_snapshot() produces JSON with the nested shape."""
        text = encode_snapshot({"fr_FR": {"Hello": "Bonjour"}})
        assert json.loads(text) == {"fr_FR": {"Hello": "Bonjour"}}

    def test_encode_keeps_non_ascii(self):
        """Non-ASCII text is written as is."""
        assert "Привет" in encode_snapshot({"ru_RU": {"Hello": "Привет"}})

    def test_decode_round_trip(self):
        """decode_snapshot() reverses encode_snapshot()."""
        snapshot = make_snapshot()
        assert decode_snapshot(encode_snapshot(snapshot)) == snapshot

    def test_decode_empty_sources(self):
        """None and empty strings decode to an empty mapping."""
        assert decode_snapshot(None) == {}
        assert decode_snapshot("") == {}

    def test_decode_invalid_json(self):
        """Corrupted text decodes to an empty mapping instead of raising."""
        assert decode_snapshot('{"fr_FR": {"Hello": "Bon') == {}

    def test_decode_then_restore_partial_document(self):
        """A valid document with bad parts restores its good parts."""
        store = TranslationStore()
        text = json.dumps({"fr_FR": {"Hello": "Bonjour", "n": 1}, "de_DE": [1]})

        store.restore(decode_snapshot(text))

        assert store.snapshot() == {"fr_FR": {"Hello": "Bonjour"}}
