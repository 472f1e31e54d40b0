"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeTranslationProvider,
    make_locale_key,
    make_snapshot,
    make_snapshot_json,
)

__all__ = [
    "FakeTranslationProvider",
    "make_locale_key",
    "make_snapshot",
    "make_snapshot_json",
]
