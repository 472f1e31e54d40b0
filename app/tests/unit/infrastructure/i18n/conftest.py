"""Feature-level fixtures for translation cache tests.

Provides the recording fake provider and coordinator fixtures.
"""

import pytest

from infrastructure.i18n import TranslationCoordinator, reset_coordinators
from tests.factories.i18n import EN_US, FR_FR, FakeTranslationProvider


@pytest.fixture
def provider():
    """Fresh recording provider."""
    return FakeTranslationProvider()


@pytest.fixture
def coordinator(provider):
    """Coordinator without persistence, current locale en_US, fallback fr_FR."""
    return TranslationCoordinator(
        provider=provider,
        default_locale=EN_US,
        fallback_locale=FR_FR,
    )


@pytest.fixture
def caching_coordinator(provider):
    """Coordinator with persistence enabled and fallback en_US."""
    return TranslationCoordinator(
        provider=provider,
        default_locale=EN_US,
        fallback_locale=EN_US,
        caching_enabled=True,
    )


@pytest.fixture(autouse=True)
def _reset_process_coordinators():
    """Ensure no process-wide coordinator leaks between tests."""
    reset_coordinators()
    yield
    reset_coordinators()
