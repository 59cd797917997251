"""
Shared pytest fixtures for the chat component test suite.

Every test renders against a small in-memory locale installed as the
process-wide default, so results never depend on the bundled locale file
or on a developer's config/chat.ini.
"""

from collections.abc import Generator

import pytest

from mud_chat.config import config
from mud_chat.locale import MappingLocaleDictionary, use_locale_dictionary
from tests.constants import TEST_TRANSLATIONS

# ============================================================================
# LOCALE FIXTURES
# ============================================================================


@pytest.fixture
def translations() -> MappingLocaleDictionary:
    """In-memory dictionary built from :data:`TEST_TRANSLATIONS`."""
    return MappingLocaleDictionary(TEST_TRANSLATIONS)


@pytest.fixture(autouse=True)
def default_locale(
    translations: MappingLocaleDictionary,
) -> Generator[MappingLocaleDictionary, None, None]:
    """Install the test dictionary as the process-wide default for each test."""
    with use_locale_dictionary(translations):
        yield translations


@pytest.fixture
def cycle_checks_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn off cycle validation on attachment for the duration of a test."""
    monkeypatch.setattr(config.components, "check_cycles", False)
