"""
Pytest configuration and shared fixtures for the test suite.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import pytest

from voice_ideas.models.entry import VoiceEntry
from voice_ideas.utils.config import get_settings
from voice_ideas.utils.logger import ROOT_LOGGER_NAME


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_entries_path(fixtures_dir: Path) -> Path:
    """Get path to the sample entries CSV."""
    return fixtures_dir / "sample_entries.csv"


# =============================================================================
# Entry Fixtures
# =============================================================================


def make_entry(
    transcript: str = "",
    tags: Optional[list[str]] = None,
    score: Optional[float] = None,
    **extra: Any,
) -> VoiceEntry:
    """Build a voice entry with only the fields the classifier reads."""
    return VoiceEntry(
        transcript_user=transcript,
        tags_user=tags or [],
        emotion_score_score=score,
        **extra,
    )


@pytest.fixture
def entry_factory():
    """Factory for entries with a given transcript, tags and score."""
    return make_entry


@pytest.fixture
def idea_entry() -> VoiceEntry:
    """An entry that fires the verb and future-intent triggers."""
    return make_entry(
        "I want to build a new app",
        tags=["work", "important"],
        score=0.5,
        id="entry_001",
        user_id="user_001",
    )


@pytest.fixture
def plain_entry() -> VoiceEntry:
    """An entry with no idea triggers."""
    return make_entry(
        "Had a quiet evening with a cup of tea",
        tags=["personal", "work"],
        score=0.0,
        id="entry_002",
        user_id="user_001",
    )


@pytest.fixture
def sample_entries(idea_entry: VoiceEntry, plain_entry: VoiceEntry) -> list[VoiceEntry]:
    """A small mixed batch of entries."""
    return [
        idea_entry,
        plain_entry,
        make_entry("I just thought of a great solution", tags=["ideas"], score=-0.4),
    ]


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging so caplog sees package records."""
    yield
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, str]:
    """Set up mock environment variables."""
    env_vars = {
        "ENVIRONMENT": "test",
        "ENTRIES_CSV_PATH": str(tmp_path / "entries.csv"),
        "MAX_ENTRIES": "3",
        "LOG_LEVEL": "debug",
        "LOG_JSON_FORMAT": "true",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
