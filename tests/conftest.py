"""
Shared test fixtures for the autosuggest test suite.

Provides an isolated SQLite database per test and factories for log rows
and user profiles with sensible defaults.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from copilotsuggest.autosuggest.models import (
    CtrCategory,
    LogEntry,
    TypingSpeedCategory,
    UsageFrequency,
    UserProfile,
)
from copilotsuggest.config.settings import Settings
from copilotsuggest.storage.connection import close_connection, get_connection
from copilotsuggest.storage.schema import initialize_database
from copilotsuggest.storage.settings_store import UserSettingsStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temp directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test_copilotsuggest.db"


@pytest.fixture
def db(db_path: Path):
    """Initialized database connection, closed after the test."""
    initialize_database(db_path)
    conn = get_connection(db_path)
    yield conn
    close_connection(db_path)


@pytest.fixture
def settings_store(db, db_path: Path) -> UserSettingsStore:
    return UserSettingsStore(db_path)


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_entry(
    user_id: str = "U1",
    prefix: str = "how",
    suggestion_text: str = "how to cook rice",
    time: str = "10:00:00",
    session_id: str = "S1",
    event_id: str = "E1",
    clicked: bool = False,
    **kwargs,
) -> LogEntry:
    """Create a LogEntry with sensible defaults. Override any field via kwargs."""
    defaults = dict(
        user_id=user_id,
        previous_query="",
        prefix=prefix,
        market="en-us",
        ui_language="en",
        region="us",
        time=time,
        session_id=session_id,
        event_id=event_id,
        position=1,
        suggestion_text=suggestion_text,
        clicked=clicked,
        past_queries="",
        writing_style="",
    )
    defaults.update(kwargs)
    return LogEntry(**defaults)


def make_profile(
    user_id: str = "U1",
    ctr_category: CtrCategory = CtrCategory.MEDIUM,
    typing_speed_category: TypingSpeedCategory = TypingSpeedCategory.MODERATE_USER,
    **kwargs,
) -> UserProfile:
    """Create a UserProfile with sensible defaults."""
    defaults = dict(
        user_id=user_id,
        market="en-us",
        ui_language="en",
        region="us",
        total_events=10,
        clicked_events=2,
        ctr=0.2,
        ctr_category=ctr_category,
        avg_typing_speed_ms=500.0,
        typing_speed_category=typing_speed_category,
        total_sessions=3,
        avg_events_per_session=3.3,
        usage_frequency=UsageFrequency.MEDIUM,
        writing_style="",
    )
    defaults.update(kwargs)
    return UserProfile(**defaults)


SAMPLE_LOG = """\
UserId,PreviousQuery,Prefix,Market,UiLanguage,Region,Time,CVID,EventId,Position,Suggestion,SuggestionClick,PastQueries,WritingStyle
alice,,py,en-us,en,us,09:00:00,S1,E1,1,python tutorial,true,"python; sql",Short keyword style
alice,,pyt,en-us,en,us,09:00:00,S1,E1,2,python tricks,false,"python; sql",Short keyword style
alice,,pyth,en-us,en,us,09:00:01,S1,E2,1,python tutorial,false,"python; sql",Short keyword style
alice,,python,en-us,en,us,09:00:02,S1,E3,1,python tutorial,true,"python; sql",Short keyword style
bob,,we,en-gb,en,gb,11:00:00,S2,E4,1,weather today,false,weather,Conversational question style
bob,,wea,en-gb,en,gb,11:00:04,S2,E5,1,weather today,false,weather,Conversational question style
"""
