"""
Per-user behavioral profile derivation.

Turns the flat impression log into one ``UserProfile`` per user id:
click-through category, typing-speed category, usage frequency, topic
affinities (from clicked suggestions) and topics of interest (from the
free-text writing style and past queries).
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from copilotsuggest.autosuggest.demo_profiles import DEMO_USER_IDS, demo_profiles
from copilotsuggest.autosuggest.models import (
    CtrCategory,
    LogEntry,
    TypingSpeedCategory,
    UsageFrequency,
    UserProfile,
)
from copilotsuggest.autosuggest.topics import (
    extract_topic_affinities,
    extract_topics_of_interest,
)
from copilotsuggest.config.settings import AutosuggestSettings, get_settings

logger = logging.getLogger(__name__)

# (upper bound in ms, category); the last bucket is open-ended
_TYPING_BUCKETS: tuple[tuple[float, TypingSpeedCategory], ...] = (
    (150, TypingSpeedCategory.POWER_USER),
    (300, TypingSpeedCategory.REGULAR_USER),
    (700, TypingSpeedCategory.MODERATE_USER),
    (2000, TypingSpeedCategory.OCCASIONAL_USER),
)


def categorize_ctr(ctr: float) -> CtrCategory:
    if ctr == 0:
        return CtrCategory.ZERO
    if ctr < 0.1:
        return CtrCategory.LOW
    if ctr < 0.3:
        return CtrCategory.MEDIUM
    if ctr < 0.6:
        return CtrCategory.HIGH
    return CtrCategory.VERY_HIGH


def categorize_typing_speed(avg_ms: float) -> TypingSpeedCategory:
    for upper, category in _TYPING_BUCKETS:
        if avg_ms <= upper:
            return category
    return TypingSpeedCategory.NEW_USER


def categorize_usage(total_sessions: int) -> UsageFrequency:
    if total_sessions <= 2:
        return UsageFrequency.LOW
    if total_sessions <= 4:
        return UsageFrequency.MEDIUM
    return UsageFrequency.HIGH


def parse_time_ms(value: str) -> int:
    """HH:MM:SS to milliseconds since midnight. Missing parts count as 0."""
    parts = (value.split(":") + ["0", "0", "0"])[:3]
    try:
        h, m, s = (int(p or 0) for p in parts)
    except ValueError:
        return 0
    return (h * 3600 + m * 60 + s) * 1000


def average_typing_delta_ms(
    entries: Iterable[LogEntry],
    gap_cutoff_ms: int = 10_000,
    default_ms: float = 500.0,
) -> float:
    """
    Mean interval between consecutive suggestion events.

    Events are grouped per (user, session), deduplicated by event id
    (first row wins), and ordered by time. Deltas that are not positive,
    or that reach *gap_cutoff_ms*, are pauses rather than typing cadence
    and are dropped.
    """
    sessions: dict[tuple[str, str], dict[str, LogEntry]] = {}
    for entry in entries:
        events = sessions.setdefault((entry.user_id, entry.session_id), {})
        events.setdefault(entry.event_id, entry)

    deltas: list[int] = []
    for events in sessions.values():
        # Lexicographic order is chronological for zero-padded same-day times
        ordered = sorted(events.values(), key=lambda e: e.time)
        for prev, cur in zip(ordered, ordered[1:]):
            delta = parse_time_ms(cur.time) - parse_time_ms(prev.time)
            if 0 < delta < gap_cutoff_ms:
                deltas.append(delta)

    if not deltas:
        return default_ms
    return sum(deltas) / len(deltas)


def _final_session_prefixes(entries: list[LogEntry]) -> list[str]:
    """Prefix of the chronologically last row in each session, in first-seen order."""
    latest: dict[str, LogEntry] = {}
    for entry in entries:
        current = latest.get(entry.session_id)
        if current is None or entry.time > current.time:
            latest[entry.session_id] = entry
    return [e.prefix for e in latest.values()]


def build_profile(
    user_id: str,
    entries: list[LogEntry],
    settings: Optional[AutosuggestSettings] = None,
) -> UserProfile:
    """Derive one user's profile from their (non-empty) log rows."""
    s = settings or get_settings().autosuggest

    event_ids: set[str] = set()
    clicked_event_ids: set[str] = set()
    session_ids: set[str] = set()
    clicked_suggestions: list[str] = []

    for entry in entries:
        event_ids.add(entry.event_id)
        session_ids.add(entry.session_id)
        if entry.clicked:
            clicked_event_ids.add(entry.event_id)
            clicked_suggestions.append(entry.suggestion_text)

    total_events = len(event_ids)
    clicked_events = len(clicked_event_ids)
    ctr = clicked_events / total_events if total_events > 0 else 0.0

    avg_typing = average_typing_delta_ms(
        entries,
        gap_cutoff_ms=s.typing_gap_cutoff_ms,
        default_ms=s.default_typing_speed_ms,
    )

    historical = [
        p for p in _final_session_prefixes(entries)
        if len(p) > s.min_historical_query_length
    ]

    total_sessions = len(session_ids)
    first = entries[0]

    return UserProfile(
        user_id=user_id,
        market=first.market,
        ui_language=first.ui_language,
        region=first.region,
        total_events=total_events,
        clicked_events=clicked_events,
        ctr=ctr,
        ctr_category=categorize_ctr(ctr),
        avg_typing_speed_ms=avg_typing,
        typing_speed_category=categorize_typing_speed(avg_typing),
        total_sessions=total_sessions,
        avg_events_per_session=total_events / total_sessions if total_sessions else 0.0,
        usage_frequency=categorize_usage(total_sessions),
        topic_affinities=tuple(extract_topic_affinities(clicked_suggestions)),
        topics_of_interest=tuple(extract_topics_of_interest(first.writing_style, first.past_queries)),
        historical_queries=tuple(historical),
        clicked_suggestions=tuple(clicked_suggestions),
        past_queries=first.past_queries,
        writing_style=first.writing_style,
    )


def build_user_profiles(
    entries: Iterable[LogEntry],
    include_demo: bool = True,
    settings: Optional[AutosuggestSettings] = None,
) -> dict[str, UserProfile]:
    """
    Derive a profile for every user id in *entries*.

    When *include_demo* is set, the fixed demonstration profiles are
    merged in last and win over derived profiles with the same id.
    """
    by_user: dict[str, list[LogEntry]] = {}
    for entry in entries:
        by_user.setdefault(entry.user_id, []).append(entry)

    profiles = {
        user_id: build_profile(user_id, rows, settings=settings)
        for user_id, rows in by_user.items()
    }
    logger.info("Derived %d user profiles from log", len(profiles))

    if include_demo:
        profiles.update(demo_profiles())
    return profiles


def order_users(profiles: Mapping[str, UserProfile]) -> list[UserProfile]:
    """Demonstration users first in their fixed order, then the rest by id."""
    demo_rank = {uid: i for i, uid in enumerate(DEMO_USER_IDS)}
    return sorted(
        profiles.values(),
        key=lambda p: (demo_rank.get(p.user_id, len(demo_rank)), p.user_id),
    )
