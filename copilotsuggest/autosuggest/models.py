"""
Data models for the adaptive autosuggest engine.

Plain frozen dataclasses and string enums. Log rows are parsed once and
never mutated; profiles and configs are only produced by the derivation
functions in ``profiles`` and ``policy``, always fully populated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CtrCategory(str, Enum):
    ZERO = "zero"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class TypingSpeedCategory(str, Enum):
    """Keystroke cadence buckets, fastest first."""

    POWER_USER = "power_user"
    REGULAR_USER = "regular_user"
    MODERATE_USER = "moderate_user"
    OCCASIONAL_USER = "occasional_user"
    NEW_USER = "new_user"

    @property
    def rank(self) -> int:
        """1 = fastest, 5 = slowest."""
        return list(TypingSpeedCategory).index(self) + 1

    @property
    def is_fast(self) -> bool:
        return self in (TypingSpeedCategory.POWER_USER, TypingSpeedCategory.REGULAR_USER)

    @property
    def is_slow(self) -> bool:
        return self in (TypingSpeedCategory.OCCASIONAL_USER, TypingSpeedCategory.NEW_USER)


class UsageFrequency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TriggerMode(str, Enum):
    DISABLED = "disabled"
    PAUSE = "pause"
    INTERVAL = "interval"
    CONTINUOUS = "continuous"


class SuggestionStyle(str, Enum):
    KEYWORD = "keyword"
    NATURAL = "natural"
    CONVERSATIONAL = "conversational"
    SEARCH = "search"
    TASK_ORIENTED = "task-oriented"


class AnimationSpeed(str, Enum):
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"


class SuggestionSource(str, Enum):
    CROWD = "crowd"
    SYNTHETIC = "synthetic"
    BASE = "base"
    AI = "ai"


# ---------------------------------------------------------------------------
# Behavioral log
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LogEntry:
    """
    One logged autosuggest impression (one displayed suggestion).

    Several rows share an ``event_id`` (one per shown position) and several
    events share a ``session_id`` (the CVID of one typing interaction).
    """

    user_id: str = ""
    previous_query: str = ""

    # Text typed so far when the suggestion request fired
    prefix: str = ""

    market: str = ""
    ui_language: str = ""
    region: str = ""

    # HH:MM:SS, same day, zero padded
    time: str = ""

    session_id: str = ""
    event_id: str = ""

    # 1-based rank shown to the user
    position: int = 1

    suggestion_text: str = ""
    clicked: bool = False

    # Semicolon-joined free text
    past_queries: str = ""

    # Free-text descriptor, e.g. "Short, keyword-based, technical"
    writing_style: str = ""


# ---------------------------------------------------------------------------
# Derived profile
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UserProfile:
    """Behavioral profile derived from one user's log rows."""

    user_id: str
    market: str
    ui_language: str
    region: str

    # CTR metrics
    total_events: int
    clicked_events: int
    ctr: float
    ctr_category: CtrCategory

    # Typing behavior
    avg_typing_speed_ms: float
    typing_speed_category: TypingSpeedCategory

    # Usage patterns
    total_sessions: int
    avg_events_per_session: float
    usage_frequency: UsageFrequency

    topic_affinities: tuple[str, ...] = ()
    topics_of_interest: tuple[str, ...] = ()
    historical_queries: tuple[str, ...] = ()
    clicked_suggestions: tuple[str, ...] = ()

    past_queries: str = ""
    writing_style: str = ""

    @property
    def typing_speed_rank(self) -> int:
        return self.typing_speed_category.rank


# ---------------------------------------------------------------------------
# Crowd pool
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuggestionCandidate:
    """Aggregate display/click statistics for one (prefix, suggestion) pair."""

    text: str
    count: int
    clicks: int

    @property
    def historical_ctr(self) -> float:
        return self.clicks / self.count if self.count > 0 else 0.0

    @property
    def score(self) -> float:
        """Blend of frequency and click-through: count + CTR * 100."""
        return self.count + self.historical_ctr * 100


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExperienceConfig:
    """Display hints for the rendering layer."""

    show_position_hints: bool
    stable_ordering: bool
    emphasize_top_result: bool
    show_typing_indicator: bool
    animation_speed: AnimationSpeed


@dataclass(frozen=True)
class AutosuggestConfig:
    """Triggering and styling policy for one user."""

    enabled: bool
    min_prefix_length: int
    max_suggestions: int
    style: SuggestionStyle
    writing_style: str
    trigger_mode: TriggerMode
    trigger_every_n_chars: int
    pause_threshold_ms: int
    topics_of_interest: tuple[str, ...]
    experience: ExperienceConfig


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Suggestion:
    text: str
    position: int
    score: float
    source: SuggestionSource


@dataclass(frozen=True)
class ProfileSummary:
    ctr_category: str = "unknown"
    typing_speed: str = "unknown"
    region: str = "unknown"


@dataclass(frozen=True)
class AutosuggestResult:
    """Output of one ranking call."""

    enabled: bool
    suggestions: tuple[Suggestion, ...]
    style: SuggestionStyle
    trigger_reason: str
    experience: ExperienceConfig
    profile: ProfileSummary = field(default_factory=ProfileSummary)
