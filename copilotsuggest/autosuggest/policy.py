"""
Configuration derivation: UserProfile -> AutosuggestConfig.

Two layers. The click-through category sets the base trigger policy;
typing speed then nudges it (fast typists towards pause-only triggering,
slow typists towards denser triggering). A zero-CTR user is switched off
by a minimum prefix length no input can reach, so downstream code never
needs a separate on/off check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from copilotsuggest.autosuggest.models import (
    AnimationSpeed,
    AutosuggestConfig,
    CtrCategory,
    ExperienceConfig,
    SuggestionStyle,
    TriggerMode,
    TypingSpeedCategory,
    UserProfile,
)

DEFAULT_WRITING_STYLE = "Balanced, natural language"

# Unreachable minimum prefix length used to switch triggering off
NEVER_TRIGGER_LENGTH = 999


@dataclass(frozen=True)
class _TriggerPolicy:
    mode: TriggerMode
    min_prefix_length: int
    max_suggestions: int
    every_n_chars: int
    pause_ms: int


CTR_POLICIES: dict[CtrCategory, _TriggerPolicy] = {
    CtrCategory.ZERO: _TriggerPolicy(TriggerMode.DISABLED, NEVER_TRIGGER_LENGTH, 0, 999, 99_999),
    CtrCategory.LOW: _TriggerPolicy(TriggerMode.PAUSE, 3, 2, 999, 800),
    CtrCategory.MEDIUM: _TriggerPolicy(TriggerMode.INTERVAL, 2, 3, 4, 500),
    CtrCategory.HIGH: _TriggerPolicy(TriggerMode.INTERVAL, 1, 4, 2, 300),
    CtrCategory.VERY_HIGH: _TriggerPolicy(TriggerMode.CONTINUOUS, 1, 4, 1, 0),
}

# Evaluated in order; first phrase found in the writing style wins
STYLE_RULES: tuple[tuple[tuple[str, ...], SuggestionStyle], ...] = (
    (("keyword", "short"), SuggestionStyle.KEYWORD),
    (("search",), SuggestionStyle.SEARCH),
    (("conversational", "question"), SuggestionStyle.CONVERSATIONAL),
    (("task", "detailed"), SuggestionStyle.TASK_ORIENTED),
    (("balanced", "semi-formal"), SuggestionStyle.NATURAL),
)

DEFAULT_CONFIG = AutosuggestConfig(
    enabled=True,
    min_prefix_length=2,
    max_suggestions=4,
    style=SuggestionStyle.NATURAL,
    writing_style=DEFAULT_WRITING_STYLE,
    trigger_mode=TriggerMode.INTERVAL,
    trigger_every_n_chars=3,
    pause_threshold_ms=500,
    topics_of_interest=(),
    experience=ExperienceConfig(
        show_position_hints=True,
        stable_ordering=False,
        emphasize_top_result=True,
        show_typing_indicator=False,
        animation_speed=AnimationSpeed.NORMAL,
    ),
)


def derive_style(writing_style: str) -> SuggestionStyle:
    lower = writing_style.lower()
    for phrases, style in STYLE_RULES:
        if any(p in lower for p in phrases):
            return style
    return SuggestionStyle.NATURAL


def _apply_typing_modifier(policy: _TriggerPolicy, speed: TypingSpeedCategory) -> _TriggerPolicy:
    mode = policy.mode
    pause_ms = policy.pause_ms
    every_n = policy.every_n_chars

    if mode is TriggerMode.DISABLED:
        return policy

    if speed is TypingSpeedCategory.POWER_USER:
        mode = TriggerMode.PAUSE
        pause_ms = max(pause_ms, 1000)
    elif speed is TypingSpeedCategory.REGULAR_USER:
        if mode in (TriggerMode.CONTINUOUS, TriggerMode.INTERVAL):
            mode = TriggerMode.PAUSE
            pause_ms = max(pause_ms, 600)
    elif speed is TypingSpeedCategory.OCCASIONAL_USER:
        if mode is TriggerMode.PAUSE:
            pause_ms = min(pause_ms, 400)
        elif mode is TriggerMode.INTERVAL:
            every_n = max(1, every_n - 1)
    elif speed is TypingSpeedCategory.NEW_USER:
        mode = TriggerMode.CONTINUOUS
        every_n = 1

    return _TriggerPolicy(mode, policy.min_prefix_length, policy.max_suggestions, every_n, pause_ms)


def _experience(profile: UserProfile) -> ExperienceConfig:
    ctr = profile.ctr_category
    speed = profile.typing_speed_category
    if speed.is_fast:
        animation = AnimationSpeed.FAST
    elif speed.is_slow:
        animation = AnimationSpeed.SLOW
    else:
        animation = AnimationSpeed.NORMAL

    return ExperienceConfig(
        show_position_hints=ctr is not CtrCategory.ZERO,
        stable_ordering=ctr in (CtrCategory.HIGH, CtrCategory.VERY_HIGH),
        emphasize_top_result=ctr is not CtrCategory.ZERO,
        show_typing_indicator=speed.is_slow,
        animation_speed=animation,
    )


def derive_config(profile: Optional[UserProfile]) -> AutosuggestConfig:
    """Return the triggering/styling config for *profile* (default when None)."""
    if profile is None:
        return DEFAULT_CONFIG

    policy = _apply_typing_modifier(
        CTR_POLICIES[profile.ctr_category],
        profile.typing_speed_category,
    )

    return AutosuggestConfig(
        enabled=True,
        min_prefix_length=policy.min_prefix_length,
        max_suggestions=policy.max_suggestions,
        style=derive_style(profile.writing_style),
        writing_style=profile.writing_style,
        trigger_mode=policy.mode,
        trigger_every_n_chars=policy.every_n_chars,
        pause_threshold_ms=policy.pause_ms,
        topics_of_interest=profile.topics_of_interest,
        experience=_experience(profile),
    )
