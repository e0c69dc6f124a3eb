"""Human-readable labels describing a profile and its derived behavior."""

from __future__ import annotations

from dataclasses import dataclass

from copilotsuggest.autosuggest.models import (
    CtrCategory,
    SuggestionStyle,
    TriggerMode,
    TypingSpeedCategory,
    UserProfile,
)
from copilotsuggest.autosuggest.policy import derive_config

_CTR_LABELS = {
    CtrCategory.ZERO: "Zero CTR",
    CtrCategory.LOW: "Low CTR",
    CtrCategory.MEDIUM: "Medium CTR",
    CtrCategory.HIGH: "High CTR",
    CtrCategory.VERY_HIGH: "Very High CTR",
}

# (label, typical keystroke interval)
_SPEED_LABELS = {
    TypingSpeedCategory.POWER_USER: ("Ultra-Fast", "<= 150 ms"),
    TypingSpeedCategory.REGULAR_USER: ("Fast", "150-300 ms"),
    TypingSpeedCategory.MODERATE_USER: ("Moderate", "300-700 ms"),
    TypingSpeedCategory.OCCASIONAL_USER: ("Slow", "0.7-2 s"),
    TypingSpeedCategory.NEW_USER: ("Very Slow", "> 2 s"),
}

_STYLE_LABELS = {
    SuggestionStyle.KEYWORD: "Short keywords",
    SuggestionStyle.SEARCH: "Search-engine style",
    SuggestionStyle.NATURAL: "Natural language",
    SuggestionStyle.CONVERSATIONAL: "Conversational",
    SuggestionStyle.TASK_ORIENTED: "Task-oriented",
}

_DESCRIPTIONS = {
    CtrCategory.ZERO: "Never clicks suggestions. Autosuggest disabled to avoid interrupting typing flow.",
    CtrCategory.LOW: "Rarely clicks suggestions. Triggers only on typing pause to minimize distraction.",
    CtrCategory.MEDIUM: "Balanced autosuggest usage. Triggers at regular intervals while typing.",
    CtrCategory.HIGH: "Frequently uses autosuggest. More aggressive triggering to help with input.",
    CtrCategory.VERY_HIGH: "Power user of autosuggest. Continuous triggering for maximum assistance.",
}


@dataclass(frozen=True)
class UserDisplayInfo:
    ctr_label: str
    ctr_score: str
    speed_label: str
    keystroke_interval: str
    trigger_mode: str
    trigger_details: str
    autosuggest_status: str
    suggestions_shown: int
    style: str
    writing_style: str
    topics_of_interest: tuple[str, ...]
    description: str


def user_display_info(profile: UserProfile) -> UserDisplayInfo:
    config = derive_config(profile)
    speed_label, interval = _SPEED_LABELS[profile.typing_speed_category]

    if config.trigger_mode is TriggerMode.DISABLED:
        mode, details, status = "Disabled", "Autosuggest not triggered", "Off"
    elif config.trigger_mode is TriggerMode.PAUSE:
        mode, details, status = "Pause Only", f"Show after {config.pause_threshold_ms} ms inactivity", "Pause Trigger"
    elif config.trigger_mode is TriggerMode.INTERVAL:
        mode, details, status = "Interval", f"Every {config.trigger_every_n_chars} characters typed", "Always On"
    else:
        mode, details, status = "Continuous", "Every keystroke", "Always On"

    return UserDisplayInfo(
        ctr_label=_CTR_LABELS[profile.ctr_category],
        ctr_score=f"{profile.ctr * 100:.0f}%",
        speed_label=speed_label,
        keystroke_interval=interval,
        trigger_mode=mode,
        trigger_details=details,
        autosuggest_status=status,
        suggestions_shown=config.max_suggestions,
        style=_STYLE_LABELS[config.style],
        writing_style=profile.writing_style,
        topics_of_interest=profile.topics_of_interest,
        description=_DESCRIPTIONS[profile.ctr_category],
    )
