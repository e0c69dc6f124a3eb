"""Pydantic response/request models for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from copilotsuggest.autosuggest.display import UserDisplayInfo
from copilotsuggest.autosuggest.models import (
    AutosuggestConfig,
    ExperienceConfig,
    Suggestion,
    UserProfile,
)


class StatsResponse(BaseModel):
    """Loaded dataset statistics."""

    total_entries: int
    total_users: int
    total_sessions: int
    total_suggestions: int
    pool_prefixes: int


class ExperienceResponse(BaseModel):
    show_position_hints: bool
    stable_ordering: bool
    emphasize_top_result: bool
    show_typing_indicator: bool
    animation_speed: str

    @classmethod
    def from_experience(cls, experience: ExperienceConfig) -> "ExperienceResponse":
        return cls(
            show_position_hints=experience.show_position_hints,
            stable_ordering=experience.stable_ordering,
            emphasize_top_result=experience.emphasize_top_result,
            show_typing_indicator=experience.show_typing_indicator,
            animation_speed=experience.animation_speed.value,
        )


class ConfigResponse(BaseModel):
    """Autosuggest behavior derived for a user."""

    enabled: bool
    min_prefix_length: int
    max_suggestions: int
    style: str
    writing_style: str
    trigger_mode: str
    trigger_every_n_chars: int
    pause_threshold_ms: int
    topics_of_interest: list[str]
    experience: ExperienceResponse

    @classmethod
    def from_config(cls, config: AutosuggestConfig) -> "ConfigResponse":
        return cls(
            enabled=config.enabled,
            min_prefix_length=config.min_prefix_length,
            max_suggestions=config.max_suggestions,
            style=config.style.value,
            writing_style=config.writing_style,
            trigger_mode=config.trigger_mode.value,
            trigger_every_n_chars=config.trigger_every_n_chars,
            pause_threshold_ms=config.pause_threshold_ms,
            topics_of_interest=list(config.topics_of_interest),
            experience=ExperienceResponse.from_experience(config.experience),
        )


class UserSummaryResponse(BaseModel):
    """One entry in the user picker."""

    user_id: str
    ctr: float
    ctr_category: str
    typing_speed_category: str
    region: str
    trigger_mode: str


class UserListResponse(BaseModel):
    users: list[UserSummaryResponse]
    total: int


class DisplayInfoResponse(BaseModel):
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
    topics_of_interest: list[str]
    description: str

    @classmethod
    def from_info(cls, info: UserDisplayInfo) -> "DisplayInfoResponse":
        return cls(
            ctr_label=info.ctr_label,
            ctr_score=info.ctr_score,
            speed_label=info.speed_label,
            keystroke_interval=info.keystroke_interval,
            trigger_mode=info.trigger_mode,
            trigger_details=info.trigger_details,
            autosuggest_status=info.autosuggest_status,
            suggestions_shown=info.suggestions_shown,
            style=info.style,
            writing_style=info.writing_style,
            topics_of_interest=list(info.topics_of_interest),
            description=info.description,
        )


class UserDetailResponse(BaseModel):
    """A user's profile with its derived behavior."""

    user_id: str
    market: str
    ui_language: str
    region: str
    total_events: int
    clicked_events: int
    ctr: float
    ctr_category: str
    avg_typing_speed_ms: float
    typing_speed_category: str
    total_sessions: int
    avg_events_per_session: float
    usage_frequency: str
    topic_affinities: list[str]
    topics_of_interest: list[str]
    historical_queries: list[str]
    clicked_suggestions: list[str]
    writing_style: str
    config: ConfigResponse
    display: DisplayInfoResponse

    @classmethod
    def from_profile(
        cls,
        profile: UserProfile,
        config: AutosuggestConfig,
        info: UserDisplayInfo,
    ) -> "UserDetailResponse":
        return cls(
            user_id=profile.user_id,
            market=profile.market,
            ui_language=profile.ui_language,
            region=profile.region,
            total_events=profile.total_events,
            clicked_events=profile.clicked_events,
            ctr=round(profile.ctr, 4),
            ctr_category=profile.ctr_category.value,
            avg_typing_speed_ms=round(profile.avg_typing_speed_ms, 1),
            typing_speed_category=profile.typing_speed_category.value,
            total_sessions=profile.total_sessions,
            avg_events_per_session=round(profile.avg_events_per_session, 2),
            usage_frequency=profile.usage_frequency.value,
            topic_affinities=list(profile.topic_affinities),
            topics_of_interest=list(profile.topics_of_interest),
            historical_queries=list(profile.historical_queries),
            clicked_suggestions=list(profile.clicked_suggestions),
            writing_style=profile.writing_style,
            config=ConfigResponse.from_config(config),
            display=DisplayInfoResponse.from_info(info),
        )


class UserSettingsResponse(BaseModel):
    user_id: str
    autosuggest_enabled: bool


class UserSettingsUpdate(BaseModel):
    autosuggest_enabled: bool


class SuggestionResponse(BaseModel):
    """A single ranked suggestion."""

    text: str
    position: int
    score: float
    source: str

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestionResponse":
        return cls(
            text=suggestion.text,
            position=suggestion.position,
            score=round(suggestion.score, 2),
            source=suggestion.source.value,
        )


class ProfileSummaryResponse(BaseModel):
    ctr_category: str
    typing_speed: str
    region: str


class AutosuggestResponse(BaseModel):
    """Ranked suggestions plus the behavior used to produce them."""

    prefix: str
    enabled: bool
    suggestions: list[SuggestionResponse]
    style: str
    trigger_reason: str
    experience: ExperienceResponse
    profile: ProfileSummaryResponse


class FeaturedSuggestionResponse(BaseModel):
    text: str
    category: str


class FeaturedResponse(BaseModel):
    """Prompts offered before the user starts typing."""

    suggestions: list[FeaturedSuggestionResponse]


class AISuggestRequest(BaseModel):
    """Request body for model-generated completions. Field names follow the web client."""

    model_config = ConfigDict(populate_by_name=True)

    prefix: Optional[str] = None
    max_suggestions: int = Field(4, alias="maxSuggestions", ge=1, le=10)
    style: str = "natural"
    writing_style: str = Field("", alias="writingStyle")
    past_queries: str = Field("", alias="pastQueries")


class AISuggestResponse(BaseModel):
    suggestions: list[str]
    source: str


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
