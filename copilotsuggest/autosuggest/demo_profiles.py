"""
Fixed demonstration profiles.

One profile per CTR category, each paired with a different typing speed,
so every branch of the configuration policy can be shown regardless of
what the loaded log contains. These overwrite derived profiles that share
the same user id.
"""

from __future__ import annotations

from copilotsuggest.autosuggest.models import (
    CtrCategory,
    TypingSpeedCategory,
    UsageFrequency,
    UserProfile,
)

DEMO_USER_IDS: tuple[str, ...] = (
    "USER_001_SANDRA",
    "USER_002_JAMES",
    "USER_003_PRIYA",
    "USER_004_MICHAEL",
    "USER_005_EMMA",
)


def demo_profiles() -> dict[str, UserProfile]:
    """Return the demonstration profiles keyed by user id, in display order."""
    profiles = [
        # Zero CTR, very fast typist
        UserProfile(
            user_id="USER_001_SANDRA",
            market="en-US",
            ui_language="en",
            region="us",
            total_events=8,
            clicked_events=0,
            ctr=0.0,
            ctr_category=CtrCategory.ZERO,
            avg_typing_speed_ms=120,
            typing_speed_category=TypingSpeedCategory.POWER_USER,
            total_sessions=1,
            avg_events_per_session=8,
            usage_frequency=UsageFrequency.LOW,
            topic_affinities=("technology", "learning"),
            topics_of_interest=("AI", "Product Strategy", "Technology Trends"),
            historical_queries=("explain",),
            clicked_suggestions=(),
            past_queries="future of technology; ai product roadmap; machine learning basics; copilot features",
            writing_style="Short, keyword-based, technical",
        ),
        # Low CTR, fast typist
        UserProfile(
            user_id="USER_002_JAMES",
            market="en-GB",
            ui_language="en",
            region="gb",
            total_events=20,
            clicked_events=1,
            ctr=0.05,
            ctr_category=CtrCategory.LOW,
            avg_typing_speed_ms=250,
            typing_speed_category=TypingSpeedCategory.REGULAR_USER,
            total_sessions=1,
            avg_events_per_session=20,
            usage_frequency=UsageFrequency.LOW,
            topic_affinities=("learning",),
            topics_of_interest=("Local News", "Sports", "Weather"),
            historical_queries=("summarize",),
            clicked_suggestions=("summarize this document",),
            past_queries="weather london; news today; football scores; restaurants near me",
            writing_style="Short, casual, search-engine style",
        ),
        # Medium CTR, moderate typist
        UserProfile(
            user_id="USER_003_PRIYA",
            market="en-IN",
            ui_language="en",
            region="in",
            total_events=8,
            clicked_events=1,
            ctr=0.125,
            ctr_category=CtrCategory.MEDIUM,
            avg_typing_speed_ms=550,
            typing_speed_category=TypingSpeedCategory.MODERATE_USER,
            total_sessions=1,
            avg_events_per_session=8,
            usage_frequency=UsageFrequency.LOW,
            topic_affinities=("creative",),
            topics_of_interest=("Data Science", "Machine Learning", "Programming"),
            historical_queries=("write",),
            clicked_suggestions=("write a poem about nature",),
            past_queries="data science course; python pandas tutorial; ml interview questions; sql joins",
            writing_style="Balanced, semi-formal, descriptive",
        ),
        # High CTR, slow typist
        UserProfile(
            user_id="USER_004_MICHAEL",
            market="en-CA",
            ui_language="en",
            region="ca",
            total_events=12,
            clicked_events=4,
            ctr=4 / 12,
            ctr_category=CtrCategory.HIGH,
            avg_typing_speed_ms=1500,
            typing_speed_category=TypingSpeedCategory.OCCASIONAL_USER,
            total_sessions=3,
            avg_events_per_session=4,
            usage_frequency=UsageFrequency.MEDIUM,
            topic_affinities=("technology", "career", "food"),
            topics_of_interest=("Finance", "Investing", "Banking"),
            historical_queries=("how", "help", "best"),
            clicked_suggestions=(
                "how to learn python",
                "help me write a cover letter",
                "best restaurants near me",
            ),
            past_queries="mortgage calculator; credit score check; investment portfolio; retirement planning",
            writing_style="Conversational, question-based",
        ),
        # Very high CTR, very slow typist
        UserProfile(
            user_id="USER_005_EMMA",
            market="en-AU",
            ui_language="en",
            region="au",
            total_events=16,
            clicked_events=10,
            ctr=0.625,
            ctr_category=CtrCategory.VERY_HIGH,
            avg_typing_speed_ms=3000,
            typing_speed_category=TypingSpeedCategory.NEW_USER,
            total_sessions=4,
            avg_events_per_session=4,
            usage_frequency=UsageFrequency.MEDIUM,
            topic_affinities=("creative", "travel", "learning"),
            topics_of_interest=("Product Management", "Agile", "User Research"),
            historical_queries=("create", "plan", "tell", "show"),
            clicked_suggestions=(
                "create an image of a sunset",
                "plan a trip to japan",
                "tell me about climate change",
                "show me how to bake a cake",
            ),
            past_queries="project management tools; agile sprint planning; user research methods; design thinking",
            writing_style="Natural language, task-oriented, detailed",
        ),
    ]
    return {p.user_id: p for p in profiles}
