"""Tests for config derivation."""

from __future__ import annotations

import pytest

from copilotsuggest.autosuggest.models import (
    AnimationSpeed,
    CtrCategory,
    SuggestionStyle,
    TriggerMode,
    TypingSpeedCategory,
)
from copilotsuggest.autosuggest.policy import (
    DEFAULT_CONFIG,
    DEFAULT_WRITING_STYLE,
    derive_config,
    derive_style,
)
from tests.conftest import make_profile

MODERATE = TypingSpeedCategory.MODERATE_USER


class TestDefaultConfig:
    def test_none_profile_gets_default(self):
        assert derive_config(None) is DEFAULT_CONFIG

    def test_default_values(self):
        assert DEFAULT_CONFIG.enabled is True
        assert DEFAULT_CONFIG.min_prefix_length == 2
        assert DEFAULT_CONFIG.max_suggestions == 4
        assert DEFAULT_CONFIG.style is SuggestionStyle.NATURAL
        assert DEFAULT_CONFIG.trigger_mode is TriggerMode.INTERVAL
        assert DEFAULT_CONFIG.trigger_every_n_chars == 3
        assert DEFAULT_CONFIG.pause_threshold_ms == 500
        assert DEFAULT_CONFIG.writing_style == DEFAULT_WRITING_STYLE


class TestCtrPolicies:
    @pytest.mark.parametrize(
        "ctr, mode, min_len, max_sugg, every_n, pause_ms",
        [
            (CtrCategory.LOW, TriggerMode.PAUSE, 3, 2, 999, 800),
            (CtrCategory.MEDIUM, TriggerMode.INTERVAL, 2, 3, 4, 500),
            (CtrCategory.HIGH, TriggerMode.INTERVAL, 1, 4, 2, 300),
            (CtrCategory.VERY_HIGH, TriggerMode.CONTINUOUS, 1, 4, 1, 0),
        ],
    )
    def test_base_policy_at_moderate_speed(self, ctr, mode, min_len, max_sugg, every_n, pause_ms):
        config = derive_config(make_profile(ctr_category=ctr, typing_speed_category=MODERATE))
        assert config.trigger_mode is mode
        assert config.min_prefix_length == min_len
        assert config.max_suggestions == max_sugg
        assert config.trigger_every_n_chars == every_n
        assert config.pause_threshold_ms == pause_ms

    @pytest.mark.parametrize("speed", list(TypingSpeedCategory))
    def test_zero_ctr_is_never_satisfiable(self, speed):
        config = derive_config(make_profile(ctr_category=CtrCategory.ZERO, typing_speed_category=speed))
        assert config.trigger_mode is TriggerMode.DISABLED
        assert config.min_prefix_length == 999
        assert config.max_suggestions == 0
        assert config.enabled is True


class TestTypingModifier:
    def test_power_user_switches_to_pause(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.MEDIUM, typing_speed_category=TypingSpeedCategory.POWER_USER,
        ))
        assert config.trigger_mode is TriggerMode.PAUSE
        assert config.pause_threshold_ms == 1000

    def test_regular_user_continuous_becomes_pause(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.VERY_HIGH, typing_speed_category=TypingSpeedCategory.REGULAR_USER,
        ))
        assert config.trigger_mode is TriggerMode.PAUSE
        assert config.pause_threshold_ms == 600

    def test_regular_user_keeps_pause(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.LOW, typing_speed_category=TypingSpeedCategory.REGULAR_USER,
        ))
        assert config.trigger_mode is TriggerMode.PAUSE
        assert config.pause_threshold_ms == 800

    def test_occasional_user_shortens_pause(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.LOW, typing_speed_category=TypingSpeedCategory.OCCASIONAL_USER,
        ))
        assert config.trigger_mode is TriggerMode.PAUSE
        assert config.pause_threshold_ms == 400

    def test_occasional_user_denser_interval(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.HIGH, typing_speed_category=TypingSpeedCategory.OCCASIONAL_USER,
        ))
        assert config.trigger_mode is TriggerMode.INTERVAL
        assert config.trigger_every_n_chars == 1

    def test_new_user_goes_continuous(self):
        config = derive_config(make_profile(
            ctr_category=CtrCategory.LOW, typing_speed_category=TypingSpeedCategory.NEW_USER,
        ))
        assert config.trigger_mode is TriggerMode.CONTINUOUS
        assert config.trigger_every_n_chars == 1
        # Thresholds are never changed by typing speed
        assert config.min_prefix_length == 3
        assert config.max_suggestions == 2


class TestDeriveStyle:
    @pytest.mark.parametrize(
        "writing_style, expected",
        [
            ("Short, keyword-based, technical", SuggestionStyle.KEYWORD),
            ("Search engine queries", SuggestionStyle.SEARCH),
            ("Conversational, question-based", SuggestionStyle.CONVERSATIONAL),
            ("Natural language, task-oriented, detailed", SuggestionStyle.TASK_ORIENTED),
            ("Balanced, semi-formal, descriptive", SuggestionStyle.NATURAL),
            ("", SuggestionStyle.NATURAL),
            ("Something else", SuggestionStyle.NATURAL),
        ],
    )
    def test_rules(self, writing_style, expected):
        assert derive_style(writing_style) is expected

    def test_first_rule_wins(self):
        # "short" is checked before "search"
        assert derive_style("Short, casual, search-engine style") is SuggestionStyle.KEYWORD


class TestExperience:
    def test_zero_ctr_hides_hints(self):
        exp = derive_config(make_profile(ctr_category=CtrCategory.ZERO)).experience
        assert exp.show_position_hints is False
        assert exp.emphasize_top_result is False

    def test_high_ctr_stable_ordering(self):
        exp = derive_config(make_profile(ctr_category=CtrCategory.HIGH)).experience
        assert exp.stable_ordering is True
        assert exp.animation_speed is AnimationSpeed.NORMAL

    def test_slow_typist(self):
        exp = derive_config(make_profile(typing_speed_category=TypingSpeedCategory.NEW_USER)).experience
        assert exp.show_typing_indicator is True
        assert exp.animation_speed is AnimationSpeed.SLOW

    def test_fast_typist(self):
        exp = derive_config(make_profile(typing_speed_category=TypingSpeedCategory.POWER_USER)).experience
        assert exp.show_typing_indicator is False
        assert exp.animation_speed is AnimationSpeed.FAST


class TestProfilePassThrough:
    def test_topics_and_writing_style(self):
        profile = make_profile(topics_of_interest=("Finance",), writing_style="Conversational")
        config = derive_config(profile)
        assert config.topics_of_interest == ("Finance",)
        assert config.writing_style == "Conversational"
