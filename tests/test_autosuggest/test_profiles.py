"""Tests for profile derivation."""

from __future__ import annotations

import pytest

from copilotsuggest.autosuggest.demo_profiles import DEMO_USER_IDS
from copilotsuggest.autosuggest.log_parser import parse_log
from copilotsuggest.autosuggest.models import CtrCategory, TypingSpeedCategory, UsageFrequency
from copilotsuggest.autosuggest.profiles import (
    average_typing_delta_ms,
    build_profile,
    build_user_profiles,
    categorize_ctr,
    categorize_typing_speed,
    categorize_usage,
    order_users,
    parse_time_ms,
)
from copilotsuggest.config.settings import AutosuggestSettings
from tests.conftest import SAMPLE_LOG, make_entry


class TestCategorizeCtr:
    @pytest.mark.parametrize(
        "ctr, expected",
        [
            (0.0, CtrCategory.ZERO),
            (0.05, CtrCategory.LOW),
            (0.1, CtrCategory.MEDIUM),
            (0.29, CtrCategory.MEDIUM),
            (0.3, CtrCategory.HIGH),
            (0.59, CtrCategory.HIGH),
            (0.6, CtrCategory.VERY_HIGH),
            (1.0, CtrCategory.VERY_HIGH),
        ],
    )
    def test_boundaries(self, ctr, expected):
        assert categorize_ctr(ctr) is expected


class TestCategorizeTypingSpeed:
    @pytest.mark.parametrize(
        "avg_ms, expected",
        [
            (100, TypingSpeedCategory.POWER_USER),
            (150, TypingSpeedCategory.POWER_USER),
            (151, TypingSpeedCategory.REGULAR_USER),
            (300, TypingSpeedCategory.REGULAR_USER),
            (700, TypingSpeedCategory.MODERATE_USER),
            (2000, TypingSpeedCategory.OCCASIONAL_USER),
            (2001, TypingSpeedCategory.NEW_USER),
        ],
    )
    def test_boundaries(self, avg_ms, expected):
        assert categorize_typing_speed(avg_ms) is expected


class TestCategorizeUsage:
    def test_boundaries(self):
        assert categorize_usage(1) is UsageFrequency.LOW
        assert categorize_usage(2) is UsageFrequency.LOW
        assert categorize_usage(3) is UsageFrequency.MEDIUM
        assert categorize_usage(4) is UsageFrequency.MEDIUM
        assert categorize_usage(5) is UsageFrequency.HIGH


class TestParseTime:
    def test_full(self):
        assert parse_time_ms("01:02:03") == 3_723_000

    def test_missing_parts_are_zero(self):
        assert parse_time_ms("10") == 36_000_000
        assert parse_time_ms("") == 0

    def test_garbage_is_zero(self):
        assert parse_time_ms("ab:cd") == 0


class TestAverageTypingDelta:
    def test_consecutive_events(self):
        entries = [
            make_entry(event_id="E1", time="10:00:00"),
            make_entry(event_id="E2", time="10:00:01"),
            make_entry(event_id="E3", time="10:00:04"),
        ]
        assert average_typing_delta_ms(entries) == 2000

    def test_duplicate_event_rows_count_once(self):
        entries = [
            make_entry(event_id="E1", time="10:00:00"),
            make_entry(event_id="E1", time="10:00:00", suggestion_text="other"),
            make_entry(event_id="E2", time="10:00:02"),
        ]
        assert average_typing_delta_ms(entries) == 2000

    def test_long_gaps_are_pauses(self):
        entries = [
            make_entry(event_id="E1", time="10:00:00"),
            make_entry(event_id="E2", time="10:00:01"),
            make_entry(event_id="E3", time="10:05:00"),
        ]
        assert average_typing_delta_ms(entries) == 1000

    def test_zero_deltas_dropped(self):
        entries = [
            make_entry(event_id="E1", time="10:00:00"),
            make_entry(event_id="E2", time="10:00:00"),
        ]
        assert average_typing_delta_ms(entries, default_ms=500.0) == 500.0

    def test_sessions_are_separate(self):
        entries = [
            make_entry(session_id="S1", event_id="E1", time="10:00:00"),
            make_entry(session_id="S2", event_id="E2", time="10:00:03"),
        ]
        assert average_typing_delta_ms(entries, default_ms=42.0) == 42.0


class TestBuildProfile:
    def test_sample_log(self):
        entries = parse_log(SAMPLE_LOG)
        alice_rows = [e for e in entries if e.user_id == "alice"]
        profile = build_profile("alice", alice_rows, settings=AutosuggestSettings())

        assert profile.total_events == 3
        assert profile.clicked_events == 2
        assert profile.ctr == pytest.approx(2 / 3)
        assert profile.ctr_category is CtrCategory.VERY_HIGH
        assert profile.avg_typing_speed_ms == 1000
        assert profile.typing_speed_category is TypingSpeedCategory.OCCASIONAL_USER
        assert profile.total_sessions == 1
        assert profile.usage_frequency is UsageFrequency.LOW
        assert profile.region == "us"
        assert profile.clicked_suggestions == ("python tutorial", "python tutorial")
        assert profile.topic_affinities == ("technology", "learning")
        assert profile.topics_of_interest == ("Programming",)
        assert profile.historical_queries == ("python",)
        assert profile.writing_style == "Short keyword style"

    def test_short_final_prefix_not_history(self):
        entries = [
            make_entry(event_id="E1", time="10:00:00", prefix="ab"),
            make_entry(event_id="E2", time="10:00:01", prefix="abc"),
        ]
        profile = build_profile("U1", entries, settings=AutosuggestSettings())
        assert profile.historical_queries == ()

    def test_no_clicks_is_zero(self):
        entries = [make_entry(event_id="E1"), make_entry(event_id="E2", time="10:00:01")]
        profile = build_profile("U1", entries, settings=AutosuggestSettings())
        assert profile.ctr == 0.0
        assert profile.ctr_category is CtrCategory.ZERO


class TestBuildUserProfiles:
    def test_includes_demo_profiles(self):
        profiles = build_user_profiles(parse_log(SAMPLE_LOG))
        assert "alice" in profiles
        assert "bob" in profiles
        for uid in DEMO_USER_IDS:
            assert uid in profiles

    def test_without_demo(self):
        profiles = build_user_profiles(parse_log(SAMPLE_LOG), include_demo=False)
        assert set(profiles) == {"alice", "bob"}

    def test_demo_profiles_override_derived(self):
        uid = DEMO_USER_IDS[0]
        entries = [make_entry(user_id=uid, clicked=True)]
        profiles = build_user_profiles(entries)
        assert profiles[uid].ctr_category is CtrCategory.ZERO

    def test_empty_log_gives_only_demo(self):
        assert set(build_user_profiles([])) == set(DEMO_USER_IDS)


class TestOrderUsers:
    def test_demo_first_then_by_id(self):
        profiles = build_user_profiles(parse_log(SAMPLE_LOG))
        ordered = [p.user_id for p in order_users(profiles)]
        assert ordered[: len(DEMO_USER_IDS)] == list(DEMO_USER_IDS)
        assert ordered[len(DEMO_USER_IDS):] == ["alice", "bob"]
