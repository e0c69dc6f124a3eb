"""Tests for candidate ranking."""

from __future__ import annotations

import random

import pytest

from copilotsuggest.autosuggest.completions import FEATURED_SUGGESTIONS, SYNTHETIC_COMPLETIONS
from copilotsuggest.autosuggest.demo_profiles import demo_profiles
from copilotsuggest.autosuggest.engine import (
    AutosuggestEngine,
    apply_style,
    best_synthetic_key,
    featured_suggestions,
    gather_candidates,
    get_suggestions,
    personalization_boost,
)
from copilotsuggest.autosuggest.models import (
    CtrCategory,
    SuggestionCandidate,
    SuggestionSource,
    SuggestionStyle,
    TypingSpeedCategory,
)
from tests.conftest import make_profile

MODERATE = TypingSpeedCategory.MODERATE_USER


class TestScenarios:
    def test_zero_ctr_user_gets_nothing(self):
        profiles = {"z": make_profile("z", ctr_category=CtrCategory.ZERO)}
        result = get_suggestions("z", "explain ai", profiles, {}, {})
        assert result.enabled is True
        assert result.suggestions == ()
        assert result.trigger_reason.startswith("prefix_too_short")
        assert "999" in result.trigger_reason

    def test_crowd_candidate_ranks_first(self):
        profiles = {"v": make_profile("v", ctr_category=CtrCategory.VERY_HIGH, typing_speed_category=MODERATE)}
        pool = {"exp": [SuggestionCandidate(text="explain quantum computing", count=4, clicks=2)]}
        result = get_suggestions("v", "exp", profiles, pool, {}, synthetic_table={})
        top = result.suggestions[0]
        assert top.text == "explain quantum computing"
        assert top.position == 1
        assert top.score == 108
        assert top.source is SuggestionSource.CROWD

    def test_longest_synthetic_key_wins(self):
        result = get_suggestions("", "how to b", {}, {}, {})
        texts = [s.text for s in result.suggestions]
        assert texts == SYNTHETIC_COMPLETIONS["how to b"][:4]
        assert all(s.source is SuggestionSource.SYNTHETIC for s in result.suggestions)

    def test_topic_keyword_breaks_tie(self):
        profiles = {"f": make_profile("f", topics_of_interest=("Finance",))}
        pool = {
            "be": [
                SuggestionCandidate(text="best running shoes", count=1, clicks=0),
                SuggestionCandidate(text="best investment apps", count=1, clicks=0),
            ]
        }
        result = get_suggestions("f", "be", profiles, pool, {}, synthetic_table={})
        texts = [s.text for s in result.suggestions]
        assert texts.index("best investment apps") < texts.index("best running shoes")
        assert result.suggestions[0].score > result.suggestions[1].score


class TestGetSuggestions:
    def test_new_user_uses_default_config(self):
        result = get_suggestions("nobody", "how", {}, {}, {})
        assert result.enabled is True
        assert len(result.suggestions) <= 4
        assert result.trigger_reason == "new_user, prefix_len=3"
        assert result.profile.ctr_category == "unknown"

    def test_below_min_prefix(self):
        result = get_suggestions("", "h", {}, {}, {})
        assert result.suggestions == ()
        assert result.trigger_reason == "prefix_too_short (need 2+ chars)"

    def test_prefix_is_trimmed_and_lowercased(self):
        a = get_suggestions("", "  HOW TO B ", {}, {}, {})
        b = get_suggestions("", "how to b", {}, {}, {})
        assert [s.text for s in a.suggestions] == [s.text for s in b.suggestions]

    def test_max_suggestions_respected(self):
        profiles = {"m": make_profile("m", ctr_category=CtrCategory.MEDIUM, typing_speed_category=MODERATE)}
        result = get_suggestions("m", "how to", profiles, {}, {})
        assert len(result.suggestions) == 3
        assert [s.position for s in result.suggestions] == [1, 2, 3]

    def test_scores_descending(self):
        profiles = demo_profiles()
        result = get_suggestions("USER_005_EMMA", "how", profiles, {}, {})
        scores = [s.score for s in result.suggestions]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize("prefix", ["how", "how to b", "what is", "exp", "can", "write a"])
    @pytest.mark.parametrize("user_id", ["", "USER_003_PRIYA", "USER_004_MICHAEL", "USER_005_EMMA"])
    def test_every_suggestion_starts_with_prefix(self, prefix, user_id):
        engine = AutosuggestEngine(demo_profiles(), {})
        for s in engine.suggest(user_id, prefix).suggestions:
            assert s.text.lower().startswith(prefix)

    def test_deterministic(self):
        engine = AutosuggestEngine(demo_profiles(), {})
        assert engine.suggest("USER_004_MICHAEL", "how") == engine.suggest("USER_004_MICHAEL", "how")

    def test_conversational_style_applied(self):
        profiles = {
            "c": make_profile(
                "c",
                ctr_category=CtrCategory.HIGH,
                typing_speed_category=MODERATE,
                writing_style="Conversational, question-based",
            )
        }
        pool = {"how do": [SuggestionCandidate(text="how do magnets work", count=1, clicks=0)]}
        result = get_suggestions("c", "how do", profiles, pool, {}, synthetic_table={})
        assert result.style is SuggestionStyle.CONVERSATIONAL
        assert result.suggestions[0].text == "how do magnets work?"

    def test_reason_describes_profile(self):
        profiles = {"m": make_profile("m")}
        result = get_suggestions("m", "how", profiles, {}, {})
        assert result.trigger_reason == "ctr=medium, speed=moderate_user, style=natural, prefix_len=3"


class TestGatherCandidates:
    def test_case_insensitive_dedupe_keeps_first(self):
        pool = {"how": [SuggestionCandidate(text="How To Cook Rice", count=1, clicks=0)]}
        synthetic = {"how": ["how to cook rice", "how to swim"]}
        candidates = gather_candidates("how", pool, {}, synthetic)
        assert [c.text for c in candidates] == ["How To Cook Rice", "how to swim"]
        assert candidates[0].source is SuggestionSource.CROWD

    def test_synthetic_scores_step_down(self):
        synthetic = {"how": ["how a", "how b", "how c"]}
        candidates = gather_candidates("how", {}, {}, synthetic)
        assert [c.score for c in candidates] == [80, 70, 60]

    def test_base_table_matches_either_direction(self):
        base = {"ho": ["house prices", "hotels"], "how do": ["how do i fix this"]}
        texts = [c.text for c in gather_candidates("ho", {}, base, {})]
        assert texts == ["house prices", "hotels", "how do i fix this"]

    def test_base_scores(self):
        base = {"how": ["how a", "how b"]}
        candidates = gather_candidates("how", {}, base, {})
        assert [c.score for c in candidates] == [50, 45]

    def test_non_matching_text_dropped(self):
        base = {"how": ["How do I?", "Where is it?"]}
        texts = [c.text for c in gather_candidates("how", {}, base, {})]
        assert texts == ["How do I?"]


class TestBestSyntheticKey:
    def test_exact_key(self):
        assert best_synthetic_key("how to be", SYNTHETIC_COMPLETIONS) == "how to be"

    def test_longest_typed_past_key(self):
        assert best_synthetic_key("how to bx", SYNTHETIC_COMPLETIONS) == "how to b"

    def test_extension_only_falls_back_to_table_order(self):
        assert best_synthetic_key("ho", {"how to": [], "how": []}) == "how to"

    def test_no_match(self):
        assert best_synthetic_key("zzz", SYNTHETIC_COMPLETIONS) is None


class TestApplyStyle:
    def test_search_strips_question_mark(self):
        assert apply_style("how do i cook?", SuggestionStyle.SEARCH) == "how do i cook"

    def test_conversational_adds_question_mark(self):
        assert apply_style("what is ai", SuggestionStyle.CONVERSATIONAL) == "what is ai?"
        assert apply_style("Can you help", SuggestionStyle.CONVERSATIONAL) == "Can you help?"

    def test_conversational_leaves_statements(self):
        assert apply_style("best laptops", SuggestionStyle.CONVERSATIONAL) == "best laptops"
        assert apply_style("why not?", SuggestionStyle.CONVERSATIONAL) == "why not?"

    @pytest.mark.parametrize(
        "style", [SuggestionStyle.KEYWORD, SuggestionStyle.NATURAL, SuggestionStyle.TASK_ORIENTED],
    )
    def test_identity_styles(self, style):
        assert apply_style("How does it work?", style) == "How does it work?"


class TestPersonalizationBoost:
    def test_no_topics_no_boost(self):
        assert personalization_boost("anything", make_profile()) == 0

    def test_topic_name_and_keywords(self):
        profile = make_profile(topics_of_interest=("Weather",))
        # topic name (30) + keyword "weather" (15) + keyword "forecast" (15)
        assert personalization_boost("weather forecast", profile) == 60

    def test_affinity(self):
        profile = make_profile(topic_affinities=("travel",))
        assert personalization_boost("travel tips", profile) == 20

    def test_history_overlap(self):
        profile = make_profile(historical_queries=("python tricks",))
        assert personalization_boost("python basics", profile) == 10


class TestAutosuggestEngine:
    def test_disabled_result(self):
        engine = AutosuggestEngine(demo_profiles(), {})
        result = engine.disabled_result("USER_005_EMMA")
        assert result.enabled is False
        assert result.suggestions == ()
        assert result.trigger_reason == "disabled_for_user"

    def test_profile_and_config(self):
        engine = AutosuggestEngine(demo_profiles(), {})
        assert engine.profile("missing") is None
        assert engine.config("missing").max_suggestions == 4
        assert engine.profile("USER_002_JAMES").region == "gb"

    def test_featured_uses_engine_rng(self):
        a = AutosuggestEngine({}, {}, rng=random.Random(7))
        b = AutosuggestEngine({}, {}, rng=random.Random(7))
        assert a.featured(4) == b.featured(4)


class TestFeaturedSuggestions:
    def test_limit_and_membership(self):
        picked = featured_suggestions(4, random.Random(1))
        assert len(picked) == 4
        assert len(set(picked)) == 4
        assert all(p in FEATURED_SUGGESTIONS for p in picked)

    def test_limit_above_table_size_returns_all(self):
        picked = featured_suggestions(100, random.Random(1))
        assert sorted(picked) == sorted(FEATURED_SUGGESTIONS)

    def test_zero_limit(self):
        assert featured_suggestions(0) == []

    def test_table_has_categories(self):
        assert len(FEATURED_SUGGESTIONS) == 16
        assert all(text and category for text, category in FEATURED_SUGGESTIONS)
