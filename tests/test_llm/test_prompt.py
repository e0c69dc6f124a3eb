"""Tests for prompt construction and response parsing."""

from __future__ import annotations

from copilotsuggest.llm.prompt import (
    build_messages,
    clean_line,
    parse_suggestions,
    tone_instruction,
    topics_instruction,
)


class TestBuildMessages:
    def test_roles_and_prefix(self):
        messages = build_messages("when is the", 3)
        assert [m["role"] for m in messages] == ["system", "user"]
        assert 'INPUT: "when is the"' in messages[0]["content"]
        assert "OUTPUT 3 SUGGESTIONS:" in messages[0]["content"]
        assert messages[1]["content"] == 'Complete: "when is the"'

    def test_length_follows_style(self):
        keyword = build_messages("x", 4, style="keyword")[0]["content"]
        conversational = build_messages("x", 4, style="conversational")[0]["content"]
        assert "Very short" in keyword
        assert "Detailed (6+ words total)" in conversational

    def test_unknown_style_falls_back_to_natural(self):
        content = build_messages("x", 4, style="task-oriented")[0]["content"]
        assert "Medium length" in content

    def test_tone_and_topics_only_when_given(self):
        bare = build_messages("x", 4)[0]["content"]
        assert "TONE:" not in bare
        assert "TOPICS OF INTEREST" not in bare

        rich = build_messages("x", 4, writing_style="Conversational", past_queries="stocks; bonds")[0]["content"]
        assert "TONE: Conversational" in rich
        assert "TOPICS OF INTEREST: stocks, bonds." in rich


class TestInstructions:
    def test_tone_rules_in_order(self):
        assert tone_instruction("Short, keyword-based").startswith("TONE: Technical")
        assert tone_instruction("casual").startswith("TONE: Casual")
        assert tone_instruction("Balanced, semi-formal").startswith("TONE: Semi-formal")
        assert tone_instruction("question-based").startswith("TONE: Conversational")
        assert tone_instruction("task-oriented").startswith("TONE: Task-oriented")
        assert tone_instruction("whatever") == "TONE: Natural and helpful"

    def test_topics_capped_at_four(self):
        text = topics_instruction("a; b; ; c; d; e")
        assert text == "TOPICS OF INTEREST: a, b, c, d. Consider these when relevant."

    def test_no_topics(self):
        assert topics_instruction(" ; ") == ""


class TestParseSuggestions:
    def test_strips_numbering_bullets_quotes(self):
        assert clean_line(' 1. "how to swim"') == "how to swim"
        assert clean_line("2) how to run") == "how to run"
        assert clean_line("- how to cook") == "how to cook"
        assert clean_line("• how to bake") == "how to bake"

    def test_keeps_prefixed_lines(self):
        content = "How to swim\nhow to run\n\nhow to cook"
        assert parse_suggestions(content, "how to", 4) == ["How to swim", "how to run", "how to cook"]

    def test_prepends_prefix_to_bare_completion(self):
        assert parse_suggestions("swim faster", "how to", 4) == ["how to swim faster"]

    def test_drops_lines_mentioning_prefix_elsewhere(self):
        assert parse_suggestions("learn how to swim", "how to", 4) == []

    def test_limit(self):
        content = "\n".join(f"how to {i}" for i in range(10))
        assert len(parse_suggestions(content, "how to", 3)) == 3
