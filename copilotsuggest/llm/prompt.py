"""Prompt construction and response parsing for AI prefix completions."""

from __future__ import annotations

import re

_LENGTH_INSTRUCTIONS = {
    "keyword": (
        'LENGTH: Very short (2-4 words total). Examples for "when is the":\n'
        "- when is the superbowl\n"
        "- when is the election\n"
        "- when is the deadline"
    ),
    "natural": (
        'LENGTH: Medium length (4-6 words total). Examples for "when is the":\n'
        "- when is the next full moon\n"
        "- when is the best time to buy\n"
        "- when is the deadline for taxes"
    ),
    "conversational": (
        'LENGTH: Detailed (6+ words total). Examples for "when is the":\n'
        "- when is the best time to visit japan for cherry blossoms\n"
        "- when is the right time to start investing in stocks\n"
        "- when is the deadline for submitting my tax return this year"
    ),
}

# (trigger words in the writing-style description, tone instruction)
_TONE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("keyword", "technical"),
        'TONE: Technical and precise. Use industry terms. Examples: "python syntax error fix", '
        '"API authentication methods", "machine learning model training"',
    ),
    (
        ("casual", "search-engine"),
        'TONE: Casual and simple. Like everyday web searches. Examples: "weather tomorrow", '
        '"best restaurants nearby", "cheap flights to london"',
    ),
    (
        ("semi-formal", "descriptive"),
        'TONE: Semi-formal and descriptive. Professional but clear. Examples: '
        '"comprehensive guide to investing", "step by step python tutorial", '
        '"best practices for interviews"',
    ),
    (
        ("conversational", "question"),
        'TONE: Conversational and question-like. Natural spoken language. Examples: '
        '"how do I improve my credit score", "what are the best ways to save", '
        '"should I invest in stocks"',
    ),
    (
        ("natural language", "task-oriented", "detailed"),
        'TONE: Task-oriented and detailed. Like asking an assistant for help. Examples: '
        '"help me plan a trip to europe next summer", '
        '"show me how to create a budget spreadsheet", '
        '"explain the difference between stocks and bonds"',
    ),
)

MAX_TOPIC_HINTS = 4

_NUMBERING = re.compile(r"^\d+[.)]\s*")
_BULLET = re.compile(r"^[-•*]\s*")
_QUOTES = re.compile(r"^[\"']|[\"']$")
_WHITESPACE = re.compile(r"\s+")


def tone_instruction(writing_style: str) -> str:
    lowered = writing_style.lower()
    for words, instruction in _TONE_RULES:
        if any(w in lowered for w in words):
            return instruction
    return "TONE: Natural and helpful"


def topics_instruction(past_queries: str) -> str:
    topics = [q.strip() for q in past_queries.split(";") if q.strip()]
    if not topics:
        return ""
    return f"TOPICS OF INTEREST: {', '.join(topics[:MAX_TOPIC_HINTS])}. Consider these when relevant."


def build_messages(
    prefix: str,
    max_suggestions: int,
    style: str = "natural",
    writing_style: str = "",
    past_queries: str = "",
) -> list[dict[str, str]]:
    """
    Chat messages asking the model for ``max_suggestions`` completions of
    ``prefix``. Length guidance follows ``style`` (unknown styles fall back
    to ``natural``); tone follows the user's writing-style description.
    """
    tone = tone_instruction(writing_style) if writing_style else ""
    sections = [
        f"You are a search autocomplete engine. Complete the user's query with "
        f"{max_suggestions} popular, realistic suggestions.",
        f'INPUT: "{prefix}"',
        _LENGTH_INSTRUCTIONS.get(style, _LENGTH_INSTRUCTIONS["natural"]),
        tone,
        topics_instruction(past_queries),
        "RULES:\n"
        f'1. Every suggestion MUST start exactly with "{prefix}" - copy it exactly, '
        "including any trailing spaces\n"
        "2. Complete with real, commonly searched queries\n"
        "3. Make each suggestion unique and useful\n"
        f"4. Output ONLY the {max_suggestions} complete suggestions, one per line\n"
        "5. No numbers, bullets, or explanations",
        f"OUTPUT {max_suggestions} SUGGESTIONS:",
    ]
    system = "\n\n".join(s for s in sections if s)
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": f'Complete: "{prefix}"'},
    ]


def clean_line(line: str) -> str:
    line = line.strip()
    line = _NUMBERING.sub("", line)
    line = _BULLET.sub("", line)
    return _QUOTES.sub("", line)


def parse_suggestions(content: str, prefix: str, max_suggestions: int) -> list[str]:
    """
    Turn raw model output into at most ``max_suggestions`` completions.

    Lines that already start with the prefix (case-insensitive) are kept as
    is. Lines that do not mention the prefix at all are treated as bare
    completions and get the prefix prepended. Anything else is dropped.
    """
    normalized = prefix.strip().lower()
    results: list[str] = []

    for raw in content.splitlines():
        if len(results) >= max_suggestions:
            break
        line = clean_line(raw)
        if not line:
            continue
        lowered = line.lower()
        if lowered.startswith(normalized):
            results.append(line)
        elif normalized not in lowered:
            results.append(_WHITESPACE.sub(" ", f"{prefix} {line}").strip())

    return results
