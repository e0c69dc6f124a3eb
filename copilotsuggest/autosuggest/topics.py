"""
Keyword tables for topic extraction and topic-based ranking boosts.

Declaration order matters: it breaks ties for affinities and decides
which topics of interest make the top three.
"""

from __future__ import annotations

from typing import Iterable

# Buckets matched against clicked suggestion text
AFFINITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": ("python", "javascript", "code", "programming", "api", "software", "computer", "algorithm"),
    "learning": ("learn", "explain", "teach", "understand", "how to", "tutorial", "guide"),
    "travel": ("trip", "travel", "visit", "japan", "paris", "vacation", "destination"),
    "food": ("recipe", "cook", "bake", "food", "meal", "restaurant", "cake"),
    "business": ("startup", "business", "marketing", "sales", "invest", "finance"),
    "creative": ("write", "poem", "story", "image", "create", "design", "art"),
    "health": ("health", "workout", "exercise", "sleep", "diet", "fitness"),
    "career": ("job", "cover letter", "resume", "interview", "career", "professional"),
}

# Named topics matched against writing style + past queries
INTEREST_TOPICS: dict[str, tuple[str, ...]] = {
    "AI": ("ai", "artificial intelligence", "copilot", "machine learning", "ml"),
    "Product Strategy": ("product", "strategy", "roadmap", "planning"),
    "Technology Trends": ("technology", "tech", "future", "trends"),
    "Local News": ("news", "local", "today"),
    "Sports": ("sports", "football", "scores", "game"),
    "Weather": ("weather",),
    "Food": ("food", "restaurants", "recipe", "cook"),
    "Data Science": ("data science", "data", "analytics"),
    "Machine Learning": ("machine learning", "ml", "neural"),
    "Programming": ("programming", "python", "code", "sql", "javascript"),
    "Finance": ("finance", "mortgage", "investment", "portfolio"),
    "Investing": ("investing", "invest", "stocks", "portfolio"),
    "Banking": ("banking", "credit", "bank"),
    "Product Management": ("product management", "project management"),
    "Agile": ("agile", "sprint", "scrum"),
    "User Research": ("user research", "design thinking", "ux"),
}

# Broader keyword lists used when boosting candidates for a topic of interest
BOOST_KEYWORDS: dict[str, tuple[str, ...]] = {
    "AI": ("artificial intelligence", "machine learning", "neural", "copilot", "gpt", "llm", "model"),
    "Product Strategy": ("product", "strategy", "roadmap", "planning", "vision", "market"),
    "Technology Trends": ("technology", "tech", "innovation", "future", "trends", "digital"),
    "Local News": ("news", "local", "today", "breaking", "headlines"),
    "Sports": ("sports", "football", "soccer", "basketball", "scores", "game", "match"),
    "Weather": ("weather", "forecast", "temperature", "rain", "sunny"),
    "Food": ("food", "restaurant", "recipe", "cook", "meal", "eat", "dining"),
    "Data Science": ("data", "analytics", "statistics", "analysis", "insights"),
    "Machine Learning": ("machine learning", "ml", "neural network", "deep learning", "model"),
    "Programming": ("programming", "code", "python", "javascript", "sql", "developer"),
    "Finance": ("finance", "money", "investment", "banking", "mortgage", "loan"),
    "Investing": ("investing", "stocks", "portfolio", "returns", "dividends"),
    "Banking": ("bank", "credit", "account", "savings", "loan"),
    "Product Management": ("product management", "pm", "backlog", "sprint", "requirements"),
    "Agile": ("agile", "scrum", "sprint", "kanban", "iteration"),
    "User Research": ("user research", "ux", "design thinking", "usability", "interview"),
}

MAX_TOPICS = 3


def topic_keywords(topic: str) -> tuple[str, ...]:
    """Boost keywords for *topic*; unknown topics match their own name."""
    return BOOST_KEYWORDS.get(topic, (topic.lower(),))


def extract_topic_affinities(texts: Iterable[str]) -> list[str]:
    """
    Top affinity buckets across *texts*.

    Each text counts at most once per bucket. Ties keep declaration order
    (``sorted`` is stable and the counts dict is built in that order).
    """
    counts: dict[str, int] = {}
    for text in texts:
        lower = text.lower()
        for topic, keywords in AFFINITY_KEYWORDS.items():
            if any(kw in lower for kw in keywords):
                counts[topic] = counts.get(topic, 0) + 1

    ordered = sorted(
        counts.items(),
        key=lambda kv: (-kv[1], list(AFFINITY_KEYWORDS).index(kv[0])),
    )
    return [topic for topic, _ in ordered[:MAX_TOPICS]]


def extract_topics_of_interest(writing_style: str, past_queries: str) -> list[str]:
    """First three topics whose keywords occur in style + past queries."""
    combined = f"{writing_style} {past_queries}".lower()
    topics = [
        topic
        for topic, keywords in INTEREST_TOPICS.items()
        if any(kw in combined for kw in keywords)
    ]
    return topics[:MAX_TOPICS]
