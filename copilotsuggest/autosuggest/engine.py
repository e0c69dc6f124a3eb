"""
Candidate ranking engine.

For a typed prefix, gathers candidates from three sources (crowd pool,
synthetic completion table, caller-supplied base table), boosts them
with the user's topics and history, sorts, truncates to the user's
``max_suggestions`` and applies the user's suggestion style.

Everything here is synchronous and side-effect free, so it can run on
every keystroke.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from copilotsuggest.autosuggest.completions import (
    BASE_SUGGESTIONS,
    FEATURED_SUGGESTIONS,
    SYNTHETIC_COMPLETIONS,
)
from copilotsuggest.autosuggest.models import (
    AutosuggestConfig,
    AutosuggestResult,
    ProfileSummary,
    Suggestion,
    SuggestionCandidate,
    SuggestionSource,
    SuggestionStyle,
    UserProfile,
)
from copilotsuggest.autosuggest.policy import derive_config
from copilotsuggest.autosuggest.pool import normalize_prefix
from copilotsuggest.autosuggest.topics import topic_keywords

logger = logging.getLogger(__name__)

CROWD_WEIGHT = 2
SYNTHETIC_BASE_SCORE = 80
SYNTHETIC_STEP = 10
BASE_TABLE_SCORE = 50
BASE_TABLE_STEP = 5

_INTERROGATIVE_OPENERS = ("how", "what", "why", "can you")


@dataclass
class _Candidate:
    text: str
    score: float
    source: SuggestionSource


def apply_style(text: str, style: SuggestionStyle) -> str:
    """
    Rephrase *text* for the user's suggestion style.

    Only ``search`` and ``conversational`` change anything; the other
    styles are identity transforms.
    """
    if style is SuggestionStyle.SEARCH:
        return text[:-1] if text.endswith("?") else text
    if style is SuggestionStyle.CONVERSATIONAL:
        if text.lower().startswith(_INTERROGATIVE_OPENERS) and not text.endswith("?"):
            return text + "?"
    return text


def _summary(profile: Optional[UserProfile]) -> ProfileSummary:
    if profile is None:
        return ProfileSummary()
    return ProfileSummary(
        ctr_category=profile.ctr_category.value,
        typing_speed=profile.typing_speed_category.value,
        region=profile.region or "unknown",
    )


def best_synthetic_key(prefix: str, table: Mapping[str, list[str]]) -> Optional[str]:
    """
    Pick the table key to complete *prefix* from.

    Keys qualify when either one starts with the other. Among them the
    longest key the user has already typed past wins; keys that merely
    extend the prefix rank after those, in table order.
    """
    matching = [k for k in table if prefix.startswith(k) or k.startswith(prefix)]
    if not matching:
        return None
    matching.sort(key=lambda k: len(k) if prefix.startswith(k) else 0, reverse=True)
    return matching[0]


class _CandidateList:
    """Ordered candidates with case-insensitive de-duplication."""

    def __init__(self) -> None:
        self.items: list[_Candidate] = []
        self._seen: set[str] = set()

    def add(self, text: str, score: float, source: SuggestionSource) -> None:
        key = text.lower()
        if key in self._seen:
            return
        self._seen.add(key)
        self.items.append(_Candidate(text=text, score=score, source=source))


def gather_candidates(
    prefix: str,
    pool: Mapping[str, list[SuggestionCandidate]],
    base_table: Mapping[str, list[str]],
    synthetic_table: Mapping[str, list[str]] = SYNTHETIC_COMPLETIONS,
) -> list[_Candidate]:
    """Collect crowd, synthetic and base candidates that start with *prefix*."""
    candidates = _CandidateList()

    for c in pool.get(prefix, []):
        if c.text.lower().startswith(prefix):
            candidates.add(c.text, c.score * CROWD_WEIGHT, SuggestionSource.CROWD)

    key = best_synthetic_key(prefix, synthetic_table)
    if key is not None:
        for idx, text in enumerate(synthetic_table[key]):
            if text.lower().startswith(prefix):
                candidates.add(text, SYNTHETIC_BASE_SCORE - idx * SYNTHETIC_STEP, SuggestionSource.SYNTHETIC)

    for base_prefix, texts in base_table.items():
        if not (prefix.startswith(base_prefix) or base_prefix.startswith(prefix)):
            continue
        for idx, text in enumerate(texts):
            if text.lower().startswith(prefix):
                candidates.add(text, BASE_TABLE_SCORE - idx * BASE_TABLE_STEP, SuggestionSource.BASE)

    return candidates.items


def personalization_boost(text: str, profile: UserProfile) -> float:
    """Score bonus for *text* from the profile's topics and query history."""
    lower = text.lower()
    boost = 0.0

    for idx, topic in enumerate(profile.topics_of_interest):
        if topic.lower() in lower:
            boost += 30 - idx * 8
        for keyword in topic_keywords(topic):
            if keyword.lower() in lower:
                boost += 15 - idx * 3

    for idx, affinity in enumerate(profile.topic_affinities):
        if affinity in lower:
            boost += 20 - idx * 5

    # Loose overlap on the first five characters, either direction
    for query in profile.historical_queries:
        q = query.lower()
        if q[:5] in lower or lower[:5] in q:
            boost += 10

    return boost


def _empty_result(config: AutosuggestConfig, reason: str, profile: Optional[UserProfile], enabled: bool = True) -> AutosuggestResult:
    return AutosuggestResult(
        enabled=enabled,
        suggestions=(),
        style=config.style,
        trigger_reason=reason,
        experience=config.experience,
        profile=_summary(profile),
    )


def get_suggestions(
    user_id: str,
    prefix: str,
    profiles: Mapping[str, UserProfile],
    pool: Mapping[str, list[SuggestionCandidate]],
    base_table: Mapping[str, list[str]],
    synthetic_table: Mapping[str, list[str]] = SYNTHETIC_COMPLETIONS,
) -> AutosuggestResult:
    """
    Ranked, styled suggestions for *prefix* as typed by *user_id*.

    Unknown users get the default config. A prefix shorter than the
    config's minimum (always the case for a zero-CTR user) yields an
    empty, enabled result whose ``trigger_reason`` names the gate.
    """
    profile = profiles.get(user_id)
    config = derive_config(profile)
    normalized = normalize_prefix(prefix)

    if len(normalized) < config.min_prefix_length:
        return _empty_result(
            config,
            f"prefix_too_short (need {config.min_prefix_length}+ chars)",
            profile,
        )

    candidates = gather_candidates(normalized, pool, base_table, synthetic_table)

    if profile is not None:
        for c in candidates:
            c.score += personalization_boost(c.text, profile)

    # list.sort is stable: equal scores keep gathering order
    candidates.sort(key=lambda c: c.score, reverse=True)
    top = candidates[: config.max_suggestions]

    suggestions = []
    for position, c in enumerate(top, start=1):
        styled = apply_style(c.text, config.style)
        if not styled.lower().startswith(normalized):
            styled = c.text
        suggestions.append(Suggestion(text=styled, position=position, score=c.score, source=c.source))

    if profile is not None:
        reason = (
            f"ctr={profile.ctr_category.value}, "
            f"speed={profile.typing_speed_category.value}, "
            f"style={config.style.value}, "
            f"prefix_len={len(normalized)}"
        )
    else:
        reason = f"new_user, prefix_len={len(normalized)}"

    return AutosuggestResult(
        enabled=True,
        suggestions=tuple(suggestions),
        style=config.style,
        trigger_reason=reason,
        experience=config.experience,
        profile=_summary(profile),
    )


def featured_suggestions(
    limit: int,
    rng: Optional[random.Random] = None,
    table: Sequence[tuple[str, str]] = FEATURED_SUGGESTIONS,
) -> list[tuple[str, str]]:
    """Up to *limit* featured prompts in random order, for an empty input."""
    if limit <= 0:
        return []
    rng = rng or random.Random()
    return rng.sample(list(table), min(limit, len(table)))


class AutosuggestEngine:
    """
    Ranking service bound to one loaded dataset.

    Holds the derived profiles and crowd pool so request handlers only
    pass the user id and prefix.
    """

    def __init__(
        self,
        profiles: Mapping[str, UserProfile],
        pool: Mapping[str, list[SuggestionCandidate]],
        base_table: Optional[Mapping[str, list[str]]] = None,
        synthetic_table: Optional[Mapping[str, list[str]]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._profiles = profiles
        self._pool = pool
        self._base_table = base_table if base_table is not None else BASE_SUGGESTIONS
        self._synthetic_table = synthetic_table if synthetic_table is not None else SYNTHETIC_COMPLETIONS
        self._rng = rng or random.Random()

    @property
    def profiles(self) -> Mapping[str, UserProfile]:
        return self._profiles

    def profile(self, user_id: str) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    def config(self, user_id: str) -> AutosuggestConfig:
        return derive_config(self._profiles.get(user_id))

    def suggest(self, user_id: str, prefix: str) -> AutosuggestResult:
        result = get_suggestions(
            user_id,
            prefix,
            self._profiles,
            self._pool,
            self._base_table,
            self._synthetic_table,
        )
        logger.debug(
            "Suggest user=%s prefix=%r -> %d (%s)",
            user_id, prefix, len(result.suggestions), result.trigger_reason,
        )
        return result

    def disabled_result(self, user_id: str) -> AutosuggestResult:
        """Result for a user who switched autosuggest off."""
        profile = self._profiles.get(user_id)
        return _empty_result(derive_config(profile), "disabled_for_user", profile, enabled=False)

    def featured(self, limit: int) -> list[tuple[str, str]]:
        """Shuffled featured prompts as ``(text, category)`` pairs."""
        return featured_suggestions(limit, self._rng)
