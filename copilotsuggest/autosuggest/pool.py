"""
Crowd suggestion pool.

Aggregates how often each suggestion was shown and clicked for a given
(normalized) prefix and keeps the best candidates per prefix. The pool
can be persisted to msgpack so a server can start without re-reading
the raw log.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import msgpack

from copilotsuggest.autosuggest.models import LogEntry, SuggestionCandidate

logger = logging.getLogger(__name__)

SuggestionPool = dict[str, list[SuggestionCandidate]]


def normalize_prefix(prefix: str) -> str:
    return prefix.lower().strip()


def build_suggestion_pool(entries: Iterable[LogEntry], top_n: int = 10) -> SuggestionPool:
    """
    Group entries by normalized prefix and rank suggestions by score.

    ``score = count + historical_ctr * 100``. Ties keep first-seen order.
    """
    tallies: dict[str, dict[str, list[int]]] = {}
    for entry in entries:
        prefix = normalize_prefix(entry.prefix)
        if not prefix:
            continue
        stats = tallies.setdefault(prefix, {}).setdefault(entry.suggestion_text, [0, 0])
        stats[0] += 1
        if entry.clicked:
            stats[1] += 1

    pool: SuggestionPool = {}
    for prefix, suggestions in tallies.items():
        candidates = [
            SuggestionCandidate(text=text, count=count, clicks=clicks)
            for text, (count, clicks) in suggestions.items()
        ]
        candidates.sort(key=lambda c: c.score, reverse=True)
        pool[prefix] = candidates[:top_n]

    logger.info("Built suggestion pool: %d prefixes", len(pool))
    return pool


# ---- persistence ----


def save_pool(pool: SuggestionPool, path: Path, source: str = "") -> None:
    """Serialize the pool to a msgpack file, tagged with the log it was built from."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "source": source,
        "prefixes": {
            prefix: [{"t": c.text, "n": c.count, "k": c.clicks} for c in candidates]
            for prefix, candidates in pool.items()
        },
    }
    with open(path, "wb") as f:
        msgpack.pack(data, f)
    logger.info("Saved suggestion pool (%d prefixes) to %s", len(pool), path)


def load_pool_snapshot(path: Path) -> tuple[str, SuggestionPool]:
    """Deserialize a file written by ``save_pool``. Returns ``(source, pool)``."""
    with open(path, "rb") as f:
        data = msgpack.unpack(f, raw=False)
    pool = {
        prefix: [SuggestionCandidate(text=c["t"], count=c["n"], clicks=c["k"]) for c in candidates]
        for prefix, candidates in data["prefixes"].items()
    }
    logger.info("Loaded suggestion pool (%d prefixes) from %s", len(pool), path)
    return data.get("source", ""), pool


def load_pool(path: Path) -> SuggestionPool:
    return load_pool_snapshot(path)[1]
