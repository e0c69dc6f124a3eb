"""
Behavioral log parsing.

The log is comma-separated text with a header row. Columns, in order:

    UserId, PreviousQuery, Prefix, Market, UiLanguage, Region, Time,
    CVID, EventId, Position, Suggestion, SuggestionClick, PastQueries,
    WritingStyle

Fields may be wrapped in double quotes to carry the separator. The
tokenizer is deliberately simple: a quote toggles the in-quotes flag and
is dropped, and the separator only splits outside quotes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from copilotsuggest.autosuggest.models import LogEntry

logger = logging.getLogger(__name__)

HEADER = (
    "UserId",
    "PreviousQuery",
    "Prefix",
    "Market",
    "UiLanguage",
    "Region",
    "Time",
    "CVID",
    "EventId",
    "Position",
    "Suggestion",
    "SuggestionClick",
    "PastQueries",
    "WritingStyle",
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def split_row(line: str, separator: str = ",") -> list[str]:
    """Split one row into trimmed fields, honoring double-quoted sections."""
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == separator and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    values.append("".join(current).strip())
    return values


def _parse_position(raw: str) -> int:
    """Leading integer of *raw*; 1 when absent, unparseable or zero."""
    match = _LEADING_INT.match(raw)
    if not match:
        return 1
    return int(match.group(1)) or 1


def _field(values: list[str], index: int) -> str:
    return values[index] if index < len(values) else ""


def parse_row(line: str) -> LogEntry:
    """Turn one data row into a LogEntry, defaulting missing fields."""
    v = split_row(line.rstrip("\r"))
    return LogEntry(
        user_id=_field(v, 0),
        previous_query=_field(v, 1),
        prefix=_field(v, 2),
        market=_field(v, 3),
        ui_language=_field(v, 4),
        region=_field(v, 5),
        time=_field(v, 6),
        session_id=_field(v, 7),
        event_id=_field(v, 8),
        position=_parse_position(_field(v, 9)),
        suggestion_text=_field(v, 10),
        clicked=_field(v, 11).lower() == "true",
        past_queries=_field(v, 12),
        writing_style=_field(v, 13),
    )


def parse_log(raw: str) -> list[LogEntry]:
    """
    Parse raw log text into entries.

    The first non-blank line is the header and is skipped. Blank lines
    are ignored. Malformed rows never raise: missing fields become ``""``.
    """
    lines = [line for line in raw.strip().splitlines() if line.strip()]
    if not lines:
        return []

    entries = [parse_row(line) for line in lines[1:]]
    logger.debug("Parsed %d log rows", len(entries))
    return entries


def load_log(path: Path) -> list[LogEntry]:
    """Read and parse a log file."""
    entries = parse_log(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d log rows from %s", len(entries), path)
    return entries


def _quote(value: str, separator: str) -> str:
    if separator in value:
        return f'"{value}"'
    return value


def serialize_log(entries: Iterable[LogEntry], separator: str = ",") -> str:
    """Render entries back to log text (header included)."""
    lines = [separator.join(HEADER)]
    for e in entries:
        fields = [
            e.user_id,
            e.previous_query,
            e.prefix,
            e.market,
            e.ui_language,
            e.region,
            e.time,
            e.session_id,
            e.event_id,
            str(e.position),
            e.suggestion_text,
            "true" if e.clicked else "false",
            e.past_queries,
            e.writing_style,
        ]
        lines.append(separator.join(_quote(f, separator) for f in fields))
    return "\n".join(lines) + "\n"
