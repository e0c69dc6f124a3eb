"""Client-side trigger logic: when to show suggestions and when to fetch AI ones."""

from copilotsuggest.trigger.controller import PauseTimerState, TriggerController, TriggerState
from copilotsuggest.trigger.fetcher import AISuggestionFetcher, HttpSuggestionTransport
from copilotsuggest.trigger.scheduler import ManualScheduler, ThreadingScheduler

__all__ = [
    "AISuggestionFetcher",
    "HttpSuggestionTransport",
    "ManualScheduler",
    "PauseTimerState",
    "ThreadingScheduler",
    "TriggerController",
    "TriggerState",
]
