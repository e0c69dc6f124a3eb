"""Autosuggest package: behavioral profiles and personalized prefix ranking."""

from copilotsuggest.autosuggest.builder import Dataset, DatasetBuilder, DatasetStats
from copilotsuggest.autosuggest.engine import (
    AutosuggestEngine,
    apply_style,
    featured_suggestions,
    get_suggestions,
)
from copilotsuggest.autosuggest.log_parser import parse_log, serialize_log
from copilotsuggest.autosuggest.policy import DEFAULT_CONFIG, derive_config
from copilotsuggest.autosuggest.pool import build_suggestion_pool
from copilotsuggest.autosuggest.profiles import build_user_profiles

__all__ = [
    "AutosuggestEngine",
    "DEFAULT_CONFIG",
    "Dataset",
    "DatasetBuilder",
    "DatasetStats",
    "apply_style",
    "build_suggestion_pool",
    "build_user_profiles",
    "derive_config",
    "featured_suggestions",
    "get_suggestions",
    "parse_log",
    "serialize_log",
]
