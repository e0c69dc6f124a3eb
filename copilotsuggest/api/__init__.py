"""REST API: ranked suggestions, AI completions, user profiles and settings."""

from copilotsuggest.api.app import create_app
from copilotsuggest.api.cache import TTLCache
from copilotsuggest.api.rate_limiter import RateLimitDecision, RateLimiter

__all__ = [
    "create_app",
    "RateLimitDecision",
    "RateLimiter",
    "TTLCache",
]
