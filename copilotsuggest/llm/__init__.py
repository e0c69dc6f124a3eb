"""AI completion boundary: prompt building, model client, cached service."""

from copilotsuggest.llm.client import LLMClient, LLMError
from copilotsuggest.llm.service import AISuggestionRequest, AISuggestionResponse, AISuggestionService

__all__ = [
    "AISuggestionRequest",
    "AISuggestionResponse",
    "AISuggestionService",
    "LLMClient",
    "LLMError",
]
