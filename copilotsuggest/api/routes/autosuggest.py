"""Autosuggest routes: ranked suggestions and model-generated completions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Request

from copilotsuggest.api.schemas import (
    AISuggestRequest,
    AISuggestResponse,
    AutosuggestResponse,
    ExperienceResponse,
    FeaturedResponse,
    FeaturedSuggestionResponse,
    ProfileSummaryResponse,
    SuggestionResponse,
)
from copilotsuggest.llm.client import LLMError
from copilotsuggest.llm.service import AISuggestionRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/autosuggest", tags=["autosuggest"])


def _enforce_rate_limit(request: Request) -> None:
    rate_limiter = request.app.state.autosuggest_rate_limiter
    client_ip = request.client.host if request.client else "unknown"

    decision = rate_limiter.check(client_ip)
    if not decision.allowed:
        raise HTTPException(
            status_code=429,
            detail=decision.reason,
            headers={"Retry-After": str(int(decision.retry_after) + 1)},
        )


@router.get("", response_model=AutosuggestResponse)
def autosuggest(
    request: Request,
    prefix: str = Query("", max_length=200, description="Text typed so far"),
    user_id: str = Query("", description="User id; empty for a new user"),
) -> AutosuggestResponse:
    """Ranked suggestions for a prefix, adapted to the user's profile."""
    _enforce_rate_limit(request)

    engine = request.app.state.engine
    store = request.app.state.settings_store
    if user_id and not store.get_autosuggest_enabled(user_id):
        result = engine.disabled_result(user_id)
    else:
        result = engine.suggest(user_id, prefix)

    return AutosuggestResponse(
        prefix=prefix,
        enabled=result.enabled,
        suggestions=[SuggestionResponse.from_suggestion(s) for s in result.suggestions],
        style=result.style.value,
        trigger_reason=result.trigger_reason,
        experience=ExperienceResponse.from_experience(result.experience),
        profile=ProfileSummaryResponse(
            ctr_category=result.profile.ctr_category,
            typing_speed=result.profile.typing_speed,
            region=result.profile.region,
        ),
    )


@router.get("/featured", response_model=FeaturedResponse)
def featured(
    request: Request,
    limit: int = Query(4, ge=1, le=16, description="How many prompts to return"),
) -> FeaturedResponse:
    """Shuffled starter prompts for an empty input box."""
    pairs = request.app.state.engine.featured(limit)
    return FeaturedResponse(
        suggestions=[FeaturedSuggestionResponse(text=t, category=c) for t, c in pairs],
    )


@router.post("/ai", response_model=AISuggestResponse)
def ai_autosuggest(request: Request, body: AISuggestRequest) -> AISuggestResponse:
    """Model-generated completions for a prefix, cached for a few minutes."""
    _enforce_rate_limit(request)

    if not body.prefix:
        raise HTTPException(status_code=400, detail="Prefix is required")

    service = request.app.state.ai_service
    try:
        response = service.suggest(AISuggestionRequest(
            prefix=body.prefix,
            max_suggestions=body.max_suggestions,
            style=body.style,
            writing_style=body.writing_style,
            past_queries=body.past_queries,
        ))
    except LLMError as exc:
        logger.error("AI suggestion request failed for %r: %s", body.prefix, exc)
        return AISuggestResponse(suggestions=[], source="error")

    return AISuggestResponse(suggestions=list(response.suggestions), source=response.source)
