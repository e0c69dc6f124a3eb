"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from copilotsuggest.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return statistics of the loaded dataset."""
    dataset = request.app.state.dataset
    return StatsResponse(
        total_entries=dataset.stats.total_entries,
        total_users=dataset.stats.total_users,
        total_sessions=dataset.stats.total_sessions,
        total_suggestions=dataset.stats.total_suggestions,
        pool_prefixes=len(request.app.state.pool),
    )
