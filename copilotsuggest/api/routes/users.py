"""User profile and per-user settings routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from copilotsuggest.api.schemas import (
    UserDetailResponse,
    UserListResponse,
    UserSettingsResponse,
    UserSettingsUpdate,
    UserSummaryResponse,
)
from copilotsuggest.autosuggest.display import user_display_info
from copilotsuggest.autosuggest.models import UserProfile
from copilotsuggest.autosuggest.policy import derive_config

router = APIRouter(prefix="/users", tags=["users"])


def _require_profile(request: Request, user_id: str) -> UserProfile:
    profile = request.app.state.engine.profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@router.get("", response_model=UserListResponse)
def list_users(request: Request) -> UserListResponse:
    """Known users, demonstration profiles first."""
    users = request.app.state.dataset.users
    return UserListResponse(
        users=[
            UserSummaryResponse(
                user_id=p.user_id,
                ctr=round(p.ctr, 4),
                ctr_category=p.ctr_category.value,
                typing_speed_category=p.typing_speed_category.value,
                region=p.region,
                trigger_mode=derive_config(p).trigger_mode.value,
            )
            for p in users
        ],
        total=len(users),
    )


@router.get("/{user_id}", response_model=UserDetailResponse)
def get_user(request: Request, user_id: str) -> UserDetailResponse:
    """Profile, derived config and display labels for one user."""
    profile = _require_profile(request, user_id)
    return UserDetailResponse.from_profile(
        profile, derive_config(profile), user_display_info(profile),
    )


@router.get("/{user_id}/settings", response_model=UserSettingsResponse)
def get_user_settings(request: Request, user_id: str) -> UserSettingsResponse:
    store = request.app.state.settings_store
    return UserSettingsResponse(
        user_id=user_id,
        autosuggest_enabled=store.get_autosuggest_enabled(user_id),
    )


@router.put("/{user_id}/settings", response_model=UserSettingsResponse)
def update_user_settings(
    request: Request, user_id: str, body: UserSettingsUpdate,
) -> UserSettingsResponse:
    """Switch autosuggest on or off for a user."""
    store = request.app.state.settings_store
    store.set_autosuggest_enabled(user_id, body.autosuggest_enabled)
    return UserSettingsResponse(
        user_id=user_id,
        autosuggest_enabled=store.get_autosuggest_enabled(user_id),
    )
