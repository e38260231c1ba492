"""Pydantic schemas for profile endpoints."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ProfileFields(BaseModel):
    """Editable profile fields. Unknown keys in the payload are dropped."""

    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    bio: str | None = None
    profile_image_url: str | None = None
    skill_level: float = Field(0.0, ge=0, allow_inf_nan=False)
    skill_tier: str | None = None
    preferred_location: str | None = None
    preferred_game_types: list[str] = Field(default_factory=list)
    availability: dict[str, list[str]] = Field(default_factory=dict)


class ProfileCreateRequest(ProfileFields):
    """Request body for creating a profile."""
    user_id: str = Field(..., min_length=1, max_length=128)


class ProfileUpsertRequest(ProfileFields):
    """Request body for PUT /profiles/{user_id}; user_id must match the path if given."""
    user_id: str | None = None


class ProfileResponse(ProfileFields):
    """Single profile record."""

    user_id: str
    created_at: datetime
    updated_at: datetime


class ProfileListResponse(BaseModel):
    total: int
    profiles: list[ProfileResponse]
