"""Pydantic schemas for wishlist endpoints."""

from datetime import datetime
from pydantic import BaseModel, Field


class WishlistCreateRequest(BaseModel):
    name: str
    user_id: str = Field(..., min_length=1)
    venue_ids: list[str] = Field(default_factory=list)


class WishlistRenameRequest(BaseModel):
    name: str


class WishlistVenueRequest(BaseModel):
    venue_id: str = Field(..., min_length=1)


class WishlistResponse(BaseModel):
    id: str
    user_id: str
    name: str
    venue_ids: list[str]
    created_at: datetime
    updated_at: datetime
