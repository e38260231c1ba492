"""Pydantic schemas for username endpoints."""

from datetime import datetime
from pydantic import BaseModel, Field


class UsernameReserveRequest(BaseModel):
    username: str
    user_id: str = Field(..., min_length=1, max_length=128)


class UsernameUpdateRequest(BaseModel):
    old_username: str
    new_username: str
    user_id: str = Field(..., min_length=1, max_length=128)


class UsernameCheckResponse(BaseModel):
    username: str
    is_available: bool
    message: str


class UsernameResponse(BaseModel):
    id: str
    username: str
    display_username: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class UsernameUpdateResponse(BaseModel):
    message: str
    username: UsernameResponse | None = None
