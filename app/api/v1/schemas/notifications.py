"""Pydantic schemas for notification endpoints."""

from datetime import datetime
from pydantic import BaseModel, Field


class NotificationCreateRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    related_user_id: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    is_read: bool = False


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    type: str
    related_user_id: str
    message: str
    is_read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    unread_count: int


class UnreadCountResponse(BaseModel):
    count: int


class MarkAllReadResponse(BaseModel):
    message: str
    modified_count: int
