"""Notification endpoints — list, create, mark read, and delete user alerts."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.session import get_db
from app.models.notification import Notification
from app.api.v1.schemas.notifications import (
    MarkAllReadResponse,
    NotificationCreateRequest,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["Notifications"])


def _to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=str(notification.id),
        user_id=notification.user_id,
        type=notification.type,
        related_user_id=notification.related_user_id,
        message=notification.message,
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


def _get_notification_or_404(db: Session, notification_id: str) -> Notification:
    try:
        key = uuid.UUID(notification_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")

    notification = db.get(Notification, key)
    if not notification:
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")
    return notification


def _unread_count(db: Session, user_id: str) -> int:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .count()
    )


@router.get("/{user_id}", response_model=NotificationListResponse)
def list_notifications(
    user_id: str,
    unread_only: bool = Query(False, description="Only return unread notifications"),
    limit: int | None = Query(None, ge=1, description="Maximum number of notifications"),
    db: Session = Depends(get_db),
):
    """List a user's notifications, newest first."""
    if limit is None:
        limit = get_settings().default_notification_limit

    query = db.query(Notification).filter(Notification.user_id == user_id)
    if unread_only:
        query = query.filter(Notification.is_read.is_(False))

    notifications = query.order_by(Notification.created_at.desc()).limit(limit).all()

    return NotificationListResponse(
        notifications=[_to_response(n) for n in notifications],
        unread_count=_unread_count(db, user_id),
    )


@router.post("", response_model=NotificationResponse, status_code=201)
def create_notification(
    request: NotificationCreateRequest,
    db: Session = Depends(get_db),
):
    """Create a notification for a user."""
    notification = Notification(
        user_id=request.user_id,
        type=request.type,
        related_user_id=request.related_user_id,
        message=request.message,
        is_read=request.is_read,
    )
    db.add(notification)
    db.commit()
    db.refresh(notification)

    return _to_response(notification)


@router.get("/{user_id}/unread-count", response_model=UnreadCountResponse)
def get_unread_count(user_id: str, db: Session = Depends(get_db)):
    """Number of unread notifications for a user."""
    return UnreadCountResponse(count=_unread_count(db, user_id))


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(notification_id: str, db: Session = Depends(get_db)):
    """Mark a single notification as read."""
    notification = _get_notification_or_404(db, notification_id)
    notification.is_read = True
    db.commit()
    db.refresh(notification)

    return _to_response(notification)


@router.patch("/{user_id}/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_read(user_id: str, db: Session = Depends(get_db)):
    """Mark every unread notification of a user as read."""
    modified = (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .update({Notification.is_read: True}, synchronize_session=False)
    )
    db.commit()

    return MarkAllReadResponse(
        message=f"Marked {modified} notifications as read",
        modified_count=modified,
    )


@router.delete("/{notification_id}")
def delete_notification(notification_id: str, db: Session = Depends(get_db)):
    """Delete a notification."""
    notification = _get_notification_or_404(db, notification_id)
    db.delete(notification)
    db.commit()

    return {"message": "Notification deleted successfully"}
