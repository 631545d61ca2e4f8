"""Endpoints for the in-app notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    list_user_notifications,
    mark_notifications_read,
)
from app.domain.entities import NotificationDescription
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(description: NotificationDescription) -> NotificationRead:
    notification = description.notification
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        notifiable_type=notification.notifiable_type,
        notifiable_id=notification.notifiable_id,
        counter=notification.counter,
        created_at=notification.created_at,
        read_at=notification.read_at,
        notifiable_title=description.notifiable_title,
        notifiable_action=description.notifiable_action,
        notifiable_available=description.notifiable_available,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    user_id: int = Query(..., ge=1),
    unread_only: bool = Query(False),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the most recent notifications of ``user_id``."""

    descriptions = list_user_notifications(db, user_id, unread_only=unread_only)
    return [_notification_to_schema(description) for description in descriptions]


@router.post("/read", response_model=NotificationMarkReadResponse)
def mark_as_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
) -> NotificationMarkReadResponse:
    """Mark a batch of notifications as read."""

    updated = mark_notifications_read(db, payload.unique_ids(), user_id=payload.user_id)
    return NotificationMarkReadResponse(updated=updated)
