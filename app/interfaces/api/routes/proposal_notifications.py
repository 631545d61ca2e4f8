"""Routes for publishing and reading proposal notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.notifiables import proposal_notification_notifiable
from app.application.use_cases.proposal_notifications import (
    ProposalNotificationDisplay,
    ProposalNotificationValidationError,
    create_proposal_notification as create_proposal_notification_uc,
    get_proposal_notification as get_proposal_notification_uc,
    list_public_proposal_notifications as list_public_proposal_notifications_uc,
)
from app.domain.entities import ProposalNotification
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ProposalNotificationCreate,
    ProposalNotificationDisplayRead,
    ProposalNotificationRead,
)

router = APIRouter(prefix="/proposal-notifications", tags=["proposal-notifications"])

logger = logging.getLogger(__name__)


def _to_read_model(notification: ProposalNotification) -> ProposalNotificationRead:
    return ProposalNotificationRead.model_validate(notification)


def _to_display_model(display: ProposalNotificationDisplay) -> ProposalNotificationDisplayRead:
    notification = display.notification
    return ProposalNotificationDisplayRead(
        id=notification.id or 0,
        proposal_id=notification.proposal_id,
        title=display.title,
        body=display.body,
        available=display.available,
        availability=display.availability,
        proposal_title=display.proposal_title,
        action=proposal_notification_notifiable.action,
        created_at=notification.created_at,
    )


@router.post(
    "/", response_model=ProposalNotificationRead, status_code=status.HTTP_201_CREATED
)
def publish_proposal_notification(
    payload: ProposalNotificationCreate,
    db: Session = Depends(get_db),
) -> ProposalNotificationRead:
    """Publish a notification unless the proposal was notified too recently."""

    try:
        notification = create_proposal_notification_uc(
            db,
            proposal_id=payload.proposal_id,
            title=payload.title,
            body=payload.body,
            author_id=payload.author_id,
            recipient_ids=payload.recipient_ids,
        )
    except ProposalNotificationValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "errors": exc.errors},
        ) from exc
    return _to_read_model(notification)


@router.get("/", response_model=list[ProposalNotificationRead])
def list_public_proposal_notifications(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[ProposalNotificationRead]:
    """Return notifications whose proposal is visible, newest first."""

    notifications = list_public_proposal_notifications_uc(db, skip=skip, limit=limit)
    return [_to_read_model(notification) for notification in notifications]


@router.get("/{notification_id}", response_model=ProposalNotificationDisplayRead)
def get_proposal_notification(
    notification_id: int,
    db: Session = Depends(get_db),
) -> ProposalNotificationDisplayRead:
    """Return a notification, masking its content if the proposal is gone."""

    try:
        display = get_proposal_notification_uc(db, notification_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if not display.available:
        logger.debug(
            "Notification %s rendered as unavailable (%s)",
            notification_id,
            display.availability.value,
        )
    return _to_display_model(display)
