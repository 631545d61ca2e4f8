"""Use case for checking a proposal notification before it is saved."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import ProposalNotification
from app.infrastructure.repositories import (
    ProposalNotificationRepository,
    ProposalRepository,
)
from app.utils import now_in_app_timezone

from ..settings import get_minimum_interval_days
from .validators import ProposalNotificationValidationError, ensure_valid_proposal_notification


def validate_proposal_notification(
    session: Session,
    notification: ProposalNotification,
    *,
    minimum_interval_days: int | None = None,
) -> dict[str, list[str]]:
    """Return the validation errors of an unsaved ``notification``.

    An empty mapping means the notification may be created. When
    ``minimum_interval_days`` is omitted the runtime setting is used.
    """

    if minimum_interval_days is None:
        minimum_interval_days = get_minimum_interval_days(session)
    if notification.created_at is None:
        notification.created_at = now_in_app_timezone()

    history = (
        ProposalNotificationRepository(session).list_for_proposal(notification.proposal_id)
        if notification.proposal_id is not None
        else []
    )
    try:
        ensure_valid_proposal_notification(
            notification,
            history=history,
            minimum_interval_days=minimum_interval_days,
            lookup=ProposalRepository(session),
        )
    except ProposalNotificationValidationError as exc:
        return exc.errors
    return {}


def is_valid_proposal_notification(
    session: Session,
    notification: ProposalNotification,
    *,
    minimum_interval_days: int | None = None,
) -> bool:
    return not validate_proposal_notification(
        session, notification, minimum_interval_days=minimum_interval_days
    )


__all__ = ["is_valid_proposal_notification", "validate_proposal_notification"]
