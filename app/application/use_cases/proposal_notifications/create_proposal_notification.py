"""Use case for publishing a notification about a proposal."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import PROPOSAL_NOTIFICATION_TYPE, ProposalNotification
from app.infrastructure.repositories import ProposalNotificationRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

from ..notifications.add_notification import add_notification
from .validate_proposal_notification import validate_proposal_notification
from .validators import ProposalNotificationValidationError

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


def create_proposal_notification(
    session: Session,
    *,
    proposal_id: int | None,
    title: str | None,
    body: str | None,
    author_id: int | None = None,
    recipient_ids: Iterable[int] = (),
    minimum_interval_days: int | None = None,
    created_at: datetime | None = None,
) -> ProposalNotification:
    """Validate and persist a new proposal notification.

    Raises :class:`ProposalNotificationValidationError` when a required field is
    missing or the proposal was notified less than the minimum interval ago.
    Each id in ``recipient_ids`` receives an in-app notification.
    """

    entity = ProposalNotification(
        id=None,
        proposal_id=proposal_id,
        title=_clean(title),
        body=_clean(body),
        author_id=author_id,
        created_at=ensure_app_timezone(created_at) or now_in_app_timezone(),
    )
    errors = validate_proposal_notification(
        session, entity, minimum_interval_days=minimum_interval_days
    )
    if errors:
        logger.info(
            "Rejected notification for proposal %s: %s", proposal_id, sorted(errors)
        )
        raise ProposalNotificationValidationError(errors)

    # The notification and its in-app fan-out are committed together.
    try:
        saved = ProposalNotificationRepository(session).create(entity, commit=False)
        for recipient_id in dict.fromkeys(recipient_ids):
            add_notification(
                session,
                user_id=recipient_id,
                notifiable_type=PROPOSAL_NOTIFICATION_TYPE,
                notifiable_id=saved.id,
                commit=False,
            )
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Failed to create notification for proposal %s", proposal_id)
        raise

    logger.info("Created notification %s for proposal %s", saved.id, proposal_id)
    return saved


__all__ = ["create_proposal_notification"]
