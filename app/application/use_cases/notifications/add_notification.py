"""Use case for adding a resource to a user's in-app notifications."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def add_notification(
    session: Session,
    *,
    user_id: int,
    notifiable_type: str,
    notifiable_id: int,
    commit: bool = True,
) -> Notification:
    """Notify ``user_id`` about a resource.

    A user keeps a single unread notification per resource; repeated events
    bump its ``counter`` instead of creating new rows. With ``commit=False`` the
    change is only flushed so the caller can commit it with other writes.
    """

    repository = NotificationRepository(session)
    existing = repository.get_unread_for_notifiable(
        user_id=user_id, notifiable_type=notifiable_type, notifiable_id=notifiable_id
    )
    if existing is not None:
        logger.debug(
            "Incrementing notification %s for user %s", existing.id, user_id
        )
        return repository.update(
            replace(existing, counter=existing.counter + 1), commit=commit
        )

    return repository.create(
        Notification(
            id=None,
            user_id=user_id,
            notifiable_type=notifiable_type,
            notifiable_id=notifiable_id,
            counter=1,
            created_at=now_in_app_timezone(),
            read_at=None,
        ),
        commit=commit,
    )


__all__ = ["add_notification"]
