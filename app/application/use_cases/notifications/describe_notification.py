"""Use case computing the display metadata of in-app notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.notifiables import get_notifiable
from app.domain.entities import Notification, NotificationDescription
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def describe_notification(
    session: Session, notification: Notification
) -> NotificationDescription:
    """Resolve the title, action label and availability of ``notification``."""

    notifiable = get_notifiable(notification.notifiable_type)
    resource = notifiable.fetch(session, notification.notifiable_id)
    return NotificationDescription(
        notification=notification,
        notifiable_title=notifiable.title(session, resource),
        notifiable_action=notifiable.action,
        notifiable_available=notifiable.is_available(session, resource),
    )


def list_user_notifications(
    session: Session,
    user_id: int,
    *,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[NotificationDescription]:
    """Return the described notifications of ``user_id``, newest first."""

    repository = NotificationRepository(session)
    if unread_only:
        notifications = repository.list_unread_for_user(user_id, limit=limit)
    else:
        notifications = repository.list_for_user(user_id, limit=limit)

    descriptions: list[NotificationDescription] = []
    for notification in notifications:
        try:
            descriptions.append(describe_notification(session, notification))
        except KeyError:
            logger.warning(
                "Skipping notification %s with unknown type %s",
                notification.id,
                notification.notifiable_type,
            )
    return descriptions


def notifiable_available(session: Session, notification: Notification) -> bool:
    return describe_notification(session, notification).notifiable_available


__all__ = ["describe_notification", "list_user_notifications", "notifiable_available"]
