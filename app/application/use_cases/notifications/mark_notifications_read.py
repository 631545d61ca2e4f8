"""Use case for marking in-app notifications as read."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository


def mark_notifications_read(
    session: Session, notification_ids: Iterable[int], *, user_id: int
) -> int:
    """Mark the given notifications of ``user_id`` as read and return how many changed."""

    unique_ids = list(dict.fromkeys(notification_ids))
    return NotificationRepository(session).mark_as_read(unique_ids, user_id=user_id)


__all__ = ["mark_notifications_read"]
