"""Domain entity representing an in-app user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Pointer from a user's inbox to a notifiable resource."""

    id: int | None
    user_id: int
    notifiable_type: str
    notifiable_id: int
    counter: int = 1
    created_at: datetime | None = None
    read_at: datetime | None = None

    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass(frozen=True)
class NotificationDescription:
    """Display metadata computed for a notification at read time."""

    notification: Notification
    notifiable_title: str | None
    notifiable_action: str
    notifiable_available: bool


__all__ = ["Notification", "NotificationDescription"]
