"""Public helpers for in-app notifications."""

from .add_notification import add_notification
from .describe_notification import (
    describe_notification,
    list_user_notifications,
    notifiable_available,
)
from .mark_notifications_read import mark_notifications_read

__all__ = [
    "add_notification",
    "describe_notification",
    "list_user_notifications",
    "mark_notifications_read",
    "notifiable_available",
]
