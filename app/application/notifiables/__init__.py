"""Resource kinds that in-app notifications can refer to."""

from .base import Notifiable, get_notifiable, register_notifiable, registered_types
from .proposal_notification import (
    ProposalNotificationNotifiable,
    proposal_notification_notifiable,
)

__all__ = [
    "Notifiable",
    "ProposalNotificationNotifiable",
    "get_notifiable",
    "proposal_notification_notifiable",
    "register_notifiable",
    "registered_types",
]
