"""Domain entities exposed by the application."""

from .availability import Availability
from .notification import Notification, NotificationDescription
from .proposal import Proposal
from .proposal_notification import PROPOSAL_NOTIFICATION_TYPE, ProposalNotification

__all__ = [
    "Availability",
    "Notification",
    "NotificationDescription",
    "PROPOSAL_NOTIFICATION_TYPE",
    "Proposal",
    "ProposalNotification",
]
