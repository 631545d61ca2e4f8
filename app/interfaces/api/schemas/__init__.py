from .notification import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)
from .proposal_notification import (
    ProposalNotificationCreate,
    ProposalNotificationDisplayRead,
    ProposalNotificationRead,
)

__all__ = [
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "ProposalNotificationCreate",
    "ProposalNotificationDisplayRead",
    "ProposalNotificationRead",
]
