"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .proposal import ProposalModel
from .proposal_notification import ProposalNotificationModel
from .setting import SettingModel

__all__ = [
    "NotificationModel",
    "ProposalModel",
    "ProposalNotificationModel",
    "SettingModel",
]
