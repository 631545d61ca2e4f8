"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .proposal_notification_repository import ProposalNotificationRepository
from .proposal_repository import ProposalRepository
from .setting_repository import SettingRepository

__all__ = [
    "NotificationRepository",
    "ProposalNotificationRepository",
    "ProposalRepository",
    "SettingRepository",
]
