"""Notifiable capability backed by proposal notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.application.use_cases.proposal_notifications.availability import is_available
from app.domain.entities import PROPOSAL_NOTIFICATION_TYPE, ProposalNotification
from app.infrastructure.repositories import (
    ProposalNotificationRepository,
    ProposalRepository,
)

from .base import register_notifiable


class ProposalNotificationNotifiable:
    """Expose proposal notifications to the in-app notification inbox.

    The title shown is the one of the proposal the notification was sent for,
    and the notification is only available while that proposal is.
    """

    notifiable_type = PROPOSAL_NOTIFICATION_TYPE
    action = "proposal_notification"

    def fetch(self, session: Session, notifiable_id: int) -> ProposalNotification | None:
        return ProposalNotificationRepository(session).get(notifiable_id)

    def title(self, session: Session, resource: ProposalNotification | None) -> str | None:
        if resource is None or resource.proposal_id is None:
            return None
        proposal = ProposalRepository(session).get(resource.proposal_id)
        return proposal.title if proposal else None

    def is_available(self, session: Session, resource: ProposalNotification | None) -> bool:
        if resource is None:
            return False
        return is_available(resource.proposal_id, ProposalRepository(session))


proposal_notification_notifiable = register_notifiable(ProposalNotificationNotifiable())


__all__ = ["ProposalNotificationNotifiable", "proposal_notification_notifiable"]
