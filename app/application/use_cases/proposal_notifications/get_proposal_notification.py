"""Use case for displaying a single proposal notification."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Availability, ProposalNotification
from app.infrastructure.repositories import (
    ProposalNotificationRepository,
    ProposalRepository,
)

from .availability import availability_of

UNAVAILABLE_PLACEHOLDER = "This content is no longer available"


@dataclass(frozen=True)
class ProposalNotificationDisplay:
    """What a client may render for a notification given its proposal's state."""

    notification: ProposalNotification
    availability: Availability
    proposal_title: str | None

    @property
    def available(self) -> bool:
        return self.availability is Availability.AVAILABLE

    @property
    def title(self) -> str:
        if not self.available:
            return UNAVAILABLE_PLACEHOLDER
        return self.notification.title or ""

    @property
    def body(self) -> str | None:
        if not self.available:
            return None
        return self.notification.body


def get_proposal_notification(
    session: Session, notification_id: int
) -> ProposalNotificationDisplay:
    """Return the display decision for ``notification_id`` or raise an error."""

    notification = ProposalNotificationRepository(session).get(notification_id)
    if notification is None:
        raise ValueError("Proposal notification not found")

    proposal = (
        ProposalRepository(session).get(notification.proposal_id)
        if notification.proposal_id is not None
        else None
    )
    availability = availability_of(proposal)
    return ProposalNotificationDisplay(
        notification=notification,
        availability=availability,
        proposal_title=proposal.title if availability is Availability.AVAILABLE else None,
    )


__all__ = [
    "ProposalNotificationDisplay",
    "UNAVAILABLE_PLACEHOLDER",
    "get_proposal_notification",
]
