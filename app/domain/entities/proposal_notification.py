"""Domain entity representing a notification published for a proposal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PROPOSAL_NOTIFICATION_TYPE = "ProposalNotification"


@dataclass
class ProposalNotification:
    """Message the author of a proposal sends to the people following it.

    ``proposal_id`` is only ``None`` for records persisted without validation.
    """

    id: int | None
    proposal_id: int | None
    title: str | None
    body: str | None
    author_id: int | None = None
    created_at: datetime | None = None


__all__ = ["PROPOSAL_NOTIFICATION_TYPE", "ProposalNotification"]
