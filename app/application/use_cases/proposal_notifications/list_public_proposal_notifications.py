"""Use case for listing the proposal notifications exposed through the API."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ProposalNotification
from app.infrastructure.repositories import (
    ProposalNotificationRepository,
    ProposalRepository,
)

from .visibility import public_subset


def list_public_proposal_notifications(
    session: Session, *, skip: int = 0, limit: int | None = 100
) -> Sequence[ProposalNotification]:
    """Return public notifications, newest first.

    Pagination applies after hidden, retired and orphaned notifications have
    been removed so pages are never short.
    """

    notifications = ProposalNotificationRepository(session).list(limit=None)
    visible = public_subset(notifications, ProposalRepository(session))
    end = None if limit is None else skip + limit
    return visible[skip:end]


__all__ = ["list_public_proposal_notifications"]
