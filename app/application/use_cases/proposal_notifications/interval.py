"""Minimum-interval rule between notifications of the same proposal."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from app.domain.entities import ProposalNotification
from app.utils import ensure_app_timezone


def latest_created_at(
    proposal_id: int | None, history: Iterable[ProposalNotification]
) -> datetime | None:
    """Return the creation time of the most recent notification of ``proposal_id``."""

    latest: datetime | None = None
    for notification in history:
        if notification.proposal_id != proposal_id or notification.created_at is None:
            continue
        created_at = ensure_app_timezone(notification.created_at)
        if latest is None or created_at > latest:
            latest = created_at
    return latest


def next_allowed_at(latest: datetime | None, minimum_interval_days: int) -> datetime | None:
    """Return the earliest moment a new notification is admitted after ``latest``."""

    if latest is None:
        return None
    return ensure_app_timezone(latest) + timedelta(days=max(minimum_interval_days, 0))


def may_create(
    proposal_id: int | None,
    proposed_created_at: datetime,
    minimum_interval_days: int,
    history: Iterable[ProposalNotification],
) -> bool:
    """Return ``True`` when a notification created at ``proposed_created_at`` is admissible.

    Only the most recent notification of ``proposal_id`` in ``history`` matters.
    The boundary is inclusive: exactly ``minimum_interval_days`` days after the
    previous notification is already allowed.
    """

    if minimum_interval_days <= 0:
        return True

    latest = latest_created_at(proposal_id, history)
    if latest is None:
        return True

    elapsed = ensure_app_timezone(proposed_created_at) - latest
    return elapsed >= timedelta(days=minimum_interval_days)


__all__ = ["latest_created_at", "may_create", "next_allowed_at"]
