"""Filter proposal notifications down to the ones safe to expose publicly."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import Availability, ProposalNotification

from .availability import ProposalLookup, resolve_availability


def public_subset(
    notifications: Iterable[ProposalNotification], lookup: ProposalLookup
) -> list[ProposalNotification]:
    """Return the notifications whose proposal is currently available.

    Notifications without a proposal reference are always dropped. The input
    order is preserved and each proposal is looked up at most once per call.
    """

    resolved: dict[int, Availability] = {}
    subset: list[ProposalNotification] = []
    for notification in notifications:
        proposal_id = notification.proposal_id
        if proposal_id is None:
            continue
        if proposal_id not in resolved:
            resolved[proposal_id] = resolve_availability(proposal_id, lookup)
        if resolved[proposal_id] is Availability.AVAILABLE:
            subset.append(notification)
    return subset


__all__ = ["public_subset"]
