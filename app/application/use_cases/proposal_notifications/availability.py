"""Resolve whether the proposal behind a notification can still be shown."""

from __future__ import annotations

from typing import Protocol

from app.domain.entities import Availability, Proposal


class ProposalLookup(Protocol):
    """Anything able to fetch the current state of a proposal by id.

    Implementations return ``None`` for proposals that never existed and for
    soft- or hard-deleted ones alike.
    """

    def get(self, proposal_id: int) -> Proposal | None:
        ...


def availability_of(proposal: Proposal | None) -> Availability:
    """Classify an already fetched proposal."""

    if proposal is None or proposal.is_deleted():
        return Availability.ABSENT
    # Retirement blocks visibility exactly like moderation does.
    if proposal.is_hidden() or proposal.is_retired():
        return Availability.HIDDEN
    return Availability.AVAILABLE


def resolve_availability(proposal_id: int | None, lookup: ProposalLookup) -> Availability:
    """Return the :class:`Availability` of the proposal identified by ``proposal_id``."""

    if proposal_id is None:
        return Availability.ABSENT
    return availability_of(lookup.get(proposal_id))


def is_available(proposal_id: int | None, lookup: ProposalLookup) -> bool:
    return resolve_availability(proposal_id, lookup) is Availability.AVAILABLE


def check_availability(resource: Proposal | int | None, lookup: ProposalLookup) -> bool:
    """Return ``True`` if ``resource`` is present, not hidden and not retired.

    ``resource`` may be an id or a previously fetched :class:`Proposal`. Snapshots
    are re-fetched by id so a stale copy of a deleted proposal is never trusted.
    """

    proposal_id = resource.id if isinstance(resource, Proposal) else resource
    return is_available(proposal_id, lookup)


__all__ = [
    "ProposalLookup",
    "availability_of",
    "check_availability",
    "is_available",
    "resolve_availability",
]
