"""Domain entity representing a proposal that notifications report on."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Proposal:
    """Snapshot of a proposal as seen by the notification core.

    Proposals are authored and moderated elsewhere; this service only reads
    their visibility state. A proposal is hidden when ``hidden_at`` is set,
    retired when ``retired_at`` is set and soft-deleted when ``deleted_at`` is
    set. Hard-deleted proposals no longer have a row at all.
    """

    id: int | None
    title: str
    hidden_at: datetime | None = None
    retired_at: datetime | None = None
    deleted_at: datetime | None = None
    created_at: datetime | None = None

    def is_hidden(self) -> bool:
        """Return ``True`` when a moderator has hidden the proposal."""

        return self.hidden_at is not None

    def is_retired(self) -> bool:
        """Return ``True`` when the proposal has been administratively retired."""

        return self.retired_at is not None

    def is_deleted(self) -> bool:
        return self.deleted_at is not None


__all__ = ["Proposal"]
