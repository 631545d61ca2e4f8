"""Pydantic models describing proposal notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Availability


class ProposalNotificationCreate(BaseModel):
    """Payload used to publish a notification about a proposal.

    Presence of ``proposal_id``, ``title`` and ``body`` and the title length are
    checked by the use case so that every failure is reported with the same
    error structure.
    """

    model_config = ConfigDict(extra="forbid")

    proposal_id: int | None = None
    title: str | None = None
    body: str | None = None
    author_id: int | None = None
    recipient_ids: list[int] = Field(
        default_factory=list,
        description="Users that receive an in-app notification",
    )


class ProposalNotificationRead(BaseModel):
    """Representation of a stored proposal notification."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    proposal_id: int | None
    author_id: int | None = None
    title: str | None
    body: str | None
    created_at: datetime


class ProposalNotificationDisplayRead(BaseModel):
    """Notification content as it may be rendered given its proposal's state."""

    id: int
    proposal_id: int | None
    title: str
    body: str | None
    available: bool
    availability: Availability
    proposal_title: str | None = None
    action: str
    created_at: datetime


__all__ = [
    "ProposalNotificationCreate",
    "ProposalNotificationDisplayRead",
    "ProposalNotificationRead",
]
