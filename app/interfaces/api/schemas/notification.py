"""Pydantic models describing in-app notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    user_id: int
    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationMarkReadResponse(BaseModel):
    updated: int


class NotificationRead(BaseModel):
    """Representation of an in-app notification delivered to the client."""

    id: int
    user_id: int
    notifiable_type: str
    notifiable_id: int
    counter: int
    created_at: datetime
    read_at: datetime | None = None
    notifiable_title: str | None = None
    notifiable_action: str
    notifiable_available: bool


__all__ = ["NotificationMarkReadRequest", "NotificationMarkReadResponse", "NotificationRead"]
