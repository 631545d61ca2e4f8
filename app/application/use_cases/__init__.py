"""Aggregate application use cases."""

from .proposal_notifications import (
    create_proposal_notification,
    get_proposal_notification,
    list_public_proposal_notifications,
)

__all__ = [
    "create_proposal_notification",
    "get_proposal_notification",
    "list_public_proposal_notifications",
]
