"""Validation helpers for proposal notification use cases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from app.domain.entities import ProposalNotification
from app.utils import now_in_app_timezone

from .availability import ProposalLookup
from .interval import latest_created_at, may_create, next_allowed_at

BLANK_MESSAGE = "can't be blank"
MISSING_PROPOSAL_MESSAGE = "must exist"
TITLE_MAX_LENGTH = 120
TOO_LONG_MESSAGE = f"is too long (maximum is {TITLE_MAX_LENGTH} characters)"


class ProposalNotificationValidationError(ValueError):
    """Raised when a proposal notification cannot be created."""

    def __init__(self, errors: Mapping[str, Iterable[str]]) -> None:
        self.errors: dict[str, list[str]] = {
            field: list(messages) for field, messages in errors.items()
        }
        summary = "; ".join(
            f"{field} {message}"
            for field, messages in self.errors.items()
            for message in messages
        )
        super().__init__(summary or "Invalid proposal notification")


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def minimum_interval_message(minimum_interval_days: int) -> str:
    return (
        f"You have to wait a minimum of {minimum_interval_days} days "
        "between notifications"
    )


def collect_required_field_errors(
    notification: ProposalNotification, lookup: ProposalLookup | None = None
) -> dict[str, list[str]]:
    """Return the errors of the title, body and proposal fields."""

    errors: dict[str, list[str]] = {}
    if _is_blank(notification.title):
        errors.setdefault("title", []).append(BLANK_MESSAGE)
    elif len(notification.title) > TITLE_MAX_LENGTH:
        errors.setdefault("title", []).append(TOO_LONG_MESSAGE)
    if _is_blank(notification.body):
        errors.setdefault("body", []).append(BLANK_MESSAGE)
    if notification.proposal_id is None:
        errors.setdefault("proposal", []).append(MISSING_PROPOSAL_MESSAGE)
    elif lookup is not None and lookup.get(notification.proposal_id) is None:
        errors.setdefault("proposal", []).append(MISSING_PROPOSAL_MESSAGE)
    return errors


def collect_interval_errors(
    notification: ProposalNotification,
    *,
    history: Iterable[ProposalNotification],
    minimum_interval_days: int,
) -> dict[str, list[str]]:
    """Return the error caused by a notification sent too soon after the last one."""

    if notification.proposal_id is None:
        return {}

    history = list(history)
    proposed_created_at: datetime = notification.created_at or now_in_app_timezone()
    if may_create(
        notification.proposal_id, proposed_created_at, minimum_interval_days, history
    ):
        return {}

    message = minimum_interval_message(minimum_interval_days)
    allowed_at = next_allowed_at(
        latest_created_at(notification.proposal_id, history), minimum_interval_days
    )
    if allowed_at is not None:
        message = f"{message} (next notification allowed after {allowed_at.isoformat()})"
    return {"minimum_interval": [message]}


def ensure_valid_proposal_notification(
    notification: ProposalNotification,
    *,
    history: Iterable[ProposalNotification],
    minimum_interval_days: int,
    lookup: ProposalLookup | None = None,
) -> None:
    """Raise :class:`ProposalNotificationValidationError` if ``notification`` is invalid."""

    errors = collect_required_field_errors(notification, lookup)
    errors.update(
        collect_interval_errors(
            notification, history=history, minimum_interval_days=minimum_interval_days
        )
    )
    if errors:
        raise ProposalNotificationValidationError(errors)


__all__ = [
    "BLANK_MESSAGE",
    "MISSING_PROPOSAL_MESSAGE",
    "TITLE_MAX_LENGTH",
    "TOO_LONG_MESSAGE",
    "ProposalNotificationValidationError",
    "collect_interval_errors",
    "collect_required_field_errors",
    "ensure_valid_proposal_notification",
    "minimum_interval_message",
]
