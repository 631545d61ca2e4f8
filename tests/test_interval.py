"""Tests for the minimum interval between notifications of a proposal."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.proposal_notifications import (
    latest_created_at,
    may_create,
    next_allowed_at,
)
from app.domain.entities import ProposalNotification


def _notification(proposal_id: int | None, created_at: datetime | None) -> ProposalNotification:
    return ProposalNotification(
        id=None,
        proposal_id=proposal_id,
        title="Update",
        body="We reached the first milestone",
        created_at=created_at,
    )


@pytest.mark.parametrize("minimum_interval_days", [0, 1, 3, 365])
def test_no_history_always_admits(now, minimum_interval_days):
    assert may_create(1, now, minimum_interval_days, []) is True


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (timedelta(0), False),
        (timedelta(seconds=1), False),
        (timedelta(days=2, hours=23, minutes=59, seconds=59), False),
        (timedelta(days=3), True),
        (timedelta(days=3, seconds=1), True),
        (timedelta(days=4), True),
    ],
)
def test_admission_depends_on_elapsed_time(now, elapsed, expected):
    history = [_notification(1, now - elapsed)]

    assert may_create(1, now, 3, history) is expected


def test_zero_interval_admits_immediately(now):
    assert may_create(1, now, 0, [_notification(1, now)]) is True


def test_only_the_most_recent_notification_counts(now):
    history = [
        _notification(1, now - timedelta(days=30)),
        _notification(1, now - timedelta(days=1)),
        _notification(1, now - timedelta(days=10)),
    ]

    assert may_create(1, now, 3, history) is False
    assert latest_created_at(1, history) == now - timedelta(days=1)


def test_notifications_of_other_proposals_are_ignored(now):
    history = [_notification(2, now), _notification(None, now)]

    assert may_create(1, now, 3, history) is True
    assert latest_created_at(1, history) is None


def test_naive_datetimes_are_read_in_app_timezone(now):
    naive_previous = (now - timedelta(days=1)).replace(tzinfo=None)

    assert may_create(1, now, 3, [_notification(1, naive_previous)]) is False


def test_entries_without_creation_time_are_ignored(now):
    assert may_create(1, now, 3, [_notification(1, None)]) is True


def test_offsets_are_compared_as_instants():
    previous = datetime(2024, 5, 1, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
    proposed = datetime(2024, 5, 5, 4, 0, tzinfo=timezone.utc)

    # 2024-05-02T04:00Z + 3 days == proposed
    assert may_create(1, proposed, 3, [_notification(1, previous)]) is True


def test_next_allowed_at(now):
    assert next_allowed_at(None, 3) is None
    assert next_allowed_at(now, 3) == now + timedelta(days=3)
