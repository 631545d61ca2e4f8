"""Tests for in-app notifications that point at proposal notifications."""

from __future__ import annotations

import pytest

from app.application.notifiables import get_notifiable, registered_types
from app.application.use_cases.notifications import (
    add_notification,
    describe_notification,
    list_user_notifications,
    mark_notifications_read,
    notifiable_available,
)
from app.application.use_cases.proposal_notifications import check_availability
from app.domain.entities import (
    PROPOSAL_NOTIFICATION_TYPE,
    Notification,
    Proposal,
    ProposalNotification,
)
from app.infrastructure.repositories import (
    NotificationRepository,
    ProposalNotificationRepository,
    ProposalRepository,
)

USER_ID = 42


@pytest.fixture()
def proposals(session):
    return ProposalRepository(session)


@pytest.fixture()
def proposal(proposals):
    return proposals.create(Proposal(id=None, title="Community garden"))


@pytest.fixture()
def notifiable(session, proposal):
    return ProposalNotificationRepository(session).create(
        ProposalNotification(
            id=None,
            proposal_id=proposal.id,
            title="Volunteers wanted",
            body="Join us on Saturday",
        )
    )


@pytest.fixture()
def notification(session, notifiable):
    return add_notification(
        session,
        user_id=USER_ID,
        notifiable_type=PROPOSAL_NOTIFICATION_TYPE,
        notifiable_id=notifiable.id,
    )


def test_notification_title_is_the_proposal_title(session, notification, proposal):
    assert describe_notification(session, notification).notifiable_title == proposal.title


def test_notification_action(session, notification):
    assert describe_notification(session, notification).notifiable_action == "proposal_notification"


class TestNotifiableAvailable:
    def test_true_when_the_proposal_is_available(self, session, notification):
        assert notifiable_available(session, notification) is True

    def test_false_when_the_proposal_is_deleted(self, session, notification, proposals, proposal):
        proposals.soft_delete(proposal.id)

        assert notifiable_available(session, notification) is False

    def test_false_when_the_notifiable_is_gone(self, session):
        dangling = Notification(
            id=None,
            user_id=USER_ID,
            notifiable_type=PROPOSAL_NOTIFICATION_TYPE,
            notifiable_id=999,
        )

        description = describe_notification(session, dangling)

        assert description.notifiable_available is False
        assert description.notifiable_title is None


class TestCheckAvailability:
    def test_true_if_present_not_hidden_nor_retired(self, proposals, proposal):
        assert check_availability(proposal, proposals) is True

    def test_false_if_not_present(self, proposals, proposal):
        proposals.really_destroy(proposal.id)

        assert check_availability(proposal, proposals) is False

    def test_false_if_hidden(self, proposals, proposal):
        proposals.hide(proposal.id)

        assert check_availability(proposal, proposals) is False

    def test_false_if_retired(self, proposals, proposal):
        proposals.retire(proposal.id)

        assert check_availability(proposal, proposals) is False


def test_repeated_events_increment_the_unread_notification(session, notification, notifiable):
    again = add_notification(
        session,
        user_id=USER_ID,
        notifiable_type=PROPOSAL_NOTIFICATION_TYPE,
        notifiable_id=notifiable.id,
    )

    assert again.id == notification.id
    assert again.counter == 2


def test_read_notifications_are_not_reused(session, notification, notifiable):
    mark_notifications_read(session, [notification.id], user_id=USER_ID)

    fresh = add_notification(
        session,
        user_id=USER_ID,
        notifiable_type=PROPOSAL_NOTIFICATION_TYPE,
        notifiable_id=notifiable.id,
    )

    assert fresh.id != notification.id
    assert fresh.counter == 1


def test_mark_as_read_only_touches_the_owner(session, notification):
    assert mark_notifications_read(session, [notification.id], user_id=USER_ID + 1) == 0
    assert mark_notifications_read(session, [notification.id, notification.id], user_id=USER_ID) == 1
    assert NotificationRepository(session).get(notification.id).is_read()


def test_list_user_notifications_describes_each_entry(session, notification, proposals, proposal):
    proposals.hide(proposal.id)

    descriptions = list_user_notifications(session, USER_ID)

    assert [d.notification.id for d in descriptions] == [notification.id]
    assert descriptions[0].notifiable_available is False
    assert list_user_notifications(session, USER_ID + 1) == []


def test_list_user_notifications_skips_unknown_types(session, notification):
    NotificationRepository(session).create(
        Notification(id=None, user_id=USER_ID, notifiable_type="Poll", notifiable_id=1)
    )

    descriptions = list_user_notifications(session, USER_ID)

    assert [d.notification.id for d in descriptions] == [notification.id]


def test_unread_only_filter(session, notification):
    mark_notifications_read(session, [notification.id], user_id=USER_ID)

    assert list_user_notifications(session, USER_ID, unread_only=True) == []
    assert len(list_user_notifications(session, USER_ID)) == 1


def test_registry():
    assert PROPOSAL_NOTIFICATION_TYPE in registered_types()
    assert get_notifiable(PROPOSAL_NOTIFICATION_TYPE).action == "proposal_notification"
    with pytest.raises(KeyError):
        get_notifiable("Unknown")
