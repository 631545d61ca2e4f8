"""Integration tests for the proposal notification endpoints."""

from __future__ import annotations

from datetime import timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.application.notifiables import proposal_notification_notifiable
from app.application.use_cases.settings import MINIMUM_INTERVAL_SETTING
from app.domain.entities import Proposal, ProposalNotification
from app.infrastructure.repositories import (
    ProposalNotificationRepository,
    ProposalRepository,
    SettingRepository,
)
from app.utils import now_in_app_timezone


@pytest.fixture()
def client(session):
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def proposal(session):
    SettingRepository(session).set(MINIMUM_INTERVAL_SETTING, 3)
    return ProposalRepository(session).create(Proposal(id=None, title="Solar panels"))


def _payload(proposal_id, **overrides):
    payload = {
        "proposal_id": proposal_id,
        "title": "Thanks for the support",
        "body": "We are halfway to the goal",
    }
    payload.update(overrides)
    return payload


def test_publish_and_list(client: TestClient, proposal) -> None:
    response = client.post("/proposal-notifications/", json=_payload(proposal.id))
    assert response.status_code == 201
    created = response.json()
    assert created["proposal_id"] == proposal.id
    assert created["title"] == "Thanks for the support"

    listing = client.get("/proposal-notifications/")
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()] == [created["id"]]


def test_publish_rejects_missing_fields(client: TestClient, proposal) -> None:
    response = client.post(
        "/proposal-notifications/", json=_payload(None, title="", body=None)
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert set(errors) == {"proposal", "title", "body"}


def test_publish_rejects_over_long_title(client: TestClient, proposal) -> None:
    response = client.post(
        "/proposal-notifications/", json=_payload(proposal.id, title="x" * 121)
    )

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {
        "title": ["is too long (maximum is 120 characters)"]
    }
    assert client.get("/proposal-notifications/").json() == []


def test_publish_rejects_notifications_within_interval(client: TestClient, proposal) -> None:
    first = client.post("/proposal-notifications/", json=_payload(proposal.id))
    assert first.status_code == 201

    second = client.post("/proposal-notifications/", json=_payload(proposal.id))

    assert second.status_code == 422
    assert "minimum_interval" in second.json()["detail"]["errors"]


def test_publish_allowed_after_interval(client: TestClient, session, proposal) -> None:
    ProposalNotificationRepository(session).create(
        ProposalNotification(
            id=None,
            proposal_id=proposal.id,
            title="Earlier",
            body="Earlier update",
            created_at=now_in_app_timezone() - timedelta(days=4),
        )
    )

    response = client.post("/proposal-notifications/", json=_payload(proposal.id))

    assert response.status_code == 201


def test_listing_hides_notifications_of_hidden_proposals(
    client: TestClient, session, proposal
) -> None:
    created = client.post("/proposal-notifications/", json=_payload(proposal.id)).json()
    ProposalRepository(session).hide(proposal.id)

    listing = client.get("/proposal-notifications/")

    assert created["id"] not in [item["id"] for item in listing.json()]


def test_detail_shows_placeholder_for_unavailable_proposals(
    client: TestClient, session, proposal
) -> None:
    created = client.post("/proposal-notifications/", json=_payload(proposal.id)).json()

    visible = client.get(f"/proposal-notifications/{created['id']}").json()
    assert visible["available"] is True
    assert visible["availability"] == "available"
    assert visible["body"] == "We are halfway to the goal"
    assert visible["proposal_title"] == "Solar panels"
    assert visible["action"] == "proposal_notification"
    assert visible["action"] == proposal_notification_notifiable.action

    ProposalRepository(session).retire(proposal.id)

    retired = client.get(f"/proposal-notifications/{created['id']}").json()
    assert retired["available"] is False
    assert retired["availability"] == "hidden"
    assert retired["body"] is None


def test_detail_of_destroyed_proposal(client: TestClient, session, proposal) -> None:
    created = client.post("/proposal-notifications/", json=_payload(proposal.id)).json()
    ProposalRepository(session).really_destroy(proposal.id)

    response = client.get(f"/proposal-notifications/{created['id']}")

    assert response.status_code == 200
    assert response.json()["availability"] == "absent"


def test_detail_not_found(client: TestClient) -> None:
    response = client.get("/proposal-notifications/999")

    assert response.status_code == 404
