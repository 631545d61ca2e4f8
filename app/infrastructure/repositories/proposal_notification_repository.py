"""Persistence helpers for proposal notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.domain.entities import ProposalNotification
from app.infrastructure.models import ProposalNotificationModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ProposalNotificationRepository:
    """Store and query :class:`ProposalNotification` objects.

    Notifications are immutable once written, so there is no update operation.
    ``create`` performs no validation of its own; callers that need the
    business rules go through the creation use case.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> ProposalNotification | None:
        model = self.session.get(ProposalNotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list(self, *, skip: int = 0, limit: int | None = 100) -> Sequence[ProposalNotification]:
        query = self.session.query(ProposalNotificationModel).order_by(
            desc(ProposalNotificationModel.created_at), desc(ProposalNotificationModel.id)
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_proposal(self, proposal_id: int) -> Sequence[ProposalNotification]:
        query = (
            self.session.query(ProposalNotificationModel)
            .filter(ProposalNotificationModel.proposal_id == proposal_id)
            .order_by(
                desc(ProposalNotificationModel.created_at),
                desc(ProposalNotificationModel.id),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def get_latest_for_proposal(self, proposal_id: int) -> ProposalNotification | None:
        model = (
            self.session.query(ProposalNotificationModel)
            .filter(ProposalNotificationModel.proposal_id == proposal_id)
            .order_by(
                desc(ProposalNotificationModel.created_at),
                desc(ProposalNotificationModel.id),
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(
        self, notification: ProposalNotification, *, commit: bool = True
    ) -> ProposalNotification:
        """Insert ``notification``; with ``commit=False`` it is only flushed."""

        model = ProposalNotificationModel(
            proposal_id=notification.proposal_id,
            author_id=notification.author_id,
            title=notification.title,
            body=notification.body,
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProposalNotificationModel) -> ProposalNotification:
        return ProposalNotification(
            id=model.id,
            proposal_id=model.proposal_id,
            author_id=model.author_id,
            title=model.title,
            body=model.body,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProposalNotificationRepository"]
