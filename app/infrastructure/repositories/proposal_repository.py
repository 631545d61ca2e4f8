"""Persistence helpers for proposal entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Proposal
from app.infrastructure.models import ProposalModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ProposalRepository:
    """Read proposals and apply the moderation transitions notifications react to.

    ``get`` is the lookup the availability rules depend on: it returns ``None``
    for proposals that never existed, were soft-deleted or were destroyed.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, proposal_id: int, *, include_deleted: bool = False) -> Proposal | None:
        model = self._get_model(proposal_id, include_deleted=include_deleted)
        return self._to_entity(model) if model else None

    def create(self, proposal: Proposal) -> Proposal:
        model = ProposalModel(
            title=proposal.title,
            created_at=ensure_app_naive_datetime(
                proposal.created_at or now_in_app_timezone()
            ),
            hidden_at=ensure_app_naive_datetime(proposal.hidden_at),
            retired_at=ensure_app_naive_datetime(proposal.retired_at),
            deleted_at=ensure_app_naive_datetime(proposal.deleted_at),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def hide(self, proposal_id: int) -> Proposal:
        return self._stamp(proposal_id, "hidden_at")

    def retire(self, proposal_id: int) -> Proposal:
        return self._stamp(proposal_id, "retired_at")

    def soft_delete(self, proposal_id: int) -> None:
        self._stamp(proposal_id, "deleted_at")

    def really_destroy(self, proposal_id: int) -> None:
        """Remove the proposal row, leaving its notifications dangling."""

        model = self._get_model(proposal_id, include_deleted=True)
        if model is None:
            msg = f"Proposal with id {proposal_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _stamp(self, proposal_id: int, attribute: str) -> Proposal:
        model = self._get_model(proposal_id, include_deleted=True)
        if model is None:
            msg = f"Proposal with id {proposal_id} not found"
            raise ValueError(msg)
        if getattr(model, attribute) is None:
            setattr(model, attribute, ensure_app_naive_datetime(now_in_app_timezone()))
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(
        self, proposal_id: int, *, include_deleted: bool = False
    ) -> ProposalModel | None:
        query = self.session.query(ProposalModel).filter(ProposalModel.id == proposal_id)
        if not include_deleted:
            query = query.filter(ProposalModel.deleted_at.is_(None))
        return query.first()

    @staticmethod
    def _to_entity(model: ProposalModel) -> Proposal:
        return Proposal(
            id=model.id,
            title=model.title,
            hidden_at=ensure_app_timezone(model.hidden_at),
            retired_at=ensure_app_timezone(model.retired_at),
            deleted_at=ensure_app_timezone(model.deleted_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProposalRepository"]
