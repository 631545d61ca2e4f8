"""SQLAlchemy model for proposals."""

from sqlalchemy import Column, DateTime, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ProposalModel(Base):
    """Database representation of a proposal."""

    __tablename__ = "proposal"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(80), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    hidden_at = Column(DateTime(), nullable=True)
    retired_at = Column(DateTime(), nullable=True)
    deleted_at = Column(DateTime(), nullable=True, index=True)


__all__ = ["ProposalModel"]
