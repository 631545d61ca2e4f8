"""SQLAlchemy model for proposal notifications."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ProposalNotificationModel(Base):
    """Database representation of a notification published for a proposal."""

    __tablename__ = "proposal_notification"

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: rows outlive a hard-deleted proposal and resolve as absent.
    proposal_id = Column(Integer, nullable=True, index=True)
    author_id = Column(Integer, nullable=True)
    title = Column(String(120), nullable=True)
    body = Column(Text, nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["ProposalNotificationModel"]
