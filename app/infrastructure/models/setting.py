"""SQLAlchemy model for runtime-editable settings."""

from sqlalchemy import Column, DateTime, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class SettingModel(Base):
    """Key/value pair administrators can change without a deploy."""

    __tablename__ = "setting"

    key = Column(String(100), primary_key=True)
    value = Column(String(255), nullable=True)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["SettingModel"]
