"""Persistence helpers for runtime settings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.infrastructure.models import SettingModel


class SettingRepository:
    """Read and write key/value settings stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> str | None:
        model = self.session.get(SettingModel, key)
        return model.value if model else None

    def set(self, key: str, value: object | None) -> None:
        model = self.session.get(SettingModel, key)
        if model is None:
            model = SettingModel(key=key)
        model.value = None if value is None else str(value)
        self.session.add(model)
        self.session.commit()


__all__ = ["SettingRepository"]
