"""Capability interface shared by every resource kind a notification can point at."""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy.orm import Session


class Notifiable(Protocol):
    """Resource kind that can back an in-app notification."""

    notifiable_type: str
    action: str

    def fetch(self, session: Session, notifiable_id: int) -> Any | None:
        """Return the resource identified by ``notifiable_id`` or ``None``."""
        ...

    def title(self, session: Session, resource: Any | None) -> str | None:
        """Return the title users see for ``resource``."""
        ...

    def is_available(self, session: Session, resource: Any | None) -> bool:
        """Return ``True`` when ``resource`` may still be displayed."""
        ...


_REGISTRY: dict[str, Notifiable] = {}


def register_notifiable(notifiable: Notifiable) -> Notifiable:
    _REGISTRY[notifiable.notifiable_type] = notifiable
    return notifiable


def get_notifiable(notifiable_type: str) -> Notifiable:
    """Return the registered capability for ``notifiable_type``.

    Raises ``KeyError`` for kinds nobody registered.
    """

    try:
        return _REGISTRY[notifiable_type]
    except KeyError:
        msg = f"Unknown notifiable type '{notifiable_type}'"
        raise KeyError(msg) from None


def registered_types() -> list[str]:
    return sorted(_REGISTRY)


__all__ = ["Notifiable", "get_notifiable", "register_notifiable", "registered_types"]
