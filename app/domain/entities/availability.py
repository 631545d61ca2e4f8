"""Outcome of resolving whether a notified resource can be shown."""

from enum import Enum


class Availability(str, Enum):
    """Tri-state visibility of the resource a notification refers to."""

    AVAILABLE = "available"
    HIDDEN = "hidden"
    ABSENT = "absent"


__all__ = ["Availability"]
