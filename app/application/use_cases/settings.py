"""Use cases for reading runtime-editable settings."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.infrastructure.repositories import SettingRepository

logger = logging.getLogger(__name__)

MINIMUM_INTERVAL_SETTING = "proposal_notification_minimum_interval_in_days"


def get_minimum_interval_days(session: Session) -> int:
    """Return the minimum number of days between notifications of one proposal.

    The value stored in the ``setting`` table wins; when it is missing or not a
    non-negative integer the environment default applies.
    """

    default = get_settings().proposal_notification_minimum_interval_in_days
    raw_value = SettingRepository(session).get(MINIMUM_INTERVAL_SETTING)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        value = int(raw_value.strip())
    except ValueError:
        logger.warning(
            "Invalid value %r for setting %s; using default %s",
            raw_value,
            MINIMUM_INTERVAL_SETTING,
            default,
        )
        return default
    if value < 0:
        logger.warning(
            "Negative value %s for setting %s; using default %s",
            value,
            MINIMUM_INTERVAL_SETTING,
            default,
        )
        return default
    return value


__all__ = ["MINIMUM_INTERVAL_SETTING", "get_minimum_interval_days"]
