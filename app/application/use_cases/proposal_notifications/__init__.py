"""Use cases and rules for proposal notifications."""

from .availability import (
    ProposalLookup,
    availability_of,
    check_availability,
    is_available,
    resolve_availability,
)
from .create_proposal_notification import create_proposal_notification
from .get_proposal_notification import (
    UNAVAILABLE_PLACEHOLDER,
    ProposalNotificationDisplay,
    get_proposal_notification,
)
from .interval import latest_created_at, may_create, next_allowed_at
from .list_public_proposal_notifications import list_public_proposal_notifications
from .validate_proposal_notification import (
    is_valid_proposal_notification,
    validate_proposal_notification,
)
from .validators import ProposalNotificationValidationError
from .visibility import public_subset

__all__ = [
    "ProposalLookup",
    "ProposalNotificationDisplay",
    "ProposalNotificationValidationError",
    "UNAVAILABLE_PLACEHOLDER",
    "availability_of",
    "check_availability",
    "create_proposal_notification",
    "get_proposal_notification",
    "is_available",
    "is_valid_proposal_notification",
    "latest_created_at",
    "list_public_proposal_notifications",
    "may_create",
    "next_allowed_at",
    "public_subset",
    "resolve_availability",
    "validate_proposal_notification",
]
