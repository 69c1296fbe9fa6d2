"""Order status values.

Only the DRAFT precondition is enforced in this package. Transitions out of
DRAFT belong to the submission/confirmation flow and are not handled here.

State Flow:
    DRAFT → SUBMITTED → CONFIRMED
    DRAFT|SUBMITTED → CANCELLED
"""

from enum import Enum
from typing import Union


class OrderStatus(str, Enum):
    """Order status enumeration."""
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


def is_draft(status: Union[OrderStatus, str, None]) -> bool:
    """Check whether an order in the given status accepts new items.

    Args:
        status: Stored status value (enum member or raw string)

    Returns:
        True only for DRAFT
    """
    return status == OrderStatus.DRAFT.value
