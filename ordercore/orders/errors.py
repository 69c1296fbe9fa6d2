"""Errors raised by the orders service.

The set of kinds is closed: every failure the service reports is a
BadRequestError, NotFoundError or ConflictError. The HTTP boundary maps the
kind to a status code via HTTP_STATUS_BY_KIND.
"""

from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Kinds of order errors."""
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


# Conflict stays on 400 to match the status clients already handle for
# "order is not a draft".
HTTP_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
}


class OrderError(Exception):
    """Base class for order failures that carry a client-facing message."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """Structured form: {"status": <http status>, "message": <text>}."""
        return {"status": self.status_code, "message": self.message}

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


class BadRequestError(OrderError):
    """Malformed input or a reference to an unknown product."""
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(OrderError):
    """Referenced order does not exist."""
    kind = ErrorKind.NOT_FOUND


class ConflictError(OrderError):
    """Order is not in a state that allows the operation."""
    kind = ErrorKind.CONFLICT
