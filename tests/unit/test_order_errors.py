"""Unit tests for order error kinds and their HTTP status mapping"""

import pytest

from ordercore.orders.errors import (
    BadRequestError,
    ConflictError,
    ErrorKind,
    HTTP_STATUS_BY_KIND,
    NotFoundError,
    OrderError,
)


class TestOrderErrors:
    """Test the closed set of order errors"""

    def test_every_kind_has_a_status(self):
        """Each ErrorKind maps to an HTTP status"""
        assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize("error_cls,kind,status_code", [
        (BadRequestError, ErrorKind.BAD_REQUEST, 400),
        (NotFoundError, ErrorKind.NOT_FOUND, 404),
        (ConflictError, ErrorKind.CONFLICT, 400),
    ])
    def test_kind_and_status(self, error_cls, kind, status_code):
        err = error_cls("boom")
        assert isinstance(err, OrderError)
        assert err.kind == kind
        assert err.status_code == status_code
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_to_dict(self):
        """Structured form carries status and message"""
        err = NotFoundError("Order not found")
        assert err.to_dict() == {"status": 404, "message": "Order not found"}

    def test_repr(self):
        assert repr(ConflictError("not draft")) == "ConflictError('not draft')"
