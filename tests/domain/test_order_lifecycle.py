"""Unit tests for the order status machine."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.order_lifecycle import OrderLifecycle, parse_status

ALL_STATUSES = list(OrderStatus)


class TestParseStatus:

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_known_values(self, status):
        assert parse_status(status.value) is status

    def test_enum_member_passes_through(self):
        assert parse_status(OrderStatus.SHIPPED) is OrderStatus.SHIPPED

    @pytest.mark.parametrize("raw", ["RECALLED", "shipped", "", "PENDING "])
    def test_unknown_values_rejected(self, raw):
        with pytest.raises(ValidationError, match="Unknown order status") as exc_info:
            parse_status(raw)
        assert exc_info.value.field == "status"


class TestPermissivePolicy:

    @pytest.mark.parametrize("current", ALL_STATUSES)
    @pytest.mark.parametrize("requested", ALL_STATUSES)
    def test_any_known_status_accepted_from_anywhere(self, current, requested):
        lifecycle = OrderLifecycle()
        assert lifecycle.validate_transition(current, requested.value) is requested

    def test_not_strict_by_default(self):
        assert OrderLifecycle().strict is False

    def test_unknown_target_rejected(self):
        with pytest.raises(ValidationError):
            OrderLifecycle().validate_transition(OrderStatus.PENDING, "RECALLED")


class TestStrictPolicy:

    @pytest.mark.parametrize("current", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_leaving_terminal_status_rejected(self, current):
        lifecycle = OrderLifecycle(strict=True)
        with pytest.raises(ValidationError, match="terminal status"):
            lifecycle.validate_transition(current, "PROCESSING")

    def test_rewriting_terminal_status_accepted(self):
        lifecycle = OrderLifecycle(strict=True)
        assert (
            lifecycle.validate_transition(OrderStatus.DELIVERED, "DELIVERED")
            is OrderStatus.DELIVERED
        )

    def test_non_terminal_moves_unrestricted(self):
        lifecycle = OrderLifecycle(strict=True)
        assert (
            lifecycle.validate_transition(OrderStatus.SHIPPED, "PENDING")
            is OrderStatus.PENDING
        )
