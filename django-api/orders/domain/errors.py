"""Domain error codes for the orders module."""

from enum import Enum

from events.domain.errors import DomainError, PersistenceError


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    STALE_CART = "STALE_CART"
    ORDER_NUMBER_CONFLICT = "ORDER_NUMBER_CONFLICT"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"


class CheckoutValidationError(DomainError):
    """Raised when contact details fail validation. No store call is made."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Contact details are invalid",
        )
        self.field_errors = field_errors


class StaleCartError(DomainError):
    """Raised when cart lines no longer match the catalog at submission."""

    def __init__(self, ticket_category_ids: list[str]) -> None:
        super().__init__(
            code=ErrorCode.STALE_CART,
            message="Some tickets in your cart changed price or are no longer available",
        )
        self.ticket_category_ids = ticket_category_ids


class OrderNumberConflictError(DomainError):
    """Raised by a store when a generated order number already exists."""

    def __init__(self, order_number: str) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NUMBER_CONFLICT,
            message="Order number already in use",
        )
        self.order_number = order_number


class OrderNotFoundError(DomainError):
    """Raised when no order has the requested order number."""

    def __init__(self, order_number: str) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_number = order_number


__all__ = [
    "CheckoutValidationError",
    "DomainError",
    "ErrorCode",
    "OrderNotFoundError",
    "OrderNumberConflictError",
    "PersistenceError",
    "StaleCartError",
]
