"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_CATEGORY_NOT_FOUND = "TICKET_CATEGORY_NOT_FOUND"
    INVALID_TICKET_CATEGORY_ID = "INVALID_TICKET_CATEGORY_ID"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class TicketCategoryNotFoundError(DomainError):
    """Raised when a ticket category is not found."""

    def __init__(self, ticket_category_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_CATEGORY_NOT_FOUND,
            message="Ticket category not found",
        )
        self.ticket_category_id = ticket_category_id


class InvalidTicketCategoryIdError(DomainError):
    """Raised when a ticket category ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_CATEGORY_ID,
            message="Invalid ticket category ID format",
        )


class PersistenceError(DomainError):
    """Raised when the store cannot complete a read or write."""

    def __init__(self, operation: str, transient: bool = False) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="The store could not complete the request, please retry",
        )
        self.operation = operation
        self.transient = transient
