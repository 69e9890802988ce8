"""Ordering primitives that enforce validity at creation time."""

import re
import secrets
import time
from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
SUFFIX_ALPHABET = BASE36_DIGITS.upper()
SUFFIX_LENGTH = 6

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("Cannot encode a negative number")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


class OrderStatus(Enum):
    """Lifecycle of an order. Advanced by the back office after payment."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderId:
    """Unique identifier for an Order."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderNumber:
    """Human-facing order reference, also used as the bank transfer reference.

    Format is ``<PREFIX>-<base36 millisecond timestamp>-<6 random base36 chars>``.
    Uniqueness is probabilistic; the store rejects duplicates.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.isprintable() or " " in self.value:
            raise ValueError("Order number must be a non-empty printable token")

    @classmethod
    def generate(cls, prefix: str, now_ms: int | None = None) -> Self:
        if now_ms is None:
            now_ms = time.time_ns() // 1_000_000
        suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
        return cls(value=f"{prefix}-{to_base36(now_ms)}-{suffix}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ContactInfo:
    """Customer contact details captured at checkout."""

    name: str
    email: str
    phone: str | None = None

    def normalized(self) -> "ContactInfo":
        phone = (self.phone or "").strip() or None
        return ContactInfo(name=self.name.strip(), email=self.email.strip(), phone=phone)

    def field_errors(self) -> dict[str, str]:
        """Return field name to message for every invalid required field."""
        errors = {}
        if not self.name.strip():
            errors["name"] = "name required"
        if not EMAIL_PATTERN.match(self.email.strip()):
            errors["email"] = "invalid email"
        return errors
