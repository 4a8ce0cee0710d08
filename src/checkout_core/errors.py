"""Structured errors raised by the checkout core."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class CheckoutError(Exception):
    """
    Base class for failures surfaced to callers of the checkout core.

    Every failure is local to the call that raised it; supplying corrected
    input is the only recovery path.
    """

    category: ErrorCategory = ErrorCategory.VALIDATION

    def to_dict(self) -> dict:
        return {"category": self.category.value, "message": str(self)}


class InvalidInput(CheckoutError, ValueError):
    """A subtotal, percentage, duration or value outside its domain."""

    category = ErrorCategory.VALIDATION


class UnknownCoupon(CheckoutError, LookupError):
    """No coupon with the requested code exists in the catalog."""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown coupon code: {code!r}")
        self.code = code
