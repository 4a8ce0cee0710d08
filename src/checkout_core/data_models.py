"""
Core data models used across the checkout_core package.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, Optional

from .errors import InvalidInput

FREE_SHIPPING_CODE = "FREESHIP"


def check_number(
    name: str,
    value: float,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> float:
    """
    Return `value` as a float, rejecting non-numeric, non-finite and
    out-of-range input with InvalidInput.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    if minimum is not None and value < minimum:
        raise InvalidInput(f"{name} must be >= {minimum}, got {value!r}")
    if maximum is not None and value > maximum:
        raise InvalidInput(f"{name} must be <= {maximum}, got {value!r}")
    return value


@dataclass(frozen=True)
class Coupon:
    """
    A named discount or perk rule.

    `waives_shipping` is resolved once, at construction: when it is not
    given, any coupon whose code is FREESHIP carries the shipping waiver
    regardless of its discount percentage.
    """

    id: str
    code: str
    description: str
    discount_percentage: float
    expires_at: Optional[date] = None
    is_valid: bool = True
    waives_shipping: Optional[bool] = field(default=None)

    def __post_init__(self) -> None:
        percentage = check_number(
            "discount_percentage", self.discount_percentage, 0.0, 100.0
        )
        object.__setattr__(self, "discount_percentage", percentage)
        if self.waives_shipping is None:
            object.__setattr__(
                self, "waives_shipping", self.code == FREE_SHIPPING_CODE
            )

    def is_expired(self, on: date) -> bool:
        """
        True when the coupon carries an expiry date that is before `on`.

        Pricing never consults this.
        """

        return self.expires_at is not None and self.expires_at < on


@dataclass(frozen=True)
class OrderSummary:
    """
    The itemised monetary breakdown for a single checkout.
    """

    subtotal: float
    shipping: float
    tax: float
    discount: float
    total: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
