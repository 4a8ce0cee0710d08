"""
Static coupon catalog offered at checkout.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple

from .data_models import Coupon
from .errors import UnknownCoupon

AVAILABLE_COUPONS: Tuple[Coupon, ...] = (
    Coupon(
        id="1",
        code="WELCOME20",
        description="20% off your first purchase",
        discount_percentage=20,
        expires_at=date(2024, 12, 31),
    ),
    Coupon(
        id="2",
        code="SUMMER10",
        description="10% off summer collection",
        discount_percentage=10,
        expires_at=date(2024, 8, 31),
    ),
    Coupon(
        id="3",
        code="FREESHIP",
        description="Free shipping on orders over $50",
        discount_percentage=0,
    ),
)


def available_coupons() -> Tuple[Coupon, ...]:
    return AVAILABLE_COUPONS


def find_coupon(code: str, catalog: Iterable[Coupon] = AVAILABLE_COUPONS) -> Coupon:
    """
    Look up a coupon by code, ignoring case and surrounding whitespace.
    """

    wanted = (code or "").strip().upper()
    for coupon in catalog:
        if coupon.code.upper() == wanted:
            return coupon
    raise UnknownCoupon(code)
