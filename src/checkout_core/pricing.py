"""
Order summary computation: shipping, flat-rate tax and coupon discounts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .data_models import Coupon, OrderSummary, check_number

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["subtotal", "shipping", "tax", "discount", "total"]


@dataclass(frozen=True)
class PricingConfig:
    shipping_base: float = 5.99
    tax_rate: float = 0.08
    free_shipping_minimum: float = 50.0

    def __post_init__(self) -> None:
        check_number("shipping_base", self.shipping_base, minimum=0.0)
        check_number("tax_rate", self.tax_rate, minimum=0.0)
        check_number("free_shipping_minimum", self.free_shipping_minimum, minimum=0.0)


DEFAULT_PRICING = PricingConfig()


def _effective_coupon(applied_coupon: Optional[Coupon]) -> Optional[Coupon]:
    """
    Return the coupon that takes part in pricing, or None.

    An invalid coupon is treated exactly like no coupon at all, so it
    neither discounts nor waives shipping.
    """

    if applied_coupon is None:
        return None
    check_number(
        "discount_percentage", applied_coupon.discount_percentage, 0.0, 100.0
    )
    if not applied_coupon.is_valid:
        return None
    return applied_coupon


def compute_summary(
    subtotal: float,
    applied_coupon: Optional[Coupon] = None,
    config: PricingConfig = DEFAULT_PRICING,
) -> OrderSummary:
    """
    Derive the order summary for `subtotal` with at most one coupon applied.

    Raises InvalidInput for a negative, non-finite or non-numeric subtotal
    and for a coupon percentage outside [0, 100].
    """

    subtotal = check_number("subtotal", subtotal, minimum=0.0)
    coupon = _effective_coupon(applied_coupon)

    tax = subtotal * config.tax_rate

    discount = 0.0
    if coupon is not None:
        discount = subtotal * (coupon.discount_percentage / 100)

    shipping = config.shipping_base
    if (
        coupon is not None
        and coupon.waives_shipping
        and subtotal >= config.free_shipping_minimum
    ):
        shipping = 0.0

    total = subtotal + shipping + tax - discount
    logger.debug(
        f"Computed summary subtotal={subtotal} coupon="
        f"{coupon.code if coupon else None} total={total}"
    )
    return OrderSummary(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        discount=discount,
        total=total,
    )


def summary_table(
    subtotals: Iterable[float],
    applied_coupon: Optional[Coupon] = None,
    config: PricingConfig = DEFAULT_PRICING,
) -> pd.DataFrame:
    """
    Price many subtotals at once under the same coupon.

    Returns one row per subtotal with the OrderSummary columns; each row
    matches compute_summary for that subtotal.
    """

    values = np.asarray(
        [check_number("subtotal", s, minimum=0.0) for s in subtotals], dtype=float
    )
    coupon = _effective_coupon(applied_coupon)

    tax = values * config.tax_rate
    if coupon is not None:
        discount = values * (coupon.discount_percentage / 100)
    else:
        discount = np.zeros_like(values)

    waived = np.zeros_like(values, dtype=bool)
    if coupon is not None and coupon.waives_shipping:
        waived = values >= config.free_shipping_minimum
    shipping = np.where(waived, 0.0, config.shipping_base)

    total = values + shipping + tax - discount
    return pd.DataFrame(
        {
            "subtotal": values,
            "shipping": shipping,
            "tax": tax,
            "discount": discount,
            "total": total,
        },
        columns=SUMMARY_COLUMNS,
    )


def format_currency(amount: float) -> str:
    """
    Format an amount as US dollars, e.g. `$1,234.50` or `-$3.00`.
    """

    cents = Decimal(float(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"
