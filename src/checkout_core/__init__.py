"""
checkout_core
=============

The computational core of a checkout widget: a static coupon catalog, a
pure order-summary pricing engine, and a time-bounded interpolator that
animates the displayed total.

Presentation concerns stay outside the package; they hold a
`CheckoutSession` (or call `compute_summary` and `AnimatedValue`
directly) and render what these return.
"""

from . import (
    coupons,
    data_models,
    errors,
    events,
    interpolation,
    pricing,
    session,
)
from .coupons import AVAILABLE_COUPONS, available_coupons, find_coupon
from .data_models import Coupon, OrderSummary
from .errors import CheckoutError, InvalidInput, UnknownCoupon
from .interpolation import (
    AnimatedValue,
    InterpolationRun,
    RunState,
    interpolation_samples,
    start_interpolation,
)
from .pricing import DEFAULT_PRICING, PricingConfig, compute_summary, summary_table
from .session import CheckoutSession

__all__ = [
    "coupons",
    "data_models",
    "errors",
    "events",
    "interpolation",
    "pricing",
    "session",
    "AVAILABLE_COUPONS",
    "AnimatedValue",
    "CheckoutError",
    "CheckoutSession",
    "Coupon",
    "DEFAULT_PRICING",
    "InterpolationRun",
    "InvalidInput",
    "OrderSummary",
    "PricingConfig",
    "RunState",
    "UnknownCoupon",
    "available_coupons",
    "compute_summary",
    "find_coupon",
    "interpolation_samples",
    "start_interpolation",
    "summary_table",
]
