"""
Checkout session holding the applied coupon and the animated total.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .coupons import AVAILABLE_COUPONS, find_coupon
from .data_models import Coupon, OrderSummary
from .events import EventLogger
from .interpolation import AnimatedValue, Clock, FrameScheduler, monotonic_ms
from .pricing import DEFAULT_PRICING, PricingConfig, compute_summary, format_currency

logger = logging.getLogger(__name__)


class CheckoutSession:
    """
    Owns the only business state of a checkout: the subtotal and at most
    one applied coupon.

    Every change recomputes the order summary and retargets the displayed
    total. A rejected change leaves the session as it was.
    """

    def __init__(
        self,
        subtotal: float,
        scheduler: FrameScheduler,
        clock: Clock = monotonic_ms,
        config: PricingConfig = DEFAULT_PRICING,
        catalog: Iterable[Coupon] = AVAILABLE_COUPONS,
        product_name: str = "Your Product",
        duration_ms: float = 1000.0,
        event_logger: Optional[EventLogger] = None,
    ) -> None:
        self.config = config
        self.catalog = tuple(catalog)
        self.product_name = product_name
        self.event_logger = event_logger
        self._subtotal = subtotal
        self._applied_coupon: Optional[Coupon] = None
        self._closed = False
        self.summary = compute_summary(subtotal, None, config)
        self._display = AnimatedValue(
            scheduler,
            clock,
            initial=0.0,
            duration_ms=duration_ms,
            on_change=self._on_display,
        )
        self._log_pricing("mount")
        self._display.animate_to(self.summary.total)

    @property
    def subtotal(self) -> float:
        return self.summary.subtotal

    @property
    def applied_coupon(self) -> Optional[Coupon]:
        return self._applied_coupon

    @property
    def displayed_total(self) -> float:
        return self._display.value

    @property
    def animation(self) -> AnimatedValue:
        return self._display

    def _on_display(self, value: float) -> None:
        if self.event_logger is not None:
            self.event_logger.log_display(value)

    def _log_pricing(self, reason: str) -> None:
        code = self._applied_coupon.code if self._applied_coupon else None
        logger.debug(f"Order total {self.summary.total:.2f} after {reason} (coupon={code})")
        if self.event_logger is not None:
            self.event_logger.log_pricing(self.summary, reason, coupon_code=code)

    def _recompute(
        self, subtotal: float, coupon: Optional[Coupon], reason: str
    ) -> OrderSummary:
        summary = compute_summary(subtotal, coupon, self.config)
        self._subtotal = subtotal
        self._applied_coupon = coupon
        self.summary = summary
        self._log_pricing(reason)
        if not self._closed:
            self._display.animate_to(summary.total)
        return summary

    def apply_coupon(self, coupon: Union[Coupon, str]) -> OrderSummary:
        """
        Apply a coupon (or a catalog code), replacing any coupon already
        applied.
        """

        if isinstance(coupon, str):
            coupon = find_coupon(coupon, self.catalog)
        return self._recompute(self._subtotal, coupon, "apply_coupon")

    def remove_coupon(self) -> OrderSummary:
        return self._recompute(self._subtotal, None, "remove_coupon")

    def set_subtotal(self, subtotal: float) -> OrderSummary:
        return self._recompute(subtotal, self._applied_coupon, "set_subtotal")

    def share_text(self) -> str:
        return f"Check out {self.product_name} for {format_currency(self.summary.total)}!"

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """
        Stop the total animation; nothing is displayed afterwards.

        Pricing keeps working on a closed session, but the displayed total
        stays where it was.
        """

        self._closed = True
        self._display.cancel()
