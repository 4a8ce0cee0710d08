"""
End-to-end demo wiring together the checkout_core components
with event logging.
"""

from __future__ import annotations

import logging

import pandas as pd

from . import coupons, events, interpolation, pricing, session

FRAME_MS = 1000.0 / 60


def run_frames(
    scheduler: interpolation.ManualFrameScheduler,
    clock: interpolation.ManualClock,
    max_frames: int = 120,
) -> int:
    """
    Advance the simulated display by one refresh at a time until no frame
    is pending. Returns the number of frames that ran.
    """
    frames = 0
    while scheduler.pending and frames < max_frames:
        clock.advance(FRAME_MS)
        scheduler.tick()
        frames += 1
    return frames


def price_grid() -> pd.DataFrame:
    """
    Price a handful of subtotals under every catalog coupon and no coupon.
    """
    subtotals = [0.0, 25.0, 49.99, 50.0, 100.0]
    tables = [pricing.summary_table(subtotals).assign(coupon="(none)")]
    for coupon in coupons.available_coupons():
        tables.append(
            pricing.summary_table(subtotals, coupon).assign(coupon=coupon.code)
        )
    return pd.concat(tables, ignore_index=True)


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    grid = price_grid()
    print("[main] Price grid:")
    print(grid.round(2).to_string(index=False))

    scheduler = interpolation.ManualFrameScheduler()
    clock = interpolation.ManualClock()
    logger = events.EventLogger()

    checkout = session.CheckoutSession(
        subtotal=100.0,
        scheduler=scheduler,
        clock=clock,
        product_name="Wireless Headphones",
        event_logger=logger,
    )
    frames = run_frames(scheduler, clock)
    print(f"[main] Mounted; total {checkout.displayed_total} after {frames} frames.")

    # Retarget halfway through so the first animation is superseded
    checkout.apply_coupon("WELCOME20")
    run_frames(scheduler, clock, max_frames=30)
    checkout.apply_coupon("FREESHIP")
    frames = run_frames(scheduler, clock)
    print(f"[main] FREESHIP applied; total {checkout.displayed_total} after {frames} frames.")
    print(f"[main] Share text: {checkout.share_text()}")

    checkout.remove_coupon()
    run_frames(scheduler, clock, max_frames=10)
    checkout.close()
    print(f"[main] Closed mid-animation at {checkout.displayed_total}; pending frames: {scheduler.pending}")

    events_df = logger.to_dataframe()
    print(f"[main] Logged {len(events_df)} events.")
    pricing_events = events_df[events_df["event_type"] == "pricing"]
    print("[main] Pricing events:")
    print(pricing_events[["reason", "coupon_code", "total"]].to_string(index=False))


if __name__ == "__main__":
    main()
