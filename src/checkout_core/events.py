"""
Event logging utilities for checkout sessions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pandas as pd

from .data_models import OrderSummary

EVENT_COLUMNS = [
    "event_type",
    "event_ts",
    "reason",
    "coupon_code",
    "subtotal",
    "shipping",
    "tax",
    "discount",
    "total",
    "displayed_value",
]

NUMERIC_COLUMNS = ["subtotal", "shipping", "tax", "discount", "total", "displayed_value"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EventLogger:
    """
    Collects pricing and display events into a single DataFrame.

    Each record is a flat dict; use `to_dataframe()` at the end of a run.
    """

    records: List[Dict[str, Any]] = field(default_factory=list)

    def log_pricing(
        self,
        summary: OrderSummary,
        reason: str,
        coupon_code: Optional[str] = None,
        ts: Optional[datetime] = None,
    ) -> None:
        """
        Log a recomputed order summary and what triggered it.
        """
        self.records.append(
            {
                "event_type": "pricing",
                "event_ts": ts or _now(),
                "reason": reason,
                "coupon_code": coupon_code,
                **summary.to_dict(),
                # display fields left blank for pricing rows
                "displayed_value": None,
            }
        )

    def log_display(self, value: float, ts: Optional[datetime] = None) -> None:
        """
        Log one value shown by the total animation.
        """
        self.records.append(
            {
                "event_type": "display",
                "event_ts": ts or _now(),
                "reason": None,
                "coupon_code": None,
                "subtotal": None,
                "shipping": None,
                "tax": None,
                "discount": None,
                "total": None,
                "displayed_value": float(value),
            }
        )

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert all logged events into a single DataFrame.
        """
        # object dtype keeps None in the text columns
        df = pd.DataFrame(self.records, columns=EVENT_COLUMNS, dtype=object)
        return df.astype({column: float for column in NUMERIC_COLUMNS})
