from datetime import datetime, timezone

from checkout_core.events import EVENT_COLUMNS, EventLogger
from checkout_core.pricing import compute_summary


def test_empty_logger_has_columns():
    df = EventLogger().to_dataframe()
    assert df.empty
    assert list(df.columns) == EVENT_COLUMNS


def test_pricing_and_display_rows():
    logger = EventLogger()
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
    logger.log_pricing(compute_summary(10), "mount", ts=ts)
    logger.log_display(3.5, ts=ts)

    df = logger.to_dataframe()
    assert list(df["event_type"]) == ["pricing", "display"]
    assert df.loc[0, "subtotal"] == 10
    assert df.loc[0, "reason"] == "mount"
    assert df.loc[1, "displayed_value"] == 3.5
    assert df.loc[0, "event_ts"] == ts


def test_default_timestamp_is_set():
    logger = EventLogger()
    logger.log_display(1)
    assert logger.records[0]["event_ts"].tzinfo is timezone.utc


def test_text_columns_keep_none():
    logger = EventLogger()
    logger.log_pricing(compute_summary(10), "mount")
    logger.log_pricing(compute_summary(10), "apply_coupon", coupon_code="FREESHIP")
    logger.log_display(2.0)

    df = logger.to_dataframe()
    assert list(df["coupon_code"]) == [None, "FREESHIP", None]
    assert df["subtotal"].dtype == float
    assert df["displayed_value"].isna().tolist() == [True, True, False]
