import dataclasses
from datetime import date

import pytest

from checkout_core.coupons import AVAILABLE_COUPONS, available_coupons, find_coupon
from checkout_core.data_models import Coupon
from checkout_core.errors import ErrorCategory, InvalidInput, UnknownCoupon


def test_catalog_is_ordered_and_unique():
    codes = [c.code for c in available_coupons()]
    assert codes == ["WELCOME20", "SUMMER10", "FREESHIP"]
    assert len({c.id for c in AVAILABLE_COUPONS}) == len(AVAILABLE_COUPONS)


def test_only_freeship_waives_shipping():
    waivers = {c.code: c.waives_shipping for c in AVAILABLE_COUPONS}
    assert waivers == {"WELCOME20": False, "SUMMER10": False, "FREESHIP": True}


def test_waiver_follows_code_unless_given():
    reused = Coupon(id="9", code="FREESHIP", description="also 15%", discount_percentage=15)
    assert reused.waives_shipping is True

    tagged = Coupon(
        id="10", code="SHIPFREE", description="", discount_percentage=0, waives_shipping=True
    )
    assert tagged.waives_shipping is True

    opted_out = Coupon(
        id="11", code="FREESHIP", description="", discount_percentage=0, waives_shipping=False
    )
    assert opted_out.waives_shipping is False


def test_coupons_are_immutable():
    coupon = AVAILABLE_COUPONS[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        coupon.discount_percentage = 90


@pytest.mark.parametrize("percentage", [-1, 100.01, float("nan"), float("inf")])
def test_percentage_out_of_range_is_rejected(percentage):
    with pytest.raises(InvalidInput):
        Coupon(id="x", code="BAD", description="", discount_percentage=percentage)


def test_zero_and_full_percentages_are_accepted():
    assert Coupon(id="a", code="PERK", description="", discount_percentage=0).discount_percentage == 0
    assert Coupon(id="b", code="ALL", description="", discount_percentage=100).discount_percentage == 100


def test_find_coupon_ignores_case_and_whitespace():
    assert find_coupon("  welcome20 ") is AVAILABLE_COUPONS[0]
    assert find_coupon("FREESHIP").id == "3"


def test_find_unknown_coupon():
    with pytest.raises(UnknownCoupon) as excinfo:
        find_coupon("NOPE")
    assert excinfo.value.code == "NOPE"
    assert excinfo.value.category is ErrorCategory.NOT_FOUND
    assert isinstance(excinfo.value, LookupError)


def test_is_expired():
    summer = find_coupon("SUMMER10")
    assert summer.expires_at == date(2024, 8, 31)
    assert summer.is_expired(date(2024, 9, 1))
    assert not summer.is_expired(date(2024, 8, 31))
    assert not find_coupon("FREESHIP").is_expired(date(2100, 1, 1))
