from decimal import Decimal

import pytest

from app.core.exceptions import ValidationError
from app.services.slots import PricingRule, TimeSlot, generate_slots, validate_rules


def _times(slots):
    return [slot.time for slot in slots]


def test_two_hour_window_yields_four_half_hour_slots():
    slots = generate_slots("10:00", "12:00", 2000)

    assert _times(slots) == ["10:00", "10:30", "11:00", "11:30"]
    assert all(slot.available for slot in slots)


def test_equal_open_and_close_yields_single_slot():
    slots = generate_slots("10:00", "10:00", 2000)

    assert _times(slots) == ["10:00"]


def test_close_after_midnight_wraps_the_hour():
    slots = generate_slots("23:00", "01:00", 2000)

    assert _times(slots) == ["23:00", "23:30", "00:00", "00:30"]


def test_midnight_close_is_reached_after_the_day_wraps():
    slots = generate_slots("22:00", "00:00", 1000)

    assert _times(slots) == ["22:00", "22:30", "23:00", "23:30"]


def test_matching_rule_applies_multiplier_and_demand():
    rules = [PricingRule(time_slot="18:00", demand="high", multiplier=Decimal("1.3"))]

    slots = generate_slots("17:00", "19:00", Decimal("2000.00"), rules)
    by_time = {slot.time: slot for slot in slots}

    assert by_time["18:00"] == TimeSlot(time="18:00", demand="high", price=2600, available=True)
    assert by_time["17:30"].demand == "low"
    assert by_time["17:30"].price == 2000


def test_multiplier_given_as_string_or_float():
    rules = [
        PricingRule(time_slot="10:00", demand="high", multiplier="1.5"),
        PricingRule(time_slot="10:30", demand="low", multiplier=0.8),
    ]

    slots = generate_slots("10:00", "11:00", 1800, rules)

    assert [slot.price for slot in slots] == [2700, 1440]


def test_half_prices_round_up():
    rules = [
        PricingRule(time_slot="10:00", demand="high", multiplier=Decimal("1.3")),
        PricingRule(time_slot="10:30", demand="high", multiplier=Decimal("1.5")),
    ]

    slots = generate_slots("10:00", "11:00", 5, rules)

    # 6.5 and 7.5 both round away from zero
    assert [slot.price for slot in slots] == [7, 8]


def test_generation_is_deterministic():
    rules = [PricingRule(time_slot="18:00", demand="high", multiplier=Decimal("1.3"))]

    first = generate_slots("10:00", "01:00", 2000, rules)
    second = generate_slots("10:00", "01:00", 2000, rules)

    assert first == second
    assert len(first) == 30


def test_unreachable_close_time_stops_at_the_safety_limit():
    slots = generate_slots("10:00", "18:15", 2000)

    assert len(slots) == 50


def test_off_grid_open_time_terminates_within_limit():
    slots = generate_slots("10:01", "10:00", 2000)

    assert 0 < len(slots) <= 50


def test_custom_limit_is_honoured():
    slots = generate_slots("10:00", "10:15", 2000, limit=5)

    assert len(slots) == 5


@pytest.mark.parametrize(
    "value",
    ["", "10", "ab:cd", "24:00", "10:60", "10:5", "-1:00", "10:00:00", "18:00\n", "\u0661\u0668:\u0660\u0660"],
)
def test_malformed_times_are_rejected(value):
    with pytest.raises(ValidationError):
        generate_slots(value, "12:00", 2000)

    with pytest.raises(ValidationError):
        generate_slots("10:00", value, 2000)


@pytest.mark.parametrize("price", [0, -100, "abc", Decimal("NaN")])
def test_non_positive_or_invalid_base_price_is_rejected(price):
    with pytest.raises(ValidationError):
        generate_slots("10:00", "12:00", price)


@pytest.mark.parametrize(
    "rule",
    [
        PricingRule(time_slot="10:00", demand="high", multiplier=Decimal("0")),
        PricingRule(time_slot="10:00", demand="high", multiplier=Decimal("-1.2")),
        PricingRule(time_slot="10:00", demand="high", multiplier="fast"),
        PricingRule(time_slot="10:00", demand="peak", multiplier=Decimal("1.2")),
        PricingRule(time_slot="25:00", demand="low", multiplier=Decimal("1.0")),
        PricingRule(time_slot="18:00\n", demand="high", multiplier=Decimal("1.3")),
    ],
)
def test_malformed_rules_are_rejected(rule):
    with pytest.raises(ValidationError):
        generate_slots("10:00", "12:00", 2000, [rule])


def test_validate_rules_indexes_by_time_slot_and_keeps_the_first():
    first = PricingRule(time_slot="18:00", demand="high", multiplier=Decimal("1.3"))
    duplicate = PricingRule(time_slot="18:00", demand="low", multiplier=Decimal("1.0"))
    other = PricingRule(time_slot="10:00", demand="low", multiplier=Decimal("0.8"))

    indexed = validate_rules([first, duplicate, other])

    assert set(indexed) == {"18:00", "10:00"}
    assert indexed["18:00"] is first


def test_validate_rules_rejects_a_bad_rule_among_good_ones():
    rules = [
        PricingRule(time_slot="18:00", demand="high", multiplier=Decimal("1.3")),
        PricingRule(time_slot="18:30", demand="high", multiplier=Decimal("0")),
    ]

    with pytest.raises(ValidationError):
        validate_rules(rules)
