"""Slot grid and booking price engine."""

from .calculator import (
    BookingTotals,
    BookingWindow,
    compute_totals,
    derive_booking_window,
    normalize_selection,
)
from .clock import next_slot_time, parse_time
from .generator import (
    DEMAND_HIGH,
    DEMAND_LOW,
    DEMAND_TIERS,
    PricingRule,
    TimeSlot,
    generate_slots,
    validate_rules,
)

__all__ = [
    "BookingTotals",
    "BookingWindow",
    "DEMAND_HIGH",
    "DEMAND_LOW",
    "DEMAND_TIERS",
    "PricingRule",
    "TimeSlot",
    "compute_totals",
    "derive_booking_window",
    "generate_slots",
    "next_slot_time",
    "normalize_selection",
    "parse_time",
    "validate_rules",
]
