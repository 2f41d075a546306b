"""Booking totals and booking window derivation for a slot selection."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from app.core.exceptions import InvalidArgument, ValidationError
from app.services.slots.clock import SLOT_MINUTES, format_time, next_slot_time, parse_time
from app.services.slots.generator import TimeSlot

SLOT_HOURS = Decimal(SLOT_MINUTES) / Decimal(60)
DEFAULT_LOYALTY_CAP = Decimal("50")


@dataclass(frozen=True)
class BookingTotals:
    duration: Decimal
    base_price: Decimal
    discount: Decimal
    total: Decimal


@dataclass(frozen=True)
class BookingWindow:
    start_time: str
    end_time: str


def normalize_selection(times: Iterable[str]) -> List[str]:
    """Validate, de-duplicate and sort selected slot times.

    Sorting is lexicographic on the zero-padded ``HH:MM`` strings, which is
    chronological within a single calendar day only.
    """

    normalized = {format_time(*parse_time(value)) for value in times}
    return sorted(normalized)


def compute_totals(
    selected_times: Sequence[str],
    slots: Iterable[TimeSlot],
    loyalty_points_available: int = 0,
    use_loyalty: bool = False,
    *,
    discount_cap: Decimal = DEFAULT_LOYALTY_CAP,
) -> BookingTotals:
    """Price a selection against the generated slot grid.

    A selected time with no matching slot contributes nothing to the price.
    Loyalty points are only read here; redeeming them is up to the caller.
    """

    if loyalty_points_available < 0:
        raise ValidationError("Loyalty points cannot be negative")

    prices: Dict[str, int] = {}
    for slot in slots:
        prices.setdefault(slot.time, slot.price)

    duration = SLOT_HOURS * len(selected_times)
    base_price = Decimal(sum(prices.get(time_value, 0) for time_value in selected_times))

    discount = Decimal(0)
    if use_loyalty:
        discount = min(Decimal(discount_cap), Decimal(loyalty_points_available))

    total = max(base_price - discount, Decimal(0))

    return BookingTotals(
        duration=duration,
        base_price=base_price,
        discount=discount,
        total=total,
    )


def derive_booking_window(selected_times: Sequence[str]) -> BookingWindow:
    """Return the start of the first selected slot and the end of the last one."""

    if not selected_times:
        raise InvalidArgument("At least one slot must be selected")

    return BookingWindow(
        start_time=format_time(*parse_time(selected_times[0])),
        end_time=next_slot_time(selected_times[-1]),
    )


__all__ = [
    "BookingTotals",
    "BookingWindow",
    "DEFAULT_LOYALTY_CAP",
    "SLOT_HOURS",
    "compute_totals",
    "derive_booking_window",
    "normalize_selection",
]
