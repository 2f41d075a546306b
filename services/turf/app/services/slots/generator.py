"""Slot grid generation with demand based pricing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, Iterable, List, Union

from app.core.exceptions import ValidationError
from app.services.slots.clock import advance, format_time, parse_time

logger = logging.getLogger(__name__)

DEMAND_HIGH = "high"
DEMAND_LOW = "low"
DEMAND_TIERS = (DEMAND_HIGH, DEMAND_LOW)

DEFAULT_MULTIPLIER = Decimal("1.0")
DEFAULT_SLOT_LIMIT = 50

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number, *, label: str) -> Decimal:
    try:
        # str() first so floats such as 1.3 keep their literal value
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationError(f"{label} must be a number, got {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"{label} must be a finite number, got {value!r}")
    return result


@dataclass(frozen=True)
class PricingRule:
    """Demand tier and price multiplier for one time slot of a ground."""

    time_slot: str
    demand: str
    multiplier: Decimal


@dataclass(frozen=True)
class TimeSlot:
    time: str
    demand: str
    price: int
    available: bool = True


def round_price(amount: Decimal) -> int:
    """Round half up to a whole currency unit (6.5 -> 7)."""

    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def validate_rules(rules: Iterable[PricingRule]) -> Dict[str, PricingRule]:
    """Check every rule and index them by time slot; the first rule per slot wins."""

    indexed: Dict[str, PricingRule] = {}
    for rule in rules:
        parse_time(rule.time_slot)
        if rule.demand not in DEMAND_TIERS:
            raise ValidationError(
                f"Pricing rule for {rule.time_slot} has unknown demand '{rule.demand}'"
            )
        multiplier = to_decimal(rule.multiplier, label="Multiplier")
        if multiplier <= 0:
            raise ValidationError(
                f"Pricing rule for {rule.time_slot} must have a positive multiplier"
            )
        indexed.setdefault(rule.time_slot, rule)
    return indexed


def generate_slots(
    open_time: str,
    close_time: str,
    base_price: Number,
    rules: Iterable[PricingRule] = (),
    *,
    limit: int = DEFAULT_SLOT_LIMIT,
) -> List[TimeSlot]:
    """Build the ordered half-hour slots between ``open_time`` and ``close_time``.

    A close time earlier than the open time rolls over midnight. The stop
    check runs after the cursor advances, so a ground whose open and close
    times are equal yields a single slot. Generation never emits more than
    ``limit`` slots; that only happens when the cursor can never land on the
    close time (e.g. a close time of ``18:15``).
    """

    hour, minute = parse_time(open_time)
    target = parse_time(close_time)

    price_base = to_decimal(base_price, label="Base price")
    if price_base <= 0:
        raise ValidationError("Base price must be greater than zero")

    rules_by_time = validate_rules(rules)

    slots: List[TimeSlot] = []
    while len(slots) < limit:
        time_value = format_time(hour, minute)
        rule = rules_by_time.get(time_value)
        if rule is not None:
            demand = rule.demand
            multiplier = to_decimal(rule.multiplier, label="Multiplier")
        else:
            demand = DEMAND_LOW
            multiplier = DEFAULT_MULTIPLIER

        slots.append(
            TimeSlot(
                time=time_value,
                demand=demand,
                price=round_price(price_base * multiplier),
            )
        )

        hour, minute = advance(hour, minute)
        if (hour, minute) == target:
            break
    else:
        logger.warning(
            "Slot generation for %s-%s stopped at the %d slot limit",
            open_time,
            close_time,
            limit,
        )

    return slots


__all__ = [
    "DEFAULT_SLOT_LIMIT",
    "DEMAND_HIGH",
    "DEMAND_LOW",
    "DEMAND_TIERS",
    "PricingRule",
    "TimeSlot",
    "generate_slots",
    "round_price",
    "to_decimal",
    "validate_rules",
]
