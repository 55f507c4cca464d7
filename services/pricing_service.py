# Pricing Service: per-person price for custom itineraries
# Hourly regime: base rate covers the first BASE_HOURS, each further
# started hour adds HOURLY_RATE. Full package: flat rate per day for all
# landmarks of one tour type. Group totals are the caller's concern.

from math import ceil
from models.schemas import PricingBreakdown, MultiDayPricingBreakdown
from config import PRICING

BASE_RATE         = PRICING["base_rate"]
BASE_HOURS        = PRICING["base_hours"]
HOURLY_RATE       = PRICING["hourly_rate"]
FULL_PACKAGE_RATE = PRICING["full_package_rate"]


def _hours(total_minutes: int) -> int:
    return max(0, ceil(total_minutes / 60))


def calculate_price(total_minutes: int, is_full_package: bool) -> int:
    """Price in PHP for one person, one day."""
    if is_full_package:
        return FULL_PACKAGE_RATE

    hours = _hours(total_minutes)
    if hours <= BASE_HOURS:
        return BASE_RATE
    return BASE_RATE + (hours - BASE_HOURS) * HOURLY_RATE


def get_pricing_breakdown(
    total_minutes:   int,
    is_full_package: bool,
    landmark_count:  int
) -> PricingBreakdown:
    hours = _hours(total_minutes)

    if is_full_package:
        hourly = calculate_price(total_minutes, False)
        return PricingBreakdown(
            type="full-package",
            base_rate=0,
            base_hours=BASE_HOURS,
            additional_hours=0,
            additional_cost=0,
            total_price=FULL_PACKAGE_RATE,
            savings=max(0, hourly - FULL_PACKAGE_RATE),
            description=f"Full package ({landmark_count} landmarks, {hours}h)"
        )

    additional_hours = max(0, hours - BASE_HOURS)
    additional_cost  = additional_hours * HOURLY_RATE
    return PricingBreakdown(
        type="hourly",
        base_rate=BASE_RATE,
        base_hours=BASE_HOURS,
        additional_hours=additional_hours,
        additional_cost=additional_cost,
        total_price=BASE_RATE + additional_cost,
        savings=0,
        description=(
            f"Base rate (up to {BASE_HOURS}h)" if hours <= BASE_HOURS
            else f"Base {BASE_HOURS}h + {additional_hours}h additional"
        )
    )


def is_full_package_better(total_minutes: int) -> bool:
    """Advisory only: would the flat package beat hourly billing?"""
    return FULL_PACKAGE_RATE < calculate_price(total_minutes, False)


def get_pricing_constants() -> dict:
    return {
        "BASE_RATE":         BASE_RATE,
        "BASE_HOURS":        BASE_HOURS,
        "HOURLY_RATE":       HOURLY_RATE,
        "FULL_PACKAGE_RATE": FULL_PACKAGE_RATE
    }


def _day2_price(minutes: int, is_full: bool) -> int:
    # Day 2 with no landmarks yet is not billed; day 1 always is
    if minutes <= 0:
        return 0
    return calculate_price(minutes, is_full)


def _empty_day_breakdown() -> PricingBreakdown:
    return PricingBreakdown(
        type="hourly",
        base_rate=0,
        base_hours=BASE_HOURS,
        additional_hours=0,
        additional_cost=0,
        total_price=0,
        savings=0,
        description="No landmarks"
    )


def calculate_multi_day_price(
    day1_minutes:      int,
    day2_minutes:      int,
    is_both_days_full: bool
) -> int:
    """
    Each day priced as a standalone 1-day booking, then summed.
    Day 1 is always billed (at least the base rate); an empty day 2 adds 0.
    is_both_days_full applies the full-package rate to both days;
    use calculate_mixed_day_price when the days differ.
    """
    return (
        calculate_price(day1_minutes, is_both_days_full)
        + _day2_price(day2_minutes, is_both_days_full)
    )


def calculate_mixed_day_price(
    day1_minutes: int,
    day1_full:    bool,
    day2_minutes: int,
    day2_full:    bool
) -> int:
    return calculate_price(day1_minutes, day1_full) + _day2_price(day2_minutes, day2_full)


def get_multi_day_pricing_breakdown(
    day1_minutes:        int,
    day2_minutes:        int,
    day1_full:           bool,
    day2_full:           bool,
    day1_landmark_count: int,
    day2_landmark_count: int
) -> MultiDayPricingBreakdown:
    """Per-day breakdowns always add up to total_price."""
    day1 = get_pricing_breakdown(day1_minutes, day1_full, day1_landmark_count)
    day2 = (
        get_pricing_breakdown(day2_minutes, day2_full, day2_landmark_count)
        if day2_minutes > 0 else _empty_day_breakdown()
    )
    day1_hours = _hours(day1_minutes)
    day2_hours = _hours(day2_minutes)
    total      = calculate_mixed_day_price(day1_minutes, day1_full, day2_minutes, day2_full)

    if day1_full and day2_full:
        kind, description = (
            "full-package-2day",
            f"2-Day Full Package ({day1_landmark_count + day2_landmark_count} landmarks, "
            f"{day1_hours + day2_hours}h total)"
        )
    elif day1_full or day2_full:
        kind, description = (
            "2day-mixed",
            f"Day 1: {'full package' if day1_full else f'{day1_hours}h'} + "
            f"Day 2: {'full package' if day2_full else f'{day2_hours}h'}"
        )
    else:
        kind, description = "2day-hourly", f"Day 1: {day1_hours}h + Day 2: {day2_hours}h"

    return MultiDayPricingBreakdown(
        type=kind,
        day1=day1,
        day2=day2,
        day1_hours=day1_hours,
        day2_hours=day2_hours,
        total_hours=day1_hours + day2_hours,
        total_price=total,
        savings=day1.savings + day2.savings,
        description=description
    )
