"""Happy hour pricing resolution."""

from collections.abc import Iterable
from datetime import datetime

from restocafe.domain.menu import BestDiscount, Countdown, HappyHourPricing, MenuItem
from restocafe.services.windows import (
    DAYS_PER_WEEK,
    MINUTES_PER_DAY,
    ClockWindow,
    day_of_week,
    minutes_of_day,
    window_is_open,
)


def is_happy_hour(pricing: HappyHourPricing, now: datetime) -> bool:
    """Return True when the pricing is running at the given instant."""
    if not pricing.is_active:
        return False
    return window_is_open(
        pricing.days_of_week, pricing.start_time, pricing.end_time, now
    )


def get_active_happy_hours(
    pricings: Iterable[HappyHourPricing], now: datetime
) -> list[HappyHourPricing]:
    """Return running pricings, in input order."""
    return [pricing for pricing in pricings if is_happy_hour(pricing, now)]


def apply_happy_hour_discount(
    menu_item: MenuItem, pricing: HappyHourPricing
) -> float | None:
    """Return the discounted price, or None when the item's category is excluded."""
    categories = pricing.applicable_categories
    if categories and menu_item.category not in categories:
        return None
    discount = menu_item.price * pricing.discount_percentage / 100
    return menu_item.price - discount


def get_best_discount(
    menu_item: MenuItem, pricings: Iterable[HappyHourPricing], now: datetime
) -> BestDiscount | None:
    """Pick the running pricing with the largest saving; the first wins ties."""
    best: BestDiscount | None = None
    for pricing in get_active_happy_hours(pricings, now):
        price = apply_happy_hour_discount(menu_item, pricing)
        if price is None:
            continue
        saving = menu_item.price - price
        if best is None or saving > best.discount:
            best = BestDiscount(price=price, discount=saving, name=pricing.name)
    return best


def format_time_range(pricing: HappyHourPricing) -> str:
    """Render the pricing window as "HH:MM - HH:MM"."""
    return f"{pricing.start_time} - {pricing.end_time}"


def time_until_next_happy_hour(
    pricing: HappyHourPricing, now: datetime
) -> Countdown | None:
    """Return the wait until the pricing next starts.

    A running pricing yields a zero countdown. Pricings that are switched off,
    have no scheduled weekdays or a malformed start time yield None.
    """
    if not pricing.is_active or not pricing.days_of_week:
        return None
    window = ClockWindow.parse(pricing.start_time, pricing.end_time)
    if window is None:
        return None
    if window.is_open(pricing.days_of_week, now):
        return Countdown(total_minutes=0)

    current = minutes_of_day(now)
    today = day_of_week(now)
    if today in pricing.days_of_week and current < window.start:
        return Countdown(total_minutes=window.start - current)

    for offset in range(1, DAYS_PER_WEEK + 1):
        if (today + offset) % DAYS_PER_WEEK in pricing.days_of_week:
            until_midnight = MINUTES_PER_DAY - current
            whole_days = (offset - 1) * MINUTES_PER_DAY
            return Countdown(total_minutes=until_midnight + whole_days + window.start)
    return None
