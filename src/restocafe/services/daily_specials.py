"""Daily special resolution."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from restocafe.domain.menu import DailySpecial, MenuItem
from restocafe.services.windows import window_is_open

logger = logging.getLogger(__name__)

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclass(frozen=True)
class PricedSpecial:
    """Daily special joined with its menu item."""

    special: DailySpecial
    menu_item: MenuItem
    price: float


def is_special_active(special: DailySpecial, now: datetime) -> bool:
    """Return True when the special applies at the given instant."""
    if not special.is_active:
        return False
    return window_is_open(
        {special.day_of_week}, special.start_time, special.end_time, now
    )


def apply_special_discount(menu_item: MenuItem, special: DailySpecial) -> float:
    """Return the item price with the special's percentage taken off."""
    discount = menu_item.price * special.discount_percentage / 100
    return menu_item.price - discount


def get_today_specials(
    specials: Iterable[DailySpecial], now: datetime
) -> list[DailySpecial]:
    """Return the specials running right now, in input order."""
    return [special for special in specials if is_special_active(special, now)]


def get_specials_for_day(
    specials: Iterable[DailySpecial], day_of_week: int
) -> list[DailySpecial]:
    """Return enabled specials scheduled for a weekday, regardless of time."""
    return [
        special
        for special in specials
        if special.is_active and special.day_of_week == day_of_week
    ]


def day_name(day_of_week: int) -> str:
    """Return the weekday name for a Sunday-based index."""
    if not 0 <= day_of_week < len(DAY_NAMES):
        raise ValueError(f"day_of_week must be between 0 and 6, got {day_of_week}")
    return DAY_NAMES[day_of_week]


def price_specials(
    specials: Iterable[DailySpecial], menu_items: Iterable[MenuItem]
) -> list[PricedSpecial]:
    """Attach menu items and discounted prices to specials."""
    items_by_id = {item.id: item for item in menu_items}
    priced: list[PricedSpecial] = []
    for special in specials:
        item = items_by_id.get(special.menu_item_id)
        if item is None:
            logger.warning(
                "Daily special references unknown menu item",
                extra={
                    "special_id": special.id,
                    "menu_item_id": special.menu_item_id,
                },
            )
            continue
        priced.append(
            PricedSpecial(
                special=special,
                menu_item=item,
                price=apply_special_discount(item, special),
            )
        )
    return priced
