"""Combo deal validity and pricing."""

import math
from collections.abc import Iterable
from datetime import datetime

from restocafe.domain.menu import ComboDeal, MenuItem

UNKNOWN_ITEM_NAME = "Unknown Item"


def calculate_savings(combo: ComboDeal) -> float:
    """Return the saving, recomputed from the two prices."""
    return combo.original_price - combo.discounted_price


def is_combo_valid(combo: ComboDeal, now: datetime) -> bool:
    """Return True when the combo is enabled and today is within its dates."""
    if not combo.is_active:
        return False
    return combo.valid_from <= now.date() <= combo.valid_until


def get_active_combos(combos: Iterable[ComboDeal], now: datetime) -> list[ComboDeal]:
    """Return purchasable combos, in input order."""
    return [combo for combo in combos if is_combo_valid(combo, now)]


def get_discount_percentage(combo: ComboDeal) -> int:
    """Return the saving as a whole percentage, rounding halves up."""
    if combo.original_price <= 0:
        return 0
    ratio = calculate_savings(combo) * 100 / combo.original_price
    return math.floor(ratio + 0.5)


def format_combo_items(combo: ComboDeal, menu_items: Iterable[MenuItem]) -> str:
    """Join the combo's item names with " + ", naming unknown ids "Unknown Item"."""
    names = {item.id: item.name for item in menu_items}
    return " + ".join(names.get(item_id, UNKNOWN_ITEM_NAME) for item_id in combo.items)
