"""Static menu catalog loading and validation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from restocafe.domain.menu import (
    ComboDeal,
    DailySpecial,
    HappyHourPricing,
    MenuCustomization,
    MenuItem,
)
from restocafe.services.windows import DAYS_PER_WEEK, parse_clock_time

logger = logging.getLogger(__name__)

MAX_PERCENTAGE = 100


class CatalogError(ValueError):
    """Raised when catalog configuration is malformed."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid catalog: " + "; ".join(problems))


@dataclass(frozen=True)
class MenuCatalog:
    """Read-only promotional configuration for the restaurant."""

    menu_items: tuple[MenuItem, ...] = ()
    daily_specials: tuple[DailySpecial, ...] = ()
    happy_hours: tuple[HappyHourPricing, ...] = ()
    combos: tuple[ComboDeal, ...] = ()

    def find_item(self, item_id: str) -> MenuItem | None:
        for item in self.menu_items:
            if item.id == item_id:
                return item
        return None


class _CustomizationPayload(BaseModel):
    id: str
    name: str
    price: float
    category: str


class _MenuItemPayload(BaseModel):
    id: str
    name: str
    price: float
    category: str
    description: str = ""
    available_customizations: list[_CustomizationPayload] = Field(
        default_factory=list, alias="availableCustomizations"
    )
    is_available: bool = Field(default=True, alias="isAvailable")
    preparation_time: int = Field(default=0, alias="preparationTime")


class _DailySpecialPayload(BaseModel):
    id: str
    menu_item_id: str = Field(alias="menuItemId")
    day_of_week: int = Field(alias="dayOfWeek")
    discount_percentage: float = Field(alias="discountPercentage")
    description: str = ""
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    is_active: bool = Field(default=True, alias="isActive")


class _HappyHourPayload(BaseModel):
    id: str
    name: str
    discount_percentage: float = Field(alias="discountPercentage")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    days_of_week: list[int] = Field(alias="daysOfWeek")
    applicable_categories: list[str] = Field(
        default_factory=list, alias="applicableCategories"
    )
    is_active: bool = Field(default=True, alias="isActive")


class _ComboPayload(BaseModel):
    id: str
    name: str
    description: str = ""
    items: list[str]
    original_price: float = Field(alias="originalPrice")
    discounted_price: float = Field(alias="discountedPrice")
    discount: float | None = None
    valid_from: date = Field(alias="validFrom")
    valid_until: date = Field(alias="validUntil")
    is_active: bool = Field(default=True, alias="isActive")


class _CatalogPayload(BaseModel):
    menu_items: list[_MenuItemPayload] = Field(default_factory=list, alias="menuItems")
    daily_specials: list[_DailySpecialPayload] = Field(
        default_factory=list, alias="dailySpecials"
    )
    happy_hours: list[_HappyHourPayload] = Field(
        default_factory=list, alias="happyHours"
    )
    combos: list[_ComboPayload] = Field(default_factory=list)


def load_catalog(path: str | Path) -> MenuCatalog:
    """Load and validate a catalog from a JSON file."""
    document = Path(path).read_text(encoding="utf-8")
    try:
        payload = _CatalogPayload.model_validate_json(document)
    except ValidationError as exc:
        problems = [
            _describe_error(error["loc"], error["msg"]) for error in exc.errors()
        ]
        raise CatalogError(problems) from exc
    catalog = _to_catalog(payload)
    validate_catalog(catalog)
    logger.info(
        "Loaded menu catalog",
        extra={"path": str(path), "menu_items": len(catalog.menu_items)},
    )
    return catalog


def _describe_error(loc: tuple[int | str, ...], msg: str) -> str:
    location = ".".join(str(part) for part in loc) or "document"
    return f"{location}: {msg}"


def validate_catalog(catalog: MenuCatalog) -> None:
    """Raise CatalogError listing every malformed entry."""
    problems: list[str] = []
    problems.extend(_check_menu_items(catalog.menu_items))
    for special in catalog.daily_specials:
        label = f"daily special {special.id}"
        problems.extend(_check_times(label, special.start_time, special.end_time))
        problems.extend(_check_percentage(label, special.discount_percentage))
        if not 0 <= special.day_of_week < DAYS_PER_WEEK:
            problems.append(f"{label}: day_of_week {special.day_of_week} out of range")
    for pricing in catalog.happy_hours:
        label = f"happy hour {pricing.id}"
        problems.extend(_check_times(label, pricing.start_time, pricing.end_time))
        problems.extend(_check_percentage(label, pricing.discount_percentage))
        invalid_days = sorted(
            day for day in pricing.days_of_week if not 0 <= day < DAYS_PER_WEEK
        )
        if invalid_days:
            problems.append(f"{label}: days_of_week {invalid_days} out of range")
    for combo in catalog.combos:
        label = f"combo {combo.id}"
        if combo.original_price <= 0:
            problems.append(f"{label}: original_price must be positive")
        if combo.discounted_price < 0:
            problems.append(f"{label}: discounted_price must not be negative")
        if combo.valid_from > combo.valid_until:
            problems.append(f"{label}: valid_from is after valid_until")
    if problems:
        raise CatalogError(problems)


def _check_menu_items(items: Iterable[MenuItem]) -> list[str]:
    problems: list[str] = []
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            problems.append(f"menu item {item.id}: duplicate id")
        seen.add(item.id)
        if item.price < 0:
            problems.append(f"menu item {item.id}: price must not be negative")
    return problems


def _check_times(label: str, start_time: str, end_time: str) -> list[str]:
    problems = []
    for name, value in (("start_time", start_time), ("end_time", end_time)):
        if parse_clock_time(value) is None:
            problems.append(f"{label}: {name} {value!r} is not HH:MM")
    return problems


def _check_percentage(label: str, value: float) -> list[str]:
    if 0 <= value <= MAX_PERCENTAGE:
        return []
    return [f"{label}: discount_percentage {value:g} out of range"]


def _to_catalog(payload: _CatalogPayload) -> MenuCatalog:
    return MenuCatalog(
        menu_items=tuple(
            MenuItem(
                id=item.id,
                name=item.name,
                price=item.price,
                category=item.category,
                description=item.description,
                available_customizations=tuple(
                    MenuCustomization(
                        id=custom.id,
                        name=custom.name,
                        price=custom.price,
                        kind=custom.category,
                    )
                    for custom in item.available_customizations
                ),
                is_available=item.is_available,
                preparation_time=item.preparation_time,
            )
            for item in payload.menu_items
        ),
        daily_specials=tuple(
            DailySpecial(
                id=special.id,
                menu_item_id=special.menu_item_id,
                day_of_week=special.day_of_week,
                discount_percentage=special.discount_percentage,
                start_time=special.start_time,
                end_time=special.end_time,
                is_active=special.is_active,
                description=special.description,
            )
            for special in payload.daily_specials
        ),
        happy_hours=tuple(
            HappyHourPricing(
                id=pricing.id,
                name=pricing.name,
                discount_percentage=pricing.discount_percentage,
                start_time=pricing.start_time,
                end_time=pricing.end_time,
                days_of_week=frozenset(pricing.days_of_week),
                applicable_categories=frozenset(pricing.applicable_categories),
                is_active=pricing.is_active,
            )
            for pricing in payload.happy_hours
        ),
        combos=tuple(
            ComboDeal(
                id=combo.id,
                name=combo.name,
                items=tuple(combo.items),
                original_price=combo.original_price,
                discounted_price=combo.discounted_price,
                discount=(
                    combo.discount
                    if combo.discount is not None
                    else combo.original_price - combo.discounted_price
                ),
                valid_from=combo.valid_from,
                valid_until=combo.valid_until,
                is_active=combo.is_active,
                description=combo.description,
            )
            for combo in payload.combos
        ),
    )
