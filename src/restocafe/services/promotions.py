"""Promotion lookups against the configured catalog."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from restocafe.domain.menu import (
    BestDiscount,
    CartItemCustomization,
    ComboDeal,
    Countdown,
    HappyHourPricing,
    MenuCustomization,
    MenuItem,
)
from restocafe.services.catalog import MenuCatalog
from restocafe.services.combos import (
    calculate_savings,
    format_combo_items,
    get_active_combos,
    get_discount_percentage,
)
from restocafe.services.customization import (
    calculate_item_price,
    format_customizations,
    group_customizations_by_kind,
    validate_customizations,
)
from restocafe.services.daily_specials import (
    PricedSpecial,
    get_specials_for_day,
    get_today_specials,
    price_specials,
)
from restocafe.services.happy_hour import (
    get_active_happy_hours,
    get_best_discount,
    is_happy_hour,
    time_until_next_happy_hour,
)

Clock = Callable[[], datetime]


class MenuItemNotFoundError(LookupError):
    """Raised when a menu item id is not in the catalog."""


class CustomizationError(ValueError):
    """Raised when selected customizations are not offered for an item."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def system_clock(timezone_name: str) -> Clock:
    """Return a clock reading the current time in the restaurant's timezone."""
    tz = ZoneInfo(timezone_name)

    def now() -> datetime:
        return datetime.now(tz=tz)

    return now


@dataclass(frozen=True)
class HappyHourStatus:
    """Happy hour with its running flag and countdown."""

    pricing: HappyHourPricing
    running: bool
    countdown: Countdown | None


@dataclass(frozen=True)
class ComboOffer:
    """Purchasable combo with derived display values."""

    combo: ComboDeal
    savings: float
    discount_percentage: int
    items_label: str


@dataclass(frozen=True)
class ItemQuote:
    """Price of a menu item with its selected customizations."""

    menu_item: MenuItem
    customizations: tuple[CartItemCustomization, ...]
    quantity: int
    price: float
    summary: str


@dataclass
class PromotionsService:
    """Resolves the catalog's promotions for a given instant."""

    catalog: MenuCatalog
    clock: Clock

    def today_specials(self, now: datetime | None = None) -> list[PricedSpecial]:
        """Return specials running now with discounted prices."""
        specials = get_today_specials(self.catalog.daily_specials, self._now(now))
        return price_specials(specials, self.catalog.menu_items)

    def specials_for_day(self, day_of_week: int) -> list[PricedSpecial]:
        """Return a weekday's specials with discounted prices."""
        specials = get_specials_for_day(self.catalog.daily_specials, day_of_week)
        return price_specials(specials, self.catalog.menu_items)

    def active_happy_hours(
        self, now: datetime | None = None
    ) -> list[HappyHourPricing]:
        return get_active_happy_hours(self.catalog.happy_hours, self._now(now))

    def happy_hour_schedule(self, now: datetime | None = None) -> list[HappyHourStatus]:
        """Return every happy hour with its state at the given instant."""
        resolved = self._now(now)
        return [
            HappyHourStatus(
                pricing=pricing,
                running=is_happy_hour(pricing, resolved),
                countdown=time_until_next_happy_hour(pricing, resolved),
            )
            for pricing in self.catalog.happy_hours
        ]

    def best_discount(
        self, item_id: str, now: datetime | None = None
    ) -> BestDiscount | None:
        """Return the best running happy hour offer for a menu item."""
        item = self._item(item_id)
        return get_best_discount(item, self.catalog.happy_hours, self._now(now))

    def active_combos(self, now: datetime | None = None) -> list[ComboOffer]:
        """Return purchasable combos with savings and item names."""
        return [
            ComboOffer(
                combo=combo,
                savings=calculate_savings(combo),
                discount_percentage=get_discount_percentage(combo),
                items_label=format_combo_items(combo, self.catalog.menu_items),
            )
            for combo in get_active_combos(self.catalog.combos, self._now(now))
        ]

    def customization_options(
        self, item_id: str
    ) -> dict[str, list[MenuCustomization]]:
        """Return the customizations offered for an item grouped by kind."""
        item = self._item(item_id)
        return group_customizations_by_kind(item.available_customizations)

    def quote_item(
        self, item_id: str, customization_ids: list[str], quantity: int = 1
    ) -> ItemQuote:
        """Price an item with the selected customizations.

        Raises CustomizationError listing every customization the item does
        not offer.
        """
        item = self._item(item_id)
        known = {
            custom.id: custom
            for menu_item in self.catalog.menu_items
            for custom in menu_item.available_customizations
        }
        selected = tuple(
            _selection(custom_id, known.get(custom_id))
            for custom_id in customization_ids
        )
        check = validate_customizations(item, selected)
        if not check.valid:
            raise CustomizationError(check.errors)
        return ItemQuote(
            menu_item=item,
            customizations=selected,
            quantity=quantity,
            price=calculate_item_price(item, selected, quantity),
            summary=format_customizations(list(selected)),
        )

    def _item(self, item_id: str) -> MenuItem:
        item = self.catalog.find_item(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    def _now(self, now: datetime | None) -> datetime:
        return now if now is not None else self.clock()


def _selection(
    customization_id: str, custom: MenuCustomization | None
) -> CartItemCustomization:
    if custom is None:
        return CartItemCustomization(
            customization_id=customization_id, name=customization_id, price=0
        )
    return CartItemCustomization(
        customization_id=custom.id, name=custom.name, price=custom.price
    )
