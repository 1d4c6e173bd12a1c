"""Menu and promotion domain models."""

from dataclasses import dataclass, field
from datetime import date

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class MenuCustomization:
    """Customization offered for a menu item."""

    id: str
    name: str
    price: float
    kind: str


@dataclass(frozen=True)
class CartItemCustomization:
    """Customization selected for an item in the cart."""

    customization_id: str
    name: str
    price: float


@dataclass(frozen=True)
class MenuItem:
    """Catalog entry for a dish or drink."""

    id: str
    name: str
    price: float
    category: str
    description: str = ""
    available_customizations: tuple[MenuCustomization, ...] = ()
    is_available: bool = True
    preparation_time: int = 0


@dataclass(frozen=True)
class DailySpecial:
    """Percentage discount on one item for one weekday."""

    id: str
    menu_item_id: str
    day_of_week: int
    discount_percentage: float
    start_time: str
    end_time: str
    is_active: bool
    description: str = ""


@dataclass(frozen=True)
class HappyHourPricing:
    """Recurring time-boxed discount scoped to weekdays and categories."""

    id: str
    name: str
    discount_percentage: float
    start_time: str
    end_time: str
    days_of_week: frozenset[int]
    applicable_categories: frozenset[str] = field(default_factory=frozenset)
    is_active: bool = True


@dataclass(frozen=True)
class ComboDeal:
    """Bundle of menu items sold at a fixed price."""

    id: str
    name: str
    items: tuple[str, ...]
    original_price: float
    discounted_price: float
    discount: float
    valid_from: date
    valid_until: date
    is_active: bool
    description: str = ""


@dataclass(frozen=True)
class BestDiscount:
    """Winning happy hour offer for a menu item."""

    price: float
    discount: float
    name: str


@dataclass(frozen=True)
class Countdown:
    """Minutes remaining until a recurring offer starts."""

    total_minutes: int

    @property
    def hours(self) -> int:
        return self.total_minutes // MINUTES_PER_HOUR

    @property
    def minutes(self) -> int:
        return self.total_minutes % MINUTES_PER_HOUR
