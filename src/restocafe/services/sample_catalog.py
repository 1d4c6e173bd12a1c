"""Built-in promotional data served when no catalog file is configured."""

from datetime import date

from restocafe.domain.menu import (
    ComboDeal,
    DailySpecial,
    HappyHourPricing,
    MenuCustomization,
    MenuItem,
)
from restocafe.services.catalog import MenuCatalog

WEEKDAYS = frozenset({1, 2, 3, 4, 5})
WEEKEND = frozenset({0, 6})

CUSTOMIZATIONS = (
    MenuCustomization(id="extra-cheese", name="Extra Cheese", price=30, kind="add"),
    MenuCustomization(id="extra-sauce", name="Extra Sauce", price=20, kind="add"),
    MenuCustomization(id="extra-paneer", name="Extra Paneer", price=50, kind="add"),
    MenuCustomization(
        id="extra-mushroom", name="Extra Mushroom", price=40, kind="add"
    ),
    MenuCustomization(id="extra-olives", name="Extra Olives", price=35, kind="add"),
    MenuCustomization(id="no-onions", name="No Onions", price=0, kind="remove"),
    MenuCustomization(id="no-garlic", name="No Garlic", price=0, kind="remove"),
    MenuCustomization(id="no-tomatoes", name="No Tomatoes", price=0, kind="remove"),
    MenuCustomization(id="no-capsicum", name="No Capsicum", price=0, kind="remove"),
    MenuCustomization(id="less-spicy", name="Less Spicy", price=0, kind="modify"),
    MenuCustomization(id="extra-spicy", name="Extra Spicy", price=10, kind="modify"),
    MenuCustomization(id="well-done", name="Well Done", price=0, kind="modify"),
    MenuCustomization(id="less-oil", name="Less Oil", price=0, kind="modify"),
)


def _customizations(*ids: str) -> tuple[MenuCustomization, ...]:
    return tuple(custom for custom in CUSTOMIZATIONS if custom.id in ids)


MENU_ITEMS = (
    MenuItem(
        id="pizza-margherita",
        name="Margherita Pizza",
        price=299,
        category="pizza",
        available_customizations=_customizations(
            "extra-cheese", "extra-olives", "extra-mushroom", "no-tomatoes"
        ),
        preparation_time=20,
    ),
    MenuItem(
        id="pizza-pepperoni",
        name="Pepperoni Pizza",
        price=349,
        category="pizza",
        available_customizations=_customizations("extra-cheese", "extra-spicy"),
        preparation_time=20,
    ),
    MenuItem(
        id="burger-classic",
        name="Classic Burger",
        price=199,
        category="burgers",
        available_customizations=_customizations(
            "extra-cheese", "extra-sauce", "no-onions", "well-done"
        ),
        preparation_time=15,
    ),
    MenuItem(
        id="pasta-alfredo",
        name="Pasta Alfredo",
        price=279,
        category="pasta",
        available_customizations=_customizations("extra-cheese", "extra-mushroom"),
        preparation_time=18,
    ),
    MenuItem(
        id="pasta-arrabiata",
        name="Pasta Arrabiata",
        price=259,
        category="pasta",
        available_customizations=_customizations("extra-spicy", "no-garlic"),
        preparation_time=18,
    ),
    MenuItem(
        id="biryani-veg",
        name="Veg Biryani",
        price=249,
        category="mains",
        available_customizations=_customizations(
            "extra-paneer", "less-spicy", "less-oil"
        ),
        preparation_time=25,
    ),
    MenuItem(
        id="thali-special",
        name="Special Thali",
        price=349,
        category="mains",
        available_customizations=_customizations("less-spicy", "less-oil"),
        preparation_time=25,
    ),
    MenuItem(
        id="sandwich-club",
        name="Club Sandwich",
        price=179,
        category="sandwiches",
        available_customizations=_customizations("no-onions", "no-tomatoes"),
        preparation_time=10,
    ),
    MenuItem(
        id="veg-sandwich",
        name="Veg Sandwich",
        price=129,
        category="breakfast",
        available_customizations=_customizations("no-onions", "no-capsicum"),
        preparation_time=10,
    ),
    MenuItem(
        id="momos-veg",
        name="Veg Momos",
        price=149,
        category="appetizers",
        available_customizations=_customizations("extra-spicy", "extra-sauce"),
        preparation_time=12,
    ),
    MenuItem(
        id="garlic-bread",
        name="Garlic Bread",
        price=129,
        category="appetizers",
        available_customizations=_customizations("extra-cheese"),
        preparation_time=8,
    ),
    MenuItem(
        id="french-fries",
        name="French Fries",
        price=99,
        category="appetizers",
        preparation_time=8,
    ),
    MenuItem(
        id="coke-1.5l",
        name="Coke 1.5L",
        price=99,
        category="beverages",
    ),
    MenuItem(id="soft-drink", name="Soft Drink", price=60, category="beverages"),
    MenuItem(id="cappuccino", name="Cappuccino", price=120, category="beverages"),
    MenuItem(id="orange-juice", name="Orange Juice", price=90, category="beverages"),
    MenuItem(id="tiramisu", name="Tiramisu", price=189, category="desserts"),
)

DAILY_SPECIALS = (
    DailySpecial(
        id="special-1",
        menu_item_id="pizza-margherita",
        day_of_week=1,
        discount_percentage=20,
        description="Monday Pizza Special - 20% off all pizzas!",
        start_time="11:00",
        end_time="23:00",
        is_active=True,
    ),
    DailySpecial(
        id="special-2",
        menu_item_id="burger-classic",
        day_of_week=2,
        discount_percentage=25,
        description="Tasty Tuesday - 25% off all burgers!",
        start_time="12:00",
        end_time="22:00",
        is_active=True,
    ),
    DailySpecial(
        id="special-3",
        menu_item_id="pasta-alfredo",
        day_of_week=3,
        discount_percentage=15,
        description="Pasta Wednesday - 15% off all pasta dishes!",
        start_time="12:00",
        end_time="21:00",
        is_active=True,
    ),
    DailySpecial(
        id="special-4",
        menu_item_id="biryani-veg",
        day_of_week=4,
        discount_percentage=30,
        description="Biryani Thursday - 30% off all biryanis!",
        start_time="11:30",
        end_time="22:30",
        is_active=True,
    ),
    DailySpecial(
        id="special-5",
        menu_item_id="sandwich-club",
        day_of_week=5,
        discount_percentage=20,
        description="Friday Sandwich Special - 20% off!",
        start_time="10:00",
        end_time="20:00",
        is_active=True,
    ),
    DailySpecial(
        id="special-6",
        menu_item_id="momos-veg",
        day_of_week=6,
        discount_percentage=25,
        description="Saturday Momos Mania - 25% off!",
        start_time="12:00",
        end_time="23:00",
        is_active=True,
    ),
    DailySpecial(
        id="special-7",
        menu_item_id="thali-special",
        day_of_week=0,
        discount_percentage=20,
        description="Sunday Family Thali - 20% off!",
        start_time="12:00",
        end_time="22:00",
        is_active=True,
    ),
)

HAPPY_HOURS = (
    HappyHourPricing(
        id="hh-1",
        name="Evening Happy Hour",
        discount_percentage=30,
        start_time="17:00",
        end_time="19:00",
        days_of_week=WEEKDAYS,
        applicable_categories=frozenset({"beverages", "appetizers"}),
    ),
    HappyHourPricing(
        id="hh-2",
        name="Weekend Brunch Special",
        discount_percentage=25,
        start_time="11:00",
        end_time="14:00",
        days_of_week=WEEKEND,
        applicable_categories=frozenset({"breakfast", "beverages"}),
    ),
    HappyHourPricing(
        id="hh-3",
        name="Late Night Deals",
        discount_percentage=20,
        start_time="21:00",
        end_time="23:00",
        days_of_week=frozenset({5, 6}),
    ),
)

COMBOS = (
    ComboDeal(
        id="combo-1",
        name="Family Feast",
        description="2 Pizzas + Garlic Bread + 1.5L Coke",
        items=("pizza-margherita", "pizza-pepperoni", "garlic-bread", "coke-1.5l"),
        original_price=899,
        discounted_price=699,
        discount=200,
        valid_from=date(2026, 1, 1),
        valid_until=date(2026, 12, 31),
        is_active=True,
    ),
    ComboDeal(
        id="combo-2",
        name="Burger Combo",
        description="Burger + Fries + Drink",
        items=("burger-classic", "french-fries", "soft-drink"),
        original_price=349,
        discounted_price=279,
        discount=70,
        valid_from=date(2026, 1, 1),
        valid_until=date(2026, 12, 31),
        is_active=True,
    ),
    ComboDeal(
        id="combo-3",
        name="Breakfast Special",
        description="Sandwich + Coffee + Juice",
        items=("veg-sandwich", "cappuccino", "orange-juice"),
        original_price=299,
        discounted_price=229,
        discount=70,
        valid_from=date(2026, 1, 1),
        valid_until=date(2026, 12, 31),
        is_active=True,
    ),
    ComboDeal(
        id="combo-4",
        name="Pasta Paradise",
        description="2 Pasta Dishes + Garlic Bread + Dessert",
        items=("pasta-alfredo", "pasta-arrabiata", "garlic-bread", "tiramisu"),
        original_price=749,
        discounted_price=599,
        discount=150,
        valid_from=date(2026, 1, 1),
        valid_until=date(2026, 12, 31),
        is_active=True,
    ),
)


def sample_catalog() -> MenuCatalog:
    """Return the built-in catalog."""
    return MenuCatalog(
        menu_items=MENU_ITEMS,
        daily_specials=DAILY_SPECIALS,
        happy_hours=HAPPY_HOURS,
        combos=COMBOS,
    )
