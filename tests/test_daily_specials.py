"""Tests for daily special resolution."""

import logging
from datetime import datetime

import pytest

from restocafe.domain.menu import DailySpecial, MenuItem
from restocafe.services.daily_specials import (
    apply_special_discount,
    day_name,
    get_specials_for_day,
    get_today_specials,
    is_special_active,
    price_specials,
)

MONDAY_AFTERNOON = datetime(2026, 10, 19, 15, 30)
TUESDAY_AFTERNOON = datetime(2026, 10, 20, 15, 30)


def _special(**overrides) -> DailySpecial:  # type: ignore[no-untyped-def]
    values: dict[str, object] = {
        "id": "special-1",
        "menu_item_id": "pizza-margherita",
        "day_of_week": 1,
        "discount_percentage": 20,
        "start_time": "11:00",
        "end_time": "23:00",
        "is_active": True,
    }
    values.update(overrides)
    return DailySpecial(**values)  # type: ignore[arg-type]


def _item(price: float = 500) -> MenuItem:
    return MenuItem(
        id="pizza-margherita", name="Margherita Pizza", price=price, category="pizza"
    )


def test_monday_special_discounts_item() -> None:
    special = _special()

    assert is_special_active(special, MONDAY_AFTERNOON)
    assert apply_special_discount(_item(), special) == 400


def test_special_is_not_active_on_other_days() -> None:
    assert not is_special_active(_special(), TUESDAY_AFTERNOON)


def test_disabled_special_is_never_active() -> None:
    special = _special(is_active=False)

    assert not is_special_active(special, MONDAY_AFTERNOON)
    assert not is_special_active(special, datetime(2026, 10, 19, 11, 0))


def test_special_bounds_are_inclusive() -> None:
    special = _special()

    assert is_special_active(special, datetime(2026, 10, 19, 11, 0))
    assert is_special_active(special, datetime(2026, 10, 19, 23, 0))
    assert not is_special_active(special, datetime(2026, 10, 19, 10, 59))


def test_out_of_range_day_never_matches() -> None:
    assert not is_special_active(_special(day_of_week=9), MONDAY_AFTERNOON)


def test_malformed_time_is_treated_as_inactive() -> None:
    assert not is_special_active(_special(start_time="11h00"), MONDAY_AFTERNOON)


def test_discount_identity_and_full_discount() -> None:
    item = _item(price=349)

    assert apply_special_discount(item, _special(discount_percentage=0)) == 349
    assert apply_special_discount(item, _special(discount_percentage=100)) == 0


def test_today_specials_preserves_order() -> None:
    late = _special(id="late", start_time="15:00")
    tuesday = _special(id="tuesday", day_of_week=2)
    early = _special(id="early", start_time="09:00")

    result = get_today_specials([late, tuesday, early], MONDAY_AFTERNOON)

    assert [special.id for special in result] == ["late", "early"]


def test_specials_for_day_ignores_time() -> None:
    specials = [
        _special(id="a"),
        _special(id="b", is_active=False),
        _special(id="c", day_of_week=3),
    ]

    assert [special.id for special in get_specials_for_day(specials, 1)] == ["a"]


def test_day_name() -> None:
    assert day_name(0) == "Sunday"
    assert day_name(6) == "Saturday"
    with pytest.raises(ValueError):
        day_name(7)


def test_price_specials_skips_unknown_items(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("restocafe"), "propagate", True)
    specials = [_special(), _special(id="ghost", menu_item_id="missing")]

    with caplog.at_level(logging.WARNING):
        priced = price_specials(specials, [_item()])

    assert len(priced) == 1
    assert priced[0].price == 400
    assert priced[0].menu_item.name == "Margherita Pizza"
    assert "unknown menu item" in caplog.text
