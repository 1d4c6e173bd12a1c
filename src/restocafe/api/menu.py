"""Menu promotion endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Request, status

from restocafe.api.schemas import ItemQuoteRequest
from restocafe.services.daily_specials import day_name
from restocafe.services.happy_hour import format_time_range
from restocafe.services.promotions import CustomizationError, MenuItemNotFoundError

if TYPE_CHECKING:
    from restocafe.containers import AppContainer
    from restocafe.services.daily_specials import PricedSpecial
    from restocafe.services.promotions import ComboOffer, HappyHourStatus

router = APIRouter(prefix="/menu", tags=["menu"])


def _resolve_at(request: Request, at: datetime | None) -> datetime | None:
    """Convert an explicit instant to the restaurant's local clock."""
    if at is None or at.tzinfo is None:
        return at
    container: AppContainer = request.app.state.container
    return at.astimezone(ZoneInfo(container.settings.restaurant_timezone))


@router.get("/specials/today")
async def today_specials(
    request: Request, at: datetime | None = None
) -> dict[str, object]:
    """Return daily specials running now."""
    container: AppContainer = request.app.state.container
    specials = container.promotions_service.today_specials(_resolve_at(request, at))
    return {"specials": [_special_payload(entry) for entry in specials]}


@router.get("/specials/{day_of_week}")
async def specials_for_day(day_of_week: int, request: Request) -> dict[str, object]:
    """Return the specials scheduled for a weekday (0 = Sunday)."""
    try:
        name = day_name(day_of_week)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    container: AppContainer = request.app.state.container
    specials = container.promotions_service.specials_for_day(day_of_week)
    return {
        "day": name,
        "specials": [_special_payload(entry) for entry in specials],
    }


@router.get("/happy-hours")
async def happy_hours(request: Request, at: datetime | None = None) -> dict[str, object]:
    """Return every happy hour with its running state and countdown."""
    container: AppContainer = request.app.state.container
    schedule = container.promotions_service.happy_hour_schedule(
        _resolve_at(request, at)
    )
    return {"happy_hours": [_happy_hour_payload(entry) for entry in schedule]}


@router.get("/items/{item_id}/best-discount")
async def best_discount(
    item_id: str, request: Request, at: datetime | None = None
) -> dict[str, object]:
    """Return the best running happy hour price for a menu item."""
    container: AppContainer = request.app.state.container
    try:
        offer = container.promotions_service.best_discount(
            item_id, _resolve_at(request, at)
        )
    except MenuItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown menu item: {exc}",
        ) from exc
    if offer is None:
        return {"item_id": item_id, "offer": None}
    return {
        "item_id": item_id,
        "offer": {"price": offer.price, "discount": offer.discount, "name": offer.name},
    }


@router.get("/items/{item_id}/customizations")
async def item_customizations(item_id: str, request: Request) -> dict[str, object]:
    """Return the customizations offered for an item, grouped by kind."""
    container: AppContainer = request.app.state.container
    try:
        groups = container.promotions_service.customization_options(item_id)
    except MenuItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown menu item: {exc}",
        ) from exc
    return {
        "item_id": item_id,
        "customizations": {
            kind: [
                {"id": custom.id, "name": custom.name, "price": custom.price}
                for custom in customs
            ]
            for kind, customs in groups.items()
        },
    }


@router.post("/items/{item_id}/price")
async def quote_item(
    item_id: str, payload: ItemQuoteRequest, request: Request
) -> dict[str, object]:
    """Price an item with the selected customizations and quantity."""
    container: AppContainer = request.app.state.container
    try:
        quote = container.promotions_service.quote_item(
            item_id, payload.customizations, payload.quantity
        )
    except MenuItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown menu item: {exc}",
        ) from exc
    except CustomizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors
        ) from exc
    return {
        "item_id": item_id,
        "quantity": quote.quantity,
        "unit_price": quote.menu_item.price,
        "price": quote.price,
        "customizations": quote.summary,
    }


@router.get("/combos")
async def combos(request: Request, at: datetime | None = None) -> dict[str, object]:
    """Return combos that can be ordered now."""
    container: AppContainer = request.app.state.container
    offers = container.promotions_service.active_combos(_resolve_at(request, at))
    return {"combos": [_combo_payload(offer) for offer in offers]}


def _special_payload(entry: PricedSpecial) -> dict[str, object]:
    special = entry.special
    return {
        "id": special.id,
        "menu_item_id": special.menu_item_id,
        "name": entry.menu_item.name,
        "description": special.description,
        "day": day_name(special.day_of_week),
        "start_time": special.start_time,
        "end_time": special.end_time,
        "discount_percentage": special.discount_percentage,
        "original_price": entry.menu_item.price,
        "price": entry.price,
    }


def _happy_hour_payload(entry: HappyHourStatus) -> dict[str, object]:
    pricing = entry.pricing
    countdown = None
    if entry.countdown is not None:
        countdown = {
            "hours": entry.countdown.hours,
            "minutes": entry.countdown.minutes,
            "total_minutes": entry.countdown.total_minutes,
        }
    return {
        "id": pricing.id,
        "name": pricing.name,
        "discount_percentage": pricing.discount_percentage,
        "time_range": format_time_range(pricing),
        "days_of_week": sorted(pricing.days_of_week),
        "applicable_categories": sorted(pricing.applicable_categories),
        "running": entry.running,
        "starts_in": countdown,
    }


def _combo_payload(offer: ComboOffer) -> dict[str, object]:
    combo = offer.combo
    return {
        "id": combo.id,
        "name": combo.name,
        "description": combo.description,
        "items": list(combo.items),
        "items_label": offer.items_label,
        "original_price": combo.original_price,
        "discounted_price": combo.discounted_price,
        "savings": offer.savings,
        "discount_percentage": offer.discount_percentage,
        "valid_from": combo.valid_from.isoformat(),
        "valid_until": combo.valid_until.isoformat(),
    }
