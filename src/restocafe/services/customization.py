"""Menu item customization pricing and checks."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from restocafe.domain.menu import CartItemCustomization, MenuCustomization, MenuItem


@dataclass(frozen=True)
class CustomizationCheck:
    """Outcome of validating selected customizations."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def calculate_item_price(
    menu_item: MenuItem,
    customizations: Iterable[CartItemCustomization],
    quantity: int = 1,
) -> float:
    """Return the line price for an item with its customizations."""
    extras = sum(custom.price for custom in customizations)
    return (menu_item.price + extras) * quantity


def validate_customizations(
    menu_item: MenuItem, customizations: Iterable[CartItemCustomization]
) -> CustomizationCheck:
    """Check every selected customization is offered for the item."""
    offered = {custom.id for custom in menu_item.available_customizations}
    errors = [
        f'Customization "{custom.name}" is not available for this item'
        for custom in customizations
        if custom.customization_id not in offered
    ]
    return CustomizationCheck(valid=not errors, errors=errors)


def format_customizations(customizations: list[CartItemCustomization]) -> str:
    """Describe selected customizations with their surcharges."""
    if not customizations:
        return "No customizations"
    return ", ".join(f"{custom.name} (+₹{custom.price:g})" for custom in customizations)


def group_customizations_by_kind(
    customizations: Iterable[MenuCustomization],
) -> dict[str, list[MenuCustomization]]:
    """Group customizations by kind, keeping first-seen kind order."""
    groups: dict[str, list[MenuCustomization]] = {}
    for custom in customizations:
        groups.setdefault(custom.kind, []).append(custom)
    return groups
