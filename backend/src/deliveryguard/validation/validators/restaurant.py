"""Restaurant validation for registration and updates.

Checks run in a fixed order and never stop early, so a single pass reports
every problem with the submission:
1. Name (2-200 characters)
2. Phone (optional)
3. Delivery radius (greater than 0, at most 50 km)
4. Average preparation time (5-120 minutes)
5. Rating (0-5)
6. Address
7. Menu items, each under "Menu[<index>]"
"""

from deliveryguard.entities.types import MenuItem, Restaurant
from deliveryguard.validation.types import ValidationErrors
from deliveryguard.validation.validators.address import validate_address
from deliveryguard.validation.validators.field_constraints import (
    is_blank,
    validate_phone,
    validate_range,
    validate_restaurant_name,
)

MAX_DELIVERY_RADIUS_KM = 50


def validate_restaurant(restaurant: Restaurant | None) -> ValidationErrors:
    """Validate a restaurant.

    Returns:
        The accumulated errors. Empty if the restaurant is valid.
    """
    errors = ValidationErrors()

    if restaurant is None:
        errors.add("Restaurant", "Restaurant cannot be null.")
        return errors

    validate_restaurant_name(restaurant.name, errors, "Name")
    validate_phone(restaurant.phone, errors, "Phone")
    _validate_delivery_radius(restaurant, errors)
    validate_range(
        restaurant.average_preparation_time_minutes, 5, 120,
        "AveragePreparationTimeMinutes",
        errors,
    )
    validate_range(restaurant.rating, 0, 5, "Rating", errors)
    validate_address(restaurant.address, errors, "Address")
    _validate_menu(restaurant, errors)

    return errors


def _validate_delivery_radius(restaurant: Restaurant, errors: ValidationErrors) -> None:
    if not restaurant.delivery_radius_km > 0:
        errors.add("DeliveryRadiusKm", "Delivery radius must be greater than 0.")
    elif restaurant.delivery_radius_km > MAX_DELIVERY_RADIUS_KM:
        errors.add(
            "DeliveryRadiusKm",
            f"Delivery radius cannot exceed {MAX_DELIVERY_RADIUS_KM} km.",
        )


def _validate_menu(restaurant: Restaurant, errors: ValidationErrors) -> None:
    # A restaurant may register before adding any items
    if not restaurant.menu:
        return

    for index, item in enumerate(restaurant.menu):
        _validate_menu_item(item, f"Menu[{index}]", errors)


def _validate_menu_item(item: MenuItem, prefix: str, errors: ValidationErrors) -> None:
    if is_blank(item.name):
        errors.add(f"{prefix}.Name", "Menu item name is required.")

    if not item.price >= 0:
        errors.add(f"{prefix}.Price", "Menu item price cannot be negative.")

    validate_range(
        item.preparation_time_minutes, 5, 180,
        f"{prefix}.PreparationTimeMinutes",
        errors,
    )
