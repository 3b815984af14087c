"""Address validation shared by every entity that owns an address."""

from deliveryguard.entities.types import Address
from deliveryguard.validation.types import ValidationErrors
from deliveryguard.validation.validators.field_constraints import format_number, is_blank


def validate_address(
    address: Address | None,
    errors: ValidationErrors,
    field_prefix: str = "Address",
) -> None:
    """Validate an address into the caller's accumulator.

    Args:
        address: The address to validate (required)
        errors: Accumulator shared with the owning entity's validation pass
        field_prefix: Path prefix for error keys, e.g. "Address"
    """
    if address is None:
        errors.add(field_prefix, "Address is required.")
        return

    _validate_required_text(
        address.street, 200, f"{field_prefix}.Street", "Street address", errors
    )
    _validate_required_text(
        address.city, 100, f"{field_prefix}.City", "City", errors
    )
    _validate_required_text(
        address.zip_code, 20, f"{field_prefix}.ZipCode", "ZIP code", errors
    )
    _validate_location(address, errors, field_prefix)


def _validate_required_text(
    value: str | None,
    max_length: int,
    field: str,
    label: str,
    errors: ValidationErrors,
) -> None:
    if is_blank(value):
        errors.add(field, f"{label} is required.")
    elif len(value.strip()) > max_length:
        errors.add(field, f"{label} cannot exceed {max_length} characters.")


def _validate_location(address: Address, errors: ValidationErrors, field_prefix: str) -> None:
    location = address.location
    if location is None:
        errors.add(f"{field_prefix}.Location", "Location coordinates are required.")
        return

    if not -90 <= location.lat <= 90:
        errors.add(
            f"{field_prefix}.Location.Lat",
            f"Latitude must be between -90 and 90. Got: {format_number(location.lat)}",
        )

    if not -180 <= location.lon <= 180:
        errors.add(
            f"{field_prefix}.Location.Lon",
            f"Longitude must be between -180 and 180. Got: {format_number(location.lon)}",
        )
