"""Rider validation for registration and updates."""

from deliveryguard.entities.types import Rider
from deliveryguard.validation.types import ValidationErrors
from deliveryguard.validation.validators.field_constraints import (
    validate_email,
    validate_name,
    validate_phone,
    validate_range,
    validate_string_length,
)


def validate_rider(rider: Rider | None) -> ValidationErrors:
    """Validate a rider.

    Returns:
        The accumulated errors. Empty if the rider is valid.
    """
    errors = ValidationErrors()

    if rider is None:
        errors.add("Rider", "Rider cannot be null.")
        return errors

    validate_name(rider.name, errors, "Name")
    validate_email(rider.email, errors, "Email")
    validate_phone(rider.phone, errors, "Phone")
    validate_string_length(rider.vehicle_number, 50, "VehicleNumber", errors)
    _validate_current_location(rider, errors)

    return errors


def _validate_current_location(rider: Rider, errors: ValidationErrors) -> None:
    location = rider.current_location
    if location is None:
        return  # Optional until the rider reports a position

    validate_range(location.lat, -90, 90, "CurrentLocation.Lat", errors)
    validate_range(location.lon, -180, 180, "CurrentLocation.Lon", errors)
