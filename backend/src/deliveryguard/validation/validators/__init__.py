"""Entity validators for DeliveryGuard.

One validate function per entity type, composed from the shared field
constraint checks.
"""

from deliveryguard.validation.validators.address import validate_address
from deliveryguard.validation.validators.field_constraints import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    is_blank,
    validate_email,
    validate_name,
    validate_phone,
    validate_range,
    validate_restaurant_name,
    validate_string_length,
)
from deliveryguard.validation.validators.restaurant import validate_restaurant
from deliveryguard.validation.validators.rider import validate_rider
from deliveryguard.validation.validators.user import validate_user

__all__ = [
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "is_blank",
    "validate_address",
    "validate_email",
    "validate_name",
    "validate_phone",
    "validate_range",
    "validate_restaurant",
    "validate_restaurant_name",
    "validate_rider",
    "validate_string_length",
    "validate_user",
]
