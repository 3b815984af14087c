"""User validation for account registration and updates."""

from deliveryguard.entities.types import User
from deliveryguard.validation.types import ValidationErrors
from deliveryguard.validation.validators.address import validate_address
from deliveryguard.validation.validators.field_constraints import (
    validate_email,
    validate_name,
    validate_phone,
)


def validate_user(user: User | None) -> ValidationErrors:
    """Validate a user account.

    Name and address are required; email and phone are checked only when
    present.

    Returns:
        The accumulated errors. Empty if the user is valid.
    """
    errors = ValidationErrors()

    if user is None:
        errors.add("User", "User cannot be null.")
        return errors

    validate_name(user.name, errors, "Name")
    validate_email(user.email, errors, "Email")
    validate_phone(user.phone, errors, "Phone")
    validate_address(user.address, errors, "Address")

    return errors
