"""Field-level constraint checks.

Stateless checks shared by every entity validator:
- name: required, minimum and maximum length
- email / phone: optional, length then format
- range: inclusive numeric bounds
- string length: optional or required, maximum length

Each check records at most one message under its field path and never raises
for invalid input. Whitespace-only strings count as absent. Names and plain
text are measured after trimming; email and phone are measured and matched
as given, so surrounding whitespace is a format error.
"""

import re

from deliveryguard.validation.types import ValidationErrors


# =============================================================================
# Format Patterns
# =============================================================================

# Email: local-part "@" domain containing a dot, no whitespace anywhere
EMAIL_PATTERN = re.compile(
    r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    re.IGNORECASE
)

# Phone: digits, spaces, hyphens and parentheses with an optional leading "+"
PHONE_PATTERN = re.compile(
    r"^\+?[\d\s\-()]+$"
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
RESTAURANT_NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 256
PHONE_MAX_LENGTH = 20


# =============================================================================
# Helpers
# =============================================================================


def is_blank(value: str | None) -> bool:
    """Check if a string value is absent or whitespace-only."""
    return value is None or value.strip() == ""


def format_number(value: float) -> str:
    """Render a number for messages; integral floats lose their ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# Checks
# =============================================================================


def validate_name(
    name: str | None,
    errors: ValidationErrors,
    field: str = "Name",
    max_length: int = NAME_MAX_LENGTH,
) -> None:
    """Validate a person or rider name (required, 2..max_length characters)."""
    if is_blank(name):
        errors.add(field, "Name is required and cannot be empty.")
        return

    length = len(name.strip())
    if length < NAME_MIN_LENGTH:
        errors.add(field, f"Name must be at least {NAME_MIN_LENGTH} characters long.")
    elif length > max_length:
        errors.add(field, f"Name cannot exceed {max_length} characters.")


def validate_restaurant_name(
    name: str | None,
    errors: ValidationErrors,
    field: str = "Name",
) -> None:
    """Validate a restaurant name, which allows up to 200 characters."""
    validate_name(name, errors, field, max_length=RESTAURANT_NAME_MAX_LENGTH)


def validate_email(
    email: str | None,
    errors: ValidationErrors,
    field: str = "Email",
) -> None:
    """Validate an optional email address."""
    if is_blank(email):
        return

    if len(email) > EMAIL_MAX_LENGTH:
        errors.add(field, f"Email cannot exceed {EMAIL_MAX_LENGTH} characters.")
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.add(field, "Email format is invalid.")


def validate_phone(
    phone: str | None,
    errors: ValidationErrors,
    field: str = "Phone",
) -> None:
    """Validate an optional phone number."""
    if is_blank(phone):
        return

    if len(phone) > PHONE_MAX_LENGTH:
        errors.add(field, f"Phone cannot exceed {PHONE_MAX_LENGTH} characters.")
    elif not PHONE_PATTERN.fullmatch(phone):
        errors.add(field, "Phone format is invalid.")


def validate_range(
    value: float,
    minimum: float,
    maximum: float,
    field: str,
    errors: ValidationErrors,
) -> None:
    """Validate that a number lies within the inclusive [minimum, maximum] interval."""
    if not minimum <= value <= maximum:
        errors.add(
            field,
            f"{field} must be between {format_number(minimum)} and "
            f"{format_number(maximum)}. Got: {format_number(value)}",
        )


def validate_string_length(
    value: str | None,
    max_length: int,
    field: str,
    errors: ValidationErrors,
    required: bool = False,
) -> None:
    """Validate a string's maximum length, optionally requiring a value."""
    if is_blank(value):
        if required:
            errors.add(field, f"{field} is required.")
        return

    if len(value.strip()) > max_length:
        errors.add(field, f"{field} cannot exceed {max_length} characters.")
