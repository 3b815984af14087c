"""DeliveryGuard validation system.

Validates restaurant, rider and user submissions before they are persisted.
Every check runs and records its failures in a ValidationErrors accumulator,
so one pass yields the complete report for a submission:
- Field constraints: name, email, phone, numeric range, string length
- Entity validators: one per entity type, including nested addresses,
  locations and menu items

Usage:
    from deliveryguard.validation import (
        ValidationService,
        create_problem_response,
        register_entity_validators,
        validate_restaurant,
    )

    errors = validate_restaurant(restaurant)
    if errors:
        return create_problem_response(errors).to_dict()

    # Or by kind, with parsing and logging
    register_entity_validators()
    ValidationService().ensure_valid("rider", rider)
"""

from deliveryguard.validation.types import (
    DuplicateFieldError,
    EntityValidationError,
    ValidationErrors,
    ValidationProblem,
    create_problem_response,
)
from deliveryguard.validation.validators import (
    validate_address,
    validate_restaurant,
    validate_rider,
    validate_user,
)
from deliveryguard.validation.registry import (
    EntityValidator,
    EntityValidatorRegistry,
    UnknownEntityKindError,
    register_entity_validators,
)
from deliveryguard.validation.services import SubmissionReport, ValidationService

__all__ = [
    # Types
    "DuplicateFieldError",
    "EntityValidationError",
    "ValidationErrors",
    "ValidationProblem",
    "create_problem_response",
    # Validators
    "validate_address",
    "validate_restaurant",
    "validate_rider",
    "validate_user",
    # Registry
    "EntityValidator",
    "EntityValidatorRegistry",
    "UnknownEntityKindError",
    "register_entity_validators",
    # Services
    "SubmissionReport",
    "ValidationService",
]
