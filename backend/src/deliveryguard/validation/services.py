"""Validation service for DeliveryGuard.

Entry point for callers that hold raw payloads or need a hard failure:
1. validate / validate_payload: produce the error report for one entity
2. ensure_valid: raise EntityValidationError when the report is not empty
3. validate_submission: report on a submission read by SubmissionLoader
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from deliveryguard.entities.loader import Submission
from deliveryguard.entities.types import SubmissionFormatError
from deliveryguard.validation.registry import EntityValidatorRegistry, UnknownEntityKindError
from deliveryguard.validation.types import EntityValidationError, ValidationErrors

logger = logging.getLogger(__name__)


@dataclass
class SubmissionReport:
    """Outcome of validating one submission.

    Attributes:
        submission: The submission that was checked
        errors: Field errors from the entity validator
        format_error: Set when the payload could not be parsed or its kind is unknown
    """

    submission: Submission
    errors: ValidationErrors = field(default_factory=ValidationErrors)
    format_error: str | None = None

    @property
    def valid(self) -> bool:
        return self.format_error is None and self.errors.is_valid

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "kind": self.submission.kind,
            "source": str(self.submission.source),
            "index": self.submission.index,
            "valid": self.valid,
            "errors": self.errors.to_dict(),
        }
        if self.format_error:
            result["formatError"] = self.format_error
        return result


class ValidationService:
    """Runs the registered entity validator for a kind.

    The service holds no per-call state; one instance may serve any number
    of callers.
    """

    def validate(self, kind: str, entity: Any) -> ValidationErrors:
        """Validate an entity (or None) with the validator registered for `kind`.

        Raises:
            UnknownEntityKindError: If no validator is registered for the kind
        """
        registered = EntityValidatorRegistry.get(kind)
        errors = registered.validate(entity)

        if errors:
            logger.warning(
                "%s validation failed: %s",
                registered.label,
                ", ".join(errors.messages()),
            )
        else:
            logger.debug("%s validation passed", registered.label)
        return errors

    def validate_payload(self, kind: str, payload: dict[str, Any] | None) -> ValidationErrors:
        """Parse a camelCase payload and validate it.

        Raises:
            UnknownEntityKindError: If no validator is registered for the kind
            SubmissionFormatError: If the payload cannot be parsed
        """
        registered = EntityValidatorRegistry.get(kind)
        entity = registered.entity_type.from_dict(payload) if payload is not None else None
        return self.validate(kind, entity)

    def ensure_valid(self, kind: str, entity: Any) -> Any:
        """Return the entity if it is valid.

        Raises:
            EntityValidationError: If any check failed
        """
        errors = self.validate(kind, entity)
        if errors:
            raise EntityValidationError(kind, errors)
        return entity

    def validate_submission(self, submission: Submission) -> SubmissionReport:
        """Validate a loaded submission, folding parse failures into the report."""
        try:
            errors = self.validate_payload(submission.kind, submission.payload)
        except (SubmissionFormatError, UnknownEntityKindError) as exc:
            logger.warning("Rejected submission %s: %s", submission.label, exc)
            return SubmissionReport(submission=submission, format_error=str(exc))
        return SubmissionReport(submission=submission, errors=errors)
