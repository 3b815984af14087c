"""Core types for the DeliveryGuard validation system.

Every validation pass produces a ValidationErrors accumulator: a mapping from
field path ("Name", "CurrentLocation.Lat", "Menu[2].Price") to the messages
recorded for that path. An empty accumulator means the entity is valid.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any


class DuplicateFieldError(ValueError):
    """A validator tried to record errors for a field path twice in one pass."""

    def __init__(self, field: str):
        super().__init__(f"Errors for field '{field}' have already been recorded")
        self.field = field


class ValidationErrors(Mapping[str, tuple[str, ...]]):
    """Accumulates validation failures for a single validation pass.

    Checks write through `add`; callers read it as a mapping. Keys keep the
    order in which the checks ran.

    Example:
        errors = ValidationErrors()
        errors.add("Name", "Name is required and cannot be empty.")
        errors.to_dict()  # {"Name": ["Name is required and cannot be empty."]}
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, *messages: str) -> None:
        """Record one or more messages under a field path.

        Raises:
            DuplicateFieldError: If the field path already has messages
            ValueError: If no messages are given
        """
        if not messages:
            raise ValueError(f"At least one message is required for field '{field}'")
        if field in self._errors:
            raise DuplicateFieldError(field)
        self._errors[field] = list(messages)

    def __getitem__(self, field: str) -> tuple[str, ...]:
        return tuple(self._errors[field])

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def messages(self) -> list[str]:
        """All messages in field order, flattened."""
        return [message for messages in self._errors.values() for message in messages]

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}


class EntityValidationError(Exception):
    """Raised when a submission must be valid but is not.

    Attributes:
        kind: Entity kind that failed ("restaurant", "rider", ...)
        errors: The full accumulated error report
    """

    def __init__(self, kind: str, errors: ValidationErrors):
        super().__init__(f"{kind.capitalize()} validation failed with {len(errors)} invalid field(s)")
        self.kind = kind
        self.errors = errors


@dataclass
class ValidationProblem:
    """Problem-details body describing a failed submission.

    The API layer serializes this directly as a 400 response.
    """

    errors: dict[str, list[str]]
    detail: str | None = None
    title: str = "Validation Error"
    status: int = 400

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "title": self.title,
            "status": self.status,
        }
        if self.detail:
            result["detail"] = self.detail
        result["errors"] = self.errors
        return result


def create_problem_response(
    errors: ValidationErrors,
    detail: str | None = None,
) -> ValidationProblem:
    """Create a 400 problem response for validation failures."""
    return ValidationProblem(errors=errors.to_dict(), detail=detail)
