"""Entity validator registry for DeliveryGuard.

Maps an entity kind ("restaurant", "rider", "user") to the entity type that
parses its payload and the function that validates it. The rules behind each
kind are fixed; the registry only dispatches.
"""

from dataclasses import dataclass
from typing import Any, Callable

from deliveryguard.entities.types import Restaurant, Rider, User
from deliveryguard.validation.types import ValidationErrors
from deliveryguard.validation.validators import (
    validate_restaurant,
    validate_rider,
    validate_user,
)


class UnknownEntityKindError(ValueError):
    """No validator is registered for the requested entity kind."""

    def __init__(self, kind: str, available: list[str]):
        super().__init__(
            f"Entity kind '{kind}' is not registered. "
            "Available kinds: " + (", ".join(available) or "none")
        )
        self.kind = kind


@dataclass(frozen=True)
class EntityValidator:
    """A registered entity kind.

    Attributes:
        kind: Lower-case kind name used in submissions
        entity_type: Class with a `from_dict` constructor for the payload
        validate: Function producing the full error report for one entity
    """

    kind: str
    entity_type: type
    validate: Callable[[Any], ValidationErrors]

    @property
    def label(self) -> str:
        return self.entity_type.__name__


class EntityValidatorRegistry:
    """Registry of entity validators keyed by kind.

    Example:
        register_entity_validators()
        errors = EntityValidatorRegistry.get("rider").validate(rider)
    """

    _validators: dict[str, EntityValidator] = {}

    @classmethod
    def register(
        cls,
        kind: str,
        entity_type: type,
        validate: Callable[[Any], ValidationErrors],
    ) -> None:
        """Register the validator for an entity kind.

        Idempotent - re-registering the same kind is a no-op.
        """
        kind = kind.lower()
        if kind in cls._validators:
            return  # Already registered, no-op
        cls._validators[kind] = EntityValidator(
            kind=kind, entity_type=entity_type, validate=validate
        )

    @classmethod
    def get(cls, kind: str) -> EntityValidator:
        """Get the validator registered for a kind.

        Raises:
            UnknownEntityKindError: If the kind is not registered
        """
        try:
            return cls._validators[kind.lower()]
        except KeyError:
            raise UnknownEntityKindError(kind, cls.list_registered()) from None

    @classmethod
    def is_registered(cls, kind: str) -> bool:
        return kind.lower() in cls._validators

    @classmethod
    def list_registered(cls) -> list[str]:
        return sorted(cls._validators)

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._validators.clear()


def register_entity_validators() -> None:
    """Register the built-in entity validators."""
    EntityValidatorRegistry.register("restaurant", Restaurant, validate_restaurant)
    EntityValidatorRegistry.register("rider", Rider, validate_rider)
    EntityValidatorRegistry.register("user", User, validate_user)
