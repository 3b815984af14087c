"""Entity types submitted for validation.

Payloads arrive in the camelCase shape used by the platform API. `from_dict`
builds the typed entity, filling in registration defaults, and raises
SubmissionFormatError when a value has the wrong shape. Whether a value is
acceptable is left to the validators.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SubmissionFormatError(ValueError):
    """A submission payload or document has an unusable shape."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class CuisineType(str, Enum):
    NORTH_INDIAN = "NorthIndian"
    BIRYANI = "Biryani"
    MUGHLAI = "Mughlai"
    SOUTH_INDIAN = "SouthIndian"
    CHINESE = "Chinese"
    PIZZA = "Pizza"
    BURGER = "Burger"
    ROLLS = "Rolls"


class RiderStatus(str, Enum):
    AVAILABLE = "Available"
    BUSY = "Busy"
    OFFLINE = "Offline"


# =============================================================================
# Payload Helpers
# =============================================================================


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _mapping(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SubmissionFormatError("expected an object", path)
    return value


def _string(data: dict[str, Any], key: str, path: str, default: str | None = None) -> str | None:
    value = data.get(key, default)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # YAML reads unquoted phone numbers and zip codes as numbers
        return str(value)
    raise SubmissionFormatError("expected a string", _join(path, key))


def _number(data: dict[str, Any], key: str, path: str, default: float) -> float:
    value = data.get(key, default)
    number = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            pass

    if number is None:
        raise SubmissionFormatError("expected a number", _join(path, key))
    if not math.isfinite(number):
        raise SubmissionFormatError("expected a finite number", _join(path, key))
    return number


def _integer(data: dict[str, Any], key: str, path: str, default: int) -> int:
    number = _number(data, key, path, default)
    if not number.is_integer():
        raise SubmissionFormatError("expected a whole number", _join(path, key))
    return int(number)


def _boolean(data: dict[str, Any], key: str, path: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise SubmissionFormatError("expected true or false", _join(path, key))
    return value


def _enum_member(enum_type: type[Enum], value: Any, path: str) -> Any:
    """Resolve an enum by wire name (case-insensitive) or ordinal."""
    members = list(enum_type)
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < len(members):
            return members[value]
    elif isinstance(value, str):
        for member in members:
            if member.value.lower() == value.strip().lower():
                return member
    allowed = ", ".join(member.value for member in members)
    raise SubmissionFormatError(f"'{value}' is not one of: {allowed}", path)


# =============================================================================
# Value Objects
# =============================================================================


@dataclass(frozen=True)
class Location:
    """Geographic coordinates in decimal degrees."""

    lat: float = 0.0
    lon: float = 0.0

    @classmethod
    def from_dict(cls, data: Any, path: str = "location") -> "Location":
        data = _mapping(data, path)
        return cls(
            lat=_number(data, "lat", path, 0.0),
            lon=_number(data, "lon", path, 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class Address:
    """A street address with its coordinates."""

    street: str | None = None
    city: str | None = None
    zip_code: str | None = None
    location: Location | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "address") -> "Address":
        data = _mapping(data, path)
        location = data.get("location")
        return cls(
            street=_string(data, "street", path),
            city=_string(data, "city", path),
            zip_code=_string(data, "zipCode", path),
            location=(
                Location.from_dict(location, _join(path, "location"))
                if location is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "street": self.street,
            "city": self.city,
            "zipCode": self.zip_code,
            "location": self.location.to_dict() if self.location else None,
        }


# =============================================================================
# Entities
# =============================================================================


@dataclass
class MenuItem:
    """A dish offered by a restaurant."""

    name: str | None = None
    price: float = 0.0
    preparation_time_minutes: int = 20
    available: bool = True
    cuisine_type: CuisineType | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "menuItem") -> "MenuItem":
        data = _mapping(data, path)
        cuisine = data.get("cuisineType")
        return cls(
            name=_string(data, "name", path),
            price=_number(data, "price", path, 0.0),
            preparation_time_minutes=_integer(data, "preparationTimeMinutes", path, 20),
            available=_boolean(data, "available", path, True),
            cuisine_type=(
                _enum_member(CuisineType, cuisine, _join(path, "cuisineType"))
                if cuisine is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "preparationTimeMinutes": self.preparation_time_minutes,
            "available": self.available,
            "cuisineType": self.cuisine_type.value if self.cuisine_type else None,
        }


@dataclass
class Restaurant:
    """A restaurant registration or update."""

    name: str | None = None
    phone: str | None = None
    address: Address | None = None
    is_open: bool = True
    delivery_radius_km: float = 5.0
    average_preparation_time_minutes: int = 20
    rating: float = 4.0
    menu: list[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "") -> "Restaurant":
        data = _mapping(data, path or "restaurant")
        address = data.get("address")
        menu = data.get("menu") or []
        if not isinstance(menu, list):
            raise SubmissionFormatError("expected a list", _join(path, "menu"))
        return cls(
            name=_string(data, "name", path),
            phone=_string(data, "phone", path),
            address=(
                Address.from_dict(address, _join(path, "address"))
                if address is not None
                else None
            ),
            is_open=_boolean(data, "isOpen", path, True),
            delivery_radius_km=_number(data, "deliveryRadiusKm", path, 5.0),
            average_preparation_time_minutes=_integer(
                data, "averagePreparationTimeMinutes", path, 20
            ),
            rating=_number(data, "rating", path, 4.0),
            menu=[
                MenuItem.from_dict(item, f"{_join(path, 'menu')}[{index}]")
                for index, item in enumerate(menu)
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "phone": self.phone,
            "address": self.address.to_dict() if self.address else None,
            "isOpen": self.is_open,
            "deliveryRadiusKm": self.delivery_radius_km,
            "averagePreparationTimeMinutes": self.average_preparation_time_minutes,
            "rating": self.rating,
            "menu": [item.to_dict() for item in self.menu],
        }


@dataclass
class Rider:
    """A delivery rider registration or update."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    vehicle_number: str | None = None
    current_location: Location | None = None
    status: RiderStatus = RiderStatus.AVAILABLE

    @classmethod
    def from_dict(cls, data: Any, path: str = "") -> "Rider":
        data = _mapping(data, path or "rider")
        location = data.get("currentLocation")
        status = data.get("riderStatus")
        return cls(
            name=_string(data, "name", path),
            email=_string(data, "email", path),
            phone=_string(data, "phone", path),
            vehicle_number=_string(data, "vehicleNumber", path),
            current_location=(
                Location.from_dict(location, _join(path, "currentLocation"))
                if location is not None
                else None
            ),
            status=(
                _enum_member(RiderStatus, status, _join(path, "riderStatus"))
                if status is not None
                else RiderStatus.AVAILABLE
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "vehicleNumber": self.vehicle_number,
            "currentLocation": self.current_location.to_dict() if self.current_location else None,
            "riderStatus": self.status.value,
        }


@dataclass
class User:
    """A customer account registration or update."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "") -> "User":
        data = _mapping(data, path or "user")
        address = data.get("address")
        return cls(
            name=_string(data, "name", path),
            email=_string(data, "email", path),
            phone=_string(data, "phone", path),
            address=(
                Address.from_dict(address, _join(path, "address"))
                if address is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address.to_dict() if self.address else None,
        }
