"""Entity submissions — typed entities and the YAML/JSON submission loader."""

from deliveryguard.entities.types import (
    Address,
    CuisineType,
    Location,
    MenuItem,
    Restaurant,
    Rider,
    RiderStatus,
    SubmissionFormatError,
    User,
)
from deliveryguard.entities.loader import Submission, SubmissionLoader

__all__ = [
    "Address",
    "CuisineType",
    "Location",
    "MenuItem",
    "Restaurant",
    "Rider",
    "RiderStatus",
    "Submission",
    "SubmissionFormatError",
    "SubmissionLoader",
    "User",
]
