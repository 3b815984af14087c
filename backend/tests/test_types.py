"""Tests for the error accumulator and problem responses."""

import pytest

from deliveryguard.validation.types import (
    DuplicateFieldError,
    EntityValidationError,
    ValidationErrors,
    create_problem_response,
)


class TestValidationErrors:
    def test_new_accumulator_is_empty_and_valid(self):
        errors = ValidationErrors()
        assert errors.is_valid
        assert len(errors) == 0
        assert not errors
        assert errors.to_dict() == {}

    def test_add_and_read(self):
        errors = ValidationErrors()
        errors.add("Name", "Name is required and cannot be empty.")
        errors.add("Menu[0].Price", "Menu item price cannot be negative.")

        assert not errors.is_valid
        assert errors["Name"] == ("Name is required and cannot be empty.",)
        assert "Menu[0].Price" in errors
        assert list(errors) == ["Name", "Menu[0].Price"]

    def test_multiple_messages_keep_order(self):
        errors = ValidationErrors()
        errors.add("Address", "first", "second")
        assert errors["Address"] == ("first", "second")

    def test_duplicate_field_is_rejected(self):
        errors = ValidationErrors()
        errors.add("Email", "Email format is invalid.")
        with pytest.raises(DuplicateFieldError) as exc_info:
            errors.add("Email", "Email cannot exceed 256 characters.")
        assert exc_info.value.field == "Email"
        assert errors["Email"] == ("Email format is invalid.",)

    def test_add_requires_a_message(self):
        with pytest.raises(ValueError):
            ValidationErrors().add("Name")

    def test_messages_are_flattened_in_order(self):
        errors = ValidationErrors()
        errors.add("Name", "a")
        errors.add("Phone", "b", "c")
        assert errors.messages() == ["a", "b", "c"]

    def test_to_dict_is_a_copy(self):
        errors = ValidationErrors()
        errors.add("Name", "a")
        exported = errors.to_dict()
        exported["Name"].append("b")
        assert errors["Name"] == ("a",)

    def test_compares_as_mapping(self):
        errors = ValidationErrors()
        errors.add("Rating", "bad")
        assert errors == {"Rating": ("bad",)}


class TestEntityValidationError:
    def test_carries_kind_and_errors(self):
        errors = ValidationErrors()
        errors.add("Name", "Name is required and cannot be empty.")
        exc = EntityValidationError("rider", errors)
        assert exc.kind == "rider"
        assert exc.errors is errors
        assert str(exc) == "Rider validation failed with 1 invalid field(s)"


class TestProblemResponse:
    def test_problem_body(self):
        errors = ValidationErrors()
        errors.add("DeliveryRadiusKm", "Delivery radius must be greater than 0.")
        problem = create_problem_response(errors, detail="Restaurant rejected")
        assert problem.to_dict() == {
            "title": "Validation Error",
            "status": 400,
            "detail": "Restaurant rejected",
            "errors": {"DeliveryRadiusKm": ["Delivery radius must be greater than 0."]},
        }

    def test_detail_is_omitted_when_absent(self):
        problem = create_problem_response(ValidationErrors())
        assert "detail" not in problem.to_dict()
        assert problem.to_dict()["errors"] == {}
