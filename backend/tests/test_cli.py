"""Tests for DeliveryGuard CLI commands."""

import json

import pytest
from click.testing import CliRunner

from deliveryguard.cli.main import cli
from deliveryguard.cli.validate_cmd import validate
from deliveryguard.validation.registry import EntityValidatorRegistry


VALID_BATCH = """
restaurant:
  name: Spice Route
  phone: "+91 80 4000 1234"
  deliveryRadiusKm: 8
  address:
    street: 12 MG Road
    city: Bengaluru
    zipCode: "560001"
    location: {lat: 12.97, lon: 77.59}
  menu:
    - name: Paneer Tikka
      price: 240
rider:
  - name: Asha
    email: asha@example.com
  - name: Ravi
"""

INVALID_BATCH = """
restaurant:
  name: Spice Route
  deliveryRadiusKm: 0
  address:
    street: 12 MG Road
    city: Bengaluru
    zipCode: "560001"
    location: {lat: 12.97, lon: 77.59}
  menu:
    - name: ""
      price: -1
      preparationTimeMinutes: 3
rider:
  name: Ravi
  currentLocation: {lat: 95, lon: 10}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DELIVERYGUARD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DELIVERYGUARD_OUTPUT_FORMAT", raising=False)
    EntityValidatorRegistry.clear()
    yield
    EntityValidatorRegistry.clear()


@pytest.fixture
def valid_file(tmp_path):
    path = tmp_path / "valid.yaml"
    path.write_text(VALID_BATCH)
    return path


@pytest.fixture
def invalid_file(tmp_path):
    path = tmp_path / "invalid.yaml"
    path.write_text(INVALID_BATCH)
    return path


class TestValidateCommand:
    def test_valid_submissions(self, runner, valid_file):
        result = runner.invoke(cli, ["validate", str(valid_file)])
        assert result.exit_code == 0
        assert "restaurant[0] (valid.yaml): valid" in result.output
        assert "rider[1] (valid.yaml): valid" in result.output
        assert "3 of 3 submission(s) valid" in result.output

    def test_invalid_submissions(self, runner, invalid_file):
        result = runner.invoke(cli, ["validate", str(invalid_file)])
        assert result.exit_code == 1
        assert "restaurant[0] (invalid.yaml): 4 invalid field(s)" in result.output
        assert "DeliveryRadiusKm: Delivery radius must be greater than 0." in result.output
        assert "Menu[0].Price: Menu item price cannot be negative." in result.output
        assert "CurrentLocation.Lat: CurrentLocation.Lat must be between -90 and 90. Got: 95" in result.output
        assert "0 of 2 submission(s) valid" in result.output

    def test_json_output(self, runner, invalid_file):
        result = runner.invoke(cli, ["validate", str(invalid_file), "--format", "json"])
        assert result.exit_code == 1

        reports = json.loads(result.stdout)
        assert [r["kind"] for r in reports] == ["restaurant", "rider"]
        assert reports[0]["errors"]["Menu[0].Name"] == ["Menu item name is required."]
        assert reports[1]["errors"] == {
            "CurrentLocation.Lat": ["CurrentLocation.Lat must be between -90 and 90. Got: 95"]
        }

    def test_format_from_environment(self, runner, valid_file, monkeypatch):
        monkeypatch.setenv("DELIVERYGUARD_OUTPUT_FORMAT", "json")
        result = runner.invoke(cli, ["validate", str(valid_file)])
        assert result.exit_code == 0
        assert all(r["valid"] for r in json.loads(result.stdout))

    def test_kind_filter(self, runner, invalid_file):
        result = runner.invoke(cli, ["validate", str(invalid_file), "--kind", "Rider"])
        assert result.exit_code == 1
        assert "restaurant" not in result.output
        assert "0 of 1 submission(s) valid" in result.output

    def test_kind_filter_without_matches(self, runner, valid_file):
        result = runner.invoke(cli, ["validate", str(valid_file), "--kind", "user"])
        assert result.exit_code == 1
        assert "No submissions found" in result.output

    def test_null_submission(self, runner, tmp_path):
        path = tmp_path / "null.yaml"
        path.write_text("user: null\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "User: User cannot be null." in result.output

    def test_format_error_is_reported(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("restaurant:\n  rating: five\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "rating: expected a number" in result.output

    def test_unknown_kind_is_reported(self, runner, tmp_path):
        path = tmp_path / "order.yaml"
        path.write_text("order:\n  total: 100\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Entity kind 'order' is not registered" in result.output

    def test_unreadable_document(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("- just\n- a list\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "expected a mapping" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"rider:\n  name: \xff\xfe\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "YAML parse error" in result.output

    def test_standalone_command_reports_bad_environment(self, runner, valid_file, monkeypatch):
        monkeypatch.setenv("DELIVERYGUARD_OUTPUT_FORMAT", "xml")
        result = runner.invoke(validate, [str(valid_file)])
        assert result.exit_code == 1
        assert "Unknown output format: xml" in result.output


class TestKindsCommand:
    def test_lists_kinds(self, runner):
        result = runner.invoke(cli, ["kinds"])
        assert result.exit_code == 0
        assert "restaurant (Restaurant)" in result.output
        assert "rider (Rider)" in result.output
        assert "user (User)" in result.output


class TestCLIEntryPoint:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "DeliveryGuard" in result.output
        assert "validate" in result.output

    def test_invalid_log_level(self, runner, valid_file):
        result = runner.invoke(cli, ["--log-level", "chatty", "validate", str(valid_file)])
        assert result.exit_code == 1
        assert "Unknown log level: CHATTY" in result.output
