"""Tests for input validation and log sanitizing helpers."""

import logging

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from employee_api.models.dto.employee import EmployeeDto
from employee_api.utils.secure_logging import log_info, sanitize_exception_message
from employee_api.utils.validation import (
    format_field_errors,
    validate_email_address,
    validate_text,
)


class TestValidateText:
    def test_returns_value_unchanged(self) -> None:
        assert validate_text("  Alice Smith ", 255) == "  Alice Smith "

    def test_missing_optional_is_none(self) -> None:
        assert validate_text(None, 255) is None

    def test_missing_required_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            validate_text(None, 255, required=True)

    @pytest.mark.parametrize("required", [True, False])
    def test_blank_is_rejected(self, required: bool) -> None:
        with pytest.raises(ValueError, match="must not be blank"):
            validate_text("  ", 255, required=required)

    def test_non_string_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be a string"):
            validate_text(42, 255)

    def test_length_limit(self) -> None:
        assert validate_text("a" * 10, 10) == "a" * 10
        with pytest.raises(ValueError, match="at most 10"):
            validate_text("a" * 11, 10)

    @pytest.mark.parametrize(
        "value",
        ["O'Brien", "Zoë Müller", "R&D / Ops", "C++ Developer #2", "50% remote", "<b>Alice</b>"],
    )
    def test_accepts_any_characters(self, value: str) -> None:
        assert validate_text(value, 255) == value


class TestValidateEmailAddress:
    @pytest.mark.parametrize("value", ["Alice@EXAMPLE.COM", "alice.smith+hr@example.co.uk"])
    def test_returns_address_unchanged(self, value: str) -> None:
        assert validate_email_address(value, 255) == value

    def test_missing_is_none(self) -> None:
        assert validate_email_address(None, 255) is None

    @pytest.mark.parametrize(
        "value", ["not-an-email", "Alice <alice@example.com>", " alice@example.com"]
    )
    def test_rejects_non_addresses(self, value: str) -> None:
        with pytest.raises(ValueError):
            validate_email_address(value, 255)

    def test_length_limit(self) -> None:
        value = "a" * 250 + "@example.com"

        with pytest.raises(ValueError, match="at most 255"):
            validate_email_address(value, 255)


class TestFormatFieldErrors:
    def test_reduces_to_field_and_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeDto(name=" ", email="nope", extra_field=1)

        errors = format_field_errors(exc_info.value.errors())

        assert {e["field"] for e in errors} == {"name", "email", "extra_field"}
        assert all(set(e) == {"field", "message"} for e in errors)
        assert {"field": "name", "message": "must not be blank"} in errors

    def test_strips_request_location_prefix(self) -> None:
        errors = [{"loc": ("body", "name"), "msg": "Field required"}]

        assert format_field_errors(errors) == [{"field": "name", "message": "Field required"}]

    def test_nested_location_is_dotted(self) -> None:
        errors = [{"loc": ("body", "address", 0, "city"), "msg": "bad"}]

        assert format_field_errors(errors)[0]["field"] == "address.0.city"

    def test_limits_number_of_errors(self) -> None:
        errors = [{"loc": ("body", f"f{i}"), "msg": "bad"} for i in range(50)]

        assert len(format_field_errors(errors)) == 10


class TestSanitizeExceptionMessage:
    def test_removes_sql_and_parameters(self) -> None:
        error = IntegrityError(
            "INSERT INTO employees (id, name, email) VALUES (?, ?, ?)",
            (1, "Alice", "alice@example.com"),
            Exception("UNIQUE constraint failed: employees.id"),
        )

        message = sanitize_exception_message(error)

        assert "UNIQUE constraint failed" in message
        assert "INSERT INTO" not in message
        assert "Alice" not in message
        assert "alice@example.com" not in message

    def test_removes_connection_urls(self) -> None:
        error = Exception("could not connect to postgresql+asyncpg://u:secret@db/employees")

        assert "secret" not in sanitize_exception_message(error)

    def test_truncates_long_messages(self) -> None:
        message = sanitize_exception_message(Exception("x " * 500))

        assert len(message) <= 200
        assert message.endswith("...")

    def test_log_info_uses_sanitized_message(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("employee_api.tests")
        error = Exception("duplicate key for alice@example.com")

        with caplog.at_level(logging.INFO, logger="employee_api.tests"):
            log_info(logger, "Cannot create employee", error)

        assert "Cannot create employee: duplicate key for [EMAIL]" in caplog.text
