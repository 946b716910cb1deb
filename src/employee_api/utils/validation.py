"""Input validation utilities for transfer objects and error reporting."""

from collections.abc import Sequence
from typing import Any

from pydantic import validate_email

from employee_api.constants.validation import MAX_REPORTED_FIELD_ERRORS


def validate_text(value: str | None, max_length: int, required: bool = False) -> str | None:
    """Check a free-text field against the blank and length rules.

    The value is returned exactly as submitted so it reads back unchanged.

    Args:
        value: Raw field value
        max_length: Maximum allowed length
        required: Whether a missing value is an error

    Returns:
        The value unchanged, or None when an optional field is absent

    Raises:
        ValueError: If the value breaks one of the rules
    """
    if value is None:
        if required:
            raise ValueError("must not be empty")
        return None

    if not isinstance(value, str):
        raise ValueError("must be a string")

    if not value.strip():
        raise ValueError("must not be blank")

    if len(value) > max_length:
        raise ValueError(f"must be at most {max_length} characters")

    return value


def validate_email_address(value: str | None, max_length: int) -> str | None:
    """Check that a value is a plain e-mail address.

    pydantic's address parser does the format check, but its normalized form
    (lowercased domain) is discarded in favour of the submitted string.

    Args:
        value: Raw field value
        max_length: Maximum allowed length

    Returns:
        The value unchanged, or None when absent

    Raises:
        ValueError: If the value is not a bare e-mail address
    """
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError("must be a string")

    if len(value) > max_length:
        raise ValueError(f"must be at most {max_length} characters")

    # "Name <address>" is accepted by the parser but is not an address
    if "<" in value or value != value.strip():
        raise ValueError("value is not a valid email address")

    validate_email(value)
    return value


def format_field_errors(errors: Sequence[dict[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic validation errors to field/message pairs.

    Only the field path and message are kept, never the rejected input, so
    payload content is not echoed back.

    Args:
        errors: Errors as returned by ``ValidationError.errors()``

    Returns:
        List of ``{"field": ..., "message": ...}`` dicts
    """
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc) if loc else "body"
        if field.startswith("_"):
            continue
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages from ValueError with "Value error, "
        message = message.removeprefix("Value error, ")
        field_errors.append({"field": field, "message": message})

    return field_errors[:MAX_REPORTED_FIELD_ERRORS]
