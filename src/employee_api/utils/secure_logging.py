"""Secure logging utilities to keep record content out of production logs."""

import logging
import re
from functools import lru_cache

from employee_api.config import get_settings

MAX_LOGGED_MESSAGE_LENGTH = 200

# SQLAlchemy appends the statement and bound parameters to DBAPI errors
SQL_STATEMENT_PATTERN = re.compile(r"\[SQL: .*?\]", re.DOTALL)
SQL_PARAMETERS_PATTERN = re.compile(r"\[parameters: .*?\]", re.DOTALL)
SQL_BACKGROUND_PATTERN = re.compile(r"\(Background on this error at: [^)]*\)")
URL_PATTERN = re.compile(r"(postgresql|postgres|sqlite)(\+\w+)?://[^\s]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes SQL statements, bound parameters (which carry employee data),
    connection URLs and email addresses, then truncates.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    error_msg = SQL_STATEMENT_PATTERN.sub("[SQL]", error_msg)
    error_msg = SQL_PARAMETERS_PATTERN.sub("[PARAMETERS]", error_msg)
    error_msg = SQL_BACKGROUND_PATTERN.sub("", error_msg)
    error_msg = URL_PATTERN.sub("[URL]", error_msg)
    error_msg = EMAIL_PATTERN.sub("[EMAIL]", error_msg)
    error_msg = " ".join(error_msg.split())

    if len(error_msg) > MAX_LOGGED_MESSAGE_LENGTH:
        error_msg = error_msg[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."

    return error_msg


def _log(
    logger: logging.Logger,
    level: int,
    message: str,
    error: Exception | None,
    exc_info: bool,
) -> None:
    if error is None:
        logger.log(level, message)
    elif is_debug_mode():
        logger.log(level, f"{message}: {error}", exc_info=exc_info)
    else:
        logger.log(level, f"{message}: {sanitize_exception_message(error)}")


def log_error(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log an error with appropriate detail level based on environment.

    In debug mode, logs full exception details with traceback.
    In production, logs sanitized message without sensitive details.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no record data)
        error: Optional exception to include
    """
    _log(logger, logging.ERROR, message, error, exc_info=True)


def log_warning(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log a warning with appropriate detail level based on environment."""
    _log(logger, logging.WARNING, message, error, exc_info=False)


def log_info(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log an informational message with appropriate detail level based on environment."""
    _log(logger, logging.INFO, message, error, exc_info=False)
