"""
Input limits for logseq.

Splunk exports are read fully into memory before correlation, so a single
runaway line or a pathologically nested record is rejected up front.
"""

from typing import Any

from logseq.core.exceptions import LogSeqError

__all__ = [
    "MAX_LINE_LENGTH",
    "MAX_JSON_DEPTH",
    "SecurityValidationError",
    "LineTooLongError",
    "validate_line_length",
    "validate_json_depth",
]


# Maximum line length (10MB)
MAX_LINE_LENGTH = 10 * 1024 * 1024

# Maximum JSON nesting depth
MAX_JSON_DEPTH = 50


class SecurityValidationError(LogSeqError):
    """Raised when security validation fails."""

    def __init__(self, message: str, validation_type: str, details: dict | None = None):
        super().__init__(message, details)
        self.validation_type = validation_type


class LineTooLongError(SecurityValidationError):
    """Raised when a log line exceeds MAX_LINE_LENGTH."""

    def __init__(self, line_length: int, max_length: int = MAX_LINE_LENGTH):
        message = (
            f"Line length ({line_length:,} bytes) exceeds maximum allowed "
            f"({max_length:,} bytes)"
        )
        super().__init__(
            message,
            validation_type="line_length",
            details={
                "line_length": line_length,
                "max_length": max_length,
            }
        )


def validate_line_length(line: str, max_length: int = MAX_LINE_LENGTH) -> str:
    """
    Validate that a line does not exceed the maximum allowed length.

    Args:
        line: The line to validate
        max_length: Maximum allowed length in bytes

    Returns:
        The original line if valid

    Raises:
        LineTooLongError: If line exceeds max_length
    """
    line_length = len(line.encode("utf-8", errors="replace"))
    if line_length > max_length:
        raise LineTooLongError(line_length, max_length)
    return line


def validate_json_depth(data: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> bool:
    """
    Validate that decoded JSON does not nest deeper than max_depth.

    Raises:
        SecurityValidationError: If nesting exceeds max_depth
    """
    if current_depth > max_depth:
        raise SecurityValidationError(
            f"JSON nesting depth exceeds maximum ({max_depth})",
            validation_type="json_depth",
            details={"max_depth": max_depth},
        )

    if isinstance(data, dict):
        for value in data.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(data, list):
        for item in data:
            validate_json_depth(item, max_depth, current_depth + 1)

    return True
