"""
Core data models, configuration and exceptions for logseq.
"""

from logseq.core.models import (
    LogEntry,
    RequestInfo,
    Activity,
    CorrelationResult,
)
from logseq.core.config import ConverterConfig
from logseq.core.exceptions import (
    LogSeqError,
    ParseError,
    ConfigurationError,
    MalformedUrlError,
    HostSuffixMismatchError,
    UnknownStatusCodeError,
    RequestNotFoundError,
)
from logseq.core.security import (
    MAX_LINE_LENGTH,
    MAX_JSON_DEPTH,
    LineTooLongError,
    SecurityValidationError,
    validate_line_length,
    validate_json_depth,
)

__all__ = [
    "LogEntry",
    "RequestInfo",
    "Activity",
    "CorrelationResult",
    "ConverterConfig",
    "LogSeqError",
    "ParseError",
    "ConfigurationError",
    "MalformedUrlError",
    "HostSuffixMismatchError",
    "UnknownStatusCodeError",
    "RequestNotFoundError",
    # Security
    "MAX_LINE_LENGTH",
    "MAX_JSON_DEPTH",
    "LineTooLongError",
    "SecurityValidationError",
    "validate_line_length",
    "validate_json_depth",
]
