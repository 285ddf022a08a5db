"""
Custom exceptions for logseq.

Every error below is fatal for a conversion run: the engine never skips an
entry or emits a partial diagram.
"""

__all__ = [
    "LogSeqError",
    "ParseError",
    "ConfigurationError",
    "MalformedUrlError",
    "HostSuffixMismatchError",
    "UnknownStatusCodeError",
    "RequestNotFoundError",
]


class LogSeqError(Exception):
    """Base exception for all logseq errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ParseError(LogSeqError):
    """Raised when a raw log record cannot be decoded."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        line_number: int | None = None,
    ):
        details = {}
        if line is not None:
            details["line"] = line[:100] + "..." if len(line) > 100 else line
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(message, details)
        self.line = line
        self.line_number = line_number


class ConfigurationError(LogSeqError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {}
        if config_key is not None:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class MalformedUrlError(LogSeqError):
    """Raised when a logged URL is not a valid absolute URI."""

    def __init__(self, message: str, url: str | None = None):
        details = {}
        if url is not None:
            details["url"] = url
        super().__init__(message, details)
        self.url = url


class HostSuffixMismatchError(LogSeqError):
    """Raised when a URL host does not end with the configured suffix."""

    def __init__(self, host: str, suffix: str):
        super().__init__(
            f"Host '{host}' does not end with expected suffix '{suffix}'",
            {"host": host, "suffix": suffix},
        )
        self.host = host
        self.suffix = suffix


class UnknownStatusCodeError(LogSeqError):
    """Raised when a status token does not name a known HTTP status."""

    def __init__(self, status: str):
        super().__init__(f"Unknown HTTP status '{status}'", {"status": status})
        self.status = status


class RequestNotFoundError(LogSeqError):
    """
    Raised when no request entry can be paired with a response entry.

    The resolver only looks in one direction from the response, so this
    usually means the export was cut off before the originating call.
    """

    def __init__(
        self,
        url: str,
        start_index: int,
        line_number: int | None = None,
    ):
        details: dict = {"url": url, "start_index": start_index}
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__("No request entry found for response", details)
        self.url = url
        self.start_index = start_index
        self.line_number = line_number
