"""
Core data models for logseq.

These dataclasses describe the log records consumed by the correlation
engine and the interaction records it produces. Entries and activities are
frozen: downstream stages reference them and never mutate them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dateutil_parser

__all__ = [
    "LogEntry",
    "RequestInfo",
    "Activity",
    "CorrelationResult",
]


@dataclass(frozen=True)
class LogEntry:
    """
    One structured log record from a Splunk export.

    `timestamp` is kept as the raw string from the export; use
    `parsed_timestamp` when a real instant is needed.
    """
    timestamp: str = ""
    logger_name: str | None = None
    thread_id: str = ""
    message: str = ""

    # Only present on cache-related entries
    api_call: str | None = None
    http_method: str | None = None
    results_cached: bool = False

    # API_TIMETAKENMS: its presence marks a pre-measured duration record
    duration_marker: bool = False

    # Parsing metadata
    raw: str = field(default="", compare=False, repr=False)
    line_number: int | None = field(default=None, compare=False)

    @property
    def parsed_timestamp(self) -> datetime | None:
        """Timestamp as an aware datetime, or None if it cannot be parsed."""
        if not self.timestamp:
            return None
        try:
            value = dateutil_parser.isoparse(self.timestamp)
        except ValueError:
            try:
                value = dateutil_parser.parse(self.timestamp)
            except (ValueError, OverflowError):
                return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


@dataclass(frozen=True)
class RequestInfo:
    """Service name, path and verb derived from a logged URL."""
    service_name: str
    path: str
    method: str

    def summary(self) -> str:
        """Short `<service> <METHOD> <path>` form used in activity messages."""
        return f"{self.service_name} {self.method} {self.path}"


@dataclass(frozen=True)
class Activity:
    """One arrow in the sequence diagram."""
    source: str
    target: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.target, "message": self.message}


@dataclass
class CorrelationResult:
    """Result of one correlation pass."""
    activities: list[Activity] = field(default_factory=list)
    total_entries: int = 0
    relevant_entries: int = 0
    resolved_responses: int = 0
    cache_hits: int = 0

    @property
    def activity_count(self) -> int:
        return len(self.activities)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "total_entries": self.total_entries,
            "relevant_entries": self.relevant_entries,
            "resolved_responses": self.resolved_responses,
            "cache_hits": self.cache_hits,
            "activities": [a.to_dict() for a in self.activities],
        }
