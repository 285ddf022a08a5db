"""
Entry filters.

Two gates with different reach:

- `is_relevant` decides which entries enter the ordered collection at all.
  Relevant entries can be found by the request resolver.
- `is_processable` decides which relevant entries may produce activities.
"""

from typing import Iterable

from logseq.core.config import DEFAULT_ALLOWED_LOGGERS
from logseq.core.models import LogEntry

__all__ = ["is_relevant", "is_processable"]


def is_relevant(
    entry: LogEntry,
    allowed_loggers: Iterable[str] = DEFAULT_ALLOWED_LOGGERS,
) -> bool:
    """
    Check whether an entry takes part in correlation.

    The logger name must match one of `allowed_loggers` (case-insensitive)
    and the entry must not be a pre-aggregated duration record.
    """
    if not entry.logger_name:
        return False

    allowed = {name.lower() for name in allowed_loggers}
    if entry.logger_name.lower() not in allowed:
        return False

    if entry.duration_marker:
        return False

    return True


def is_processable(entry: LogEntry) -> bool:
    """Check whether an entry may produce activities (no time-taken measurement)."""
    return not entry.duration_marker
