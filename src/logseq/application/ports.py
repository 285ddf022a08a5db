"""
Port interfaces for the application layer.

These are the interfaces that infrastructure adapters must implement.
"""

from typing import Protocol, Iterator, runtime_checkable

__all__ = ["LogSourcePort", "OutputSinkPort"]


@runtime_checkable
class LogSourcePort(Protocol):
    """
    Port for log source adapters.

    Implementations provide raw export lines from a file or stdin.
    """

    def read_lines(self) -> Iterator[str]:
        """Read raw log lines from the source."""
        ...

    def metadata(self) -> dict[str, str]:
        """Get source metadata (path, type, size, etc.)."""
        ...


@runtime_checkable
class OutputSinkPort(Protocol):
    """Port for writing the rendered diagram."""

    def write(self, text: str) -> None:
        """Persist the complete rendered text."""
        ...
