"""
Stdin source adapter for logseq.
"""

import sys
from typing import Iterator, TextIO

__all__ = ["StdinStreamSource"]


class StdinStreamSource:
    """
    Source adapter for piped input.

    Example:
        # splunk search ... -output json | logseq - diagram.puml
        source = StdinStreamSource()
        for line in source.read_lines():
            process(line)
    """

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize stdin stream source.

        Args:
            stream: Text stream to read (default: sys.stdin at read time)
        """
        self._stream = stream
        self._line_count = 0

    def read_lines(self) -> Iterator[str]:
        """
        Read lines from stdin, yielding one at a time.

        Yields:
            Input lines (without trailing newline)
        """
        stream = self._stream if self._stream is not None else sys.stdin
        for line in stream:
            self._line_count += 1
            yield line.rstrip("\n\r")

    def metadata(self) -> dict[str, str]:
        """Get source metadata."""
        return {
            "source_type": "stdin",
            "path": "<stdin>",
            "name": "stdin",
            "lines_read": str(self._line_count),
        }
