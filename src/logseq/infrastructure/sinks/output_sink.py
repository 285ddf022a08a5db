"""
Output sink adapters for logseq.
"""

import sys
from pathlib import Path
from typing import TextIO

__all__ = ["FileOutputSink", "StreamOutputSink"]


class FileOutputSink:
    """Write the rendered diagram to a file, replacing its contents."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def write(self, text: str) -> None:
        self.path.write_text(text, encoding=self.encoding)


class StreamOutputSink:
    """Write the rendered diagram to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.write("\n")
        stream.flush()
