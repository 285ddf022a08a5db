"""
File source adapter for logseq.
"""

from pathlib import Path
from typing import Iterator

__all__ = ["FileStreamSource"]


class FileStreamSource:
    """
    File streaming adapter.

    Reads an export line by line. The byte order mark Splunk sometimes
    writes at the start of an export is dropped.

    Example:
        source = FileStreamSource("export.json")
        for line in source.read_lines():
            print(line)
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8-sig",
        errors: str = "strict"
    ):
        """
        Initialize file stream source.

        Args:
            path: Path to the export file
            encoding: File encoding (default: utf-8 with optional BOM)
            errors: How to handle encoding errors (default: strict)
        """
        self.path = Path(path)
        self.encoding = encoding
        self.errors = errors

        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")
        if self.path.is_dir():
            raise IsADirectoryError(f"Is a directory: {self.path}")

    def read_lines(self) -> Iterator[str]:
        """
        Read lines from file, yielding one at a time.

        Yields:
            Lines without trailing newline
        """
        with open(
            self.path,
            "r",
            encoding=self.encoding,
            errors=self.errors
        ) as f:
            for line in f:
                yield line.rstrip("\n\r")

    def metadata(self) -> dict[str, str]:
        """Get source metadata."""
        stat = self.path.stat()
        return {
            "source_type": "file",
            "path": str(self.path.absolute()),
            "name": self.path.name,
            "size_bytes": str(stat.st_size),
        }
