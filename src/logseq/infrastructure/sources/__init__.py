"""
Log source adapters.
"""

from logseq.infrastructure.sources.file_source import FileStreamSource
from logseq.infrastructure.sources.stdin_source import StdinStreamSource

__all__ = ["FileStreamSource", "StdinStreamSource"]
