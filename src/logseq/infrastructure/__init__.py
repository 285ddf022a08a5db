"""
Infrastructure layer for logseq.

Contains adapters that implement the ports defined in the application layer.
"""

from logseq.infrastructure.sources import (
    FileStreamSource,
    StdinStreamSource,
)
from logseq.infrastructure.sinks import (
    FileOutputSink,
    StreamOutputSink,
)

__all__ = [
    # Sources
    "FileStreamSource",
    "StdinStreamSource",
    # Sinks
    "FileOutputSink",
    "StreamOutputSink",
]
