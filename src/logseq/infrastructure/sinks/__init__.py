"""
Output sink adapters.
"""

from logseq.infrastructure.sinks.output_sink import FileOutputSink, StreamOutputSink

__all__ = ["FileOutputSink", "StreamOutputSink"]
