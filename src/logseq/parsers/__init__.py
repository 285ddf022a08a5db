"""
Parsers turning raw export lines into LogEntry objects.
"""

from logseq.parsers.splunk_json import SplunkJSONParser

__all__ = ["SplunkJSONParser"]
