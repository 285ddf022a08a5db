"""
Splunk JSON export parser.

A Splunk search exported as JSON yields one object per line, with the
indexed event under a `result` key:

    {"preview": false, "result": {"a_time": "...", "a_logger": "ApiHttpClient", ...}}
"""

import json
from typing import Any, Iterator

from logseq.core.exceptions import ParseError
from logseq.core.models import LogEntry
from logseq.core.security import (
    SecurityValidationError,
    validate_json_depth,
    validate_line_length,
)

__all__ = ["SplunkJSONParser"]


class SplunkJSONParser:
    """
    Parse Splunk JSON export lines into LogEntry objects.

    Unlike a tolerant log viewer, a record that cannot be decoded is an
    error: the whole conversion depends on seeing every record.
    """

    name = "splunk_json"

    RESULT_FIELD = "result"
    TIMESTAMP_FIELD = "a_time"
    LOGGER_FIELD = "a_logger"
    THREAD_FIELD = "a_thread"
    MESSAGE_FIELD = "a_msg"
    API_CALL_FIELD = "API_CALL"
    METHOD_FIELD = "METHOD"
    CACHED_FIELD = "RESULTS_CACHED"
    TIME_TAKEN_FIELD = "API_TIMETAKENMS"

    def parse_line(self, line: str, line_number: int | None = None) -> LogEntry:
        """
        Parse a single export line.

        Args:
            line: Raw JSON line
            line_number: 1-based position in the input, for error reporting

        Returns:
            LogEntry built from the line's `result` object

        Raises:
            ParseError: If the line is not a JSON object with a `result` object
        """
        try:
            validate_line_length(line)
            data = json.loads(line)
            validate_json_depth(data)
        except json.JSONDecodeError as e:
            raise ParseError(f"JSON decode error: {e}", line=line, line_number=line_number) from e
        except SecurityValidationError as e:
            raise ParseError(e.message, line=line, line_number=line_number) from e

        if not isinstance(data, dict):
            raise ParseError("JSON is not an object", line=line, line_number=line_number)

        result = data.get(self.RESULT_FIELD)
        if not isinstance(result, dict):
            raise ParseError(
                f"Missing '{self.RESULT_FIELD}' object",
                line=line,
                line_number=line_number,
            )

        return self._build_entry(result, line, line_number)

    def parse_stream(self, lines: Iterator[str]) -> Iterator[LogEntry]:
        """
        Parse a stream of export lines.

        Blank lines are only allowed at the end of the input. A blank line
        followed by another record means the export is damaged.

        Yields:
            LogEntry for each record line

        Raises:
            ParseError: On a bad record or a blank line between records
        """
        blank_line_number = None
        for line_number, line in enumerate(lines, 1):
            stripped = line.strip()
            if not stripped:
                if blank_line_number is None:
                    blank_line_number = line_number
                continue
            if blank_line_number is not None:
                raise ParseError("Blank line in export", line_number=blank_line_number)
            yield self.parse_line(stripped, line_number)

    def _build_entry(self, result: dict[str, Any], line: str, line_number: int | None) -> LogEntry:
        return LogEntry(
            timestamp=self._get_str(result, self.TIMESTAMP_FIELD) or "",
            logger_name=self._get_str(result, self.LOGGER_FIELD),
            thread_id=self._get_str(result, self.THREAD_FIELD) or "",
            message=self._get_str(result, self.MESSAGE_FIELD) or "",
            api_call=self._get_str(result, self.API_CALL_FIELD),
            http_method=self._get_str(result, self.METHOD_FIELD),
            # Presence alone is the marker, whatever the value
            results_cached=self.CACHED_FIELD in result,
            duration_marker=self.TIME_TAKEN_FIELD in result,
            raw=line,
            line_number=line_number,
        )

    @staticmethod
    def _get_str(data: dict[str, Any], name: str) -> str | None:
        value = data.get(name)
        if value is None:
            return None
        return str(value)
