"""
Correlate logs use case.

Turns an unordered collection of log entries into the ordered list of
activities shown in the sequence diagram.
"""

import logging
from typing import Iterable, Iterator

from logseq.core.config import ConverterConfig
from logseq.core.exceptions import ParseError, RequestNotFoundError
from logseq.core.models import Activity, CorrelationResult, LogEntry
from logseq.domain.filters import is_processable, is_relevant
from logseq.domain.patterns import (
    MessageMatch,
    match_request,
    match_response,
    parse_request_info,
    parse_status_code,
)
from logseq.domain.resolver import find_request

__all__ = ["CorrelateLogsUseCase"]

logger = logging.getLogger(__name__)


class CorrelateLogsUseCase:
    """
    Use case: correlate HTTP client log entries into diagram activities.

    Entries are sorted newest first and walked once. Each entry may yield
    activities for a response it records, a request it records and a cache
    hit it records. The collected activities are reversed at the end so
    they read oldest first.

    Example:
        use_case = CorrelateLogsUseCase(ConverterConfig(print_thread_id=False))
        result = use_case.execute(entries)
        for activity in result.activities:
            print(f"{activity.source} -> {activity.target}: {activity.message}")
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Initialize the use case.

        Args:
            config: Conversion settings (defaults to ConverterConfig())
        """
        self.config = config or ConverterConfig()

    def execute(self, entries: Iterable[LogEntry]) -> CorrelationResult:
        """
        Execute correlation over a finite collection of entries.

        Args:
            entries: Parsed log entries in any order

        Returns:
            CorrelationResult with activities in ascending time order

        Raises:
            LogSeqError: On any unresolvable entry; no partial result is returned
        """
        all_entries = list(entries)
        relevant = [
            e for e in all_entries
            if is_relevant(e, self.config.allowed_loggers)
        ]
        ordered = self._order_newest_first(relevant)

        logger.debug(
            "Correlating %d relevant entries out of %d", len(ordered), len(all_entries)
        )

        result = CorrelationResult(
            total_entries=len(all_entries),
            relevant_entries=len(ordered),
        )

        activities: list[Activity] = []
        for index, entry in enumerate(ordered):
            if is_processable(entry):
                activities.extend(self._create_activities(entry, index, ordered, result))

        activities.reverse()
        result.activities = activities

        logger.info(
            "Produced %d activities (%d responses, %d cache hits)",
            len(activities),
            result.resolved_responses,
            result.cache_hits,
        )
        return result

    def _order_newest_first(self, entries: list[LogEntry]) -> list[LogEntry]:
        """
        Sort entries by timestamp, newest first.

        Parsed instants are used when every timestamp parses; otherwise the
        raw strings are compared. Instants only keep microseconds, so equal
        instants fall back to the raw string, which still holds any finer
        fraction. Fully equal timestamps keep their input order.
        """
        parsed = [e.parsed_timestamp for e in entries]
        if all(ts is not None for ts in parsed):
            pairs = sorted(
                zip(parsed, entries),
                key=lambda pair: (pair[0], pair[1].timestamp),
                reverse=True,
            )
            return [entry for _, entry in pairs]

        logger.debug("Falling back to raw timestamp ordering")
        return sorted(entries, key=lambda e: e.timestamp, reverse=True)

    def _create_activities(
        self,
        entry: LogEntry,
        index: int,
        ordered: list[LogEntry],
        result: CorrelationResult,
    ) -> Iterator[Activity]:
        collapse = self.config.collapse_to_actual_execution_order

        response = match_response(entry.message)
        if response is not None:
            answer, dispatch = self._create_response_activities(entry, response, index, ordered)
            result.resolved_responses += 1
            yield answer
            if collapse:
                yield dispatch

        if not collapse:
            request = match_request(entry.message)
            if request is not None:
                yield self._create_request_activity(entry, request)

        if entry.results_cached:
            result.cache_hits += 1
            yield self._create_cached_activity(entry)

    def _create_response_activities(
        self,
        entry: LogEntry,
        response: MessageMatch,
        index: int,
        ordered: list[LogEntry],
    ) -> tuple[Activity, Activity]:
        """Build the answer activity and the dispatch of the resolved request."""
        try:
            request_index, request_entry, request = find_request(
                response.url, index + 1, ordered
            )
        except RequestNotFoundError as e:
            raise RequestNotFoundError(e.url, e.start_index, entry.line_number) from e

        logger.debug(
            "Paired response at %d with request at %d (%s)",
            index,
            request_index,
            request.url,
        )

        info = parse_request_info(request.url, request.method, self.config.host_suffix)
        code = parse_status_code(response.status)

        message = f"{self.config.thread_prefix(entry.thread_id)}HTTP {code} ({response.status})"
        if not self.config.collapse_to_actual_execution_order:
            message = f"{message}, {info.summary()}"

        answer = Activity(
            source=info.service_name,
            target=self.config.caller_identity,
            message=message,
        )
        return answer, self._create_request_activity(request_entry, request)

    def _create_request_activity(self, entry: LogEntry, request: MessageMatch) -> Activity:
        info = parse_request_info(request.url, request.method, self.config.host_suffix)
        return Activity(
            source=self.config.caller_identity,
            target=info.service_name,
            message=f"{self.config.thread_prefix(entry.thread_id)}{info.method} {info.path}",
        )

    def _create_cached_activity(self, entry: LogEntry) -> Activity:
        if not entry.http_method:
            raise ParseError(
                "Cache entry has no HTTP method",
                line=entry.raw,
                line_number=entry.line_number,
            )

        info = parse_request_info(entry.api_call, entry.http_method, self.config.host_suffix)
        caller = self.config.caller_identity
        return Activity(
            source=caller,
            target=caller,
            message=f"{self.config.thread_prefix(entry.thread_id)}Found in cache: {info.summary()}",
        )
