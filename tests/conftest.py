"""
Pytest fixtures for logseq tests.
"""

import json

import pytest

from logseq.core.models import LogEntry


def splunk_line(
    time: str,
    message: str,
    logger: str | None = "ApiHttpClient",
    thread: str | None = "7",
    **extra,
) -> str:
    """Build one Splunk JSON export line."""
    result = {"a_time": time, "a_msg": message}
    if logger is not None:
        result["a_logger"] = logger
    if thread is not None:
        result["a_thread"] = thread
    result.update(extra)
    return json.dumps({"preview": False, "result": result})


def request_message(url: str, method: str = "GET") -> str:
    return f"About to call API at {url} with verb {method}"


def response_message(url: str, method: str = "GET", status: str = "OK", duration: int = 120) -> str:
    return (
        f"Calling API at {url} with verb {method} gave status code {status} "
        f"and took a time of {duration} ms"
    )


def make_entry(
    message: str = "",
    timestamp: str = "2026-01-27T10:15:32.000+00:00",
    logger_name: str | None = "ApiHttpClient",
    thread_id: str = "7",
    **kwargs,
) -> LogEntry:
    """Build a LogEntry with sensible defaults."""
    return LogEntry(
        timestamp=timestamp,
        logger_name=logger_name,
        thread_id=thread_id,
        message=message,
        **kwargs,
    )


@pytest.fixture
def billing_url() -> str:
    return "https://billing.intelliflo.com/x?y=1"


@pytest.fixture
def billing_pair_lines(billing_url) -> list[str]:
    """A request and its response, newest line first as Splunk exports them."""
    return [
        splunk_line("2026-01-27T10:15:33.000+00:00", response_message(billing_url)),
        splunk_line("2026-01-27T10:15:32.000+00:00", request_message(billing_url)),
    ]


@pytest.fixture
def cache_hit_line() -> str:
    """A cache hit logged by the cache handler."""
    return splunk_line(
        "2026-01-27T10:15:34.000+00:00",
        "Returning cached results",
        logger="CacheForRequestHandler",
        thread="3",
        API_CALL="https://reporting.intelliflo.com/r",
        METHOD="POST",
        RESULTS_CACHED="true",
    )


@pytest.fixture
def export_file(tmp_path, billing_pair_lines, cache_hit_line):
    """Temporary Splunk export containing one call pair and one cache hit."""
    log_file = tmp_path / "export.json"
    log_file.write_text("\n".join(billing_pair_lines + [cache_hit_line]) + "\n")
    return log_file
