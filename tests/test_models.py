"""
Tests for core data models, configuration and exceptions.
"""

from datetime import datetime, timezone
from dataclasses import FrozenInstanceError

import pytest

from logseq.core.config import ConverterConfig
from logseq.core.exceptions import (
    ConfigurationError,
    HostSuffixMismatchError,
    LogSeqError,
    ParseError,
    RequestNotFoundError,
)
from logseq.core.models import Activity, CorrelationResult, LogEntry, RequestInfo


class TestLogEntry:
    """Tests for LogEntry model."""

    def test_default_values(self):
        """Test default initialization."""
        entry = LogEntry()
        assert entry.timestamp == ""
        assert entry.logger_name is None
        assert entry.thread_id == ""
        assert entry.message == ""
        assert not entry.results_cached
        assert not entry.duration_marker

    def test_is_immutable(self):
        """Test that entries cannot be modified after parsing."""
        entry = LogEntry(message="hello")
        with pytest.raises(FrozenInstanceError):
            entry.message = "changed"

    def test_parsed_timestamp_with_offset(self):
        """Test ISO timestamps with an offset."""
        entry = LogEntry(timestamp="2026-01-27T10:15:32.123+01:00")
        assert entry.parsed_timestamp == datetime(2026, 1, 27, 9, 15, 32, 123000, tzinfo=timezone.utc)

    def test_parsed_timestamp_naive_is_utc(self):
        """Test that naive timestamps are read as UTC."""
        entry = LogEntry(timestamp="2026-01-27 10:15:32")
        assert entry.parsed_timestamp == datetime(2026, 1, 27, 10, 15, 32, tzinfo=timezone.utc)

    def test_parsed_timestamp_unparseable(self):
        """Test that garbage timestamps give None."""
        assert LogEntry(timestamp="not a time").parsed_timestamp is None
        assert LogEntry(timestamp="").parsed_timestamp is None

    def test_raw_not_part_of_equality(self):
        """Test that parsing metadata does not affect equality."""
        a = LogEntry(message="m", raw="line a", line_number=1)
        b = LogEntry(message="m", raw="line b", line_number=2)
        assert a == b


class TestRequestInfo:
    """Tests for RequestInfo."""

    def test_summary(self):
        """Test the short summary form."""
        info = RequestInfo(service_name="billing", path="/x?y=1", method="GET")
        assert info.summary() == "billing GET /x?y=1"


class TestActivity:
    """Tests for Activity."""

    def test_to_dict(self):
        """Test serialization uses from/to keys."""
        activity = Activity(source="pfp", target="billing", message="T:1 GET /x")
        assert activity.to_dict() == {"from": "pfp", "to": "billing", "message": "T:1 GET /x"}


class TestCorrelationResult:
    """Tests for CorrelationResult."""

    def test_activity_count(self):
        """Test activity count property."""
        result = CorrelationResult(activities=[Activity("a", "b", "m")] * 3)
        assert result.activity_count == 3

    def test_to_dict(self):
        """Test serialization."""
        result = CorrelationResult(total_entries=5, relevant_entries=2, cache_hits=1)
        data = result.to_dict()
        assert data["total_entries"] == 5
        assert data["relevant_entries"] == 2
        assert data["cache_hits"] == 1
        assert data["activities"] == []


class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = ConverterConfig()
        assert config.print_thread_id is True
        assert config.collapse_to_actual_execution_order is False
        assert config.caller_identity == "pfp"
        assert config.host_suffix == ".intelliflo.com"
        assert config.title == "PFP collaboration"

    def test_thread_prefix(self):
        """Test thread prefix on and off."""
        assert ConverterConfig().thread_prefix("12") == "T:12 "
        assert ConverterConfig(print_thread_id=False).thread_prefix("12") == ""

    def test_is_immutable(self):
        """Test that configuration cannot change after construction."""
        config = ConverterConfig()
        with pytest.raises(FrozenInstanceError):
            config.print_thread_id = False

    def test_empty_caller_rejected(self):
        """Test that an empty caller identity is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConverterConfig(caller_identity="  ")
        assert exc_info.value.config_key == "caller_identity"

    @pytest.mark.parametrize("suffix", ["", ".", "intelliflo.com"])
    def test_bad_host_suffix_rejected(self, suffix):
        """Test that host suffixes must start with a dot."""
        with pytest.raises(ConfigurationError):
            ConverterConfig(host_suffix=suffix)

    def test_no_loggers_rejected(self):
        """Test that an empty logger allow-list is rejected."""
        with pytest.raises(ConfigurationError):
            ConverterConfig(allowed_loggers=())


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_all_derive_from_base(self):
        """Test that every error is a LogSeqError."""
        assert issubclass(ParseError, LogSeqError)
        assert issubclass(RequestNotFoundError, LogSeqError)
        assert issubclass(HostSuffixMismatchError, LogSeqError)

    def test_parse_error_truncates_line(self):
        """Test that long lines are truncated in details."""
        error = ParseError("bad", line="x" * 500, line_number=3)
        assert error.details["line"].endswith("...")
        assert len(error.details["line"]) == 103
        assert error.details["line_number"] == 3

    def test_str_includes_details(self):
        """Test string form includes details."""
        error = RequestNotFoundError("https://a.intelliflo.com/x", 4, line_number=9)
        text = str(error)
        assert "No request entry found" in text
        assert "line_number" in text

    def test_str_without_details(self):
        """Test string form without details."""
        assert str(LogSeqError("plain")) == "plain"
