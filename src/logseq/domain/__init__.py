"""
Domain layer: entry filters, message extraction and request resolution.
"""

from logseq.domain.filters import is_relevant, is_processable
from logseq.domain.patterns import (
    MessageKind,
    MessageMatch,
    extract,
    match_request,
    match_response,
    parse_request_info,
    parse_status_code,
)
from logseq.domain.resolver import find_request

__all__ = [
    "is_relevant",
    "is_processable",
    "MessageKind",
    "MessageMatch",
    "extract",
    "match_request",
    "match_response",
    "parse_request_info",
    "parse_status_code",
    "find_request",
]
