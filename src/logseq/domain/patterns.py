"""
Message pattern extraction.

The HTTP client logs two free-text message shapes:

    About to call API at <url> with verb <method>
    Calling API at <url> with verb <method> gave status code <status> and took a time of <n> ms

This module is the only place that knows those shapes. It turns a message
into a tagged `MessageMatch` and turns a logged URL into a `RequestInfo`.
"""

import re
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from urllib.parse import urlsplit

from logseq.core.config import DEFAULT_HOST_SUFFIX
from logseq.core.exceptions import (
    HostSuffixMismatchError,
    MalformedUrlError,
    UnknownStatusCodeError,
)
from logseq.core.models import RequestInfo

__all__ = [
    "REQUEST_PATTERN",
    "RESPONSE_PATTERN",
    "MessageKind",
    "MessageMatch",
    "match_request",
    "match_response",
    "extract",
    "parse_request_info",
    "parse_status_code",
]


REQUEST_PATTERN = re.compile(
    r"About to call API at\s*(?P<url>.+)\s*with verb\s*(?P<method>\w+)",
    re.IGNORECASE | re.DOTALL,
)

RESPONSE_PATTERN = re.compile(
    r"Calling API at\s*(?P<url>.+)?\s*with verb\s*(?P<method>\w+)"
    r"\s*gave status code\s*(?P<status>\w+)"
    r"\s*and took a time of\s*(?P<duration>\d+)\s*ms",
    re.IGNORECASE | re.DOTALL,
)

# .NET HttpStatusCode names that are aliases rather than the canonical name
STATUS_ALIASES = {
    "ambiguous": HTTPStatus.MULTIPLE_CHOICES,
    "moved": HTTPStatus.MOVED_PERMANENTLY,
    "redirect": HTTPStatus.FOUND,
    "redirectmethod": HTTPStatus.SEE_OTHER,
    "redirectkeepverb": HTTPStatus.TEMPORARY_REDIRECT,
    "requestentitytoolarge": HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    "requesturitoolong": HTTPStatus.REQUEST_URI_TOO_LONG,
    "requestedrangenotsatisfiable": HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE,
    "unprocessableentity": HTTPStatus.UNPROCESSABLE_ENTITY,
}

_STATUS_BY_NAME = {
    status.name.replace("_", "").lower(): status for status in HTTPStatus
}


class MessageKind(Enum):
    """Which message shape matched."""
    REQUEST = "request"
    RESPONSE = "response"


@dataclass(frozen=True)
class MessageMatch:
    """Fields captured from a request or response message."""
    kind: MessageKind
    url: str
    method: str
    status: str | None = None
    duration_ms: int | None = None


def match_request(message: str) -> MessageMatch | None:
    """Match the request-issued shape, or return None."""
    match = REQUEST_PATTERN.search(message or "")
    if match is None:
        return None
    return MessageMatch(
        kind=MessageKind.REQUEST,
        url=match.group("url").strip(),
        method=match.group("method"),
    )


def match_response(message: str) -> MessageMatch | None:
    """
    Match the response-received shape, or return None.

    The URL group is optional in the pattern, so `url` may be empty. An
    empty URL matches every request URL.
    """
    match = RESPONSE_PATTERN.search(message or "")
    if match is None:
        return None
    return MessageMatch(
        kind=MessageKind.RESPONSE,
        url=(match.group("url") or "").strip(),
        method=match.group("method"),
        status=match.group("status"),
        duration_ms=int(match.group("duration")),
    )


def extract(message: str) -> MessageMatch | None:
    """
    Classify a message against the known shapes.

    The response shape is tried first as it is the more specific one.

    Returns:
        MessageMatch tagged with its kind, or None for unrecognised messages
    """
    return match_response(message) or match_request(message)


def parse_request_info(
    url: str | None,
    method: str | None,
    host_suffix: str = DEFAULT_HOST_SUFFIX,
) -> RequestInfo:
    """
    Derive service name and path from a logged URL.

    Args:
        url: Absolute URL, optionally wrapped in quotes
        method: HTTP verb as logged
        host_suffix: Domain suffix removed from the host to get the service name

    Returns:
        RequestInfo with the upper-cased verb

    Raises:
        MalformedUrlError: If the URL is not an absolute URI
        HostSuffixMismatchError: If the host does not end with host_suffix
    """
    if not url or not url.strip():
        raise MalformedUrlError("URL is empty", url=url)

    cleaned = url.strip().strip("\"'").strip()

    try:
        parts = urlsplit(cleaned)
        host = parts.hostname
    except ValueError as e:
        raise MalformedUrlError(f"Invalid URL: {e}", url=cleaned) from e

    if not parts.scheme or not host:
        raise MalformedUrlError("URL is not absolute", url=cleaned)

    suffix = host_suffix.lower()
    if not host.endswith(suffix) or len(host) == len(suffix):
        raise HostSuffixMismatchError(host, host_suffix)

    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"

    return RequestInfo(
        service_name=host[: -len(suffix)],
        path=path,
        method=(method or "").upper(),
    )


def parse_status_code(status: str) -> int:
    """
    Map a logged status token to its numeric HTTP status.

    Accepts .NET style names (`NotFound`), Python style names (`NOT_FOUND`)
    and numeric tokens of known statuses, all case-insensitive.

    Raises:
        UnknownStatusCodeError: If the token is not a known HTTP status
    """
    token = (status or "").strip()

    if token.isdigit():
        try:
            return HTTPStatus(int(token)).value
        except ValueError as e:
            raise UnknownStatusCodeError(status) from e

    key = token.replace("_", "").lower()
    found = _STATUS_BY_NAME.get(key) or STATUS_ALIASES.get(key)
    if found is None:
        raise UnknownStatusCodeError(status)
    return found.value
