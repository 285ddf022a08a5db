"""
Request resolver.

Pairs a response entry with the request entry that caused it. Entries are
ordered newest first, so scanning forward from a response walks back in
wall-clock time towards the call that produced it.

Pairing is by URL only. The response URL must end where the request URL
ends, so `/items` never pairs with `/items/5` and `?y=1` never pairs with
`?y=10`. Two overlapping calls to the same URL can be paired the wrong way
round; nothing in the export tells them apart.
"""

from typing import Sequence

from logseq.core.exceptions import RequestNotFoundError
from logseq.core.models import LogEntry
from logseq.domain.patterns import MessageMatch, match_request

__all__ = ["ResolvedRequest", "find_request"]


ResolvedRequest = tuple[int, LogEntry, MessageMatch]


def find_request(
    url: str,
    start_index: int,
    entries: Sequence[LogEntry],
) -> ResolvedRequest:
    """
    Find the first request entry at or after start_index whose URL ends with url.

    Args:
        url: URL fragment captured from the response message
        start_index: First index to look at; earlier entries are never checked
        entries: Entries ordered newest first

    Returns:
        Tuple of (index, entry, request match)

    Raises:
        RequestNotFoundError: If no entry matches
    """
    # Trailing space anchors the match at the end of the URL
    needle = url.lower() + " "

    for index in range(max(start_index, 0), len(entries)):
        entry = entries[index]
        match = match_request(entry.message)
        if match is None:
            continue
        if needle not in match.url.lower() + " ":
            continue
        return index, entry, match

    raise RequestNotFoundError(url, start_index)
