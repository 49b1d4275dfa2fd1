"""
Parsing and matching of Pwned Passwords range responses.

A range response is ``text/plain`` with one ``SUFFIX:COUNT`` per line.
With padding enabled the server mixes in decoy suffixes whose count is 0.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typing import Iterable

from checkpwn.errors import MalformedRangeResponse
from checkpwn.hibp.hashing import HEX_DIGITS
from checkpwn.hibp.models import RangeCandidate


def _parse_line(line_number: int, line: str) -> RangeCandidate:
    suffix, sep, count_text = line.partition(":")
    if not sep:
        raise MalformedRangeResponse(line_number, line, "missing ':' separator")

    suffix = suffix.strip()
    count_text = count_text.strip()

    if not suffix or not HEX_DIGITS.issuperset(suffix):
        raise MalformedRangeResponse(line_number, line, "suffix is not hexadecimal")
    if not (count_text.isascii() and count_text.isdigit()):
        raise MalformedRangeResponse(line_number, line, "count is not a non-negative integer")

    return RangeCandidate(suffix=suffix.upper(), occurrence_count=int(count_text))


def parse_range_response(body: str) -> list[RangeCandidate]:
    """Parse a range response body into candidates.

    Args:
        body: Response text, lines separated by CRLF or LF

    Returns:
        Candidates in response order, padding entries included

    Raises:
        MalformedRangeResponse: a non-blank line is not SUFFIX:COUNT
    """
    candidates = []
    for line_number, line in enumerate(body.splitlines(), start=1):
        if not line.strip():
            continue
        candidates.append(_parse_line(line_number, line))
    return candidates


def range_contains(candidates: Iterable[RangeCandidate], target_suffix: str) -> bool:
    """Check whether a suffix appears in the candidates with a nonzero count."""
    target = target_suffix.upper()
    found = False
    for candidate in candidates:
        if candidate.is_padding:
            continue
        if candidate.suffix == target:
            found = True
    return found


def range_occurrences(candidates: Iterable[RangeCandidate], target_suffix: str) -> int:
    """Total number of times a suffix was seen, ignoring padding."""
    target = target_suffix.upper()
    return sum(
        c.occurrence_count
        for c in candidates
        if not c.is_padding and c.suffix == target
    )
