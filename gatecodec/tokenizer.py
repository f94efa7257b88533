"""Split a canonical string into ten gate tokens.

Grammar::

    Document   := Gate ('.' Gate){9}
    Gate       := "0" | "1(" MetaPairs ";" Value ")"
    MetaPairs  := Pair ("," Pair)*
    Pair       := Key "=" Val

A ``1(`` body runs to the first ``)``, so dots inside registry values (DOIs,
EIDRs) never split gates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gatecodec.errors import GateCountError, GateSyntaxError, MetadataSyntaxError
from gatecodec.layout import GATE_COUNT

logger = logging.getLogger(__name__)

SEPARATOR = "."
_PAIR_FORBIDDEN = frozenset("=,;)")

MetadataPairs = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class GateToken:
    """Lexical view of one gate segment."""

    position: int
    active: bool
    metadata: MetadataPairs = ()
    value: str | None = None


def split_segments(text: str) -> list[str]:
    """Split on top-level dots. Raises GateSyntaxError on an unclosed body."""
    segments: list[str] = []
    start = 0
    in_body = False
    for index, ch in enumerate(text):
        if in_body:
            if ch == ")":
                in_body = False
        elif ch == "(":
            in_body = True
        elif ch == SEPARATOR:
            segments.append(text[start:index])
            start = index + 1
    if in_body:
        raise GateSyntaxError(
            "unclosed '(' in gate body",
            position=len(segments) + 1,
            segment=text[start:],
        )
    segments.append(text[start:])
    return segments


def check_pair(key: str, val: str, position: int | None = None) -> None:
    """Reject metadata keys/values that could not be written canonically."""
    for part, label in ((key, "key"), (val, "value")):
        if not part:
            raise MetadataSyntaxError(f"empty metadata {label}", position=position)
        bad = _PAIR_FORBIDDEN.intersection(part)
        if bad or any(ch.isspace() for ch in part):
            raise MetadataSyntaxError(
                f"metadata {label} '{part}' contains a reserved character",
                position=position,
            )


def check_value(value: str, position: int | None = None) -> None:
    """Reject payload values that could not be written canonically."""
    if not value:
        raise GateSyntaxError("empty value", position=position)
    if ")" in value or any(ch.isspace() for ch in value):
        raise GateSyntaxError(
            f"value '{value}' contains ')' or whitespace", position=position
        )


def parse_metadata(section: str, position: int | None = None) -> MetadataPairs:
    """Parse ``k=v,k=v`` preserving written order."""
    if not section:
        raise MetadataSyntaxError("empty metadata section", position=position, segment=section)
    pairs: list[tuple[str, str]] = []
    seen: set[str] = set()
    for raw in section.split(","):
        if raw.count("=") != 1:
            raise MetadataSyntaxError(
                f"expected key=value, got '{raw}'", position=position, segment=section
            )
        key, val = raw.split("=")
        if not key or not val:
            raise MetadataSyntaxError(
                f"empty key or value in '{raw}'", position=position, segment=section
            )
        if key in seen:
            raise MetadataSyntaxError(
                f"duplicate metadata key '{key}'", position=position, segment=section
            )
        seen.add(key)
        pairs.append((key, val))
    return tuple(pairs)


def tokenize_segment(segment: str, position: int) -> GateToken:
    """Tokenize one gate segment."""
    if segment == "0":
        return GateToken(position=position, active=False)
    if segment.startswith("0"):
        raise GateSyntaxError(
            "inactive gate must be exactly '0'", position=position, segment=segment
        )
    if not (segment.startswith("1(") and segment.endswith(")")) or len(segment) <= 3:
        raise GateSyntaxError(
            "expected '0' or '1(<metadata>;<value>)'", position=position, segment=segment
        )

    body = segment[2:-1]
    if ")" in body:
        raise GateSyntaxError("unexpected ')' in gate body", position=position, segment=segment)
    if ";" not in body:
        raise GateSyntaxError(
            "missing ';' between metadata and value", position=position, segment=segment
        )
    section, value = body.split(";", 1)
    if not value:
        raise GateSyntaxError("empty value", position=position, segment=segment)
    metadata = parse_metadata(section, position)
    return GateToken(position=position, active=True, metadata=metadata, value=value)


def tokenize(text: str, *, max_length: int | None = None) -> list[GateToken]:
    """Split a canonical string into exactly ten gate tokens.

    Raises GateCountError, GateSyntaxError or MetadataSyntaxError.
    """
    if max_length is not None and len(text) > max_length:
        raise GateSyntaxError(f"input longer than {max_length} characters")

    segments = split_segments(text)
    if len(segments) != GATE_COUNT:
        logger.debug("Rejected input with %d segments", len(segments))
        raise GateCountError(
            f"expected {GATE_COUNT} gate segments, found {len(segments)}",
            found=len(segments),
        )

    tokens: list[GateToken] = []
    for position, segment in enumerate(segments, start=1):
        if not segment:
            raise GateCountError(
                "empty gate segment", found=len(segments), position=position
            )
        if any(ch.isspace() for ch in segment):
            raise GateSyntaxError(
                "whitespace is not allowed", position=position, segment=segment
            )
        tokens.append(tokenize_segment(segment, position))
    return tokens
