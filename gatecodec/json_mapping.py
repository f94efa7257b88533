"""Bidirectional mapping between Documents and the published JSON shape.

::

    { "gates": [ { "position": 1..10, "active": bool,
                   "meta"?: {string: string}, "value"?: string } x 10 ] }

``meta`` and ``value`` are omitted (never null) on inactive gates. JSON input
is validated exactly as strictly as string input.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from gatecodec.codec import CodecResult, GateCodec, default_codec
from gatecodec.errors import GateCodecError, GateCountError, SchemaError
from gatecodec.layout import GATE_COUNT
from gatecodec.model import Document
from gatecodec.tokenizer import GateToken, check_pair, check_value

logger = logging.getLogger(__name__)


class GateEntry(BaseModel):
    """Schema for one entry of the ``gates`` array."""

    model_config = ConfigDict(extra="forbid", strict=True)

    position: int = Field(..., ge=1, le=GATE_COUNT)
    active: bool
    meta: dict[str, str] | None = None
    value: str | None = None

    @model_validator(mode="after")
    def check_presence(self) -> GateEntry:
        if self.active:
            if self.meta is None or self.value is None:
                raise ValueError("active gates require 'meta' and 'value'")
        elif "meta" in self.model_fields_set or "value" in self.model_fields_set:
            raise ValueError("inactive gates must omit 'meta' and 'value'")
        return self


def _format_errors(exc: ValidationError) -> list[str]:
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<entry>"
        details.append(f"{loc}: {err['msg']}")
    return details


def to_json(document: Document) -> dict[str, Any]:
    """Return the JSON tree for a document."""
    gates = []
    for gate in document.gates:
        entry: dict[str, Any] = {"position": gate.position, "active": gate.active}
        if gate.active:
            entry["meta"] = gate.meta
            entry["value"] = gate.value
        gates.append(entry)
    return {"gates": gates}


def tokens_from_json(tree: Any) -> list[GateToken]:
    """Check a JSON tree against the schema and return gate tokens."""
    if not isinstance(tree, dict):
        raise SchemaError(f"expected an object, got {type(tree).__name__}")
    extra = sorted(set(tree) - {"gates"})
    if extra:
        raise SchemaError(f"unknown top-level keys: {', '.join(map(str, extra))}", details=extra)
    if "gates" not in tree:
        raise SchemaError("missing 'gates' array")
    raw_gates = tree["gates"]
    if not isinstance(raw_gates, list):
        raise SchemaError(f"'gates' must be an array, got {type(raw_gates).__name__}")
    if len(raw_gates) != GATE_COUNT:
        raise GateCountError(
            f"expected {GATE_COUNT} gate entries, found {len(raw_gates)}", found=len(raw_gates)
        )

    tokens: list[GateToken] = []
    for index, raw in enumerate(raw_gates, start=1):
        try:
            entry = GateEntry.model_validate(raw)
        except ValidationError as exc:
            details = _format_errors(exc)
            raise SchemaError(
                f"gate entry {index} does not match the schema: {details[0]}",
                details=details,
                position=index,
            ) from exc
        if entry.position != index:
            raise SchemaError(
                f"gate entry {index} declares position {entry.position}", position=index
            )
        if not entry.active:
            tokens.append(GateToken(position=index, active=False))
            continue

        for key, val in entry.meta.items():
            check_pair(key, val, index)
        check_value(entry.value, index)
        tokens.append(
            GateToken(
                position=index,
                active=True,
                metadata=tuple(entry.meta.items()),
                value=entry.value,
            )
        )
    return tokens


def from_json(tree: Any, codec: GateCodec = default_codec) -> Document:
    """Validate a JSON tree and build its Document."""
    return codec.build(tokens_from_json(tree))


def try_from_json(tree: Any, codec: GateCodec = default_codec) -> CodecResult:
    try:
        return CodecResult(document=from_json(tree, codec))
    except GateCodecError as exc:
        return CodecResult(error=exc)


def dumps(document: Document, indent: int | None = None) -> str:
    return json.dumps(to_json(document), indent=indent, ensure_ascii=False)


def loads(text: str, codec: GateCodec = default_codec) -> Document:
    """Parse JSON text into a Document. Malformed JSON is a SchemaError."""
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Rejected malformed JSON: %s", exc)
        raise SchemaError(f"malformed JSON: {exc.msg}") from exc
    return from_json(tree, codec)
