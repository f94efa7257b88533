"""Document codec - builds validated documents and serializes them back.

``parse`` runs tokenize -> build; ``serialize`` is its inverse. Construction
is all-or-nothing: either a fully valid Document is returned or a
GateCodecError is raised. ``try_parse`` returns the same outcome as a value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from gatecodec.errors import (
    GateCodecError,
    GateCountError,
    GateSyntaxError,
    GateTypeMismatchError,
    MetadataSyntaxError,
    RegistryValidationError,
    ReservedGateError,
)
from gatecodec.layout import GATE_COUNT, get_slot
from gatecodec.model import TYPE_KEY, Document, Gate
from gatecodec.registry import DEFAULT_REGISTRY, RegistryTable, ValidationOutcome
from gatecodec.tokenizer import GateToken, check_pair, check_value, tokenize

logger = logging.getLogger(__name__)

GATE_OPEN = "1("
GATE_CLOSE = ")"
INACTIVE = "0"


@dataclass(frozen=True)
class CodecResult:
    """A document or the error that prevented building it."""

    document: Document | None = None
    error: GateCodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Document:
        """Return the document or raise the captured error."""
        if self.error is not None:
            raise self.error
        assert self.document is not None
        return self.document

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error.to_dict() if self.error is not None else None,
        }


class GateCodec:
    """Parse, build and serialize gate documents against a registry table."""

    def __init__(
        self,
        registry: RegistryTable = DEFAULT_REGISTRY,
        *,
        max_input_length: int | None = None,
    ) -> None:
        self._registry = registry
        self._max_input_length = max_input_length

    @classmethod
    def from_settings(cls, settings=None, registry: RegistryTable = DEFAULT_REGISTRY) -> GateCodec:
        """Build a codec honouring the limits in ``CodecSettings``."""
        if settings is None:
            from gatecodec.settings import get_settings

            settings = get_settings()
        return cls(registry, max_input_length=settings.max_input_length)

    @property
    def registry(self) -> RegistryTable:
        return self._registry

    # -- Parsing --------------------------------------------------------------

    def tokenize(self, text: str) -> list[GateToken]:
        return tokenize(text, max_length=self._max_input_length)

    def build_gate(self, token: GateToken) -> Gate:
        """Validate one token and return its Gate."""
        position = token.position
        slot = get_slot(position)

        if not token.active:
            if token.metadata or token.value is not None:
                raise GateSyntaxError(
                    "inactive gate must be exactly '0'", position=position
                )
            return Gate.inactive(position)

        if slot.reserved:
            raise ReservedGateError(slot.name, position=position)

        if not token.metadata or token.metadata[0][0] != TYPE_KEY:
            raise MetadataSyntaxError("'type' must be the first metadata key", position=position)
        if token.value is None:
            raise GateSyntaxError("active gate requires a value", position=position)

        registry_type = token.metadata[0][1]
        entry = self._registry.require(registry_type, position)
        if position not in entry.positions:
            raise GateTypeMismatchError(
                registry_type, tuple(sorted(entry.positions)), position=position
            )

        outcome = entry.validate(token.value)
        if not outcome.ok:
            logger.debug("Gate %d rejected %s value %r: %s",
                         position, registry_type, token.value, outcome.reason)
            raise RegistryValidationError(
                registry_type, token.value, outcome.reason, position=position
            )

        return Gate(position=position, active=True, metadata=token.metadata, value=token.value)

    def build(self, tokens: Iterable[GateToken]) -> Document:
        """Assemble ten validated gates in position order."""
        tokens = list(tokens)
        if len(tokens) != GATE_COUNT:
            raise GateCountError(
                f"expected {GATE_COUNT} gate tokens, found {len(tokens)}", found=len(tokens)
            )
        gates = []
        for index, token in enumerate(tokens, start=1):
            if token.position != index:
                raise GateSyntaxError(
                    f"token at index {index} has position {token.position}", position=index
                )
            gates.append(self.build_gate(token))
        return Document(tuple(gates))

    def parse(self, text: str) -> Document:
        """Parse a canonical string into a validated Document."""
        return self.build(self.tokenize(text))

    def try_parse(self, text: str) -> CodecResult:
        """Like ``parse`` but returns the error as a value."""
        try:
            return CodecResult(document=self.parse(text))
        except GateCodecError as exc:
            return CodecResult(error=exc)

    # -- Serialization --------------------------------------------------------

    @staticmethod
    def serialize_gate(gate: Gate) -> str:
        if not gate.active:
            return INACTIVE
        pairs = ",".join(f"{k}={v}" for k, v in gate.metadata)
        return f"{GATE_OPEN}{pairs};{gate.value}{GATE_CLOSE}"

    def serialize(self, document: Document) -> str:
        """Write the canonical string. Never re-validates."""
        return ".".join(self.serialize_gate(g) for g in document.gates)

    # -- Editing --------------------------------------------------------------

    def activate(
        self,
        document: Document,
        position: int,
        registry_type: str,
        value: str,
        metadata: Mapping[str, str] | None = None,
    ) -> Document:
        """Return a new document with one gate activated and validated.

        Extra metadata follows ``type`` in the given order.
        """
        pairs = [(TYPE_KEY, registry_type)]
        for key, val in (metadata or {}).items():
            if key == TYPE_KEY:
                raise MetadataSyntaxError("'type' is set by registry_type", position=position)
            pairs.append((key, val))
        for key, val in pairs:
            check_pair(key, val, position)
        check_value(value, position)

        token = GateToken(position=position, active=True, metadata=tuple(pairs), value=value)
        return document.with_gate(self.build_gate(token))

    def deactivate(self, document: Document, position: int) -> Document:
        """Return a new document with one gate inactive."""
        return document.with_gate(Gate.inactive(get_slot(position).position))

    def validate_value(self, registry_type: str, value: str) -> ValidationOutcome:
        """Check a single registry value without building a gate."""
        return self._registry.validate(registry_type, value)


default_codec = GateCodec()


def parse(text: str) -> Document:
    return default_codec.parse(text)


def try_parse(text: str) -> CodecResult:
    return default_codec.try_parse(text)


def build(tokens: Iterable[GateToken]) -> Document:
    return default_codec.build(tokens)


def serialize(document: Document) -> str:
    return default_codec.serialize(document)
