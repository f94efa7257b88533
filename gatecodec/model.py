"""Immutable gate and document values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Iterator

from gatecodec.errors import GateCountError, GateSyntaxError, MetadataSyntaxError
from gatecodec.layout import GATE_COUNT, GateSlot, get_slot

TYPE_KEY = "type"


@dataclass(frozen=True)
class Gate:
    """One fixed-position slot.

    An inactive gate has no metadata and no value (``None``, not ``""``).
    An active gate has ``type`` as its first metadata key and a non-empty value.
    Registry rules are enforced by the codec, not here.
    """

    position: int
    active: bool = False
    metadata: tuple[tuple[str, str], ...] = ()
    value: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.position <= GATE_COUNT:
            raise GateSyntaxError(f"gate position {self.position} outside 1..{GATE_COUNT}")

        metadata = self.metadata
        if isinstance(metadata, Mapping):
            metadata = tuple(metadata.items())
        metadata = tuple((str(k), str(v)) for k, v in metadata)
        object.__setattr__(self, "metadata", metadata)

        if not self.active:
            if metadata or self.value is not None:
                raise GateSyntaxError(
                    "inactive gate cannot carry metadata or a value", position=self.position
                )
            return

        if not metadata or metadata[0][0] != TYPE_KEY:
            raise MetadataSyntaxError("'type' must be the first metadata key", position=self.position)
        keys = [k for k, _ in metadata]
        if len(set(keys)) != len(keys):
            raise MetadataSyntaxError("duplicate metadata key", position=self.position)
        if not self.value:
            raise GateSyntaxError("active gate requires a value", position=self.position)

    @classmethod
    def inactive(cls, position: int) -> Gate:
        return cls(position=position)

    @property
    def meta(self) -> dict[str, str]:
        """Metadata as an ordered dict."""
        return dict(self.metadata)

    @property
    def registry_type(self) -> str | None:
        return self.metadata[0][1] if self.active else None

    @property
    def slot(self) -> GateSlot:
        return get_slot(self.position)

    @property
    def name(self) -> str:
        return self.slot.name


@dataclass(frozen=True)
class Document:
    """Exactly ten gates in fixed position order."""

    gates: tuple[Gate, ...]

    def __post_init__(self) -> None:
        gates = tuple(self.gates)
        object.__setattr__(self, "gates", gates)
        if len(gates) != GATE_COUNT:
            raise GateCountError(
                f"a document holds exactly {GATE_COUNT} gates, got {len(gates)}",
                found=len(gates),
            )
        for index, gate in enumerate(gates, start=1):
            if gate.position != index:
                raise GateSyntaxError(
                    f"gate at index {index} has position {gate.position}", position=index
                )

    @classmethod
    def empty(cls) -> Document:
        """A document with every gate inactive."""
        return cls(tuple(Gate.inactive(p) for p in range(1, GATE_COUNT + 1)))

    def __iter__(self) -> Iterator[Gate]:
        return iter(self.gates)

    def __len__(self) -> int:
        return len(self.gates)

    def gate(self, position: int) -> Gate:
        """Return the gate at a 1-based position."""
        return self.gates[get_slot(position).position - 1]

    def active_gates(self) -> list[Gate]:
        return [g for g in self.gates if g.active]

    def with_gate(self, gate: Gate) -> Document:
        """Return a new document with *gate* in its position."""
        gates = list(self.gates)
        gates[gate.position - 1] = gate
        return replace(self, gates=tuple(gates))
