"""The fixed ten-slot gate layout.

Gate order is part of the canonical format. Positions are never reordered,
renumbered or made configurable.
"""

from __future__ import annotations

from dataclasses import dataclass

from gatecodec.errors import GateSyntaxError

GATE_COUNT = 10


@dataclass(frozen=True)
class GateSlot:
    """One fixed position in a document."""

    position: int
    name: str
    label: str
    reserved: bool = False


GATE_LAYOUT: tuple[GateSlot, ...] = (
    GateSlot(1, "publish", "Published works"),
    GateSlot(2, "music", "Music recordings"),
    GateSlot(3, "mphd", "Motion picture and home distribution"),
    GateSlot(4, "research", "Research and serials"),
    GateSlot(5, "art", "Artworks"),
    GateSlot(6, "dre", "Digital rights expression"),
    GateSlot(7, "5pac3", "Space", reserved=True),
    GateSlot(8, "realty", "Real property", reserved=True),
    GateSlot(9, "juris", "Jurisdiction"),
    GateSlot(10, "ph", "Placeholder", reserved=True),
)


def get_slot(position: int) -> GateSlot:
    """Return the slot at a 1-based position.

    Raises GateSyntaxError for positions outside 1..10.
    """
    if not 1 <= position <= GATE_COUNT:
        raise GateSyntaxError(
            f"gate position {position} outside 1..{GATE_COUNT}", position=position
        )
    return GATE_LAYOUT[position - 1]


def slot_by_name(name: str) -> GateSlot | None:
    for slot in GATE_LAYOUT:
        if slot.name == name:
            return slot
    return None


def reserved_positions() -> tuple[int, ...]:
    return tuple(slot.position for slot in GATE_LAYOUT if slot.reserved)
