"""Shared test fixtures for the gate codec test suite."""

import pytest

from gatecodec.codec import GateCodec
from gatecodec.registry import DEFAULT_REGISTRY

from tests.samples import EMPTY, SCENARIO_A, SCENARIO_B, gates_with


@pytest.fixture
def codec():
    return GateCodec(DEFAULT_REGISTRY)


@pytest.fixture
def canonical_samples():
    """Canonical strings covering every bindable registry."""
    return [
        EMPTY,
        SCENARIO_A,
        SCENARIO_B,
        "1(type=ISBN,edition=2;080442957X).0.0.0.0.0.0.0.0.0",
        gates_with(2, "1(type=ISRC;US-S1Z-99-00001)"),
        gates_with(3, "1(type=EIDR;10.5240/7791-8534-2C23-9030-8610-5)"),
        gates_with(4, "1(type=ISSN;0317-8471)"),
        gates_with(4, "1(type=DOI;10.1016/j.ecolecon.2024.108163)"),
        gates_with(4, "1(type=DOI,lang=en;10.1000/a;b)"),
        gates_with(9, "1(type=FCC;0012345678)"),
    ]


@pytest.fixture
def scenario_b_json():
    return {
        "gates": [
            {"position": 1, "active": True, "meta": {"type": "ISBN"}, "value": "9781234567897"},
            {"position": 2, "active": False},
            {"position": 3, "active": False},
            {"position": 4, "active": False},
            {"position": 5, "active": True, "meta": {"type": "ART-ID"}, "value": "ART-US-2025-000083-9"},
            {"position": 6, "active": False},
            {"position": 7, "active": False},
            {"position": 8, "active": False},
            {"position": 9, "active": True, "meta": {"type": "ISO3166"}, "value": "US"},
            {"position": 10, "active": False},
        ]
    }
