"""
Gate codec - canonical ten-gate registry identifier encoding

Parses, validates and serializes strings such as
``1(type=ISBN;9781119473862).0.0.0.0.0.0.0.0.0``.
"""

__version__ = "0.1.0"

from gatecodec.codec import CodecResult, GateCodec, build, parse, serialize, try_parse
from gatecodec.errors import (
    GateCodecError,
    GateCountError,
    GateSyntaxError,
    GateTypeMismatchError,
    MetadataSyntaxError,
    RegistryValidationError,
    ReservedGateError,
    SchemaError,
    UnknownRegistryTypeError,
)
from gatecodec.json_mapping import dumps, from_json, loads, to_json, try_from_json
from gatecodec.layout import GATE_COUNT, GATE_LAYOUT, GateSlot
from gatecodec.model import Document, Gate
from gatecodec.registry import DEFAULT_REGISTRY, RegistryEntry, RegistryTable, ValidationOutcome
from gatecodec.tokenizer import GateToken, tokenize

__all__ = [
    "CodecResult",
    "GateCodec",
    "build",
    "parse",
    "serialize",
    "try_parse",
    "tokenize",
    "GateToken",
    "to_json",
    "from_json",
    "try_from_json",
    "dumps",
    "loads",
    "Document",
    "Gate",
    "GateSlot",
    "GATE_COUNT",
    "GATE_LAYOUT",
    "DEFAULT_REGISTRY",
    "RegistryEntry",
    "RegistryTable",
    "ValidationOutcome",
    "GateCodecError",
    "GateCountError",
    "GateSyntaxError",
    "GateTypeMismatchError",
    "MetadataSyntaxError",
    "RegistryValidationError",
    "ReservedGateError",
    "SchemaError",
    "UnknownRegistryTypeError",
]
