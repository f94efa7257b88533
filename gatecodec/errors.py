"""Error taxonomy for the gate codec.

Every failure is terminal for the call that raised it. Each error carries
enough context (gate position, offending segment, registry tag) to render a
precise diagnostic, and ``to_dict()`` gives a JSON-friendly view for callers
that report errors as values.
"""

from __future__ import annotations

from typing import Any


class GateCodecError(Exception):
    """Base exception for the gate codec."""

    kind = "codec_error"

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        segment: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.segment = segment

    def __str__(self) -> str:
        if self.position is not None:
            return f"gate {self.position}: {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "position": self.position,
            "segment": self.segment,
        }


class GateCountError(GateCodecError):
    """Input does not split into exactly ten gate segments."""

    kind = "gate_count"

    def __init__(self, message: str, *, found: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.found = found

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["found"] = self.found
        return data


class GateSyntaxError(GateCodecError):
    """Malformed gate segment."""

    kind = "gate_syntax"


class MetadataSyntaxError(GateCodecError):
    """Malformed ``key=value`` metadata section."""

    kind = "metadata_syntax"


class UnknownRegistryTypeError(GateCodecError):
    """The ``type`` tag is not in the registry table."""

    kind = "unknown_registry_type"

    def __init__(self, registry_type: str, **kwargs: Any) -> None:
        super().__init__(f"unknown registry type '{registry_type}'", **kwargs)
        self.registry_type = registry_type

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["registry_type"] = self.registry_type
        return data


class ReservedGateError(GateCodecError):
    """Attempt to activate a reserved gate."""

    kind = "reserved_gate"

    def __init__(self, gate_name: str, **kwargs: Any) -> None:
        super().__init__(f"gate '{gate_name}' is reserved and cannot be active", **kwargs)
        self.gate_name = gate_name

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["gate_name"] = self.gate_name
        return data


class GateTypeMismatchError(GateCodecError):
    """Registry tag used at a gate it is not bound to."""

    kind = "gate_type_mismatch"

    def __init__(
        self,
        registry_type: str,
        allowed_positions: tuple[int, ...],
        **kwargs: Any,
    ) -> None:
        allowed = ", ".join(str(p) for p in allowed_positions) or "none"
        super().__init__(
            f"registry type '{registry_type}' is not allowed here (allowed gates: {allowed})",
            **kwargs,
        )
        self.registry_type = registry_type
        self.allowed_positions = allowed_positions

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["registry_type"] = self.registry_type
        data["allowed_positions"] = list(self.allowed_positions)
        return data


class RegistryValidationError(GateCodecError):
    """Value fails its registry's syntax or checksum rule."""

    kind = "registry_validation"

    def __init__(self, registry_type: str, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"invalid {registry_type} '{value}': {reason}", **kwargs)
        self.registry_type = registry_type
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(registry_type=self.registry_type, value=self.value, reason=self.reason)
        return data


class SchemaError(GateCodecError):
    """JSON tree has extra, missing or mistyped fields."""

    kind = "schema"

    def __init__(self, message: str, *, details: list[str] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details = details or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["details"] = list(self.details)
        return data
