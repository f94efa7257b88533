"""Registry validators and the tag table.

Components:
    ValidationOutcome  - Result of checking one registry value
    RegistryEntry      - Tag, validator and allowed gate positions
    RegistryTable      - Immutable tag -> entry mapping
    DEFAULT_REGISTRY   - The table for the current format revision
"""

from gatecodec.registry.validators import ValidationOutcome
from gatecodec.registry.table import DEFAULT_REGISTRY, RegistryEntry, RegistryTable

__all__ = [
    "ValidationOutcome",
    "RegistryEntry",
    "RegistryTable",
    "DEFAULT_REGISTRY",
]
