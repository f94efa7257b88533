"""SHA-256 fingerprints of canonical strings."""

from __future__ import annotations

import hashlib

from gatecodec.codec import default_codec
from gatecodec.model import Document


class DocumentIntegrity:
    """Compute and verify checksums for gate documents.

    The checksum covers the canonical string, so identical documents always
    hash identically regardless of how they were built.
    """

    @staticmethod
    def compute_checksum(document: Document | str) -> str:
        """Compute SHA-256 hex digest of a document's canonical string."""
        if isinstance(document, Document):
            document = default_codec.serialize(document)
        return hashlib.sha256(document.encode("utf-8")).hexdigest()

    @staticmethod
    def verify(document: Document | str, expected_checksum: str) -> bool:
        """Verify that a document matches the expected checksum."""
        return DocumentIntegrity.compute_checksum(document) == expected_checksum
