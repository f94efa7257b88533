"""Tests for document fingerprints."""

import hashlib

from gatecodec.integrity import DocumentIntegrity
from gatecodec.json_mapping import from_json

from tests.samples import SCENARIO_A, SCENARIO_B


class TestDocumentIntegrity:
    def test_checksum_of_canonical_string(self, codec):
        doc = codec.parse(SCENARIO_A)
        expected = hashlib.sha256(SCENARIO_A.encode("utf-8")).hexdigest()
        assert DocumentIntegrity.compute_checksum(doc) == expected
        assert DocumentIntegrity.compute_checksum(SCENARIO_A) == expected

    def test_same_document_from_json_and_string(self, codec, scenario_b_json):
        a = DocumentIntegrity.compute_checksum(codec.parse(SCENARIO_B))
        b = DocumentIntegrity.compute_checksum(from_json(scenario_b_json))
        assert a == b

    def test_verify(self, codec):
        doc = codec.parse(SCENARIO_A)
        checksum = DocumentIntegrity.compute_checksum(doc)
        assert DocumentIntegrity.verify(doc, checksum) is True
        assert DocumentIntegrity.verify(codec.deactivate(doc, 1), checksum) is False
