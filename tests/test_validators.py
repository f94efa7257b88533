"""Tests for per-registry value validators."""

import pytest

from gatecodec.registry import validators
from gatecodec.registry.iso3166 import ALPHA2_CODES


# ---- ISBN ----

class TestIsbn:
    def test_isbn13_valid(self):
        outcome = validators.validate_isbn("9781119473862")
        assert outcome.ok is True
        assert outcome.registry_type == "ISBN"
        assert outcome.reason == ""

    def test_isbn13_979_prefix(self):
        assert validators.validate_isbn("9791032305690").ok is True

    @pytest.mark.parametrize("last", "013456789")
    def test_isbn13_mutated_check_digit(self, last):
        outcome = validators.validate_isbn("978111947386" + last)
        assert outcome.ok is False
        assert outcome.reason == "check digit mismatch"

    def test_isbn13_non_digit(self):
        outcome = validators.validate_isbn("978111947386X")
        assert outcome.ok is False
        assert "digits only" in outcome.reason

    def test_isbn13_bad_prefix(self):
        outcome = validators.validate_isbn("9771234567898")
        assert outcome.ok is False
        assert "978 or 979" in outcome.reason

    def test_isbn13_check_digit_helper(self):
        assert validators.isbn13_check_digit("978111947386") == 2
        assert validators.isbn13_check_digit("978123456789") == 7

    def test_isbn10_valid(self):
        assert validators.validate_isbn("0306406152").ok is True

    def test_isbn10_x_check(self):
        assert validators.validate_isbn("080442957X").ok is True

    def test_isbn10_bad_check(self):
        outcome = validators.validate_isbn("0306406153")
        assert outcome.ok is False
        assert outcome.reason == "check digit mismatch"

    def test_isbn10_x_only_last(self):
        assert validators.validate_isbn("03064X6152").ok is False

    def test_hyphens_rejected(self):
        assert validators.validate_isbn("978-1-119-47386-2").ok is False

    def test_wrong_length(self):
        outcome = validators.validate_isbn("12345")
        assert outcome.ok is False
        assert "got 5" in outcome.reason


# ---- ART-ID ----

class TestArtId:
    def test_valid(self):
        assert validators.validate_art_id("ART-US-2025-000083-9").ok is True

    def test_valid_other_region(self):
        assert validators.validate_art_id("ART-FR-2024-000001-1").ok is True

    def test_check_digit_mismatch(self):
        outcome = validators.validate_art_id("ART-US-2025-000083-7")
        assert outcome.ok is False
        assert outcome.reason == "check digit mismatch"

    def test_unassignable_sequence(self):
        assert validators.mod11_check_digit("2025000007") == 10
        outcome = validators.validate_art_id("ART-US-2025-000007-0")
        assert outcome.ok is False
        assert "no assignable" in outcome.reason

    @pytest.mark.parametrize(
        "value",
        ["art-us-2025-000083-9", "ART-USA-2025-000083-9", "ART-US-25-000083-9", "ART-US-2025-83-9"],
    )
    def test_bad_shape(self, value):
        assert validators.validate_art_id(value).ok is False


# ---- ISRC ----

class TestIsrc:
    def test_hyphenated(self):
        outcome = validators.validate_isrc("US-S1Z-99-00001")
        assert outcome.ok is True
        assert outcome.normalized == "USS1Z9900001"

    def test_compact_lowercase(self):
        outcome = validators.validate_isrc("uss1z9900001")
        assert outcome.ok is True
        assert outcome.normalized == "USS1Z9900001"

    @pytest.mark.parametrize("value", ["US-S1Z-99-0001", "1S-S1Z-99-00001", "US-S1Z-9A-00001"])
    def test_bad_shape(self, value):
        assert validators.validate_isrc(value).ok is False


# ---- Shape-only registries ----

class TestShapeOnly:
    def test_eidr(self):
        assert validators.validate_eidr("10.5240/7791-8534-2C23-9030-8610-5").ok is True
        assert validators.validate_eidr("10.5240/7791-8534-2C23-9030-5").ok is False

    def test_issn(self):
        assert validators.validate_issn("0317-8471").ok is True
        outcome = validators.validate_issn("03178471")
        assert outcome.ok is True
        assert outcome.normalized == "0317-8471"
        assert validators.validate_issn("0317-847").ok is False

    def test_doi(self):
        assert validators.validate_doi("10.1016/j.ecolecon.2024.108163").ok is True
        assert validators.validate_doi("not-a-doi").ok is False

    def test_apn(self):
        assert validators.validate_apn("123-456-78").ok is True
        assert validators.validate_apn("12345").ok is False

    def test_fcc(self):
        assert validators.validate_fcc("0012345678").ok is True
        assert validators.validate_fcc("12345").ok is False


# ---- ISO 3166 ----

class TestIso3166:
    def test_table_size(self):
        assert len(ALPHA2_CODES) == 249

    def test_known_codes(self):
        for code in ("US", "FR", "JP", "BR", "ZA"):
            assert validators.validate_iso3166(code).ok is True

    def test_lowercase_rejected(self):
        outcome = validators.validate_iso3166("us")
        assert outcome.ok is False
        assert "upper-case" in outcome.reason

    @pytest.mark.parametrize("value", ["ZZ", "USA", "U1", "U"])
    def test_unknown(self, value):
        assert validators.validate_iso3166(value).ok is False


class TestOutcome:
    def test_to_dict(self):
        data = validators.validate_isbn("0306406153").to_dict()
        assert data == {
            "registry_type": "ISBN",
            "value": "0306406153",
            "ok": False,
            "reason": "check digit mismatch",
            "normalized": "",
        }


# ---- Non-ASCII digits ----

SUPERSCRIPT_TWO = "²"


def _fullwidth(text):
    """Replace ASCII digits with their fullwidth forms."""
    return "".join(chr(ord(c) - ord("0") + 0xFF10) if c.isdigit() else c for c in text)


class TestAsciiDigitsOnly:
    def test_isbn13_superscript_digit(self):
        outcome = validators.validate_isbn("978111947386" + SUPERSCRIPT_TWO)
        assert outcome.ok is False
        assert "digits only" in outcome.reason

    def test_isbn13_fullwidth(self):
        assert validators.validate_isbn(_fullwidth("9781119473862")).ok is False

    def test_isbn10_fullwidth(self):
        assert _fullwidth("080442957X") == "０８０４４２９５７X"
        assert validators.validate_isbn(_fullwidth("080442957X")).ok is False

    def test_isbn10_superscript(self):
        assert validators.validate_isbn("03064061" + SUPERSCRIPT_TWO + "2").ok is False

    def test_art_id_fullwidth(self):
        assert validators.validate_art_id(_fullwidth("ART-US-2025-000083-9")).ok is False

    def test_art_id_superscript_check(self):
        assert validators.validate_art_id("ART-US-2025-000083-" + SUPERSCRIPT_TWO).ok is False

    @pytest.mark.parametrize(
        "validate, value",
        [
            (validators.validate_issn, "0317-8471"),
            (validators.validate_doi, "10.1016/j.ecolecon.2024.108163"),
            (validators.validate_apn, "123-456-78"),
            (validators.validate_fcc, "0012345678"),
            (validators.validate_isrc, "US-S1Z-99-00001"),
        ],
    )
    def test_shape_checks_reject_fullwidth(self, validate, value):
        assert validate(value).ok is True
        assert validate(_fullwidth(value)).ok is False

    def test_trailing_newline_rejected(self):
        assert validators.validate_isbn("0306406152\n").ok is False
        assert validators.validate_fcc("0012345678\n").ok is False


class TestIsrcHyphens:
    @pytest.mark.parametrize("value", ["USS1Z-99-00001", "US-S1Z-9900001", "USS1Z9900001"])
    def test_boundary_hyphens_optional(self, value):
        outcome = validators.validate_isrc(value)
        assert outcome.ok is True
        assert outcome.normalized == "USS1Z9900001"

    @pytest.mark.parametrize("value", ["U-SS-1Z9-900001", "US-S1Z-990-0001", "US--S1Z-99-00001"])
    def test_misplaced_hyphens_rejected(self, value):
        assert validators.validate_isrc(value).ok is False
