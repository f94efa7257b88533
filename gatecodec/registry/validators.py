"""Per-registry value validators.

Each validator is a pure function ``(value) -> ValidationOutcome``. They check
shape and, where the registry defines one, the check digit. None of them
contacts a registry: "does this ISBN exist" is never answered here.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass

from gatecodec.registry.iso3166 import is_alpha2


@dataclass(frozen=True)
class ValidationOutcome:
    """Structured result of validating one registry value."""

    registry_type: str
    value: str
    ok: bool
    reason: str = ""
    normalized: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def _ok(registry_type: str, value: str, normalized: str | None = None) -> ValidationOutcome:
    return ValidationOutcome(
        registry_type=registry_type,
        value=value,
        ok=True,
        normalized=value if normalized is None else normalized,
    )


def _fail(registry_type: str, value: str, reason: str) -> ValidationOutcome:
    return ValidationOutcome(registry_type=registry_type, value=value, ok=False, reason=reason)


# ═══════════════════════════════════════════════════════════════════
# CHECK DIGITS
# ═══════════════════════════════════════════════════════════════════

def isbn13_check_digit(first_twelve: str) -> int:
    """Check digit for the first 12 digits of an ISBN-13 (weights 1,3)."""
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(first_twelve))
    return (10 - total % 10) % 10


def isbn10_checksum(value: str) -> int:
    """Weighted sum (10..1) of an ISBN-10 modulo 11, ``X`` counting as 10."""
    total = 0
    for weight, ch in zip(range(10, 0, -1), value):
        total += weight * (10 if ch == "X" else int(ch))
    return total % 11


def mod11_check_digit(digits: str) -> int:
    """Mod-11 check digit with weights descending from the digit count.

    Returns 10 when no single digit can complete the sum.
    """
    total = sum(int(d) * w for d, w in zip(digits, range(len(digits), 0, -1)))
    return (11 - total % 11) % 11


# ═══════════════════════════════════════════════════════════════════
# CHECKSUM REGISTRIES
# ═══════════════════════════════════════════════════════════════════

_ISBN13_PATTERN = re.compile(r"^[0-9]{13}$")
_ISBN10_PATTERN = re.compile(r"^[0-9]{9}[0-9X]$")


def validate_isbn(value: str) -> ValidationOutcome:
    if len(value) == 13:
        if not _ISBN13_PATTERN.fullmatch(value):
            return _fail("ISBN", value, "ISBN-13 must contain digits only")
        if value[:3] not in ("978", "979"):
            return _fail("ISBN", value, "ISBN-13 prefix must be 978 or 979")
        if isbn13_check_digit(value[:12]) != int(value[12]):
            return _fail("ISBN", value, "check digit mismatch")
        return _ok("ISBN", value)

    if len(value) == 10:
        if not _ISBN10_PATTERN.fullmatch(value):
            return _fail("ISBN", value, "ISBN-10 must be 9 digits followed by a digit or X")
        if isbn10_checksum(value) != 0:
            return _fail("ISBN", value, "check digit mismatch")
        return _ok("ISBN", value)

    return _fail("ISBN", value, f"expected 10 or 13 characters, got {len(value)}")


_ART_ID_PATTERN = re.compile(r"^ART-([A-Z]{2})-([0-9]{4})-([0-9]{6})-([0-9])$")


def validate_art_id(value: str) -> ValidationOutcome:
    match = _ART_ID_PATTERN.fullmatch(value)
    if not match:
        return _fail("ART-ID", value, "expected ART-<region>-<yyyy>-<nnnnnn>-<check>")
    _region, year, sequence, check = match.groups()
    expected = mod11_check_digit(year + sequence)
    if expected == 10:
        return _fail("ART-ID", value, "sequence has no assignable check digit")
    if expected != int(check):
        return _fail("ART-ID", value, "check digit mismatch")
    return _ok("ART-ID", value)


# ═══════════════════════════════════════════════════════════════════
# SHAPE-ONLY REGISTRIES
# ═══════════════════════════════════════════════════════════════════

# Hyphens are optional but only at the CC-XXX-YY-NNNNN boundaries.
_ISRC_PATTERN = re.compile(
    r"^([A-Z]{2})-?([A-Z0-9]{3})-?([0-9]{2})-?([0-9]{5})$", re.IGNORECASE | re.ASCII
)


def validate_isrc(value: str) -> ValidationOutcome:
    match = _ISRC_PATTERN.fullmatch(value)
    if not match:
        return _fail("ISRC", value, "expected CC-XXX-YY-NNNNN")
    normalized = "".join(match.groups()).upper()
    return _ok("ISRC", value, normalized)


_EIDR_PATTERN = re.compile(r"^10\.5240/(?:[0-9A-F]{4}-){5}[0-9A-Z]$", re.IGNORECASE | re.ASCII)


def validate_eidr(value: str) -> ValidationOutcome:
    if not _EIDR_PATTERN.fullmatch(value):
        return _fail("EIDR", value, "expected 10.5240/XXXX-XXXX-XXXX-XXXX-XXXX-C")
    return _ok("EIDR", value, value.upper())


_ISSN_PATTERN = re.compile(r"^[0-9]{4}-?[0-9]{3}[0-9X]$")


def validate_issn(value: str) -> ValidationOutcome:
    if not _ISSN_PATTERN.fullmatch(value):
        return _fail("ISSN", value, "expected NNNN-NNNC")
    compact = value.replace("-", "")
    return _ok("ISSN", value, f"{compact[:4]}-{compact[4:]}")


# Relaxed DOI pattern accepted by Crossref and common publishers.
_DOI_PATTERN = re.compile(r"^10\.[0-9]{4,9}/\S+$")


def validate_doi(value: str) -> ValidationOutcome:
    if not _DOI_PATTERN.fullmatch(value):
        return _fail("DOI", value, "expected 10.<registrant>/<suffix>")
    return _ok("DOI", value, value.lower())


_APN_PATTERN = re.compile(r"^[0-9]{2,4}(?:-[0-9]{2,4}){1,3}$")


def validate_apn(value: str) -> ValidationOutcome:
    if not _APN_PATTERN.fullmatch(value):
        return _fail("APN", value, "expected hyphen-separated digit groups")
    return _ok("APN", value)


def validate_iso3166(value: str) -> ValidationOutcome:
    if len(value) != 2 or not (value.isascii() and value.isalpha()):
        return _fail("ISO3166", value, "expected a 2-letter country code")
    if value != value.upper():
        return _fail("ISO3166", value, "country codes are upper-case")
    if not is_alpha2(value):
        return _fail("ISO3166", value, "not an assigned ISO 3166-1 alpha-2 code")
    return _ok("ISO3166", value)


_FRN_PATTERN = re.compile(r"^[0-9]{10}$")


def validate_fcc(value: str) -> ValidationOutcome:
    if not _FRN_PATTERN.fullmatch(value):
        return _fail("FCC", value, "expected a 10-digit FCC Registration Number")
    return _ok("FCC", value)
