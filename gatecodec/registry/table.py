"""Registry tag table - maps ``type`` tags to validators and gate positions."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator

from gatecodec.errors import UnknownRegistryTypeError
from gatecodec.registry import validators
from gatecodec.registry.validators import ValidationOutcome

Validator = Callable[[str], ValidationOutcome]


@dataclass(frozen=True)
class RegistryEntry:
    """One registry tag, the rule checking its values, and where it may appear."""

    tag: str
    validator: Validator
    positions: frozenset[int]
    description: str = ""

    def validate(self, value: str) -> ValidationOutcome:
        return self.validator(value)


class RegistryTable:
    """Immutable mapping of registry tag to ``RegistryEntry``.

    Built once and shared by reference. Edits return a new table, so an
    alternate table (e.g. with experimental tags) never touches the default.
    """

    def __init__(self, entries: Iterable[RegistryEntry] = ()) -> None:
        table: dict[str, RegistryEntry] = {}
        for entry in entries:
            if entry.tag in table:
                raise ValueError(f"Duplicate registry tag {entry.tag}")
            table[entry.tag] = entry
        self._entries = MappingProxyType(table)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    # -- Lookup ---------------------------------------------------------------

    def get(self, tag: str) -> RegistryEntry | None:
        """Return the entry for a tag, or None."""
        return self._entries.get(tag)

    def require(self, tag: str, position: int | None = None) -> RegistryEntry:
        """Return the entry for a tag, raising UnknownRegistryTypeError if absent."""
        entry = self._entries.get(tag)
        if entry is None:
            raise UnknownRegistryTypeError(tag, position=position)
        return entry

    def tags(self) -> list[str]:
        return list(self._entries)

    def tags_for_position(self, position: int) -> list[str]:
        """Return the tags bound to a gate position."""
        return [e.tag for e in self._entries.values() if position in e.positions]

    def validate(self, tag: str, value: str) -> ValidationOutcome:
        """Validate a value against a tag's rule.

        Raises UnknownRegistryTypeError for tags not in the table.
        """
        return self.require(tag).validate(value)

    # -- Derivation -----------------------------------------------------------

    def with_entry(self, entry: RegistryEntry) -> RegistryTable:
        """Return a new table with *entry* added or replacing the same tag."""
        entries = {e.tag: e for e in self._entries.values()}
        entries[entry.tag] = entry
        return RegistryTable(entries.values())

    def without(self, tag: str) -> RegistryTable:
        """Return a new table without *tag*."""
        return RegistryTable(e for e in self._entries.values() if e.tag != tag)


DEFAULT_REGISTRY = RegistryTable(
    [
        RegistryEntry("ISBN", validators.validate_isbn, frozenset({1}),
                      "International Standard Book Number (10 or 13 digit)"),
        RegistryEntry("ISRC", validators.validate_isrc, frozenset({2}),
                      "International Standard Recording Code"),
        RegistryEntry("EIDR", validators.validate_eidr, frozenset({3}),
                      "Entertainment Identifier Registry DOI"),
        RegistryEntry("ISSN", validators.validate_issn, frozenset({4}),
                      "International Standard Serial Number"),
        RegistryEntry("DOI", validators.validate_doi, frozenset({4}),
                      "Digital Object Identifier"),
        RegistryEntry("ART-ID", validators.validate_art_id, frozenset({5}),
                      "Artwork identifier with mod-11 check digit"),
        RegistryEntry("APN", validators.validate_apn, frozenset({8}),
                      "Assessor's Parcel Number"),
        RegistryEntry("ISO3166", validators.validate_iso3166, frozenset({9}),
                      "ISO 3166-1 alpha-2 country code"),
        RegistryEntry("FCC", validators.validate_fcc, frozenset({9}),
                      "FCC Registration Number"),
    ]
)
