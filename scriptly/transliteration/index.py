"""Lookup indexes derived from the static mapping tables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from .mappings import CharacterMapping


@dataclass(frozen=True)
class LookupIndex:
    """Token association for one direction plus its keys, longest first."""

    table: Mapping[str, str]
    keys: tuple[str, ...]
    lengths: tuple[int, ...]

    def lookup(self, key: str) -> str:
        return self.table[key]

    def __contains__(self, key: object) -> bool:
        return key in self.table

    def __len__(self) -> int:
        return len(self.table)


def build_index(pairs: Iterable[tuple[str, str]]) -> LookupIndex:
    """Build an index from ``(source, target)`` pairs.

    Keys are stored lower-cased. When two pairs share a key the first one
    is kept and later ones are ignored.
    """

    table: dict[str, str] = {}
    for source, target in pairs:
        table.setdefault(source.lower(), target)

    # sorted() is stable, so equal-length keys keep table order
    keys = tuple(sorted(table, key=len, reverse=True))
    lengths = tuple(sorted({len(key) for key in keys if key}, reverse=True))
    return LookupIndex(table=MappingProxyType(table), keys=keys, lengths=lengths)


def build_indexes(
    mappings: Iterable[CharacterMapping],
    extras: Iterable[CharacterMapping] = (),
) -> tuple[LookupIndex, LookupIndex]:
    """Return ``(latin_to_cyrillic, cyrillic_to_latin)`` indexes for a table.

    The reverse index only takes canonical entries whose Cyrillic side is a
    single letter: sequences such as ``кс`` or ``нг`` are ordinary letter runs
    in Cyrillic text and are transliterated letter by letter. ``extras`` fill
    reverse keys the canonical table left unclaimed.
    """

    mappings = tuple(mappings)
    forward = build_index((m.latin, m.cyrillic) for m in mappings)

    reverse_pairs = [(m.cyrillic, m.latin) for m in mappings if len(m.cyrillic) == 1]
    reverse_pairs.extend((m.cyrillic, m.latin) for m in extras)
    reverse = build_index(reverse_pairs)

    return forward, reverse
