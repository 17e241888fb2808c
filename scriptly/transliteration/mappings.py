"""Static Latin <-> Cyrillic character tables for the supported alphabets."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple


class CharacterMapping(NamedTuple):
    """One Latin token and its Cyrillic counterpart."""

    latin: str
    cyrillic: str


# Generic phonetic scheme commonly used for Russian.
# Longer tokens are listed first only for readability, the index sorts by length.
LATIN_CYRILLIC_MAP: tuple[CharacterMapping, ...] = (
    CharacterMapping("shch", "щ"),
    CharacterMapping("yo", "ё"),
    CharacterMapping("zh", "ж"),
    CharacterMapping("kh", "х"),
    CharacterMapping("ts", "ц"),
    CharacterMapping("ch", "ч"),
    CharacterMapping("sh", "ш"),
    CharacterMapping("yu", "ю"),
    CharacterMapping("ya", "я"),
    CharacterMapping("ye", "э"),
    CharacterMapping("y'", "ы"),
    CharacterMapping('"', "ъ"),
    CharacterMapping("'", "ь"),
    CharacterMapping("a", "а"),
    CharacterMapping("b", "б"),
    CharacterMapping("v", "в"),
    CharacterMapping("g", "г"),
    CharacterMapping("d", "д"),
    CharacterMapping("e", "е"),
    CharacterMapping("z", "з"),
    CharacterMapping("i", "и"),
    CharacterMapping("y", "й"),
    CharacterMapping("k", "к"),
    CharacterMapping("l", "л"),
    CharacterMapping("m", "м"),
    CharacterMapping("n", "н"),
    CharacterMapping("o", "о"),
    CharacterMapping("p", "п"),
    CharacterMapping("r", "р"),
    CharacterMapping("s", "с"),
    CharacterMapping("t", "т"),
    CharacterMapping("u", "у"),
    CharacterMapping("f", "ф"),
    CharacterMapping("h", "х"),
    CharacterMapping("c", "ц"),
    CharacterMapping("w", "в"),
    CharacterMapping("x", "кс"),
    CharacterMapping("q", "к"),
)

# Official Uzbek Latin alphabet (1995) against the Uzbek Cyrillic alphabet.
UZBEK_LATIN_CYRILLIC_MAP: tuple[CharacterMapping, ...] = (
    CharacterMapping("ch", "ч"),
    CharacterMapping("sh", "ш"),
    CharacterMapping("g'", "ғ"),
    CharacterMapping("o'", "ў"),
    CharacterMapping("ng", "нг"),
    CharacterMapping("'", "ъ"),  # tutuq belgisi
    CharacterMapping("a", "а"),
    CharacterMapping("b", "б"),
    CharacterMapping("d", "д"),
    CharacterMapping("e", "е"),
    CharacterMapping("f", "ф"),
    CharacterMapping("g", "г"),
    CharacterMapping("h", "ҳ"),
    CharacterMapping("i", "и"),
    CharacterMapping("j", "ж"),
    CharacterMapping("k", "к"),
    CharacterMapping("l", "л"),
    CharacterMapping("m", "м"),
    CharacterMapping("n", "н"),
    CharacterMapping("o", "о"),
    CharacterMapping("p", "п"),
    CharacterMapping("q", "қ"),
    CharacterMapping("r", "р"),
    CharacterMapping("s", "с"),
    CharacterMapping("t", "т"),
    CharacterMapping("u", "у"),
    CharacterMapping("v", "в"),
    CharacterMapping("x", "х"),
    CharacterMapping("y", "й"),
    CharacterMapping("z", "з"),
)

# Cyrillic letters without a canonical Latin partner. Only consulted for the
# Cyrillic -> Latin index, and only where the canonical table left a gap.
UZBEK_CYRILLIC_TO_LATIN_EXTRAS: tuple[CharacterMapping, ...] = (
    CharacterMapping("ye", "е"),
    CharacterMapping("yo", "ё"),
    CharacterMapping("yu", "ю"),
    CharacterMapping("ya", "я"),
    CharacterMapping("ts", "ц"),
    CharacterMapping("shch", "щ"),
    CharacterMapping("", "ь"),
    CharacterMapping("", "ъ"),
)

MAPPING_TABLES: Mapping[str, tuple[CharacterMapping, ...]] = MappingProxyType(
    {
        "generic": LATIN_CYRILLIC_MAP,
        "uzbek": UZBEK_LATIN_CYRILLIC_MAP,
    }
)


def get_mapping_table(alphabet: str) -> tuple[CharacterMapping, ...]:
    """Return the display table for ``alphabet`` (``generic`` or ``uzbek``)."""

    try:
        return MAPPING_TABLES[alphabet]
    except KeyError:
        raise KeyError(f"Unknown alphabet: {alphabet}") from None


def render_chart(alphabet: str) -> str:
    """Render a two-column character chart, one mapping per line."""

    rows = [f"{mapping.latin} → {mapping.cyrillic}" for mapping in get_mapping_table(alphabet)]
    return "\n".join(rows)
