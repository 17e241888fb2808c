from __future__ import annotations

from collections import Counter

import pytest

from scriptly.transliteration.index import build_index, build_indexes
from scriptly.transliteration.mappings import (
    LATIN_CYRILLIC_MAP,
    MAPPING_TABLES,
    UZBEK_CYRILLIC_TO_LATIN_EXTRAS,
    UZBEK_LATIN_CYRILLIC_MAP,
    CharacterMapping,
    get_mapping_table,
    render_chart,
)


@pytest.mark.parametrize("table", [LATIN_CYRILLIC_MAP, UZBEK_LATIN_CYRILLIC_MAP])
def test_tables_have_unique_latin_tokens(table):
    duplicates = [token for token, count in Counter(m.latin for m in table).items() if count > 1]
    assert duplicates == []


def test_build_index_orders_keys_longest_first():
    forward, _ = build_indexes(LATIN_CYRILLIC_MAP)
    lengths = [len(key) for key in forward.keys]
    assert lengths == sorted(lengths, reverse=True)
    assert forward.keys[0] == "shch"
    assert forward.lengths == (4, 2, 1)


def test_build_index_keeps_first_registration_and_lowercases():
    index = build_index([("A", "1"), ("a", "2"), ("b", "3")])
    assert index.lookup("a") == "1"
    assert "A" not in index
    assert len(index) == 2


def test_generic_reverse_index_skips_multi_letter_targets():
    _, reverse = build_indexes(LATIN_CYRILLIC_MAP)
    assert "кс" not in reverse
    assert reverse.lookup("в") == "v"
    assert reverse.lookup("х") == "kh"


def test_uzbek_reverse_index_canonical_entries_beat_extras():
    _, reverse = build_indexes(UZBEK_LATIN_CYRILLIC_MAP, UZBEK_CYRILLIC_TO_LATIN_EXTRAS)
    assert reverse.lookup("е") == "e"
    assert reverse.lookup("ъ") == "'"
    assert reverse.lookup("ё") == "yo"
    assert reverse.lookup("щ") == "shch"
    assert reverse.lookup("ь") == ""
    assert "нг" not in reverse


def test_uzbek_forward_index_ignores_extras():
    forward, _ = build_indexes(UZBEK_LATIN_CYRILLIC_MAP, UZBEK_CYRILLIC_TO_LATIN_EXTRAS)
    assert "ye" not in forward
    assert forward.lookup("ng") == "нг"


def test_index_table_is_read_only():
    index = build_index([("a", "b")])
    with pytest.raises(TypeError):
        index.table["c"] = "d"  # type: ignore[index]


def test_mapping_tables_by_alphabet():
    assert set(MAPPING_TABLES) == {"generic", "uzbek"}
    assert get_mapping_table("uzbek") is UZBEK_LATIN_CYRILLIC_MAP
    assert CharacterMapping("shch", "щ") in get_mapping_table("generic")
    with pytest.raises(KeyError):
        get_mapping_table("klingon")


def test_render_chart_lists_every_mapping():
    chart = render_chart("uzbek").splitlines()
    assert len(chart) == len(UZBEK_LATIN_CYRILLIC_MAP)
    assert chart[0] == "ch → ч"
