"""Greedy longest-match transliteration with per-token case preservation."""

from __future__ import annotations

import re

from .index import LookupIndex

# Only o' and g' take an apostrophe, elsewhere quotes are left alone.
_APOSTROPHE_PATTERN = re.compile(r"(?<=[oOgG])[ʻʼ’‘`´ʹʽ‛]")


def _is_upper(char: str) -> bool:
    return char != char.lower() and char == char.upper()


def match_case(chunk: str, target: str) -> str:
    """Shape ``target`` after the case of the source ``chunk`` it replaces."""

    if not chunk or not target:
        return target
    if chunk != chunk.lower() and chunk == chunk.upper():
        return target.upper()
    if _is_upper(chunk[0]):
        return target[0].upper() + target[1:]
    return target


def transliterate(text: str, index: LookupIndex) -> str:
    """Transliterate ``text`` using ``index``.

    At each position the longest key matching the lower-cased input wins and
    its target is emitted with the matched chunk's case. Characters with no
    matching key are copied through unchanged.
    """

    output: list[str] = []
    i = 0
    size = len(text)

    while i < size:
        for length in index.lengths:
            if i + length > size:
                continue
            chunk = text[i:i + length]
            key = chunk.lower()
            if key in index.table:
                output.append(match_case(chunk, index.table[key]))
                i += length
                break
        else:
            output.append(text[i])
            i += 1

    return "".join(output)


def normalize_apostrophes(text: str) -> str:
    """Fold typographic apostrophes after ``o``/``g`` (``o‘``, ``gʻ``) into ASCII ``'``."""

    return _APOSTROPHE_PATTERN.sub("'", text)


class Transducer:
    """A transliteration direction bound to its lookup index."""

    def __init__(self, index: LookupIndex, *, fold_apostrophes: bool = False) -> None:
        self.index = index
        self.fold_apostrophes = fold_apostrophes

    def __call__(self, text: str) -> str:
        if not text:
            return ""
        if self.fold_apostrophes:
            text = normalize_apostrophes(text)
        return transliterate(text, self.index)

    def __repr__(self) -> str:
        return f"Transducer(keys={len(self.index)}, fold_apostrophes={self.fold_apostrophes})"
