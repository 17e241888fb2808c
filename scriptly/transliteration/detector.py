"""Script detection used to pre-select a conversion direction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_CYRILLIC_RANGE = re.compile(r"[\u0400-\u04FF]")
_LATIN_RANGE = re.compile(r"[A-Za-z]")

DOMINANCE_THRESHOLD = 90


class ScriptType(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class Suggestion(str, Enum):
    TO_CYRILLIC = "toCyrillic"
    TO_LATIN = "toLatin"
    NONE = "none"


@dataclass(frozen=True)
class ScriptAnalysis:
    type: ScriptType
    latin_count: int = 0
    cyrillic_count: int = 0
    total_letters: int = 0
    latin_percentage: float = 0.0
    cyrillic_percentage: float = 0.0


def analyze_script(text: str) -> ScriptAnalysis:
    """Count Latin and Cyrillic letters and classify the predominant script."""

    latin_count = 0
    cyrillic_count = 0
    for char in text:
        if _LATIN_RANGE.match(char):
            latin_count += 1
        elif _CYRILLIC_RANGE.match(char):
            cyrillic_count += 1

    total = latin_count + cyrillic_count
    if total == 0:
        return ScriptAnalysis(type=ScriptType.UNKNOWN)

    latin_percentage = latin_count / total * 100
    cyrillic_percentage = cyrillic_count / total * 100

    if latin_count * 100 >= DOMINANCE_THRESHOLD * total:
        script = ScriptType.LATIN
    elif cyrillic_count * 100 >= DOMINANCE_THRESHOLD * total:
        script = ScriptType.CYRILLIC
    else:
        script = ScriptType.MIXED

    return ScriptAnalysis(
        type=script,
        latin_count=latin_count,
        cyrillic_count=cyrillic_count,
        total_letters=total,
        latin_percentage=latin_percentage,
        cyrillic_percentage=cyrillic_percentage,
    )


def contains_cyrillic(text: str) -> bool:
    return _CYRILLIC_RANGE.search(text) is not None


def contains_latin(text: str) -> bool:
    return _LATIN_RANGE.search(text) is not None


def suggest_conversion(text: str) -> Suggestion:
    """Suggest a direction: Latin text goes to Cyrillic and vice versa."""

    script = analyze_script(text).type
    if script is ScriptType.LATIN:
        return Suggestion.TO_CYRILLIC
    if script is ScriptType.CYRILLIC:
        return Suggestion.TO_LATIN
    return Suggestion.NONE
