"""Languages offered for machine translation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    EN = "en"
    RU = "ru"
    UZ_LATN = "uz-latn"
    UZ_CYRL = "uz-cyrl"


@dataclass(frozen=True)
class LanguageInfo:
    code: Language
    name: str
    native_name: str
    script: str


LANGUAGES: dict[Language, LanguageInfo] = {
    Language.EN: LanguageInfo(Language.EN, "English", "English", "latin"),
    Language.RU: LanguageInfo(Language.RU, "Russian", "Русский", "cyrillic"),
    Language.UZ_LATN: LanguageInfo(Language.UZ_LATN, "Uzbek (Latin)", "O'zbek", "latin"),
    Language.UZ_CYRL: LanguageInfo(Language.UZ_CYRL, "Uzbek (Cyrillic)", "Ўзбек", "cyrillic"),
}

# Providers know a single Uzbek code, script is handled by transliteration.
API_LANG_CODES: dict[Language, str] = {
    Language.EN: "en",
    Language.RU: "ru",
    Language.UZ_LATN: "uz",
    Language.UZ_CYRL: "uz",
}

_TRANSLATION_ACTION = re.compile(r"^translate-(.+)-to-(.+)$")


def is_uzbek_script_pair(source: Language, target: Language) -> bool:
    return {source, target} == {Language.UZ_LATN, Language.UZ_CYRL}


def translation_action(source: Language, target: Language) -> str:
    return f"translate-{source.value}-to-{target.value}"


def translation_menu_items() -> list[tuple[str, str]]:
    """Return ``(action, title)`` for every supported language pair."""

    items = []
    for source in LANGUAGES.values():
        for target in LANGUAGES.values():
            if source.code is target.code or is_uzbek_script_pair(source.code, target.code):
                continue
            items.append(
                (translation_action(source.code, target.code), f"{source.name} → {target.name}")
            )
    return items


def is_translation_type(action: str) -> bool:
    return action.startswith("translate-")


def parse_translation_action(action: str) -> tuple[Language, Language] | None:
    match = _TRANSLATION_ACTION.match(action)
    if not match:
        return None
    try:
        return Language(match.group(1)), Language(match.group(2))
    except ValueError:
        return None
