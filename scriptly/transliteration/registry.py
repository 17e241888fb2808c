"""Registry of the available transliteration converters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config.settings import settings
from .index import build_indexes
from .mappings import (
    LATIN_CYRILLIC_MAP,
    UZBEK_CYRILLIC_TO_LATIN_EXTRAS,
    UZBEK_LATIN_CYRILLIC_MAP,
)
from .transducer import Transducer

logger = logging.getLogger(__name__)


class ConversionId(str, Enum):
    LATIN_TO_CYRILLIC = "latin-to-cyrillic"
    CYRILLIC_TO_LATIN = "cyrillic-to-latin"
    UZ_LATN_TO_UZ_CYRL = "uz-latn-to-uz-cyrl"
    UZ_CYRL_TO_UZ_LATN = "uz-cyrl-to-uz-latn"


class UnknownConverterError(LookupError):
    """Signals that no converter is registered under the requested id."""

    def __init__(self, conversion_id: object) -> None:
        self.conversion_id = conversion_id
        super().__init__(f"Unknown converter: {_key(conversion_id)}")


UnknownConverter = UnknownConverterError


@dataclass(frozen=True)
class Converter:
    id: str
    name: str
    convert: Callable[[str], str]


def _key(conversion_id: object) -> str:
    if isinstance(conversion_id, ConversionId):
        return conversion_id.value
    return str(conversion_id)


class ConverterRegistry:
    """Maps conversion ids to converters.

    Registering an id twice replaces the earlier converter. Listing keeps the
    order in which ids were first registered.
    """

    def __init__(self) -> None:
        self._converters: dict[str, Converter] = {}

    def register(self, converter: Converter) -> None:
        key = _key(converter.id)
        if key in self._converters:
            logger.debug("Overriding converter %s", key)
        self._converters[key] = converter

    def resolve(self, conversion_id: ConversionId | str) -> Converter | None:
        return self._converters.get(_key(conversion_id))

    def convert(self, text: str, conversion_id: ConversionId | str) -> str:
        converter = self.resolve(conversion_id)
        if converter is None:
            raise UnknownConverterError(conversion_id)
        logger.debug("Converting %d chars with %s", len(text), converter.id)
        return converter.convert(text)

    def list_all(self) -> list[Converter]:
        return list(self._converters.values())

    def is_conversion_type(self, action: str) -> bool:
        return _key(action) in self._converters

    def __contains__(self, conversion_id: object) -> bool:
        return _key(conversion_id) in self._converters

    def __len__(self) -> int:
        return len(self._converters)


_generic_forward, _generic_reverse = build_indexes(LATIN_CYRILLIC_MAP)
_uzbek_forward, _uzbek_reverse = build_indexes(
    UZBEK_LATIN_CYRILLIC_MAP, UZBEK_CYRILLIC_TO_LATIN_EXTRAS
)

latin_to_cyrillic = Transducer(_generic_forward)
cyrillic_to_latin = Transducer(_generic_reverse)
uzbek_latin_to_cyrillic = Transducer(
    _uzbek_forward, fold_apostrophes=settings.normalize_apostrophes
)
uzbek_cyrillic_to_latin = Transducer(_uzbek_reverse)


def _build_default_registry() -> ConverterRegistry:
    default = ConverterRegistry()
    default.register(
        Converter(ConversionId.LATIN_TO_CYRILLIC.value, "Latin → Cyrillic (Russian)", latin_to_cyrillic)
    )
    default.register(
        Converter(ConversionId.CYRILLIC_TO_LATIN.value, "Cyrillic → Latin (Russian)", cyrillic_to_latin)
    )
    default.register(
        Converter(ConversionId.UZ_LATN_TO_UZ_CYRL.value, "Uzbek Latin → Cyrillic", uzbek_latin_to_cyrillic)
    )
    default.register(
        Converter(ConversionId.UZ_CYRL_TO_UZ_LATN.value, "Uzbek Cyrillic → Latin", uzbek_cyrillic_to_latin)
    )
    return default


registry = _build_default_registry()


def register_converter(converter: Converter) -> None:
    registry.register(converter)


def get_converter(conversion_id: ConversionId | str) -> Converter | None:
    return registry.resolve(conversion_id)


def get_all_converters() -> list[Converter]:
    return registry.list_all()


def is_conversion_type(action: str) -> bool:
    return registry.is_conversion_type(action)


def convert(text: str, conversion_id: ConversionId | str) -> str:
    """Transliterate ``text`` with the converter registered as ``conversion_id``.

    Raises:
        UnknownConverterError: if nothing is registered under ``conversion_id``.
    """

    return registry.convert(text, conversion_id)
