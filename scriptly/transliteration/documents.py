"""Transliteration of DOCX content through the converter registry."""

from __future__ import annotations

import io
import logging
from typing import Callable, Iterable

from docx import Document

from .registry import ConversionId, UnknownConverterError, get_converter

logger = logging.getLogger(__name__)


def transliterate_docx_bytes(docx_bytes: bytes, conversion_id: ConversionId | str) -> bytes:
    """Transliterate paragraphs, tables and headers/footers in DOCX bytes."""
    converter = get_converter(conversion_id)
    if converter is None:
        raise UnknownConverterError(conversion_id)

    doc = Document(io.BytesIO(docx_bytes))
    convert = converter.convert

    _transliterate_paragraphs(doc.paragraphs, convert)
    _transliterate_tables(doc.tables, convert)

    for section in doc.sections:
        for header_footer in (
            section.header,
            section.first_page_header,
            section.even_page_header,
            section.footer,
            section.first_page_footer,
            section.even_page_footer,
        ):
            _transliterate_paragraphs(header_footer.paragraphs, convert)
            _transliterate_tables(header_footer.tables, convert)

    output = io.BytesIO()
    doc.save(output)
    logger.info("Transliterated DOCX with %s (%d bytes)", converter.id, len(docx_bytes))
    return output.getvalue()


def _transliterate_paragraphs(paragraphs: Iterable, convert: Callable[[str], str]) -> None:
    for paragraph in paragraphs:
        if paragraph.runs:
            for run in paragraph.runs:
                if run.text:
                    run.text = convert(run.text)
            continue
        if paragraph.text:
            paragraph.text = convert(paragraph.text)


def _transliterate_tables(tables: Iterable, convert: Callable[[str], str]) -> None:
    for table in tables:
        for row in table.rows:
            for cell in row.cells:
                _transliterate_paragraphs(cell.paragraphs, convert)
                _transliterate_tables(cell.tables, convert)
