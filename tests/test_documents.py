from __future__ import annotations

import io

import docx
import pytest

from scriptly.transliteration.documents import transliterate_docx_bytes
from scriptly.transliteration.registry import ConversionId, UnknownConverterError


def _build_docx(docx):
    document = docx.Document()
    document.add_paragraph("Shahar bo'limi")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "o‘quvchi"
    table.rows[0].cells[1].text = "ng test"
    source = io.BytesIO()
    document.save(source)
    return source.getvalue()


def test_transliterate_docx_bytes_preserves_structure():
    converted = transliterate_docx_bytes(_build_docx(docx), ConversionId.UZ_LATN_TO_UZ_CYRL)
    converted_doc = docx.Document(io.BytesIO(converted))

    assert len(converted_doc.paragraphs) == 1
    assert len(converted_doc.tables) == 1
    assert converted_doc.paragraphs[0].text == "Шаҳар бўлими"
    assert converted_doc.tables[0].rows[0].cells[0].text == "ўқувчи"
    assert converted_doc.tables[0].rows[0].cells[1].text == "нг тест"


def test_transliterate_docx_bytes_back_to_latin():
    cyrillic = transliterate_docx_bytes(_build_docx(docx), "uz-latn-to-uz-cyrl")
    latin = transliterate_docx_bytes(cyrillic, "uz-cyrl-to-uz-latn")

    assert docx.Document(io.BytesIO(latin)).paragraphs[0].text == "SHahar bo'limi"


def test_transliterate_docx_bytes_unknown_converter():
    with pytest.raises(UnknownConverterError):
        transliterate_docx_bytes(b"not a docx", "not-a-real-id")
