"""Telegram handlers exposing transliteration and translation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, InputFile, Update
from telegram.ext import ContextTypes

from ..config.settings import settings
from ..translation.languages import (
    LANGUAGES,
    Language,
    is_translation_type,
    is_uzbek_script_pair,
    parse_translation_action,
    translation_action,
    translation_menu_items,
)
from ..translation.translator import translate
from ..transliteration.detector import Suggestion, suggest_conversion
from ..transliteration.documents import transliterate_docx_bytes
from ..transliteration.mappings import MAPPING_TABLES, render_chart
from ..transliteration.registry import (
    ConversionId,
    Converter,
    convert,
    get_all_converters,
    is_conversion_type,
)
from .auth import require_auth
from .selection import selection_store

logger = logging.getLogger(__name__)

CONVERT_PREFIX = "conv"
TRANSLATE_PREFIX = "tr"
LANG_PAIR_KEY = "translation_pair"
DEFAULT_LANG_PAIR = (Language.EN, Language.RU)
MAX_MESSAGE_LENGTH = 4096

_SUGGESTED_DIRECTION = {
    ConversionId.LATIN_TO_CYRILLIC.value: Suggestion.TO_CYRILLIC,
    ConversionId.UZ_LATN_TO_UZ_CYRL.value: Suggestion.TO_CYRILLIC,
    ConversionId.CYRILLIC_TO_LATIN.value: Suggestion.TO_LATIN,
    ConversionId.UZ_CYRL_TO_UZ_LATN.value: Suggestion.TO_LATIN,
}

_SELECTION_ERRORS = {
    "not_found": "This text has expired. Please send it again.",
    "forbidden": "These buttons belong to another user.",
}


@require_auth
async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not update.message:
        return

    text = (
        "Hi! Send me any text and pick how to convert it: Latin ↔ Cyrillic for Russian"
        " or Uzbek, or a translation. Send a .docx file to transliterate a whole document."
        " /help lists everything I can do."
    )
    await update.message.reply_text(text)


@require_auth
async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not update.message:
        return

    lines = ["Conversions:"]
    lines.extend(f"• {converter.name} ({converter.id})" for converter in get_all_converters())
    lines.append("")
    lines.append("/chart generic|uzbek shows a character chart.")
    lines.append("")
    lines.append("Translations:")
    lines.extend(f"• {title}" for _, title in translation_menu_items())
    lines.append("/translate <from> <to> sets the translation pair, e.g. /translate en ru.")
    lines.append("Send a .docx with a conversion id as caption to pick the direction.")
    await update.message.reply_text("\n".join(lines))


@require_auth
async def chart_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not update.message:
        return

    alphabet = context.args[0].lower() if context.args else "generic"
    if alphabet not in MAPPING_TABLES:
        await update.message.reply_text(f"Unknown alphabet. Choose one of: {', '.join(MAPPING_TABLES)}")
        return
    await update.message.reply_text(render_chart(alphabet))


@require_auth
async def translate_pair_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not update.message:
        return

    codes = ", ".join(language.value for language in LANGUAGES)
    if not context.args or len(context.args) != 2:
        source, target = get_translation_pair(context.chat_data)
        await update.message.reply_text(
            f"Current pair: {source.value} → {target.value}. Usage: /translate <from> <to> ({codes})"
        )
        return

    try:
        source, target = Language(context.args[0].lower()), Language(context.args[1].lower())
    except ValueError:
        await update.message.reply_text(f"Unknown language. Available: {codes}")
        return
    if source is target or is_uzbek_script_pair(source, target):
        await update.message.reply_text("Pick two different languages (use transliteration for Uzbek scripts).")
        return

    context.chat_data[LANG_PAIR_KEY] = (source.value, target.value)
    await update.message.reply_text(f"Translation pair set: {source.value} → {target.value}")


@require_auth
async def text_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    if not message or not message.text:
        return

    token = selection_store.create(update.effective_user.id, message.text)
    suggestion = suggest_conversion(message.text)
    keyboard = build_selection_keyboard(token, suggestion, get_translation_pair(context.chat_data))
    await message.reply_text("How should I convert this text?", reply_markup=keyboard)


@require_auth
async def selection_callback_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    if not query or not query.data:
        return
    await query.answer()

    message = update.effective_message
    if not message:
        return

    parts = query.data.split(":")
    selection, error = selection_store.get(parts[1] if len(parts) > 1 else "", update.effective_user.id)
    if selection is None:
        await message.reply_text(_SELECTION_ERRORS[error])
        return

    action = parts[2] if len(parts) == 3 else ""
    if parts[0] == CONVERT_PREFIX and action:
        reply = convert(selection.text, action)
    elif parts[0] == TRANSLATE_PREFIX and is_translation_type(action):
        pair = parse_translation_action(action)
        if pair is None:
            logger.warning("Unknown translation action: %s", action)
            return
        result = await translate(selection.text, *pair)
        if result.success:
            reply = result.translated_text or ""
        else:
            reply = f"Translation failed: {result.error}"
    else:
        logger.warning("Unexpected callback data: %s", query.data)
        return

    for chunk in split_message(reply or "(empty)"):
        await message.reply_text(chunk)


@require_auth
async def document_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not update.message:
        return

    document = update.message.document
    if not document or not document.file_name or not document.file_name.lower().endswith(".docx"):
        await update.message.reply_text("I can only transliterate .docx files.")
        return

    caption = (update.message.caption or "").strip()
    conversion_id = caption if is_conversion_type(caption) else settings.default_docx_conversion

    file = await document.get_file()
    payload = bytes(await file.download_as_bytearray())
    logger.info("Downloaded %s (%d bytes), converting with %s", document.file_name, len(payload), conversion_id)

    converted = await asyncio.to_thread(transliterate_docx_bytes, payload, conversion_id)
    output_name = f"{Path(document.file_name).stem}_{conversion_id}.docx"
    await update.message.reply_document(
        InputFile(converted, filename=output_name),
        caption=f"✅ {document.file_name} → {output_name}",
    )


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Cut ``text`` into pieces Telegram accepts, breaking at newlines when possible."""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit + 1)
        if cut <= 0:
            chunks.append(text[:limit])
            text = text[limit:]
        else:
            chunks.append(text[:cut])
            text = text[cut + 1:]
    if text or not chunks:
        chunks.append(text)
    return chunks


def get_translation_pair(chat_data: MutableMapping[str, Any] | None) -> tuple[Language, Language]:
    stored = (chat_data or {}).get(LANG_PAIR_KEY)
    if not stored:
        return DEFAULT_LANG_PAIR
    return Language(stored[0]), Language(stored[1])


def order_converters(suggestion: Suggestion) -> list[Converter]:
    """Converters matching the suggested direction first, registration order kept."""
    converters = get_all_converters()
    return sorted(
        converters,
        key=lambda converter: _SUGGESTED_DIRECTION.get(converter.id) is not suggestion,
    )


def build_selection_keyboard(
    token: str,
    suggestion: Suggestion,
    translation_pair: tuple[Language, Language] = DEFAULT_LANG_PAIR,
) -> InlineKeyboardMarkup:
    rows = []
    for converter in order_converters(suggestion):
        marker = "⭐ " if _SUGGESTED_DIRECTION.get(converter.id) is suggestion else ""
        rows.append(
            [
                InlineKeyboardButton(
                    f"{marker}{converter.name}",
                    callback_data=f"{CONVERT_PREFIX}:{token}:{converter.id}",
                )
            ]
        )

    source, target = translation_pair
    rows.append(
        [
            InlineKeyboardButton(
                f"🌐 {LANGUAGES[source].name} → {LANGUAGES[target].name}",
                callback_data=f"{TRANSLATE_PREFIX}:{token}:{translation_action(source, target)}",
            )
        ]
    )
    return InlineKeyboardMarkup(rows)
