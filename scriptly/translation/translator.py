"""Machine translation through free public providers with fallback."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx

from ..config.settings import settings
from .languages import API_LANG_CODES, Language, is_uzbek_script_pair

logger = logging.getLogger(__name__)

GOOGLE_URL = "https://translate.googleapis.com/translate_a/single"
MYMEMORY_URL = "https://api.mymemory.translated.net/get"
BATCH_DELAY_SECONDS = 0.1


class TranslationError(RuntimeError):
    """Signals that a translation provider returned no usable result."""


@dataclass(frozen=True)
class TranslationResult:
    success: bool
    translated_text: str | None = None
    error: str | None = None
    source: str | None = None


Provider = Callable[[httpx.AsyncClient, str, str, str], Awaitable[str]]


async def _google(client: httpx.AsyncClient, text: str, source: str, target: str) -> str:
    response = await client.get(
        GOOGLE_URL,
        params={"client": "gtx", "sl": source, "tl": target, "dt": "t", "q": text},
    )
    response.raise_for_status()
    data = response.json()

    # [[["translated", "original", null, null, 10], ...], null, "en", ...]
    if isinstance(data, list) and data and isinstance(data[0], list):
        parts = [part[0] for part in data[0] if isinstance(part, list) and part and part[0]]
        if parts:
            return "".join(parts)
    raise TranslationError("Unexpected response format")


async def _mymemory(client: httpx.AsyncClient, text: str, source: str, target: str) -> str:
    response = await client.get(MYMEMORY_URL, params={"q": text, "langpair": f"{source}|{target}"})
    response.raise_for_status()
    data = response.json()

    if data.get("responseStatus") != 200:
        raise TranslationError(f"API error: status {data.get('responseStatus')}")
    translated = data["responseData"]["translatedText"]
    if "MYMEMORY WARNING" in translated:
        raise TranslationError("Daily translation limit exceeded")
    return translated


async def _libretranslate(client: httpx.AsyncClient, text: str, source: str, target: str) -> str:
    for base_url in settings.libretranslate_mirrors:
        try:
            response = await client.post(
                f"{base_url.rstrip('/')}/translate",
                json={"q": text, "source": source, "target": target, "format": "text"},
            )
            response.raise_for_status()
            translated = response.json().get("translatedText")
        except (httpx.HTTPError, ValueError) as exc:
            logger.debug("LibreTranslate mirror %s failed: %s", base_url, exc)
            continue
        if translated:
            return translated
    raise TranslationError("All LibreTranslate instances unavailable")


PROVIDERS: list[tuple[str, Provider]] = [
    ("Google", _google),
    ("MyMemory", _mymemory),
    ("LibreTranslate", _libretranslate),
]


async def _run_provider(
    name: str,
    provider: Provider,
    client: httpx.AsyncClient,
    text: str,
    source: Language,
    target: Language,
) -> TranslationResult:
    try:
        translated = await provider(client, text, API_LANG_CODES[source], API_LANG_CODES[target])
    except (TranslationError, httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.warning("%s translation failed (%s)", name, exc)
        return TranslationResult(success=False, error=str(exc) or type(exc).__name__)
    return TranslationResult(success=True, translated_text=translated, source=name)


async def translate(
    text: str,
    source: Language,
    target: Language,
    client: httpx.AsyncClient | None = None,
) -> TranslationResult:
    """Translate ``text``, trying each provider in turn until one succeeds."""

    if not text or not text.strip():
        return TranslationResult(success=False, error="Empty text")
    if source is target:
        return TranslationResult(success=True, translated_text=text)
    if is_uzbek_script_pair(source, target):
        return TranslationResult(
            success=False, error="Use transliteration for Uzbek script conversion"
        )

    if client is None:
        async with httpx.AsyncClient(timeout=settings.translation_timeout) as owned_client:
            return await _translate_with(owned_client, text, source, target)
    return await _translate_with(client, text, source, target)


async def _translate_with(
    client: httpx.AsyncClient, text: str, source: Language, target: Language
) -> TranslationResult:
    for name, provider in PROVIDERS:
        result = await _run_provider(name, provider, client, text, source, target)
        if result.success:
            logger.info("Translated %d chars %s -> %s via %s", len(text), source.value, target.value, name)
            return result

    return TranslationResult(
        success=False,
        error="All translation services failed. Please try again later.",
    )


async def translate_batch(
    texts: list[str],
    source: Language,
    target: Language,
    client: httpx.AsyncClient | None = None,
    delay: float = BATCH_DELAY_SECONDS,
) -> list[TranslationResult]:
    """Translate texts one by one, pausing between requests to avoid rate limits."""

    results = []
    for position, text in enumerate(texts):
        if position and delay:
            await asyncio.sleep(delay)
        results.append(await translate(text, source, target, client=client))
    return results
