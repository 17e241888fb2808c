from __future__ import annotations

import asyncio

import httpx
import pytest

from scriptly.translation.languages import (
    Language,
    is_translation_type,
    parse_translation_action,
    translation_menu_items,
)
from scriptly.translation.translator import translate, translate_batch


def _run(handler, coro_factory):
    async def runner():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await coro_factory(client)

    return asyncio.run(runner())


@pytest.fixture(autouse=True)
def single_mirror(monkeypatch):
    monkeypatch.setattr(
        "scriptly.translation.translator.settings.libretranslate_mirrors",
        ["https://lt.example"],
    )


def test_google_is_tried_first():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.host)
        assert request.url.params["sl"] == "en"
        assert request.url.params["tl"] == "ru"
        return httpx.Response(200, json=[[["Привет, ", "Hello, ", None], ["мир", "world", None]], None, "en"])

    result = _run(handler, lambda client: translate("Hello, world", Language.EN, Language.RU, client=client))

    assert result.success
    assert result.translated_text == "Привет, мир"
    assert result.source == "Google"
    assert seen == ["translate.googleapis.com"]


def test_falls_back_to_mymemory():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "translate.googleapis.com":
            return httpx.Response(503)
        assert request.url.params["langpair"] == "uz|en"
        return httpx.Response(
            200, json={"responseStatus": 200, "responseData": {"translatedText": "hello", "match": 1}}
        )

    result = _run(handler, lambda client: translate("salom", Language.UZ_LATN, Language.EN, client=client))

    assert result.success
    assert result.translated_text == "hello"
    assert result.source == "MyMemory"


def test_mymemory_quota_warning_falls_back_to_libretranslate():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "translate.googleapis.com":
            return httpx.Response(200, json={"unexpected": True})
        if request.url.host == "api.mymemory.translated.net":
            return httpx.Response(
                200,
                json={"responseStatus": 200, "responseData": {"translatedText": "MYMEMORY WARNING: quota"}},
            )
        assert request.url.path == "/translate"
        return httpx.Response(200, json={"translatedText": "мир"})

    result = _run(handler, lambda client: translate("world", Language.EN, Language.RU, client=client))

    assert result.success
    assert result.translated_text == "мир"
    assert result.source == "LibreTranslate"


def test_all_providers_failing():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    result = _run(handler, lambda client: translate("world", Language.EN, Language.RU, client=client))

    assert not result.success
    assert result.error == "All translation services failed. Please try again later."


def test_short_circuits_without_network():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not be called
        raise AssertionError("no request expected")

    empty = _run(handler, lambda client: translate("   ", Language.EN, Language.RU, client=client))
    same = _run(handler, lambda client: translate("hi", Language.EN, Language.EN, client=client))
    uzbek = _run(handler, lambda client: translate("salom", Language.UZ_LATN, Language.UZ_CYRL, client=client))

    assert empty.error == "Empty text"
    assert same.success and same.translated_text == "hi"
    assert not uzbek.success
    assert "transliteration" in uzbek.error


def test_translate_batch_keeps_order():
    def handler(request: httpx.Request) -> httpx.Response:
        text = request.url.params["q"]
        return httpx.Response(200, json=[[[text.upper(), text]]])

    results = _run(
        handler,
        lambda client: translate_batch(["a", "b"], Language.EN, Language.RU, client=client, delay=0),
    )

    assert [result.translated_text for result in results] == ["A", "B"]


def test_translation_menu_skips_uzbek_script_pairs():
    actions = [action for action, _ in translation_menu_items()]
    assert len(actions) == 10
    assert "translate-en-to-ru" in actions
    assert "translate-uz-latn-to-uz-cyrl" not in actions
    assert "translate-uz-cyrl-to-uz-latn" not in actions


def test_parse_translation_action():
    assert parse_translation_action("translate-uz-latn-to-ru") == (Language.UZ_LATN, Language.RU)
    assert parse_translation_action("translate-en-to-uz-cyrl") == (Language.EN, Language.UZ_CYRL)
    assert parse_translation_action("translate-xx-to-ru") is None
    assert parse_translation_action("latin-to-cyrillic") is None
    assert is_translation_type("translate-en-to-ru")
    assert not is_translation_type("latin-to-cyrillic")
