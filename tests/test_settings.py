from __future__ import annotations

import pytest

from scriptly.config.settings import Settings, _load_bool, _load_env, _load_list


def test_load_bool(monkeypatch):
    monkeypatch.setenv("SCRIPTLY_FLAG", "Yes")
    assert _load_bool("SCRIPTLY_FLAG", default=False)
    monkeypatch.setenv("SCRIPTLY_FLAG", "off")
    assert not _load_bool("SCRIPTLY_FLAG", default=True)
    monkeypatch.delenv("SCRIPTLY_FLAG")
    assert _load_bool("SCRIPTLY_FLAG", default=True)


def test_load_list(monkeypatch):
    monkeypatch.setenv("SCRIPTLY_IDS", " 1, 2,,3 ")
    assert _load_list("SCRIPTLY_IDS") == ["1", "2", "3"]
    monkeypatch.delenv("SCRIPTLY_IDS")
    assert _load_list("SCRIPTLY_IDS") == []


def test_required_variable(monkeypatch):
    monkeypatch.delenv("SCRIPTLY_REQUIRED", raising=False)
    with pytest.raises(RuntimeError):
        _load_env("SCRIPTLY_REQUIRED", required=True)


def test_telegram_token_required_only_on_demand():
    config = Settings(telegram_token="", log_level="INFO")
    with pytest.raises(RuntimeError):
        config.require_telegram_token()
    assert Settings(telegram_token="abc", log_level="INFO").require_telegram_token() == "abc"
