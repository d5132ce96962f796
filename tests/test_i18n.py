import json

import pytest

from nitroterm.i18n import I18n


@pytest.fixture
def locales_dir(tmp_path):
    (tmp_path / "en.json").write_text(json.dumps({"hello": "Hello", "count": 3}), encoding="utf-8")
    (tmp_path / "tr.json").write_text(json.dumps({"hello": "Merhaba"}), encoding="utf-8")
    return tmp_path


def test_default_locale_is_english(locales_dir):
    i18n = I18n.from_directory(locales_dir)
    assert i18n.locale == "en"
    assert i18n.t("hello") == "Hello"


def test_loaded_locales(locales_dir):
    assert I18n.from_directory(locales_dir).locales == ["en", "tr"]


def test_switch_locale(locales_dir):
    i18n = I18n.from_directory(locales_dir)
    i18n.set_locale("tr")
    assert i18n.locale == "tr"
    assert i18n.t("hello") == "Merhaba"


def test_unknown_locale_is_ignored(locales_dir):
    i18n = I18n.from_directory(locales_dir)
    i18n.set_locale("de")
    assert i18n.locale == "en"


def test_missing_key_returns_key(locales_dir):
    i18n = I18n.from_directory(locales_dir)
    assert i18n.t("goodbye") == "goodbye"
    i18n.set_locale("tr")
    assert i18n.t("count") == "count"


def test_non_string_value_returns_key(locales_dir):
    assert I18n.from_directory(locales_dir).t("count") == "count"


def test_empty_translations_return_keys():
    i18n = I18n()
    assert i18n.t("anything") == "anything"
    assert i18n.locales == []


def test_invalid_json_raises(tmp_path):
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        I18n.from_directory(tmp_path)