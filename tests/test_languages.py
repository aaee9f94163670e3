import pytest

from text_translator.engines import google_v2, google_v3, translate_shell, yandex
from text_translator.errors import DecodeError, UnsupportedLanguageError
from text_translator.languages import (
    AUTOMATIC,
    InputLanguage,
    Language,
    LanguageCodes,
    as_input_language,
)


# subsets of each provider's published language list
DOCUMENTED_CODES = {
    "yandex": {
        "af", "ar", "be", "bg", "cs", "da", "de", "el", "en", "eo", "es", "et", "fi",
        "fr", "he", "hu", "it", "ja", "ko", "lt", "lv", "nl", "no", "pl", "pt", "ro",
        "ru", "sk", "sl", "sr", "sv", "tr", "uk", "zh",
    },
    "google_v2": {
        "af", "ar", "de", "en", "eo", "es", "fr", "it", "ja", "ko", "nl", "pl", "pt",
        "ru", "sr", "sv", "tr", "uk", "zh-CN", "zh-TW",
    },
    "google_v3": {
        "af", "ar", "de", "en", "eo", "es", "fr", "it", "ja", "ko", "nl", "pl", "pt",
        "ru", "sr", "sv", "tr", "uk", "zh-CN", "zh-TW",
    },
    "translate_shell": {
        "af", "ar", "de", "en", "eo", "es", "fr", "it", "ja", "ko", "nl", "pl", "pt",
        "ru", "sr", "sv", "tr", "uk", "zh-CN", "zh-TW",
    },
}

TABLES = [
    yandex.LANGUAGE_CODES,
    google_v2.LANGUAGE_CODES,
    google_v3.LANGUAGE_CODES,
    translate_shell.LANGUAGE_CODES,
]


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.provider)
def test_codes_round_trip(table):
    for language in table.languages:
        assert table.from_code(table.to_code(language)) is language


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.provider)
def test_codes_are_documented(table):
    assert set(table.codes.values()) <= DOCUMENTED_CODES[table.provider]


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.provider)
def test_automatic_source_is_never_mapped(table):
    assert table.source_code(AUTOMATIC) is None


def test_yandex_mapping_is_partial():
    assert not yandex.LANGUAGE_CODES.supports(Language.CHINESE_TRADITIONAL)
    with pytest.raises(UnsupportedLanguageError):
        yandex.LANGUAGE_CODES.to_code(Language.CHINESE_TRADITIONAL)


def test_google_tables_cover_every_language():
    assert set(google_v2.LANGUAGE_CODES.languages) == set(Language)
    assert set(google_v3.LANGUAGE_CODES.languages) == set(Language)


def test_from_code_is_case_insensitive():
    assert google_v2.LANGUAGE_CODES.from_code("ZH-cn") is Language.CHINESE_SIMPLIFIED


def test_unknown_signal_versus_unrecognized_code():
    table = LanguageCodes("demo", {Language.FRENCH: "fr"}, unknown=frozenset({"und"}))

    assert table.from_code("und") is None
    with pytest.raises(DecodeError):
        table.from_code("de")


def test_duplicate_codes_rejected():
    with pytest.raises(ValueError):
        LanguageCodes("demo", {Language.CHINESE_SIMPLIFIED: "zh", Language.CHINESE_TRADITIONAL: "ZH"})


def test_code_cannot_shadow_unknown_signal():
    with pytest.raises(ValueError):
        LanguageCodes("demo", {Language.FRENCH: "und"}, unknown=frozenset({"und"}))


def test_as_input_language():
    assert as_input_language(Language.ITALIAN) == InputLanguage(Language.ITALIAN)
    assert as_input_language(AUTOMATIC).is_automatic
    assert InputLanguage.defined(Language.ITALIAN).language is Language.ITALIAN
    with pytest.raises(TypeError):
        as_input_language("it")
