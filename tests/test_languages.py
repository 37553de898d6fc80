"""
Tests for language codes and their engine mapping.
"""

import pytest

from anuvad.i18n.languages import (
    ENGINE_CODES,
    Language,
    UnsupportedLanguageError,
    get_language_by_code,
    get_language_name,
    normalize_language_code,
    parse_language,
)


class TestLanguages:
    def test_every_language_has_engine_code(self):
        assert set(ENGINE_CODES) == set(Language)

    def test_engine_codes(self):
        assert Language.EN.engine_code == "eng_Latn"
        assert Language.TE.engine_code == "tel_Telu"

    def test_normalize_variants(self):
        assert normalize_language_code(" Telugu ") == "te"
        assert normalize_language_code("ENGLISH") == "en"
        assert normalize_language_code("tel_Telu") == "te"

    def test_get_by_code(self):
        assert get_language_by_code("te") is Language.TE
        assert get_language_by_code("fr") is None

    def test_parse_language(self):
        assert parse_language("en") is Language.EN
        assert parse_language(Language.TE) is Language.TE

        with pytest.raises(UnsupportedLanguageError):
            parse_language("fr")

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            parse_language("")

    def test_language_names(self):
        assert get_language_name("en") == "English"
        assert get_language_name(Language.TE) == "తెలుగు"
        assert get_language_name("xx") == "xx"
