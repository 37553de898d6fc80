"""
Tests for the static dictionary (fast path).
"""

import pytest

from anuvad.i18n.languages import Language
from anuvad.i18n.static import StaticDictionary, StaticDictionaryError


@pytest.fixture
def strings():
    return StaticDictionary.load()


class TestStaticDictionary:
    def test_curated_telugu(self, strings):
        assert strings.lookup("Recipes", Language.TE) == "వంటకాలు"
        assert strings.lookup("Trending Dishes", Language.TE) == "ట్రెండింగ్ వంటకాలు"

    def test_unknown_key_echoes(self, strings):
        assert strings.lookup("NoSuchKey", Language.TE) == "NoSuchKey"

    def test_english_can_expand_key(self, strings):
        text = strings.lookup("Discover personalized nutrition insights", Language.EN)

        assert text.startswith("Discover personalized nutrition insights, authentic recipes")
        assert text.endswith("starts here.")

    def test_same_keys_for_every_language(self, strings):
        assert sorted(strings.keys(Language.EN)) == sorted(strings.keys(Language.TE))

    def test_missing_language_echoes(self):
        strings = StaticDictionary({Language.EN: {"Recipes": "Recipes"}})

        assert strings.lookup("Recipes", Language.TE) == "Recipes"

    def test_source_dict_changes_do_not_leak(self):
        source = {"Recipes": "వంటకాలు"}
        strings = StaticDictionary({Language.TE: source})

        source["Recipes"] = "changed"

        assert strings.lookup("Recipes", Language.TE) == "వంటకాలు"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "strings.yaml"
        path.write_text("te:\n  Languages: భాషలు\n", encoding="utf-8")

        strings = StaticDictionary.load(path)

        assert strings.languages == [Language.TE]
        assert strings.lookup("Languages", Language.TE) == "భాషలు"

    def test_unknown_language_rejected(self):
        with pytest.raises(StaticDictionaryError):
            StaticDictionary.from_dict({"xx": {"Recipes": "?"}})

    def test_non_mapping_rejected(self):
        with pytest.raises(StaticDictionaryError):
            StaticDictionary.from_dict({"te": ["Recipes"]})
