"""
Tests for the translation cache and its batch partitioning.
"""

import pytest

from anuvad.i18n.cache import CachePartition, TranslationCache
from anuvad.i18n.languages import Language


@pytest.fixture
def cache():
    return TranslationCache()


class TestPointAccess:
    def test_miss_returns_none(self, cache):
        assert cache.get("Idli", Language.TE) is None

    def test_set_and_get(self, cache):
        cache.set("Idli", Language.TE, "ఇడ్లీ")

        assert cache.get("Idli", Language.TE) == "ఇడ్లీ"
        assert cache.contains("Idli", Language.TE)
        assert len(cache) == 1

    def test_keyed_by_language(self, cache):
        cache.set("Idli", Language.TE, "ఇడ్లీ")

        assert cache.get("Idli", Language.EN) is None

    def test_overwrite(self, cache):
        cache.set("Idli", Language.TE, "old")
        cache.set("Idli", Language.TE, "ఇడ్లీ")

        assert cache.get("Idli", Language.TE) == "ఇడ్లీ"
        assert len(cache) == 1

    def test_clear(self, cache):
        cache.set("Idli", Language.TE, "ఇడ్లీ")
        cache.clear()

        assert len(cache) == 0


class TestPartition:
    def test_partition_splits_hits_and_misses(self, cache):
        cache.set("B", Language.TE, "B-te")

        partition = cache.partition(["A", "B", "C"], Language.TE)

        assert partition.hits == {1: "B-te"}
        assert partition.misses == [0, 2]
        assert not partition.complete

    def test_all_hits_is_complete(self, cache):
        cache.set("A", Language.TE, "A-te")

        assert cache.partition(["A", "A"], Language.TE).complete

    def test_merge_restores_input_order(self, cache):
        cache.set("B", Language.TE, "B-te")
        texts = ["A", "B", "C"]
        partition = cache.partition(texts, Language.TE)

        merged = cache.merge(texts, partition, ["A-te", "C-te"])

        assert merged == ["A-te", "B-te", "C-te"]

    def test_merge_rejects_wrong_count(self):
        partition = CachePartition(misses=[0, 1])

        with pytest.raises(ValueError):
            TranslationCache.merge(["A", "B"], partition, ["only one"])
