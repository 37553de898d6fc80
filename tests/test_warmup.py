"""
Tests for translation cache warm-up.
"""

import pytest

from anuvad.i18n.languages import Language
from anuvad.i18n.warmup import UI_STRINGS, load_texts_file, warm_translation_cache
from anuvad.runtime import create_runtime
from tests.fakes import FakeEngine


class TestWarmup:
    @pytest.mark.asyncio
    async def test_warms_default_strings(self, runtime, engine):
        stats = await warm_translation_cache(runtime, verbose=False)

        assert stats["languages"] == 1
        assert stats["translations"] == len(set(UI_STRINGS))
        assert stats["failed"] == 0
        assert runtime.cache.get("Breakfast", Language.TE) == "Breakfast (tel_Telu)"

    @pytest.mark.asyncio
    async def test_second_run_is_all_cached(self, runtime, engine):
        texts = ["Idli", "Dosa", "Idli", ""]
        await warm_translation_cache(runtime, texts=texts, verbose=False)
        engine.calls.clear()

        stats = await warm_translation_cache(runtime, texts=texts, verbose=False)

        assert stats["texts"] == 2
        assert stats["cached"] == 2
        assert stats["translations"] == 0
        assert engine.calls == []

    @pytest.mark.asyncio
    async def test_counts_failures(self, settings):
        runtime = create_runtime(settings, engines=[FakeEngine(fail_on=("Dosa",))])

        stats = await warm_translation_cache(
            runtime, languages=["te"], texts=["Idli", "Dosa"], batch_size=1, verbose=False
        )

        assert stats["translations"] == 1
        assert stats["failed"] == 1

    @pytest.mark.asyncio
    async def test_failed_model(self, settings):
        runtime = create_runtime(settings, engines=[FakeEngine(fail_load=True)])

        stats = await warm_translation_cache(runtime, texts=["Idli"], verbose=False)

        assert stats["translations"] == 0
        assert stats["failed"] == 1

    def test_load_texts_file(self, tmp_path):
        path = tmp_path / "dishes.txt"
        path.write_text("# dishes\nIdli\n\n  Dosa  \n", encoding="utf-8")

        assert load_texts_file(path) == ["Idli", "Dosa"]

    def test_load_texts_file_skips_indented_comments(self, tmp_path):
        path = tmp_path / "dishes.txt"
        path.write_text("Idli\n  # breakfast items\n\t# more\nDosa\n", encoding="utf-8")

        assert load_texts_file(path) == ["Idli", "Dosa"]
