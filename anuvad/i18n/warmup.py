"""
Cache warming for translations.

Pre-translates common dynamic strings (dish names, categories, labels
that aren't in the static dictionary) so the first user to switch
language doesn't wait on the model for every card on the page.

Usage:
    runtime = create_runtime()
    await warm_translation_cache(runtime, languages=["te"])

    # CLI
    anuvad-warmup --languages te
    python -m anuvad.i18n.warmup --texts-file dishes.txt
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from anuvad.i18n.languages import Language, get_language_name, parse_language

if TYPE_CHECKING:
    from anuvad.runtime import TranslationRuntime


# Dynamic strings worth translating ahead of time
UI_STRINGS = [
    # Categories
    "Breakfast",
    "Lunch",
    "Dinner",
    "Snacks",
    "Sweets",
    "Beverages",
    "Curries",
    "Rice Dishes",
    "Street Food",

    # Dish card
    "Calories",
    "Protein",
    "Carbohydrates",
    "Fat",
    "Fiber",
    "Ingredients",
    "Preparation Time",
    "Cooking Time",
    "Serves",
    "Difficulty",
    "Easy",
    "Medium",
    "Hard",
    "Vegetarian",
    "Non-Vegetarian",
    "Vegan",

    # Dish page
    "Nutrition Facts",
    "Health Benefits",
    "Cultural Significance",
    "How to Make",
    "Tips",
    "Regional Variations",

    # Actions and status
    "View Recipe",
    "Download PDF",
    "Share",
    "Back to Home",
    "No dishes found",
    "Loading...",
    "Translating...",
]


def load_texts_file(path: str | Path) -> list[str]:
    """Read one text per line, skipping blanks and ``#`` comments."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    texts = [line.strip() for line in lines]
    return [text for text in texts if text and not text.startswith("#")]


async def warm_translation_cache(
    runtime: TranslationRuntime,
    languages: Sequence[str | Language] | None = None,
    texts: Sequence[str] | None = None,
    batch_size: int = 20,
    verbose: bool = True,
) -> dict[str, Any]:
    """
    Pre-warm the runtime's cache.

    Args:
        runtime: Runtime whose cache should be filled
        languages: Target languages (default: every non-source language)
        texts: Texts to translate (default: UI_STRINGS)
        batch_size: Texts per batch
        verbose: Print progress

    Returns:
        Stats dict with counts
    """
    if languages is None:
        targets = [lang for lang in Language if lang != runtime.source_language]
    else:
        targets = [parse_language(lang) for lang in languages]

    all_texts = list(dict.fromkeys(t for t in (texts or UI_STRINGS) if t and t.strip()))

    stats = {
        "languages": len(targets),
        "texts": len(all_texts),
        "cached": 0,
        "translations": 0,
        "failed": 0,
    }

    state = await runtime.initialize()
    if verbose:
        print(f"Engine: {state.value} ({runtime.loader.variant or 'none'})")
        print(f"{len(all_texts)} texts x {len(targets)} languages")

    for language in targets:
        if language == runtime.source_language:
            continue
        if verbose:
            print(f"\nWarming {get_language_name(language)} ({language.value})...")

        session = runtime.session(language)
        for i in range(0, len(all_texts), batch_size):
            batch = all_texts[i:i + batch_size]

            already = sum(1 for text in batch if runtime.cache.contains(text, language))
            await session.translate_batch(batch)
            now = sum(1 for text in batch if runtime.cache.contains(text, language))

            stats["cached"] += already
            stats["translations"] += now - already
            stats["failed"] += len(batch) - now

            if verbose:
                progress = min(i + batch_size, len(all_texts))
                print(f"   {progress}/{len(all_texts)} texts", end="\r")

        if verbose:
            print(f"   done: {language.value}           ")

    if verbose:
        print(
            f"\nAlready cached: {stats['cached']}, "
            f"new: {stats['translations']}, failed: {stats['failed']}"
        )

    return stats


# =============================================================================
# CLI Entry Point
# =============================================================================


def main(argv: Sequence[str] | None = None) -> None:
    """Run cache warm-up from command line."""
    from anuvad.config import get_settings
    from anuvad.runtime import create_runtime

    parser = argparse.ArgumentParser(
        description="Pre-translate common strings to fill the translation cache"
    )
    parser.add_argument(
        "--languages", "-l",
        nargs="+",
        help="Languages to warm (default: all but the source language)"
    )
    parser.add_argument(
        "--texts-file", "-f",
        help="File with one text per line (default: built-in UI strings)"
    )
    parser.add_argument(
        "--batch-size", "-b",
        type=int,
        default=20,
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Minimal output"
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    texts = load_texts_file(args.texts_file) if args.texts_file else None
    runtime = create_runtime(settings)

    asyncio.run(warm_translation_cache(
        runtime,
        languages=args.languages,
        texts=texts,
        batch_size=args.batch_size,
        verbose=not args.quiet,
    ))


if __name__ == "__main__":
    main()
