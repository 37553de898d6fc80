"""
In-memory translation cache.

Keyed by (source text, target language). Lives as long as the process;
there is no eviction and nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from anuvad.i18n.languages import Language


@dataclass
class CachePartition:
    """A batch split into cache hits and misses, by input index."""

    hits: dict[int, str] = field(default_factory=dict)
    misses: list[int] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.misses


class TranslationCache:
    """
    Translation cache.

    Only successful engine output should be stored; the cache itself
    does not check. Writing the same key twice simply overwrites, which
    is safe because the engine is deterministic for the same input.
    """

    def __init__(self):
        self._entries: dict[tuple[str, Language], str] = {}

    def get(self, text: str, language: Language) -> str | None:
        """Get cached translation."""
        return self._entries.get((text, language))

    def set(self, text: str, language: Language, translation: str) -> None:
        """Cache a translation."""
        self._entries[(text, language)] = translation

    def contains(self, text: str, language: Language) -> bool:
        return (text, language) in self._entries

    def partition(self, texts: Sequence[str], language: Language) -> CachePartition:
        """Split ``texts`` into indices with a cached translation and those without."""
        partition = CachePartition()
        for i, text in enumerate(texts):
            cached = self._entries.get((text, language))
            if cached is not None:
                partition.hits[i] = cached
            else:
                partition.misses.append(i)
        return partition

    @staticmethod
    def merge(
        texts: Sequence[str],
        partition: CachePartition,
        fresh: Sequence[str],
    ) -> list[str]:
        """
        Recombine cached and freshly translated texts in input order.

        ``fresh`` holds one result per miss, in the order of
        ``partition.misses``.
        """
        if len(fresh) != len(partition.misses):
            raise ValueError(
                f"Expected {len(partition.misses)} fresh results, got {len(fresh)}"
            )

        results = list(texts)
        for i, text in partition.hits.items():
            results[i] = text
        for i, text in zip(partition.misses, fresh):
            results[i] = text
        return results

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
