"""
Translation index.

Aggregates the pairs of several providers into one deduplicated set and
searches it case-insensitively. The set is rebuilt off to the side and
published by swapping a single reference, so searches running during a
rebuild see either the old or the new set, never a mix.
"""

import logging
import threading
from collections.abc import Collection, Iterable, Iterator

from simplebot.services.translation.providers import TranslationProvider
from simplebot.services.translation.types import Translation, TranslationSearchResult

logger = logging.getLogger(__name__)


def _sort_key(translation: Translation) -> tuple[int, int, str, str]:
    return (
        len(translation.english),
        len(translation.german),
        translation.english,
        translation.german,
    )


def _lower(text: str) -> str:
    """Lower-case character by character, never changing the length of the text."""
    # casefold() turns "ß" into "ss" and lower() turns "İ" into two characters
    lowered = (ch.lower() for ch in text)
    return "".join(low if len(low) == 1 else ch for ch, low in zip(text, lowered))


def sorted_translations(translations: Collection[Translation]) -> list[Translation]:
    """Order translations so that short, canonical terms come first."""
    return sorted(translations, key=_sort_key)


class TranslationIndex:
    """Searchable set of translations from all providers."""

    def __init__(self, providers: Iterable[TranslationProvider] = ()) -> None:
        self._lock = threading.Lock()
        self._translations: frozenset[Translation] = frozenset()
        self.rebuild(providers)

    def rebuild(self, providers: Iterable[TranslationProvider]) -> None:
        """Replace the indexed set with the union of all provider sets."""
        collected: set[Translation] = set()
        for provider in providers:
            collected.update(provider.translations)
        snapshot = frozenset(collected)

        with self._lock:
            self._translations = snapshot

        logger.info(f"Translation index rebuilt with {len(snapshot)} translations")

    def search(self, query: str) -> TranslationSearchResult:
        """
        Find translations matching the query on either language.

        A case-insensitive full match lands in `exact`, a case-insensitive
        substring match in `partial`. A translation can be in both sets.
        """
        result = TranslationSearchResult()
        if query == "":
            return result

        needle = _lower(query)
        for translation in self._translations:
            english = _lower(translation.english)
            german = _lower(translation.german)
            if english == needle or german == needle:
                result.exact.add(translation)
            if needle in english or needle in german:
                result.partial.add(translation)

        return result

    @property
    def translations(self) -> frozenset[Translation]:
        return self._translations

    def __len__(self) -> int:
        return len(self._translations)

    def __iter__(self) -> Iterator[Translation]:
        return iter(self._translations)

    def __contains__(self, item: object) -> bool:
        return item in self._translations
