"""
Translation providers.

A provider is any source of translation pairs: paired properties files,
bilingual syscode labels, key-migration labels. The index only needs the
`translations` set; how a provider fills it is its own business.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from simplebot.services.translation.types import Translation

logger = logging.getLogger(__name__)


@runtime_checkable
class TranslationProvider(Protocol):
    """Source of translation pairs."""

    @property
    def translations(self) -> set[Translation]: ...

    def clear(self) -> None: ...


class StaticTranslationProvider:
    """Provider backed by a fixed collection of pairs."""

    def __init__(self, translations: Iterable[Translation] = ()) -> None:
        self._translations: set[Translation] = set(translations)

    @property
    def translations(self) -> set[Translation]:
        return self._translations

    def clear(self) -> None:
        self._translations.clear()


class PropertiesTranslationProvider:
    """
    Pairs the values of two property mappings that share keys.

    The source mapping holds English texts, the target mapping German texts
    for the same keys. Repeated parse() calls accumulate until clear().
    """

    def __init__(self) -> None:
        self._translations: set[Translation] = set()

    @property
    def translations(self) -> set[Translation]:
        return self._translations

    def parse(self, source: Mapping[str, str], target: Mapping[str, str]) -> int:
        """
        Add a translation for every key present in both mappings.

        Keys whose value is blank on either side are skipped.

        Returns:
            Number of pairs read from this pair of mappings
        """
        count = 0
        for key, english in source.items():
            german = target.get(key)
            if german is None:
                continue
            english = english.strip()
            german = german.strip()
            if not english or not german:
                continue
            self._translations.add(Translation(english=english, german=german))
            count += 1

        logger.debug(f"Read {count} property translations")
        return count

    def clear(self) -> None:
        self._translations.clear()
