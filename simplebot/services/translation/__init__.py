"""
Translation package for bilingual term search.

Module structure:
- types.py: Translation pair and search result types
- index.py: Deduplicated, snapshot-swapped translation index
- providers.py: Translation sources feeding the index
"""

from simplebot.services.translation.index import TranslationIndex, sorted_translations
from simplebot.services.translation.providers import (
    PropertiesTranslationProvider,
    StaticTranslationProvider,
    TranslationProvider,
)
from simplebot.services.translation.types import Translation, TranslationSearchResult

__all__ = [
    "Translation",
    "TranslationSearchResult",
    "TranslationIndex",
    "sorted_translations",
    "TranslationProvider",
    "StaticTranslationProvider",
    "PropertiesTranslationProvider",
]
