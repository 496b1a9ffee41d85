"""Data types for translation search."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Translation:
    """English/German term pair. Equality is case-sensitive on both terms."""

    english: str
    german: str


@dataclass
class TranslationSearchResult:
    """Exact and partial matches for one query."""

    exact: set[Translation] = field(default_factory=set)
    partial: set[Translation] = field(default_factory=set)

    @property
    def is_exact(self) -> bool:
        return bool(self.exact)

    def best(self) -> set[Translation]:
        """Exact matches if there are any, otherwise the partial matches."""
        return self.exact if self.exact else self.partial

    def __bool__(self) -> bool:
        return bool(self.exact or self.partial)
