"""
Tests for the translation index.

Tests cover:
- Aggregation and deduplication across providers
- Idempotent rebuilds
- Exact vs partial search semantics
- Display ordering
"""

import threading

from simplebot.services.translation import (
    StaticTranslationProvider,
    Translation,
    TranslationIndex,
    sorted_translations,
)

INTEREST = Translation("interest", "Zins")
INTEREST_RATE = Translation("interest rate", "Zinssatz")
ACCRUED = Translation("accrued interest", "Marchzins")
EXPIRY = Translation("Expiry", "Verfall")


class TestTranslationIndexRebuild:
    """Tests for aggregation."""

    def test_deduplicates_across_providers(self) -> None:
        first = StaticTranslationProvider([INTEREST, INTEREST_RATE])
        second = StaticTranslationProvider([INTEREST, EXPIRY])

        index = TranslationIndex([first, second])

        assert len(index) == 3
        assert set(index) == {INTEREST, INTEREST_RATE, EXPIRY}

    def test_rebuild_with_same_providers_is_idempotent(self) -> None:
        provider = StaticTranslationProvider([INTEREST, INTEREST_RATE])
        index = TranslationIndex([provider])

        index.rebuild([provider])
        index.rebuild([provider, provider])

        assert len(index) == 2

    def test_rebuild_replaces_previous_content(self) -> None:
        index = TranslationIndex([StaticTranslationProvider([INTEREST])])

        index.rebuild([StaticTranslationProvider([EXPIRY])])

        assert INTEREST not in index
        assert EXPIRY in index

    def test_equality_is_case_sensitive(self) -> None:
        provider = StaticTranslationProvider([INTEREST, Translation("Interest", "Zins")])

        assert len(TranslationIndex([provider])) == 2

    def test_published_set_is_not_affected_by_provider_changes(self) -> None:
        provider = StaticTranslationProvider([INTEREST])
        index = TranslationIndex([provider])

        provider.clear()

        assert INTEREST in index

    def test_concurrent_rebuilds_leave_a_complete_set(self) -> None:
        small = StaticTranslationProvider([INTEREST])
        large = StaticTranslationProvider([INTEREST, INTEREST_RATE, ACCRUED, EXPIRY])
        index = TranslationIndex([small])

        threads = [
            threading.Thread(target=index.rebuild, args=([large if i % 2 else small],))
            for i in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(index) in (1, 4)


class TestTranslationIndexSearch:
    """Tests for search."""

    def setup_method(self) -> None:
        provider = StaticTranslationProvider([INTEREST, INTEREST_RATE, ACCRUED, EXPIRY])
        self.index = TranslationIndex([provider])

    def test_empty_query_finds_nothing(self) -> None:
        result = self.index.search("")

        assert result.exact == set()
        assert result.partial == set()
        assert not result

    def test_exact_match_is_case_insensitive(self) -> None:
        result = self.index.search("INTEREST")

        assert result.exact == {INTEREST}

    def test_exact_match_on_german(self) -> None:
        result = self.index.search("zins")

        assert result.exact == {INTEREST}
        assert result.partial == {INTEREST, INTEREST_RATE, ACCRUED}

    def test_best_prefers_exact_matches(self) -> None:
        result = self.index.search("interest")

        assert result.is_exact
        assert result.best() == {INTEREST}
        assert INTEREST_RATE not in result.best()

    def test_best_falls_back_to_partial(self) -> None:
        result = self.index.search("rate")

        assert not result.is_exact
        assert result.best() == {INTEREST_RATE}

    def test_no_match(self) -> None:
        result = self.index.search("portfolio")

        assert result.best() == set()

    def test_sharp_s_is_not_expanded(self) -> None:
        dimension = Translation("dimension", "Maß")
        mass = Translation("mass", "Masse")
        index = TranslationIndex([StaticTranslationProvider([dimension, mass])])

        assert index.search("mass").exact == {mass}
        assert index.search("mass").partial == {mass}
        assert index.search("MAß").exact == {dimension}


class TestSortedTranslations:
    """Tests for display ordering."""

    def test_orders_by_lengths_then_text(self) -> None:
        items = {ACCRUED, INTEREST_RATE, INTEREST, Translation("interest", "Zinsen")}

        assert sorted_translations(items) == [
            INTEREST,
            Translation("interest", "Zinsen"),
            INTEREST_RATE,
            ACCRUED,
        ]

    def test_ties_broken_alphabetically(self) -> None:
        a = Translation("abc", "x")
        b = Translation("abd", "x")

        assert sorted_translations([b, a]) == [a, b]
