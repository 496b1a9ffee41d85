"""Tests for translation providers."""

from simplebot.services.translation import (
    PropertiesTranslationProvider,
    StaticTranslationProvider,
    Translation,
    TranslationProvider,
)


class TestPropertiesTranslationProvider:
    """Tests for pairing property mappings."""

    def test_pairs_values_of_shared_keys(self) -> None:
        provider = PropertiesTranslationProvider()

        count = provider.parse(
            {"label.interest": "Interest", "label.only.en": "Only English"},
            {"label.interest": "Zins", "label.only.de": "Nur Deutsch"},
        )

        assert count == 1
        assert provider.translations == {Translation("Interest", "Zins")}

    def test_skips_blank_values(self) -> None:
        provider = PropertiesTranslationProvider()

        provider.parse({"a": " ", "b": "Rate"}, {"a": "Leer", "b": " Satz "})

        assert provider.translations == {Translation("Rate", "Satz")}

    def test_accumulates_until_cleared(self) -> None:
        provider = PropertiesTranslationProvider()
        provider.parse({"a": "Interest"}, {"a": "Zins"})
        provider.parse({"b": "Rate"}, {"b": "Satz"})

        assert len(provider.translations) == 2

        provider.clear()

        assert provider.translations == set()


class TestStaticTranslationProvider:
    def test_duplicate_pairs_collapse_and_clear(self) -> None:
        provider = StaticTranslationProvider(
            [Translation("Interest", "Zins"), Translation("Interest", "Zins")]
        )

        assert provider.translations == {Translation("Interest", "Zins")}

        provider.clear()
        assert not provider.translations

    def test_satisfies_provider_protocol(self) -> None:
        assert isinstance(StaticTranslationProvider(), TranslationProvider)
        assert isinstance(PropertiesTranslationProvider(), TranslationProvider)
