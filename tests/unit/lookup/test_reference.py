"""
Tests for the reference snapshot and its refresh.

Tests cover:
- Translation index built from the snapshot's providers
- Status summary
- Atomic publish on refresh, old snapshot kept on loader failure
"""

import threading

import pytest

from simplebot.core.exceptions import ReferenceDataError
from simplebot.services.lookup import ReferenceData
from simplebot.services.translation import Translation
from tests.helpers.fakes import FailingLoader, FakeLoader, SlowLoader, make_snapshot


class TestReferenceSnapshot:
    """Tests for ReferenceSnapshot."""

    def test_builds_translation_index_from_providers(self) -> None:
        snapshot = make_snapshot()

        # 4 property translations + 1 syscode translation
        assert len(snapshot.translations) == 5
        assert Translation("Expiry", "Verfall") in snapshot.translations

    def test_status_lines(self) -> None:
        snapshot = make_snapshot()

        assert snapshot.status_lines() == [
            "2 database tables",
            "1 syscodes",
            "4 properties translations",
            "1 syscode translations",
            "5 total translations",
        ]

    def test_duplicate_provider_content_counted_once_in_total(self) -> None:
        snapshot = make_snapshot(translations=[Translation("Expiry", "Verfall")])

        assert snapshot.status_lines()[-1] == "1 total translations"


class TestReferenceData:
    """Tests for ReferenceData."""

    def test_loads_initial_snapshot(self) -> None:
        snapshot = make_snapshot()
        loader = FakeLoader(snapshot)

        reference = ReferenceData(loader)

        assert reference.snapshot is snapshot
        assert loader.calls == 1

    def test_uses_given_snapshot_without_loading(self) -> None:
        snapshot = make_snapshot()
        loader = FakeLoader(make_snapshot())

        reference = ReferenceData(loader, snapshot=snapshot)

        assert reference.snapshot is snapshot
        assert loader.calls == 0

    @pytest.mark.asyncio
    async def test_refresh_publishes_new_snapshot(self) -> None:
        first = make_snapshot()
        second = make_snapshot(tables=[])
        reference = ReferenceData(FakeLoader(first, second))
        held = reference.snapshot

        refreshed = await reference.refresh()

        assert refreshed is second
        assert reference.snapshot is second
        # Readers holding the old snapshot are unaffected
        assert held.tables.get_table_names("") == ["PORTFOLIO", "PORTFOLIO_ZUORD"]

    @pytest.mark.asyncio
    async def test_refresh_loads_outside_the_event_loop_thread(self) -> None:
        loader = SlowLoader(make_snapshot(), make_snapshot(tables=[]), delay=0.01)
        reference = ReferenceData(loader)

        await reference.refresh()

        initial_thread, refresh_thread = loader.threads
        assert initial_thread == threading.get_ident()
        assert refresh_thread != threading.get_ident()

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(self) -> None:
        snapshot = make_snapshot()
        reference = ReferenceData(FailingLoader(), snapshot=snapshot)

        with pytest.raises(ReferenceDataError) as exc_info:
            await reference.refresh()

        assert isinstance(exc_info.value.cause, OSError)
        assert reference.snapshot is snapshot

    def test_failed_initial_load_raises(self) -> None:
        with pytest.raises(ReferenceDataError):
            ReferenceData(FailingLoader())
