"""Root conftest — shared fixtures for the engine tests.

Provides:
- Reference snapshot built from in-memory fake lookups
- ReferenceData and MessageInterpreter wired to that snapshot
- Recording transport for handler tests
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from simplebot.services.bot import MessageInterpreter
from simplebot.services.lookup import ReferenceData, ReferenceSnapshot
from tests.helpers.fakes import FakeLoader, make_snapshot


@pytest.fixture
def snapshot() -> ReferenceSnapshot:
    return make_snapshot()


@pytest.fixture
def reference(snapshot: ReferenceSnapshot) -> ReferenceData:
    return ReferenceData(FakeLoader(snapshot))


@pytest.fixture
def interpreter(reference: ReferenceData) -> MessageInterpreter:
    return MessageInterpreter(reference, bot_name="simplebot", max_listed_results=10)


@pytest.fixture
def transport() -> AsyncMock:
    mock = AsyncMock()
    mock.send_text = AsyncMock()
    mock.send_file = AsyncMock()
    return mock
