"""
Reference data snapshot.

All lookups and the translation index are published together as one
immutable snapshot. A refresh loads the replacement without holding the lock
(parsing can be slow) and only takes the lock to swap the reference, so
messages being answered keep working on the snapshot they started with.
"""

import asyncio
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field

from simplebot.core.exceptions import ReferenceDataError
from simplebot.services.lookup.protocols import (
    KeyNodeLookup,
    ReferenceLoader,
    SysCodeLookup,
    TableLookup,
)
from simplebot.services.translation import TranslationIndex, TranslationProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceSnapshot:
    """One consistent set of lookups."""

    tables: TableLookup
    sys_codes: SysCodeLookup
    key_nodes: KeyNodeLookup
    # Label -> provider, in aggregation order ("keymigration", "syscode", ...)
    translation_providers: Mapping[str, TranslationProvider] = field(default_factory=dict)
    translations: TranslationIndex = field(init=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: the index is derived once, at construction
        index = TranslationIndex(self.translation_providers.values())
        object.__setattr__(self, "translations", index)

    def status_lines(self) -> list[str]:
        """Size summary used by the status command."""
        lines = [
            f"{len(self.tables.get_table_names(''))} database tables",
            f"{len(self.sys_codes.find_sys_codes(''))} syscodes",
        ]
        for label, provider in self.translation_providers.items():
            lines.append(f"{len(provider.translations)} {label} translations")
        lines.append(f"{len(self.translations)} total translations")
        return lines


class ReferenceData:
    """Holder of the currently published snapshot."""

    def __init__(self, loader: ReferenceLoader, snapshot: ReferenceSnapshot | None = None) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._snapshot = snapshot if snapshot is not None else self._load()

    @property
    def snapshot(self) -> ReferenceSnapshot:
        """Current snapshot. Read it once per message and keep the reference."""
        return self._snapshot

    async def refresh(self) -> ReferenceSnapshot:
        """
        Reload all reference data and publish it.

        The loader runs in a worker thread so messages keep being answered
        from the current snapshot while the datasets are parsed.

        Raises:
            ReferenceDataError: The loader failed; the previous snapshot stays live
        """
        snapshot = await asyncio.to_thread(self._load)
        with self._lock:
            self._snapshot = snapshot
        logger.info("Reference data refreshed")
        return snapshot

    def _load(self) -> ReferenceSnapshot:
        try:
            return self._loader.load()
        except Exception as e:
            logger.error(f"Failed to load reference data: {e}")
            raise ReferenceDataError("Failed to load reference data", cause=e) from e
