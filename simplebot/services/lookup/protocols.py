"""Contracts for the external lookup services."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from simplebot.services.lookup.types import KeyNode, SysCode, Table

if TYPE_CHECKING:
    from simplebot.services.lookup.reference import ReferenceSnapshot


class TableLookup(Protocol):
    """Database schema lookups."""

    def get_table(self, name: str) -> Table | None: ...

    def get_table_id(self, name: str) -> int | None: ...

    def get_table_name(self, class_part: int) -> str | None: ...

    def get_table_names(self, partial: str) -> Sequence[str]: ...


class SysCodeLookup(Protocol):
    """Syscode lookups."""

    def get_sys_code(self, id: int) -> SysCode | None: ...

    def find_sys_codes(self, text: str) -> Sequence[SysCode]: ...

    def to_message(self, sys_code: SysCode) -> str: ...


class KeyNodeLookup(Protocol):
    """Key-migration tree lookups."""

    def get_key_node(self, id: int) -> KeyNode | None: ...

    def to_message(self, key_node: KeyNode) -> str: ...


class ReferenceLoader(Protocol):
    """Parses the reference datasets into a complete snapshot."""

    def load(self) -> "ReferenceSnapshot": ...
