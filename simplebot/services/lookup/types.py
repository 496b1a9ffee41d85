"""Reference entities returned by the lookup services."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class SysSubsetEntry:
    """Membership of a syscode in a subset."""

    id: int
    sort_number: int
    default_entry: bool


@dataclass
class SysCode:
    """Coded enumeration value with bilingual labels."""

    id: int
    group_id: int
    code: str
    name: str
    german_short: str
    german_medium: str
    english_short: str
    english_medium: str
    children: list[int] = field(default_factory=list)
    subset_entries: list[SysSubsetEntry] = field(default_factory=list)


class Table(Protocol):
    """Database table definition from the schema."""

    name: str
    table_id: int

    def to_message(self) -> str:
        """Fixed-width text dump of the table definition."""
        ...


class KeyNode(Protocol):
    """Node in the key-migration hierarchy."""

    id: int
