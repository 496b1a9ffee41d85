"""
Lookup package: read-only contracts over the reference datasets.

The concrete lookups (schema, syscodes, key migration) are parsed elsewhere;
this package only defines what the engine calls and how a complete set of
lookups is published.

Module structure:
- types.py: Reference entities (SysCode, Table, KeyNode)
- protocols.py: Lookup service contracts
- reference.py: Snapshot bundling all lookups, swapped atomically on refresh
"""

from simplebot.services.lookup.protocols import (
    KeyNodeLookup,
    ReferenceLoader,
    SysCodeLookup,
    TableLookup,
)
from simplebot.services.lookup.reference import ReferenceData, ReferenceSnapshot
from simplebot.services.lookup.types import KeyNode, SysCode, SysSubsetEntry, Table

__all__ = [
    # Entities
    "SysCode",
    "SysSubsetEntry",
    "Table",
    "KeyNode",
    # Contracts
    "TableLookup",
    "SysCodeLookup",
    "KeyNodeLookup",
    "ReferenceLoader",
    # Snapshot
    "ReferenceSnapshot",
    "ReferenceData",
]
