"""
Codec package for identifier and number parsing.

Module structure:
- identifier.py: Fixed-width identifier and classpart parsing
- numbers.py: Decimal/hex/binary number conversion
- constants.py: Digit lengths, masks and numeric limits
"""

from simplebot.services.codec.constants import (
    CLASS_PART_LENGTH,
    CLASS_PART_MASK,
    IDENTIFIER_LENGTH,
    TABLE_CLASS_PART_FLAG,
)
from simplebot.services.codec.identifier import (
    ParsedIdentifier,
    class_part_text,
    derive_class_part,
    parse_identifier,
)
from simplebot.services.codec.numbers import (
    SUPPORTED_BASES,
    NumberConversion,
    convert,
    strip_literal,
)

__all__ = [
    # Identifiers
    "ParsedIdentifier",
    "parse_identifier",
    "derive_class_part",
    "class_part_text",
    # Numbers
    "NumberConversion",
    "SUPPORTED_BASES",
    "convert",
    "strip_literal",
    # Constants
    "IDENTIFIER_LENGTH",
    "CLASS_PART_LENGTH",
    "CLASS_PART_MASK",
    "TABLE_CLASS_PART_FLAG",
]
