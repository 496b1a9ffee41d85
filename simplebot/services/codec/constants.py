"""
Codec constants.

Digit lengths, masks and numeric ranges shared by identifier and number parsing.
"""

import re

# Hex digit count of a full identifier and of its classpart prefix
IDENTIFIER_LENGTH = 16
CLASS_PART_LENGTH = 4

# The classpart keeps the low 12 bits of the first 4 hex digits
CLASS_PART_MASK = 0xFFF

# Table ids are rendered as classpart text with this bit set
TABLE_CLASS_PART_FLAG = 0x1000

# Identifiers are unsigned 64-bit values
IDENTIFIER_MAX = 2**64 - 1

# Number conversion works on signed 64-bit values
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

# Key node ids are signed 32-bit values
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Literal prefixes and the long-literal suffix stripped before conversion
HEX_PREFIX = "0x"
BINARY_PREFIX = "0b"
LONG_SUFFIX = "L"

# Digit patterns per base; int() alone would also accept "0x", "_" and whitespace
DIGIT_PATTERNS = {
    2: re.compile(r"[+-]?[01]+"),
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?[0-9a-fA-F]+"),
}
UNSIGNED_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")
UNSIGNED_DECIMAL_PATTERN = re.compile(r"[0-9]+")
