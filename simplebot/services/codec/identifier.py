"""
Identifier parsing.

Identifiers are 64-bit values written either as hex or as decimal digits.
A text is only an identifier of a given kind if its hex rendering has exactly
the expected number of digits (16 for a full id, 4 for a classpart).
"""

from dataclasses import dataclass

from simplebot.services.codec.constants import (
    CLASS_PART_LENGTH,
    CLASS_PART_MASK,
    IDENTIFIER_LENGTH,
    IDENTIFIER_MAX,
    TABLE_CLASS_PART_FLAG,
    UNSIGNED_DECIMAL_PATTERN,
    UNSIGNED_HEX_PATTERN,
)


@dataclass(frozen=True)
class ParsedIdentifier:
    """A successfully parsed identifier."""

    value: int
    hex_text: str

    @property
    def class_part(self) -> int:
        """Classpart encoded in the first four hex digits."""
        return derive_class_part(self.hex_text)


def _parse_unsigned(text: str, base: int) -> int | None:
    pattern = UNSIGNED_HEX_PATTERN if base == 16 else UNSIGNED_DECIMAL_PATTERN
    if not pattern.fullmatch(text):
        return None
    value = int(text, base)
    if value > IDENTIFIER_MAX:
        return None
    return value


def parse_identifier(text: str, length: int = IDENTIFIER_LENGTH) -> ParsedIdentifier | None:
    """
    Parse an identifier from hex or decimal text.

    Hex is tried first, so a purely numeric text that is also valid hex
    ("1234") is read as hex. Only when hex parsing fails is the text read as
    decimal and re-rendered in hex.

    Args:
        text: Candidate identifier text
        length: Required number of hex digits

    Returns:
        ParsedIdentifier, or None if the text is not an identifier of that length
    """
    hex_text = text.lower()
    value = _parse_unsigned(text, 16)

    if value is None:
        value = _parse_unsigned(text, 10)
        if value is None:
            return None
        hex_text = format(value, "x")

    if len(hex_text) != length:
        return None

    return ParsedIdentifier(value=value, hex_text=hex_text)


def derive_class_part(hex_text: str) -> int:
    """Take the first four hex digits and mask them down to the classpart."""
    return int(hex_text[:CLASS_PART_LENGTH], 16) & CLASS_PART_MASK


def class_part_text(table_id: int) -> str:
    """Render the classpart text that identifies a table."""
    return format(table_id | TABLE_CLASS_PART_FLAG, f"0{CLASS_PART_LENGTH}x")
