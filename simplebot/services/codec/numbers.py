"""
Number base conversion.

Parses a token in base 10, 16 or 2 and renders the value in all three bases.
"""

from dataclasses import dataclass

from simplebot.services.codec.constants import (
    BINARY_PREFIX,
    DIGIT_PATTERNS,
    HEX_PREFIX,
    LONG_MAX,
    LONG_MIN,
    LONG_SUFFIX,
)

SUPPORTED_BASES = (10, 16, 2)

_PREFIXES = {16: HEX_PREFIX, 2: BINARY_PREFIX}


@dataclass(frozen=True)
class NumberConversion:
    """One value rendered in decimal, hex and binary."""

    value: int
    base: int

    @property
    def decimal(self) -> str:
        return str(self.value)

    @property
    def hex(self) -> str:
        return _render(self.value, "x")

    @property
    def binary(self) -> str:
        return _render(self.value, "b")

    def to_message(self) -> str:
        return f"Dec: {self.decimal}\nHex: {self.hex}\nBin: {self.binary}"


def _render(value: int, fmt: str) -> str:
    # Negative values keep their sign instead of showing two's complement
    if value < 0:
        return "-" + format(-value, fmt)
    return format(value, fmt)


def strip_literal(token: str, base: int) -> str:
    """Remove the conventional literal prefix for the base and a trailing 'L'."""
    prefix = _PREFIXES.get(base)
    if prefix and token.startswith(prefix):
        token = token[len(prefix):]
    return token.removesuffix(LONG_SUFFIX)


def convert(token: str, base: int) -> NumberConversion | None:
    """
    Parse a token as a signed 64-bit integer in the given base.

    Args:
        token: Number text, optionally with 0x/0b prefix and L suffix
        base: One of SUPPORTED_BASES

    Returns:
        NumberConversion, or None if the token is not a valid number in that base
    """
    if base not in SUPPORTED_BASES:
        raise ValueError(f"Unsupported base: {base}")

    text = strip_literal(token, base)
    if not DIGIT_PATTERNS[base].fullmatch(text):
        return None

    value = int(text, base)
    if not LONG_MIN <= value <= LONG_MAX:
        return None

    return NumberConversion(value=value, base=base)
