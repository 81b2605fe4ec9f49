"""Number conversions used when reading numeric literals and raw bytes."""

from __future__ import annotations

import math
import re
import struct

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_DECIMAL = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_int(text: str, base: int, digits: str) -> float:
    """Read the leading integer of ``text`` in ``base`` into a 32-bit range."""
    prefix = r"(?:0[xX])?" if base == 16 else ""
    match = re.match(rf"\s*([+-]?{prefix}[{digits}]+)", text)
    if match is None:
        raise ValueError(f"No digits to convert in {text!r}")
    value = int(match.group(1), base)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"Value out of range: {text!r}")
    return float(value)


def parse_binary(text: str) -> float:
    """Parse base-2 digits."""
    return _parse_int(text, 2, "01")


def parse_base3(text: str) -> float:
    """Parse base-3 digits."""
    return _parse_int(text, 3, "012")


def parse_octal(text: str) -> float:
    """Parse base-8 digits."""
    return _parse_int(text, 8, "0-7")


def parse_hex(text: str) -> float:
    """Parse base-16 digits."""
    return _parse_int(text, 16, "0-9a-fA-F")


def _parse_decimal(text: str) -> float:
    match = _DECIMAL.match(text)
    if match is None:
        raise ValueError(f"No digits to convert in {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise OverflowError(f"Value out of range: {text!r}")
    return value


_PREFIXES = {
    "0b": parse_binary,
    "0t": parse_base3,
    "0c": parse_octal,
    "0x": parse_hex,
}


def translate_digit(image: str) -> float:
    """Turn the text of a numeric literal into its value.

    The prefixes ``0b``, ``0t``, ``0c`` and ``0x`` select binary, base 3,
    octal and hexadecimal; anything else is read as a decimal number.
    """
    if not image:
        raise ValueError("Input string is null or empty")
    parse = _PREFIXES.get(image[:2])
    if parse is not None:
        return parse(image[2:])
    return _parse_decimal(image)


def to_double(data: bytes | bytearray | None) -> float:
    """Decode eight big-endian bytes as an IEEE 754 double."""
    if data is None or len(data) != 8:
        raise ValueError("Byte array must be non-null and have length 8")
    return struct.unpack(">d", bytes(data))[0]


def to_bytes(number: float) -> bytes:
    """Encode a number as eight big-endian IEEE 754 double bytes."""
    return struct.pack(">d", float(number))