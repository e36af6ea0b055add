from __future__ import annotations

from typing import Iterable


WORD_MASK = 0xFFFF
BYTE_MASK = 0xFF


def to_word(value: int) -> list[int]:
    """
    Split a number into a big-endian word.

    Anything wider than 16 bits is truncated to its low 16 bits.

    Returns:
        ``[high_byte, low_byte]``
    """
    return [(value >> 8) & BYTE_MASK, value & BYTE_MASK]


def to_words(values: Iterable[int]) -> list[int]:
    res: list[int] = []
    for value in values:
        res.extend(to_word(value))
    return res


def join_word(high: int, low: int) -> int:
    return ((high & BYTE_MASK) << 8) | (low & BYTE_MASK)


def join_words(data: Iterable[int] | bytes) -> list[int]:
    data = list(data)
    if len(data) % 2:
        raise ValueError("word data must have an even number of bytes")
    return [join_word(data[i], data[i + 1]) for i in range(0, len(data), 2)]


def to_bcd_byte(value: int) -> int:
    return (16 * (value // 10) + value % 10) & BYTE_MASK


def to_bcd_word(value: int) -> list[int]:
    """
    Pack a decimal number into a BCD word.

    The high byte holds the thousands and hundreds, the low byte the tens
    and ones, e.g. ``1234`` becomes ``[0x12, 0x34]``. Only ``0..9999``
    yields valid BCD.
    """
    upper, lower = divmod(value, 100)
    return [to_bcd_byte(upper), to_bcd_byte(lower)]


def to_bcd_words(values: Iterable[int]) -> list[int]:
    res: list[int] = []
    for value in values:
        res.extend(to_bcd_word(value))
    return res


def from_bcd_byte(value: int) -> int:
    tens, ones = (value >> 4) & 0x0F, value & 0x0F
    if tens > 9 or ones > 9:
        raise ValueError(f"0x{value:02x} is not a valid BCD byte")
    return tens * 10 + ones


def from_bcd_word(high: int, low: int) -> int:
    return from_bcd_byte(high) * 100 + from_bcd_byte(low)


def hex_dump(data: Iterable[int] | bytes) -> str:
    """Render bytes as ``"46 49 4e 53 (length: 4)"``."""
    data = list(data)
    return "".join(f"{b:02x} " for b in data) + f"(length: {len(data)})"
