"""Tests for word and BCD conversion helpers."""
import pytest

from finslink.core.binary import (
    from_bcd_byte,
    from_bcd_word,
    hex_dump,
    join_word,
    join_words,
    to_bcd_word,
    to_bcd_words,
    to_word,
    to_words,
)


def test_to_word_splits_high_low():
    assert to_word(0x04D2) == [0x04, 0xD2]
    assert to_word(0) == [0x00, 0x00]
    assert to_word(0xFFFF) == [0xFF, 0xFF]


def test_to_word_truncates_to_low_16_bits():
    assert to_word(0x12345) == [0x23, 0x45]
    assert to_word(-1) == [0xFF, 0xFF]


def test_to_words_preserves_order_and_doubles_length():
    result = to_words([1, 0x0100, 0xABCD])
    assert result == [0x00, 0x01, 0x01, 0x00, 0xAB, 0xCD]
    assert to_words([]) == []


@pytest.mark.parametrize("value", [0, 1, 255, 256, 0x1234, 0xFFFF, 0x10000, 0xDEADBEEF, -5])
def test_join_word_recovers_low_16_bits(value):
    assert join_word(*to_word(value)) == value & 0xFFFF


def test_join_words():
    assert join_words(bytes([0x00, 0x01, 0xAB, 0xCD])) == [1, 0xABCD]


def test_join_words_odd_length():
    with pytest.raises(ValueError):
        join_words([0x01])


def test_bcd_word_known_values():
    assert to_bcd_word(0) == [0x00, 0x00]
    assert to_bcd_word(9999) == [0x99, 0x99]
    assert to_bcd_word(1234) == [0x12, 0x34]
    assert to_bcd_word(7) == [0x00, 0x07]
    assert to_bcd_word(100) == [0x01, 0x00]


def test_bcd_word_injective_over_range():
    seen = {tuple(to_bcd_word(v)) for v in range(10000)}
    assert len(seen) == 10000


def test_bcd_words_concatenates():
    assert to_bcd_words([1234, 5678]) == [0x12, 0x34, 0x56, 0x78]


def test_bcd_out_of_range_still_yields_bytes():
    # 12345 is not representable; the result is junk but stays byte-sized
    result = to_bcd_word(12345)
    assert len(result) == 2
    assert all(0 <= b <= 0xFF for b in result)


def test_from_bcd_word():
    assert from_bcd_word(0x12, 0x34) == 1234
    assert from_bcd_word(*to_bcd_word(9999)) == 9999


def test_from_bcd_byte_rejects_hex_nibble():
    with pytest.raises(ValueError, match="not a valid BCD byte"):
        from_bcd_byte(0x1A)


def test_hex_dump_format():
    assert hex_dump(bytes([0x46, 0x49, 0x4E, 0x53])) == "46 49 4e 53 (length: 4)"
    assert hex_dump(b"") == "(length: 0)"
