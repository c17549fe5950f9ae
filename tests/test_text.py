"""Tests for splitflap.text: sanitize, align and glyph substitution."""
import string

import pytest

from splitflap.charset import ALPHA, NUMERIC, CharacterSet
from splitflap.text import (
    BLANK_GLYPH,
    PadDirection,
    align,
    align_pair,
    display_glyph,
    sanitize,
)

SAMPLES = ["", "7", "12345", "abc", "HI!", "  9 9  ", "ünïcødé-42", "0" * 40]
UPPER = CharacterSet(string.ascii_uppercase)


class TestSanitize:
    @pytest.mark.parametrize("value", SAMPLES)
    @pytest.mark.parametrize("charset", [NUMERIC, ALPHA, UPPER])
    def test_length_and_membership(self, value: str, charset: CharacterSet) -> None:
        result = sanitize(value, charset)
        assert len(result) == len(value)
        assert all(char in charset for char in result)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value: str) -> None:
        once = sanitize(value, UPPER)
        assert sanitize(once, UPPER) == once

    def test_invalid_replaced_with_fallback(self) -> None:
        assert sanitize("HI!", UPPER) == "HIA"
        assert sanitize("1a2", NUMERIC) == "102"

    def test_members_kept(self) -> None:
        assert sanitize("90210", NUMERIC) == "90210"


class TestAlign:
    def test_pad_left(self) -> None:
        assert align("7", NUMERIC, 5, PadDirection.LEFT) == list("00007")

    def test_pad_right(self) -> None:
        assert align("7", NUMERIC, 5, PadDirection.RIGHT) == list("70000")

    def test_string_direction(self) -> None:
        assert align("7", NUMERIC, 3, "right") == list("700")

    @pytest.mark.parametrize("width", [0, None])
    def test_padding_disabled(self, width) -> None:
        assert align("7", NUMERIC, width, PadDirection.LEFT) == ["7"]

    def test_long_value_unchanged(self) -> None:
        assert align("1234567", NUMERIC, 5, PadDirection.LEFT) == list("1234567")

    @pytest.mark.parametrize("value", ["", "1", "123", "12345", "123456"])
    @pytest.mark.parametrize("direction", list(PadDirection))
    def test_strip_pad_recovers_value(self, value: str, direction: PadDirection) -> None:
        width = 5
        result = align(value, NUMERIC, width, direction)
        if len(value) >= width:
            assert result == list(value)
            return
        assert len(result) == width
        pad = width - len(value)
        body = result[pad:] if direction is PadDirection.LEFT else result[:len(value)]
        assert "".join(body) == value

    def test_empty_value_is_all_fallback(self) -> None:
        assert align("", ALPHA, 3, PadDirection.LEFT) == [" ", " ", " "]


class TestAlignPair:
    def test_equal_lengths(self) -> None:
        assert align_pair("6", "7", NUMERIC, 5, PadDirection.LEFT) == list(zip("00006", "00007"))

    def test_unequal_lengths_share_width(self) -> None:
        pairs = align_pair("123456", "2", NUMERIC, 5, PadDirection.LEFT)
        assert len(pairs) == 6
        assert pairs[-1] == ("6", "2")
        assert pairs[0] == ("1", "0")

    def test_right_direction(self) -> None:
        pairs = align_pair("AB", "AC", UPPER, 4, PadDirection.RIGHT)
        assert pairs == [("A", "A"), ("B", "C"), ("A", "A"), ("A", "A")]


class TestPadDirection:
    def test_parse(self) -> None:
        assert PadDirection.parse("RIGHT") is PadDirection.RIGHT
        assert PadDirection.parse("left") is PadDirection.LEFT
        assert PadDirection.parse(PadDirection.RIGHT) is PadDirection.RIGHT

    def test_unknown_defaults_left(self) -> None:
        assert PadDirection.parse("center") is PadDirection.LEFT
        assert PadDirection.parse(None) is PadDirection.LEFT


class TestDisplayGlyph:
    def test_space_substituted(self) -> None:
        assert display_glyph(" ") == BLANK_GLYPH == "\u2007"

    def test_other_characters_unchanged(self) -> None:
        assert display_glyph("A") == "A"
