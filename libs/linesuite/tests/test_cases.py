"""Tests for test case values and the field reader."""

from __future__ import annotations

import dataclasses

import pytest

from linesuite.core.cases import FieldError, FieldReader, TestCase


class TestTestCase:
    def test_fields(self) -> None:
        case = TestCase(2, 14, "1 2")
        assert (case.number, case.line, case.text) == (2, 14, "1 2")

    def test_is_immutable(self) -> None:
        case = TestCase(1, 1, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            case.text = "y"  # type: ignore[misc]

    def test_data_is_fresh_each_time(self) -> None:
        case = TestCase(1, 1, "a b")
        assert case.data().word() == "a"
        assert case.data().word() == "a"


# ---------------------------------------------------------------------------
# Words and numbers
# ---------------------------------------------------------------------------


class TestWords:
    def test_words_in_order(self) -> None:
        r = FieldReader("  alpha\tbeta  gamma ")
        assert [r.word(), r.word(), r.word()] == ["alpha", "beta", "gamma"]
        assert r.at_end()

    def test_word_past_end(self) -> None:
        r = FieldReader("a")
        r.word()
        with pytest.raises(FieldError) as info:
            r.word()
        assert info.value.column == 2

    def test_remaining(self) -> None:
        r = FieldReader("skip a b  c ")
        r.word()
        assert list(r.remaining()) == ["a", "b", "c"]

    def test_rest(self) -> None:
        r = FieldReader("cmd   the rest of it   ")
        r.word()
        assert r.rest() == "the rest of it"
        assert r.at_end()

    def test_at_end_on_whitespace(self) -> None:
        assert FieldReader("   ").at_end()
        assert not FieldReader(" x ").at_end()


class TestNumbers:
    def test_integers(self) -> None:
        r = FieldReader("42 -7 +3")
        assert [r.integer(), r.integer(), r.integer()] == [42, -7, 3]

    def test_big_integer(self) -> None:
        assert FieldReader("4000000000").integer() == 4000000000

    def test_bad_integer_does_not_move_cursor(self) -> None:
        r = FieldReader("  abc 5")
        with pytest.raises(FieldError) as info:
            r.integer()
        assert info.value.column == 3
        assert "abc" in str(info.value)
        assert r.word() == "abc"
        assert r.integer() == 5

    def test_unsigned_rejects_negative(self) -> None:
        r = FieldReader("-1")
        with pytest.raises(FieldError, match="unsigned"):
            r.unsigned()
        assert r.integer() == -1

    def test_number(self) -> None:
        r = FieldReader("1.5 -2e3 7")
        assert [r.number(), r.number(), r.number()] == [1.5, -2000.0, 7.0]

    def test_bad_number(self) -> None:
        with pytest.raises(FieldError):
            FieldReader("one").number()

    @pytest.mark.parametrize("token", ["1_000", "١٢", "--5", "+", "0x10"])
    def test_integer_is_plain_ascii_decimal(self, token) -> None:
        r = FieldReader(token)
        with pytest.raises(FieldError, match="integer"):
            r.integer()
        assert r.word() == token

    @pytest.mark.parametrize("token", ["1_000.5", "١.٥", "1.5.2"])
    def test_number_is_plain_ascii(self, token) -> None:
        r = FieldReader(token)
        with pytest.raises(FieldError, match="number"):
            r.number()
        assert r.word() == token

    def test_booleans(self) -> None:
        r = FieldReader("1 0 true False yes no")
        assert [r.boolean() for _ in range(6)] == [True, False, True, False, True, False]

    def test_bad_boolean(self) -> None:
        with pytest.raises(FieldError, match="boolean"):
            FieldReader("maybe").boolean()


# ---------------------------------------------------------------------------
# Quoted strings
# ---------------------------------------------------------------------------


class TestQuoted:
    def test_plain(self) -> None:
        r = FieldReader('"two words" next')
        assert r.quoted() == "two words"
        assert r.word() == "next"

    def test_empty(self) -> None:
        assert FieldReader('""').quoted() == ""

    def test_simple_escapes(self) -> None:
        assert FieldReader(r'"\a\b\f\n\r\t\v"').quoted() == "\a\b\f\n\r\t\v"

    def test_escaped_symbols(self) -> None:
        assert FieldReader(r'"\' \" \\ \?"').quoted() == "' \" \\ ?"

    def test_hex(self) -> None:
        assert FieldReader(r'"\x41\x4a\x05"').quoted() == "AJ\x05"

    def test_hex_takes_two_digits_at_most(self) -> None:
        assert FieldReader(r'"\x414"').quoted() == "A4"

    def test_hex_without_digits(self) -> None:
        with pytest.raises(FieldError, match="hex"):
            FieldReader(r'"\xg"').quoted()

    def test_octal(self) -> None:
        assert FieldReader(r'"\101\0\7"').quoted() == "A\0\7"

    def test_octal_stops_at_non_octal_digit(self) -> None:
        assert FieldReader(r'"\248"').quoted() == "\x148"

    def test_unknown_escape_keeps_character(self) -> None:
        assert FieldReader(r'"\q"').quoted() == "q"

    def test_missing_opening_quote(self) -> None:
        with pytest.raises(FieldError, match="opening"):
            FieldReader("abc").quoted()

    def test_unterminated(self) -> None:
        r = FieldReader('  "abc')
        with pytest.raises(FieldError, match="unterminated") as info:
            r.quoted()
        assert info.value.column == 3
        assert r.rest() == '"abc'

    def test_trailing_backslash(self) -> None:
        with pytest.raises(FieldError, match="escape"):
            FieldReader('"abc\\').quoted()
