"""
Тесты для Inspectors
"""

import pytest

from numerus.codec.inspectors import (
    contains_extended_characters,
    count_roman_chars,
    is_basic_numeral,
    is_zero,
    sign,
)
from numerus.core.errors import EmptyNumeralError, InvalidSyntaxError, NullNumeralError


class TestIsZero:
    """Тесты is_zero"""

    def test_zero_spellings(self) -> None:
        """NULLA в любом регистре, с минусом и ведущими пробелами"""
        for numeral in ("NULLA", "nulla", "-NULLA", "  -NuLlA"):
            assert is_zero(numeral)

    def test_non_zero(self) -> None:
        """Прочие строки, включая None и пустую, не ноль"""
        for numeral in ("I", "S", "NULLAE", "--NULLA", "", None, "NULL\u0131A"):
            assert not is_zero(numeral)


class TestSign:
    """Тесты sign"""

    def test_values(self) -> None:
        """Знак по первому непробельному символу"""
        assert sign("-MMCCCXLV") == -1
        assert sign("  -S") == -1
        assert sign("XII") == 1
        assert sign("_MII_XVI") == 1

    def test_zero_cases(self) -> None:
        """Ноль, None и пустая строка → 0"""
        for numeral in ("NULLA", "-nulla", "", "   ", None):
            assert sign(numeral) == 0

    def test_no_validation(self) -> None:
        """Остаток строки не проверяется"""
        assert sign("-GARBAGE") == -1
        assert sign("GARBAGE") == 1


class TestExtendedCharacters:
    """Тесты contains_extended_characters и is_basic_numeral"""

    def test_extended_markers(self) -> None:
        """'_', 'S'/'s' и '.' — признаки расширенного numeral"""
        for numeral in ("_MII_XVI", "IIS", "iis", "I.", "-."):
            assert contains_extended_characters(numeral)
            assert not is_basic_numeral(numeral)

    def test_basic_numerals(self) -> None:
        """Классические numeral"""
        for numeral in ("MMCCCXLV", "-iv", "NULLA"):
            assert not contains_extended_characters(numeral)
            assert is_basic_numeral(numeral)
        # "\u017f".upper() == "S", но это не символ расширения
        assert not contains_extended_characters("I\u017f")

    def test_errors(self) -> None:
        """None и пустая строка"""
        with pytest.raises(NullNumeralError):
            is_basic_numeral(None)
        with pytest.raises(EmptyNumeralError):
            is_basic_numeral("  ")


class TestCountRomanChars:
    """Тесты count_roman_chars"""

    def test_counts(self) -> None:
        """Знак учитывается, '_' нет"""
        assert count_roman_chars("-_MII_XVI") == 7
        assert count_roman_chars("MMCCCXLV") == 8
        assert count_roman_chars("iis..") == 5
        assert count_roman_chars("  XII") == 3

    def test_zero(self) -> None:
        """NULLA → 5"""
        assert count_roman_chars("NULLA") == 5
        assert count_roman_chars("-nulla") == 5

    def test_longest_numeral(self) -> None:
        """Самый длинный numeral: 34 римских символа без учёта '_'"""
        assert count_roman_chars("-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....") == 34

    def test_alphabet_only(self) -> None:
        """Синтаксис не проверяется"""
        assert count_roman_chars("IIIIIIII") == 8

    def test_illegal_character(self) -> None:
        """Символ вне алфавита → INVALID_SYNTAX"""
        for numeral in ("XIIZ", "1", "X,I", "\u0131", "I\u017f"):
            with pytest.raises(InvalidSyntaxError):
                count_roman_chars(numeral)

    def test_too_long(self) -> None:
        """Больше 36 символов → INVALID_SYNTAX"""
        assert count_roman_chars("I" * 36) == 36
        with pytest.raises(InvalidSyntaxError):
            count_roman_chars("I" * 37)

    def test_errors(self) -> None:
        """None и пустая строка"""
        with pytest.raises(NullNumeralError):
            count_roman_chars(None)
        with pytest.raises(EmptyNumeralError):
            count_roman_chars("")
