"""
Сквозные свойства encoder ↔ parser

Проверяет:
1. parse(encode(x)) == x на всём классическом домене и выборке extended домена
2. Инъективность encoder
3. Ограничение длины и canonical форму
4. Независимость от регистра и ведущих пробелов
5. Согласованность is_zero / sign с разобранным значением
"""

from numerus.codec.encoder import fraction_to_roman, to_roman
from numerus.codec.inspectors import is_zero, sign
from numerus.codec.parser import parse_fraction, parse_int
from numerus.core.constants import (
    BASIC_MAX,
    BASIC_MIN,
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX_LEN,
)
from numerus.core.fraction import Fraction


def _sample_fractions():
    """Детерминированная выборка canonical Fraction по всему домену."""
    samples = [
        Fraction.of(EXTENDED_INT_MAX, 11),
        Fraction.of(EXTENDED_INT_MIN, -11),
        Fraction.of(-3888888, -11),
        Fraction.of(4000),
        Fraction.of(-4000),
    ]
    step = 7_919
    for int_part in range(EXTENDED_INT_MIN, EXTENDED_INT_MAX + 1, step):
        twelfths = (int_part // step) % 12
        samples.append(Fraction.of(int_part, -twelfths if int_part < 0 else twelfths))
    for int_part in (-1, 0, 1):
        for twelfths in range(0, 12):
            if int_part < 0:
                samples.append(Fraction.of(int_part, -twelfths))
            elif int_part == 0:
                samples.append(Fraction.of(0, twelfths))
                samples.append(Fraction.of(0, -twelfths))
            else:
                samples.append(Fraction.of(int_part, twelfths))
    return samples


class TestBasicRoundTrip:
    """Классический домен целиком"""

    def test_parse_int_inverts_to_roman(self) -> None:
        """parse_int(to_roman(n)) == n для n ∈ [-3999, 3999]"""
        for value in range(BASIC_MIN, BASIC_MAX + 1):
            assert parse_int(to_roman(value)) == value

    def test_injective(self) -> None:
        """Разные значения → разные numeral"""
        numerals = {to_roman(value) for value in range(BASIC_MIN, BASIC_MAX + 1)}
        assert len(numerals) == BASIC_MAX - BASIC_MIN + 1


class TestExtendedRoundTrip:
    """Выборка extended домена"""

    def test_parse_inverts_encode(self) -> None:
        """parse_fraction(fraction_to_roman(f)) == f"""
        for fraction in _sample_fractions():
            assert parse_fraction(fraction_to_roman(fraction)) == fraction, fraction

    def test_injective(self) -> None:
        """Разные canonical Fraction → разные numeral"""
        fractions = set(_sample_fractions())
        numerals = {fraction_to_roman(fraction) for fraction in fractions}
        assert len(numerals) == len(fractions)

    def test_length_bound(self) -> None:
        """Ни один numeral не длиннее 36 символов"""
        for fraction in _sample_fractions():
            assert len(fraction_to_roman(fraction)) <= EXTENDED_MAX_LEN

    def test_vinculum_boundary(self) -> None:
        """Переход через 3999 ↔ 4000 в обе стороны"""
        for int_part in range(3990, 4020):
            for signed in (int_part, -int_part):
                numeral = fraction_to_roman(Fraction.of(signed))
                assert ("_" in numeral) == (int_part > BASIC_MAX)
                assert parse_int(numeral) == signed


class TestInputVariants:
    """Регистр и пробелы"""

    def test_lowercase_and_mixed_case(self) -> None:
        """Строчные и смешанный регистр дают то же значение"""
        for fraction in _sample_fractions()[::10]:
            numeral = fraction_to_roman(fraction)
            assert parse_fraction(numeral.lower()) == fraction
            assert parse_fraction(numeral.swapcase()) == fraction

    def test_leading_whitespace(self) -> None:
        """Ведущие пробелы игнорируются"""
        for fraction in _sample_fractions()[::10]:
            numeral = fraction_to_roman(fraction)
            assert parse_fraction("  \t" + numeral) == fraction


class TestInspectorsAgreeWithParser:
    """is_zero и sign согласованы с разбором"""

    def test_sign_matches_value(self) -> None:
        """sign(encode(f)) == f.sign()"""
        for fraction in _sample_fractions():
            numeral = fraction_to_roman(fraction)
            assert sign(numeral) == fraction.sign(), numeral
            assert is_zero(numeral) == fraction.is_zero()
