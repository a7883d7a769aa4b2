"""
Тесты для Rational Core

Проверяет:
1. Модель Fraction (immutable, strict int, canonical форма)
2. normalize: перенос двенадцатых с усечением и выравнивание знаков
3. to_real / from_real и округление half away from zero
4. Границы домена и полосу округления
"""

import math

import pytest
from pydantic import ValidationError

from numerus.core.constants import (
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX,
    EXTENDED_MIN,
    ROUNDING_MARGIN,
)
from numerus.core.errors import (
    NotFiniteError,
    NullFractionError,
    NullRealError,
    OutOfRangeError,
)
from numerus.core.fraction import Fraction, from_real, normalize, to_real


# =============================================================================
# FRACTION MODEL
# =============================================================================


class TestFractionModel:
    """Тесты модели Fraction"""

    def test_positional_constructor(self) -> None:
        """Fraction.of эквивалентен keyword конструктору"""
        assert Fraction.of(3, 4) == Fraction(int_part=3, twelfths=4)
        assert Fraction.of(7) == Fraction(int_part=7, twelfths=0)

    def test_frozen(self) -> None:
        """Fraction immutable"""
        fraction = Fraction.of(1, 1)
        with pytest.raises(ValidationError):
            fraction.int_part = 2

    def test_strict_int_fields(self) -> None:
        """float и строки не приводятся к int"""
        with pytest.raises(ValidationError):
            Fraction(int_part=1.5, twelfths=0)
        with pytest.raises(ValidationError):
            Fraction(int_part="1", twelfths=0)

    def test_value(self) -> None:
        """value = int_part + twelfths / 12"""
        assert Fraction.of(2, 6).value == 2.5
        assert Fraction.of(-2, -6).value == -2.5

    def test_is_canonical(self) -> None:
        """Canonical: |twelfths| <= 11 и одинаковые знаки"""
        assert Fraction.of(0, 0).is_canonical()
        assert Fraction.of(-3, -11).is_canonical()
        assert Fraction.of(0, -3).is_canonical()
        assert not Fraction.of(1, 12).is_canonical()
        assert not Fraction.of(-3, 2).is_canonical()
        assert not Fraction.of(EXTENDED_INT_MAX + 1, 0).is_canonical()

    def test_sign_and_zero(self) -> None:
        """sign() учитывает обе части, is_zero() — итоговое значение"""
        assert Fraction.of(0, 0).sign() == 0
        assert Fraction.of(0, 0).is_zero()
        assert Fraction.of(1, -12).is_zero()
        assert Fraction.of(-3, 2).sign() == -1
        assert Fraction.of(0, 1).sign() == 1

    def test_hashable(self) -> None:
        """Frozen модели можно класть в set"""
        assert len({Fraction.of(1, 1), Fraction.of(1, 1), Fraction.of(1, 2)}) == 2


# =============================================================================
# NORMALIZE
# =============================================================================


class TestNormalize:
    """Тесты normalize"""

    def test_reference_cases(self) -> None:
        """Эталонные пары до и после нормализации"""
        cases = [
            ((-3, 2), (-2, -10)),
            ((10, 13), (11, 1)),
            ((10, -25), (7, 11)),
            ((28, 1), (28, 1)),
            ((0, -3), (0, -3)),
            ((1, -10), (0, 2)),
            ((-1, -12), (-2, 0)),
            ((10, -15), (8, 9)),
            ((-100, -61), (-105, -1)),
            ((-100, 61), (-94, -11)),
            ((EXTENDED_INT_MIN + 1, -23), (EXTENDED_INT_MIN, -11)),
        ]
        for (int_part, twelfths), expected in cases:
            result = normalize(Fraction.of(int_part, twelfths))
            assert (result.int_part, result.twelfths) == expected, (int_part, twelfths)

    def test_out_of_range_after_carry(self) -> None:
        """Перенос двенадцатых за границу домена → OutOfRange"""
        with pytest.raises(OutOfRangeError):
            normalize(Fraction.of(EXTENDED_INT_MAX, 12))
        with pytest.raises(OutOfRangeError):
            normalize(Fraction.of(EXTENDED_INT_MIN, -12))

    def test_out_of_range_integer_part(self) -> None:
        """Целая часть вне домена → OutOfRange"""
        with pytest.raises(OutOfRangeError):
            normalize(Fraction.of(EXTENDED_INT_MAX + 1))

    def test_carry_back_into_domain(self) -> None:
        """Отрицательные двенадцатые возвращают значение в домен"""
        assert normalize(Fraction.of(EXTENDED_INT_MAX + 1, -1)) == Fraction.of(
            EXTENDED_INT_MAX, 11
        )

    def test_none_rejected(self) -> None:
        """None → NullFraction"""
        with pytest.raises(NullFractionError):
            normalize(None)

    def test_idempotent(self) -> None:
        """normalize(normalize(f)) == normalize(f)"""
        for int_part in range(-30, 31, 3):
            for twelfths in range(-40, 41, 7):
                once = normalize(Fraction.of(int_part, twelfths))
                assert normalize(once) == once
                assert once.is_canonical()

    def test_value_preserved(self) -> None:
        """Нормализация не меняет значение"""
        for int_part in range(-20, 21, 4):
            for twelfths in range(-30, 31, 5):
                original = Fraction.of(int_part, twelfths)
                assert normalize(original).value == pytest.approx(original.value)


# =============================================================================
# REAL CONVERSIONS
# =============================================================================


class TestToReal:
    """Тесты to_real"""

    def test_canonical_values(self) -> None:
        """Значение canonical пары"""
        assert to_real(Fraction.of(-2, -6)) == -2.5
        assert to_real(Fraction.of(1, 6)) == 1.5
        assert to_real(Fraction.of(0, 0)) == 0.0

    def test_non_canonical_normalized_first(self) -> None:
        """Не canonical пара сначала нормализуется"""
        assert to_real(Fraction.of(-3, 6)) == -2.5

    def test_out_of_range(self) -> None:
        """Не приводимая в домен пара → OutOfRange"""
        with pytest.raises(OutOfRangeError):
            to_real(Fraction.of(EXTENDED_INT_MAX, 12))

    def test_none_rejected(self) -> None:
        """None → NullFraction"""
        with pytest.raises(NullFractionError):
            to_real(None)


class TestFromReal:
    """Тесты from_real"""

    def test_exact_twelfths(self) -> None:
        """Точные кратные 1/12"""
        assert from_real(0.5) == Fraction.of(0, 6)
        assert from_real(-2.5) == Fraction.of(-2, -6)
        assert from_real(28.0) == Fraction.of(28, 0)
        assert from_real(0.0) == Fraction.of(0, 0)

    def test_nearest_twelfth(self) -> None:
        """Округление к ближайшей двенадцатой"""
        assert from_real(0.04) == Fraction.of(0, 0)
        assert from_real(0.05) == Fraction.of(0, 1)
        assert from_real(1.99) == Fraction.of(2, 0)
        assert from_real(-1.99) == Fraction.of(-2, 0)

    def test_ties_away_from_zero(self) -> None:
        """Половина двенадцатой округляется от нуля"""
        # 0.125 * 12 = 1.5; 0.375 * 12 = 4.5; 2.625 * 12 = 31.5 (точно в binary)
        assert from_real(0.125) == Fraction.of(0, 2)
        assert from_real(-0.125) == Fraction.of(0, -2)
        assert from_real(0.375) == Fraction.of(0, 5)
        assert from_real(2.625) == Fraction.of(2, 8)
        assert from_real(-2.625) == Fraction.of(-2, -8)

    def test_negative_zero(self) -> None:
        """Малые отрицательные значения дают чистый ноль"""
        result = from_real(-0.01)
        assert result == Fraction.of(0, 0)
        assert result.sign() == 0

    def test_domain_endpoints(self) -> None:
        """Концы домена отображаются на ±(3999999, 11)"""
        assert from_real(EXTENDED_MAX) == Fraction.of(EXTENDED_INT_MAX, 11)
        assert from_real(EXTENDED_MIN) == Fraction.of(EXTENDED_INT_MIN, -11)

    def test_rounding_band_maps_onto_endpoints(self) -> None:
        """Значения внутри полосы ±1/24 за концами округляются на концы"""
        assert from_real(EXTENDED_MAX + 0.02) == Fraction.of(EXTENDED_INT_MAX, 11)
        assert from_real(EXTENDED_MIN - 0.02) == Fraction.of(EXTENDED_INT_MIN, -11)

    def test_band_edge_is_inclusive(self) -> None:
        """Край полосы округления (ничья) прижимается к концу домена"""
        edge = EXTENDED_MAX + ROUNDING_MARGIN
        assert from_real(edge) == Fraction.of(EXTENDED_INT_MAX, 11)
        assert from_real(-edge) == Fraction.of(EXTENDED_INT_MIN, -11)

    def test_outside_band_rejected(self) -> None:
        """За полосой округления → OutOfRange"""
        with pytest.raises(OutOfRangeError):
            from_real(EXTENDED_MAX + 1.0 / 24 + 1e-6)
        with pytest.raises(OutOfRangeError):
            from_real(EXTENDED_MIN - 1.0 / 24 - 1e-6)
        with pytest.raises(OutOfRangeError):
            from_real(1e12)

    def test_not_finite(self) -> None:
        """NaN и ±inf → NotFinite"""
        for value in (math.nan, math.inf, -math.inf):
            with pytest.raises(NotFiniteError):
                from_real(value)

    def test_none_rejected(self) -> None:
        """None → NullReal"""
        with pytest.raises(NullRealError):
            from_real(None)

    def test_round_trip_on_twelfth_grid(self) -> None:
        """from_real(to_real(f)) == f для canonical f"""
        samples = [Fraction.of(EXTENDED_INT_MAX, 11), Fraction.of(EXTENDED_INT_MIN, -11)]
        for int_part in range(EXTENDED_INT_MIN, EXTENDED_INT_MAX + 1, 39_119):
            twelfths = abs(int_part) % 12
            samples.append(Fraction.of(int_part, -twelfths if int_part < 0 else twelfths))
        for twelfths in range(-11, 12):
            samples.append(Fraction.of(0, twelfths))
        for fraction in samples:
            assert from_real(to_real(fraction)) == fraction
