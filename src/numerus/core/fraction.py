"""
Rational Core — значение (int_part, twelfths) и его арифметика

Fraction — immutable Pydantic модель пары (целая часть, двенадцатые).
Любая пара целых допустима как вход; canonical форма требует
|twelfths| <= 11 и совпадения знаков, если обе части ненулевые.

Операции:
- normalize: перенос лишних двенадцатых в целую часть + выравнивание знаков
- to_real: int_part + twelfths / 12
- from_real: округление к ближайшей двенадцатой (half away from zero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление twelfths на 12 усекается к нулю, остаток сохраняет знак делимого
2. Концы домена ровно кратны 1/12: ±(3999999 + 11/12)
3. Полоса ±1/24 за концами домена принимается только from_real
"""

import math
from typing import Final, Optional, Tuple

from pydantic import BaseModel, Field

from numerus.core.constants import (
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX,
    ROUNDING_MARGIN,
    TWELFTHS_MAX,
    TWELVE,
)
from numerus.core.errors import (
    NotFiniteError,
    NullFractionError,
    NullRealError,
    OutOfRangeError,
)

# Модуль конца домена в двенадцатых: 3999999 * 12 + 11
_MAX_TOTAL_TWELFTHS: Final[int] = EXTENDED_INT_MAX * TWELVE + TWELFTHS_MAX


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное значение в двенадцатых долях.

    value = int_part + twelfths / 12

    Examples:
        >>> Fraction.of(-2, -10).value
        -2.8333333333333335
        >>> Fraction.of(10, 13).normalized()
        Fraction(int_part=11, twelfths=1)
    """

    int_part: int = Field(..., strict=True, description="Целая часть (со знаком)")
    twelfths: int = Field(..., strict=True, description="Двенадцатые доли (со знаком)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def of(cls, int_part: int, twelfths: int = 0) -> "Fraction":
        """Позиционный конструктор."""
        return cls(int_part=int_part, twelfths=twelfths)

    @property
    def value(self) -> float:
        return self.int_part + self.twelfths / TWELVE

    def is_canonical(self) -> bool:
        """
        Проверка canonical формы.

        Returns:
            True если |twelfths| <= 11, int_part в extended домене и знаки
            ненулевых частей совпадают
        """
        if abs(self.twelfths) > TWELFTHS_MAX:
            return False
        if not EXTENDED_INT_MIN <= self.int_part <= EXTENDED_INT_MAX:
            return False
        return self.int_part * self.twelfths >= 0

    def is_zero(self) -> bool:
        return self.int_part * TWELVE + self.twelfths == 0

    def sign(self) -> int:
        """Знак значения: -1, 0 или +1."""
        total = self.int_part * TWELVE + self.twelfths
        return (total > 0) - (total < 0)

    def normalized(self) -> "Fraction":
        return normalize(self)

    def __str__(self) -> str:
        return f"({self.int_part}, {self.twelfths})"


# =============================================================================
# NORMALIZATION
# =============================================================================


def _truncated_divmod(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Деление с усечением к нулю (остаток со знаком делимого).

    Examples:
        >>> _truncated_divmod(-25, 12)
        (-2, -1)
        >>> _truncated_divmod(25, 12)
        (2, 1)
    """
    quotient = abs(numerator) // denominator
    if numerator < 0:
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def normalize(fraction: Optional[Fraction]) -> Fraction:
    """
    Приведение Fraction к canonical форме.

    Лишние двенадцатые переносятся в целую часть (с усечением к нулю),
    затем знаки частей выравниваются.

    Args:
        fraction: Исходная пара (может быть не canonical)

    Returns:
        Canonical Fraction с тем же значением

    Raises:
        NullFractionError: Если fraction is None
        OutOfRangeError: Если целая часть результата вне [-3999999, 3999999]

    Examples:
        >>> normalize(Fraction.of(-3, 2))
        Fraction(int_part=-2, twelfths=-10)
        >>> normalize(Fraction.of(10, -25))
        Fraction(int_part=7, twelfths=11)
        >>> normalize(Fraction.of(0, -3))
        Fraction(int_part=0, twelfths=-3)
    """
    if fraction is None:
        raise NullFractionError()

    carry, twelfths = _truncated_divmod(fraction.twelfths, TWELVE)
    int_part = fraction.int_part + carry

    # Выравнивание знаков
    if int_part > 0 and twelfths < 0:
        int_part -= 1
        twelfths += TWELVE
    elif int_part < 0 and twelfths > 0:
        int_part += 1
        twelfths -= TWELVE

    if not EXTENDED_INT_MIN <= int_part <= EXTENDED_INT_MAX:
        raise OutOfRangeError(
            f"Normalized integer part {int_part} outside "
            f"[{EXTENDED_INT_MIN}, {EXTENDED_INT_MAX}]"
        )

    if int_part == fraction.int_part and twelfths == fraction.twelfths:
        return fraction
    return Fraction(int_part=int_part, twelfths=twelfths)


# =============================================================================
# REAL CONVERSIONS
# =============================================================================


def to_real(fraction: Optional[Fraction]) -> float:
    """
    Значение Fraction как float.

    Args:
        fraction: Пара (int_part, twelfths), приводимая к canonical форме

    Returns:
        int_part + twelfths / 12 после нормализации

    Raises:
        NullFractionError: Если fraction is None
        OutOfRangeError: Если пара не приводится к canonical форме в домене
    """
    canonical = normalize(fraction)
    return canonical.int_part + canonical.twelfths / TWELVE


def from_real(value: Optional[float]) -> Fraction:
    """
    Округление вещественного значения к ближайшей двенадцатой.

    Модуль |value| * 12 округляется half away from zero (floor(x + 0.5)),
    затем знак применяется к обеим частям.

    Args:
        value: Конечное вещественное значение

    Returns:
        Canonical Fraction, ближайшая к value

    Raises:
        NullRealError: Если value is None
        NotFiniteError: Если value NaN или ±inf
        OutOfRangeError: Если |value| > 3999999 + 11.5/12 (полоса замкнута:
            её край даёт конец домена)

    Examples:
        >>> from_real(0.5)
        Fraction(int_part=0, twelfths=6)
        >>> from_real(-0.125)
        Fraction(int_part=0, twelfths=-2)
        >>> from_real(1.0 / 25)
        Fraction(int_part=0, twelfths=0)
    """
    if value is None:
        raise NullRealError()
    if not math.isfinite(value):
        raise NotFiniteError(f"Real value {value} is not finite")

    magnitude = abs(value)
    if magnitude > EXTENDED_MAX + ROUNDING_MARGIN:
        raise OutOfRangeError(f"Real value {value} outside the representable range")

    # Полоса округления замкнута: ничья на её краю прижимается к концу домена
    total_twelfths = min(math.floor(magnitude * TWELVE + 0.5), _MAX_TOTAL_TWELFTHS)
    int_part, twelfths = divmod(total_twelfths, TWELVE)

    if value < 0:
        return Fraction(int_part=-int_part, twelfths=-twelfths)
    return Fraction(int_part=int_part, twelfths=twelfths)
