"""
Formatting — печатные представления numeral и Fraction

- fmt_overlined: двухстрочная форма с настоящей чертой над vinculum
- fmt_fraction: "int" или "int, num/den" с сокращённой дробью двенадцатых
- fmt_real_fraction: то же для вещественного значения (через from_real)

Синтаксис numeral здесь не проверяется: функции работают с canonical формой,
которую выдаёт encoder.
"""

import math
from dataclasses import dataclass
from typing import Optional

from numerus.codec.inspectors import count_roman_chars
from numerus.core.constants import (
    EXTENDED_MAX_LEN,
    MINUS_CHAR,
    TWELVE,
    VINCULUM_CHAR,
    WHITESPACE,
)
from numerus.core.errors import (
    EmptyNumeralError,
    InvalidSyntaxError,
    NonTerminatedVinculumError,
    NullFractionError,
    NullNumeralError,
)
from numerus.core.fraction import Fraction, from_real, normalize


@dataclass(frozen=True)
class FormatConfig:
    """
    Конфигурация форматирования.

    windows_eol — разделитель строк "\\r\\n" вместо "\\n" в overlined форме.
    """

    windows_eol: bool = False

    @property
    def eol(self) -> str:
        return "\r\n" if self.windows_eol else "\n"


# =============================================================================
# OVERLINE
# =============================================================================


def fmt_overlined(
    numeral: Optional[str],
    windows_eol: bool = False,
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Numeral с vinculum → две строки: черта над vinculum и numeral без '_'.

    Numeral без '_' возвращается без изменений. Ведущие пробелы пропускаются.

    Args:
        numeral: Numeral (обычно выход encoder)
        windows_eol: Разделитель "\\r\\n" (игнорируется, если передан config)
        config: FormatConfig

    Returns:
        Форматированная строка, не длиннее 52 символов

    Raises:
        NullNumeralError: Если numeral is None
        EmptyNumeralError: Если numeral пуст
        NonTerminatedVinculumError: Ровно один '_'
        InvalidSyntaxError: Больше двух '_', недопустимый символ или
            numeral длиннее 36 символов

    Examples:
        >>> fmt_overlined("-_MM_CCCXXXIII")
        ' __\\n-MMCCCXXXIII'
        >>> fmt_overlined("_I_", windows_eol=True)
        '_\\r\\nI'
        >>> fmt_overlined("XII")
        'XII'
    """
    if numeral is None:
        raise NullNumeralError()
    config = config or FormatConfig(windows_eol=windows_eol)

    trimmed = numeral.lstrip(WHITESPACE)
    if not trimmed:
        raise EmptyNumeralError()
    if len(trimmed) > EXTENDED_MAX_LEN:
        raise InvalidSyntaxError(
            f"Numeral {numeral!r} longer than {EXTENDED_MAX_LEN} characters"
        )
    count_roman_chars(trimmed)

    underscores = trimmed.count(VINCULUM_CHAR)
    if underscores == 0:
        return trimmed
    if underscores == 1:
        raise NonTerminatedVinculumError(f"Numeral {numeral!r}: vinculum is not closed")
    if underscores > 2:
        raise InvalidSyntaxError(f"Numeral {numeral!r}: more than two underscores")

    opening = trimmed.index(VINCULUM_CHAR)
    closing = trimmed.index(VINCULUM_CHAR, opening + 1)
    padding = " " if trimmed.startswith(MINUS_CHAR) else ""
    overline = padding + VINCULUM_CHAR * (closing - opening - 1)
    return overline + config.eol + trimmed.replace(VINCULUM_CHAR, "")


# =============================================================================
# FRACTION PRETTY-PRINTER
# =============================================================================


def fmt_fraction(fraction: Optional[Fraction]) -> str:
    """
    Fraction → "int" или "int, num/den" (дробь сокращена, знак в числителе).

    Raises:
        NullFractionError: Если fraction is None
        OutOfRangeError: Если fraction не нормализуется в домен

    Examples:
        >>> fmt_fraction(Fraction.of(-3, 2))
        '-2, -5/6'
        >>> fmt_fraction(Fraction.of(28))
        '28'
        >>> fmt_fraction(Fraction.of(0, 6))
        '0, 1/2'
    """
    if fraction is None:
        raise NullFractionError()
    canonical = normalize(fraction)
    if canonical.twelfths == 0:
        return str(canonical.int_part)
    divisor = math.gcd(canonical.twelfths, TWELVE)
    numerator = canonical.twelfths // divisor
    denominator = TWELVE // divisor
    return f"{canonical.int_part}, {numerator}/{denominator}"


def fmt_real_fraction(value: Optional[float]) -> str:
    """Вещественное значение → fmt_fraction ближайшей двенадцатой."""
    return fmt_fraction(from_real(value))
