"""
Encoder — значение → canonical Roman numeral

Детерминированный жадный encoder по таблице DICTIONARY:
1. Нормализация; (0, 0) → "NULLA"
2. Знак '-' и далее модули частей
3. |int_part| > 3999: '_' + (int // 1000 с M) + '_' + (int % 1000 с CM)
   иначе |int_part| с M
4. |twelfths| с S

После закрывающего '_' курсор стартует с CM: M после vinculum не
генерируется никогда (разбиение int / 1000 и int % 1000).
"""

import logging
from typing import List, Optional

from numerus.core.constants import (
    BASIC_MAX,
    BASIC_MIN,
    MINUS_CHAR,
    VINCULUM_CHAR,
    VINCULUM_FACTOR,
    VINCULUM_THRESHOLD,
    ZERO_NUMERAL,
)
from numerus.core.dictionary import DICTIONARY, INDEX_CM, INDEX_M, INDEX_S
from numerus.core.errors import NullFractionError, NullIntegerError, OutOfRangeError
from numerus.core.fraction import Fraction, from_real, normalize

logger = logging.getLogger(__name__)


# =============================================================================
# GREEDY SEGMENT ENCODING
# =============================================================================


def _encode_segment(value: int, start_index: int, parts: List[str]) -> None:
    """
    Жадное кодирование неотрицательного value начиная с DICTIONARY[start_index].

    Каждый токен эмитируется не более max_consecutive раз подряд, затем
    курсор переходит к следующему. Остановка на sentinel или value == 0.
    """
    index = start_index
    while value > 0:
        token = DICTIONARY[index]
        if token.is_sentinel:
            break
        repetitions = 0
        while value >= token.weight and repetitions < token.max_consecutive:
            parts.append(token.lexeme)
            value -= token.weight
            repetitions += 1
        index += 1


# =============================================================================
# PUBLIC API
# =============================================================================


def to_roman(value: Optional[int]) -> str:
    """
    Целое → классический Roman numeral (без vinculum).

    Args:
        value: Целое в [-3999, 3999]

    Returns:
        "NULLA" для 0, иначе numeral с ведущим '-' для отрицательных

    Raises:
        NullIntegerError: Если value is None
        TypeError: Если value не int (bool тоже отвергается)
        OutOfRangeError: Если value вне [-3999, 3999]

    Examples:
        >>> to_roman(2345)
        'MMCCCXLV'
        >>> to_roman(-4)
        '-IV'
    """
    if value is None:
        raise NullIntegerError()
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not BASIC_MIN <= value <= BASIC_MAX:
        logger.debug("Basic value %d rejected: out of range", value)
        raise OutOfRangeError(f"Value {value} outside [{BASIC_MIN}, {BASIC_MAX}]")
    if value == 0:
        return ZERO_NUMERAL

    parts: List[str] = []
    if value < 0:
        parts.append(MINUS_CHAR)
    _encode_segment(abs(value), INDEX_M, parts)
    return "".join(parts)


def fraction_to_roman(fraction: Optional[Fraction]) -> str:
    """
    Fraction → canonical extended Roman numeral.

    Args:
        fraction: Пара (int_part, twelfths), приводимая к canonical форме

    Returns:
        Canonical numeral, не длиннее 36 символов

    Raises:
        NullFractionError: Если fraction is None
        OutOfRangeError: Если нормализованное значение вне домена

    Examples:
        >>> fraction_to_roman(Fraction.of(1002016))
        '_MII_XVI'
        >>> fraction_to_roman(Fraction.of(3900001, 3))
        '_MMMCM_I...'
    """
    if fraction is None:
        raise NullFractionError()
    canonical = normalize(fraction)
    if canonical.int_part == 0 and canonical.twelfths == 0:
        return ZERO_NUMERAL

    parts: List[str] = []
    if canonical.sign() < 0:
        parts.append(MINUS_CHAR)
    int_part = abs(canonical.int_part)
    twelfths = abs(canonical.twelfths)

    if int_part > VINCULUM_THRESHOLD:
        parts.append(VINCULUM_CHAR)
        _encode_segment(int_part // VINCULUM_FACTOR, INDEX_M, parts)
        parts.append(VINCULUM_CHAR)
        _encode_segment(int_part % VINCULUM_FACTOR, INDEX_CM, parts)
    else:
        _encode_segment(int_part, INDEX_M, parts)
    _encode_segment(twelfths, INDEX_S, parts)
    return "".join(parts)


def extended_to_roman(int_part: int, twelfths: int = 0) -> str:
    """Пара целых → canonical extended numeral (обёртка над fraction_to_roman)."""
    return fraction_to_roman(Fraction(int_part=int_part, twelfths=twelfths))


def real_to_roman(value: Optional[float]) -> str:
    """
    Вещественное значение → extended numeral, округлённое к ближайшей 1/12.

    Raises:
        NullRealError: Если value is None
        NotFiniteError: Если value NaN или ±inf
        OutOfRangeError: Если value вне домена с учётом полосы округления

    Examples:
        >>> real_to_roman(-2.5)
        '-IIS'
    """
    return fraction_to_roman(from_real(value))
