"""
Buffer Contract — status API поверх функционального API

Два вида writer-операций:
- *_into(buffer, ...): запись ASCII numeral + '\\0' в caller bytearray
  (None buffer → Null* статус без записи; при ошибке buffer[0] = 0)
- *_alloc(slot, ...): новая строка в NumeralSlot.value
  (None slot → Null* статус; при ошибке slot не меняется)

Reader-операции *_status возвращают (ErrorKind, значение); при ошибке
значение равно нулю своего типа.

Ни одна операция модуля не выбрасывает NumerusError: каждая возвращает
ровно один ErrorKind.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from numerus.codec.encoder import fraction_to_roman, real_to_roman, to_roman
from numerus.codec.parser import parse_fraction, parse_int, parse_real
from numerus.core.errors import ErrorKind, NumerusError
from numerus.core.fraction import Fraction
from numerus.fmt.formatting import fmt_fraction, fmt_overlined

logger = logging.getLogger(__name__)

TERMINATOR = b"\0"


@dataclass
class NumeralSlot:
    """Изменяемый слот для результата allocating variant."""

    value: Optional[str] = None


# =============================================================================
# INTERNALS
# =============================================================================


def _write_into(
    buffer: Optional[bytearray],
    null_kind: ErrorKind,
    produce: Callable[[], str],
) -> ErrorKind:
    if buffer is None:
        return null_kind
    try:
        text = produce()
    except NumerusError as e:
        if len(buffer) > 0:
            buffer[0] = 0
        return e.kind
    data = text.encode("ascii") + TERMINATOR
    buffer[0:len(data)] = data
    return ErrorKind.OK


def _write_alloc(
    slot: Optional[NumeralSlot],
    null_kind: ErrorKind,
    produce: Callable[[], str],
) -> ErrorKind:
    if slot is None:
        return null_kind
    try:
        text = produce()
    except MemoryError:
        logger.warning("Allocation of the result string failed")
        return ErrorKind.ALLOCATION_FAILURE
    except NumerusError as e:
        return e.kind
    slot.value = text
    return ErrorKind.OK


# =============================================================================
# ENCODER WRITERS
# =============================================================================


def to_roman_into(buffer: Optional[bytearray], value: Optional[int]) -> ErrorKind:
    """
    Классический numeral в caller buffer (минимум BASIC_MAX_LEN_WITH_TERM байт).

    Examples:
        >>> buf = bytearray(17)
        >>> to_roman_into(buf, 14)
        <ErrorKind.OK: 'OK'>
        >>> bytes(buf[:4])
        b'XIV\\x00'
    """
    return _write_into(buffer, ErrorKind.NULL_NUMERAL, lambda: to_roman(value))


def to_roman_alloc(slot: Optional[NumeralSlot], value: Optional[int]) -> ErrorKind:
    return _write_alloc(slot, ErrorKind.NULL_NUMERAL, lambda: to_roman(value))


def fraction_to_roman_into(
    buffer: Optional[bytearray], fraction: Optional[Fraction]
) -> ErrorKind:
    """Extended numeral в caller buffer (минимум EXTENDED_MAX_LEN_WITH_TERM байт)."""
    return _write_into(buffer, ErrorKind.NULL_NUMERAL, lambda: fraction_to_roman(fraction))


def fraction_to_roman_alloc(
    slot: Optional[NumeralSlot], fraction: Optional[Fraction]
) -> ErrorKind:
    return _write_alloc(slot, ErrorKind.NULL_NUMERAL, lambda: fraction_to_roman(fraction))


def real_to_roman_into(buffer: Optional[bytearray], value: Optional[float]) -> ErrorKind:
    return _write_into(buffer, ErrorKind.NULL_NUMERAL, lambda: real_to_roman(value))


def real_to_roman_alloc(slot: Optional[NumeralSlot], value: Optional[float]) -> ErrorKind:
    return _write_alloc(slot, ErrorKind.NULL_NUMERAL, lambda: real_to_roman(value))


# =============================================================================
# FORMATTER WRITERS
# =============================================================================


def fmt_overlined_into(
    buffer: Optional[bytearray], numeral: Optional[str], windows_eol: bool = False
) -> ErrorKind:
    """Overlined форма в caller buffer (минимум EXTENDED_OVERLINED_MAX_LEN_WITH_TERM)."""
    return _write_into(
        buffer, ErrorKind.NULL_FORMATTED, lambda: fmt_overlined(numeral, windows_eol)
    )


def fmt_overlined_alloc(
    slot: Optional[NumeralSlot], numeral: Optional[str], windows_eol: bool = False
) -> ErrorKind:
    return _write_alloc(
        slot, ErrorKind.NULL_FORMATTED, lambda: fmt_overlined(numeral, windows_eol)
    )


def fmt_fraction_into(
    buffer: Optional[bytearray], fraction: Optional[Fraction]
) -> ErrorKind:
    return _write_into(buffer, ErrorKind.NULL_FORMATTED, lambda: fmt_fraction(fraction))


def fmt_fraction_alloc(
    slot: Optional[NumeralSlot], fraction: Optional[Fraction]
) -> ErrorKind:
    return _write_alloc(slot, ErrorKind.NULL_FORMATTED, lambda: fmt_fraction(fraction))


# =============================================================================
# PARSER READERS
# =============================================================================


def parse_fraction_status(numeral: Optional[str]) -> Tuple[ErrorKind, Fraction]:
    """
    Разбор extended numeral со статусом вместо исключения.

    Returns:
        (ErrorKind.OK, Fraction) при успехе, (kind, Fraction(0, 0)) при ошибке
    """
    try:
        return ErrorKind.OK, parse_fraction(numeral)
    except NumerusError as e:
        return e.kind, Fraction(int_part=0, twelfths=0)


def parse_int_status(numeral: Optional[str]) -> Tuple[ErrorKind, int]:
    try:
        return ErrorKind.OK, parse_int(numeral)
    except NumerusError as e:
        return e.kind, 0


def parse_real_status(numeral: Optional[str]) -> Tuple[ErrorKind, float]:
    try:
        return ErrorKind.OK, parse_real(numeral)
    except NumerusError as e:
        return e.kind, 0.0
