"""
Error Taxonomy — классификация ошибок конвертации

Единая закрытая таксономия ошибок для encoder, parser, rational core и
buffer contract. Две формы одной и той же информации:

- ErrorKind: статус-код (str Enum) для status API (numerus.codec.buffer)
- NumerusError и подклассы: исключения функционального API

Каждая ошибка функционального API несёт ровно один ErrorKind в атрибуте kind.
Никакого глобального "last error" состояния нет.
"""

from enum import Enum
from typing import Dict, Final, Type


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Статус операции (исчерпывающий, непересекающийся набор)."""

    OK = "OK"

    # Отсутствует обязательный аргумент
    NULL_NUMERAL = "NULL_NUMERAL"
    NULL_FRACTION = "NULL_FRACTION"
    NULL_REAL = "NULL_REAL"
    NULL_INTEGER = "NULL_INTEGER"
    NULL_FORMATTED = "NULL_FORMATTED"

    # Значения
    OUT_OF_RANGE = "OUT_OF_RANGE"
    NOT_FINITE = "NOT_FINITE"

    # Синтаксис numeral
    EMPTY_NUMERAL = "EMPTY_NUMERAL"
    INVALID_SYNTAX = "INVALID_SYNTAX"
    NON_TERMINATED_VINCULUM = "NON_TERMINATED_VINCULUM"
    EMPTY_VINCULUM = "EMPTY_VINCULUM"
    M_AFTER_VINCULUM = "M_AFTER_VINCULUM"
    UNEXPECTED_TWELFTHS = "UNEXPECTED_TWELFTHS"

    # Allocating variant
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"


_MESSAGES: Final[Dict[ErrorKind, str]] = {
    ErrorKind.OK: "Everything went all right.",
    ErrorKind.NULL_NUMERAL: "The numeral or numeral buffer is missing.",
    ErrorKind.NULL_FRACTION: "The fraction is missing.",
    ErrorKind.NULL_REAL: "The real value is missing.",
    ErrorKind.NULL_INTEGER: "The integer value is missing.",
    ErrorKind.NULL_FORMATTED: "The formatted-string destination is missing.",
    ErrorKind.OUT_OF_RANGE: (
        "The value is outside the range of values representable as a Roman numeral."
    ),
    ErrorKind.NOT_FINITE: "The real value is NaN or infinite.",
    ErrorKind.EMPTY_NUMERAL: "The numeral is empty or contains only whitespace or a sign.",
    ErrorKind.INVALID_SYNTAX: (
        "The numeral has an illegal character, a misplaced sign "
        "or its characters are in the wrong order or repeated too many times."
    ),
    ErrorKind.NON_TERMINATED_VINCULUM: "The vinculum was opened but never closed.",
    ErrorKind.EMPTY_VINCULUM: "The vinculum has no characters between the underscores.",
    ErrorKind.M_AFTER_VINCULUM: "The character M appears after the vinculum.",
    ErrorKind.UNEXPECTED_TWELFTHS: (
        "The twelfths characters S or . appear outside the trailing fractional part."
    ),
    ErrorKind.ALLOCATION_FAILURE: "Memory for the result could not be allocated.",
}


def explain(kind: ErrorKind) -> str:
    """
    Человекочитаемое описание статуса.

    Args:
        kind: ErrorKind

    Returns:
        Фиксированное сообщение на английском (используется в CLI)
    """
    return _MESSAGES[kind]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumerusError(ValueError):
    """Базовое исключение конвертации; kind определяет тип ошибки."""

    kind: ErrorKind = ErrorKind.INVALID_SYNTAX

    def __init__(self, message: str = ""):
        super().__init__(message or explain(self.kind))


class NullNumeralError(NumerusError):
    """Numeral (или буфер для него) отсутствует."""

    kind = ErrorKind.NULL_NUMERAL


class NullFractionError(NumerusError):
    """Fraction отсутствует."""

    kind = ErrorKind.NULL_FRACTION


class NullRealError(NumerusError):
    """Вещественное значение отсутствует."""

    kind = ErrorKind.NULL_REAL


class NullIntegerError(NumerusError):
    """Целое значение отсутствует."""

    kind = ErrorKind.NULL_INTEGER


class NullFormattedError(NumerusError):
    """Назначение форматированной строки отсутствует."""

    kind = ErrorKind.NULL_FORMATTED


class OutOfRangeError(NumerusError):
    """Значение вне домена компонента."""

    kind = ErrorKind.OUT_OF_RANGE


class NotFiniteError(NumerusError):
    """Вещественное значение NaN или бесконечно."""

    kind = ErrorKind.NOT_FINITE


class EmptyNumeralError(NumerusError):
    """Пустая строка, только whitespace и/или одиночный знак."""

    kind = ErrorKind.EMPTY_NUMERAL


class InvalidSyntaxError(NumerusError):
    """Порядок, повторения, неизвестные символы или неверный знак."""

    kind = ErrorKind.INVALID_SYNTAX


class NonTerminatedVinculumError(NumerusError):
    """'_' открыт без закрывающего '_'."""

    kind = ErrorKind.NON_TERMINATED_VINCULUM


class EmptyVinculumError(NumerusError):
    """Между подчёркиваниями нет символов."""

    kind = ErrorKind.EMPTY_VINCULUM


class MAfterVinculumError(NumerusError):
    """'M' в целой части после vinculum."""

    kind = ErrorKind.M_AFTER_VINCULUM


class UnexpectedTwelfthsError(NumerusError):
    """'S' или '.' вне завершающей дробной части."""

    kind = ErrorKind.UNEXPECTED_TWELFTHS


class AllocationFailureError(NumerusError):
    """Не удалось выделить память под результат."""

    kind = ErrorKind.ALLOCATION_FAILURE


_EXCEPTIONS: Final[Dict[ErrorKind, Type[NumerusError]]] = {
    cls.kind: cls
    for cls in (
        NullNumeralError,
        NullFractionError,
        NullRealError,
        NullIntegerError,
        NullFormattedError,
        OutOfRangeError,
        NotFiniteError,
        EmptyNumeralError,
        InvalidSyntaxError,
        NonTerminatedVinculumError,
        EmptyVinculumError,
        MAfterVinculumError,
        UnexpectedTwelfthsError,
        AllocationFailureError,
    )
}


def error_for(kind: ErrorKind, message: str = "") -> NumerusError:
    """
    Экземпляр исключения для заданного ErrorKind.

    Raises:
        ValueError: Если kind == ErrorKind.OK (это не ошибка)
    """
    if kind is ErrorKind.OK:
        raise ValueError("ErrorKind.OK has no exception counterpart")
    return _EXCEPTIONS[kind](message)
