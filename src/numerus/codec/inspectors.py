"""
Inspectors — быстрый анализ numeral без полного разбора

- is_zero / sign: предикаты без валидации остатка строки
- contains_extended_characters / is_basic_numeral: поиск '_', 'S', '.'
- count_roman_chars: число римских символов (проверка алфавита и длины)
"""

from typing import Final, FrozenSet, Optional

from numerus.core.constants import (
    EXTENDED_CHARS,
    EXTENDED_MAX_LEN,
    MINUS_CHAR,
    VINCULUM_CHAR,
    WHITESPACE,
    ZERO_NUMERAL,
)
from numerus.core.errors import EmptyNumeralError, InvalidSyntaxError, NullNumeralError

# Символы, учитываемые count_roman_chars (знак тоже считается)
_ROMAN_CHARS: Final[FrozenSet[str]] = frozenset("MDCLXVIS.") | {MINUS_CHAR}


def _prepare(numeral: Optional[str]) -> str:
    """None → NULL_NUMERAL; ведущие пробелы срезаются; пустая → EMPTY_NUMERAL."""
    if numeral is None:
        raise NullNumeralError()
    trimmed = numeral.lstrip(WHITESPACE)
    if not trimmed:
        raise EmptyNumeralError()
    return trimmed


def _is_zero_spelling(trimmed: str) -> bool:
    if trimmed.startswith(MINUS_CHAR):
        trimmed = trimmed[1:]
    return trimmed.isascii() and trimmed.upper() == ZERO_NUMERAL


def is_zero(numeral: Optional[str]) -> bool:
    """
    True если numeral равен "NULLA" или "-NULLA" (case-insensitive).

    None и пустая строка дают False.

    Examples:
        >>> is_zero("nulla")
        True
        >>> is_zero("  -NuLLa")
        True
        >>> is_zero("I")
        False
    """
    if numeral is None:
        return False
    return _is_zero_spelling(numeral.lstrip(WHITESPACE))


def sign(numeral: Optional[str]) -> int:
    """
    Знак numeral по первому непробельному символу, без валидации остатка.

    Returns:
        0 для нуля, None и пустой строки; -1 если первый символ '-'; +1 иначе
    """
    if numeral is None:
        return 0
    trimmed = numeral.lstrip(WHITESPACE)
    if not trimmed or _is_zero_spelling(trimmed):
        return 0
    return -1 if trimmed[0] == MINUS_CHAR else 1


def contains_extended_characters(numeral: str) -> bool:
    return any(char.isascii() and char.upper() in EXTENDED_CHARS for char in numeral)


def is_basic_numeral(numeral: Optional[str]) -> bool:
    """
    True если numeral не содержит символов расширения ('_', 'S', '.').

    Синтаксис не проверяется.

    Raises:
        NullNumeralError: Если numeral is None
        EmptyNumeralError: Если numeral пуст после пропуска пробелов
    """
    return not contains_extended_characters(_prepare(numeral))


def count_roman_chars(numeral: Optional[str]) -> int:
    """
    Число римских символов numeral (знак учитывается, '_' и пробелы нет).

    Синтаксис и значение не проверяются, только алфавит и длина.

    Args:
        numeral: Строка numeral

    Returns:
        Количество символов; 5 для "NULLA" / "-NULLA"

    Raises:
        NullNumeralError: Если numeral is None
        EmptyNumeralError: Если numeral пуст после пропуска пробелов
        InvalidSyntaxError: Недопустимый символ или больше 36 символов

    Examples:
        >>> count_roman_chars("-_MII_XVI")
        7
    """
    trimmed = _prepare(numeral)
    if _is_zero_spelling(trimmed):
        return len(ZERO_NUMERAL)

    found = 0
    for char in trimmed:
        if char.isascii() and char.upper() in _ROMAN_CHARS:
            found += 1
        elif char == VINCULUM_CHAR or char in WHITESPACE:
            continue
        else:
            raise InvalidSyntaxError(f"Illegal character {char!r} in numeral {numeral!r}")
        if found > EXTENDED_MAX_LEN:
            raise InvalidSyntaxError(
                f"Numeral {numeral!r} longer than {EXTENDED_MAX_LEN} characters"
            )
    return found
