"""
Parser — Roman numeral → значение

Конечный автомат с явными состояниями:
START → (SIGN) → (VINCULUM_OPEN → VINCULUM_BODY → VINCULUM_CLOSE →
POST_VINCULUM_BODY | INTEGER_BODY) → (FRACTION_BODY) → END

Каждое body-состояние ведёт курсор по DICTIONARY:
- совпадение: счётчик повторов +1 (превышение max_consecutive → INVALID_SYNTAX),
  строка сдвигается на длину лексемы, вес добавляется к int или twelfths
- несовпадение: курсор переходит к следующему токену; sentinel → INVALID_SYNTAX

Переходы между состояниями определяются lookahead-символом:
'_', 'S'/'s', '.', '-', 'M' (после vinculum) и концом строки.

При ошибке результат не возвращается: выбрасывается ровно одно исключение
NumerusError с соответствующим ErrorKind.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, NoReturn, Optional, Type

from numerus.core.constants import (
    MINUS_CHAR,
    VINCULUM_CHAR,
    VINCULUM_FACTOR,
    WHITESPACE,
    ZERO_NUMERAL,
)
from numerus.core.dictionary import (
    DICTIONARY,
    INDEX_CM,
    INDEX_M,
    INDEX_S,
    matches,
    skip_after_unique,
)
from numerus.core.errors import (
    EmptyNumeralError,
    EmptyVinculumError,
    InvalidSyntaxError,
    MAfterVinculumError,
    NonTerminatedVinculumError,
    NullNumeralError,
    NumerusError,
    UnexpectedTwelfthsError,
)
from numerus.core.fraction import Fraction, normalize, to_real

logger = logging.getLogger(__name__)


class ParserState(str, Enum):
    """Состояние конечного автомата парсера."""

    START = "START"
    SIGN = "SIGN"
    VINCULUM_OPEN = "VINCULUM_OPEN"
    VINCULUM_BODY = "VINCULUM_BODY"
    VINCULUM_CLOSE = "VINCULUM_CLOSE"
    POST_VINCULUM_BODY = "POST_VINCULUM_BODY"
    INTEGER_BODY = "INTEGER_BODY"
    FRACTION_BODY = "FRACTION_BODY"
    END = "END"


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора numeral."""

    fraction: Fraction
    has_vinculum: bool
    has_twelfths: bool
    final_state: ParserState

    @property
    def is_extended(self) -> bool:
        return self.has_vinculum or self.has_twelfths


# Стоп-символы body-состояний (сравнение в верхнем регистре)
_VINCULUM_STOPS: FrozenSet[str] = frozenset({VINCULUM_CHAR, "S", ".", MINUS_CHAR})
_INTEGER_STOPS: FrozenSet[str] = frozenset({VINCULUM_CHAR, "S", ".", MINUS_CHAR})
_POST_VINCULUM_STOPS: FrozenSet[str] = _INTEGER_STOPS | {"M"}
_FRACTION_STOPS: FrozenSet[str] = frozenset({VINCULUM_CHAR, MINUS_CHAR})


class NumeralParser:
    """
    Однопроходный парсер одного numeral.

    Экземпляр одноразовый: состояние курсора живёт только внутри run().

    Args:
        numeral: Входная строка (case-insensitive, ведущие пробелы пропускаются)
        allow_twelfths: False для целочисленного назначения: 'S' и '.'
            дают UNEXPECTED_TWELFTHS
    """

    def __init__(self, numeral: Optional[str], allow_twelfths: bool = True):
        self.numeral = numeral
        self.allow_twelfths = allow_twelfths

        self._text = ""
        self._position = 0
        self._index = INDEX_M
        self._repetitions = 0
        self._int_part = 0
        self._twelfths = 0
        self._state = ParserState.START

    # -------------------------------------------------------------------------
    # Driver
    # -------------------------------------------------------------------------

    def run(self) -> ParseResult:
        """
        Разбор numeral.

        Returns:
            ParseResult с canonical Fraction

        Raises:
            NullNumeralError: Если numeral is None
            EmptyNumeralError: Пустая строка, только пробелы или только '-'
            InvalidSyntaxError: Порядок, повторы, неизвестные символы, знак
            NonTerminatedVinculumError: Нет закрывающего '_'
            EmptyVinculumError: "__"
            MAfterVinculumError: 'M' после vinculum
            UnexpectedTwelfthsError: 'S' / '.' вне дробной части
        """
        if self.numeral is None:
            raise NullNumeralError()

        self._text = self.numeral.lstrip(WHITESPACE)
        if not self._text:
            self._fail(EmptyNumeralError, "numeral is empty")
        zero_spellings = (ZERO_NUMERAL, MINUS_CHAR + ZERO_NUMERAL)
        if self._text.isascii() and self._text.upper() in zero_spellings:
            return ParseResult(
                fraction=Fraction(int_part=0, twelfths=0),
                has_vinculum=False,
                has_twelfths=False,
                final_state=ParserState.END,
            )

        sign = 1
        if self._text[0] == MINUS_CHAR:
            sign = -1
            self._position = 1
            self._state = ParserState.SIGN
            if self._at_end():
                self._fail(EmptyNumeralError, "numeral is only a sign")

        has_vinculum = self._peek() == VINCULUM_CHAR
        if has_vinculum:
            self._parse_vinculum()
            self._parse_integer(ParserState.POST_VINCULUM_BODY, _POST_VINCULUM_STOPS)
        else:
            self._parse_integer(ParserState.INTEGER_BODY, _INTEGER_STOPS)

        has_twelfths = not self._at_end()
        if has_twelfths:
            self._parse_fraction()
        self._state = ParserState.END

        fraction = normalize(
            Fraction(int_part=sign * self._int_part, twelfths=sign * self._twelfths)
        )
        logger.debug("Parsed %r as %s", self.numeral, fraction)
        return ParseResult(
            fraction=fraction,
            has_vinculum=has_vinculum,
            has_twelfths=has_twelfths,
            final_state=self._state,
        )

    # -------------------------------------------------------------------------
    # Body states
    # -------------------------------------------------------------------------

    def _parse_vinculum(self) -> None:
        self._state = ParserState.VINCULUM_OPEN
        self._position += 1

        self._state = ParserState.VINCULUM_BODY
        body_start = self._position
        stop = self._consume(_VINCULUM_STOPS)
        if stop is None:
            self._fail(NonTerminatedVinculumError, "vinculum is not closed")
        if stop in ("S", "."):
            self._fail(UnexpectedTwelfthsError, "twelfths inside the vinculum")
        if stop == MINUS_CHAR:
            self._fail(InvalidSyntaxError, "minus inside the vinculum")
        if self._position == body_start:
            self._fail(EmptyVinculumError, "nothing between the underscores")

        self._state = ParserState.VINCULUM_CLOSE
        self._position += 1
        self._int_part *= VINCULUM_FACTOR
        self._index = INDEX_CM
        self._repetitions = 0

    def _parse_integer(self, state: ParserState, stops: FrozenSet[str]) -> None:
        self._state = state
        stop = self._consume(stops)
        if stop is None:
            return
        if stop == VINCULUM_CHAR:
            self._fail(InvalidSyntaxError, "misplaced or extra underscore")
        if stop == "M":
            self._fail(MAfterVinculumError, "M after the vinculum")
        if stop == MINUS_CHAR:
            self._fail(InvalidSyntaxError, "minus sign is not the first character")
        if not self.allow_twelfths:
            self._fail(UnexpectedTwelfthsError, "twelfths in an integer numeral")

    def _parse_fraction(self) -> None:
        self._state = ParserState.FRACTION_BODY
        if self._index < INDEX_S:
            self._index = INDEX_S
            self._repetitions = 0
        stop = self._consume(_FRACTION_STOPS)
        if stop == VINCULUM_CHAR:
            self._fail(InvalidSyntaxError, "underscore after the twelfths")
        if stop == MINUS_CHAR:
            self._fail(InvalidSyntaxError, "minus sign is not the first character")

    # -------------------------------------------------------------------------
    # Dictionary cursor
    # -------------------------------------------------------------------------

    def _consume(self, stops: FrozenSet[str]) -> Optional[str]:
        """Шаги курсора до стоп-символа; возвращает его или None в конце строки."""
        while not self._at_end():
            current = self._peek()
            if not current.isascii():
                self._fail(
                    InvalidSyntaxError,
                    f"non-ASCII character {current!r} at position {self._position}",
                )
            current = current.upper()
            if current in stops:
                return current
            self._step()
        return None

    def _step(self) -> None:
        token = DICTIONARY[self._index]
        length = matches(self._text, self._position, token)
        if length:
            self._repetitions += 1
            if self._repetitions > token.max_consecutive:
                self._fail(
                    InvalidSyntaxError,
                    f"'{token.lexeme}' repeated more than {token.max_consecutive} times",
                )
            self._position += length
            if self._index >= INDEX_S:
                self._twelfths += token.weight
            else:
                self._int_part += token.weight
            if token.is_unique:
                self._index = skip_after_unique(self._index)
                self._repetitions = 0
        else:
            self._repetitions = 0
            self._index += 1
            if DICTIONARY[self._index].is_sentinel:
                self._fail(
                    InvalidSyntaxError,
                    f"illegal character sequence at position {self._position}",
                )

    def _peek(self) -> str:
        return self._text[self._position]

    def _at_end(self) -> bool:
        return self._position >= len(self._text)

    def _fail(self, error: Type[NumerusError], reason: str) -> NoReturn:
        logger.debug(
            "Numeral %r rejected in state %s: %s", self.numeral, self._state.value, reason
        )
        raise error(f"Numeral {self.numeral!r}: {reason}")


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_fraction(numeral: Optional[str]) -> Fraction:
    """
    Extended numeral → canonical Fraction.

    Examples:
        >>> parse_fraction("-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....")
        Fraction(int_part=-3888888, twelfths=-11)
        >>> parse_fraction("nulla")
        Fraction(int_part=0, twelfths=0)
    """
    return NumeralParser(numeral).run().fraction


def parse_int(numeral: Optional[str]) -> int:
    """
    Целочисленный numeral (vinculum допустим) → int.

    Raises:
        UnexpectedTwelfthsError: Если numeral содержит 'S' или '.'
        NumerusError: Прочие синтаксические ошибки (см. NumeralParser.run)

    Examples:
        >>> parse_int("_MII_XVI")
        1002016
    """
    return NumeralParser(numeral, allow_twelfths=False).run().fraction.int_part


def parse_real(numeral: Optional[str]) -> float:
    """Extended numeral → float (int_part + twelfths / 12)."""
    return to_real(parse_fraction(numeral))
