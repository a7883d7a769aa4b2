"""
Dictionary — упорядоченный алфавит римских токенов

Таблица общая для encoder (жадный проход) и parser (монотонный проход курсора).
Три сегмента:
1. Целый: M, CM, D, CD, C, XC, L, XL, X, IX, V, IV, I (веса в единицах)
2. Дробный: S (6/12), "." (1/12) (веса в двенадцатых)
3. Sentinel (вес 0): конец таблицы

Внутри сегмента веса строго убывают.
"""

from dataclasses import dataclass
from typing import Final, Tuple


@dataclass(frozen=True)
class Token:
    """Римский токен: лексема из 1-2 символов, вес и лимит повторов подряд."""

    lexeme: str
    weight: int
    max_consecutive: int

    @property
    def is_sentinel(self) -> bool:
        return self.max_consecutive == 0

    @property
    def is_unique(self) -> bool:
        """Токен допускается только один раз подряд (CM, D, CD, ..., S)."""
        return self.max_consecutive == 1


DICTIONARY: Final[Tuple[Token, ...]] = (
    Token("M", 1000, 3),
    Token("CM", 900, 1),
    Token("D", 500, 1),
    Token("CD", 400, 1),
    Token("C", 100, 3),
    Token("XC", 90, 1),
    Token("L", 50, 1),
    Token("XL", 40, 1),
    Token("X", 10, 3),
    Token("IX", 9, 1),
    Token("V", 5, 1),
    Token("IV", 4, 1),
    Token("I", 1, 3),
    Token("S", 6, 1),
    Token(".", 1, 5),
    Token("", 0, 0),
)

# Стартовые позиции курсора
INDEX_M: Final[int] = 0
INDEX_CM: Final[int] = 1
INDEX_S: Final[int] = 13
INDEX_SENTINEL: Final[int] = len(DICTIONARY) - 1


def matches(numeral: str, position: int, token: Token) -> int:
    """
    Длина совпадения лексемы токена в позиции numeral (case-insensitive).

    Args:
        numeral: Исходная строка
        position: Позиция в строке
        token: Токен словаря

    Returns:
        len(token.lexeme) при совпадении, 0 иначе (sentinel никогда не совпадает)
    """
    if token.is_sentinel:
        return 0
    candidate = numeral[position:position + len(token.lexeme)]
    if candidate.isascii() and candidate.upper() == token.lexeme:
        return len(token.lexeme)
    return 0


def skip_after_unique(index: int) -> int:
    """
    Позиция курсора после совпадения токена с max_consecutive == 1.

    Пропускаются все следующие уникальные токены того же слота, а после
    двухсимвольной субтрактивной пары ещё и повторяемый токен за ними.
    Так отвергаются "CDD", "CMC", "IXI", "XCX".

    Examples:
        >>> DICTIONARY[skip_after_unique(1)].lexeme   # после CM
        'XC'
        >>> DICTIONARY[skip_after_unique(2)].lexeme   # после D
        'C'
    """
    matched = DICTIONARY[index]
    index += 1
    while DICTIONARY[index].is_unique:
        index += 1
    if len(matched.lexeme) == 2:
        index += 1
    return index
