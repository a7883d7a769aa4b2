"""
Numerus constants — границы доменов и максимальные длины numeral.
"""

from typing import Final


# =============================================================================
# ДОМЕНЫ ЗНАЧЕНИЙ
# =============================================================================

# Классические numeral без vinculum и дробной части
BASIC_MAX: Final[int] = 3999
BASIC_MIN: Final[int] = -BASIC_MAX

# Целая часть extended numeral (с vinculum)
EXTENDED_INT_MAX: Final[int] = 3_999_999
EXTENDED_INT_MIN: Final[int] = -EXTENDED_INT_MAX

# Двенадцатые доли
TWELVE: Final[int] = 12
TWELFTHS_MAX: Final[int] = TWELVE - 1

# Полный рациональный домен: концы ровно кратны 1/12
EXTENDED_MAX: Final[float] = EXTENDED_INT_MAX + TWELFTHS_MAX / TWELVE
EXTENDED_MIN: Final[float] = -EXTENDED_MAX

# Полоса округления from_real: половина двенадцатой
ROUNDING_MARGIN: Final[float] = 0.5 / TWELVE

# Целая часть выше этого порога кодируется через vinculum
VINCULUM_THRESHOLD: Final[int] = BASIC_MAX
VINCULUM_FACTOR: Final[int] = 1000


# =============================================================================
# ЛЕКСИКА
# =============================================================================

ZERO_NUMERAL: Final[str] = "NULLA"
VINCULUM_CHAR: Final[str] = "_"
MINUS_CHAR: Final[str] = "-"
EXTENDED_CHARS: Final[frozenset] = frozenset("_S.")


# =============================================================================
# МАКСИМАЛЬНЫЕ ДЛИНЫ
# =============================================================================

# "-MMMDCCCLXXXVIII"
BASIC_MAX_LEN: Final[int] = 16
BASIC_MAX_LEN_WITH_TERM: Final[int] = BASIC_MAX_LEN + 1

# "-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS....."
EXTENDED_MAX_LEN: Final[int] = 36
EXTENDED_MAX_LEN_WITH_TERM: Final[int] = EXTENDED_MAX_LEN + 1

# " _______________\r\n-MMMDCCCLXXXVIIIDCCCLXXXVIIIS....."
EXTENDED_OVERLINED_MAX_LEN: Final[int] = 52
EXTENDED_OVERLINED_MAX_LEN_WITH_TERM: Final[int] = EXTENDED_OVERLINED_MAX_LEN + 1

# "-3999999, -11/12"
FRACTION_FMT_MAX_LEN: Final[int] = 16
FRACTION_FMT_MAX_LEN_WITH_TERM: Final[int] = FRACTION_FMT_MAX_LEN + 1

# Ведущие пробельные символы, пропускаемые парсером и инспекторами
WHITESPACE: Final[str] = " \t\n\r\x0b\x0c"
