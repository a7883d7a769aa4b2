"""
numerus — конвертация значений в Roman numerals и обратно.

Классические numeral [-3999, 3999], vinculum ('_..._' = x1000) до 3999999
и двенадцатые доли (S = 6/12, . = 1/12).
"""

from numerus.codec import (
    NumeralParser,
    ParseResult,
    ParserState,
    contains_extended_characters,
    count_roman_chars,
    extended_to_roman,
    fraction_to_roman,
    is_basic_numeral,
    is_zero,
    parse_fraction,
    parse_int,
    parse_real,
    real_to_roman,
    sign,
    to_roman,
)
from numerus.core import (
    DICTIONARY,
    ErrorKind,
    Fraction,
    NumerusError,
    Token,
    explain,
    from_real,
    normalize,
    to_real,
)
from numerus.core.constants import (
    BASIC_MAX,
    BASIC_MAX_LEN,
    BASIC_MAX_LEN_WITH_TERM,
    BASIC_MIN,
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX,
    EXTENDED_MAX_LEN,
    EXTENDED_MAX_LEN_WITH_TERM,
    EXTENDED_MIN,
    EXTENDED_OVERLINED_MAX_LEN,
    ZERO_NUMERAL,
)
from numerus.core.errors import (
    AllocationFailureError,
    EmptyNumeralError,
    EmptyVinculumError,
    InvalidSyntaxError,
    MAfterVinculumError,
    NonTerminatedVinculumError,
    NotFiniteError,
    NullFormattedError,
    NullFractionError,
    NullIntegerError,
    NullNumeralError,
    NullRealError,
    OutOfRangeError,
    UnexpectedTwelfthsError,
)
from numerus.fmt import FormatConfig, fmt_fraction, fmt_overlined, fmt_real_fraction
from numerus.codec.buffer import NumeralSlot

__version__ = "2.0.0"

__all__ = [
    # Value type
    "Fraction",
    "normalize",
    "to_real",
    "from_real",
    # Encoder
    "to_roman",
    "fraction_to_roman",
    "extended_to_roman",
    "real_to_roman",
    # Parser
    "NumeralParser",
    "ParseResult",
    "ParserState",
    "parse_fraction",
    "parse_int",
    "parse_real",
    # Inspectors
    "is_zero",
    "sign",
    "contains_extended_characters",
    "is_basic_numeral",
    "count_roman_chars",
    # Formatting
    "FormatConfig",
    "fmt_overlined",
    "fmt_fraction",
    "fmt_real_fraction",
    # Buffer contract
    "NumeralSlot",
    # Dictionary
    "Token",
    "DICTIONARY",
    # Errors
    "ErrorKind",
    "explain",
    "NumerusError",
    "NullNumeralError",
    "NullFractionError",
    "NullRealError",
    "NullIntegerError",
    "NullFormattedError",
    "OutOfRangeError",
    "NotFiniteError",
    "EmptyNumeralError",
    "InvalidSyntaxError",
    "NonTerminatedVinculumError",
    "EmptyVinculumError",
    "MAfterVinculumError",
    "UnexpectedTwelfthsError",
    "AllocationFailureError",
    # Constants
    "ZERO_NUMERAL",
    "BASIC_MIN",
    "BASIC_MAX",
    "EXTENDED_INT_MIN",
    "EXTENDED_INT_MAX",
    "EXTENDED_MIN",
    "EXTENDED_MAX",
    "BASIC_MAX_LEN",
    "BASIC_MAX_LEN_WITH_TERM",
    "EXTENDED_MAX_LEN",
    "EXTENDED_MAX_LEN_WITH_TERM",
    "EXTENDED_OVERLINED_MAX_LEN",
]
