"""
Codec: encoder, parser и инспекторы numeral.

Status API (caller buffer / allocating variants) — в numerus.codec.buffer.
"""

from numerus.codec.encoder import (
    extended_to_roman,
    fraction_to_roman,
    real_to_roman,
    to_roman,
)
from numerus.codec.inspectors import (
    contains_extended_characters,
    count_roman_chars,
    is_basic_numeral,
    is_zero,
    sign,
)
from numerus.codec.parser import (
    NumeralParser,
    ParseResult,
    ParserState,
    parse_fraction,
    parse_int,
    parse_real,
)

__all__ = [
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
]
