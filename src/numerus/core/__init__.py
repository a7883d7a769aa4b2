"""
Core: таблица токенов, рациональное значение в двенадцатых, таксономия ошибок.
"""

from numerus.core.dictionary import DICTIONARY, INDEX_CM, INDEX_M, INDEX_S, Token
from numerus.core.errors import ErrorKind, NumerusError, explain
from numerus.core.fraction import Fraction, from_real, normalize, to_real

__all__ = [
    # Dictionary
    "Token",
    "DICTIONARY",
    "INDEX_M",
    "INDEX_CM",
    "INDEX_S",
    # Errors
    "ErrorKind",
    "NumerusError",
    "explain",
    # Fraction
    "Fraction",
    "normalize",
    "to_real",
    "from_real",
]
