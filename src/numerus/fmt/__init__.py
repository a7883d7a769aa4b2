"""Formatting: overlined numeral и pretty-printer дробей."""

from numerus.fmt.formatting import (
    FormatConfig,
    fmt_fraction,
    fmt_overlined,
    fmt_real_fraction,
)

__all__ = [
    "FormatConfig",
    "fmt_overlined",
    "fmt_fraction",
    "fmt_real_fraction",
]
