"""
Command line interface of numerus.

One-shot conversion of arguments:

    numerus [--pretty] [--json] [-v] TOKEN...

or, without tokens, an interactive shell (REPL). A token that looks like a
decimal number is converted to a Roman numeral, anything else is parsed as
a numeral and printed as a value.
"""

import argparse
import json
import logging
import os
import re
import sys
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, TextIO

from numerus import __version__
from numerus.codec.encoder import fraction_to_roman
from numerus.codec.parser import parse_fraction
from numerus.contracts import ConversionRecord, Direction, validate_conversion_record
from numerus.core.errors import NumerusError
from numerus.core.fraction import Fraction, from_real
from numerus.fmt.formatting import FormatConfig, fmt_fraction, fmt_overlined

logger = logging.getLogger(__name__)

PRETTY_ENV_VAR = "NUMERUS_PRETTY"
_TRUTHY = {"1", "true", "yes", "on"}

# Десятичное число: целое или с дробной частью через '.' или ','
_NUMBER_RE = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)([eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReplConfig:
    """
    Конфигурация CLI.

    pretty — numeral с vinculum печатаются overlined, значения как дроби.
    Значение по умолчанию берётся из переменной окружения NUMERUS_PRETTY.
    """

    pretty: bool = False
    prompt: str = "numerus> "
    windows_eol: bool = False

    @classmethod
    def from_env(cls) -> "ReplConfig":
        pretty = os.getenv(PRETTY_ENV_VAR, "").strip().lower() in _TRUTHY
        return cls(pretty=pretty)

    @property
    def format_config(self) -> FormatConfig:
        return FormatConfig(windows_eol=self.windows_eol)


# =============================================================================
# CONVERSION
# =============================================================================


def looks_like_number(token: str) -> bool:
    return bool(_NUMBER_RE.match(token.strip()))


def convert_token(token: str) -> ConversionRecord:
    """
    Конвертация одного токена в запись ConversionRecord.

    Число → numeral (to_numeral), всё остальное → значение (to_value).
    Ошибки конвертации не выбрасываются, а попадают в status записи.
    """
    text = token.strip()
    if looks_like_number(text):
        direction = Direction.TO_NUMERAL
        try:
            if _INTEGER_RE.match(text):
                fraction = Fraction(int_part=int(text), twelfths=0)
                numeral = fraction_to_roman(fraction)
            else:
                fraction = from_real(float(text.replace(",", ".")))
                numeral = fraction_to_roman(fraction)
        except NumerusError as e:
            logger.debug("Token %r not converted: %s", token, e)
            return ConversionRecord.failure(token, direction, e)
        return ConversionRecord.success(token, direction, numeral, fraction.normalized())

    direction = Direction.TO_VALUE
    try:
        fraction = parse_fraction(text)
    except NumerusError as e:
        logger.debug("Token %r not converted: %s", token, e)
        return ConversionRecord.failure(token, direction, e)
    return ConversionRecord.success(token, direction, fraction_to_roman(fraction), fraction)


def render_record(record: ConversionRecord, config: ReplConfig) -> str:
    """Текстовое представление записи для вывода в терминал."""
    if record.message is not None:
        return f"Error: {record.message}"
    fraction = Fraction(int_part=record.int_part, twelfths=record.twelfths)
    if record.direction is Direction.TO_NUMERAL:
        if config.pretty:
            return fmt_overlined(record.numeral, config=config.format_config)
        return record.numeral
    if config.pretty or fraction.twelfths == 0:
        return fmt_fraction(fraction)
    return repr(fraction.value)


# =============================================================================
# REPL
# =============================================================================

WELCOME_TEXT = (
    "+---------------+\n"
    "| N V M E R V S |\n"
    "+---------------+"
)

INFO_TEXT = (
    f"numerus {__version__}: conversion of values to Roman numerals and back.\n"
    "Supports negative numerals, the vinculum for values up to 3999999\n"
    "and twelfths (S = 6/12, . = 1/12)."
)

HELP_TEXT = (
    "To convert a number to a Roman numeral or vice versa, just type it\n"
    "and press enter. Other commands are:\n"
    "\n"
    "syntax        prints the rules of the Roman syntax\n"
    "pretty        toggles pretty printing (overlines and fractions)\n"
    "?, help       shows this help text\n"
    "info, about   shows version information\n"
    "exit, quit    ends this shell"
)

SYNTAX_TEXT = (
    "The structure of a numeral, in this order:\n"
    " * an optional minus '-'\n"
    " * optionally, a vinculum: '_' + numeral up to MMMCMXCIX + '_' (value x 1000)\n"
    " * 0-3 M (not after a vinculum)\n"
    " * 0-1 CM or 0-1 CD or ( 0-1 D and 0-3 C )\n"
    " * 0-1 XC or 0-1 XL or ( 0-1 L and 0-3 X )\n"
    " * 0-1 IX or 0-1 IV or ( 0-1 V and 0-3 I )\n"
    " * 0-1 S (6/12) and 0-5 '.' (1/12 each)\n"
    " * or \"NULLA\" instead of any other symbol."
)

QUIT_TEXT = "Vale!"


class Repl:
    """
    Интерактивная оболочка numerus.

    Состояние pretty printing живёт в экземпляре, а не в модуле.
    """

    def __init__(
        self,
        config: Optional[ReplConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.config = config or ReplConfig.from_env()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._commands: Dict[str, Callable[[], bool]] = {
            "?": self._help,
            "help": self._help,
            "info": self._info,
            "about": self._info,
            "syntax": self._syntax,
            "pretty": self._toggle_pretty,
            "ping": lambda: self._say("Pong."),
            "hello": lambda: self._say("Can you hear me?"),
            "ave": lambda: self._say("Ave tibi!"),
            "moo": lambda: self._say("This is not an easter egg."),
            "exit": self._quit,
            "quit": self._quit,
        }

    def run(self) -> int:
        """Цикл чтения команд до exit/quit или EOF. Возвращает exit status."""
        self._say(WELCOME_TEXT)
        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                self._say("")
                return 0
            if not line:
                return 0
            if not self.handle(line):
                return 0

    def handle(self, line: str) -> bool:
        """
        Обработка одной строки.

        Returns:
            False если оболочку нужно завершить
        """
        words = line.split()
        if not words:
            return True
        command = words[0].lower()
        if command in self._commands:
            return self._commands[command]()
        record = convert_token(words[0])
        self._say(render_record(record, self.config))
        return True

    def _say(self, text: str) -> bool:
        print(text, file=self.stdout)
        return True

    def _help(self) -> bool:
        return self._say(HELP_TEXT)

    def _info(self) -> bool:
        return self._say(INFO_TEXT)

    def _syntax(self) -> bool:
        return self._say(SYNTAX_TEXT)

    def _toggle_pretty(self) -> bool:
        self.config = replace(self.config, pretty=not self.config.pretty)
        state = "enabled" if self.config.pretty else "disabled"
        return self._say(f"Pretty printing is {state}.")

    def _quit(self) -> bool:
        self._say(QUIT_TEXT)
        return False


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numerus",
        description="Convert numbers to Roman numerals and Roman numerals to numbers.",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help=(
            "numbers or numerals to convert; put negative numerals after --; "
            "without tokens an interactive shell starts"
        ),
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=None,
        help=f"overline the vinculum and print values as fractions (env {PRETTY_ENV_VAR})",
    )
    parser.add_argument(
        "--windows-eol",
        action="store_true",
        help="use \\r\\n between the lines of an overlined numeral",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print one JSON conversion record per token",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Entry point console script `numerus`.

    Returns:
        0 если все токены сконвертированы, 1 если хотя бы один с ошибкой
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    stdout = stdout or sys.stdout

    config = ReplConfig.from_env()
    if args.pretty is not None:
        config = replace(config, pretty=args.pretty)
    config = replace(config, windows_eol=args.windows_eol)

    if not args.tokens:
        return Repl(config=config, stdout=stdout).run()

    exit_status = 0
    for token in args.tokens:
        record = convert_token(token)
        if record.message is not None:
            exit_status = 1
        if args.json:
            data = record.to_json_dict()
            validate_conversion_record(data)
            print(json.dumps(data, ensure_ascii=False), file=stdout)
        else:
            print(render_record(record, config), file=stdout)
    logger.info("Converted %d token(s), exit status %d", len(args.tokens), exit_status)
    return exit_status
