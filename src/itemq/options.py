"""
Command line option scanning for itemq.

Recognised options:
    -h, --help       show usage
    -v, --version    show version
    --               end of options

Syntax Notes:
    - Short options may be bundled (-hv)
    - Everything that is not an option is an expression, in order
    - Empty arguments are ignored, except after --
    - Long options only match as a whole token; any other --name is
      scanned like a short option bundle and fails on the second dash
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


END_OF_OPTIONS = "--"

SHORT_OPTIONS = {
    "h": "help",
    "v": "version",
}

LONG_OPTIONS = {
    "--help": "help",
    "--version": "version",
}


class InvalidOptionError(ValueError):
    """Raised when an argument contains an unknown option character."""

    def __init__(self, option: str, token: str):
        self.option = option
        self.token = token
        super().__init__(f"invalid option -{option}")


@dataclass(frozen=True)
class ParsedOptions:
    """
    Result of scanning the command line.

    Properties:
        help: True if usage should be printed
        version: True if the version line should be printed
        expressions: Expressions in execution order
    """

    help: bool = False
    version: bool = False
    expressions: Tuple[str, ...] = ()


def _scan_bundle(token: str, flags: dict) -> None:
    """Apply every character after the leading dash as a short option."""
    for char in token[1:]:
        name = SHORT_OPTIONS.get(char)
        if name is None:
            raise InvalidOptionError(char, token)
        flags[name] = True


def parse_options(args: Iterable[str]) -> ParsedOptions:
    """
    Scan arguments left to right and split flags from expressions.

    Args:
        args: Process arguments, without the program name

    Returns:
        ParsedOptions with the flags set and the remaining expressions

    Raises:
        InvalidOptionError: If a short option bundle has an unknown character
    """
    flags = {"help": False, "version": False}
    expressions: List[str] = []

    remaining = list(args)
    for pos, arg in enumerate(remaining):
        if not arg:
            continue

        if arg == END_OF_OPTIONS:
            expressions.extend(remaining[pos + 1:])
            break

        if arg in LONG_OPTIONS:
            flags[LONG_OPTIONS[arg]] = True
            continue

        # A lone "-" is an expression, not an option
        if len(arg) > 1 and arg[0] == "-":
            _scan_bundle(arg, flags)
            continue

        expressions.append(arg)

    return ParsedOptions(
        help=flags["help"],
        version=flags["version"],
        expressions=tuple(expressions),
    )


__all__ = [
    "parse_options",
    "ParsedOptions",
    "InvalidOptionError",
]
