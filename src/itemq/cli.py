"""
Command line entry point for itemq.

    echo '{"a": 1}' | itemq 'item["a"] += 1'

Exit codes:
    0  success, or usage/version shown
    1  bad option, unreadable input, failing expression, unprintable output
"""

import logging
import sys
from typing import List, Optional, TextIO

from itemq import __version__, config
from itemq.evaluator import Evaluator, PythonEvaluator
from itemq.options import InvalidOptionError, parse_options
from itemq.pipeline import PipelineError, run_pipeline


PROG = "itemq"

USAGE = f"""Usage: {PROG} [options] [--] [EXPRESSION...]
  -v              print the version number
  -h              show this message"""


def print_usage(stream: TextIO) -> None:
    print(USAGE, file=stream)


def print_version(stream: TextIO, evaluator: Evaluator) -> None:
    print(f"{PROG} {__version__} ({evaluator.name} {evaluator.version})", file=stream)


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """Send itemq log records to `stream` (stderr by default) at the configured level."""
    level = logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(PROG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run itemq and return the process exit code.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        stdin: Stream the document is read from
        stdout: Stream the document, usage and version are written to
        stderr: Stream diagnostics are written to
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    setup_logging(stderr)

    try:
        options = parse_options(argv)
    except InvalidOptionError as e:
        print(f"{PROG}: {e}", file=stderr)
        print(file=stderr)
        print_usage(stderr)
        return 1

    evaluator = PythonEvaluator(stdin, stdout)

    if options.help:
        print_usage(stdout)
        return 0

    if options.version:
        print_version(stdout, evaluator)
        return 0

    try:
        run_pipeline(options.expressions, evaluator)
    except PipelineError as e:
        print(f"{PROG}: {e}:", file=stderr)
        print(e.detail, file=stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
