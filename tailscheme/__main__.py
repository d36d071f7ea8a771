"""Command line entry point.

Reads one expression from standard input (or a file), prints it, evaluates it
in the primitive environment and prints the result. Any fault stops the run
with a message on stderr and exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from tailscheme import __version__
from tailscheme.config import log_level_from_env
from tailscheme.errors import SchemeError, SchemeSyntaxError
from tailscheme.interpreter import Interpreter
from tailscheme.printer import render
from tailscheme.reader.parser import lex, TokenStream
from tailscheme.runtime_context import set_output

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tailscheme",
        description="Evaluate a tail-call-eliminating Scheme subset.",
    )
    parser.add_argument("file", nargs="?", help="source file (default: standard input)")
    parser.add_argument("--all", action="store_true", help="evaluate every expression, not just the first")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: $TAILSCHEME_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(source: str, out: TextIO, evaluate_all: bool = False) -> None:
    """Print each expression read and its value; only the first unless `evaluate_all`."""
    interp = Interpreter()
    stream = TokenStream(iter(lex(source)))
    count = 0
    while (expr := stream.parse_expr()) is not None:
        out.write(render(expr) + "\n")
        result = interp.eval_expr(expr)
        out.write(render(result) + "\n")
        count += 1
        if not evaluate_all:
            break
    if count == 0:
        raise SchemeSyntaxError("No expression in input")


def read_source(path: str | None) -> str:
    """Text of `path`, or of standard input when no path is given."""
    try:
        if path:
            with open(path, encoding="utf-8") as fh:
                return fh.read()
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        raise SchemeSyntaxError(f"Input is not valid UTF-8: {e.reason} at byte {e.start}") from e


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    level = log_level_from_env() if args.log_level is None else args.log_level
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    set_output(sys.stdout)
    try:
        run(read_source(args.file), sys.stdout, args.all)
    except SchemeError as e:
        sys.stdout.flush()
        logger.debug("evaluation failed", exc_info=True)
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        sys.stdout.flush()
        print("error: RecursionError: non-tail recursion too deep", file=sys.stderr)
        return 1
    finally:
        set_output(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
