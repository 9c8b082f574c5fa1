"""Command line runner: `tatu [options] FILE`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from tatu import __version__
from tatu.config import get_log_level
from tatu.debug_utils.pprint import format_banner, format_error, format_program, format_token
from tatu.errors import TatuError
from tatu.interpreter import Interpreter
from tatu.reader.builder import ProgramBuilder
from tatu.types.value import to_display


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tatu",
        description="Tatu - a small S-expression language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s script.tatu                 # Run a script
  %(prog)s --print-ast script.tatu     # Show the parsed program first
  NO_COLOR=1 %(prog)s script.tatu      # Plain output
        """,
    )
    parser.add_argument("file", help="Tatu source file to execute")
    parser.add_argument("--print-tokens", action="store_true", help="print the scanned tokens")
    parser.add_argument("--print-ast", action="store_true", help="print the parsed program")
    parser.add_argument("--no-info", action="store_true", help="do not print the running banner")
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $TATU_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        tokens, program = ProgramBuilder().build_from_file(args.file)

        if args.print_tokens:
            for tok in tokens:
                print(format_token(tok))
            print()
        if args.print_ast:
            print(format_program(program))
        if not args.no_info:
            print(format_banner(__version__, args.file))

        interp = Interpreter()
        for result in interp.iter_eval(program):
            print(to_display(result))
    except TatuError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    level = (args.log_level or get_log_level()).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).debug("running %s", Path(args.file).resolve())
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
