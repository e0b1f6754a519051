"""Command-line driver: load a program, run it, report the outcome."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mlisp import config
from mlisp.interpreter import run
from mlisp.types.outcome import Failure, Value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mlisp", description="Run an mlisp program.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="program file to run ('-' reads stdin)")
    source.add_argument("-e", "--eval", dest="source", help="program text to run")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $MLISP_LOG_LEVEL or WARNING)")
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="Python recursion limit for evaluation (default: $MLISP_RECURSION_LIMIT or 10000)")
    return parser


def read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = args.log_level.upper() if args.log_level else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(args.recursion_limit or config.get_recursion_limit())

    if args.source is not None:
        source = args.source
    else:
        try:
            source = read_source(args.file)
        except OSError as err:
            print(f"error (io): {err}", file=sys.stderr)
            return 1

    outcome = run(source)
    if isinstance(outcome, Failure):
        print(f"error ({outcome.category}): {outcome.message}", file=sys.stderr)
        return 1
    if isinstance(outcome, Value):
        print(outcome.expr)
    return 0
