"""Command-line entry point: compile one source file and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from atomicss.diagnostics import render_diagnostic
from atomicss.errors import CompileError, EvalError, GraphError, LexError, ParseError, RenderError
from atomicss.pipeline import CompileResult, run_compile
from atomicss.runtime import CompileMode

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_SYNTAX_ERROR = 2
EXIT_EVAL_ERROR = 3
EXIT_CYCLE_ERROR = 4
EXIT_RENDER_ERROR = 5


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="atomicss",
        description="Compile electrons, atoms and molecules into CSS and class exports.",
    )
    parser.add_argument("path", type=Path, help="source file to compile")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--debug", action="store_true", help="emit readable selectors without hashes")
    mode.add_argument("--strict", action="store_true", help="reject unknown forms")
    parser.add_argument("--css-only", action="store_true", help="print only the generated CSS")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    return parser.parse_args(argv)


def exit_code_for(error: CompileError) -> int:
    if isinstance(error, (LexError, ParseError)):
        return EXIT_SYNTAX_ERROR
    if isinstance(error, EvalError):
        return EXIT_EVAL_ERROR
    if isinstance(error, GraphError):
        return EXIT_CYCLE_ERROR
    if isinstance(error, RenderError):
        return EXIT_RENDER_ERROR
    return EXIT_EVAL_ERROR


def _print_result(result: CompileResult, *, css_only: bool) -> None:
    if css_only:
        if result.css is not None:
            print(result.css)
        return

    print(result.organism.describe())
    if result.css is not None:
        print("\nCSS:")
        print(result.css)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        text = args.path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    if args.debug:
        mode = CompileMode.DEBUG
    elif args.strict:
        mode = CompileMode.STRICT
    else:
        mode = CompileMode.RELEASE

    logger.info("Compiling %s in %s mode", args.path, mode)
    result = run_compile(text, mode=mode)

    for diagnostic in result.diagnostics:
        print(render_diagnostic(text, diagnostic, source_name=str(args.path)), file=sys.stderr)

    _print_result(result, css_only=args.css_only)

    if result.errors:
        return exit_code_for(result.errors[0])
    return EXIT_OK
