"""Compile entrypoint: the only place compiler errors are recovered."""

from __future__ import annotations

import logging

from atomicss.diagnostics import Diagnostic
from atomicss.errors import CompileError, CyclicDependencyError, GraphError, UnknownAtomError
from atomicss.parser import parse_document
from atomicss.pipeline.result import CompileResult
from atomicss.runtime import CompileMode, Interpreter, InterpreterOptions
from atomicss.text import ZERO, TextRange

logger = logging.getLogger(__name__)


def run_compile(
    text: str,
    options: InterpreterOptions | None = None,
    *,
    mode: CompileMode | None = None,
    resolve_exports: bool = True,
) -> CompileResult:
    """Parse, evaluate, resolve exports and render CSS for one source text.

    Lex, parse and evaluation errors stop the run; the organism keeps what
    was inserted before the failing form. A dependency cycle only leaves the
    exports unresolved, CSS is still rendered. Dangling references found
    during resolution become warning diagnostics.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    interpreter = Interpreter(resolved_options)
    result = CompileResult(
        source_text=text,
        options=resolved_options,
        organism=interpreter.organism,
    )

    try:
        document = parse_document(text)
        result.forms = document.forms
        interpreter.evaluate(document.forms)
    except CompileError as exc:
        _record(result, exc)
        return result

    if resolve_exports:
        try:
            interpreter.organism.update_exports()
        except GraphError as exc:
            if isinstance(exc, CyclicDependencyError):
                _locate(exc, interpreter, exc.node)
            _record(result, exc)
        else:
            for warning in interpreter.organism.warnings:
                result.diagnostics.append(
                    Diagnostic.from_spec(
                        warning.spec,
                        interpreter.molecule_ranges.get(warning.molecule, TextRange.empty(ZERO)),
                        warning.message,
                    )
                )

    try:
        result.css = interpreter.organism.get_css()
    except CompileError as exc:
        if isinstance(exc, UnknownAtomError):
            _locate(exc, interpreter, exc.molecule)
        _record(result, exc)

    return result


def _locate(error: CompileError, interpreter: Interpreter, molecule: str) -> None:
    """Point a model-level error at the `(molecule ...)` form it came from."""
    if molecule in interpreter.molecule_ranges:
        error.range = interpreter.molecule_ranges[molecule]


def _record(result: CompileResult, error: CompileError) -> None:
    logger.debug("Compilation failed with %s: %s", error.code, error.message)
    result.errors.append(error)
    result.diagnostics.append(error.to_diagnostic())


def _resolve_options(
    options: InterpreterOptions | None,
    mode: CompileMode | None,
) -> InterpreterOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return InterpreterOptions.for_mode(mode)

    return InterpreterOptions()
