"""atomicss: compile electrons, atoms and molecules into CSS."""

from atomicss.errors import (
    CompileError,
    CyclicDependencyError,
    EvalError,
    GraphError,
    LexError,
    ParseError,
    RenderError,
)
from atomicss.model import Atom, Electron, Molecule, Organism, SelectorMode
from atomicss.parser import parse
from atomicss.pipeline import CompileResult, run_compile
from atomicss.runtime import CompileMode, Interpreter, InterpreterOptions

__all__ = [
    "Atom",
    "CompileError",
    "CompileMode",
    "CompileResult",
    "CyclicDependencyError",
    "Electron",
    "EvalError",
    "GraphError",
    "Interpreter",
    "InterpreterOptions",
    "LexError",
    "Molecule",
    "Organism",
    "ParseError",
    "RenderError",
    "SelectorMode",
    "parse",
    "run_compile",
]
