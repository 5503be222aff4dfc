"""Fail-fast errors raised by the compiler passes.

Every error carries the `DiagnosticSpec` it was raised for, a human readable
message and the source span it refers to, so the caller can turn it into a
`Diagnostic` and render it against the source text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from atomicss.diagnostics import (
    GRAPH_CYCLIC_DEPENDENCY,
    RENDER_EXPORTS_NOT_RESOLVED,
    RENDER_UNKNOWN_ATOM,
    Diagnostic,
    DiagnosticSpec,
)
from atomicss.text import ZERO, TextRange

if TYPE_CHECKING:
    from atomicss.parser.nodes import AstNode

_NO_RANGE = TextRange.empty(ZERO)


class CompileError(Exception):
    """Base class of every error the compiler passes raise."""

    def __init__(self, spec: DiagnosticSpec, message: str | None = None, range: TextRange | None = None) -> None:
        self.spec = spec
        self.message = message if message is not None else spec.message
        self.range = range if range is not None else _NO_RANGE
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.spec.code

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(self.spec, self.range, self.message)


class LexError(CompileError):
    """Unrecognized character sequence in the source."""


class ParseError(CompileError):
    """Malformed form structure; the whole parse is aborted."""


class EvalError(CompileError):
    """A form whose arguments do not match the expected shape."""

    def __init__(
        self,
        spec: DiagnosticSpec,
        message: str | None = None,
        nodes: Sequence[AstNode] = (),
        range: TextRange | None = None,
    ) -> None:
        self.nodes = tuple(nodes)
        if range is None and self.nodes:
            range = self.nodes[0].range
            for node in self.nodes[1:]:
                range = range.cover(node.range)
        super().__init__(spec, message, range)


class GraphError(CompileError):
    """Dependency graph cannot be resolved."""


class CyclicDependencyError(GraphError):
    def __init__(self, node: str, cycle: Sequence[tuple[str, str]] = ()) -> None:
        self.node = node
        self.cycle = tuple(cycle)
        path = " -> ".join([edge[0] for edge in self.cycle] + [node]) if self.cycle else node
        super().__init__(GRAPH_CYCLIC_DEPENDENCY, f"{GRAPH_CYCLIC_DEPENDENCY.message}: {path}")


class RenderError(CompileError):
    """Final CSS or export output cannot be produced."""


class UnknownAtomError(RenderError):
    def __init__(self, molecule: str, atom: str) -> None:
        self.molecule = molecule
        self.atom = atom
        super().__init__(RENDER_UNKNOWN_ATOM, f"{RENDER_UNKNOWN_ATOM.message}: `{atom}` in molecule `{molecule}`")


class ExportsNotResolvedError(RenderError):
    def __init__(self, molecule: str) -> None:
        self.molecule = molecule
        super().__init__(
            RENDER_EXPORTS_NOT_RESOLVED,
            f"{RENDER_EXPORTS_NOT_RESOLVED.message}: call update_exports() before reading `{molecule}`",
        )


__all__ = [
    "CompileError",
    "CyclicDependencyError",
    "EvalError",
    "ExportsNotResolvedError",
    "GraphError",
    "LexError",
    "ParseError",
    "RenderError",
    "UnknownAtomError",
]
