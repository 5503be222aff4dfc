"""Compile result carrier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from atomicss.diagnostics import has_errors

if TYPE_CHECKING:
    from atomicss.diagnostics import Diagnostic
    from atomicss.errors import CompileError
    from atomicss.model import Organism
    from atomicss.parser import AstFunction
    from atomicss.runtime import InterpreterOptions


@dataclass(slots=True)
class CompileResult:
    """Everything one compilation produced, including a partial organism on failure.

    `forms` is `None` when lexing or parsing failed and `css` is `None` when
    the run stopped before rendering.
    """

    source_text: str
    options: InterpreterOptions
    organism: Organism
    diagnostics: list[Diagnostic] = field(default_factory=list)
    forms: tuple[AstFunction, ...] | None = None
    css: str | None = None
    errors: list[CompileError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def exports_resolved(self) -> bool:
        return self.organism.exports_resolved

    def export_table(self) -> dict[str, dict[str, list[str]]] | None:
        if not self.organism.exports_resolved:
            return None
        return self.organism.export_table()
