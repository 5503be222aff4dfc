"""Compilation pipeline entrypoints."""

from atomicss.pipeline.entrypoints import run_compile
from atomicss.pipeline.result import CompileResult

__all__ = [
    "CompileResult",
    "run_compile",
]
