"""Interpreter over the generic AST."""

from atomicss.runtime.forms import AtomForm, MoleculeForm, OrganismForm, RuleForm, form_kind
from atomicss.runtime.interpreter import Interpreter
from atomicss.runtime.options import CompileMode, InterpreterOptions

__all__ = [
    "AtomForm",
    "CompileMode",
    "Interpreter",
    "InterpreterOptions",
    "MoleculeForm",
    "OrganismForm",
    "RuleForm",
    "form_kind",
]
