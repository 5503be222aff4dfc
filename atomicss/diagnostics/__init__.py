"""Diagnostics."""

from atomicss.diagnostics.codes import (
    EVAL_INVALID_AT_RULE_FORM,
    EVAL_INVALID_ATOM_FORM,
    EVAL_INVALID_DECLARATION,
    EVAL_INVALID_ELECTRON_FORM,
    EVAL_INVALID_ELECTRONS_FORM,
    EVAL_INVALID_IMPORT_FORM,
    EVAL_INVALID_MOLECULE_FORM,
    EVAL_INVALID_RULE_FORM,
    EVAL_INVALID_VARIABLE_FORM,
    EVAL_UNKNOWN_FORM,
    EVAL_VARIABLE_NOT_FOUND,
    GRAPH_CYCLIC_DEPENDENCY,
    LEXER_UNRECOGNIZED_TOKEN,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_IDENTIFIER,
    PARSER_INVALID_TOKEN,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNMATCHED_PAREN,
    RENDER_EXPORTS_NOT_RESOLVED,
    RENDER_UNKNOWN_ATOM,
    RESOLVE_UNDEFINED_ATOM,
    RESOLVE_UNDEFINED_ELECTRON,
    RESOLVE_UNDEFINED_MOLECULE,
    DiagnosticSpec,
)
from atomicss.diagnostics.diagnostic import Diagnostic, Severity
from atomicss.diagnostics.report import has_errors, render_diagnostic

__all__ = [
    "EVAL_INVALID_ATOM_FORM",
    "EVAL_INVALID_AT_RULE_FORM",
    "EVAL_INVALID_DECLARATION",
    "EVAL_INVALID_ELECTRONS_FORM",
    "EVAL_INVALID_ELECTRON_FORM",
    "EVAL_INVALID_IMPORT_FORM",
    "EVAL_INVALID_MOLECULE_FORM",
    "EVAL_INVALID_RULE_FORM",
    "EVAL_INVALID_VARIABLE_FORM",
    "EVAL_UNKNOWN_FORM",
    "EVAL_VARIABLE_NOT_FOUND",
    "GRAPH_CYCLIC_DEPENDENCY",
    "LEXER_UNRECOGNIZED_TOKEN",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_IDENTIFIER",
    "PARSER_INVALID_TOKEN",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNMATCHED_PAREN",
    "RENDER_EXPORTS_NOT_RESOLVED",
    "RENDER_UNKNOWN_ATOM",
    "RESOLVE_UNDEFINED_ATOM",
    "RESOLVE_UNDEFINED_ELECTRON",
    "RESOLVE_UNDEFINED_MOLECULE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "render_diagnostic",
]
