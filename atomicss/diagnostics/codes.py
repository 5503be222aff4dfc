"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNRECOGNIZED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_TOKEN",
    message="Unrecognized character.",
    hint="Only parentheses, identifiers, backtick strings and `;` comments are allowed.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a backtick.",
    category="lexer",
)

PARSER_EXPECTED_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_IDENTIFIER",
    message="Identifier expected",
    hint="Every `(` must be followed by a function name, e.g. `(molecule ...)`.",
    category="parser",
)

PARSER_UNMATCHED_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_PAREN",
    message="Unmatched open parenthesis",
    hint="Add the missing `)`.",
    category="parser",
)

PARSER_INVALID_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_TOKEN",
    message="Invalid token",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Forms are nested too deeply",
    hint="Flatten the nested rules.",
    category="parser",
)

EVAL_INVALID_ELECTRON_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_ELECTRON_FORM",
    message="Invalid electron",
    hint="Use `(electron `name` (property `value`))`.",
    category="eval",
)

EVAL_INVALID_MOLECULE_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_MOLECULE_FORM",
    message="Invalid molecule",
    hint="Use `(molecule `name` ...)` with only function forms after the name.",
    category="eval",
)

EVAL_INVALID_ATOM_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_ATOM_FORM",
    message="Invalid atom",
    hint="Use `(atom `name` ...)` with only function forms after the name.",
    category="eval",
)

EVAL_INVALID_ELECTRONS_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_ELECTRONS_FORM",
    message="Invalid electron list",
    hint="Use `(electrons `first` `second` ...)`.",
    category="eval",
)

EVAL_INVALID_IMPORT_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_IMPORT_FORM",
    message="Invalid import",
    hint="Use `(import `molecule` `atom`)`.",
    category="eval",
)

EVAL_INVALID_RULE_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_RULE_FORM",
    message="Invalid rule",
    hint="Use `(& `selector` ...)` with declarations, rules or at-rules as body.",
    category="eval",
)

EVAL_INVALID_AT_RULE_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_AT_RULE_FORM",
    message="Invalid at rule",
    hint="Use `(@ `name`)`, `(@ `name` `params`)` or `(@ `name` `params` ...)`.",
    category="eval",
)

EVAL_INVALID_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_DECLARATION",
    message="Invalid declaration",
    hint="Use `(property `value`)`.",
    category="eval",
)

EVAL_INVALID_VARIABLE_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_INVALID_VARIABLE_FORM",
    message="Invalid variable form",
    hint="Use `(def name `value`)`, `(log name ...)` or `(dbg name ...)`.",
    category="eval",
)

EVAL_VARIABLE_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_VARIABLE_NOT_FOUND",
    message="Variable not found",
    hint="Define it first with `(def name `value`)`.",
    category="eval",
)

EVAL_UNKNOWN_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_UNKNOWN_FORM",
    message="Unknown form",
    hint="Unknown forms are only rejected in strict mode.",
    category="eval",
)

GRAPH_CYCLIC_DEPENDENCY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAPH_CYCLIC_DEPENDENCY",
    message="Cyclic dependency between molecules",
    hint="Break the import cycle; exports are left unresolved.",
    category="graph",
)

RENDER_UNKNOWN_ATOM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_UNKNOWN_ATOM",
    message="Reference to an atom that was never declared",
    hint="Declare the atom before the rule that references it.",
    category="render",
)

RENDER_EXPORTS_NOT_RESOLVED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_EXPORTS_NOT_RESOLVED",
    message="Exports read before they were resolved",
    category="render",
)

RESOLVE_UNDEFINED_ELECTRON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOLVE_UNDEFINED_ELECTRON",
    message="Atom uses an electron that was never defined",
    hint="The name is still exported as a class; define it with `(electron ...)`.",
    severity="warning",
    category="resolve",
)

RESOLVE_UNDEFINED_MOLECULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOLVE_UNDEFINED_MOLECULE",
    message="Import from a molecule that was never defined",
    hint="The import contributes no classes.",
    severity="warning",
    category="resolve",
)

RESOLVE_UNDEFINED_ATOM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOLVE_UNDEFINED_ATOM",
    message="Import of an atom the molecule does not declare",
    hint="The import contributes no classes.",
    severity="warning",
    category="resolve",
)
