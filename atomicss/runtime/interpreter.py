"""Tree-walking evaluator that populates an `Organism` from the AST.

Forms are evaluated strictly in order and mutate the organism in place. An
error aborts the run but keeps whatever earlier forms already inserted: a
molecule is only inserted once all of its body evaluated, electrons and
molecules defined before the failing form stay in the organism.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from atomicss.diagnostics import (
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
    DiagnosticSpec,
)
from atomicss.errors import EvalError
from atomicss.model import (
    Atom,
    CSSAtRule,
    CSSDeclaration,
    CSSNode,
    CSSRule,
    Electron,
    Molecule,
    Organism,
)
from atomicss.parser import AstFunction, AstIdentifier, AstNode, AstString, parse
from atomicss.runtime.forms import AtomForm, MoleculeForm, OrganismForm, RuleForm, form_kind
from atomicss.runtime.options import InterpreterOptions
from atomicss.text import TextRange

logger = logging.getLogger(__name__)


class Interpreter:
    """Evaluates top-level forms against one organism."""

    def __init__(self, options: InterpreterOptions | None = None) -> None:
        self._options = options or InterpreterOptions()
        self.organism = Organism(selector_mode=self._options.selector_mode)
        self.variables: dict[str, str] = {}
        self.molecule_ranges: dict[str, TextRange] = {}

    @property
    def options(self) -> InterpreterOptions:
        return self._options

    def run(self, text: str) -> Organism:
        """Parse and evaluate a whole source text."""
        self.evaluate(parse(text))
        return self.organism

    def evaluate(self, forms: Iterable[AstFunction]) -> None:
        for form in forms:
            self.call_organism_function(form)

    # -------------------------
    # Organism level
    # -------------------------

    def call_organism_function(self, form: AstFunction) -> object:
        match form_kind(OrganismForm, form.name):
            case OrganismForm.ELECTRON:
                return self._handle_electron(form)
            case OrganismForm.MOLECULE:
                return self._handle_molecule(form)
            case OrganismForm.DEF:
                return self._handle_def(form)
            case OrganismForm.LOG:
                return self._handle_log(form)
            case OrganismForm.DBG:
                return self._handle_dbg(form)
            case None:
                return self._unknown_form(form, "organism")

    def _handle_electron(self, form: AstFunction) -> Electron:
        match form.args:
            case (AstString(value=name), AstFunction(name=prop, args=(value_node,))):
                value = self._resolve_value(value_node, EVAL_INVALID_ELECTRON_FORM, form)
                electron = Electron(name, prop, value)
                self.organism.insert_electron(electron)
                return electron
            case _:
                raise _invalid(EVAL_INVALID_ELECTRON_FORM, form)

    def _handle_molecule(self, form: AstFunction) -> Molecule:
        match form.args:
            case (AstString(value=name), *body):
                molecule = self.organism.new_molecule(name)
                for node in body:
                    if not isinstance(node, AstFunction):
                        raise EvalError(
                            EVAL_INVALID_MOLECULE_FORM,
                            f"{EVAL_INVALID_MOLECULE_FORM.message}: expected a form inside molecule `{name}`",
                            (node,),
                        )
                    self._call_molecule_function(node, molecule)
                self.organism.insert_molecule(molecule)
                self.molecule_ranges[name] = form.range
                return molecule
            case _:
                raise _invalid(EVAL_INVALID_MOLECULE_FORM, form)

    def _handle_def(self, form: AstFunction) -> str:
        match form.args:
            case (AstIdentifier(name=name) | AstString(value=name), value_node):
                value = self._resolve_value(value_node, EVAL_INVALID_VARIABLE_FORM, form)
                self.variables[name] = value
                return value
            case _:
                raise _invalid(EVAL_INVALID_VARIABLE_FORM, form)

    def _handle_log(self, form: AstFunction) -> str:
        message = " ".join(self._resolve_value(node, EVAL_INVALID_VARIABLE_FORM, form) for node in form.args)
        logger.info("%s", message)
        return message

    def _handle_dbg(self, form: AstFunction) -> str:
        if not form.args:
            dump = self.organism.describe()
        else:
            dump = ", ".join(
                f"{_node_label(node)}={self._resolve_value(node, EVAL_INVALID_VARIABLE_FORM, form)!r}"
                for node in form.args
            )
        logger.debug("%s", dump)
        return dump

    # -------------------------
    # Molecule level
    # -------------------------

    def _call_molecule_function(self, form: AstFunction, molecule: Molecule) -> object:
        match form_kind(MoleculeForm, form.name):
            case MoleculeForm.ATOM:
                return self._handle_atom(form, molecule)
            case MoleculeForm.RULE:
                css_rule = self.build_rule(form)
                molecule.insert_css_rule(css_rule)
                return css_rule
            case MoleculeForm.AT_RULE:
                css_at_rule = self.build_at_rule(form)
                molecule.insert_css_at_rule(css_at_rule)
                return css_at_rule
            case None:
                return self._unknown_form(form, f"molecule `{molecule.name}`")

    def _handle_atom(self, form: AstFunction, molecule: Molecule) -> Atom:
        match form.args:
            case (AstString(value=name), *body):
                atom = Atom(name)
                for node in body:
                    if not isinstance(node, AstFunction):
                        raise EvalError(
                            EVAL_INVALID_ATOM_FORM,
                            f"{EVAL_INVALID_ATOM_FORM.message}: expected a form inside atom `{name}`",
                            (node,),
                        )
                    self._call_atom_function(node, atom)
                molecule.insert_atom(atom)
                return atom
            case _:
                raise _invalid(EVAL_INVALID_ATOM_FORM, form)

    # -------------------------
    # Atom level
    # -------------------------

    def _call_atom_function(self, form: AstFunction, atom: Atom) -> object:
        match form_kind(AtomForm, form.name):
            case AtomForm.ELECTRONS:
                return self._handle_electrons(form, atom)
            case AtomForm.IMPORT:
                return self._handle_import(form, atom)
            case None:
                return self._unknown_form(form, f"atom `{atom.name}`")

    def _handle_electrons(self, form: AstFunction, atom: Atom) -> list[str]:
        if not form.args or not all(isinstance(node, AstString) for node in form.args):
            raise _invalid(EVAL_INVALID_ELECTRONS_FORM, form)
        names = [node.value for node in form.args if isinstance(node, AstString)]
        for name in names:
            atom.insert_electron(name)
        return names

    def _handle_import(self, form: AstFunction, atom: Atom) -> tuple[str, str]:
        match form.args:
            case (AstString(value=molecule), AstString(value=imported_atom)):
                atom.insert_import(molecule, imported_atom)
                return molecule, imported_atom
            case _:
                raise _invalid(EVAL_INVALID_IMPORT_FORM, form)

    # -------------------------
    # Rule bodies (pure builders, never attached to a molecule here)
    # -------------------------

    def build_rule(self, form: AstFunction) -> CSSRule:
        """Build `(& `selector` body*)` into a `CSSRule` value."""
        match form.args:
            case (AstString(value=selector), *body):
                css_rule = CSSRule(selector)
                for node in body:
                    css_rule.children.append(self._build_rule_child(node, EVAL_INVALID_RULE_FORM))
                return css_rule
            case _:
                raise _invalid(EVAL_INVALID_RULE_FORM, form)

    def build_at_rule(self, form: AstFunction) -> CSSAtRule:
        """Build `(@ `name` [`params` [body*]])` into a `CSSAtRule` value."""
        match form.args:
            case (AstString(value=name),):
                return CSSAtRule(name)
            case (AstString(value=name), AstString(value=params)):
                return CSSAtRule(name, params)
            case (AstString(value=name), AstString(value=params), *body):
                css_at_rule = CSSAtRule(name, params)
                for node in body:
                    css_at_rule.children.append(self._build_rule_child(node, EVAL_INVALID_AT_RULE_FORM))
                return css_at_rule
            case _:
                raise _invalid(EVAL_INVALID_AT_RULE_FORM, form)

    def _build_rule_child(self, node: AstNode, spec: DiagnosticSpec) -> CSSNode:
        if not isinstance(node, AstFunction):
            raise EvalError(spec, f"{spec.message}: expected a declaration, rule or at-rule", (node,))
        match form_kind(RuleForm, node.name):
            case RuleForm.RULE:
                return self.build_rule(node)
            case RuleForm.AT_RULE:
                return self.build_at_rule(node)
            case None:
                return self._build_declaration(node)

    def _build_declaration(self, form: AstFunction) -> CSSDeclaration:
        match form.args:
            case (value_node,):
                return CSSDeclaration(form.name, self._resolve_value(value_node, EVAL_INVALID_DECLARATION, form))
            case _:
                raise _invalid(EVAL_INVALID_DECLARATION, form)

    # -------------------------
    # Helpers
    # -------------------------

    def _resolve_value(self, node: AstNode, spec: DiagnosticSpec, form: AstFunction) -> str:
        """A string literal, or an identifier naming a `def` variable."""
        match node:
            case AstString(value=value):
                return value
            case AstIdentifier(name=name):
                try:
                    return self.variables[name]
                except KeyError:
                    raise EvalError(
                        EVAL_VARIABLE_NOT_FOUND,
                        f"{EVAL_VARIABLE_NOT_FOUND.message}: `{name}`",
                        (node,),
                    ) from None
            case _:
                raise _invalid(spec, form)

    def _unknown_form(self, form: AstFunction, context: str) -> None:
        if self._options.strict_forms:
            raise EvalError(
                EVAL_UNKNOWN_FORM,
                f"{EVAL_UNKNOWN_FORM.message} `{form.name}` in {context}",
                (form,),
            )
        logger.debug("Ignoring unknown form %r in %s", form.name, context)
        return None


def _invalid(spec: DiagnosticSpec, form: AstFunction) -> EvalError:
    return EvalError(spec, f"{spec.message} `{form.name}`", form.args or (form,))


def _node_label(node: AstNode) -> str:
    match node:
        case AstIdentifier(name=name):
            return name
        case AstString():
            return "<string>"
        case AstFunction(name=name):
            return f"({name} ...)"
