"""Molecules: named bundles of atoms plus the CSS that styles them."""

from __future__ import annotations

from collections.abc import Iterable

from atomicss.model.atom import Atom, AtomName, MoleculeName
from atomicss.model.css import CSSAtRule, CSSRule
from atomicss.model.electron import ElectronName
from atomicss.model.selectors import HashedAtoms, SelectorMode, get_variables


class Molecule:
    """Atoms, their cross-molecule dependencies and the raw CSS stream.

    `css` keeps `${atom}` placeholders unresolved; `get_css()` substitutes
    them with the atoms' final selectors.
    """

    def __init__(self, name: MoleculeName, *, selector_mode: SelectorMode = SelectorMode.HASHED) -> None:
        self.name = name
        self.atoms: dict[AtomName, Atom] = {}
        self.dependencies: set[MoleculeName] = set()
        self.css = ""
        self._hashed_atoms = HashedAtoms(name, mode=selector_mode)

    @property
    def hashed_atoms(self) -> HashedAtoms:
        return self._hashed_atoms

    def insert_atom(self, atom: Atom) -> None:
        self.atoms[atom.name] = atom
        # Rebuilt so a redefined atom drops the imports of the one it replaces.
        self.dependencies = {molecule for each in self.atoms.values() for molecule, _ in each.imports}
        # An empty append defines the selector without adding content.
        self._hashed_atoms.update_atom_hashable_contents(atom.name, "")

    def insert_css_rule(self, css_rule: CSSRule) -> None:
        self._insert_css(css_rule.get_css())

    def insert_css_at_rule(self, css_at_rule: CSSAtRule) -> None:
        self._insert_css(css_at_rule.get_css())

    def _insert_css(self, css: str) -> None:
        self.css += css
        self._update_hashable_contents_from_css(css)

    def _update_hashable_contents_from_css(self, css: str) -> None:
        # One append per placeholder occurrence; names that are not atoms of
        # this molecule are left for render time.
        for variable in get_variables(css):
            if variable in self.atoms:
                self._hashed_atoms.update_atom_hashable_contents(variable, css)

    def get_css(self) -> str:
        return self._hashed_atoms.template(self.css)

    def get_atom_selector(self, atom_name: AtomName) -> str | None:
        return self._hashed_atoms.selectors.get(atom_name)

    def get_atom_imports(self, atom_name: AtomName) -> list[tuple[MoleculeName, AtomName]] | None:
        atom = self.atoms.get(atom_name)
        return atom.imports if atom is not None else None

    def get_atom_electrons(self, atom_name: AtomName) -> list[ElectronName] | None:
        atom = self.atoms.get(atom_name)
        return atom.electrons if atom is not None else None

    def has_hashable_content(self, atom_name: AtomName) -> bool:
        return bool(self._hashed_atoms.hashable_contents.get(atom_name))

    def with_atom(self, atom: Atom) -> Molecule:
        self.insert_atom(atom)
        return self

    def with_atoms(self, atoms: Iterable[Atom]) -> Molecule:
        for atom in atoms:
            self.insert_atom(atom)
        return self

    def with_css_rule(self, css_rule: CSSRule) -> Molecule:
        self.insert_css_rule(css_rule)
        return self

    def with_css_rules(self, css_rules: Iterable[CSSRule]) -> Molecule:
        for css_rule in css_rules:
            self.insert_css_rule(css_rule)
        return self

    def with_css_at_rule(self, css_at_rule: CSSAtRule) -> Molecule:
        self.insert_css_at_rule(css_at_rule)
        return self

    def with_css_at_rules(self, css_at_rules: Iterable[CSSAtRule]) -> Molecule:
        for css_at_rule in css_at_rules:
            self.insert_css_at_rule(css_at_rule)
        return self

    def __str__(self) -> str:
        return f"#Molecule({self.name})"

    def __repr__(self) -> str:
        return (
            f"Molecule(name={self.name!r}, atoms={list(self.atoms)!r}, "
            f"dependencies={sorted(self.dependencies)!r}, css={self.css!r})"
        )
