"""Atoms: named style targets inside a molecule."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from atomicss.model.electron import ElectronName

type AtomName = str
type MoleculeName = str


@dataclass(slots=True)
class Atom:
    """Electron names and cross-molecule imports of one atom.

    Both are weak references; they are only looked up while exports are
    resolved.
    """

    name: AtomName
    electrons: list[ElectronName] = field(default_factory=list)
    imports: list[tuple[MoleculeName, AtomName]] = field(default_factory=list)

    def insert_electron(self, electron: ElectronName) -> None:
        self.electrons.append(electron)

    def insert_import(self, molecule: MoleculeName, atom: AtomName) -> None:
        self.imports.append((molecule, atom))

    def with_electrons(self, electrons: Iterable[ElectronName]) -> Atom:
        for electron in electrons:
            self.insert_electron(electron)
        return self

    def with_imports(self, imports: Iterable[tuple[MoleculeName, AtomName]]) -> Atom:
        for molecule, atom in imports:
            self.insert_import(molecule, atom)
        return self

    def __str__(self) -> str:
        return f"#Atom({self.name})"
