"""The organism: registry of every electron and molecule of one compilation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from atomicss.diagnostics import (
    RESOLVE_UNDEFINED_ATOM,
    RESOLVE_UNDEFINED_ELECTRON,
    RESOLVE_UNDEFINED_MOLECULE,
    DiagnosticSpec,
)
from atomicss.errors import ExportsNotResolvedError
from atomicss.model.atom import AtomName, MoleculeName
from atomicss.model.electron import Electron, ElectronName
from atomicss.model.graph import DependencyGraph
from atomicss.model.molecule import Molecule
from atomicss.model.selectors import SelectorMode

logger = logging.getLogger(__name__)

type ExportTable = dict[MoleculeName, dict[AtomName, frozenset[str]]]


@dataclass(frozen=True, slots=True)
class ResolutionWarning:
    """A dangling reference found while resolving exports, attributed to the referencing molecule."""

    spec: DiagnosticSpec
    message: str
    molecule: MoleculeName


class Organism:
    """Electrons, molecules, their dependency graph and the resolved exports.

    Ingestion mutates the dependency graph eagerly. Exports are resolved by a
    separate, explicit `update_exports()` call once ingestion is done.
    """

    def __init__(self, *, selector_mode: SelectorMode = SelectorMode.HASHED) -> None:
        self.selector_mode = selector_mode
        self.electrons: dict[ElectronName, Electron] = {}
        self.molecules: dict[MoleculeName, Molecule] = {}
        self.dependency_graph = DependencyGraph()
        self._exports: ExportTable | None = None
        self.warnings: list[ResolutionWarning] = []

    def new_molecule(self, name: MoleculeName) -> Molecule:
        """Create a molecule that uses this organism's selector mode (not inserted)."""
        return Molecule(name, selector_mode=self.selector_mode)

    def insert_electron(self, electron: Electron) -> None:
        if electron.name in self.electrons:
            logger.debug("Redefining electron %r", electron.name)
        self.electrons[electron.name] = electron

    def insert_molecule(self, molecule: Molecule) -> None:
        if molecule.name in self.molecules:
            logger.debug("Redefining molecule %r", molecule.name)
        self.molecules[molecule.name] = molecule
        self.dependency_graph.add_molecule(molecule.name)
        self.dependency_graph.clear_dependencies(molecule.name)
        for atom in molecule.atoms.values():
            for dependency, _ in atom.imports:
                self.dependency_graph.add_dependency(molecule.name, dependency)

    def with_electron(self, electron: Electron) -> Organism:
        self.insert_electron(electron)
        return self

    def with_electrons(self, electrons: Iterable[Electron]) -> Organism:
        for electron in electrons:
            self.insert_electron(electron)
        return self

    def with_molecule(self, molecule: Molecule) -> Organism:
        self.insert_molecule(molecule)
        return self

    def with_molecules(self, molecules: Iterable[Molecule]) -> Organism:
        for molecule in molecules:
            self.insert_molecule(molecule)
        return self

    @property
    def exports_resolved(self) -> bool:
        return self._exports is not None

    def update_exports(self) -> None:
        """Resolve every atom's exported class set in dependency order.

        Raises `CyclicDependencyError` before any export is computed; the
        previous export table and warnings (if any) are left untouched in
        that case. Undefined references do not fail resolution, they are
        collected in `warnings`.
        """
        order = self.dependency_graph.topological_order()
        exports: ExportTable = {}
        warnings: list[ResolutionWarning] = []
        for molecule_name in order:
            exports[molecule_name] = self._molecule_exports(molecule_name, exports, warnings)
        self._exports = exports
        self.warnings = warnings
        logger.debug("Resolved exports for %d molecules", len(exports))

    def _molecule_exports(
        self,
        molecule_name: MoleculeName,
        resolved: ExportTable,
        warnings: list[ResolutionWarning],
    ) -> dict[AtomName, frozenset[str]]:
        molecule = self.molecules.get(molecule_name)
        if molecule is None:
            # Only reachable through an import; reported at the importing atom.
            return {}

        exports: dict[AtomName, frozenset[str]] = {}
        for atom_name, atom in molecule.atoms.items():
            classes: set[str] = set()

            if molecule.has_hashable_content(atom_name):
                classes.add(molecule.hashed_atoms.selector(atom_name)[1:])

            for electron in atom.electrons:
                if electron not in self.electrons:
                    warnings.append(
                        _warn(
                            RESOLVE_UNDEFINED_ELECTRON,
                            f"Atom {molecule_name}.{atom_name} uses undefined electron '{electron}'",
                            molecule_name,
                        )
                    )
                classes.add(electron)

            for imported_molecule, imported_atom in atom.imports:
                # Dependencies come first in topological order, so this is final.
                if imported_molecule not in resolved:
                    raise ExportsNotResolvedError(imported_molecule)
                if imported_molecule not in self.molecules:
                    warnings.append(
                        _warn(
                            RESOLVE_UNDEFINED_MOLECULE,
                            f"Atom {molecule_name}.{atom_name} imports from '{imported_molecule}', "
                            "which is never defined",
                            molecule_name,
                        )
                    )
                    continue
                imported = resolved[imported_molecule].get(imported_atom)
                if imported is None:
                    warnings.append(
                        _warn(
                            RESOLVE_UNDEFINED_ATOM,
                            f"Atom {molecule_name}.{atom_name} imports unknown atom {imported_molecule}.{imported_atom}",
                            molecule_name,
                        )
                    )
                    continue
                classes.update(imported)

            exports[atom_name] = frozenset(classes)
        return exports

    def get_exports(self, molecule_name: MoleculeName) -> dict[AtomName, frozenset[str]]:
        if self._exports is None:
            raise ExportsNotResolvedError(molecule_name)
        return self._exports[molecule_name]

    def exported_classes(self, molecule_name: MoleculeName, atom_name: AtomName) -> list[str]:
        """Sorted class names exported by one atom."""
        return sorted(self.get_exports(molecule_name)[atom_name])

    def export_table(self) -> dict[MoleculeName, dict[AtomName, list[str]]]:
        """The resolved exports with every class set as a sorted list."""
        if self._exports is None:
            raise ExportsNotResolvedError("*")
        return {
            molecule_name: {atom_name: sorted(classes) for atom_name, classes in sorted(atoms.items())}
            for molecule_name, atoms in sorted(self._exports.items())
        }

    def get_css(self) -> str:
        """Electron utility classes followed by every molecule's rendered CSS."""
        parts = [electron.get_css() for electron in self.electrons.values()]
        parts.extend(molecule.get_css() for molecule in self.molecules.values())
        return "".join(parts)

    def describe(self) -> str:
        """Multi-line debug dump of the organism."""
        lines = ["Organism"]
        lines.append(f"  electrons ({len(self.electrons)}):")
        for electron in self.electrons.values():
            lines.append(f"    {electron.name}: {electron.property}: {electron.value}")
        lines.append(f"  molecules ({len(self.molecules)}):")
        for molecule in self.molecules.values():
            deps = ", ".join(sorted(molecule.dependencies)) or "-"
            lines.append(f"    {molecule.name} (depends on: {deps})")
            for atom_name, atom in molecule.atoms.items():
                selector = molecule.get_atom_selector(atom_name)
                lines.append(
                    f"      {atom_name}: selector={selector} electrons={atom.electrons} "
                    f"imports={[f'{m}.{a}' for m, a in atom.imports]}"
                )
            lines.append(f"      css: {molecule.css}")
        if self._exports is None:
            lines.append("  exports: <unresolved>")
        else:
            lines.append("  exports:")
            for molecule_name, atoms in self.export_table().items():
                for atom_name, classes in atoms.items():
                    lines.append(f"    {molecule_name}.{atom_name}: {' '.join(classes)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Organism(electrons={list(self.electrons)!r}, molecules={list(self.molecules)!r}, "
            f"exports_resolved={self.exports_resolved})"
        )


def _warn(spec: DiagnosticSpec, message: str, molecule: MoleculeName) -> ResolutionWarning:
    logger.warning("%s", message)
    return ResolutionWarning(spec, message, molecule)
