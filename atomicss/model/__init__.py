"""Domain model: electrons, atoms, molecules, CSS trees and the organism."""

from atomicss.model.atom import Atom, AtomName, MoleculeName
from atomicss.model.css import CSSAtRule, CSSDeclaration, CSSNode, CSSRule
from atomicss.model.electron import Electron, ElectronName
from atomicss.model.graph import DependencyGraph
from atomicss.model.molecule import Molecule
from atomicss.model.organism import ExportTable, Organism, ResolutionWarning
from atomicss.model.selectors import (
    HashedAtoms,
    SelectorMode,
    content_hash,
    get_variables,
    make_selector,
)

__all__ = [
    "Atom",
    "AtomName",
    "CSSAtRule",
    "CSSDeclaration",
    "CSSNode",
    "CSSRule",
    "DependencyGraph",
    "Electron",
    "ElectronName",
    "ExportTable",
    "HashedAtoms",
    "Molecule",
    "MoleculeName",
    "Organism",
    "ResolutionWarning",
    "SelectorMode",
    "content_hash",
    "get_variables",
    "make_selector",
]
