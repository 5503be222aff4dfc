"""Molecule dependency graph."""

from __future__ import annotations

import networkx as nx

from atomicss.errors import CyclicDependencyError
from atomicss.model.atom import MoleculeName


class DependencyGraph:
    """Directed graph with an edge `M -> D` whenever an atom of `M` imports from `D`.

    Edges may point at molecules that were not inserted (yet); the target
    node is created implicitly.
    """

    def __init__(self) -> None:
        self._graph: nx.DiGraph = nx.DiGraph()

    def __contains__(self, molecule: object) -> bool:
        return molecule in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def nodes(self) -> list[MoleculeName]:
        return list(self._graph.nodes)

    @property
    def edges(self) -> set[tuple[MoleculeName, MoleculeName]]:
        return set(self._graph.edges)

    def add_molecule(self, molecule: MoleculeName) -> None:
        self._graph.add_node(molecule)

    def add_dependency(self, molecule: MoleculeName, dependency: MoleculeName) -> None:
        self._graph.add_edge(molecule, dependency)

    def clear_dependencies(self, molecule: MoleculeName) -> None:
        if molecule in self._graph:
            self._graph.remove_edges_from(list(self._graph.out_edges(molecule)))

    def dependencies_of(self, molecule: MoleculeName) -> set[MoleculeName]:
        if molecule not in self._graph:
            return set()
        return set(self._graph.successors(molecule))

    def topological_order(self) -> list[MoleculeName]:
        """Molecules ordered so every dependency precedes its dependents.

        Ties are broken by name so the order does not depend on insertion.
        """
        try:
            return list(nx.lexicographical_topological_sort(self._graph.reverse(copy=False)))
        except nx.NetworkXUnfeasible:
            cycle = nx.find_cycle(self._graph)
            raise CyclicDependencyError(cycle[0][0], cycle) from None
