"""Connectivity of sets of spiral cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, TypeAlias

import networkx as nx

from .coords import SpiralIndex
from .neighbors import neighbors
from .rings import check_index

if TYPE_CHECKING:  # pragma: no cover - typing only
    CellGraph: TypeAlias = nx.Graph[int]
else:  # pragma: no cover - runtime alias without subscripting
    CellGraph: TypeAlias = nx.Graph


def adjacency_graph(indices: Iterable[int]) -> CellGraph:
    """Return an undirected graph linking every pair of adjacent cells."""

    graph: CellGraph = nx.Graph()
    for index in indices:
        graph.add_node(check_index(index))
    for index in list(graph.nodes):
        for other in neighbors(index):
            if other in graph:
                graph.add_edge(index, other)
    return graph


def are_grouped(indices: Iterable[int]) -> bool:
    """True when the cells form a single connected cluster."""

    graph = adjacency_graph(indices)
    if len(graph) == 0:
        return False
    return nx.is_connected(graph)


def groups(indices: Iterable[int]) -> list[set[SpiralIndex]]:
    """Split cells into connected clusters, ordered by their lowest index."""

    graph = adjacency_graph(indices)
    components = [set(component) for component in nx.connected_components(graph)]
    return sorted(components, key=min)
