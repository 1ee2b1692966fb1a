from __future__ import annotations
from typing import Any
import networkx as nx
from hamviz.graphs.model import Graph
from hamviz.registry import GRAPH_FAMILIES

# Demo graphs shipped with the visualizer.

@GRAPH_FAMILIES.register("five_cycle")
def five_cycle(**_: Any) -> Graph:
    return Graph.from_edges(range(5), [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])

@GRAPH_FAMILIES.register("complete_k4")
def complete_k4(**_: Any) -> Graph:
    return Graph.from_edges(range(4), [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])

@GRAPH_FAMILIES.register("bipartite_k23")
def bipartite_k23(**_: Any) -> Graph:
    """No Hamiltonian cycle: every cycle alternates sides, and the sides differ in size."""
    return Graph.from_edges(range(5), [(0, 2), (0, 3), (0, 4), (1, 2), (1, 3), (1, 4)])

# Parametric families.

@GRAPH_FAMILIES.register("cycle")
def cycle(n: int = 5, **_: Any) -> Graph:
    return Graph.from_networkx(nx.cycle_graph(n))

@GRAPH_FAMILIES.register("path")
def path(n: int = 5, **_: Any) -> Graph:
    return Graph.from_networkx(nx.path_graph(n))

@GRAPH_FAMILIES.register("complete")
def complete(n: int = 4, **_: Any) -> Graph:
    return Graph.from_networkx(nx.complete_graph(n))

@GRAPH_FAMILIES.register("complete_bipartite")
def complete_bipartite(n1: int = 2, n2: int = 3, **_: Any) -> Graph:
    return Graph.from_networkx(nx.complete_bipartite_graph(n1, n2))

@GRAPH_FAMILIES.register("petersen")
def petersen(**_: Any) -> Graph:
    return Graph.from_networkx(nx.petersen_graph())

@GRAPH_FAMILIES.register("erdos_renyi")
def erdos_renyi(n: int = 8, p: float = 0.4, seed: int | None = None) -> Graph:
    return Graph.from_networkx(nx.gnp_random_graph(n=n, p=p, seed=seed, directed=False))

def make_graph(name: str, **params: Any) -> Graph:
    fn = GRAPH_FAMILIES.get(name)
    return fn(**params)
