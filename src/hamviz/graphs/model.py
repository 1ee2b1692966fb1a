from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Tuple
import json
import logging
import numpy as np
import networkx as nx

logger = logging.getLogger(__name__)

VertexId = Hashable
Edge = Tuple[VertexId, VertexId]


def _endpoint_id(endpoint: Any) -> VertexId:
    # Layout engines rewrite link endpoints into node objects.
    if isinstance(endpoint, dict):
        if "id" not in endpoint:
            raise ValueError(f"Link endpoint object without 'id': {endpoint!r}")
        return endpoint["id"]
    return endpoint


@dataclass(frozen=True)
class Graph:
    """
    Undirected graph as handed over by the editor.

    `vertices` keeps the caller's enumeration order: the first vertex is the
    fixed search root. Edges may reference vertices that no longer exist
    (e.g. after a deletion in the editor); those are dropped when the
    adjacency matrix is built, not here.
    """
    vertices: Tuple[VertexId, ...] = ()
    edges: Tuple[Edge, ...] = ()

    @classmethod
    def from_edges(cls, vertices: Iterable[VertexId], edges: Iterable[Iterable[VertexId]]) -> "Graph":
        seen: Dict[VertexId, None] = {}
        for v in vertices:
            seen.setdefault(v, None)
        pairs: List[Edge] = []
        for e in edges:
            pair = tuple(e)
            if len(pair) != 2:
                raise ValueError(f"Edge must have exactly two endpoints, got {pair!r}")
            pairs.append((pair[0], pair[1]))
        return cls(vertices=tuple(seen), edges=tuple(pairs))

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Graph":
        """Build from the editor shape: {"nodes": [{"id": 0}, ...], "links": [{"source": 0, "target": 1}, ...]}."""
        try:
            nodes = payload.get("nodes", [])
            links = payload.get("links", [])
            vertices = [n["id"] if isinstance(n, dict) else n for n in nodes]
            edges = [(_endpoint_id(l["source"]), _endpoint_id(l["target"])) for l in links]
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed graph payload: {e}") from e
        return cls.from_edges(vertices, edges)

    @classmethod
    def from_networkx(cls, g: nx.Graph) -> "Graph":
        return cls.from_edges(list(g.nodes()), list(g.edges()))

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        g.add_nodes_from(self.vertices)
        known = set(self.vertices)
        g.add_edges_from((u, v) for u, v in self.edges if u in known and v in known)
        return g

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [{"id": v} for v in self.vertices],
            "links": [{"source": u, "target": v} for u, v in self.edges],
        }

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True, eq=False)
class Adjacency:
    matrix: np.ndarray
    index_to_id: Tuple[VertexId, ...]
    id_to_index: Dict[VertexId, int] = field(repr=False)

    @property
    def n(self) -> int:
        return len(self.index_to_id)

    def has_edge(self, i: int, j: int) -> bool:
        return bool(self.matrix[i, j])

    def neighbors(self, i: int) -> List[int]:
        """Dense neighbour indices of `i`, ascending."""
        return [int(j) for j in np.flatnonzero(self.matrix[i])]


def build_adjacency(graph: Graph) -> Adjacency:
    """
    Dense 0/1 matrix indexed by enumeration position, plus the id<->index maps.
    Edges with an endpoint outside the vertex set are skipped.
    """
    # a repeated id keeps its first position
    index_to_id = tuple(dict.fromkeys(graph.vertices))
    id_to_index = {v: i for i, v in enumerate(index_to_id)}
    n = len(index_to_id)
    matrix = np.zeros((n, n), dtype=np.uint8)

    dropped = 0
    for u, v in graph.edges:
        i = id_to_index.get(u)
        j = id_to_index.get(v)
        if i is None or j is None:
            dropped += 1
            continue
        matrix[i, j] = 1
        matrix[j, i] = 1

    if dropped:
        logger.debug("Skipped %d edge(s) with dangling endpoints", dropped)
    matrix.setflags(write=False)
    return Adjacency(matrix=matrix, index_to_id=index_to_id, id_to_index=id_to_index)


def load_graph(path: str) -> Graph:
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"{path}: expected a JSON object with 'nodes' and 'links'")
    return Graph.from_dict(payload)
