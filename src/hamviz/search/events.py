from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple, Union

from hamviz.graphs.model import VertexId


class EventKind(str, Enum):
    START = "start"
    EXPLORE = "explore"
    VISIT = "visit"
    BACKTRACK = "backtrack"
    CYCLE_CLOSED = "cycle_closed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TraceEvent:
    kind: EventKind
    vertices: Tuple[VertexId, ...] = ()

    @classmethod
    def start(cls, root: VertexId) -> "TraceEvent":
        return cls(EventKind.START, (root,))

    @classmethod
    def explore(cls, u: VertexId, v: VertexId) -> "TraceEvent":
        return cls(EventKind.EXPLORE, (u, v))

    @classmethod
    def visit(cls, v: VertexId) -> "TraceEvent":
        return cls(EventKind.VISIT, (v,))

    @classmethod
    def backtrack(cls, u: VertexId, v: VertexId) -> "TraceEvent":
        return cls(EventKind.BACKTRACK, (u, v))

    @classmethod
    def cycle_closed(cls, last: VertexId, root: VertexId) -> "TraceEvent":
        return cls(EventKind.CYCLE_CLOSED, (last, root))

    @classmethod
    def cancelled(cls) -> "TraceEvent":
        return cls(EventKind.CANCELLED, ())

    def describe(self) -> str:
        k, vs = self.kind, self.vertices
        if k is EventKind.START:
            return f"Starting from node {vs[0]}"
        if k is EventKind.EXPLORE:
            return f"Exploring edge {vs[0]} -> {vs[1]}"
        if k is EventKind.VISIT:
            return f"Visiting node {vs[0]}"
        if k is EventKind.BACKTRACK:
            return f"Backtracking from {vs[1]}. Removing edge {vs[0]} -> {vs[1]}"
        if k is EventKind.CYCLE_CLOSED:
            return f"Found edge from last node {vs[0]} to start node {vs[1]}. Cycle!"
        return "Visualization stopped by user."


EventCallback = Callable[[TraceEvent], None]


@dataclass(frozen=True)
class CycleFound:
    """The closing edge path[-1] -> path[0] is implicit."""
    path: Tuple[VertexId, ...]

    @property
    def closing_edge(self) -> Tuple[VertexId, VertexId]:
        return (self.path[-1], self.path[0])

    def edges(self) -> List[Tuple[VertexId, VertexId]]:
        n = len(self.path)
        return [(self.path[i], self.path[(i + 1) % n]) for i in range(n)]

    def describe(self) -> str:
        return "Hamiltonian Cycle Found!"


@dataclass(frozen=True)
class NoCycle:
    def describe(self) -> str:
        return "No Hamiltonian Cycle found."


@dataclass(frozen=True)
class EmptyGraph:
    def describe(self) -> str:
        return "Graph is empty. Add nodes and links."


@dataclass(frozen=True)
class Cancelled:
    def describe(self) -> str:
        return "Visualization stopped by user."


Result = Union[CycleFound, NoCycle, EmptyGraph, Cancelled]
