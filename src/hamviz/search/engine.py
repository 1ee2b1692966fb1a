from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import logging
import threading

from hamviz.graphs.model import Adjacency, Graph, VertexId, build_adjacency
from hamviz.search.control import ControlSignal, SearchBusyError, SearchCancelled
from hamviz.search.events import (
    Cancelled,
    CycleFound,
    EmptyGraph,
    EventCallback,
    NoCycle,
    Result,
    TraceEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """One level of the depth-first search: vertex `u` and where its neighbour scan stands."""
    u: int
    next_v: int = 0
    child: Optional[int] = None
    entered: bool = False


@dataclass(frozen=True)
class SearchSnapshot:
    path: Tuple[VertexId, ...]
    stack: Tuple[VertexId, ...]
    finished: bool


def _ignore(_: TraceEvent) -> None:
    pass


class HamiltonianSearch:
    """
    Backtracking search for a Hamiltonian cycle rooted at dense index 0,
    written as an explicit stack of frames instead of recursion.

    Each call to `advance()` runs up to the next suspension point and returns
    None, or returns the final result once the search is over. The caller
    decides what happens between two calls (waiting, pausing, cancelling),
    so abandoning the object mid-run is the whole of cancellation.

    Neighbours are tried in ascending dense-index order, which makes the
    event trace deterministic for a given vertex enumeration order.
    """

    def __init__(self, adjacency: Adjacency, emit: EventCallback = _ignore):
        self.adjacency = adjacency
        self.path: List[VertexId] = []
        self.visited: List[bool] = [False] * adjacency.n
        self.frames: List[Frame] = []
        self.result: Optional[Result] = None
        self._emit = emit
        self._started = False
        self._closed = False

    def _id(self, i: int) -> VertexId:
        return self.adjacency.index_to_id[i]

    def _next_candidate(self, frame: Frame) -> Optional[int]:
        for v in self.adjacency.neighbors(frame.u):
            if v >= frame.next_v and not self.visited[v]:
                return v
        return None

    def advance(self) -> Optional[Result]:
        if self.result is not None:
            return self.result

        n = self.adjacency.n
        if n == 0:
            self.result = EmptyGraph()
            return self.result

        if not self._started:
            self._started = True
            self.visited[0] = True
            self.path.append(self._id(0))
            self.frames.append(Frame(0, entered=True))
            self._emit(TraceEvent.start(self._id(0)))
            return None

        if self._closed:
            self.result = CycleFound(tuple(self.path))
            return self.result

        while self.frames:
            frame = self.frames[-1]
            u_id = self._id(frame.u)

            if not frame.entered:
                frame.entered = True
                self.visited[frame.u] = True
                self.path.append(u_id)
                self._emit(TraceEvent.visit(u_id))
                continue

            if frame.child is not None:
                # the child frame failed and has been popped
                v = frame.child
                frame.child = None
                self._emit(TraceEvent.backtrack(u_id, self._id(v)))
                self.path.pop()
                self.visited[v] = False
                return None

            if len(self.path) == n:
                if self.adjacency.has_edge(frame.u, 0):
                    self._closed = True
                    self._emit(TraceEvent.cycle_closed(u_id, self._id(0)))
                    return None
                self.frames.pop()
                continue

            v = self._next_candidate(frame)
            if v is None:
                self.frames.pop()
                continue

            frame.next_v = v + 1
            frame.child = v
            self.frames.append(Frame(v))
            self._emit(TraceEvent.explore(u_id, self._id(v)))
            return None

        self.result = NoCycle()
        return self.result

    def snapshot(self) -> SearchSnapshot:
        return SearchSnapshot(
            path=tuple(self.path),
            stack=tuple(self._id(f.u) for f in self.frames if f.entered),
            finished=self.result is not None,
        )


class HamiltonianEngine:
    """
    Drives one HamiltonianSearch at a time against a ControlSignal.

    The search never runs two steps concurrently: it blocks in
    `ControlSignal.wait()` between steps, and that is also where pause,
    single-step and cancellation take effect.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._active: Optional[HamiltonianSearch] = None

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._active is not None

    def run(
        self,
        graph: Union[Graph, Adjacency],
        control: Optional[ControlSignal] = None,
        on_event: Optional[EventCallback] = None,
    ) -> Result:
        adjacency = build_adjacency(graph) if isinstance(graph, Graph) else graph
        control = control if control is not None else ControlSignal()
        on_event = on_event if on_event is not None else _ignore

        def emit(event: TraceEvent) -> None:
            control.check()
            logger.debug("%s", event.describe())
            on_event(event)

        with self._lock:
            if self._active is not None:
                raise SearchBusyError("A search is already running on this engine; cancel it and wait for it to finish first.")
            if adjacency.n == 0:
                logger.info("Graph is empty, nothing to search")
                return EmptyGraph()
            search = HamiltonianSearch(adjacency, emit)
            self._active = search

        logger.info("Searching for a Hamiltonian cycle on %d vertices from %r", adjacency.n, adjacency.index_to_id[0])
        try:
            while True:
                result = search.advance()
                if result is not None:
                    break
                control.wait()
        except SearchCancelled:
            logger.info("Search cancelled at depth %d", len(search.path))
            result = Cancelled()
            on_event(TraceEvent.cancelled())
        finally:
            with self._lock:
                self._active = None

        logger.info("Search finished: %s", result.describe())
        return result


def run(
    graph: Union[Graph, Adjacency],
    control: Optional[ControlSignal] = None,
    on_event: Optional[EventCallback] = None,
) -> Result:
    return HamiltonianEngine().run(graph, control=control, on_event=on_event)
