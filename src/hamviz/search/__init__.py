from hamviz.search.control import ControlSignal, SearchBusyError, SearchCancelled
from hamviz.search.engine import HamiltonianEngine, HamiltonianSearch, SearchSnapshot, run
from hamviz.search.events import (
    Cancelled,
    CycleFound,
    EmptyGraph,
    EventKind,
    NoCycle,
    Result,
    TraceEvent,
)
from hamviz.search.runner import SearchRunner

__all__ = [
    "Cancelled",
    "ControlSignal",
    "CycleFound",
    "EmptyGraph",
    "EventKind",
    "HamiltonianEngine",
    "HamiltonianSearch",
    "NoCycle",
    "Result",
    "SearchBusyError",
    "SearchCancelled",
    "SearchRunner",
    "SearchSnapshot",
    "TraceEvent",
    "run",
]
