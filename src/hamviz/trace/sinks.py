from __future__ import annotations
from collections import Counter
from typing import Dict, List
import logging

from hamviz.registry import SINKS
from hamviz.search.events import EventCallback, EventKind, TraceEvent

logger = logging.getLogger(__name__)


@SINKS.register("recorder")
class TraceRecorder:
    """Keeps every event in order; the usual sink for tests and exports."""

    def __init__(self, **_: object):
        self.events: List[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]

    def counts(self) -> Dict[EventKind, int]:
        return dict(Counter(self.kinds()))

    def clear(self) -> None:
        self.events.clear()


@SINKS.register("log")
class LoggingSink:
    """Step log: explore/visit lines at INFO, backtracking and cancellation at WARNING."""

    def __init__(self, name: str = "hamviz.steps", **_: object):
        self.log = logging.getLogger(name)

    def __call__(self, event: TraceEvent) -> None:
        level = logging.WARNING if event.kind in (EventKind.BACKTRACK, EventKind.CANCELLED) else logging.INFO
        self.log.log(level, event.describe())


def fan_out(*sinks: EventCallback) -> EventCallback:
    def emit(event: TraceEvent) -> None:
        for sink in sinks:
            sink(event)
    return emit


def make_sink(name: str, **params: object) -> EventCallback:
    return SINKS.get(name)(**params)
