"""
Background-thread runner for GUI collaborators.

The search blocks between steps, so a GUI cannot call the engine on its own
event loop. SearchRunner moves the run onto a worker thread and exposes the
ControlSignal operations the UI binds to its buttons and keys:

    runner = SearchRunner(on_event=canvas.queue_event, interval=0.5)
    runner.start(graph)
    runner.pause(); runner.step(); runner.resume()
    runner.cancel(); runner.join()

Events are delivered on the worker thread; the UI is responsible for
marshalling them onto its own loop.
"""
from __future__ import annotations
from typing import Optional, Union
import logging
import threading

from hamviz.graphs.model import Adjacency, Graph
from hamviz.search.control import ControlSignal, SearchBusyError
from hamviz.search.engine import HamiltonianEngine
from hamviz.search.events import EventCallback, Result

logger = logging.getLogger(__name__)


class SearchRunner:
    def __init__(self, on_event: Optional[EventCallback] = None, interval: float = 0.0):
        self.on_event = on_event
        self.control = ControlSignal(interval=interval)
        self.engine = HamiltonianEngine()
        self.result: Optional[Result] = None
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, graph: Union[Graph, Adjacency]) -> None:
        if self.running:
            raise SearchBusyError("A search is already running; cancel it and join() first.")
        self.control.reset()
        self.result = None
        self.error = None
        self._thread = threading.Thread(target=self._run, args=(graph,), name="hamviz-search", daemon=True)
        self._thread.start()

    def _run(self, graph: Union[Graph, Adjacency]) -> None:
        try:
            self.result = self.engine.run(graph, control=self.control, on_event=self.on_event)
        except Exception as e:
            logger.error("Search failed: %s", e, exc_info=True)
            self.error = e

    def join(self, timeout: Optional[float] = None) -> Optional[Result]:
        if self._thread is not None:
            self._thread.join(timeout)
        return self.result

    def run_blocking(self, graph: Union[Graph, Adjacency], poll: float = 0.1) -> Optional[Result]:
        """
        Start a run and wait for it from the calling thread. Ctrl-C cancels
        the search and still returns its Cancelled outcome.
        """
        self.start(graph)
        try:
            while self.running:
                self.join(poll)
        except KeyboardInterrupt:
            logger.info("Interrupted, cancelling search")
            self.cancel()
            self.join()
        if self.error is not None:
            raise self.error
        return self.result

    def pause(self) -> None:
        self.control.pause()

    def resume(self) -> None:
        self.control.resume()

    def toggle_pause(self) -> bool:
        return self.control.toggle_pause()

    def step(self) -> bool:
        return self.control.step()

    def step_back(self) -> bool:
        return self.control.step_back()

    def cancel(self) -> None:
        self.control.cancel()

    def set_interval(self, seconds: float) -> None:
        self.control.interval = seconds
