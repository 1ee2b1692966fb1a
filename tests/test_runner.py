import pytest

from hamviz.search import Cancelled, CycleFound, EventKind, NoCycle, SearchBusyError, SearchRunner, TraceEvent
from hamviz.trace import TraceRecorder

TIMEOUT = 5.0


class TestSearchRunner:

    def test_runs_to_completion(self, five_cycle):
        rec = TraceRecorder()
        runner = SearchRunner(on_event=rec)
        runner.start(five_cycle)
        result = runner.join(TIMEOUT)
        assert isinstance(result, CycleFound)
        assert not runner.running
        assert rec.events[-1] == TraceEvent.cycle_closed(4, 0)

    def test_pause_step_cancel(self, k23):
        rec = TraceRecorder()
        runner = SearchRunner(on_event=rec)

        def pause_on_first_explore(ev):
            rec(ev)
            if ev == TraceEvent.explore(0, 2):
                runner.pause()

        runner.on_event = pause_on_first_explore
        runner.start(k23)
        assert runner.control.wait_until_blocked(TIMEOUT)
        assert rec.events[-1] == TraceEvent.explore(0, 2)

        assert runner.step()
        assert runner.control.wait_until_blocked(TIMEOUT)
        assert rec.events[-2:] == [TraceEvent.visit(2), TraceEvent.explore(2, 1)]

        assert runner.step_back() is False
        runner.cancel()
        assert isinstance(runner.join(TIMEOUT), Cancelled)
        assert rec.kinds()[-1] is EventKind.CANCELLED

    def test_start_while_running_rejected(self, k23):
        runner = SearchRunner(interval=60.0)
        runner.start(k23)
        with pytest.raises(SearchBusyError):
            runner.start(k23)
        runner.cancel()
        runner.join(TIMEOUT)
        assert not runner.running

    def test_restart_after_cancel(self, k23):
        runner = SearchRunner(interval=60.0)
        runner.start(k23)
        runner.cancel()
        assert isinstance(runner.join(TIMEOUT), Cancelled)
        runner.set_interval(0.0)
        runner.start(k23)
        assert isinstance(runner.join(TIMEOUT), NoCycle)

    def test_callback_error_is_recorded(self, k4):
        def boom(ev):
            raise ValueError("bad renderer")

        runner = SearchRunner(on_event=boom)
        runner.start(k4)
        assert runner.join(TIMEOUT) is None
        assert isinstance(runner.error, ValueError)


class TestRunBlocking:

    def test_returns_result(self, five_cycle):
        runner = SearchRunner()
        assert isinstance(runner.run_blocking(five_cycle, poll=0.01), CycleFound)
        assert not runner.running

    def test_keyboard_interrupt_cancels(self, k23, monkeypatch):
        rec = TraceRecorder()
        runner = SearchRunner(on_event=rec, interval=60.0)
        real_join = runner.join
        calls = []

        def interrupted_join(timeout=None):
            calls.append(timeout)
            if len(calls) == 1:
                raise KeyboardInterrupt
            return real_join(timeout)

        monkeypatch.setattr(runner, "join", interrupted_join)
        result = runner.run_blocking(k23, poll=0.01)
        assert isinstance(result, Cancelled)
        assert result.describe() == "Visualization stopped by user."
        assert rec.kinds()[-1] is EventKind.CANCELLED
        assert not runner.running

    def test_callback_error_reraised(self, k4):
        def boom(ev):
            raise ValueError("bad renderer")

        with pytest.raises(ValueError, match="bad renderer"):
            SearchRunner(on_event=boom).run_blocking(k4, poll=0.01)
