"""
Debounce Tests
==============

Deferred tasks driven by a virtual clock: nothing fires early, bursts
coalesce into one call, and cancellation sticks.
"""
from botct_client.debounce import Debouncer, DeferredTask
from tests.conftest import FakeClock


class TestDeferredTask:

    def test_due_and_run_once(self):
        calls = []
        task = DeferredTask(10.0, lambda: calls.append(1))

        assert task.is_due(9.9) is False
        assert task.is_due(10.0) is True
        task.run()
        task.run()
        assert calls == [1]
        assert task.done is True
        assert task.is_due(11.0) is False

    def test_cancelled_never_runs(self):
        calls = []
        task = DeferredTask(0.0, lambda: calls.append(1))
        task.cancel()
        assert task.cancelled is True
        assert task.is_due(5.0) is False
        task.run()
        assert calls == []


class TestDebouncer:

    def test_fires_after_delay(self):
        clock = FakeClock()
        calls = []
        debouncer = Debouncer(0.5, clock)
        debouncer.schedule(lambda: calls.append("save"))

        clock.advance(0.49)
        assert debouncer.poll() is False
        clock.advance(0.02)
        assert debouncer.poll() is True
        assert calls == ["save"]
        assert debouncer.pending is None
        assert debouncer.poll() is False

    def test_burst_coalesces_to_last(self):
        clock = FakeClock()
        calls = []
        debouncer = Debouncer(0.5, clock)

        for i in range(5):
            debouncer.schedule(lambda i=i: calls.append(i))
            clock.advance(0.1)
            debouncer.poll()

        assert calls == []
        clock.advance(0.5)
        debouncer.poll()
        assert calls == [4]

    def test_reschedule_restarts_delay(self):
        clock = FakeClock()
        calls = []
        debouncer = Debouncer(0.5, clock)
        debouncer.schedule(lambda: calls.append("first"))
        clock.advance(0.4)
        debouncer.schedule(lambda: calls.append("second"))
        clock.advance(0.4)

        assert debouncer.poll() is False
        clock.advance(0.2)
        assert debouncer.poll() is True
        assert calls == ["second"]

    def test_previous_task_is_cancelled(self):
        debouncer = Debouncer(0.5, FakeClock())
        first = debouncer.schedule(lambda: None)
        second = debouncer.schedule(lambda: None)
        assert first.cancelled is True
        assert debouncer.pending is second

    def test_cancel(self):
        clock = FakeClock()
        calls = []
        debouncer = Debouncer(0.5, clock)
        debouncer.schedule(lambda: calls.append(1))
        debouncer.cancel()
        clock.advance(1.0)
        assert debouncer.poll() is False
        assert calls == []

    def test_flush_runs_pending_now(self):
        calls = []
        debouncer = Debouncer(0.5, FakeClock())
        debouncer.schedule(lambda: calls.append(1))
        assert debouncer.flush() is True
        assert calls == [1]
        assert debouncer.flush() is False
