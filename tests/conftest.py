import pytest

from path_visualizer.config import ANIMATION_INTERVAL


class FakeTimerHandle:
    """Stands in for asyncio.TimerHandle."""

    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    """Minimal call_later event loop driven by simulated time."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeTimerHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds):
        end = self.now + seconds
        while True:
            due = [h for h in self.pending() if h.when <= end + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = handle.when
            handle.fired = True
            handle.callback(*handle.args)
        self.now = end

    def tick(self, count=1):
        self.advance(count * ANIMATION_INTERVAL)


@pytest.fixture
def loop():
    return FakeLoop()
