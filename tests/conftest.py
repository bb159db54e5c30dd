import pytest

from catalog.loader import load_catalog


class ManualHandle:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """
    Fake clock for the animator: timers only fire when advance() is called.
    """
    def __init__(self):
        self.now = 0.0
        self._timers = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self._timers.append(handle)
        return handle

    @property
    def pending(self):
        return [handle for handle in self._timers if not handle.cancelled]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self._timers.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def melbourne():
    return (-37.8136, 144.9631)


@pytest.fixture
def sydney():
    return (-33.8688, 151.2093)
