import itertools
import logging

log = logging.getLogger(__name__)


class Task:
    def __init__(self, name, callback, due, interval, seq):
        self.name = name
        self.callback = callback
        self.due = due
        self.interval = interval
        self.seq = seq
        self.cancelled = False

    @property
    def repeating(self):
        return self.interval is not None

    def cancel(self):
        self.cancelled = True

    def __repr__(self):
        kind = f"every {self.interval}ms" if self.repeating else "once"
        state = " cancelled" if self.cancelled else ""
        return f"<Task {self.name} {kind} due={self.due}{state}>"


class Scheduler:
    """Cooperative timers driven by a virtual clock.

    Nothing here reads wall-clock time: the owner calls ``advance`` with the
    milliseconds that elapsed, and every task that fell due runs on the
    caller's thread in due-time order, so timers never interleave with the
    frame tick.
    """

    def __init__(self):
        self.now = 0.0
        self._tasks = []
        self._seq = itertools.count()

    def _add(self, name, callback, delay, interval):
        task = Task(name, callback, self.now + delay, interval, next(self._seq))
        self._tasks.append(task)
        log.debug("scheduled %r", task)
        return task

    def every(self, interval_ms, callback, name="task"):
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        return self._add(name, callback, interval_ms, interval_ms)

    def after(self, delay_ms, callback, name="task"):
        return self._add(name, callback, max(0.0, delay_ms), None)

    @property
    def tasks(self):
        return [t for t in self._tasks if not t.cancelled]

    def _next_due(self, until):
        due = [t for t in self._tasks if not t.cancelled and t.due <= until]
        if not due:
            return None
        return min(due, key=lambda t: (t.due, t.seq))

    def advance(self, elapsed_ms):
        """Move the clock forward, running due tasks. Returns how many ran."""
        target = self.now + max(0.0, elapsed_ms)
        ran = 0
        while True:
            task = self._next_due(target)
            if task is None:
                break
            self.now = task.due
            if task.repeating:
                task.due += task.interval
            else:
                task.cancel()
            task.callback()
            ran += 1
        self.now = target
        self._tasks = [t for t in self._tasks if not t.cancelled]
        return ran
