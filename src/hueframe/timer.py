import threading
from typing import Callable


class IdleTimer:
    """Single-shot timer that can be restarted.

    Only one deadline is pending at a time. ``callback`` receives the
    generation the timer was armed with, so the owner can drop a fire that
    lost the race against a later ``start()`` or ``cancel()``.
    """

    def __init__(self, interval: float, callback: Callable[[int], None],
                 timer_cls: type = threading.Timer):
        self.interval = interval
        self.callback = callback
        self.timer_cls = timer_cls
        self.generation = 0
        self._timer = None

    def start(self) -> int:
        self.cancel()
        self.generation += 1
        self._timer = self.timer_cls(self.interval, self.callback, args=(self.generation,))
        self._timer.daemon = True
        self._timer.start()
        return self.generation

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self.generation += 1

    def is_current(self, generation: int) -> bool:
        return self._timer is not None and generation == self.generation

    def disarm(self) -> None:
        """Forget the timer that just fired."""
        self._timer = None
