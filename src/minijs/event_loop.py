"""Deferred-task queue standing in for a host event loop."""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


#a callback together with the monotonic time it becomes due
@dataclass(slots=True)
class Task:
    callback: Callable[[], object]
    when: float


class EventLoop:
    """Lock-protected queue of delayed callbacks.

    Tasks fire only once their due time has passed. Tasks that become due
    within the same tick fire in no particular order. The queue is the
    only state shared between the thread that registers tasks and the
    poller, and every access to it holds ``_lock``.
    """

    def __init__(self, interval: float = 0.01, clock: Clock = time.monotonic) -> None:
        self.interval = interval
        self._clock = clock
        self._tasks: List[Task] = []
        self._in_flight = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def add_task(self, callback: Callable[[], object], delay_ms: float) -> None:
        when = self._clock() + max(delay_ms, 0.0) / 1000.0
        with self._lock:
            self._tasks.append(Task(callback=callback, when=when))
        logger.debug("scheduled task in %sms", delay_ms)

    #drops every task that has not fired yet
    def clear(self) -> None:
        with self._lock:
            dropped = len(self._tasks)
            self._tasks = []
        if dropped:
            logger.debug("cleared %d pending task(s)", dropped)

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._tasks)

    #fires every due task and returns how many ran
    def tick(self) -> int:
        now = self._clock()
        with self._lock:
            due = [task for task in self._tasks if now >= task.when]
            self._tasks = [task for task in self._tasks if now < task.when]
            self._in_flight += len(due)
        for task in due:
            try:
                task.callback()
            except Exception:
                logger.exception("deferred task failed")
            finally:
                with self._lock:
                    self._in_flight -= 1
        return len(due)

    @property
    def idle(self) -> bool:
        with self._lock:
            return not self._tasks and not self._in_flight

    # Poller ---------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="minijs-event-loop", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    #blocks until the queue drains or the timeout passes; True when drained
    def wait_idle(self, timeout: float) -> bool:
        deadline = time.monotonic() + timeout
        while not self.idle:
            if time.monotonic() >= deadline:
                return False
            if not self.running:
                self.tick()
            time.sleep(self.interval)
        return True

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.tick()
