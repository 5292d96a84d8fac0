"""Host runtime: built-in bindings plus the deferred-task event loop."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .environment import Environment
from .errors import RuntimeStoppedError
from .evaluator import Evaluator, TraceSink, evaluate_source
from .event_loop import EventLoop
from .values import (
    UNDEFINED,
    FunctionValue,
    NativeFunction,
    Object,
    Value,
    from_python,
    to_number,
    to_string,
)

logger = logging.getLogger(__name__)
trace_logger = logging.getLogger("minijs.trace")

Writer = Callable[[str], object]


#owns the root environment, the event loop, and the debug switch
class Runtime:
    """Runs minijs source with ``console``, ``print`` and timers bound.

    Use as a context manager, or call :meth:`close` when done, so the
    event loop's poller thread is stopped and pending tasks are dropped.
    """

    def __init__(
        self,
        *,
        write: Writer = print,
        tick_interval: float = 0.01,
        debug: bool = False,
        autostart: bool = True,
    ) -> None:
        self._write = write
        self.env = Environment()
        self.event_loop = EventLoop(interval=tick_interval)
        self._trace: Optional[TraceSink] = None
        self.is_running = True
        self._inject_globals()
        if debug:
            self.enable_debug()
        if autostart:
            self.event_loop.start()

    def __enter__(self) -> Runtime:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Host API -------------------------------------------------------------------

    def execute(self, source: str) -> Value:
        if not self.is_running:
            raise RuntimeStoppedError()
        return evaluate_source(source, self.env, trace=self._trace)

    def set_global(self, name: str, value: object) -> None:
        self.env.set(name, from_python(value))

    def enable_debug(self) -> None:
        self._trace = self._log_trace

    def disable_debug(self) -> None:
        self._trace = None

    def wait_idle(self, timeout: float = 5.0) -> bool:
        return self.event_loop.wait_idle(timeout)

    def stop(self) -> None:
        if not self.is_running:
            return
        self.is_running = False
        self.event_loop.clear()
        self.event_loop.stop()
        logger.debug("runtime stopped")

    def close(self) -> None:
        self.stop()

    # Built-ins ------------------------------------------------------------------

    def _inject_globals(self) -> None:
        log = NativeFunction("log", self._console_log)
        self.env.set("console", Object("console", {"log": log}))
        self.env.set("print", NativeFunction("print", self._console_log))
        timeout = NativeFunction("setTimeout", self._set_timeout)
        self.env.set("setTimeout", timeout)
        self.env.set("delay", timeout)

    def _console_log(self, args: List[Value]) -> Value:
        self._write(" ".join(to_string(arg) for arg in args))
        return UNDEFINED

    #setTimeout(callback, ms): non-function callbacks are ignored
    def _set_timeout(self, args: List[Value]) -> Value:
        if len(args) < 2:
            return UNDEFINED
        callback, delay = args[0], to_number(args[1])
        if not isinstance(callback, FunctionValue):
            return UNDEFINED
        evaluator = Evaluator(trace=self._trace)
        self.event_loop.add_task(lambda: evaluator.call_function(callback, []), delay)
        return UNDEFINED

    def _log_trace(self, message: str) -> None:
        trace_logger.debug("[trace] %s", message)
