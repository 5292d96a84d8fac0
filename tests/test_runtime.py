import logging
import threading

import pytest

from minijs.errors import EmptySourceError, RuntimeStoppedError
from minijs.runtime import Runtime
from minijs.values import UNDEFINED, Number, String


#runtime whose console output lands in a list
@pytest.fixture
def runtime():
    lines = []
    with Runtime(write=lines.append, tick_interval=0.002) as rt:
        rt.lines = lines
        yield rt


#console.log joins its arguments with spaces
def test_console_log(runtime) -> None:
    result = runtime.execute('console.log("Hello from minijs!", 1 + 2, true);')
    assert result is UNDEFINED
    assert runtime.lines == ["Hello from minijs! 3 true"]


#print is a plain global alias for console.log
def test_print_builtin(runtime) -> None:
    runtime.execute('print("x =", 5 / 2);')
    assert runtime.lines == ["x = 2.5"]


#state persists across execute calls on the same runtime
def test_bindings_persist_between_calls(runtime) -> None:
    runtime.execute("let total = 40;")
    assert runtime.execute("total + 2;") == Number(42.0)


#host values can be injected as globals
def test_set_global(runtime) -> None:
    runtime.set_global("greeting", "hi")
    runtime.set_global("count", 3)
    assert runtime.execute('greeting + " " + count;') == String("hi 3")


#setTimeout defers the callback until after execute returns
def test_set_timeout_runs_later(runtime) -> None:
    done = threading.Event()
    runtime.execute('setTimeout(fn() { console.log("later"); }, 20); console.log("now");')
    assert runtime.lines == ["now"]
    runtime.event_loop.add_task(done.set, 40)
    assert done.wait(2.0)
    assert runtime.wait_idle(2.0)
    assert runtime.lines == ["now", "later"]


#deferred callbacks still see their closure state
def test_delay_callback_sees_closure(runtime) -> None:
    runtime.execute("""
        let name = "world";
        let greet = fn() { print("hello " + name); };
        delay(greet, 5);
    """)
    assert runtime.wait_idle(2.0)
    assert runtime.lines == ["hello world"]


#non-function callbacks and missing arguments are ignored
def test_set_timeout_ignores_bad_arguments(runtime) -> None:
    assert runtime.execute("setTimeout(5, 10);") is UNDEFINED
    assert runtime.execute("setTimeout();") is UNDEFINED
    assert runtime.event_loop.pending == 0


#empty source is rejected before evaluation
def test_empty_source(runtime) -> None:
    with pytest.raises(EmptySourceError):
        runtime.execute("")


#a stopped runtime refuses work and drops pending timers
def test_stop_clears_queue() -> None:
    lines = []
    runtime = Runtime(write=lines.append, autostart=False)
    runtime.execute('setTimeout(fn() { print("never"); }, 1000);')
    assert runtime.event_loop.pending == 1
    runtime.stop()
    assert runtime.event_loop.pending == 0
    with pytest.raises(RuntimeStoppedError):
        runtime.execute("1;")
    assert lines == []


#debug mode routes evaluation events to the trace logger
def test_debug_trace_logging(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="minijs.trace")
    with Runtime(write=lambda line: None, debug=True, autostart=False) as runtime:
        assert runtime.execute("let x = 1; x + 1;") == Number(2.0)
        runtime.disable_debug()
        caplog.clear()
        runtime.execute("x;")
    assert "[trace]" not in caplog.text


#trace messages appear while debug is enabled
def test_debug_enabled_emits_trace(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="minijs.trace")
    with Runtime(write=lambda line: None, autostart=False) as runtime:
        runtime.enable_debug()
        runtime.execute("let x = 1;")
    assert "[trace] let x = 1" in caplog.text
