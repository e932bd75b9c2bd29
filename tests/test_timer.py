from concurrent.futures import Future

from hamcrest import assert_that, equal_to
from monotonic import monotonic

from more_futures._impl.timer import Timer, get_timer

from .util import assert_soon


def test_get_timer_is_shared():
    assert get_timer() is get_timer()


def test_schedule_resolves():
    timer = Timer(name="test")
    future = Future()

    start = monotonic()
    assert timer.schedule(0.05, future) is future

    assert_that(future.result(10.0), equal_to(None))
    assert monotonic() - start >= 0.045


def test_schedule_earlier_job_wakes_timer():
    timer = Timer(name="test")
    late = timer.schedule(5.0, Future())
    early = timer.schedule(0.01, Future())

    early.result(2.0)
    assert not late.done()


def test_cancelled_future_skipped():
    timer = Timer(name="test")
    cancelled = Future()
    other = Future()

    timer.schedule(0.01, cancelled)
    timer.schedule(0.05, other)
    cancelled.cancel()

    # timer survives trying to resolve the cancelled future
    other.result(10.0)
    assert cancelled.cancelled()


def test_timer_thread_exits_when_collected():
    timer = Timer(name="collected")
    thread = timer._thread
    del timer

    assert_soon(lambda: assert_that(thread.is_alive(), equal_to(False)))
