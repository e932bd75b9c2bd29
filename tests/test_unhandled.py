import gc
import logging
from unittest.mock import MagicMock

from hamcrest import assert_that, equal_to, contains_string
from pytest import fixture

from more_futures import (
    f_return,
    f_return_error,
    set_unhandled_failure_sink,
    get_unhandled_failure_sink,
    log_unhandled_failure,
)


@fixture(autouse=True)
def collect_earlier_garbage():
    # failed futures left over from other tests must not reach our sinks
    gc.collect()


def drop(make_future):
    # creates and immediately discards a future
    make_future()
    gc.collect()


def test_disabled_by_default():
    assert get_unhandled_failure_sink() is None


def test_reports_unobserved_failure():
    sink = MagicMock()
    set_unhandled_failure_sink(sink)
    error = RuntimeError("simulated error")

    drop(lambda: f_return(1).then(lambda _: f_return_error(error)))

    # Only the end of the chain is unobserved
    assert_that(sink.call_count, equal_to(1))
    assert sink.call_args[0][1] is error


def test_observed_failure_not_reported():
    sink = MagicMock()
    set_unhandled_failure_sink(sink)

    future = f_return_error(RuntimeError("simulated error"))
    future.exception()
    del future
    gc.collect()

    sink.assert_not_called()


def test_failure_with_callback_not_reported():
    sink = MagicMock()
    set_unhandled_failure_sink(sink)

    future = f_return_error(RuntimeError("simulated error"))
    future.add_done_callback(lambda f: None)
    del future
    gc.collect()

    sink.assert_not_called()


def test_success_not_reported():
    sink = MagicMock()
    set_unhandled_failure_sink(sink)

    drop(lambda: f_return("fine"))

    sink.assert_not_called()


def test_log_unhandled_failure(caplog):
    set_unhandled_failure_sink(log_unhandled_failure)

    with caplog.at_level(logging.ERROR, logger="more_futures"):
        drop(lambda: f_return_error(ValueError("nobody looked at me")))

    assert_that(caplog.text, contains_string("Unhandled failure"))
    assert_that(caplog.text, contains_string("nobody looked at me"))


def test_broken_sink_is_logged(caplog):
    set_unhandled_failure_sink(MagicMock(side_effect=RuntimeError("sink failed")))

    with caplog.at_level(logging.ERROR, logger="more_futures"):
        drop(lambda: f_return_error(ValueError("simulated error")))

    assert_that(caplog.text, contains_string("exception reporting unhandled failure"))
