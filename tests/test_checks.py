import logging
from functools import partial
from unittest.mock import MagicMock

from hamcrest import assert_that, equal_to, calling, raises

from more_futures import f_all, f_return
from more_futures._impl.futures.check import positional_arity
from more_futures._impl.logwrap import LogWrapper


def test_arity_plain_functions():
    assert_that(positional_arity(lambda: None, 1), equal_to(0))
    assert_that(positional_arity(lambda x: None, 1), equal_to(1))
    assert_that(positional_arity(lambda x, y: None, 3, 1), equal_to(2))
    assert_that(positional_arity(lambda x, y, z: None, 3, 1), equal_to(3))


def test_arity_defaults_and_varargs():
    assert_that(positional_arity(lambda x=1: None, 1), equal_to(1))
    assert_that(positional_arity(lambda *args: None, 3, 1), equal_to(3))
    assert_that(positional_arity(lambda x, *, key=None: None, 2, 1), equal_to(1))


def test_arity_partial_and_methods():
    class Thing(object):
        def method(self, value, remaining):
            return value

    assert_that(positional_arity(Thing().method, 2, 1), equal_to(2))
    assert_that(positional_arity(partial(lambda x, y: None, 1), 2, 1), equal_to(1))


def test_arity_mock_takes_all():
    assert_that(positional_arity(MagicMock(), 3, 1), equal_to(3))


def test_arity_falls_back_to_minimum():
    # Requires more arguments than we'd ever pass
    assert_that(positional_arity(lambda a, b, c, d: None, 3, 1), equal_to(1))


def test_all_rejects_non_future():
    assert_that(
        calling(f_all).with_args(f_return(1), "not a future"),
        raises(TypeError, "non-future value"),
    )


def test_log_wrapper_debug_enabled(caplog):
    # conftest sets MORE_FUTURES_DEBUG=1
    log = LogWrapper(logging.getLogger("more_futures.test"))

    with caplog.at_level(logging.DEBUG, logger="more_futures.test"):
        log.debug("debug %s", 1)
        log.warning("warning %s", 2)

    assert_that(
        [r.getMessage() for r in caplog.records], equal_to(["debug 1", "warning 2"])
    )


def test_log_wrapper_debug_vetoed(caplog, monkeypatch):
    monkeypatch.setenv("MORE_FUTURES_DEBUG", "0")
    log = LogWrapper(logging.getLogger("more_futures.test"))

    with caplog.at_level(logging.DEBUG, logger="more_futures.test"):
        log.debug("debug %s", 1)
        log.info("info %s", 2)

    assert_that([r.getMessage() for r in caplog.records], equal_to(["info 2"]))
