from concurrent.futures import Future

from more_futures import f_return, f_return_error, f_then

from ..util import assert_in_traceback


def div10(x):
    return 10 / x


def test_then_nothing():
    assert f_then(f_return(10)).result() == 10


def test_then():
    assert f_then(f_return(10), div10).result() == 1


def test_then_error_from_fn():
    future = f_then(f_return(0), div10)
    assert isinstance(future.exception(), ZeroDivisionError)
    assert_in_traceback(future, "div10")


def test_then_error_from_input():
    error = RuntimeError("simulated error")
    called = []
    future = f_then(f_return_error(error), called.append)
    assert future.exception() is error
    assert called == []


def test_then_flattens_future():
    inner = Future()
    future = f_then(f_return("a"), lambda _: inner)
    assert not future.done()

    inner.set_result("b")
    assert future.result() == "b"


def test_then_flattens_failed_future():
    error = RuntimeError("simulated error")
    future = f_then(f_return("a"), lambda _: f_return_error(error))
    assert future.exception() is error


def test_then_method_chains():
    future = f_return(2).then(lambda x: x * 3).then(lambda x: f_return(x + 1))
    assert future.result() == 7
