# -*- coding: utf-8 -*-

from functools import partial

from ..common import copy_exception, copy_future
from ..metrics import track_future
from .chain import ChainFuture
from .check import ensure_future, is_future


def f_return(x=None):
    """Return a future which provides the value `x`.

    Signature: :code:`A ⟶ Future<A>`

    Arguments:
        x
            A value to be returned

    Returns:
        :class:`~more_futures.ChainFuture` of :obj:`x`
            A future immediately resolved with the value :obj:`x`.
    """
    future = ChainFuture()
    track_future(future, type="return")
    future.set_result(x)
    return future


def f_return_error(x):
    """Return a future which raises the exception `x`.

    Arguments:
        x (Exception)
            An exception to be raised.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future immediately resolved with the exception :obj:`x`.
    """
    f = ChainFuture()
    track_future(f, type="return_error")
    copy_exception(f, x)
    return f


class WeakCallback(object):
    # A wrapper for a single-call callback which breaks the reference
    # to the callback at time of call.
    #
    # The point is to avoid futures holding references to each other
    # unnecessarily, as the standard concurrent.futures.Future keeps
    # its callbacks after calling them.
    def __init__(self, delegate):
        self.__delegate = delegate

    def __call__(self, *args, **kwargs):
        delegate = self.__delegate
        del self.__delegate
        return delegate(*args, **kwargs)


weak_callback = WeakCallback


def flatten_into(out, result):
    # Resolve out from result, which may be a value or a future.
    if is_future(result):
        result.add_done_callback(weak_callback(partial(copy_future, f2=out)))
    else:
        out.set_result(result)


def as_future(x):
    if is_future(x):
        return x
    return f_return(x)


def _on_settled(out, fn, future):
    if future.cancelled() or future.exception() is not None or fn is None:
        copy_future(future, out)
        return

    try:
        result = fn(future.result())
    except Exception:
        copy_exception(out)
        return

    flatten_into(out, result)


@ensure_future
def f_then(future, fn=None):
    """Apply a function to the output value of a future.

    Signature: :code:`Future<A>, fn<A⟶B|Future<B>> ⟶ Future<B>`

    Arguments:
        future (~concurrent.futures.Future)
            Any future.
        fn (callable)
            Any callable to be applied on a successful future.
            This function is provided the result of the input future,
            and may return either a value or a future.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with:

            - the returned value of :code:`fn(future.result())`
            - or, if :obj:`fn` returned a future, the outcome of that future
            - or with the exception raised by :obj:`future` or :obj:`fn`.

            If :obj:`fn` is omitted, the returned future has the same
            outcome as :obj:`future`.
    """
    out = track_future(ChainFuture(), type="then")
    future.add_done_callback(weak_callback(partial(_on_settled, out, fn)))
    return out


@ensure_future
def f_returns(future, x):
    """Replace the output value of a future.

    Signature: :code:`Future<A>, B ⟶ Future<B>`

    Arguments:
        future (~concurrent.futures.Future)
            Any future.
        x
            Any value.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with :obj:`x` once :obj:`future` has
            succeeded, or with the exception raised by :obj:`future`.
    """
    return f_then(future, lambda _: x)
