# -*- coding: utf-8 -*-
import logging

from ..common import is_collection
from ..logwrap import LogWrapper
from .base import as_future, f_then
from .check import ensure_future
from .zip import f_all

LOG = LogWrapper(logging.getLogger("more_futures"))


def _map_each(fn, items):
    if not is_collection(items):
        raise TypeError("Expected a list or tuple, got: %s" % repr(items))
    return f_all(*[as_future(fn(item)) for item in items])


def _fan_out(fn, value):
    if is_collection(value):
        return _map_each(fn, value)

    LOG.warning("Value to fan out is not a list or tuple, mapping it once: %r", value)
    return fn(value)


@ensure_future
def f_map_each(future, fn):
    """Apply a function to every element of a future's list.

    Signature: :code:`Future<list<A>>, fn<A⟶B|Future<B>> ⟶ Future<list<B>>`

    The function is called for all elements straight away; it's up to
    :obj:`fn` whether the work happens concurrently, e.g. by returning
    futures from an executor.

    Arguments:
        future (~concurrent.futures.Future)
            A future resolved with a list or tuple.
        fn (callable)
            Called once for each element; may return a value or a future.

    Returns:
        :class:`~more_futures.ChainFuture` of :class:`list`
            A future resolved with the results of :obj:`fn`, in the same
            order as the input elements, once all of them are available.

            Alternatively, a future raising the first exception raised by
            :obj:`future`, :obj:`fn` or any future returned by :obj:`fn`;
            or :class:`TypeError` if :obj:`future` was not resolved with
            a list or tuple.
    """
    return f_then(future, lambda items: _map_each(fn, items))


@ensure_future
def f_fan_out(future, fn):
    """Like :func:`f_map_each`, but tolerates a future not resolved with a list.

    Signature: :code:`Future<list<A>|A>, fn<A⟶B|Future<B>> ⟶ Future<list<B>|B>`

    If :obj:`future` is resolved with a list or tuple, this is the same as
    :func:`f_map_each`.  Otherwise, :obj:`fn` is applied to the value once,
    a warning is logged, and the result is not wrapped in a list.
    """
    return f_then(future, lambda value: _fan_out(fn, value))
