# -*- coding: utf-8 -*-

from ..metrics import track_future
from ..timer import get_timer
from .base import f_then
from .chain import ChainFuture
from .check import ensure_future


def f_sleep(delay):
    """Return a future which is resolved after a delay.

    Signature: :code:`float ⟶ Future<None>`

    Arguments:
        delay (float)
            Time to wait, in seconds. Negative values are treated as zero.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with :code:`None` once :obj:`delay` has passed.

            Callbacks of the returned future are invoked from a background
            thread shared by all sleeping futures, so they should not block.
    """
    future = track_future(ChainFuture(), type="sleep")
    return get_timer().schedule(delay, future)


@ensure_future
def f_delay(future, delay):
    """Delay the output value of a future.

    Signature: :code:`Future<A>, float ⟶ Future<A>`

    Arguments:
        future (~concurrent.futures.Future)
            Any future.
        delay (float)
            Time to wait after :obj:`future` succeeds, in seconds.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with the same value as :obj:`future`,
            :obj:`delay` seconds after :obj:`future` was resolved.

            If :obj:`future` fails, the returned future fails straight away
            with the same exception.
    """
    return f_then(future, lambda value: f_sleep(delay).returns(value))
