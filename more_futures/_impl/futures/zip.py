# -*- coding: utf-8 -*-
from threading import Lock
from functools import partial

from ..common import copy_future
from ..metrics import track_future
from .base import f_return, weak_callback
from .chain import ChainFuture
from .check import is_future


class Joiner(object):
    def __init__(self, fs):
        self.fs = list(fs)
        self.out = ChainFuture()
        self.done = False
        self.lock = Lock()
        self.count_remaining = len(self.fs)

        for (idx, future) in enumerate(self.fs):
            future.add_done_callback(weak_callback(partial(self.handle_done, idx)))

    def handle_done(self, index, f):
        set_result = False
        propagate = False

        with self.lock:
            if self.done:
                pass
            elif f.cancelled() or f.exception() is not None:
                self.done = True
                propagate = True
            else:
                self.fs[index] = f.result()
                self.count_remaining -= 1

                if self.count_remaining == 0:
                    self.done = True
                    set_result = True

        if set_result:
            self.out.set_result(self.fs)
        if propagate:
            copy_future(f, self.out)


def f_all(*fs):
    """Create a new future holding the return values of any number of input futures.

    Signature: :code:`Future<A>[, Future<B>[, ...]] ⟶ Future<list<A|B|...>>`

    Arguments:
        fs (~concurrent.futures.Future)
            Any number of futures.

    Returns:
        :class:`~more_futures.ChainFuture` of :class:`list`
            A future holding the returned values of all input futures as a list,
            once all of them have completed.
            The returned list has the same length and order as the input futures.

            Alternatively, a future raising an exception or a cancelled future,
            as soon as any input future raised an exception or was cancelled.
    """
    for f in fs:
        if not is_future(f):
            raise TypeError("f_all() called with non-future value: %s" % repr(f))

    if not fs:
        return f_return([])

    return track_future(Joiner(fs).out, type="all")
