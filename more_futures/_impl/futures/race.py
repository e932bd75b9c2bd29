# -*- coding: utf-8 -*-

from threading import Lock
import logging

from ..common import copy_exception, settled_exception
from ..errors import AllFailed
from ..logwrap import LogWrapper
from ..metrics import track_future
from .base import weak_callback
from .chain import ChainFuture
from .check import is_future

LOG = LogWrapper(logging.getLogger("more_futures"))


class FirstSuccessOperation(object):
    # Resolved by the earliest input to succeed; errors are kept in the
    # order the inputs failed, to be raised together if none succeed.
    def __init__(self, fs):
        self.errors = []
        self.count_remaining = len(fs)
        self.done = False
        self.lock = Lock()
        self.out = ChainFuture()

        if not fs:
            self.done = True
            copy_exception(self.out, AllFailed([]))

        for f in fs:
            f.add_done_callback(weak_callback(self.handle_done))

    def handle_done(self, f):
        set_result = False
        set_exception = False

        with self.lock:
            if self.done:
                return

            self.count_remaining -= 1
            error = settled_exception(f)

            if error is None:
                self.done = True
                set_result = True
            else:
                self.errors.append(error)
                if self.count_remaining == 0:
                    self.done = True
                    set_exception = True

        if set_result:
            LOG.debug("First success: %s", f)
            self.out.set_result(f.result())
        if set_exception:
            copy_exception(self.out, AllFailed(self.errors))


def f_first_success(*fs):
    """Race any number of futures, keeping the first to succeed.

    Signature: :code:`Future<A>[, Future<B>[, ...]] ⟶ Future<A|B|...>`

    Arguments:
        fs (~concurrent.futures.Future)
            Any number of futures; alternatively, a single iterable
            of futures.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with the output value of whichever input
            future succeeded first (by time of completion, not by position).

            If all input futures fail, a future failing with
            :class:`~more_futures.AllFailed`, holding the exception of each
            input in the order they completed.  Cancelled inputs count as
            failed with :class:`~concurrent.futures.CancelledError`.

            Input futures are not cancelled once a winner is found.
    """
    if len(fs) == 1 and not is_future(fs[0]):
        fs = tuple(fs[0])

    for f in fs:
        if not is_future(f):
            raise TypeError(
                "f_first_success() called with non-future value: %s" % repr(f)
            )

    oper = FirstSuccessOperation(list(fs))
    track_future(oper.out, type="first_success")
    return oper.out
