# -*- coding: utf-8 -*-
import logging
from functools import partial

from ..common import copy_exception, copy_future, is_collection
from ..logwrap import LogWrapper
from ..metrics import track_future
from .base import f_then
from .chain import ChainFuture
from .check import ensure_future, is_future, positional_arity

LOG = LogWrapper(logging.getLogger("more_futures"))


class Sequencer(object):
    # Runs each source only once the previous one has succeeded.
    #
    # Sources which complete immediately are consumed by the loop in run()
    # rather than via callbacks, so a long sequence of synchronous steps
    # doesn't need a deep stack.
    def __init__(self, sources, seed):
        self.sources = list(sources)
        self.previous = seed
        self.results = []
        self.out = ChainFuture()

    def run(self):
        while True:
            index = len(self.results)
            if index == len(self.sources):
                self.out.set_result(self.results)
                return

            try:
                result = self.start(index)
            except Exception:
                LOG.debug("Sequence step %s raised", index, exc_info=True)
                copy_exception(self.out)
                return

            if not is_future(result):
                self.accept(result)
                continue

            if not result.done():
                result.add_done_callback(self.on_step_done)
                return

            if not self.consume(result):
                return

    def start(self, index):
        source = self.sources[index]
        if callable(source) and not is_future(source):
            LOG.debug("Sequence calling step %s: %r", index, source)
            return source(self.previous, index)
        return source

    def accept(self, value):
        self.results.append(value)
        self.previous = value

    def consume(self, future):
        # Returns True if the sequence may proceed past this future
        if future.cancelled() or future.exception() is not None:
            copy_future(future, self.out)
            return False

        self.accept(future.result())
        return True

    def on_step_done(self, future):
        if self.consume(future):
            self.run()


def f_sync(sources, seed=None):
    """Run a sequence of steps one after the other.

    Signature: :code:`list<fn<A,int⟶B|Future<B>>|Future<B>|B>[, A] ⟶ Future<list<B>>`

    Arguments:
        sources (iterable)
            The steps to run. Each element may be:

            - a callable, invoked as :code:`fn(previous, index)` where
              ``previous`` is the output value of the preceding step (or
              :obj:`seed` for the first step); it may return a value or
              a future
            - a future, which is waited on
            - any other value, taken as the output of that step as-is
        seed
            Passed as ``previous`` to the first step.

    Returns:
        :class:`~more_futures.ChainFuture` of :class:`list`
            A future resolved with the output value of every step, in order.

            A step is never started before the step prior to it has
            succeeded.  When a step fails, no further steps are started and
            the returned future fails with the same exception.
    """
    sequencer = Sequencer(sources, seed)
    track_future(sequencer.out, type="sync")
    sequencer.run()
    return sequencer.out


def _call_with_item(fn, arity, item, previous, index):
    return fn(*(item, index, previous)[:arity])


def _sync_each(fn, arity, items):
    if not is_collection(items):
        raise TypeError("Expected a list or tuple, got: %s" % repr(items))
    return f_sync([partial(_call_with_item, fn, arity, item) for item in items])


def _sync_auto(fn, arity, value):
    if is_collection(value):
        return _sync_each(fn, arity, value)

    LOG.warning("Value to sync is not a list or tuple, calling once: %r", value)
    return fn(*(value, 0, None)[:arity])


@ensure_future
def f_sync_each(future, fn):
    """Apply a function to each element of a future's list, one at a time.

    Signature: :code:`Future<list<A>>, fn<A,int,B⟶B|Future<B>> ⟶ Future<list<B>>`

    Arguments:
        future (~concurrent.futures.Future)
            A future resolved with a list or tuple.
        fn (callable)
            Invoked as :code:`fn(item, index, previous)` for each element,
            where ``previous`` is the output value of the preceding call
            (``None`` for the first).  May return a value or a future.

            If :obj:`fn` accepts fewer positional arguments, only the
            leading ones are passed: :code:`fn(item)` or
            :code:`fn(item, index)`.

    Returns:
        :class:`~more_futures.ChainFuture` of :class:`list`
            A future resolved with the output values of :obj:`fn`, as
            :func:`f_sync`; or :class:`TypeError` if :obj:`future` was not
            resolved with a list or tuple.
    """
    return f_then(future, partial(_sync_each, fn, positional_arity(fn, 3, 1)))


@ensure_future
def f_sync_auto(future, fn):
    """Like :func:`f_sync_each`, but tolerates a future not resolved with a list.

    If :obj:`future` is resolved with a value other than a list or tuple,
    :obj:`fn` is invoked once as :code:`fn(value, 0, None)` (or with as
    many of those arguments as it accepts), a warning is logged, and the
    result is not wrapped in a list.
    """
    return f_then(future, partial(_sync_auto, fn, positional_arity(fn, 3, 1)))
