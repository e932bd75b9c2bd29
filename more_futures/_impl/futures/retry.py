# -*- coding: utf-8 -*-
import logging
from collections.abc import Mapping

from ..common import copy_exception, copy_future
from ..errors import RetryExhausted
from ..logwrap import LogWrapper
from ..metrics import metrics, track_future
from .base import f_then
from .chain import ChainFuture
from .check import ensure_future, is_future, positional_arity
from .sleep import f_sleep

LOG = LogWrapper(logging.getLogger("more_futures.retry"))


class RetryOptions(object):
    """Options controlling the behavior of :func:`f_retry`.

    Instances are never modified by :func:`f_retry`, so one instance
    may be shared between any number of retried futures.
    """

    FIELDS = ("times", "delay", "print_errors", "error_prefix")

    def __init__(self, times=1, delay=0.5, print_errors=False, error_prefix=""):
        """
        Parameters:
            times (int): maximum number of attempts; 0 fails without any attempt
            delay (float): time to wait between attempts, in seconds
            print_errors (bool): if true, every failed attempt is logged
            error_prefix (str): prepended to logged errors and to the message
                                of :class:`~more_futures.RetryExhausted`
        """
        if isinstance(times, bool) or not isinstance(times, int):
            raise ValueError("times must be an integer, got: %r" % (times,))
        if delay < 0:
            raise ValueError("delay must not be negative, got: %r" % (delay,))

        self.times = times
        self.delay = delay
        self.print_errors = bool(print_errors)
        self.error_prefix = error_prefix

    @classmethod
    def coerce(cls, options=None, **kwargs):
        """Returns a new RetryOptions from another instance, a mapping or None,
        with any keyword arguments overriding the values found there."""
        if options is None:
            values = {}
        elif isinstance(options, RetryOptions):
            values = options._asdict()
        elif isinstance(options, Mapping):
            values = dict(options)
        else:
            raise TypeError("Can't make RetryOptions from %r" % (options,))

        values.update(kwargs)
        return cls(**values)

    def replace(self, **kwargs):
        return self.coerce(self, **kwargs)

    def _asdict(self):
        return dict([(field, getattr(self, field)) for field in self.FIELDS])

    def __eq__(self, other):
        return isinstance(other, RetryOptions) and self._asdict() == other._asdict()

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "RetryOptions(%s)" % ", ".join(
            ["%s=%r" % (field, getattr(self, field)) for field in self.FIELDS]
        )


class RetryLoop(object):
    # One retried call.  Attempts happen one at a time: the next attempt is
    # only started by the timer after the previous attempt failed.
    def __init__(self, fn, options):
        self.fn = fn
        # fn may or may not take the remaining attempt count
        self.arity = positional_arity(fn, 1)
        self.options = options
        self.remaining = options.times
        self.errors = []
        self.out = ChainFuture()

    def attempt(self):
        if self.remaining <= 0:
            self.exhaust()
            return

        LOG.debug("Attempting %r, %s remaining", self.fn, self.remaining)

        try:
            result = self.fn(*[self.remaining][: self.arity])
        except Exception as error:
            self.on_failure(error)
            return

        if is_future(result):
            result.add_done_callback(self.on_attempt_done)
        else:
            self.out.set_result(result)

    def on_attempt_done(self, future):
        if future.cancelled():
            # retrying on cancel is not allowed
            LOG.debug("Attempt of %r was cancelled", self.fn)
            copy_future(future, self.out)
            return

        exception = future.exception()
        if exception is not None:
            self.on_failure(exception)
        else:
            self.out.set_result(future.result())

    def on_failure(self, error):
        prefix = self.options.error_prefix
        self.errors.append(error)

        if self.options.print_errors:
            LOG.warning("%sRetry loop failed: %s", prefix, error, exc_info=error)

        self.remaining -= 1
        if self.remaining <= 0:
            self.exhaust()
            return

        delay = self.options.delay
        metrics.RETRY_TOTAL.inc()
        metrics.RETRY_DELAY.inc(delay)
        LOG.debug("Will retry %r in %s", self.fn, delay)

        f_sleep(delay).add_done_callback(self.on_delay_done)

    def on_delay_done(self, _future):
        self.attempt()

    def exhaust(self):
        LOG.debug("Exhausted retries of %r", self.fn)
        metrics.RETRY_EXHAUSTED.inc()
        copy_exception(self.out, RetryExhausted(self.options.error_prefix, self.errors))


def f_retry(fn, options=None, **kwargs):
    """Call a function until it succeeds, or the allowed attempts run out.

    Signature: :code:`fn<int⟶A|Future<A>>[, RetryOptions] ⟶ Future<A>`

    Arguments:
        fn (callable)
            Invoked as :code:`fn(remaining)`, where ``remaining`` is the
            number of attempts left including this one; or as :code:`fn()`
            if it accepts no positional arguments.  May return a
            value or a future; raising an exception or returning a failed
            future counts as a failed attempt.
        options (RetryOptions, dict)
            Options for this retry; see :class:`RetryOptions`.
        kwargs
            Override individual fields of :obj:`options`.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with the output value of the first successful
            attempt.

            If every attempt fails, the future fails with
            :class:`~more_futures.RetryExhausted` holding every error raised.

            The first attempt happens immediately, then there is a delay of
            ``options.delay`` seconds between each attempt.  There is no
            delay after the final attempt.

    Raises:
        ValueError: if the options are invalid
    """
    loop = RetryLoop(fn, RetryOptions.coerce(options, **kwargs))
    track_future(loop.out, type="retry")
    loop.attempt()
    return loop.out


@ensure_future
def f_then_retry(future, fn, options=None, **kwargs):
    """Like :func:`f_retry`, started once a future succeeds.

    Signature: :code:`Future<A>, fn<A,int⟶B|Future<B>>[, RetryOptions] ⟶ Future<B>`

    :obj:`fn` is invoked as :code:`fn(value, remaining)`, where ``value``
    is the output value of :obj:`future` (the same for every attempt);
    or as :code:`fn(value)` if it accepts only one positional argument.
    """
    options = RetryOptions.coerce(options, **kwargs)
    arity = positional_arity(fn, 2, min_args=1)

    def start(value):
        if arity == 2:
            return f_retry(lambda remaining: fn(value, remaining), options)
        return f_retry(lambda: fn(value), options)

    return f_then(future, start)
