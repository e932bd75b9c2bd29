from concurrent.futures import Future

from ..unhandled import report_unhandled
from .check import is_future


class CanChain(object):
    # Fluent forms of the f_* functions; each returns a new ChainFuture.
    def then(self, fn=None):
        from .base import f_then

        return f_then(self, fn)

    def returns(self, value):
        from .base import f_returns

        return f_returns(self, value)

    def sleep(self, delay):
        from .sleep import f_delay

        return f_delay(self, delay)

    def map(self, fn):
        from .fanout import f_fan_out

        return f_fan_out(self, fn)

    def print(self, text_or_fn, printer=None):
        from .printer import f_print

        return f_print(self, text_or_fn, printer)

    def sync(self, fn):
        from .sequence import f_sync_auto

        return f_sync_auto(self, fn)

    def retry(self, fn, options=None, **kwargs):
        from .retry import f_then_retry

        return f_then_retry(self, fn, options, **kwargs)


class ChainFuture(CanChain, Future):
    """The type of all futures created by this library.

    This is a plain :class:`~concurrent.futures.Future`, plus methods
    for chaining further steps:

    .. code-block:: python

        f_return(["a.example.com", "b.example.com"]) \\
            .map(resolve_host) \\
            .print(lambda addrs: "resolved %s" % addrs) \\
            .sleep(1.0) \\
            .retry(connect, times=3)

    The future also remembers whether anyone has looked at its outcome,
    for the benefit of :func:`~more_futures.set_unhandled_failure_sink`.
    """

    def __init__(self):
        super(ChainFuture, self).__init__()
        self._observed = False

    def result(self, timeout=None):
        self._observed = True
        return super(ChainFuture, self).result(timeout)

    def exception(self, timeout=None):
        self._observed = True
        return super(ChainFuture, self).exception(timeout)

    def add_done_callback(self, fn):
        self._observed = True
        super(ChainFuture, self).add_done_callback(fn)

    def add_tracking_callback(self, fn):
        # Like add_done_callback, for callbacks which only watch the future
        # and don't take responsibility for its outcome.
        super(ChainFuture, self).add_done_callback(fn)

    def __del__(self):
        if getattr(self, "_observed", True):
            return
        if not self.done() or self.cancelled():
            return
        exception = super(ChainFuture, self).exception()
        if exception is not None:
            report_unhandled(self, exception)


def chain(x):
    """Get a :class:`ChainFuture` for any future or value.

    Signature: :code:`Future<A> | A ⟶ ChainFuture<A>`

    Arguments:
        x
            A future, or any other value.

    Returns:
        :class:`ChainFuture`
            :obj:`x` itself if it's already a :class:`ChainFuture`;
            otherwise a future resolved with the same outcome as the
            future :obj:`x`, or with the value :obj:`x`.
    """
    from .base import f_return, f_then

    if isinstance(x, ChainFuture):
        return x
    if is_future(x):
        return f_then(x)
    return f_return(x)
