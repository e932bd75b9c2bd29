"""Combinators for chaining and composing Python futures.

This library is intended for use with the
[`concurrent.futures`](https://docs.python.org/3/library/concurrent.futures.html)
module.  It provides functions to sequence, delay, fan out, race and retry
steps producing `Future` objects, without blocking the calling thread.

All futures created by this library are instances of `ChainFuture`,
which provides each of the chaining operations as a method.
"""
from ._impl.errors import FutureCombinatorError, RetryExhausted, AllFailed
from ._impl.futures import (
    ChainFuture,
    chain,
    f_return,
    f_return_error,
    f_then,
    f_returns,
    f_sleep,
    f_delay,
    f_print,
    set_default_printer,
    get_default_printer,
    f_all,
    f_map_each,
    f_fan_out,
    f_sync,
    f_sync_each,
    f_sync_auto,
    RetryOptions,
    f_retry,
    f_then_retry,
    f_first_success,
)
from ._impl.unhandled import (
    set_unhandled_failure_sink,
    get_unhandled_failure_sink,
    log_unhandled_failure,
)


__all__ = [
    "FutureCombinatorError",
    "RetryExhausted",
    "AllFailed",
    "ChainFuture",
    "chain",
    "f_return",
    "f_return_error",
    "f_then",
    "f_returns",
    "f_sleep",
    "f_delay",
    "f_print",
    "set_default_printer",
    "get_default_printer",
    "f_all",
    "f_map_each",
    "f_fan_out",
    "f_sync",
    "f_sync_each",
    "f_sync_auto",
    "RetryOptions",
    "f_retry",
    "f_then_retry",
    "f_first_success",
    "set_unhandled_failure_sink",
    "get_unhandled_failure_sink",
    "log_unhandled_failure",
]
