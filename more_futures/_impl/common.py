import sys
from concurrent.futures import CancelledError


def copy_exception(future, exception=None):
    # Without an explicit exception, the exception currently being
    # handled is copied; its traceback travels along on __traceback__.
    if exception is None:
        exception = sys.exc_info()[1]

    future.set_exception(exception)


def copy_future(f1, f2):
    """Resolve f2 with the outcome of the completed f1.

    A cancelled f1 results in a cancelled f2.
    """
    if f1.cancelled():
        if f2.cancel():
            f2.set_running_or_notify_cancel()
        return

    exception = f1.exception()
    if exception is not None:
        copy_exception(f2, exception)
    else:
        f2.set_result(f1.result())


def settled_exception(future):
    """Returns the exception of a completed future, treating cancellation
    as a failure with CancelledError; or None if the future succeeded."""
    if future.cancelled():
        return CancelledError()
    return future.exception()


def is_collection(value):
    return isinstance(value, (list, tuple))
