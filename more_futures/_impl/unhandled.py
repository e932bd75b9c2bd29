"""Best-effort reporting of failed futures whose outcome nobody looked at.

Python has no process-wide hook for unhandled future failures, so this
only covers futures created by this library, and only reports them once
they are garbage collected.  Reporting is disabled until a sink is set.
"""

import logging
from threading import Lock

from .logwrap import LogWrapper

LOG = LogWrapper(logging.getLogger("more_futures"))

LOCK = Lock()
SINK = None


def set_unhandled_failure_sink(sink):
    """Register a callable to be notified of unhandled failures.

    Arguments:
        sink (callable)
            Invoked as ``sink(future, exception)`` when a future created
            by this library is garbage collected after failing, without
            its outcome ever having been requested via ``result()``,
            ``exception()`` or ``add_done_callback()``.

            :func:`log_unhandled_failure` may be used here.

            Pass ``None`` to disable reporting (the default).
    """
    global SINK  # pylint: disable=global-statement
    with LOCK:
        SINK = sink


def get_unhandled_failure_sink():
    return SINK


def log_unhandled_failure(future, exception):
    """A sink which logs the failure at ERROR level."""
    LOG.error(
        "Unhandled failure in %r",
        future,
        exc_info=(type(exception), exception, exception.__traceback__),
    )


def report_unhandled(future, exception):
    sink = SINK
    if sink is None:
        return

    try:
        sink(future, exception)
    except Exception:
        LOG.exception("exception reporting unhandled failure of %r", future)
