import logging
from concurrent.futures import Future
from functools import partial

from monotonic import monotonic

from .null import NullMetrics

LOG = logging.getLogger("more_futures.metrics")

try:  # pylint: disable=import-error
    from .prometheus import PrometheusMetrics

    metrics = PrometheusMetrics()
except Exception:
    LOG.debug("disabling prometheus support", exc_info=True)

    metrics = NullMetrics()  # type: ignore


def record_done(f, started_when, time, inprogress, cancelled, failed):
    inprogress.dec()

    run_time = monotonic() - started_when
    time.inc(run_time)

    if f.cancelled():
        cancelled.inc()
    elif Future.exception(f):
        # base class call, so that a ChainFuture is not marked as observed
        failed.inc()


def track_future(f, **labels):
    metrics.FUTURE_TOTAL.labels(**labels).inc()

    start = monotonic()

    inprogress = metrics.FUTURE_INPROGRESS.labels(**labels)
    inprogress.inc()

    time = metrics.FUTURE_TIME.labels(**labels)

    cancelled = metrics.FUTURE_CANCEL.labels(**labels)
    failed = metrics.FUTURE_ERROR.labels(**labels)
    cb = partial(
        record_done,
        started_when=start,
        time=time,
        inprogress=inprogress,
        cancelled=cancelled,
        failed=failed,
    )

    # Recording metrics does not count as handling the future's outcome
    add_callback = getattr(f, "add_tracking_callback", f.add_done_callback)
    add_callback(cb)

    return f
