from functools import partial

import prometheus_client  # pylint: disable=import-error


Counter = partial(prometheus_client.Counter, namespace="more_futures")
Gauge = partial(prometheus_client.Gauge, namespace="more_futures")


class PrometheusMetrics(object):
    FUTURE_INPROGRESS = Gauge(
        "future_inprogress", "Futures currently in use", labelnames=("type",)
    )
    FUTURE_TOTAL = Counter("future_total", "Total futures used", labelnames=("type",))
    FUTURE_CANCEL = Counter(
        "future_cancel", "Futures cancelled", labelnames=("type",)
    )
    FUTURE_ERROR = Counter(
        "future_error", "Futures resolved with error", labelnames=("type",)
    )
    FUTURE_TIME = Counter(
        "future_time",
        "Total time between creation and resolution of futures",
        labelnames=("type",),
    )
    RETRY_TOTAL = Counter("retry_total", "Attempts retried by f_retry")
    RETRY_EXHAUSTED = Counter(
        "retry_exhausted", "Retried futures failed after exhausting all attempts"
    )
    RETRY_DELAY = Counter("retry_delay", "Time spent waiting between retries")
    SLEEP_QUEUE = Gauge("sleep_queue", "Futures waiting on the sleep timer")
