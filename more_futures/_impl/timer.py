from concurrent.futures import InvalidStateError
from threading import Thread, Lock
from collections import namedtuple
import heapq
import itertools
import logging
import weakref

from monotonic import monotonic

from .event import get_event, is_shutdown
from .logwrap import LogWrapper
from .metrics import metrics

LOG = LogWrapper(logging.getLogger("more_futures.timer"))


# seq breaks ties between equal deadlines, keeping jobs in submission order
Job = namedtuple("Job", ["deadline", "seq", "future"])


class Timer(object):
    """Resolves futures after a delay, from a single background thread.

    Futures are resolved with :code:`None` in deadline order; their
    callbacks run on the timer's thread.
    """

    def __init__(self, name="default"):
        self._name = name
        self._jobs = []
        self._jobs_lock = Lock()
        self._jobs_write = get_event()
        self._seq = itertools.count()

        event = self._jobs_write
        self_ref = weakref.ref(self, lambda _: event.set())

        self._thread = Thread(
            name="Timer-%s" % name, target=self._job_loop, args=(self_ref,)
        )
        self._thread.daemon = True
        self._thread.start()

    def schedule(self, delay, future):
        """Arrange for future to be resolved after delay seconds."""
        deadline = monotonic() + max(delay, 0)
        with self._jobs_lock:
            heapq.heappush(self._jobs, Job(deadline, next(self._seq), future))
        metrics.SLEEP_QUEUE.inc()
        self._jobs_write.set()
        return future

    def _pop_due(self):
        due = []
        now = monotonic()
        with self._jobs_lock:
            while self._jobs and self._jobs[0].deadline <= now:
                due.append(heapq.heappop(self._jobs))
            wait_time = None
            if self._jobs:
                wait_time = max(self._jobs[0].deadline - now, 0)
        return (due, wait_time)

    def _fire(self, job):
        metrics.SLEEP_QUEUE.dec()
        LOG.debug("Timer %s firing: %s", self._name, job)
        try:
            job.future.set_result(None)
        except InvalidStateError:
            # cancelled while waiting
            LOG.debug("Timer %s: %r was already resolved", self._name, job.future)

    @classmethod
    def _job_loop(cls, timer_ref):
        while True:
            (event, wait_time) = cls._job_loop_iter(timer_ref())
            if not event:
                break
            event.wait(wait_time)
            event.clear()

    @classmethod
    def _job_loop_iter(cls, timer):
        if not timer:
            LOG.debug("Timer was collected")
            return (None, None)

        if is_shutdown():
            LOG.debug("Interpreter is exiting, stopping timer %s", timer._name)
            return (None, None)

        (due, wait_time) = timer._pop_due()
        for job in due:
            timer._fire(job)

        LOG.debug("Timer %s waiting: %s", timer._name, wait_time)
        return (timer._jobs_write, wait_time)


LOCK = Lock()
TIMER = None


def get_timer():
    """Returns the process-wide timer, starting it on first use."""
    global TIMER  # pylint: disable=global-statement
    with LOCK:
        if TIMER is None:
            TIMER = Timer(name="internal")
        return TIMER
