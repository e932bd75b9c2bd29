class NullBase(object):
    def labels(self, **_kwargs):
        return self

    def inc(self, _value=1):
        pass


class Counter(NullBase):
    pass


class Gauge(NullBase):
    def dec(self, _value=1):
        pass


class NullMetrics(object):
    FUTURE_INPROGRESS = Gauge()
    FUTURE_TOTAL = Counter()
    FUTURE_CANCEL = Counter()
    FUTURE_ERROR = Counter()
    FUTURE_TIME = Counter()
    RETRY_TOTAL = Counter()
    RETRY_EXHAUSTED = Counter()
    RETRY_DELAY = Counter()
    SLEEP_QUEUE = Gauge()
