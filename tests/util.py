import time
import traceback


def assert_soon(fn):
    for _ in range(0, 1000):
        try:
            fn()
            break
        except AssertionError:
            time.sleep(0.01)
    else:
        fn()


def delay_then(delay, value):
    time.sleep(delay)
    return value


def delay_then_raise(delay, exception):
    time.sleep(delay)
    raise exception


def assert_in_traceback(future, needle):
    tb = future.exception().__traceback__
    tb_str = "".join(traceback.format_tb(tb))
    assert needle in tb_str
