import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from more_futures import set_default_printer, set_unhandled_failure_sink


@pytest.fixture(autouse=True)
def set_debug_var():
    os.environ["MORE_FUTURES_DEBUG"] = "1"
    yield
    del os.environ["MORE_FUTURES_DEBUG"]


@pytest.fixture(autouse=True)
def reset_globals():
    yield
    set_default_printer(None)
    set_unhandled_failure_sink(None)


@pytest.fixture
def executor():
    ex = ThreadPoolExecutor(max_workers=4)
    yield ex
    ex.shutdown(wait=True)


@pytest.fixture(scope="session", autouse=True)
def dump_metrics():
    yield

    try:
        import prometheus_client  # pylint: disable=import-error
    except Exception:
        return

    metrics = prometheus_client.generate_latest().decode("utf-8")
    print(metrics)
