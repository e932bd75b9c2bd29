# -*- coding: utf-8 -*-
from functools import partial
from threading import Lock

from .base import f_then
from .check import ensure_future

LOCK = Lock()
DEFAULT_PRINTER = None


def set_default_printer(printer):
    """Set the printer used by :func:`f_print` when none is given.

    Arguments:
        printer (callable)
            A callable accepting a single string, e.g. ``logger.info``.
            Pass ``None`` to restore the default of the builtin ``print``.
    """
    global DEFAULT_PRINTER  # pylint: disable=global-statement
    with LOCK:
        DEFAULT_PRINTER = printer


def get_default_printer():
    return DEFAULT_PRINTER


def _emit(text_or_fn, printer, value):
    if callable(text_or_fn):
        text = text_or_fn(value)
    else:
        text = text_or_fn

    # The default is looked up now rather than at chain construction time
    printer = printer or DEFAULT_PRINTER or print
    printer(text)

    return value


@ensure_future
def f_print(future, text_or_fn, printer=None):
    """Print something once a future succeeds, passing its value through.

    Signature: :code:`Future<A>, fn<A⟶any>|any[, fn<any⟶any>] ⟶ Future<A>`

    Arguments:
        future (~concurrent.futures.Future)
            Any future.
        text_or_fn (callable, object)
            A callable producing the text from the output value of
            :obj:`future`.  Anything else is passed to the printer as-is.
        printer (callable)
            Used to print the text. Defaults to the printer set by
            :func:`set_default_printer`, or else the builtin ``print``.

    Returns:
        :class:`~more_futures.ChainFuture`
            A future resolved with the same value as :obj:`future`,
            once the text has been printed.

            If :obj:`future` fails, nothing is printed and the returned
            future fails with the same exception.  If producing or printing
            the text raises, the returned future fails with that exception.
    """
    return f_then(future, partial(_emit, text_or_fn, printer))
