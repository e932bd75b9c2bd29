from concurrent.futures import Future
from unittest.mock import MagicMock, call

from hamcrest import assert_that, equal_to, same_instance

from more_futures import (
    f_print,
    f_return,
    f_return_error,
    set_default_printer,
    get_default_printer,
)


def test_print_text():
    printer = MagicMock()
    value = object()

    future = f_print(f_return(value), "hello", printer)

    assert_that(future.result(), same_instance(value))
    printer.assert_called_once_with("hello")


def test_print_fn():
    printer = MagicMock()

    future = f_return(21).print(lambda x: "value is %s" % (x * 2), printer)

    assert_that(future.result(), equal_to(21))
    printer.assert_called_once_with("value is 42")


def test_print_default_printer():
    printer = MagicMock()
    set_default_printer(printer)
    assert get_default_printer() is printer

    future = f_return("x").print("hi")

    assert_that(future.result(), equal_to("x"))
    printer.assert_called_once_with("hi")


def test_print_default_printer_read_when_printing():
    printer = MagicMock()
    inner = Future()

    future = f_print(inner, "later")

    # Set after the chain was built but before the value arrived
    set_default_printer(printer)
    inner.set_result(None)

    future.result()
    printer.assert_called_once_with("later")


def test_print_explicit_printer_wins():
    default_printer = MagicMock()
    printer = MagicMock()
    set_default_printer(default_printer)

    f_return(1).print("a", printer).result()

    printer.assert_called_once_with("a")
    default_printer.assert_not_called()


def test_print_builtin(capsys):
    future = f_return([1, 2]).print(lambda xs: "got %s items" % len(xs))

    assert_that(future.result(), equal_to([1, 2]))
    assert_that(capsys.readouterr().out, equal_to("got 2 items\n"))


def test_print_error_skips_printing():
    printer = MagicMock()
    error = RuntimeError("simulated error")

    future = f_print(f_return_error(error), "never", printer)

    assert future.exception() is error
    printer.assert_not_called()


def test_print_printer_fails():
    error = IOError("simulated error")
    printer = MagicMock(side_effect=error)

    future = f_return(1).print("a", printer)

    assert future.exception() is error


def test_print_non_string_values():
    printer = MagicMock()

    f_return("x").print(42, printer).result()
    f_return("x").print(None, printer).result()

    assert_that(printer.call_args_list, equal_to([call(42), call(None)]))
