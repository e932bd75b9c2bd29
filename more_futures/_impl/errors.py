class FutureCombinatorError(Exception):
    """Base class of errors raised by the combinators of this library.

    Errors raised by user-supplied callables are never wrapped in this
    class; they propagate unchanged.
    """


class RetryExhausted(FutureCombinatorError):
    """Raised by :func:`~more_futures.f_retry` once all attempts have failed.

    Attributes:
        prefix (str)
            The ``error_prefix`` from the retry options.
        errors (list of Exception)
            Every error raised by the retried callable, in attempt order.
            Empty if the retry was configured with zero attempts.
    """

    def __init__(self, prefix, errors):
        self.prefix = prefix
        self.errors = list(errors)
        message = "%sExhausted retry loops:\n%s" % (
            prefix,
            "\n".join([str(error) for error in self.errors]),
        )
        super(RetryExhausted, self).__init__(message)


class AllFailed(FutureCombinatorError):
    """Raised by :func:`~more_futures.f_first_success` when no input succeeded.

    Attributes:
        errors (list of Exception)
            The error of every input future, in the order the inputs
            completed.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super(AllFailed, self).__init__(
            "All %s futures failed: %r" % (len(self.errors), self.errors)
        )
