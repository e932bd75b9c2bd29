import inspect
from functools import wraps


def ensure_future(f):
    # Decorated functions take a future as their first argument
    @wraps(f)
    def new_fn(*args, **kwargs):
        arg = args[0] if args else kwargs.get("future")

        if not is_future(arg):
            raise TypeError(
                "%s() called with non-future value: %s" % (f.__name__, repr(arg))
            )

        return f(*args, **kwargs)

    return new_fn


def is_future(f):
    return callable(getattr(f, "add_done_callback", None))


def positional_arity(fn, max_args, min_args=0):
    """Returns how many leading positional arguments fn should be called with.

    That's the largest count between min_args and max_args which fn's
    signature accepts.  Callables without an inspectable signature are
    given all max_args arguments.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return max_args

    for count in range(max_args, min_args, -1):
        try:
            signature.bind(*([None] * count))
        except TypeError:
            continue
        return count

    return min_args
