from .base import f_return, f_return_error, f_then, f_returns
from .chain import ChainFuture, chain
from .fanout import f_map_each, f_fan_out
from .printer import f_print, set_default_printer, get_default_printer
from .race import f_first_success
from .retry import RetryOptions, f_retry, f_then_retry
from .sequence import f_sync, f_sync_each, f_sync_auto
from .sleep import f_sleep, f_delay
from .zip import f_all
