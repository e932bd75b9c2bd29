import os


def debug_enabled():
    return os.environ.get("MORE_FUTURES_DEBUG", "0") == "1"


class LogWrapper(object):
    """Logger proxy which drops debug messages unless MORE_FUTURES_DEBUG=1.

    Every other attribute is looked up on the wrapped logger.
    """

    def __init__(self, logger):
        self.logger = logger
        self.debug_enabled = debug_enabled()

    def __getattr__(self, name):
        return getattr(self.logger, name)

    def debug(self, msg, *args, **kwargs):
        if self.debug_enabled:
            self.logger.debug(msg, *args, **kwargs)
