"""Helper to get shutdown-aware instances of Event.

Call get_event to get instances of threading.Event.

These events work like any other event except that they will be automatically
set() during interpreter exit.  If an event has been set() for this reason,
is_shutdown() will return True.
"""

from threading import Event, RLock
import weakref
import atexit


class ShutdownAwareEventHandler(object):
    def __init__(self):
        self.lock = RLock()
        self.atexit_registered = False
        self.shutdown = False
        self.events = weakref.WeakSet()

    def on_exiting(self):
        self.shutdown = True

        with self.lock:
            events = list(self.events)

        for evt in events:
            evt.set()

    def get_event(self):
        with self.lock:
            if not self.atexit_registered:
                atexit.register(self.on_exiting)
                self.atexit_registered = True
            out = Event()
            self.events.add(out)
            return out


GLOBAL_HANDLER = ShutdownAwareEventHandler()
get_event = GLOBAL_HANDLER.get_event


def is_shutdown():
    return GLOBAL_HANDLER.shutdown
