# observer - observer support for following the progress of type loading
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.

import logging
from functools import wraps

logger = logging.getLogger(__name__)


class Event(object):
    def __init__(self, **kws):
        self.__dict__.update(kws)

    def __str__(self):
        return '{0}({1})'.format(self.__class__.__name__, self.__dict__)


class Subject(object):
    def __init__(self):
        super(Subject, self).__init__()
        self._observers = []
        self._pending_events = []
        self._notification_in_progress = False

    def register_observer(self, observer):
        """Register a new observer, which should be a function taking
        a single Event argument.
        """

        assert observer not in self._observers
        self._observers.append(observer)


    def unregister_observer(self, observer):
        assert observer in self._observers
        self._observers.remove(observer)


    def notify_observers(self, event):
        """Notify all observers about an event.

        Observers registered or unregistered by an observer take
        effect from the next event.  An event notified from within an
        observer is queued until the current one has been delivered to
        everyone.
        """

        if self._notification_in_progress:
            self._pending_events.append(event)
            return

        try:
            self._notification_in_progress = True

            if global_observer:
                global_observer(self, event)

            for obs in list(self._observers):
                obs(event)
        finally:
            self._notification_in_progress = False

        if self._pending_events:
            self.notify_observers(self._pending_events.pop(0))


#
# Debug and unit test support code
#

# Set this to a function taking args (subject, event) to see everything sent
global_observer = None

def log_observer(subject, event):
    logger.debug('%r: %s', subject, event)


def log_function_events(f):
    """Decorator which logs every event notified by any subject during
    calls to the decorated function.
    """

    @wraps(f)
    def log_wrapper(*args, **kw):
        global global_observer
        prev = global_observer
        try:
            global_observer = log_observer
            return f(*args, **kw)
        finally:
            global_observer = prev

    return log_wrapper


class AssertEvent(object):
    """Context manager for unit tests, checking that SUBJECT notifies
    exactly the given sequence of events:

    with AssertEvent(self, driver, DefinitionLocated, (TypeLoaded, {'name': 'Post'})):
        driver.load_type(...)

    A (class, dict) pair also checks the event parameters.
    """

    def __init__(self, test, subject, *event_classes):
        self.test = test
        self.subject = subject
        self.expected = []
        self.params = []
        for v in event_classes:
            cls, params = v if isinstance(v, tuple) else (v, None)
            self.expected.append(cls)
            self.params.append(params)
        self.events = []

    def _on_event(self, e):
        self.events.append(e)

    def __enter__(self):
        self.subject.register_observer(self._on_event)
        return self.events

    def __exit__(self, exc_type, exc_value, traceback):
        self.subject.unregister_observer(self._on_event)

        if exc_type is not None:
            return

        self.test.assertSequenceEqual(self.expected,
                                      [e.__class__ for e in self.events])

        for i, (event, params) in enumerate(zip(self.events, self.params)):
            for k, v in (params or {}).items():
                self.test.assertTrue(hasattr(event, k),
                                     'missing {0} in {1}'.format(k, event))
                self.test.assertEqual(
                    v, getattr(event, k),
                    'index {0}: {1} in {2}'.format(i, k, event))
