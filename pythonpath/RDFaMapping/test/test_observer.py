# test_observer - unit tests for observer support class
#
# Copyright 2013 Commons Machinery http://commonsmachinery.se/
#
# Authors: Peter Liljenberg <peter@commonsmachinery.se>
#
# Distributed under an GPLv2 license, please see LICENSE in the top dir.


import unittest

from ..observer import Subject, Event, AssertEvent


class Reentrant(object):
    """Observer that does something to the subject on the first event only."""

    def __init__(self, action):
        self.action = action

    def __call__(self, ev):
        if self.action:
            action, self.action = self.action, None
            action()


class Loaded(Event): pass
class Other(Event): pass


class TestObserver(unittest.TestCase):
    def test_basic(self):
        subj = Subject()
        obs1 = []
        obs2 = []

        subj.register_observer(obs1.append)
        subj.register_observer(obs2.append)

        ev1 = Event()
        subj.notify_observers(ev1)

        self.assertListEqual(obs1, [ev1])
        self.assertListEqual(obs2, [ev1])

        subj.unregister_observer(obs1.append)

        ev2 = Event()
        subj.notify_observers(ev2)

        self.assertListEqual(obs1, [ev1])
        self.assertListEqual(obs2, [ev1, ev2])


    def test_register_during_notification(self):
        subj = Subject()

        target_obs = []
        subj.register_observer(Reentrant(lambda: subj.register_observer(target_obs.append)))

        # The added observer doesn't get the event that triggered the addition
        subj.notify_observers(Event())
        self.assertListEqual(target_obs, [])

        ev = Event()
        subj.notify_observers(ev)
        self.assertListEqual(target_obs, [ev])


    def test_unregister_during_notification(self):
        subj = Subject()

        target_obs = []
        subj.register_observer(Reentrant(lambda: subj.unregister_observer(target_obs.append)))
        subj.register_observer(target_obs.append)

        # Already unregistered observers still get the current event
        ev = Event()
        subj.notify_observers(ev)
        subj.notify_observers(Event())
        self.assertListEqual(target_obs, [ev])


    def test_notification_during_notification(self):
        subj = Subject()

        target_obs = []
        subj.register_observer(target_obs.append)

        ev1 = Event()
        ev2 = Event()
        subj.register_observer(Reentrant(lambda: subj.notify_observers(ev2)))

        # Notifications are processed sequentially
        subj.notify_observers(ev1)
        self.assertListEqual(target_obs, [ev1, ev2])


    def test_event_str(self):
        self.assertEqual(str(Loaded(name = 'Post')), "Loaded({'name': 'Post'})")


class TestAssertEvent(unittest.TestCase):
    def test_matching_events(self):
        subj = Subject()

        with AssertEvent(self, subj, Loaded, (Other, {'value': 1})) as events:
            subj.notify_observers(Loaded())
            subj.notify_observers(Other(value = 1))

        self.assertEqual(len(events), 2)
        self.assertEqual(subj._observers, [])

    def test_wrong_class(self):
        subj = Subject()

        with self.assertRaises(AssertionError):
            with AssertEvent(self, subj, Loaded):
                subj.notify_observers(Other())

    def test_wrong_parameter(self):
        subj = Subject()

        with self.assertRaises(AssertionError):
            with AssertEvent(self, subj, (Loaded, {'name': 'Post'})):
                subj.notify_observers(Loaded(name = 'Thread'))
