"""Tests for infrastructure.i18n.notifier module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n.notifier import ChangeNotifier


class TestChangeNotifier:
    """Tests for ChangeNotifier."""

    def test_notify_calls_listeners_in_order(self):
        """Listeners are called once each, in subscription order."""
        notifier = ChangeNotifier()
        calls = []
        notifier.add_listener(lambda: calls.append("first"))
        notifier.add_listener(lambda: calls.append("second"))

        notifier.notify_listeners()

        assert calls == ["first", "second"]

    def test_remove_listener(self):
        """Removed listeners are no longer called."""
        notifier = ChangeNotifier()
        listener = MagicMock()
        notifier.add_listener(listener)
        notifier.remove_listener(listener)

        notifier.notify_listeners()

        listener.assert_not_called()
        assert not notifier.has_listeners

    def test_remove_unknown_listener(self):
        """Removing a listener that was never added is ignored."""
        ChangeNotifier().remove_listener(MagicMock())

    def test_failing_listener_does_not_stop_others(self):
        """A raising listener is logged and later listeners still run."""
        notifier = ChangeNotifier()
        failing = MagicMock(side_effect=ValueError("boom"))
        after = MagicMock()
        notifier.add_listener(failing)
        notifier.add_listener(after)

        notifier.notify_listeners()

        failing.assert_called_once_with()
        after.assert_called_once_with()

    def test_listener_may_unsubscribe_while_notified(self):
        """Listeners can remove themselves during notification."""
        notifier = ChangeNotifier()
        other = MagicMock()

        def once():
            notifier.remove_listener(once)

        notifier.add_listener(once)
        notifier.add_listener(other)
        notifier.notify_listeners()
        notifier.notify_listeners()

        assert other.call_count == 2

    def test_dispose_releases_listeners(self):
        """dispose() drops listeners and rejects new ones."""
        notifier = ChangeNotifier()
        listener = MagicMock()
        notifier.add_listener(listener)

        notifier.dispose()
        notifier.notify_listeners()

        listener.assert_not_called()
        with pytest.raises(RuntimeError):
            notifier.add_listener(listener)
