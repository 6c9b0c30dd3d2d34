"""Tests for the generic ObserverManager."""

from unittest.mock import Mock

import pytest

from colorpicker.utils import ObserverManager


@pytest.fixture
def manager():
    return ObserverManager[Mock]("test")


class TestObserverManager:
    """Test registration and notification."""

    @pytest.mark.unit
    def test_register_is_idempotent(self, manager):
        observer = Mock()
        manager.register(observer)
        manager.register(observer)
        assert len(manager) == 1
        assert observer in manager

    @pytest.mark.unit
    def test_notify_calls_named_callback(self, manager):
        observer = Mock()
        manager.register(observer)
        manager.notify("on_event", 1, key="value")
        observer.on_event.assert_called_once_with(1, key="value")

    @pytest.mark.unit
    def test_error_in_one_observer_does_not_stop_others(self, manager):
        failing = Mock()
        failing.on_event.side_effect = RuntimeError("boom")
        healthy = Mock()
        manager.register(failing)
        manager.register(healthy)

        manager.notify("on_event")

        healthy.on_event.assert_called_once_with()

    @pytest.mark.unit
    def test_missing_callback_is_logged_not_raised(self, manager):
        manager.register(Mock(spec=[]))
        manager.notify("on_event")

    @pytest.mark.unit
    def test_observer_may_unregister_during_notify(self, manager):
        observer = Mock()
        observer.on_event.side_effect = lambda: manager.unregister(observer)
        manager.register(observer)

        manager.notify("on_event")

        assert observer not in manager

    @pytest.mark.unit
    def test_unregister_unknown_is_ignored(self, manager):
        manager.unregister(Mock())
        assert len(manager) == 0

