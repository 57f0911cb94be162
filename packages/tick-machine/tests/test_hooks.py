"""Tests for the on_transition callback."""
import pytest
from tick_machine import StateMachine


def _switch_config() -> dict:
    return {
        "initial": "off",
        "states": {
            "off": {"transitions": {"toggle": "on"}},
            "on": {"transitions": {"toggle": "off"}},
        },
    }


class TestOnTransition:
    """Test cases for the on_transition hook."""

    def test_fires_on_trigger(self):
        """Callback called with (machine, old_state, new_state)."""
        # Arrange
        log = []
        fsm = StateMachine(
            _switch_config(),
            on_transition=lambda m, old, new: log.append((m, old, new)),
        )

        # Act
        fsm.trigger("toggle")

        # Assert
        assert log == [(fsm, "off", "on")]

    def test_fires_after_state_update(self):
        """Inside callback, machine.state already == new_state."""
        captured = []
        fsm = StateMachine(
            _switch_config(),
            on_transition=lambda m, old, new: captured.append(m.get_state()),
        )

        fsm.change_state("on")

        assert captured == ["on"]

    def test_fires_for_every_kind_of_move(self):
        """change_state, trigger, reset, undo, redo all notify."""
        log = []
        fsm = StateMachine(
            _switch_config(),
            on_transition=lambda m, old, new: log.append((old, new)),
        )

        fsm.trigger("toggle")
        fsm.undo()
        fsm.redo()
        fsm.reset()
        fsm.change_state("on")

        assert log == [
            ("off", "on"),
            ("on", "off"),
            ("off", "on"),
            ("on", "off"),
            ("off", "on"),
        ]

    def test_not_fired_on_failure(self):
        """Rejected moves and no-op undo/redo do not notify."""
        log = []
        fsm = StateMachine(
            _switch_config(),
            on_transition=lambda m, old, new: log.append((old, new)),
        )

        with pytest.raises(KeyError):
            fsm.trigger("explode")
        with pytest.raises(KeyError):
            fsm.change_state("broken")
        fsm.undo()
        fsm.redo()

        assert log == []

    def test_callback_exception_propagates_after_move(self):
        """A raising callback surfaces to the caller; the move stays applied."""
        def explode(m, old, new):
            raise RuntimeError("listener failed")

        fsm = StateMachine(_switch_config(), on_transition=explode)

        with pytest.raises(RuntimeError, match="listener failed"):
            fsm.trigger("toggle")

        assert fsm.get_state() == "on"
        assert fsm.history == ("off",)
        assert fsm.future == ()

    def test_no_callback(self):
        """Machine works fine with on_transition=None."""
        fsm = StateMachine(_switch_config(), on_transition=None)

        fsm.trigger("toggle")

        assert fsm.get_state() == "on"


class TestLogging:
    """Transitions are logged at DEBUG on the tick_machine logger."""

    def test_transition_logged(self, caplog):
        fsm = StateMachine(_switch_config())

        with caplog.at_level("DEBUG", logger="tick_machine"):
            fsm.trigger("toggle")

        assert "Transition off -> on" in caplog.text

    def test_rejection_logged(self, caplog):
        fsm = StateMachine(_switch_config())

        with caplog.at_level("DEBUG", logger="tick_machine"):
            with pytest.raises(KeyError):
                fsm.trigger("explode")

        assert "Rejected event 'explode' in state 'off'" in caplog.text
