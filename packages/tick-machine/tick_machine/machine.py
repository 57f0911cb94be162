"""StateMachine — event-driven state tracking with undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tick_machine.config import MachineConfig
from tick_machine.types import (
    ConfigurationError,
    EventId,
    InvalidStateError,
    InvalidTransitionError,
    StateId,
    TransitionCallback,
)

logger = logging.getLogger("tick_machine.machine")


class StateMachine:
    """Tracks one active state of a :class:`MachineConfig`.

    Forward moves (``change_state``, ``trigger``) push the current state onto
    the undo stack and discard the redo stack. ``undo``/``redo`` move between
    the two stacks. Failed calls leave state and both stacks untouched.

    ``on_transition(machine, old, new)`` fires after every successful state
    change; ``machine.state`` already equals ``new`` inside the callback.
    The move is committed before the callback runs, so an exception raised
    by the callback propagates to the caller with the move still applied.
    """

    def __init__(
        self,
        config: MachineConfig | Mapping[str, Any] | None,
        *,
        strict: bool = False,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        if config is None:
            raise ConfigurationError("no configuration supplied")
        if not isinstance(config, MachineConfig):
            config = MachineConfig.from_dict(config)
        if strict:
            config.validate()
        self._config = config
        self._state: StateId = config.initial
        self._history: list[StateId] = []
        self._future: list[StateId] = []
        self._on_transition = on_transition

    # --- Queries ---

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def state(self) -> StateId:
        return self._state

    @property
    def history(self) -> tuple[StateId, ...]:
        """Previously visited states, oldest first."""
        return tuple(self._history)

    @property
    def future(self) -> tuple[StateId, ...]:
        """States available for redo, most recently undone last."""
        return tuple(self._future)

    def get_state(self) -> StateId:
        """Return the active state."""
        return self._state

    def get_states(self, event: EventId | None = None) -> list[StateId]:
        """State ids in definition order.

        With ``event``, only states that define a transition for it (key
        existence is what counts, not the target value).
        """
        if not event:
            return list(self._config.states)
        return [
            name
            for name, defn in self._config.states.items()
            if event in defn.transitions
        ]

    def available_events(self) -> list[EventId]:
        """Events defined for the active state. Empty if the state is unknown."""
        defn = self._config.states.get(self._state)
        if defn is None:
            return []
        return list(defn.transitions)

    def can_undo(self) -> bool:
        return bool(self._history)

    def can_redo(self) -> bool:
        return bool(self._future)

    # --- Transitions ---

    def change_state(self, state: StateId) -> None:
        """Go to ``state``. Raises InvalidStateError if it is not defined."""
        if not self._config.has_state(state):
            logger.debug("Rejected change to unknown state '%s'", state)
            raise InvalidStateError(state, f"Unknown state '{state}'")
        self._advance(state)

    def trigger(self, event: EventId) -> None:
        """Follow the active state's transition for ``event``.

        Raises InvalidTransitionError when no transition is defined, including
        when the active state itself is missing from the state table.
        """
        target = self._config.target(self._state, event)
        if not target:
            logger.debug(
                "Rejected event '%s' in state '%s'", event, self._state
            )
            raise InvalidTransitionError(
                self._state,
                event,
                f"No transition for event '{event}' in state '{self._state}'",
            )
        self._advance(target)

    def reset(self) -> None:
        """Return to the initial state. The redo stack is kept."""
        old = self._state
        self._history.append(old)
        self._state = self._config.initial
        self._notify(old)

    # --- History ---

    def undo(self) -> bool:
        """Step back one state. Returns False if there is nothing to undo."""
        if not self._history:
            return False
        old = self._state
        self._future.append(old)
        self._state = self._history.pop()
        self._notify(old)
        return True

    def redo(self) -> bool:
        """Replay one undone state. Returns False if there is nothing to redo."""
        if not self._future:
            return False
        old = self._state
        self._history.append(old)
        self._state = self._future.pop()
        self._notify(old)
        return True

    def clear_history(self) -> None:
        """Drop the undo stack. The redo stack is left as is."""
        self._history.clear()

    # --- Internal helpers ---

    def _advance(self, target: StateId) -> None:
        old = self._state
        self._history.append(old)
        self._future.clear()
        self._state = target
        self._notify(old)

    def _notify(self, old: StateId) -> None:
        logger.debug("Transition %s -> %s", old, self._state)
        if self._on_transition is not None:
            self._on_transition(self, old, self._state)

    def __repr__(self) -> str:
        return (
            f"StateMachine(state={self._state!r}, "
            f"history={len(self._history)}, future={len(self._future)})"
        )
