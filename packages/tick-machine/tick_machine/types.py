"""Shared type aliases and errors for tick-machine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

StateId = str
EventId = str


class MachineError(Exception):
    """Base class for all state machine errors."""


class ConfigurationError(MachineError, ValueError):
    """Raised when a machine configuration is missing or malformed."""


class InvalidStateError(MachineError, KeyError):
    """Raised when changing to a state that is not defined."""

    def __init__(self, state: StateId, message: str) -> None:
        self.state = state
        super().__init__(message)


class InvalidTransitionError(MachineError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, state: StateId, event: EventId, message: str) -> None:
        self.state = state
        self.event = event
        super().__init__(message)


if TYPE_CHECKING:
    from tick_machine.machine import StateMachine

TransitionCallback = Callable[["StateMachine", StateId, StateId], None]
