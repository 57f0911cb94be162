"""tick-machine - Event-driven finite state machine with undo/redo history."""
from __future__ import annotations

import logging

from tick_machine.config import MachineConfig, StateDef
from tick_machine.log import configure_logging
from tick_machine.machine import StateMachine
from tick_machine.types import (
    ConfigurationError,
    EventId,
    InvalidStateError,
    InvalidTransitionError,
    MachineError,
    StateId,
    TransitionCallback,
)

logging.getLogger("tick_machine").addHandler(logging.NullHandler())

__all__ = [
    "StateMachine",
    "MachineConfig",
    "StateDef",
    "MachineError",
    "ConfigurationError",
    "InvalidStateError",
    "InvalidTransitionError",
    "StateId",
    "EventId",
    "TransitionCallback",
    "configure_logging",
]
