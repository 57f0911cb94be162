"""Machine configuration types."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from tick_machine.types import ConfigurationError, EventId, StateId

logger = logging.getLogger("tick_machine.config")


@dataclass(frozen=True)
class StateDef:
    """Immutable state definition.

    Attributes:
        transitions: Read-only map of event ids to target state ids. Targets
            are not checked against the state table until a transition is
            taken.

    Not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    transitions: Mapping[EventId, StateId] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, Mapping):
            raise ConfigurationError(
                f"transitions must be a mapping, got {type(self.transitions).__name__}"
            )
        object.__setattr__(
            self, "transitions", MappingProxyType(dict(self.transitions))
        )


@dataclass(frozen=True)
class MachineConfig:
    """Immutable machine definition: an initial state and a state table.

    ``states`` keeps insertion order, which is the order reported by
    :meth:`StateMachine.get_states`. Both mappings are read-only views over
    private copies. Not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    initial: StateId
    states: Mapping[StateId, StateDef] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.states, Mapping):
            raise ConfigurationError(
                f"states must be a mapping, got {type(self.states).__name__}"
            )
        for name, defn in self.states.items():
            if not isinstance(defn, StateDef):
                raise ConfigurationError(
                    f"state '{name}' must be a StateDef, got {type(defn).__name__}"
                )
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MachineConfig:
        """Build a config from ``{"initial": ..., "states": {...}}``.

        Each state entry is ``{"transitions": {event: target}}``; a missing
        ``transitions`` key means the state has no outgoing transitions.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"configuration must be a mapping, got {type(data).__name__}"
            )
        if "initial" not in data:
            raise ConfigurationError("configuration is missing 'initial'")
        if "states" not in data:
            raise ConfigurationError("configuration is missing 'states'")
        raw_states = data["states"]
        if not isinstance(raw_states, Mapping):
            raise ConfigurationError(
                f"states must be a mapping, got {type(raw_states).__name__}"
            )

        states: dict[StateId, StateDef] = {}
        for name, state_data in raw_states.items():
            if not isinstance(state_data, Mapping):
                raise ConfigurationError(
                    f"state '{name}' must be a mapping, got {type(state_data).__name__}"
                )
            states[name] = StateDef(transitions=state_data.get("transitions", {}))

        config = cls(initial=data["initial"], states=states)
        logger.debug(
            "Loaded machine config: initial=%s, %d states", config.initial, len(states)
        )
        return config

    def to_dict(self) -> dict[str, Any]:
        """Return the config as plain dicts in the ``from_dict`` format."""
        return {
            "initial": self.initial,
            "states": {
                name: {"transitions": dict(defn.transitions)}
                for name, defn in self.states.items()
            },
        }

    def has_state(self, state: StateId) -> bool:
        """Check if a state id is defined."""
        return state in self.states

    def target(self, state: StateId, event: EventId) -> StateId | None:
        """Target of ``event`` from ``state``, or None if either is unknown."""
        defn = self.states.get(state)
        if defn is None:
            return None
        return defn.transitions.get(event)

    def validate(self) -> None:
        """Strict check: initial and every transition target must be defined.

        Raises ConfigurationError on the first unknown state id found.
        """
        if self.initial not in self.states:
            raise ConfigurationError(
                f"initial state '{self.initial}' is not a defined state"
            )
        for name, defn in self.states.items():
            for event, target in defn.transitions.items():
                if target not in self.states:
                    raise ConfigurationError(
                        f"transition '{name}' --{event}--> '{target}' "
                        f"targets an undefined state"
                    )
