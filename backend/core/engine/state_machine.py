"""
core/engine/state_machine.py

State machine engine - trigger-driven transitions with side effects
"""
from typing import Dict, List, Optional, Callable
from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)


@dataclass
class StateTransition:
    """
    Transition definition

    Attributes:
        from_state: Source state
        to_state: Target state
        trigger: Triggering action name
        side_effects: Callables run after the state changes
    """

    from_state: str
    to_state: str
    trigger: str
    side_effects: List[Callable[[], None]] = field(default_factory=list)

    def execute_side_effects(self) -> None:
        for effect in self.side_effects:
            effect()


@dataclass
class StateMachineConfig:
    """
    State machine configuration

    Attributes:
        name: Machine name, used in log messages
        states: Every valid state
        transitions: Allowed transitions
        initial_state: Starting state
    """

    name: str
    states: List[str]
    transitions: List[StateTransition]
    initial_state: str


class StateMachine:
    """
    State machine engine

    Features:
    - transition validation by (current state, trigger)
    - side effects per transition

    Invalid triggers never raise: ``fire`` returns False and leaves the state
    unchanged, so callers decide how to report the refusal.

    Example:
        >>> machine = StateMachine(
        ...     config=StateMachineConfig(
        ...         name="Payment",
        ...         states=["Pending", "Authorized"],
        ...         transitions=[StateTransition("Pending", "Authorized", "authorize")],
        ...         initial_state="Pending",
        ...     )
        ... )
        >>> machine.fire("authorize")
        True
    """

    def __init__(self, config: StateMachineConfig):
        if config.initial_state not in config.states:
            raise ValueError(
                f"Initial state {config.initial_state!r} is not a state of {config.name}"
            )
        self._config = config
        self._current_state = config.initial_state
        self._transition_map: Dict[str, Dict[str, StateTransition]] = {}

        # (from_state, trigger) -> transition
        for t in config.transitions:
            if t.from_state not in self._transition_map:
                self._transition_map[t.from_state] = {}
            self._transition_map[t.from_state][t.trigger] = t

    @property
    def current_state(self) -> str:
        return self._current_state

    @property
    def config(self) -> StateMachineConfig:
        return self._config

    def _find(self, trigger: str) -> Optional[StateTransition]:
        return self._transition_map.get(self._current_state, {}).get(trigger)

    def can_fire(self, trigger: str) -> bool:
        """True if ``trigger`` has a transition from the current state"""
        return self._find(trigger) is not None

    def fire(self, trigger: str) -> bool:
        """
        Execute the transition for ``trigger``

        Returns:
            True if the state changed
        """
        transition = self._find(trigger)
        if transition is None:
            logger.warning(
                f"{self._config.name}: invalid trigger {trigger!r} in state {self._current_state!r}"
            )
            return False

        previous_state = self._current_state
        self._current_state = transition.to_state
        transition.execute_side_effects()

        logger.info(
            f"{self._config.name}: {previous_state} -> {self._current_state} (trigger: {trigger})"
        )
        return True


__all__ = [
    "StateTransition",
    "StateMachineConfig",
    "StateMachine",
]
