"""
core/engine - core engine components

- state_machine: trigger-driven state transitions
- extent: per-type instance registry and shared values

Usage:
    >>> from core.engine import StateMachine, StateMachineConfig, StateTransition
    >>> from core.engine import ExtentRegistry, extent_registry
"""

# State machine
from core.engine.state_machine import (
    StateTransition,
    StateMachineConfig,
    StateMachine,
)

# Extent registry
from core.engine.extent import (
    ExtentRegistry,
    ExtentMember,
    extent_registry,
)

__all__ = [
    "StateTransition",
    "StateMachineConfig",
    "StateMachine",
    "ExtentRegistry",
    "ExtentMember",
    "extent_registry",
]
