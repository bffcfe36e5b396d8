"""
Nuclear Reactor Simulator Package

A tick-by-tick, first-order model of a simplified reactor core with
automatic safety shutdown, driven by one operator command per tick.

Modules:
    - constants: Fixed design coefficients, thresholds and initial values
    - state: Reactor state, operational modes, warning and event kinds
    - physics: Per-tick neutron, thermal, coolant and fuel update
    - events: Random disturbance sources and their effects
    - safety: Automatic SCRAM and meltdown state machine
    - commands: Operator command parsing
    - reactor: Controller sequencing physics, events and safety
    - dashboard: Text rendering of state and warnings
    - cli: Interactive console
"""

from .commands import InvalidCommand, parse_command
from .events import RandomEventSource, ScriptedEventSource, apply_event
from .physics import PhysicsEngine
from .reactor import ReactorController, TickResult, advance, create_controller
from .safety import SafetyMonitor
from .state import (
    EventKind,
    OperationalMode,
    ReactorState,
    WarningKind,
    initial_state,
    reset_state,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidCommand",
    "parse_command",
    "RandomEventSource",
    "ScriptedEventSource",
    "apply_event",
    "PhysicsEngine",
    "ReactorController",
    "TickResult",
    "advance",
    "create_controller",
    "SafetyMonitor",
    "EventKind",
    "OperationalMode",
    "ReactorState",
    "WarningKind",
    "initial_state",
    "reset_state",
]
