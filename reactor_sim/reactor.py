"""
Reactor Controller

This module provides the top-level reactor model that sequences the
physics update, random events and safety monitor for each operator
command, and owns the authoritative reactor state and mode.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Optional, Set, Tuple, Union
import logging

from .commands import REFILL, InvalidCommand, validate_rod_percent
from .events import RandomEventSource, apply_event
from .physics import PhysicsEngine
from .safety import SafetyMonitor
from .state import (
    EventKind,
    OperationalMode,
    ReactorState,
    WarningKind,
    initial_state,
    reset_state,
)
from .utils import percent_to_fraction

logger = logging.getLogger(__name__)

RodCommand = Union[int, float, str]


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of one operator command.

    Attributes:
        state: Reactor state after the command
        warnings: Conditions raised during the tick
        mode: Operational mode after the tick
        tick: Number of physics ticks completed so far
    """

    state: ReactorState
    warnings: Set[WarningKind]
    mode: OperationalMode
    tick: int


def advance(
    state: ReactorState,
    mode: OperationalMode,
    rod_level: float,
    event: Optional[EventKind],
    physics: Optional[PhysicsEngine] = None,
    safety: Optional[SafetyMonitor] = None,
) -> Tuple[ReactorState, OperationalMode, Set[WarningKind]]:
    """
    Run one full tick with the random event supplied explicitly.

    Outside RUNNING the state is returned unchanged. The same inputs
    always produce the same result.

    Args:
        state: Current reactor state
        mode: Current operational mode
        rod_level: Commanded rod insertion fraction
        event: Random event for this tick, or ``None``
        physics: Physics engine (default engine if omitted)
        safety: Safety monitor (default monitor if omitted)

    Returns:
        Tuple of (new state, new mode, warnings)
    """
    if mode is not OperationalMode.RUNNING:
        return state, mode, set()

    physics = physics or PhysicsEngine()
    safety = safety or SafetyMonitor()

    state, warnings = physics.update(state, rod_level)

    state, event_warning = apply_event(state, event, physics.constants)
    if event_warning is not None:
        warnings.add(event_warning)

    state, mode, safety_warnings = safety.evaluate(state, mode)
    warnings |= safety_warnings

    return state, mode, warnings


@dataclass
class ReactorController:
    """
    Single-operator reactor control loop.

    Owns the reactor state and operational mode. Each rod command runs
    physics, one random event and the safety monitor in sequence; a
    refill command only tops the coolant up. The controller performs no
    I/O.

    Attributes:
        events: Iterator yielding one ``Optional[EventKind]`` per tick
        state: Current reactor state
        mode: Current operational mode
        tick_count: Number of physics ticks completed
    """

    events: Iterator[Optional[EventKind]] = field(default_factory=RandomEventSource)
    state: ReactorState = field(default_factory=initial_state)
    mode: OperationalMode = OperationalMode.RUNNING
    tick_count: int = 0

    physics: PhysicsEngine = field(init=False)
    safety: SafetyMonitor = field(init=False)

    def __post_init__(self):
        """Initialize the engine components."""
        self.physics = PhysicsEngine()
        self.safety = SafetyMonitor()

    @property
    def is_running(self) -> bool:
        return self.mode is OperationalMode.RUNNING

    def tick(self, command: RodCommand) -> TickResult:
        """
        Apply one operator command.

        Args:
            command: Rod insertion in percent (0-100) or ``"refill"``

        Returns:
            Result of the tick

        Raises:
            InvalidCommand: If the command is neither a rod level in
                range nor ``"refill"``; nothing is applied
        """
        if isinstance(command, str):
            if command.strip().lower() != REFILL:
                raise InvalidCommand(f"Unrecognised command: {command!r}")
            return self.refill()

        rod_percent = validate_rod_percent(command)

        if not self.is_running:
            logger.warning("Tick ignored: reactor is %s", self.mode.value)
            return self._result(set())

        event = next(self.events)
        self.state, self.mode, warnings = advance(
            self.state,
            self.mode,
            percent_to_fraction(rod_percent),
            event,
            physics=self.physics,
            safety=self.safety,
        )
        self.tick_count += 1
        logger.debug("Tick %d complete, mode=%s", self.tick_count, self.mode.value)
        return self._result(warnings)

    def refill(self) -> TickResult:
        """
        Top the coolant up to 100%.

        A free action: no physics, no event, no tick advance.
        """
        if not self.is_running:
            logger.warning("Refill ignored: reactor is %s", self.mode.value)
            return self._result(set())

        self.state = replace(self.state, coolant_level=self.physics.constants.FULL_LEVEL)
        logger.info("Coolant refilled")
        return self._result(set())

    def reset(self) -> TickResult:
        """
        Restart the reactor after an automatic SCRAM.

        Raises:
            InvalidCommand: If the reactor is not in SHUTDOWN
        """
        if self.mode is not OperationalMode.SHUTDOWN:
            raise InvalidCommand(
                f"Reset is only possible after a SCRAM (reactor is {self.mode.value})"
            )

        self.state = reset_state(self.state)
        self.mode = OperationalMode.RUNNING
        logger.info("Reactor restart")
        return self._result(set())

    def _result(self, warnings: Set[WarningKind]) -> TickResult:
        return TickResult(
            state=self.state,
            warnings=warnings,
            mode=self.mode,
            tick=self.tick_count,
        )

    def get_status(self) -> Dict[str, Any]:
        """
        Get a summary of the controller.

        Returns dictionary with mode, tick count and the reactor state.
        """
        return {
            "mode": self.mode.value,
            "tick": self.tick_count,
            "state": self.state.as_dict(),
        }


def create_controller(
    seed: Optional[int] = None,
    **kwargs
) -> ReactorController:
    """
    Factory function to create a reactor controller.

    Args:
        seed: Seed for the random event source
        **kwargs: Additional parameters passed to ReactorController

    Returns:
        Configured ReactorController instance
    """
    if "events" not in kwargs:
        kwargs["events"] = RandomEventSource(seed=seed)
    return ReactorController(**kwargs)
