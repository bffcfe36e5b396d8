"""
Reactor State Model

This module defines the mutable reactor state, the operational modes
of the safety state machine, and the enumerations used to report
warnings and random events to the presentation layer.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict

from .constants import INITIAL_CONDITIONS, RESET_CONDITIONS, DesignConstants
from .utils import clamp, clamp_non_negative


class OperationalMode(Enum):
    """Safety state of the reactor."""

    RUNNING = "running"
    SHUTDOWN = "shutdown"  # after an automatic SCRAM, awaiting the operator
    MELTED = "melted"  # terminal

    @property
    def is_terminal(self) -> bool:
        return self is OperationalMode.MELTED


class EventKind(Enum):
    """Random disturbances that may occur during a tick."""

    COOLANT_LEAK = "coolant_leak"
    POWER_SURGE = "power_surge"


class WarningKind(Enum):
    """Conditions reported to the operator after a tick."""

    LOW_COOLANT = "low_coolant"
    COOLANT_LEAK = "coolant_leak"
    POWER_SURGE = "power_surge"
    AUTO_SCRAM = "auto_scram"
    MELTDOWN = "meltdown"


# Upper bound of each field held in [0, upper]
_BOUNDED_FIELDS = {
    "control_rod_insertion": 1.0,
    "coolant_level": DesignConstants.FULL_LEVEL,
    "fuel_level": DesignConstants.FULL_LEVEL,
}

_NON_NEGATIVE_FIELDS = {"neutron_population", "power_output"}


@dataclass
class ReactorState:
    """
    Physical state of the reactor core.

    Rod insertion, coolant and fuel are clamped to their ranges and the
    neutron population and power to zero or above whenever a field is
    assigned, including at construction.

    Attributes:
        neutron_population: Relative neutron count (never negative)
        control_rod_insertion: 0.0 fully withdrawn, 1.0 fully inserted
        core_temperature: Core temperature [°C]
        coolant_level: Coolant inventory [%]
        fuel_level: Remaining fuel [%]
        power_output: Power produced during the last tick, derived from
            the neutron population
    """

    neutron_population: float = INITIAL_CONDITIONS["neutron_population"]
    control_rod_insertion: float = INITIAL_CONDITIONS["control_rod_insertion"]
    core_temperature: float = INITIAL_CONDITIONS["core_temperature"]
    coolant_level: float = INITIAL_CONDITIONS["coolant_level"]
    fuel_level: float = INITIAL_CONDITIONS["fuel_level"]
    power_output: float = INITIAL_CONDITIONS["power_output"]

    def __setattr__(self, name, value):
        """Clamp bounded quantities on every assignment."""
        if name in _BOUNDED_FIELDS:
            value = clamp(value, 0.0, _BOUNDED_FIELDS[name])
        elif name in _NON_NEGATIVE_FIELDS:
            value = clamp_non_negative(value)
        super().__setattr__(name, value)

    def as_dict(self) -> Dict[str, float]:
        """Return the state as a plain dictionary."""
        return asdict(self)


def initial_state() -> ReactorState:
    """Create the reactor state used at program start."""
    return ReactorState(**INITIAL_CONDITIONS)


def reset_state(state: ReactorState) -> ReactorState:
    """
    Apply the side effects of a manual restart after a SCRAM.

    Temperature and rod insertion return to their restart values;
    neutron population, coolant and fuel carry over unchanged.

    Args:
        state: State at the time of the reset

    Returns:
        New state ready to resume operation
    """
    return ReactorState(
        neutron_population=state.neutron_population,
        control_rod_insertion=RESET_CONDITIONS["control_rod_insertion"],
        core_temperature=RESET_CONDITIONS["core_temperature"],
        coolant_level=state.coolant_level,
        fuel_level=state.fuel_level,
        power_output=state.power_output,
    )
