"""
Design Constants for the Reactor Simulator

This module contains the fixed coefficients, thresholds and initial
values of the first-order reactor model. They are fixed by design and
are not meant to be tuned at run time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DesignConstants:
    """Coefficients and thresholds used by the physics and safety models."""

    # Multiplication factor with rods fully withdrawn
    K_EFF_BASE: float = 1.05

    # Reactivity removed per unit of rod insertion
    ROD_WORTH: float = 1.1

    # Lower bound on k_eff so a single tick never collapses the population
    K_EFF_FLOOR: float = 0.7

    # Power produced per neutron [arbitrary units]
    POWER_PER_NEUTRON: float = 0.1

    # Fuel consumed per tick [%]
    FUEL_BURN_PER_TICK: float = 0.1

    # Temperature rise per unit of power [°C]
    HEATING_PER_POWER: float = 0.01

    # Coolant lost per tick [%]
    COOLANT_DRAIN_PER_TICK: float = 0.3

    # Passive cooling per tick [°C]
    PASSIVE_COOLING_PER_TICK: float = 0.5

    # Below this coolant level the core heats faster [%]
    LOW_COOLANT_THRESHOLD: float = 20.0

    # Extra heating per tick while coolant is low [°C]
    LOW_COOLANT_HEATING: float = 5.0

    # Coolant lost in a leak [%]
    COOLANT_LEAK_AMOUNT: float = 10.0

    # A leak only drains coolant above this level [%]
    COOLANT_LEAK_MINIMUM: float = 10.0

    # Temperature rise in a power surge [°C]
    POWER_SURGE_HEATING: float = 50.0

    # Random event sampling: one outcome out of EVENT_OUTCOMES is an event
    EVENT_OUTCOMES: int = 10

    # Automatic SCRAM thresholds
    SCRAM_TEMPERATURE: float = 1000.0
    SCRAM_NEUTRONS: float = 2000.0

    # SCRAM action
    SCRAM_NEUTRON_FACTOR: float = 0.05
    SCRAM_COOLING: float = 200.0

    # Core melts above this temperature [°C]
    MELTDOWN_TEMPERATURE: float = 2000.0

    # Coolant and fuel are expressed in percent
    FULL_LEVEL: float = 100.0


# Reactor state at program start
INITIAL_CONDITIONS = {
    "neutron_population": 1000.0,
    "control_rod_insertion": 0.5,
    "core_temperature": 300.0,
    "coolant_level": 100.0,
    "fuel_level": 100.0,
    "power_output": 0.0,
}


# Values applied by a manual restart after a SCRAM
RESET_CONDITIONS = {
    "core_temperature": 300.0,
    "control_rod_insertion": 1.0,
}


# Dashboard bar scales
DASHBOARD_SCALES = {
    "Temp": 2000.0,
    "Coolant": 100.0,
    "Fuel": 100.0,
}
