"""
Physics Module for the Reactor Simulator

This module implements the per-tick update of the reactor core:
- Neutron population dynamics driven by control rod insertion
- Power output derived from the neutron population
- Fuel depletion and its effect on neutron yield
- Core heating, coolant drain and passive cooling

The model is a toy first-order approximation: the effective
multiplication factor is a linear function of rod insertion only.
"""

from dataclasses import dataclass, field, replace
from typing import Set, Tuple
import logging

from .constants import DesignConstants
from .state import ReactorState, WarningKind
from .utils import clamp, clamp_non_negative

logger = logging.getLogger(__name__)


@dataclass
class PhysicsEngine:
    """
    Pure state-transition function for one simulation tick.

    The engine holds no state of its own. ``update`` never mutates its
    input and always returns a new ``ReactorState``. Random disturbances
    are applied separately (see ``reactor_sim.events``) so the numeric
    core is deterministic.
    """

    constants: DesignConstants = field(default_factory=DesignConstants)

    def calculate_k_effective(self, rod_insertion: float) -> float:
        """
        Calculate the effective multiplication factor.

        k_eff = max(k_floor, k_base - insertion * rod_worth)

        More insertion monotonically lowers reactivity. The floor keeps
        the population from collapsing to zero within one tick.

        Args:
            rod_insertion: Control rod insertion fraction [0, 1]

        Returns:
            Effective multiplication factor
        """
        c = self.constants
        return max(c.K_EFF_FLOOR, c.K_EFF_BASE - rod_insertion * c.ROD_WORTH)

    def update(
        self,
        state: ReactorState,
        commanded_rod_level: float,
    ) -> Tuple[ReactorState, Set[WarningKind]]:
        """
        Advance the reactor by one tick.

        The steps are applied in a fixed order, each reading the result
        of the previous one. Power is computed before the fuel efficiency
        is applied, so it reflects the population before depletion.

        Args:
            state: Current reactor state
            commanded_rod_level: Requested rod insertion fraction; values
                outside [0, 1] are clamped

        Returns:
            Tuple of (new state, warnings raised during the update)
        """
        c = self.constants
        warnings: Set[WarningKind] = set()
        new = replace(state)

        new.control_rod_insertion = clamp(commanded_rod_level, 0.0, 1.0)

        k_eff = self.calculate_k_effective(new.control_rod_insertion)
        new.neutron_population = clamp_non_negative(new.neutron_population * k_eff)

        new.power_output = clamp_non_negative(
            new.neutron_population * c.POWER_PER_NEUTRON
        )

        # Fuel efficiency is applied after power: one-tick lag
        fuel_efficiency = new.fuel_level / c.FULL_LEVEL
        new.neutron_population = clamp_non_negative(
            new.neutron_population * fuel_efficiency
        )

        new.fuel_level = clamp(new.fuel_level - c.FUEL_BURN_PER_TICK, 0.0, c.FULL_LEVEL)

        new.core_temperature += new.power_output * c.HEATING_PER_POWER

        new.coolant_level = clamp(
            new.coolant_level - c.COOLANT_DRAIN_PER_TICK, 0.0, c.FULL_LEVEL
        )
        new.core_temperature -= c.PASSIVE_COOLING_PER_TICK

        if new.coolant_level < c.LOW_COOLANT_THRESHOLD:
            warnings.add(WarningKind.LOW_COOLANT)
            new.core_temperature += c.LOW_COOLANT_HEATING
            logger.info("Coolant critically low: %.1f%%", new.coolant_level)

        logger.debug(
            "k_eff=%.3f neutrons=%.2f power=%.2f T=%.1f coolant=%.1f fuel=%.1f",
            k_eff,
            new.neutron_population,
            new.power_output,
            new.core_temperature,
            new.coolant_level,
            new.fuel_level,
        )

        return new, warnings
