"""
Safety Monitor

This module implements the automatic SCRAM and meltdown logic that
drives the reactor's operational mode after every physics update.
"""

from dataclasses import dataclass, field, replace
from typing import Set, Tuple
import logging

from .constants import DesignConstants
from .state import OperationalMode, ReactorState, WarningKind

logger = logging.getLogger(__name__)


@dataclass
class SafetyMonitor:
    """
    Reactor protection state machine.

    From RUNNING, exceeding the temperature or neutron limit triggers a
    SCRAM: rods fully inserted, neutron population cut and the core
    cooled, and the mode moves to SHUTDOWN. The meltdown check runs
    afterwards on the post-SCRAM temperature, so a SCRAM that brings
    the core back under the meltdown limit prevents the meltdown.

    SHUTDOWN and MELTED are left untouched here; leaving SHUTDOWN is an
    operator decision.
    """

    constants: DesignConstants = field(default_factory=DesignConstants)

    def scram_required(self, state: ReactorState) -> bool:
        """Check the automatic trip conditions."""
        c = self.constants
        return (
            state.core_temperature > c.SCRAM_TEMPERATURE
            or state.neutron_population > c.SCRAM_NEUTRONS
        )

    def meltdown(self, state: ReactorState) -> bool:
        """Check whether the core has exceeded the meltdown temperature."""
        return state.core_temperature > self.constants.MELTDOWN_TEMPERATURE

    def evaluate(
        self,
        state: ReactorState,
        mode: OperationalMode,
    ) -> Tuple[ReactorState, OperationalMode, Set[WarningKind]]:
        """
        Evaluate the post-update state against the safety limits.

        Args:
            state: State after physics and random events
            mode: Mode at the start of the tick

        Returns:
            Tuple of (state after any SCRAM action, new mode, warnings)
        """
        warnings: Set[WarningKind] = set()
        if mode is not OperationalMode.RUNNING:
            return state, mode, warnings

        c = self.constants
        new = replace(state)

        if self.scram_required(new):
            logger.warning(
                "AUTO SCRAM: T=%.1f neutrons=%.2f",
                new.core_temperature,
                new.neutron_population,
            )
            new.control_rod_insertion = 1.0
            new.neutron_population *= c.SCRAM_NEUTRON_FACTOR
            new.core_temperature -= c.SCRAM_COOLING
            mode = OperationalMode.SHUTDOWN
            warnings.add(WarningKind.AUTO_SCRAM)

        if self.meltdown(new):
            logger.critical("MELTDOWN: core temperature %.1f", new.core_temperature)
            mode = OperationalMode.MELTED
            warnings.add(WarningKind.MELTDOWN)

        return new, mode, warnings
