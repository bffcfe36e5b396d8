"""
Random Event Module

This module provides the sources of random disturbances (coolant
leaks and power surges) and the function applying their effects to
the reactor state.

Event sources are plain iterators yielding ``Optional[EventKind]``
once per tick. ``RandomEventSource`` samples them from a seedable
numpy generator; ``ScriptedEventSource`` replays a fixed sequence so
scenarios can be reproduced exactly.
"""

from dataclasses import replace
from typing import Iterable, Iterator, Optional, Tuple
import logging

import numpy as np

from .constants import DesignConstants
from .state import EventKind, ReactorState, WarningKind
from .utils import clamp

logger = logging.getLogger(__name__)


class RandomEventSource:
    """
    Infinite, non-restartable stream of random disturbances.

    Each tick draws uniformly from ``EVENT_OUTCOMES`` outcomes; exactly
    one of them produces an event, which is then a coolant leak or a
    power surge with equal probability.

    Args:
        seed: Seed for the generator; ``None`` draws fresh OS entropy
        rng: Pre-built generator, takes precedence over ``seed``
        constants: Design constants (default instance if omitted)
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        constants: Optional[DesignConstants] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.constants = constants or DesignConstants()
        self.outcomes = self.constants.EVENT_OUTCOMES

    def __iter__(self) -> Iterator[Optional[EventKind]]:
        return self

    def __next__(self) -> Optional[EventKind]:
        if self.rng.integers(0, self.outcomes) != 0:
            return None
        if self.rng.integers(0, 2) == 0:
            return EventKind.COOLANT_LEAK
        return EventKind.POWER_SURGE


class ScriptedEventSource:
    """
    Event source replaying a fixed sequence, then yielding no events.

    Args:
        events: Events (or ``None`` for quiet ticks) to emit in order
    """

    def __init__(self, events: Iterable[Optional[EventKind]] = ()):
        self._events = iter(events)

    def __iter__(self) -> Iterator[Optional[EventKind]]:
        return self

    def __next__(self) -> Optional[EventKind]:
        return next(self._events, None)


def apply_event(
    state: ReactorState,
    event: Optional[EventKind],
    constants: Optional[DesignConstants] = None,
) -> Tuple[ReactorState, Optional[WarningKind]]:
    """
    Apply a random event to the reactor state.

    A coolant leak only drains coolant while the level is above the
    leak minimum; otherwise it falls back to the power surge effect.

    Args:
        state: State after the physics update
        event: Event drawn for this tick, or ``None``
        constants: Design constants (default instance if omitted)

    Returns:
        Tuple of (new state, warning describing the effect that
        actually happened, or ``None``)
    """
    if event is None:
        return state, None

    c = constants or DesignConstants()
    new = replace(state)

    if event is EventKind.COOLANT_LEAK and new.coolant_level > c.COOLANT_LEAK_MINIMUM:
        new.coolant_level = clamp(
            new.coolant_level - c.COOLANT_LEAK_AMOUNT, 0.0, c.FULL_LEVEL
        )
        logger.info("Random event: coolant leak, coolant now %.1f%%", new.coolant_level)
        return new, WarningKind.COOLANT_LEAK

    new.core_temperature += c.POWER_SURGE_HEATING
    logger.info("Random event: power surge, temperature now %.1f", new.core_temperature)
    return new, WarningKind.POWER_SURGE
