"""
Operator command parsing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math
import numbers


class InvalidCommand(ValueError):
    """Operator input that cannot be applied. Nothing is changed."""


class CommandKind(Enum):
    SET_RODS = "set_rods"
    REFILL = "refill"
    RESET = "reset"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """
    A parsed operator command.

    Attributes:
        kind: What the operator asked for
        rod_percent: Requested rod insertion [%], only for SET_RODS
    """

    kind: CommandKind
    rod_percent: Optional[float] = None


REFILL = "refill"

_KEYWORDS = {
    "q": CommandKind.QUIT,
    "quit": CommandKind.QUIT,
    "r": CommandKind.REFILL,
    "refill": CommandKind.REFILL,
    "reset": CommandKind.RESET,
}


def validate_rod_percent(value) -> float:
    """
    Check a rod command is a finite number in [0, 100].

    Raises:
        InvalidCommand: If the value is not a number or out of range
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidCommand(f"Rod level must be a number, got {value!r}")
    if math.isnan(value) or not 0 <= value <= 100:
        raise InvalidCommand(f"Rod level must be between 0 and 100, got {value}")
    return float(value)


def parse_command(text: str) -> Command:
    """
    Parse one line of operator input.

    Accepted tokens (case-insensitive, surrounding whitespace ignored):
    ``q``/``quit``, ``r``/``refill``, ``reset`` or a rod level in percent.

    Args:
        text: Raw input line

    Returns:
        Parsed command

    Raises:
        InvalidCommand: If the input is not a recognised command
    """
    token = text.strip().lower()
    if token in _KEYWORDS:
        return Command(_KEYWORDS[token])

    try:
        value = float(token)
    except ValueError:
        raise InvalidCommand(f"Unrecognised command: {text.strip()!r}") from None

    return Command(CommandKind.SET_RODS, rod_percent=validate_rod_percent(value))
