"""
Text Dashboard

Formatting helpers that turn reactor state and warnings into the text
shown to the operator. Nothing here prints; callers decide where the
text goes.
"""

from typing import Iterable, List

from .constants import DASHBOARD_SCALES, DesignConstants
from .state import ReactorState, WarningKind
from .utils import fraction_to_percent

BAR_WIDTH = 20
BAR_FILL = "█"

WARNING_MESSAGES = {
    WarningKind.LOW_COOLANT: "!!! WARNING: Coolant is critically low! !!!",
    WarningKind.COOLANT_LEAK: (
        "!!! RANDOM EVENT: Coolant Leak! "
        f"Lost {DesignConstants.COOLANT_LEAK_AMOUNT:.0f}% coolant! !!!"
    ),
    WarningKind.POWER_SURGE: (
        "!!! RANDOM EVENT: Power Surge! "
        f"Temperature increased by {DesignConstants.POWER_SURGE_HEATING:.0f}C! !!!"
    ),
    WarningKind.AUTO_SCRAM: "*** AUTO SCRAM! Emergency shutdown! ***",
    WarningKind.MELTDOWN: (
        "!!! MELTDOWN !!! Core has gone critical. "
        "You have failed as reactor operator."
    ),
}

# Order in which warnings are shown within one tick
_WARNING_ORDER = [
    WarningKind.LOW_COOLANT,
    WarningKind.COOLANT_LEAK,
    WarningKind.POWER_SURGE,
    WarningKind.AUTO_SCRAM,
    WarningKind.MELTDOWN,
]

_UNITS = {"Temp": "°C", "Coolant": "%", "Fuel": "%"}


def render_bar(label: str, value: float, maximum: float, width: int = BAR_WIDTH) -> str:
    """
    Render one horizontal bar.

    Args:
        label: Quantity name, also selects the unit suffix
        value: Current value
        maximum: Value that fills the bar completely
        width: Bar width in characters

    Returns:
        Single line such as ``Temp    [███      ]  300.0°C``
    """
    bars = int((value / maximum) * width)
    bars = max(0, min(width, bars))
    body = BAR_FILL * bars + " " * (width - bars)
    return f"{label:<8}[{body}]  {value:.1f}{_UNITS.get(label, '')}"


def render_status_line(state: ReactorState) -> str:
    """Render the one-line numeric summary of the reactor state."""
    return (
        f"Neutrons: {state.neutron_population:.2f}"
        f" | Control Rods: {fraction_to_percent(state.control_rod_insertion)}% in"
        f" | Temp: {state.core_temperature:.2f}C"
        f" | Coolant: {state.coolant_level:.1f}%"
        f" | Fuel: {state.fuel_level:.1f}%"
    )


def render_dashboard(state: ReactorState) -> str:
    """Render the full dashboard: title, bars and status line."""
    lines = [
        "=== Reactor Dashboard ===",
        render_bar("Temp", state.core_temperature, DASHBOARD_SCALES["Temp"]),
        render_bar("Coolant", state.coolant_level, DASHBOARD_SCALES["Coolant"]),
        render_bar("Fuel", state.fuel_level, DASHBOARD_SCALES["Fuel"]),
        "",
        render_status_line(state),
    ]
    return "\n".join(lines)


def render_warnings(warnings: Iterable[WarningKind]) -> List[str]:
    """Return the operator messages for a set of warnings, in tick order."""
    present = set(warnings)
    return [WARNING_MESSAGES[kind] for kind in _WARNING_ORDER if kind in present]
