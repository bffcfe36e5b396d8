"""
Interactive reactor console.

Usage:
    reactor-sim [--seed SEED] [--log-level LEVEL]

Each prompt accepts a control rod level (0-100 %), ``r`` to refill the
coolant or ``q`` to quit. After an automatic SCRAM, ``reset`` restarts
the reactor and anything else ends the session.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from .commands import CommandKind, InvalidCommand, parse_command
from .dashboard import render_dashboard, render_warnings
from .reactor import ReactorController, create_controller
from .state import OperationalMode
from .utils import fraction_to_percent

logger = logging.getLogger(__name__)

BANNER = (
    "Welcome to the Python Nuclear Reactor Simulator\n"
    "Try not to melt the core. Type 'q' to quit."
)
FAREWELL = "Reactor simulation ended. Stay radioactive."


def _prompt_text(controller: ReactorController) -> str:
    current = fraction_to_percent(controller.state.control_rod_insertion)
    return (
        f"Set control rod level (0-100%, current {current}%, "
        "or 'r' to refill coolant): "
    )


def run_session(
    controller: ReactorController,
    read_line: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> OperationalMode:
    """
    Run the read-eval-print loop until quit, meltdown or a declined reset.

    Args:
        controller: Reactor controller to drive
        read_line: Prompting input function (default: ``input``); EOF
            ends the session
        out: Stream the dashboard and messages are written to
            (default: ``sys.stdout``)

    Returns:
        Operational mode when the session ended
    """
    read_line = read_line or input
    if out is None:
        out = sys.stdout

    def say(text: str = "") -> None:
        print(text, file=out)

    say(BANNER)

    while True:
        say()
        say(render_dashboard(controller.state))

        try:
            line = read_line(_prompt_text(controller))
        except EOFError:
            break

        try:
            command = parse_command(line)
        except InvalidCommand as exc:
            say(f"Invalid command: {exc}")
            continue

        if command.kind is CommandKind.QUIT:
            break
        if command.kind is CommandKind.RESET:
            say("Reset is only possible after a SCRAM.")
            continue

        if command.kind is CommandKind.REFILL:
            result = controller.refill()
            say("Coolant refilled!")
        else:
            result = controller.tick(command.rod_percent)

        for message in render_warnings(result.warnings):
            say(message)

        if result.mode.is_terminal:
            break

        if result.mode is OperationalMode.SHUTDOWN:
            try:
                answer = read_line("Type 'reset' to attempt reactor restart, or 'q' to quit: ")
            except EOFError:
                break
            if answer.strip().lower() != "reset":
                break
            say("Reactor restart attempt...")
            controller.reset()

    say()
    say(FAREWELL)
    return controller.mode


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive nuclear reactor simulator",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random events (default: unseeded)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = create_controller(seed=args.seed)
    logger.info("Starting session (seed=%s)", args.seed)

    try:
        mode = run_session(controller)
    except KeyboardInterrupt:
        print(f"\n{FAREWELL}")
        return 130

    return 1 if mode is OperationalMode.MELTED else 0


if __name__ == "__main__":
    sys.exit(main())
