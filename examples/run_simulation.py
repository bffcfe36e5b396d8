#!/usr/bin/env python3
"""
Example Headless Reactor Simulation

This script demonstrates how to drive the reactor_sim package without
an operator: the control rods are held at a fixed level and the
reactor is ticked until the tick limit, a SCRAM or a meltdown.

Usage:
    python run_simulation.py [--rods RODS] [--ticks TICKS] [--seed SEED]

Example:
    python run_simulation.py --rods 0 --ticks 100 --seed 42
"""

import argparse
import logging
import sys
import os

# Add parent directory to path for importing reactor_sim
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reactor_sim.reactor import create_controller
from reactor_sim.dashboard import render_dashboard, render_warnings
from reactor_sim.state import OperationalMode


def run_fixed_rods(rods: float, ticks: int, seed: int, refill_below: float = None):
    """
    Hold the rods at a fixed level and report each tick.

    Args:
        rods: Rod insertion in percent
        ticks: Maximum number of ticks
        seed: Seed for random events
        refill_below: Refill coolant whenever it drops below this level
    """
    print("\n" + "=" * 70)
    print("       HEADLESS REACTOR SIMULATION")
    print(f"       Rods {rods:.0f}% in, up to {ticks} ticks, seed {seed}")
    print("=" * 70)

    controller = create_controller(seed=seed)

    print(f"\n{'Tick':>5} {'Neutrons':>12} {'Power':>10} {'Temp':>9} "
          f"{'Coolant':>8} {'Fuel':>6}  Events")
    print("-" * 70)

    for _ in range(ticks):
        if refill_below is not None and controller.state.coolant_level < refill_below:
            controller.refill()

        result = controller.tick(rods)
        s = result.state
        events = ", ".join(sorted(w.name for w in result.warnings))

        print(f"{result.tick:>5d} {s.neutron_population:>12.2f} {s.power_output:>10.2f} "
              f"{s.core_temperature:>9.1f} {s.coolant_level:>8.1f} {s.fuel_level:>6.1f}  {events}")

        if result.mode is not OperationalMode.RUNNING:
            print()
            for message in render_warnings(result.warnings):
                print(message)
            break

    print("\n" + render_dashboard(controller.state))
    print(f"\nFinal mode: {controller.mode.value}")

    return controller


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Headless reactor simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Rods 50%% in, 100 ticks
  %(prog)s --rods 0 --seed 1        # Withdraw rods until SCRAM
  %(prog)s --refill-below 30        # Keep the coolant topped up
        """
    )

    parser.add_argument(
        "--rods",
        type=float,
        default=50.0,
        help="Control rod insertion in %% (default: 50, range: 0-100)"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=100,
        help="Maximum number of ticks (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for random events (default: 0)"
    )
    parser.add_argument(
        "--refill-below",
        type=float,
        default=None,
        help="Refill coolant when it drops below this level in %%"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args()

    # Validate rod level
    if not 0.0 <= args.rods <= 100.0:
        print(f"Error: Rod level must be between 0-100%, got {args.rods}%")
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, args.log_level))

    run_fixed_rods(args.rods, args.ticks, args.seed, args.refill_below)


if __name__ == "__main__":
    main()
