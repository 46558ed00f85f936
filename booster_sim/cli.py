"""
Booster Landing Simulation - CLI

The single entry point for running a flight, printing the touchdown summary
and generating telemetry plots.
"""

import argparse
import dataclasses
import logging
import os
import sys

from booster_sim.config import create_default_config
from booster_sim.main import run_simulation
from booster_sim.plotting import generate_all_plots

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    defaults = create_default_config()
    parser = argparse.ArgumentParser(
        description="Reusable booster launch, boostback and landing simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--dt", type=float, default=defaults.dt,
                        help="Integration time step (s)")
    parser.add_argument("--max-time", type=float, default=defaults.max_time,
                        help="Maximum simulated time (s)")
    parser.add_argument("--start-x", type=float, default=defaults.initial_x,
                        help="Initial lateral X (m)")
    parser.add_argument("--start-y", type=float, default=defaults.initial_y,
                        help="Initial lateral Y (m)")
    parser.add_argument("--beacon-x", type=float, default=defaults.beacon_x,
                        help="Beacon X (m)")
    parser.add_argument("--beacon-y", type=float, default=defaults.beacon_y,
                        help="Beacon Y (m)")
    parser.add_argument("--tolerance", type=float, default=defaults.landing_tolerance,
                        help="Landing tolerance around the beacon (m)")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace the simulation at one tick per dt of wall time")
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def build_config(args):
    """Build a SimulationConfig from parsed arguments."""
    return dataclasses.replace(
        create_default_config(),
        dt=args.dt,
        max_time=args.max_time,
        initial_x=args.start_x,
        initial_y=args.start_y,
        beacon_x=args.beacon_x,
        beacon_y=args.beacon_y,
        landing_tolerance=args.tolerance,
        realtime=args.realtime,
        verbose=not args.quiet,
    )


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    # Configure verbosity
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        config = build_config(args)

        logger.info("Starting simulation...")
        final_state, log, result = run_simulation(config)

        print("\n" + "=" * 60)
        print("FLIGHT SUMMARY")
        print("=" * 60)
        print(f"Termination reason: {result.reason}")
        print(f"Final time: {final_state.t:.2f} s")
        print(f"Fuel remaining: {final_state.fuel_mass:.1f} kg")
        if result.landing is not None:
            print(result.landing.describe())
        print("=" * 60 + "\n")

        if not args.no_plots and len(log.time) > 0:
            if os.path.isabs(args.output_dir):
                plot_dir = args.output_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.output_dir)

            logger.info(f"Generating plots in {plot_dir}")
            paths = generate_all_plots(log, plot_dir, config=config)
            print(f">> {len(paths)} plots written to: {plot_dir}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()
