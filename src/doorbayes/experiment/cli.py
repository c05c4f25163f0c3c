"""
Command-line entry point for the door Bayes filter simulation.

Runs the fixed five-step lecture sequence and prints the belief after each
step. Flags only control diagnostic logging on stderr.
"""

import argparse
import logging
from typing import List, Optional

from doorbayes.experiment.config import default_config
from doorbayes.experiment.runner import format_iteration, iter_beliefs


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments with the following attributes:
            verbose (bool): Log each iteration at INFO level.
            debug (bool): Log filter internals at DEBUG level.
    """
    parser = argparse.ArgumentParser(
        description="Run the door-state Bayes filter over the fixed action/observation sequence"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-iteration summaries to stderr",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log prediction/correction internals to stderr",
    )

    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    """Route library logging to stderr at the level the flags ask for."""
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_arguments(argv)
    configure_logging(args)

    config = default_config()
    for idx, _, belief in iter_beliefs(
        config.initial_belief,
        config.steps,
        config.action_model,
        config.sensor_model,
    ):
        for line in format_iteration(idx, belief):
            print(line)
    return 0
