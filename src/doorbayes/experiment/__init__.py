"""
Door Simulation Module.

Configuration, the fixed five-step run, and the command-line entry point.
"""

from doorbayes.experiment.config import SimulationConfig, default_config
from doorbayes.experiment.runner import format_iteration, iter_beliefs, run_simulation

__all__ = [
    # Config
    "SimulationConfig",
    "default_config",
    # Runner
    "iter_beliefs",
    "run_simulation",
    "format_iteration",
]
