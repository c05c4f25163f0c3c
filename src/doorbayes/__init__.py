"""
Door Bayes Filter: discrete Bayes filtering over a two-state door.

A robot either pushes the door or does nothing, then reads a noisy sensor.
The filter tracks the belief that the door is open or closed.

Example:
    >>> from doorbayes import update, Step, Action, Observation
    >>> from doorbayes.experiment import default_config, run_simulation
    >>> beliefs = run_simulation(default_config())
"""

from doorbayes.exceptions import DegenerateBeliefError, InvalidInputError
from doorbayes.filter import correct, predict, update
from doorbayes.models import (
    Action,
    ActionModel,
    BeliefDistribution,
    DoorState,
    Observation,
    SensorModel,
    Step,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Action",
    "ActionModel",
    "BeliefDistribution",
    "DoorState",
    "Observation",
    "SensorModel",
    "Step",
    # Filter
    "predict",
    "correct",
    "update",
    # Errors
    "DegenerateBeliefError",
    "InvalidInputError",
]
