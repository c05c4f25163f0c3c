""" Pydantic models bundling everything one simulation run needs """

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from doorbayes.experiment.constants import (
    ACTION_PROBS,
    INITIAL_BELIEF,
    SENSOR_PROBS,
    SIMULATION_STEPS,
)
from doorbayes.models import ActionModel, BeliefDistribution, SensorModel, Step


class SimulationConfig(BaseModel):
    action_model: ActionModel               # p(s' | a, s)
    sensor_model: SensorModel               # p(o | s)
    initial_belief: BeliefDistribution      # prior before the first step
    steps: Tuple[Step, ...]                 # (action, observation) sequence

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def default_config() -> SimulationConfig:
    """
    Build the lecture configuration: fixed models, uniform prior, five steps.

    Built fresh on every call; nothing is cached at module level.
    """
    return SimulationConfig(
        action_model=ActionModel(table=ACTION_PROBS),
        sensor_model=SensorModel(table=SENSOR_PROBS),
        initial_belief=BeliefDistribution(*INITIAL_BELIEF),
        steps=SIMULATION_STEPS,
    )
