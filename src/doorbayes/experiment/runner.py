"""
Simulation runner: chain filter updates over a fixed step sequence.

Each posterior becomes the prior of the next step. Results are reported as
two stdout lines per iteration by the CLI; diagnostics go to the logger.
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from doorbayes.core.math import entropy
from doorbayes.experiment.config import SimulationConfig
from doorbayes.filter import update
from doorbayes.models import ActionModel, BeliefDistribution, SensorModel, Step

logger = logging.getLogger(__name__)


def iter_beliefs(
    initial_belief: BeliefDistribution,
    steps: Iterable[Step],
    action_model: ActionModel,
    sensor_model: SensorModel,
) -> Iterator[Tuple[int, Step, BeliefDistribution]]:
    """
    Yield (index, step, posterior) for each step, threading the belief.

    Errors from update propagate and end the iteration.
    """
    belief = initial_belief
    for idx, step in enumerate(steps):
        belief = update(belief, step, action_model, sensor_model)
        logger.info(
            "iteration %d (%s, %s): open=%.4f closed=%.4f entropy=%.4f",
            idx,
            getattr(step.action, "value", step.action),
            getattr(step.observation, "value", step.observation),
            belief.p_open,
            belief.p_closed,
            entropy(belief.as_array()),
        )
        yield idx, step, belief


def run_simulation(config: SimulationConfig) -> List[BeliefDistribution]:
    """Run every step in config and return the posterior after each one."""
    return [
        belief
        for _, _, belief in iter_beliefs(
            config.initial_belief,
            config.steps,
            config.action_model,
            config.sensor_model,
        )
    ]


def format_iteration(idx: int, belief: BeliefDistribution) -> List[str]:
    """Report lines for one iteration, open first then closed."""
    return [
        f"iteration {idx} open with belief: {belief.p_open}",
        f"iteration {idx} closed with belief: {belief.p_closed}",
    ]
