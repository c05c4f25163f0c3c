"""
Discrete Bayes Filter for the door state.

Mathematical Foundation:
-----------------------------------------------------
One filter step turns the prior bel(s) into the posterior bel'(s') in two
phases:

    Prediction:   bel_bar(s') = Σ_s p(s' | a, s) · bel(s)
    Correction:   bel'(s')    = η · p(o | s') · bel_bar(s')

where η = 1 / Σ_s' p(o | s') · bel_bar(s') is the normalizer.

For the two-state door this is:

    pred_open   = p(open | a, open) · p_open   + p(open | a, closed) · p_closed
    pred_closed = p(closed | a, open) · p_open + p(closed | a, closed) · p_closed

Key Operations:
--------------
1. predict: push the prior through the action model (unnormalized)
2. correct: weight the prediction by the observation likelihood (unnormalized)
3. update: predict, correct, normalize

All functions are pure; the models are passed in explicitly.
"""

import logging

import numpy as np

from doorbayes.core.math import normalize
from doorbayes.models import (
    Action,
    ActionModel,
    BeliefDistribution,
    Observation,
    SensorModel,
    Step,
    parse_member,
)

logger = logging.getLogger(__name__)


def predict(
    prior: BeliefDistribution,
    action: Action,
    action_model: ActionModel,
) -> np.ndarray:
    """
    Propagate the belief through the action model.

    Mathematical Update:
        bel_bar(s') = Σ_s p(s' | a, s) · bel(s)

    Args:
        prior: Belief before the action
        action: Action taken
        action_model: p(s' | a, s) tables

    Returns:
        predicted: Unnormalized predicted belief, shape [2] (open, closed)

    Raises:
        InvalidInputError: If action is not push or do_nothing
    """
    transition = action_model.transition_matrix(action)
    return prior.as_array() @ transition


def correct(
    predicted: np.ndarray,
    observation: Observation,
    sensor_model: SensorModel,
) -> np.ndarray:
    """
    Weight the predicted belief by the observation likelihood.

    Returns:
        corrected: p(o | s') · bel_bar(s'), shape [2], not yet normalized

    Raises:
        InvalidInputError: If observation is not sense_open or sense_closed
    """
    return sensor_model.likelihood(observation) * predicted


def update(
    prior: BeliefDistribution,
    step: Step,
    action_model: ActionModel,
    sensor_model: SensorModel,
) -> BeliefDistribution:
    """
    One Bayes filter step: prediction, correction, normalization.

    Args:
        prior: Belief before the step
        step: (action, observation) pair
        action_model: p(s' | a, s) tables
        sensor_model: p(o | s) table

    Returns:
        posterior: New belief; prior is left untouched

    Raises:
        InvalidInputError: If the action or observation is outside its set
        DegenerateBeliefError: If the corrected belief has zero total mass
    """
    # Both inputs are checked before either phase runs
    action = parse_member(Action, step.action, "action")
    observation = parse_member(Observation, step.observation, "observation")

    predicted = predict(prior, action, action_model)
    corrected = correct(predicted, observation, sensor_model)
    posterior = normalize(corrected)

    logger.debug(
        "update %s/%s: prior=%s predicted=%s corrected=%s posterior=%s",
        action.value,
        observation.value,
        prior.as_array().tolist(),
        predicted.tolist(),
        corrected.tolist(),
        posterior.tolist(),
    )
    return BeliefDistribution.from_array(posterior)
