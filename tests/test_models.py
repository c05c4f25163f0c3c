"""
Unit tests for the door world model.

Tests cover:
- BeliefDistribution invariants
- Enum-keyed action and sensor tables
- Model validation and degenerate sensor models
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from pydantic import ValidationError

from doorbayes.exceptions import DegenerateBeliefError, InvalidInputError
from doorbayes.experiment.constants import ACTION_PROBS, SENSOR_PROBS
from doorbayes.models import (
    Action,
    ActionModel,
    BeliefDistribution,
    DoorState,
    Observation,
    SensorModel,
    parse_member,
)


class TestBeliefDistribution:
    """Test the belief invariants."""

    def test_valid_belief(self):
        belief = BeliefDistribution(0.25, 0.75)
        assert belief.p_open == 0.25
        assert belief.p_closed == 0.75
        assert_allclose(belief.as_array(), [0.25, 0.75])

    def test_values_are_plain_floats(self):
        belief = BeliefDistribution.from_array(np.array([0.5, 0.5]))
        assert type(belief.p_open) is float
        assert type(belief.p_closed) is float

    def test_sum_must_be_one(self):
        with pytest.raises(ValueError, match="sum to 1"):
            BeliefDistribution(0.6, 0.6)

    def test_range_enforced(self):
        with pytest.raises(ValueError, match="lie in"):
            BeliefDistribution(-0.1, 1.1)

    def test_tolerance_accepts_rounding(self):
        BeliefDistribution(0.1 + 0.2, 0.7)

    def test_immutable(self):
        belief = BeliefDistribution.uniform()
        with pytest.raises(AttributeError):
            belief.p_open = 1.0

    def test_from_array_shape(self):
        with pytest.raises(ValueError, match="shape"):
            BeliefDistribution.from_array(np.array([0.2, 0.3, 0.5]))

    def test_probability_and_most_likely(self):
        belief = BeliefDistribution(0.3, 0.7)
        assert belief.probability(DoorState.OPEN) == 0.3
        assert belief.probability("closed") == 0.7
        assert belief.most_likely() is DoorState.CLOSED
        assert BeliefDistribution.uniform().most_likely() is DoorState.OPEN


class TestParseMember:
    """Test closed-set input resolution."""

    def test_member_passthrough(self):
        assert parse_member(Action, Action.PUSH, "action") is Action.PUSH

    def test_string_value(self):
        assert parse_member(Observation, "sense_open", "observation") is Observation.SENSE_OPEN

    @pytest.mark.parametrize("value", [0, 1, 2, "open", None, 1.0])
    def test_rejects_unknown(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_member(Action, value, "action")
        assert exc_info.value.axis == "action"
        assert exc_info.value.allowed == ["push", "do_nothing"]


class TestActionModel:
    """Test action model tables."""

    def test_transition_matrix_push(self):
        model = ActionModel(table=ACTION_PROBS)
        expected = np.array([[1.0, 0.0], [0.8, 0.2]])
        assert_allclose(model.transition_matrix(Action.PUSH), expected)

    def test_transition_matrix_do_nothing_is_identity(self):
        model = ActionModel(table=ACTION_PROBS)
        assert_allclose(model.transition_matrix("do_nothing"), np.eye(2))

    def test_string_keys_are_coerced(self):
        model = ActionModel(table={
            "push": {"open": (1, 0), "closed": (0.8, 0.2)},
            "do_nothing": {"open": (1, 0), "closed": (0, 1)},
        })
        assert_allclose(model.transition_matrix(Action.PUSH), [[1.0, 0.0], [0.8, 0.2]])

    def test_missing_action_rejected(self):
        with pytest.raises(ValidationError, match="missing actions"):
            ActionModel(table={Action.PUSH: ACTION_PROBS[Action.PUSH]})

    def test_missing_state_rejected(self):
        table = dict(ACTION_PROBS)
        table[Action.PUSH] = {DoorState.OPEN: (1.0, 0.0)}
        with pytest.raises(ValidationError, match="missing prior states"):
            ActionModel(table=table)

    def test_out_of_range_rejected(self):
        table = dict(ACTION_PROBS)
        table[Action.PUSH] = {DoorState.OPEN: (1.5, 0.0), DoorState.CLOSED: (0.8, 0.2)}
        with pytest.raises(ValidationError, match="out of"):
            ActionModel(table=table)

    def test_unknown_action_lookup(self):
        model = ActionModel(table=ACTION_PROBS)
        with pytest.raises(InvalidInputError):
            model.transition_matrix("pull")


class TestSensorModel:
    """Test sensor model tables."""

    def test_likelihoods(self):
        model = SensorModel(table=SENSOR_PROBS)
        assert_allclose(model.likelihood(Observation.SENSE_OPEN), [0.6, 0.2])
        assert_allclose(model.likelihood(Observation.SENSE_CLOSED), [0.4, 0.8])

    def test_unknown_observation_lookup(self):
        model = SensorModel(table=SENSOR_PROBS)
        with pytest.raises(InvalidInputError):
            model.likelihood(1)

    def test_missing_state_rejected(self):
        with pytest.raises(ValidationError, match="missing true states"):
            SensorModel(table={DoorState.OPEN: (0.6, 0.4)})

    def test_zero_likelihood_observation_is_degenerate(self):
        """sense_closed impossible in every state can never be normalized."""
        with pytest.raises(DegenerateBeliefError):
            SensorModel(table={
                DoorState.OPEN: (0.6, 0.0),
                DoorState.CLOSED: (0.2, 0.0),
            })

    def test_models_are_frozen(self):
        model = SensorModel(table=SENSOR_PROBS)
        with pytest.raises(ValidationError):
            model.table = {}
