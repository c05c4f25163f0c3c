"""
Door world model: states, inputs, belief and the two probability tables.

Every vector and matrix in this package is indexed by DoorState in its
declaration order, (OPEN, CLOSED):

    belief[i]        = p(s = i)
    transition[i, j] = p(s' = j | s = i, a)
    likelihood[i]    = p(o | s = i)

The tables are keyed by enum members, never by position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Tuple, Type, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from doorbayes.exceptions import DegenerateBeliefError, InvalidInputError

# Tolerance for the belief sum-to-one invariant
BELIEF_TOLERANCE = 1e-9


class DoorState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Action(str, Enum):
    PUSH = "push"
    DO_NOTHING = "do_nothing"


class Observation(str, Enum):
    SENSE_OPEN = "sense_open"
    SENSE_CLOSED = "sense_closed"


STATES: Tuple[DoorState, ...] = tuple(DoorState)

E = TypeVar("E", bound=Enum)


def parse_member(enum_cls: Type[E], value: Any, axis: str) -> E:
    """
    Resolve value to a member of enum_cls.

    Accepts members and their string values ("push"). Anything else, including
    the positional integers of a flat table, is rejected.

    Raises:
        InvalidInputError: If value is not one of the enumeration's values
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise InvalidInputError(axis, value, [member.value for member in enum_cls])


@dataclass(frozen=True)
class BeliefDistribution:
    """
    Belief over the door state.

    Attributes:
        p_open: Probability the door is open
        p_closed: Probability the door is closed
    """
    p_open: float
    p_closed: float

    def __post_init__(self) -> None:
        # Store plain floats so printing never shows numpy scalar reprs
        object.__setattr__(self, "p_open", float(self.p_open))
        object.__setattr__(self, "p_closed", float(self.p_closed))
        for name in ("p_open", "p_closed"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}")
        total = self.p_open + self.p_closed
        if abs(total - 1.0) > BELIEF_TOLERANCE:
            raise ValueError(f"Belief must sum to 1, got {total}")

    @classmethod
    def uniform(cls) -> "BeliefDistribution":
        return cls(0.5, 0.5)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "BeliefDistribution":
        """Build from a length-2 vector ordered (open, closed)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (len(STATES),):
            raise ValueError(f"Belief vector must have shape (2,), got {arr.shape}")
        return cls(arr[0], arr[1])

    def as_array(self) -> np.ndarray:
        return np.array([self.p_open, self.p_closed], dtype=np.float64)

    def probability(self, state: DoorState) -> float:
        state = parse_member(DoorState, state, "state")
        return self.p_open if state is DoorState.OPEN else self.p_closed

    def most_likely(self) -> DoorState:
        """Return the MAP state; ties resolve to OPEN."""
        return DoorState.OPEN if self.p_open >= self.p_closed else DoorState.CLOSED

    def __str__(self) -> str:
        return f"BeliefDistribution(open={self.p_open:.4f}, closed={self.p_closed:.4f})"


class Step(NamedTuple):
    """One filter input: the action taken, then the sensor reading."""
    action: Any
    observation: Any


def _check_probability_row(row: Tuple[float, float], where: str) -> None:
    for p in row:
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Probability {p} out of [0, 1] in {where}")


class ActionModel(BaseModel):
    """
    Action model p(next_state | action, prev_state).

    table[action][prev_state] = (p_next_open, p_next_closed)

    Rows are not required to sum to 1; a non-stochastic row only means the
    prediction is unnormalized, which the correction step absorbs.
    """
    model_config = ConfigDict(frozen=True)

    table: Dict[Action, Dict[DoorState, Tuple[float, float]]]

    @field_validator("table")
    @classmethod
    def validate_table(cls, table):
        missing = [a.value for a in Action if a not in table]
        if missing:
            raise ValueError(f"Action model missing actions: {missing}")
        for action, rows in table.items():
            missing_states = [s.value for s in STATES if s not in rows]
            if missing_states:
                raise ValueError(
                    f"Action model for {action.value} missing prior states: {missing_states}"
                )
            for state, row in rows.items():
                _check_probability_row(row, f"action model [{action.value}][{state.value}]")
        return table

    def transition_matrix(self, action: Any) -> np.ndarray:
        """
        Transition matrix for action.

        Returns:
            T: shape [2, 2] where T[i, j] = p(s' = j | s = i, action)

        Raises:
            InvalidInputError: If action is not push or do_nothing
        """
        action = parse_member(Action, action, "action")
        rows = self.table[action]
        return np.array([rows[state] for state in STATES], dtype=np.float64)


class SensorModel(BaseModel):
    """
    Sensor model p(observation | true_state).

    table[true_state] = (p_sense_open, p_sense_closed)
    """
    model_config = ConfigDict(frozen=True)

    table: Dict[DoorState, Tuple[float, float]]

    @field_validator("table")
    @classmethod
    def validate_table(cls, table):
        missing = [s.value for s in STATES if s not in table]
        if missing:
            raise ValueError(f"Sensor model missing true states: {missing}")
        for state, row in table.items():
            _check_probability_row(row, f"sensor model [{state.value}]")
        return table

    @model_validator(mode="after")
    def check_observable(self) -> "SensorModel":
        # An observation impossible under every state can never be normalized
        for idx, observation in enumerate(Observation):
            if all(self.table[state][idx] == 0.0 for state in STATES):
                raise DegenerateBeliefError(
                    f"Sensor model gives zero likelihood to {observation.value} in every state"
                )
        return self

    def likelihood(self, observation: Any) -> np.ndarray:
        """
        Likelihood vector for observation.

        Returns:
            likelihood: shape [2], [p(o | open), p(o | closed)]

        Raises:
            InvalidInputError: If observation is not sense_open or sense_closed
        """
        observation = parse_member(Observation, observation, "observation")
        idx = list(Observation).index(observation)
        return np.array([self.table[state][idx] for state in STATES], dtype=np.float64)
