"""
Lecture-derived model constants and the fixed simulation sequence.

Sensor model p(o | s):
- p(sense_open | open) = 0.6,   p(sense_closed | open) = 0.4
- p(sense_open | closed) = 0.2, p(sense_closed | closed) = 0.8

Action model p(s' | a, s):
- push: an open door stays open; a closed door opens with 0.8
- do_nothing: the door keeps its state
"""

from doorbayes.models import Action, DoorState, Observation, Step


# Sensor model: true_state -> (p_sense_open, p_sense_closed)
SENSOR_PROBS = {
    DoorState.OPEN: (0.6, 0.4),
    DoorState.CLOSED: (0.2, 0.8),
}

# Action model: action -> prev_state -> (p_next_open, p_next_closed)
ACTION_PROBS = {
    Action.PUSH: {
        DoorState.OPEN: (1.0, 0.0),
        DoorState.CLOSED: (0.8, 0.2),
    },
    Action.DO_NOTHING: {
        DoorState.OPEN: (1.0, 0.0),
        DoorState.CLOSED: (0.0, 1.0),
    },
}

# Initial belief (p_open, p_closed)
INITIAL_BELIEF = (0.5, 0.5)

SIMULATION_STEPS = (
    Step(Action.DO_NOTHING, Observation.SENSE_CLOSED),
    Step(Action.PUSH, Observation.SENSE_CLOSED),
    Step(Action.DO_NOTHING, Observation.SENSE_CLOSED),
    Step(Action.PUSH, Observation.SENSE_OPEN),
    Step(Action.DO_NOTHING, Observation.SENSE_OPEN),
)
