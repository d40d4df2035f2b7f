"""Physics engine for N-body simulations."""

from three_body.physics.vector import Vector3
from three_body.physics.body import Body
from three_body.physics.universe import Universe, UniverseSnapshot, BodySnapshot
from three_body.physics.simulator import Simulator, steps_for_duration

__all__ = [
    "Vector3",
    "Body",
    "Universe",
    "UniverseSnapshot",
    "BodySnapshot",
    "Simulator",
    "steps_for_duration",
]
