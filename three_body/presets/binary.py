"""Symmetric two-body preset."""

from typing import List

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.presets.base import Preset


class BinaryPreset(Preset):
    """Two equal masses at (+-separation/2, 0, 0) moving in opposite y directions.

    With the defaults this is the unit-mass pair at (1,0,0) and (-1,0,0)
    with velocities (0,1,0) and (0,-1,0).
    """

    def __init__(self, mass: float = 1.0, separation: float = 2.0, speed: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.mass = mass
        self.separation = separation
        self.speed = speed

    @property
    def name(self) -> str:
        return "binary"

    def bodies(self) -> List[Body]:
        half = self.separation / 2.0
        return [
            Body(self.mass, Vector3(half, 0.0, 0.0), Vector3(0.0, self.speed, 0.0)),
            Body(self.mass, Vector3(-half, 0.0, 0.0), Vector3(0.0, -self.speed, 0.0)),
        ]
