"""Equilateral-triangle (Lagrange) three-body preset."""

import math
from typing import List

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.presets.base import Preset


class LagrangePreset(Preset):
    """Three equal masses on an equilateral triangle in the xy plane.

    Each body starts tangentially with the Newtonian circular speed
    v = sqrt(G*m / (sqrt(3)*R)) for circumradius R.
    """

    def __init__(self, mass: float = 1.0, radius: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.mass = mass
        self.radius = radius

    @property
    def name(self) -> str:
        return "lagrange"

    def bodies(self) -> List[Body]:
        speed = math.sqrt(self.grav_const * self.mass / (math.sqrt(3.0) * self.radius)) if self.grav_const > 0 else 0.0
        bodies = []
        for k in range(3):
            angle = 2.0 * math.pi * k / 3.0
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            position = Vector3(self.radius * cos_a, self.radius * sin_a, 0.0)
            velocity = Vector3(-speed * sin_a, speed * cos_a, 0.0)
            bodies.append(Body(self.mass, position, velocity))
        return bodies
