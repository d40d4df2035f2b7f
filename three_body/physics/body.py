"""Point-mass body and the pairwise gravity law."""

import math
from dataclasses import dataclass
from typing import Optional

from three_body.physics.vector import Vector3
from three_body.physics.integrators.base import Integrator
from three_body.physics.integrators.euler import SemiImplicitEulerIntegrator
from three_body.utils.config import ConfigError

_DEFAULT_INTEGRATOR = SemiImplicitEulerIntegrator()


@dataclass(frozen=True)
class Body:
    """Point mass with position and velocity.

    Bodies are never mutated: ``advance`` returns the body of the next step,
    so every force in a step is computed from the same pre-step values.
    """
    mass: float
    position: Vector3
    velocity: Vector3

    def __post_init__(self):
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ConfigError(f"Body mass must be a finite positive number, got {self.mass!r}")

    @property
    def momentum(self) -> Vector3:
        """Linear momentum: velocity * mass."""
        return self.velocity * self.mass

    def force_from(self, other: "Body", grav_const: float) -> Vector3:
        """Gravitational force exerted on this body by ``other``.

        Magnitude follows the inverse-square law G*m1*m2/r^2. The direction
        is the displacement normalized by its L1 length |dx|+|dy|+|dz|
        rather than by r. Coincident positions give the zero vector.

        Args:
            other: Attracting body
            grav_const: Gravitational constant

        Returns:
            Force vector pointing from this body toward ``other``
        """
        d = self.position - other.position
        r = d.norm()
        if r == 0:
            return Vector3.zero()

        f_g = grav_const * self.mass * other.mass / (r * r)
        l1 = d.l1_norm()
        return Vector3(
            -f_g * (d.x / l1),
            -f_g * (d.y / l1),
            -f_g * (d.z / l1),
        )

    def advance(self, net_force: Vector3, step: float, integrator: Optional[Integrator] = None) -> "Body":
        """Return the body after one time step under ``net_force``.

        Args:
            net_force: Net force acting on this body
            step: Time step
            integrator: Update scheme (semi-implicit Euler if None)
        """
        integrator = integrator or _DEFAULT_INTEGRATOR
        return integrator.advance(self, net_force, step)
