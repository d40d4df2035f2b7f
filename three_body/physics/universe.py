"""Universe: the complete simulated system and its time stepping."""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.physics.integrators.base import Integrator
from three_body.physics.integrators.euler import SemiImplicitEulerIntegrator
from three_body.physics.force_calculator import GravityForceProvider, FORCE_METHODS
from three_body.utils.config import ConfigError


@dataclass(frozen=True)
class BodySnapshot:
    """Read-only view of one body for presentation."""
    position: Vector3
    momentum: Vector3


@dataclass(frozen=True)
class UniverseSnapshot:
    """Read-only view of a Universe at one instant."""
    time: float
    bodies: Tuple[BodySnapshot, ...]

    def positions(self) -> np.ndarray:
        """Positions as an (n, 3) array."""
        return np.array([b.position.as_tuple() for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def momenta(self) -> np.ndarray:
        """Momenta as an (n, 3) array."""
        return np.array([b.momentum.as_tuple() for b in self.bodies], dtype=np.float64).reshape(-1, 3)


@dataclass(frozen=True)
class Universe:
    """Gravitational constant, elapsed time and an ordered set of bodies.

    ``step`` never mutates: it returns a new Universe whose bodies were all
    advanced with forces evaluated on this snapshot. The integrator and
    force method are copied into every successor, so one run keeps a single
    update ordering from start to finish.
    """
    grav_const: float
    bodies: Tuple[Body, ...]
    time: float = 0.0
    integrator: Integrator = field(default_factory=SemiImplicitEulerIntegrator)
    force_method: str = "pairwise"

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, 'bodies', tuple(self.bodies))
        for index, body in enumerate(self.bodies):
            if not isinstance(body, Body):
                raise ConfigError(f"Body {index} is not a Body instance: {body!r}")
        if self.force_method not in FORCE_METHODS:
            raise ConfigError(f"Unknown force method: {self.force_method}. Available: {list(FORCE_METHODS)}")

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    def force_field(self) -> List[Vector3]:
        """Net gravitational force on each body, indexed parallel to ``bodies``."""
        provider = GravityForceProvider(self.grav_const, self.force_method)
        return provider.compute_external_forces(self.bodies)

    def step(self, dt: float) -> "Universe":
        """Advance every body by one synchronized time step.

        Args:
            dt: Time step

        Returns:
            New Universe at ``time + dt``
        """
        forces = self.force_field()
        new_bodies = tuple(
            body.advance(force, dt, self.integrator)
            for body, force in zip(self.bodies, forces)
        )
        return Universe(
            grav_const=self.grav_const,
            bodies=new_bodies,
            time=self.time + dt,
            integrator=self.integrator,
            force_method=self.force_method,
        )

    def snapshot(self) -> UniverseSnapshot:
        """Read-only state for presentation: time, positions and momenta."""
        return UniverseSnapshot(
            time=self.time,
            bodies=tuple(BodySnapshot(b.position, b.momentum) for b in self.bodies),
        )
