"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List

from three_body.physics.body import Body
from three_body.physics.universe import Universe
from three_body.physics.integrators import get_integrator


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, grav_const: float = 1.0, integrator: str = "semi_implicit", force_method: str = "pairwise"):
        """Initialize preset.

        Args:
            grav_const: Gravitational constant
            integrator: Integrator name for the generated Universe
            force_method: Force method for the generated Universe
        """
        self.grav_const = grav_const
        self.integrator = integrator
        self.force_method = force_method

    @abstractmethod
    def bodies(self) -> List[Body]:
        """Return the initial bodies."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    def generate(self) -> Universe:
        """Generate the initial Universe (time 0.0)."""
        return Universe(
            grav_const=self.grav_const,
            bodies=self.bodies(),
            integrator=get_integrator(self.integrator),
            force_method=self.force_method,
        )
