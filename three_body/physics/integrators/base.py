"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod


class Integrator(ABC):
    """Abstract interface for single-body kinematic updates.

    An integrator turns a body, the net force acting on it and a time step
    into the body of the next step. A Universe keeps one integrator for its
    whole run so the update ordering never changes between steps.
    """

    @abstractmethod
    def advance(self, body, net_force, dt: float):
        """Perform one integration step for a single body.

        Args:
            body: Current body (left untouched)
            net_force: Net force on the body as a Vector3
            dt: Time step

        Returns:
            New Body with unchanged mass
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
