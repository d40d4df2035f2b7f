"""Force field computation and the external-force capability boundary.

Two interchangeable methods evaluate the same pairwise law (inverse-square
magnitude, L1-normalized direction, zero force for coincident bodies):

- ``pairwise``: loops over ``Body.force_from`` for every ordered pair i != j.
- ``vectorized``: the same law with NumPy broadcasting over all pairs.

Both are O(n^2); no tree or mesh approximation is used since the target
systems hold a handful of bodies.
"""

from abc import ABC, abstractmethod
from typing import List, Literal, Sequence

import numpy as np

from three_body.physics.vector import Vector3

ForceMethod = Literal["pairwise", "vectorized"]
FORCE_METHODS = ("pairwise", "vectorized")


def pairwise_forces(bodies: Sequence, grav_const: float) -> List[Vector3]:
    """Net force on each body, summed over every other body.

    The self-term is skipped rather than computed, so the coincident-body
    branch never fires for a body acting on itself.
    """
    forces = []
    for i, body in enumerate(bodies):
        total = Vector3.zero()
        for j, other in enumerate(bodies):
            if i == j:
                continue
            total = total + body.force_from(other, grav_const)
        forces.append(total)
    return forces


def vectorized_forces(bodies: Sequence, grav_const: float) -> List[Vector3]:
    """Vectorized net forces (same law as ``pairwise_forces``)."""
    n = len(bodies)
    if n == 0:
        return []

    positions = np.array([b.position.as_tuple() for b in bodies], dtype=np.float64)
    masses = np.array([b.mass for b in bodies], dtype=np.float64)

    # d_ij = r_i - r_j: displacement from body j to body i
    r_diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    r_sq = np.sum(r_diff ** 2, axis=2)
    l1 = np.sum(np.abs(r_diff), axis=2)

    # Self-pairs and coincident pairs contribute nothing
    active = (r_sq > 0) & ~np.eye(n, dtype=bool)
    safe_r_sq = np.where(active, r_sq, 1.0)
    safe_l1 = np.where(active, l1, 1.0)

    force_mag = grav_const * masses[:, np.newaxis] * masses[np.newaxis, :] / safe_r_sq
    force_mag = np.where(active, force_mag, 0.0)

    force_vectors = -force_mag[:, :, np.newaxis] * (r_diff / safe_l1[:, :, np.newaxis])
    totals = np.sum(force_vectors, axis=1)
    return [Vector3.from_sequence(row) for row in totals]


class ForceCalculator:
    """Force field evaluation with a selectable method."""

    def __init__(self, method: ForceMethod = "pairwise"):
        """Initialize force calculator.

        Args:
            method: 'pairwise' or 'vectorized'

        Raises:
            ValueError: If the method is unknown
        """
        if method not in FORCE_METHODS:
            raise ValueError(f"Unknown force method: {method}. Available: {list(FORCE_METHODS)}")
        self.method = method

    def compute_forces(self, bodies: Sequence, grav_const: float) -> List[Vector3]:
        """Compute the net force on each body, indexed parallel to ``bodies``."""
        if self.method == "vectorized":
            return vectorized_forces(bodies, grav_const)
        return pairwise_forces(bodies, grav_const)


class ExternalForceProvider(ABC):
    """Capability boundary for integration backends.

    A backend that owns positional integration and contact handling (for
    example a rigid-body engine) asks the provider for the per-tick external
    force on each of its bodies, keeping the gravity law in one place.
    """

    @abstractmethod
    def compute_external_forces(self, bodies: Sequence) -> List[Vector3]:
        """Return one force per body, in the same order as ``bodies``."""
        pass


class GravityForceProvider(ExternalForceProvider):
    """Mutual gravity as an external force source."""

    def __init__(self, grav_const: float, method: ForceMethod = "pairwise"):
        self.grav_const = grav_const
        self.calculator = ForceCalculator(method)

    def compute_external_forces(self, bodies: Sequence) -> List[Vector3]:
        return self.calculator.compute_forces(bodies, self.grav_const)
