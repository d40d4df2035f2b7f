"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple

from three_body.physics.universe import Universe


def state_arrays(universe: Universe) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Universe state as numpy arrays.

    Returns:
        Tuple of (positions (n, 3), velocities (n, 3), masses (n,))
    """
    positions = np.array([b.position.as_tuple() for b in universe.bodies], dtype=np.float64).reshape(-1, 3)
    velocities = np.array([b.velocity.as_tuple() for b in universe.bodies], dtype=np.float64).reshape(-1, 3)
    masses = np.array([b.mass for b in universe.bodies], dtype=np.float64)
    return positions, velocities, masses


class Diagnostics:
    """Conserved-quantity diagnostics.

    The potential is the Newtonian -G*m_i*m_j/r. Because the force direction
    is L1-normalized it is not exactly the gradient of this potential, so
    total energy drifts even for tiny steps; it remains useful as a
    qualitative stability monitor. Linear momentum is conserved exactly up
    to rounding since each pair force is antisymmetric.
    """

    def __init__(self, grav_const: float = 1.0):
        """Initialize diagnostics.

        Args:
            grav_const: Gravitational constant (must match the Universe)
        """
        self.grav_const = grav_const

    def compute_energies(self, universe: Universe) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * sum_{i<j} m_i * m_j / r_ij, with coincident pairs skipped.

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions, velocities, masses = state_arrays(universe)
        n = len(masses)

        # Kinetic energy: K = 0.5 * sum m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(positions[i] - positions[j])
                if r == 0:
                    continue
                U -= self.grav_const * masses[i] * masses[j] / r

        return float(K), float(U), float(K + U)

    def total_momentum(self, universe: Universe) -> np.ndarray:
        """Total linear momentum sum m_i * v_i, shape (3,)."""
        _, velocities, masses = state_arrays(universe)
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def angular_momentum(self, universe: Universe) -> np.ndarray:
        """Total angular momentum about the origin, sum m_i * (r_i x v_i), shape (3,)."""
        positions, velocities, masses = state_arrays(universe)
        return np.sum(masses[:, np.newaxis] * np.cross(positions, velocities), axis=0)

    def center_of_mass(self, universe: Universe) -> np.ndarray:
        """Mass-weighted mean position, shape (3,)."""
        positions, _, masses = state_arrays(universe)
        total_mass = np.sum(masses)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
