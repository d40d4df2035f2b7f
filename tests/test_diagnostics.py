"""Tests for conserved-quantity diagnostics."""

import numpy as np
import pytest

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.physics.universe import Universe
from three_body.physics.simulator import Simulator
from three_body.physics.diagnostics import Diagnostics, state_arrays
from three_body.presets import BinaryPreset


def test_binary_energies():
    """Kinetic, potential and total energy of the symmetric pair."""
    universe = BinaryPreset().generate()
    K, U, E = Diagnostics(universe.grav_const).compute_energies(universe)

    assert K == pytest.approx(1.0)
    assert U == pytest.approx(-0.5)
    assert E == pytest.approx(0.5)
    assert Simulator(universe, dt=0.01).get_energy() == pytest.approx(0.5)


def test_potential_skips_coincident_pairs():
    """Coincident bodies add nothing to the potential."""
    universe = Universe(
        grav_const=1.0,
        bodies=[Body(1.0, Vector3.zero(), Vector3.zero()),
                Body(1.0, Vector3.zero(), Vector3.zero())],
    )
    K, U, E = Diagnostics(1.0).compute_energies(universe)
    assert (K, U, E) == (0.0, 0.0, 0.0)


def test_momentum_and_angular_momentum():
    """Momentum, angular momentum and centre of mass of the symmetric pair."""
    universe = BinaryPreset().generate()
    diagnostics = Diagnostics(universe.grav_const)

    assert np.allclose(diagnostics.total_momentum(universe), 0.0)
    assert np.allclose(diagnostics.angular_momentum(universe), [0.0, 0.0, 2.0])
    assert np.allclose(diagnostics.center_of_mass(universe), 0.0)


def test_momentum_conserved_over_run():
    """Pair forces cancel, so total momentum stays constant."""
    universe = Universe(
        grav_const=1.0,
        bodies=[
            Body(3.0, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.1, 0.0)),
            Body(1.0, Vector3(2.0, 1.0, -0.5), Vector3(-0.2, 0.4, 0.0)),
            Body(0.5, Vector3(-1.5, 3.0, 1.0), Vector3(0.3, 0.0, -0.1)),
        ],
    )
    diagnostics = Diagnostics(universe.grav_const)
    p0 = diagnostics.total_momentum(universe)

    sim = Simulator(universe, dt=0.001)
    sim.run(500)

    assert np.allclose(diagnostics.total_momentum(sim.universe), p0, atol=1e-10)


def test_state_arrays():
    """State arrays follow body order."""
    universe = BinaryPreset(mass=2.0).generate()
    positions, velocities, masses = state_arrays(universe)

    assert np.allclose(positions, [[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
    assert np.allclose(velocities, [[0.0, 1.0, 0.0], [0.0, -1.0, 0.0]])
    assert np.allclose(masses, [2.0, 2.0])
