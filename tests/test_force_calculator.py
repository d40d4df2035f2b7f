"""Tests for force field methods and the external-force boundary."""

import warnings

import numpy as np
import pytest

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.physics.universe import Universe
from three_body.physics.force_calculator import (
    ExternalForceProvider,
    ForceCalculator,
    GravityForceProvider,
    pairwise_forces,
    vectorized_forces,
)


BODIES = [
    Body(3.0, Vector3(0.0, 0.0, 0.0), Vector3.zero()),
    Body(1.0, Vector3(2.0, 1.0, -0.5), Vector3.zero()),
    Body(0.5, Vector3(-1.5, 3.0, 1.0), Vector3.zero()),
    Body(2.0, Vector3(0.3, -2.2, 0.7), Vector3.zero()),
]


def test_pairwise_and_vectorized_agree():
    """Both methods evaluate the same law."""
    for g in [1.0, 0.5, 6.674e-11]:
        pairwise = pairwise_forces(BODIES, g)
        vectorized = vectorized_forces(BODIES, g)
        assert len(vectorized) == len(BODIES)
        for f_p, f_v in zip(pairwise, vectorized):
            assert np.allclose(f_p.to_array(), f_v.to_array(), rtol=1e-12, atol=1e-12 * g)


def test_vectorized_coincident_bodies():
    """Coincident bodies contribute zero force without numpy warnings."""
    bodies = [
        Body(1.0, Vector3(1.0, 1.0, 1.0), Vector3.zero()),
        Body(2.0, Vector3(1.0, 1.0, 1.0), Vector3.zero()),
    ]
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        forces = vectorized_forces(bodies, 1.0)

    assert forces == [Vector3.zero(), Vector3.zero()]
    assert pairwise_forces(bodies, 1.0) == [Vector3.zero(), Vector3.zero()]


def test_empty_and_single_body():
    """No bodies give no forces; a lone body feels nothing."""
    assert vectorized_forces([], 1.0) == []
    assert pairwise_forces([], 1.0) == []

    lone = [Body(1.0, Vector3(1.0, 2.0, 3.0), Vector3.zero())]
    assert pairwise_forces(lone, 1.0) == [Vector3.zero()]
    assert vectorized_forces(lone, 1.0) == [Vector3.zero()]


def test_force_calculator_methods():
    """ForceCalculator dispatches by method name."""
    assert ForceCalculator().method == "pairwise"
    assert ForceCalculator("pairwise").compute_forces(BODIES, 1.0) == pairwise_forces(BODIES, 1.0)
    assert ForceCalculator("vectorized").compute_forces(BODIES, 1.0) == vectorized_forces(BODIES, 1.0)

    with pytest.raises(ValueError):
        ForceCalculator("barnes_hut")


def test_gravity_force_provider():
    """The provider exposes the Universe force field to external backends."""
    universe = Universe(grav_const=2.0, bodies=BODIES)
    provider = GravityForceProvider(universe.grav_const)

    assert isinstance(provider, ExternalForceProvider)
    assert provider.compute_external_forces(universe.bodies) == universe.force_field()
