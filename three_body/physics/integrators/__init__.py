"""Numerical integrators for N-body simulations."""

from typing import Dict, Type

from three_body.physics.integrators.base import Integrator
from three_body.physics.integrators.euler import EulerIntegrator, SemiImplicitEulerIntegrator

INTEGRATORS: Dict[str, Type[Integrator]] = {
    'semi_implicit': SemiImplicitEulerIntegrator,
    'euler': EulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator instance by name.

    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "SemiImplicitEulerIntegrator",
    "EulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
