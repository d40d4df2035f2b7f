"""Euler integrators (first order)."""

from dataclasses import dataclass, replace

from three_body.physics.integrators.base import Integrator


@dataclass(frozen=True)
class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler.

    v_new = v + (F/m)*dt, then r_new = r + v_new*dt. Default integrator.
    """

    @property
    def name(self) -> str:
        return "semi_implicit"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body, net_force, dt: float):
        acceleration = net_force / body.mass
        new_velocity = body.velocity + acceleration * dt
        new_position = body.position + new_velocity * dt
        return replace(body, position=new_position, velocity=new_velocity)


@dataclass(frozen=True)
class EulerIntegrator(Integrator):
    """Explicit Euler: v_new = v + (F/m)*dt, r_new = r + v*dt.

    The position moves with the velocity from before this step's force was
    applied, so it trails the velocity update by one tick.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body, net_force, dt: float):
        acceleration = net_force / body.mass
        new_velocity = body.velocity + acceleration * dt
        new_position = body.position + body.velocity * dt
        return replace(body, position=new_position, velocity=new_velocity)
