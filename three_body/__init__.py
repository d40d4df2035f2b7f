"""
Three Body - a small classical N-body gravity simulator.

Features:
- Immutable Vector3 / Body / Universe snapshots, one new Universe per step
- Semi-implicit and explicit Euler integrators
- Pairwise and NumPy-vectorized force fields
- Preset scenarios (binary, figure eight, Lagrange triangle)
- YAML/JSON configuration and a console CLI
"""

__version__ = "0.1.0"

from three_body.physics.vector import Vector3
from three_body.physics.body import Body
from three_body.physics.universe import Universe
from three_body.physics.simulator import Simulator

__all__ = [
    "Vector3",
    "Body",
    "Universe",
    "Simulator",
]
