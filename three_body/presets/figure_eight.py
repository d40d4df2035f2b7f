"""Figure-eight three-body initial conditions."""

from typing import List

from three_body.physics.body import Body
from three_body.physics.vector import Vector3
from three_body.presets.base import Preset

# Chenciner-Montgomery choreography, unit masses, G = 1
_X1 = Vector3(0.97000436, -0.24308753, 0.0)
_V3 = Vector3(-0.93240737, -0.86473146, 0.0)


class FigureEightPreset(Preset):
    """Three unit masses started on the Chenciner-Montgomery figure eight.

    The initial state has zero total momentum. Under the L1-normalized force
    direction the bodies do not retrace the exact Newtonian choreography.
    """

    @property
    def name(self) -> str:
        return "figure_eight"

    def bodies(self) -> List[Body]:
        v_outer = _V3 * -0.5
        return [
            Body(1.0, _X1, v_outer),
            Body(1.0, -_X1, v_outer),
            Body(1.0, Vector3.zero(), _V3),
        ]
