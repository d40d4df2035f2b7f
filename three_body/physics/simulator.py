"""Main simulator controller."""

import logging
import math
import time
from typing import Callable, Iterator, List, Optional

from three_body.physics.universe import Universe, UniverseSnapshot

logger = logging.getLogger(__name__)

# Ratios this close to an integer count as that integer (1.0 / 0.1, 0.3 / 0.1)
_STEP_RATIO_TOLERANCE = 1e-9


def steps_for_duration(duration: float, dt: float) -> int:
    """Number of steps needed to cover ``duration``: floor(duration / dt).

    Args:
        duration: Total simulated time (>= 0)
        dt: Time step (> 0)

    Raises:
        ValueError: If dt is not a positive finite number or duration is
            negative or not finite
    """
    if not math.isfinite(dt) or dt <= 0:
        raise ValueError(f"Time step must be a positive finite number, got {dt}")
    if not math.isfinite(duration):
        raise ValueError(f"Duration must be finite, got {duration}")
    if duration < 0:
        raise ValueError(f"Duration must be non-negative, got {duration}")
    ratio = duration / dt
    if not math.isfinite(ratio):
        raise ValueError(f"Duration {duration} with time step {dt} needs too many steps")
    nearest = round(ratio)
    if abs(ratio - nearest) <= _STEP_RATIO_TOLERANCE * max(1.0, abs(ratio)):
        return int(nearest)
    return int(math.floor(ratio))


class Simulator:
    """Main simulation controller.

    Owns the current Universe snapshot and replaces it with the next one on
    every step. Steps run strictly in sequence; nothing is skipped or
    reordered.
    """

    def __init__(self, universe: Universe, dt: float = 0.01):
        """Initialize simulator.

        Args:
            universe: Initial Universe (time is usually 0.0)
            dt: Time step (positive and finite)
        """
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError(f"Time step must be a positive finite number, got {dt}")
        self.universe = universe
        self.dt = dt
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._last_step_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

    @property
    def time(self) -> float:
        return self.universe.time

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms."""
        return {"step_ms": self._last_step_ms}

    def step(self) -> UniverseSnapshot:
        """Perform one simulation step and return the new snapshot.

        The new Universe is stored before the step callback runs, so a
        failing callback leaves the computed state intact.
        """
        if self._profile:
            t0 = time.perf_counter()
        self.universe = self.universe.step(self.dt)
        self.step_count += 1
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        if self.on_step_callback:
            self.on_step_callback(self)
        return self.universe.snapshot()

    def iter_snapshots(self, n_steps: int) -> Iterator[UniverseSnapshot]:
        """Yield the current snapshot, then one snapshot after each of ``n_steps`` steps."""
        if n_steps < 0:
            raise ValueError(f"Step count must be non-negative, got {n_steps}")
        logger.debug("Running %d steps of dt=%g over %d bodies", n_steps, self.dt, self.universe.n_bodies)
        yield self.universe.snapshot()
        for _ in range(n_steps):
            yield self.step()

    def run(self, n_steps: int) -> List[UniverseSnapshot]:
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run

        Returns:
            ``n_steps + 1`` snapshots, starting with the pre-step state
        """
        return list(self.iter_snapshots(n_steps))

    def run_for(self, duration: float) -> List[UniverseSnapshot]:
        """Run floor(duration / dt) steps; see ``run``."""
        return self.run(steps_for_duration(duration, self.dt))

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count), arrays as numpy
        """
        from three_body.physics.diagnostics import state_arrays

        positions, velocities, masses = state_arrays(self.universe)
        return positions, velocities, masses, self.time, self.step_count

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        from three_body.physics.diagnostics import Diagnostics

        return Diagnostics(self.universe.grav_const).compute_energies(self.universe)[2]
