"""Console text formatting for snapshots and diagnostics."""

from typing import Optional

from three_body.physics.vector import Vector3
from three_body.physics.universe import BodySnapshot, UniverseSnapshot


def _fmt(value: float, precision: Optional[int]) -> str:
    if precision is None:
        return f"{value}"
    return f"{value:.{precision}f}"


def format_vector(vector: Vector3, precision: Optional[int] = None) -> str:
    """Format as ``<x, y, z>``; full repr precision when ``precision`` is None."""
    return f"<{_fmt(vector.x, precision)}, {_fmt(vector.y, precision)}, {_fmt(vector.z, precision)}>"


def format_body(body: BodySnapshot, precision: Optional[int] = None) -> str:
    """Format as ``[<position> <momentum>]``."""
    return f"[{format_vector(body.position, precision)} {format_vector(body.momentum, precision)}]"


def format_snapshot(snapshot: UniverseSnapshot, precision: Optional[int] = None) -> str:
    """Format as ``time: {[<p> <m>] [<p> <m>] ...}``."""
    bodies = " ".join(format_body(b, precision) for b in snapshot.bodies)
    return f"{_fmt(snapshot.time, precision)}: {{{bodies}}}"


def format_diagnostics_header() -> str:
    header = f"{'Step':<8} {'Time':<12} {'K':<14} {'U':<14} {'E':<14} {'|P|':<12} {'dE/E0':<10}"
    return header + "\n" + "-" * len(header)


def format_diagnostics_row(step: int, time: float, K: float, U: float, E: float, momentum: float, E0: float) -> str:
    dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
    return f"{step:<8} {time:<12.4f} {K:<14.6f} {U:<14.6f} {E:<14.6f} {momentum:<12.3e} {dE:<10.4f}%"
