"""Configuration management."""

import json
import logging
import math
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 1000


class ConfigError(ValueError):
    """Raised when a configuration or initial body state is invalid."""


@dataclass
class BodyConfig:
    """Initial state of one body."""
    mass: float
    position: List[float]
    velocity: List[float]


@dataclass
class SimulationConfig:
    """Simulation configuration."""
    grav_const: float = 1.0
    time_step: float = 0.01
    bodies: List[BodyConfig] = field(default_factory=list)

    # Run length: at most one of these is set
    steps: Optional[int] = None
    duration: Optional[float] = None

    integrator: str = "semi_implicit"
    force_method: str = "pairwise"

    def validate(self):
        """Check every field; raise ConfigError on the first problem."""
        from three_body.physics.integrators import INTEGRATORS
        from three_body.physics.force_calculator import FORCE_METHODS

        require_finite("grav_const", self.grav_const)
        require_finite("time_step", self.time_step)
        if self.time_step <= 0:
            raise ConfigError(f"time_step must be positive, got {self.time_step}")
        if self.steps is not None and self.duration is not None:
            raise ConfigError("Specify either steps or duration, not both")
        if self.steps is not None and (not isinstance(self.steps, int) or self.steps < 0):
            raise ConfigError(f"steps must be a non-negative integer, got {self.steps!r}")
        if self.duration is not None:
            require_finite("duration", self.duration)
            if self.duration < 0:
                raise ConfigError(f"duration must be non-negative, got {self.duration}")
        if self.integrator not in INTEGRATORS:
            raise ConfigError(f"Unknown integrator: {self.integrator}. Available: {list(INTEGRATORS.keys())}")
        if self.force_method not in FORCE_METHODS:
            raise ConfigError(f"Unknown force method: {self.force_method}. Available: {list(FORCE_METHODS)}")
        if not self.bodies:
            raise ConfigError("At least one body is required")
        for index, body in enumerate(self.bodies):
            require_finite(f"bodies[{index}].mass", body.mass)
            if body.mass <= 0:
                raise ConfigError(f"bodies[{index}].mass must be positive, got {body.mass}")
            for name in ("position", "velocity"):
                values = getattr(body, name)
                if len(values) != 3:
                    raise ConfigError(f"bodies[{index}].{name} must have 3 components")
                for value in values:
                    require_finite(f"bodies[{index}].{name}", value)

    def resolve_steps(self) -> int:
        """Step count: ``steps`` if set, else floor(duration / time_step), else DEFAULT_STEPS."""
        if self.steps is not None:
            return self.steps
        if self.duration is not None:
            from three_body.physics.simulator import steps_for_duration

            try:
                return steps_for_duration(self.duration, self.time_step)
            except ValueError as e:
                raise ConfigError(str(e)) from e
        return DEFAULT_STEPS

    def to_universe(self):
        """Build the initial Universe (time 0.0)."""
        from three_body.physics.vector import Vector3
        from three_body.physics.body import Body
        from three_body.physics.universe import Universe
        from three_body.physics.integrators import get_integrator

        self.validate()
        bodies = [
            Body(
                mass=b.mass,
                position=Vector3.from_sequence(b.position),
                velocity=Vector3.from_sequence(b.velocity),
            )
            for b in self.bodies
        ]
        return Universe(
            grav_const=self.grav_const,
            bodies=bodies,
            integrator=get_integrator(self.integrator),
            force_method=self.force_method,
        )


def require_finite(name: str, value: Any):
    """Raise ConfigError unless ``value`` is a finite int or float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigError(f"{name} must be a finite number, got {value!r}")


def _parse_number(name: str, value: Any) -> float:
    require_finite(name, value)
    return float(value)


def _parse_vector(name: str, data: Any) -> List[float]:
    """Accept ``{x, y, z}`` mappings (config files) or 3-item sequences."""
    if isinstance(data, Mapping):
        from three_body.physics.vector import Vector3

        missing = [axis for axis in ("x", "y", "z") if axis not in data]
        if missing:
            raise ConfigError(f"{name} is missing component(s): {', '.join(missing)}")
        checked = {axis: _parse_number(f"{name}.{axis}", data[axis]) for axis in ("x", "y", "z")}
        return list(Vector3.from_mapping(checked).as_tuple())
    if isinstance(data, (list, tuple)) and len(data) == 3:
        return [_parse_number(name, value) for value in data]
    raise ConfigError(f"{name} must be a mapping with x, y, z, got {data!r}")


def _parse_body(index: int, data: Any) -> BodyConfig:
    if not isinstance(data, Mapping):
        raise ConfigError(f"bodies[{index}] must be a mapping, got {data!r}")
    for key in ("mass", "position", "velocity"):
        if key not in data:
            raise ConfigError(f"bodies[{index}] is missing '{key}'")
    # Extra keys (e.g. color) belong to presentation and are ignored
    return BodyConfig(
        mass=_parse_number(f"bodies[{index}].mass", data["mass"]),
        position=_parse_vector(f"bodies[{index}].position", data["position"]),
        velocity=_parse_vector(f"bodies[{index}].velocity", data["velocity"]),
    )


def config_from_dict(data: Any) -> SimulationConfig:
    """Build and validate a SimulationConfig from parsed YAML/JSON data.

    Both the flat layout and the nested ``universe: {grav_const, bodies}``
    layout are accepted; top-level keys take precedence over ``universe`` ones.

    Raises:
        ConfigError: If the data is malformed or invalid
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    data = dict(data)
    universe = data.pop("universe", None)
    if universe is not None:
        if not isinstance(universe, Mapping):
            raise ConfigError("'universe' must be a mapping")
        for key, value in universe.items():
            data.setdefault(key, value)

    if "grav_const" not in data:
        raise ConfigError("Missing required key 'grav_const'")
    bodies = data.get("bodies")
    if not isinstance(bodies, list):
        raise ConfigError("'bodies' must be a list")

    steps = data.get("steps")
    if steps is not None and (isinstance(steps, bool) or not isinstance(steps, int)):
        raise ConfigError(f"steps must be an integer, got {steps!r}")
    duration = data.get("duration")

    config = SimulationConfig(
        grav_const=_parse_number("grav_const", data["grav_const"]),
        time_step=_parse_number("time_step", data.get("time_step", SimulationConfig.time_step)),
        bodies=[_parse_body(i, b) for i, b in enumerate(bodies)],
        steps=steps,
        duration=None if duration is None else _parse_number("duration", duration),
        integrator=str(data.get("integrator", SimulationConfig.integrator)),
        force_method=str(data.get("force_method", SimulationConfig.force_method)),
    )
    config.validate()
    return config


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Validated SimulationConfig

    Raises:
        ConfigError: If the file cannot be parsed or is invalid
    """
    config_path = Path(config_path)
    logger.info(f"Loading configuration from: {config_path}")

    try:
        with open(config_path, 'r') as f:
            if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration '{config_path}': {e}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot parse configuration '{config_path}': {e}") from e

    config = config_from_dict(data)
    logger.debug(f"Loaded {len(config.bodies)} bodies, G={config.grav_const}, dt={config.time_step}")
    return config


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Vectors are written as ``{x, y, z}`` mappings so the file loads back.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data: Dict[str, Any] = asdict(config)
    data["bodies"] = [
        {
            "mass": b.mass,
            "position": dict(zip(("x", "y", "z"), b.position)),
            "velocity": dict(zip(("x", "y", "z"), b.velocity)),
        }
        for b in config.bodies
    ]
    for key in ("steps", "duration"):
        if data[key] is None:
            del data[key]

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
