"""Tests for configuration loading and validation."""

import json
import os
import tempfile

import pytest

from three_body.physics.vector import Vector3
from three_body.physics.force_calculator import FORCE_METHODS
from three_body.physics.integrators import INTEGRATORS, EulerIntegrator, SemiImplicitEulerIntegrator
from three_body.utils.config import (
    BodyConfig,
    ConfigError,
    DEFAULT_STEPS,
    SimulationConfig,
    config_from_dict,
    load_config,
    save_config,
)


FLAT_YAML = """
grav_const: 1.0
time_step: 0.1
duration: 1.0
bodies:
  - mass: 1.0
    position: {x: 1.0, y: 0.0, z: 0.0}
    velocity: {x: 0.0, y: 1.0, z: 0.0}
  - mass: 1.0
    position: {x: -1.0, y: 0.0, z: 0.0}
    velocity: {x: 0.0, y: -1.0, z: 0.0}
"""

NESTED_YAML = """
time_step: 0.01
steps: 25
integrator: euler
universe:
  grav_const: 6.5
  bodies:
    - mass: 2
      position: {x: 0, y: 0, z: 0}
      velocity: {x: 0, y: 0, z: 0}
      color: {r: 255, g: 0, b: 0}
"""


def _write_temp(content: str, suffix: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


def _valid_dict():
    return {
        'grav_const': 1.0,
        'time_step': 0.1,
        'bodies': [
            {'mass': 1.0, 'position': {'x': 1.0, 'y': 0.0, 'z': 0.0},
             'velocity': {'x': 0.0, 'y': 1.0, 'z': 0.0}},
        ],
    }


def test_load_flat_yaml():
    """Flat YAML layout loads into a Universe and step count."""
    temp_path = _write_temp(FLAT_YAML, '.yaml')
    try:
        config = load_config(temp_path)

        assert config.grav_const == 1.0
        assert config.time_step == 0.1
        assert config.resolve_steps() == 10
        universe = config.to_universe()
        assert universe.n_bodies == 2
        assert universe.time == 0.0
        assert universe.bodies[1].position == Vector3(-1.0, 0.0, 0.0)
        assert isinstance(universe.integrator, SemiImplicitEulerIntegrator)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_load_nested_yaml():
    """Nested universe layout loads; extra body keys are ignored."""
    temp_path = _write_temp(NESTED_YAML, '.yml')
    try:
        config = load_config(temp_path)

        assert config.grav_const == 6.5
        assert config.resolve_steps() == 25
        assert config.bodies[0].mass == 2.0
        assert isinstance(config.to_universe().integrator, EulerIntegrator)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_load_json():
    """JSON files load with the same schema."""
    temp_path = _write_temp(json.dumps(_valid_dict()), '.json')
    try:
        config = load_config(temp_path)
        assert config.resolve_steps() == DEFAULT_STEPS
        assert config.bodies[0].velocity == [0.0, 1.0, 0.0]
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_save_and_reload():
    """A saved configuration loads back unchanged."""
    config = SimulationConfig(
        grav_const=2.0,
        time_step=0.05,
        bodies=[BodyConfig(1.5, [1.0, 2.0, 3.0], [0.0, -1.0, 0.5])],
        duration=2.0,
        force_method="vectorized",
    )
    for suffix in ('.yaml', '.json'):
        with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as f:
            temp_path = f.name
        try:
            save_config(config, temp_path)
            assert load_config(temp_path) == config
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)


@pytest.mark.parametrize("mass", [0.0, -1.0, "heavy", None])
def test_invalid_mass_rejected(mass):
    """Non-positive or non-numeric mass is a configuration error."""
    data = _valid_dict()
    data['bodies'][0]['mass'] = mass
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_malformed_configs_rejected():
    """Structural problems raise ConfigError."""
    cases = []

    missing_component = _valid_dict()
    del missing_component['bodies'][0]['position']['z']
    cases.append(missing_component)

    missing_velocity = _valid_dict()
    del missing_velocity['bodies'][0]['velocity']
    cases.append(missing_velocity)

    no_grav = _valid_dict()
    del no_grav['grav_const']
    cases.append(no_grav)

    both_lengths = _valid_dict()
    both_lengths.update(steps=10, duration=1.0)
    cases.append(both_lengths)

    bad_dt = _valid_dict()
    bad_dt['time_step'] = 0.0
    cases.append(bad_dt)

    bad_integrator = _valid_dict()
    bad_integrator['integrator'] = 'rk4'
    cases.append(bad_integrator)

    no_bodies = _valid_dict()
    no_bodies['bodies'] = []
    cases.append(no_bodies)

    cases.append(['not', 'a', 'mapping'])

    for data in cases:
        with pytest.raises(ConfigError):
            config_from_dict(data)


def test_integer_vector_components_become_floats():
    """Mapping vectors are read through Vector3, so integer components come back as floats."""
    data = _valid_dict()
    data['bodies'][0]['position'] = {'x': 1, 'y': 2, 'z': 3, 'w': 9}
    config = config_from_dict(data)
    position = config.bodies[0].position
    assert position == [1.0, 2.0, 3.0]
    assert all(isinstance(value, float) for value in position)


def test_names_follow_registries():
    """Every registered integrator and force method is accepted by validation."""
    for name in INTEGRATORS:
        data = _valid_dict()
        data['integrator'] = name
        assert config_from_dict(data).integrator == name
    for method in FORCE_METHODS:
        data = _valid_dict()
        data['force_method'] = method
        assert config_from_dict(data).force_method == method


def test_unrepresentable_step_count_rejected():
    """A duration whose step count overflows is a configuration error."""
    data = _valid_dict()
    data.update(time_step=1e-10, duration=1e308)
    config = config_from_dict(data)
    with pytest.raises(ConfigError):
        config.resolve_steps()


def test_unreadable_files_rejected():
    """Missing files and broken YAML raise ConfigError."""
    with pytest.raises(ConfigError):
        load_config("/nonexistent/three_body_config.yaml")

    temp_path = _write_temp("grav_const: [1.0\n", '.yaml')
    try:
        with pytest.raises(ConfigError):
            load_config(temp_path)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)
