"""CLI main entry point."""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from three_body.physics.simulator import Simulator, steps_for_duration
from three_body.physics.universe import Universe
from three_body.physics.diagnostics import Diagnostics
from three_body.physics.integrators import INTEGRATORS
from three_body.physics.force_calculator import FORCE_METHODS
from three_body.presets import get_preset, list_presets
from three_body.io.console import format_snapshot, format_diagnostics_header, format_diagnostics_row
from three_body.utils.config import ConfigError, DEFAULT_STEPS, require_finite, load_config
from three_body.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_DT = 0.01


def build_universe(args) -> Tuple[Universe, float, int]:
    """Resolve the initial Universe, time step and step count from arguments.

    Command-line values override the configuration file.

    Raises:
        ConfigError: If the configuration or overrides are invalid
    """
    if args.config:
        config = load_config(args.config)
        overrides = {}
        if args.dt is not None:
            overrides['time_step'] = args.dt
        if args.grav_const is not None:
            overrides['grav_const'] = args.grav_const
        if args.integrator is not None:
            overrides['integrator'] = args.integrator
        if args.force_method is not None:
            overrides['force_method'] = args.force_method
        if args.steps is not None:
            overrides['steps'] = args.steps
            overrides['duration'] = None
        if args.duration is not None:
            overrides['duration'] = args.duration
            overrides['steps'] = None
        config = dataclasses.replace(config, **overrides)
        config.validate()
        return config.to_universe(), config.time_step, config.resolve_steps()

    dt = args.dt if args.dt is not None else DEFAULT_DT
    require_finite("time_step", dt)
    if dt <= 0:
        raise ConfigError(f"time_step must be positive, got {dt}")
    grav_const = args.grav_const if args.grav_const is not None else 1.0
    require_finite("grav_const", grav_const)
    preset = get_preset(
        args.preset,
        grav_const=grav_const,
        integrator=args.integrator or "semi_implicit",
        force_method=args.force_method or "pairwise",
    )
    if args.steps is not None:
        n_steps = args.steps
    elif args.duration is not None:
        require_finite("duration", args.duration)
        if args.duration < 0:
            raise ConfigError(f"duration must be non-negative, got {args.duration}")
        try:
            n_steps = steps_for_duration(args.duration, dt)
        except ValueError as e:
            raise ConfigError(str(e)) from e
    else:
        n_steps = DEFAULT_STEPS
    if n_steps < 0:
        raise ConfigError(f"steps must be non-negative, got {n_steps}")
    return preset.generate(), dt, n_steps


def run_simulation(args) -> int:
    """Run a simulation and print one line per emitted snapshot.

    Returns:
        Process exit status
    """
    try:
        universe, dt, n_steps = build_universe(args)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    sim = Simulator(universe, dt=dt)
    source = args.config or f"preset '{args.preset}'"
    logger.info(f"Running {n_steps} steps of dt={dt} for {universe.n_bodies} bodies from {source}")

    diagnostics = Diagnostics(universe.grav_const) if args.diagnostics else None
    E0 = None
    if diagnostics:
        print(format_diagnostics_header())

    for index, snapshot in enumerate(sim.iter_snapshots(n_steps)):
        if index % args.print_every != 0 and index != n_steps:
            continue
        if diagnostics:
            K, U, E = diagnostics.compute_energies(sim.universe)
            if E0 is None:
                E0 = E
            P = float(np.linalg.norm(diagnostics.total_momentum(sim.universe)))
            print(format_diagnostics_row(index, snapshot.time, K, U, E, P, E0))
        else:
            print(format_snapshot(snapshot, precision=args.precision))

    logger.info(f"Simulation complete at t={sim.time}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Three Body - small N-body gravity simulator")

    # Initial conditions
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--config', type=str, default=None,
                        help='YAML or JSON configuration file')
    source.add_argument('--preset', type=str, default='binary', choices=list_presets(),
                        help='Preset scenario (used when no --config is given)')

    # Run length
    length = parser.add_mutually_exclusive_group()
    length.add_argument('--steps', type=int, default=None,
                        help=f'Number of simulation steps (default: {DEFAULT_STEPS})')
    length.add_argument('--duration', type=float, default=None,
                        help='Simulated time to cover; runs floor(duration / dt) steps')

    # Physics
    parser.add_argument('--dt', type=float, default=None,
                        help=f'Time step (default: config time_step or {DEFAULT_DT})')
    parser.add_argument('--grav-const', type=float, default=None,
                        help='Gravitational constant (default: config value or 1.0)')
    parser.add_argument('--integrator', type=str, default=None, choices=list(INTEGRATORS.keys()),
                        help='Update ordering (default: semi_implicit)')
    parser.add_argument('--force-method', type=str, default=None, choices=list(FORCE_METHODS),
                        help='Force field evaluation (default: pairwise)')

    # Output
    parser.add_argument('--print-every', type=int, default=1,
                        help='Print every N steps (the initial and final states are always printed)')
    parser.add_argument('--precision', type=int, default=None,
                        help='Decimal places in snapshot output (default: full precision)')
    parser.add_argument('--diagnostics', action='store_true',
                        help='Print an energy/momentum table instead of body states')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.print_every < 1:
        parser.error("--print-every must be at least 1")

    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return 0

    return run_simulation(args)


if __name__ == '__main__':
    sys.exit(main())
