"""Utility functions for configuration and logging."""

from three_body.utils.config import (
    ConfigError,
    BodyConfig,
    SimulationConfig,
    config_from_dict,
    load_config,
    save_config,
)
from three_body.utils.logging_config import setup_logging

__all__ = [
    "ConfigError",
    "BodyConfig",
    "SimulationConfig",
    "config_from_dict",
    "load_config",
    "save_config",
    "setup_logging",
]
