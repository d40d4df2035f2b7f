"""Preset scenarios for small N-body systems."""

from typing import List

from three_body.presets.base import Preset
from three_body.presets.binary import BinaryPreset
from three_body.presets.figure_eight import FigureEightPreset
from three_body.presets.lagrange import LagrangePreset

PRESETS = {
    'binary': BinaryPreset,
    'figure_eight': FigureEightPreset,
    'lagrange': LagrangePreset,
}


def list_presets() -> List[str]:
    """Names accepted by ``get_preset``."""
    return list(PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "BinaryPreset",
    "FigureEightPreset",
    "LagrangePreset",
    "PRESETS",
    "list_presets",
    "get_preset",
]
