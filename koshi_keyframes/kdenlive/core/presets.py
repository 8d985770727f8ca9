"""Project format presets (frame rate + frame size)."""

from dataclasses import dataclass, replace
from typing import Dict, List

from .generator import GenerationSettings


@dataclass(frozen=True)
class Preset:
    name: str
    fps: int
    width: int
    height: int


PRESETS: Dict[str, Preset] = {
    p.name: p
    for p in (
        Preset("30fps 1080p", fps=30, width=1920, height=1080),
        Preset("60fps 1080p", fps=60, width=1920, height=1080),
        Preset("30fps 1080p Vertical", fps=30, width=1080, height=1920),
        Preset("60fps 1080p Vertical", fps=60, width=1080, height=1920),
    )
}


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def get_preset(name: str) -> Preset:
    """Get preset by name."""
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name!r}. Available: {list_presets()}")
    return PRESETS[name]


def apply_preset(settings: GenerationSettings, preset: Preset) -> GenerationSettings:
    """Return settings with the preset's fps and frame size on both endpoints."""
    return replace(
        settings,
        fps=preset.fps,
        start=replace(settings.start, width=preset.width, height=preset.height),
        end=replace(settings.end, width=preset.width, height=preset.height),
    )


__all__ = [
    "Preset",
    "PRESETS",
    "list_presets",
    "get_preset",
    "apply_preset",
]
