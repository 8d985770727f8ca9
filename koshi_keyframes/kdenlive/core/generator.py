"""Frame-by-frame keyframe generation between two endpoint states."""

import logging
from dataclasses import dataclass, field, replace
from typing import List

from .easing import DEFAULT_EASING, EasingFunc, resolve_curve
from .exceptions import InvalidRange
from .interpolation import lerp
from .keyframe import (
    RECT_TYPE,
    ROTATION_MAX,
    ROTATION_MIN,
    ROTATION_TYPE,
    EffectTrack,
    KeyframeEntry,
    dumps_tracks,
)

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_OPACITY = 100.0


@dataclass(frozen=True)
class EndpointState:
    """
    Channel values held at one end of the animation.

    Opacity is on a 0-100 scale here; tracks store it as 0-1.
    """
    frame: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    opacity: float = DEFAULT_OPACITY
    rotation: float = 0.0


@dataclass(frozen=True)
class GenerationSettings:
    """Everything needed to generate one rect + rotation track pair."""
    fps: float = DEFAULT_FPS
    easing: str = DEFAULT_EASING
    repeat: int = 1
    start: EndpointState = field(default_factory=EndpointState)
    end: EndpointState = field(default_factory=lambda: EndpointState(frame=DEFAULT_FPS * 5 - 1))

    @property
    def frame_count(self) -> int:
        """Number of frame steps between start and end (entries - 1)."""
        return self.end.frame - self.start.frame

    @property
    def curve(self) -> EasingFunc:
        """Catalog curve wrapped by the repeat count."""
        return resolve_curve(self.easing, self.repeat)

    @classmethod
    def from_duration(
        cls,
        fps: int,
        duration: float,
        easing: str = DEFAULT_EASING,
        repeat: int = 1,
        start: EndpointState = EndpointState(),
        end: EndpointState = EndpointState(),
    ) -> "GenerationSettings":
        """Build settings spanning frames 0 .. fps * duration - 1."""
        total = int(round(fps * duration))
        if total < 1:
            raise InvalidRange(
                f"Duration {duration}s at {fps} fps yields no frames",
                {"fps": fps, "duration": duration},
            )
        return cls(
            fps=fps,
            easing=easing,
            repeat=repeat,
            start=_with_frame(start, 0),
            end=_with_frame(end, total - 1),
        )


def _with_frame(state: EndpointState, frame: int) -> EndpointState:
    return replace(state, frame=frame)


def validate_settings(settings: GenerationSettings) -> None:
    """Raise InvalidRange if the settings cannot be sampled."""
    if settings.fps <= 0:
        raise InvalidRange(f"fps must be positive, got {settings.fps}", {"fps": settings.fps})
    if settings.end.frame < settings.start.frame:
        raise InvalidRange(
            f"End frame {settings.end.frame} is before start frame {settings.start.frame}",
            {"start": settings.start.frame, "end": settings.end.frame},
        )


def eased_progress(curve: EasingFunc, frame_count: int) -> List[float]:
    """
    Eased progress value for each sample index 0..frame_count.

    The last index maps to t = 1. A zero-length range yields a single sample
    at t = 0.
    """
    if frame_count == 0:
        return [curve(0.0)]
    return [curve(i / frame_count) for i in range(frame_count + 1)]


def generate(settings: GenerationSettings) -> List[EffectTrack]:
    """
    Generate rect and rotation tracks for the settings.

    Every channel shares the same eased progress per frame.

    Raises:
        InvalidRange: End frame before start frame or non-positive fps
        UnknownCurveName: Easing not in the catalog
    """
    validate_settings(settings)
    curve = settings.curve

    start, end = settings.start, settings.end
    rect_entries = []
    rotation_entries = []
    for i, v in enumerate(eased_progress(curve, settings.frame_count)):
        frame = start.frame + i
        rect_entries.append(KeyframeEntry(frame=frame, values=(
            lerp(start.x, end.x, v),
            lerp(start.y, end.y, v),
            lerp(start.width, end.width, v),
            lerp(start.height, end.height, v),
            lerp(start.opacity, end.opacity, v) / 100,
        )))
        rotation_entries.append(KeyframeEntry(
            frame=frame,
            values=(lerp(start.rotation, end.rotation, v),),
        ))

    label = settings.easing if settings.repeat <= 1 else f"{settings.easing} x{settings.repeat}"
    rect = EffectTrack(
        name="rect",
        display_name=f"Generated easing for {label}",
        frame_in=start.frame,
        frame_out=end.frame,
        domain_min=0,
        domain_max=0,
        kind=RECT_TYPE,
        entries=rect_entries,
    )
    rotation = EffectTrack(
        name="rotation",
        display_name=f"Generated rotation for {label}",
        frame_in=start.frame,
        frame_out=end.frame,
        domain_min=ROTATION_MIN,
        domain_max=ROTATION_MAX,
        kind=ROTATION_TYPE,
        entries=rotation_entries,
    )

    logger.debug(
        f"[Koshi] Generated {len(rect_entries)} keyframes "
        f"({start.frame}-{end.frame}) with {label}"
    )
    return [rect, rotation]


def generate_keyframe_json(settings: GenerationSettings, indent: int = 2) -> str:
    """Generate tracks and serialize them for pasting into Kdenlive."""
    return dumps_tracks(generate(settings), indent=indent)


__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_OPACITY",
    "EndpointState",
    "GenerationSettings",
    "validate_settings",
    "eased_progress",
    "generate",
    "generate_keyframe_json",
]
