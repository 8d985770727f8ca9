"""Typed views over decoded tracks and endpoint recovery."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .exceptions import (
    AmbiguousExtraction,
    InvalidRange,
    MalformedKeyframeText,
    TrackKindMismatch,
)
from .generator import EndpointState
from .keyframe import EffectTrack, KeyframeEntry


@dataclass(frozen=True)
class RectangleEntry:
    """Rect keyframe with opacity back on the 0-100 scale."""
    frame: int
    x: float
    y: float
    width: float
    height: float
    opacity: float


@dataclass(frozen=True)
class RotationEntry:
    frame: int
    angle: float


def _values(entry: KeyframeEntry, arity: int, kind: str):
    if len(entry.values) < arity:
        raise MalformedKeyframeText(
            f"{kind} keyframe at frame {entry.frame} needs {arity} values, "
            f"got {len(entry.values)}",
            {"frame": entry.frame},
        )
    return entry.values[:arity]


def parse_rectangle_entry(entry: KeyframeEntry) -> RectangleEntry:
    x, y, width, height, opacity = _values(entry, 5, "rect")
    return RectangleEntry(
        frame=entry.frame,
        x=x,
        y=y,
        width=width,
        height=height,
        opacity=opacity * 100,
    )


def parse_rotation_entry(entry: KeyframeEntry) -> RotationEntry:
    (angle,) = _values(entry, 1, "rotation")
    return RotationEntry(frame=entry.frame, angle=angle)


def parse_rectangle(track: EffectTrack) -> List[RectangleEntry]:
    """Read every entry of a rect track."""
    if track.name != "rect":
        raise TrackKindMismatch(f"Not a rectangle track: {track.name!r}", {"name": track.name})
    return [parse_rectangle_entry(e) for e in track.entries]


def parse_rotation(track: EffectTrack) -> List[RotationEntry]:
    """Read every entry of a rotation track."""
    if track.name != "rotation":
        raise TrackKindMismatch(f"Not a rotation track: {track.name!r}", {"name": track.name})
    return [parse_rotation_entry(e) for e in track.entries]


def find_track(tracks: Iterable[EffectTrack], name: str) -> Optional[EffectTrack]:
    """First track with the given logical name, or None."""
    for track in tracks:
        if track.name == name:
            return track
    return None


def endpoint_entries(track: EffectTrack) -> Tuple[KeyframeEntry, KeyframeEntry]:
    """
    First and last entries of a track.

    Raises:
        AmbiguousExtraction: Fewer than two entries, so there is no range
    """
    if len(track.entries) < 2:
        raise AmbiguousExtraction(
            f"Track {track.name!r} has {len(track.entries)} keyframe(s); "
            f"need at least 2 to infer start and end",
            {"name": track.name, "entries": len(track.entries)},
        )
    return track.first, track.last


def _endpoint(rect: RectangleEntry, rotation: Optional[RotationEntry]) -> EndpointState:
    return EndpointState(
        frame=rect.frame,
        x=rect.x,
        y=rect.y,
        width=rect.width,
        height=rect.height,
        opacity=rect.opacity,
        rotation=rotation.angle if rotation is not None else 0.0,
    )


def extract_endpoints(tracks: Iterable[EffectTrack]) -> Tuple[EndpointState, EndpointState]:
    """
    Recover start and end states from decoded tracks.

    Reads the first and last entries of the rect track and, when present,
    the rotation track. Frames come from the rect track.

    Raises:
        TrackKindMismatch: No rect track
        AmbiguousExtraction: A track used has fewer than two entries
        InvalidRange: Last rect frame comes before the first
        MalformedKeyframeText: An entry has too few values
    """
    tracks = list(tracks)
    rect = find_track(tracks, "rect")
    if rect is None:
        names = [t.name for t in tracks]
        raise TrackKindMismatch(f"No rect track among {names}", {"names": names})

    first, last = endpoint_entries(rect)
    if last.frame < first.frame:
        raise InvalidRange(
            f"Rect keyframes end at frame {last.frame}, before start frame {first.frame}",
            {"start": first.frame, "end": last.frame},
        )
    rect_start = parse_rectangle_entry(first)
    rect_end = parse_rectangle_entry(last)

    rot_start = rot_end = None
    rotation = find_track(tracks, "rotation")
    if rotation is not None:
        first, last = endpoint_entries(rotation)
        rot_start = parse_rotation_entry(first)
        rot_end = parse_rotation_entry(last)

    return _endpoint(rect_start, rot_start), _endpoint(rect_end, rot_end)


__all__ = [
    "RectangleEntry",
    "RotationEntry",
    "parse_rectangle_entry",
    "parse_rotation_entry",
    "parse_rectangle",
    "parse_rotation",
    "find_track",
    "endpoint_entries",
    "extract_endpoints",
]
