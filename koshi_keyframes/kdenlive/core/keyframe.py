"""
Kdenlive keyframe text codec.

Entry format: "frame = v1 v2 ... vk", entries joined by ";".
Examples:
    "0 = 0 0 1920 1080 1;1 = 20 0 1920 1080 1"
    "0 = -90;30 = 0"

Tracks travel as JSON objects carrying the entry string in "value":
    {"DisplayName": ..., "name": "rect", "in": 0, "out": 59,
     "max": 0, "min": 0, "opacity": true, "type": 7, "value": "0 = ..."}
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .exceptions import MalformedKeyframeText

# Kdenlive keyframe type codes
RECT_TYPE = 7
ROTATION_TYPE = 9

ROTATION_MIN = -360
ROTATION_MAX = 360

TRACK_FIELDS: Tuple[str, ...] = (
    "DisplayName", "name", "in", "out", "max", "min", "opacity", "type", "value",
)


@dataclass(frozen=True)
class KeyframeEntry:
    """One sampled instant of a track."""
    frame: int
    values: Tuple[float, ...] = ()


@dataclass
class EffectTrack:
    """
    One animated effect parameter with its keyframes.

    Attributes:
        name: Logical name ("rect", "rotation", or anything Kdenlive emits)
        display_name: Human readable label
        frame_in: First frame of the effect
        frame_out: Last frame of the effect
        domain_min: Lower value bound (rotation uses -360)
        domain_max: Upper value bound (rotation uses 360)
        kind: Kdenlive type code (7 = rect, 9 = rotation)
        entries: Keyframes in ascending frame order
    """
    name: str
    display_name: str = ""
    frame_in: int = 0
    frame_out: int = 0
    domain_min: float = 0
    domain_max: float = 0
    kind: int = RECT_TYPE
    entries: List[KeyframeEntry] = field(default_factory=list)

    @property
    def first(self) -> KeyframeEntry:
        return self.entries[0]

    @property
    def last(self) -> KeyframeEntry:
        return self.entries[-1]


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float; integral values drop '.0'."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def encode_entry(entry: KeyframeEntry) -> str:
    values = " ".join(format_number(v) for v in entry.values)
    return f"{entry.frame} = {values}"


def encode_entries(entries: Iterable[KeyframeEntry]) -> str:
    """Encode entries into the ';'-separated keyframe string."""
    return ";".join(encode_entry(e) for e in entries)


def decode_entry(text: str) -> KeyframeEntry:
    """Parse one "frame = v1 v2 ..." segment."""
    frame_text, sep, values_text = text.partition("=")
    if not sep:
        raise MalformedKeyframeText(
            f"Keyframe entry has no '=': {text!r}", {"entry": text}
        )

    try:
        frame = int(frame_text.strip())
    except ValueError:
        raise MalformedKeyframeText(
            f"Invalid frame index {frame_text.strip()!r}", {"entry": text}
        ) from None

    try:
        values = tuple(float(token) for token in values_text.split())
    except ValueError:
        raise MalformedKeyframeText(
            f"Invalid keyframe value in {text!r}", {"entry": text}
        ) from None

    return KeyframeEntry(frame=frame, values=values)


def decode_entries(text: str) -> List[KeyframeEntry]:
    """
    Parse a keyframe string into entries.

    Blank segments (a trailing ';') are skipped. Arity is not checked; rect
    tracks carry 5 values and rotation tracks 1, but the caller decides.

    Raises:
        MalformedKeyframeText: If a segment cannot be split or parsed
    """
    if not isinstance(text, str):
        raise MalformedKeyframeText(f"Keyframe value must be a string, got {type(text).__name__}")

    entries = []
    for segment in text.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        entries.append(decode_entry(segment))
    return entries


def encode_track(track: EffectTrack) -> Dict[str, Any]:
    """Convert a track to the JSON-ready Kdenlive record."""
    return {
        "DisplayName": track.display_name,
        "name": track.name,
        "in": track.frame_in,
        "out": track.frame_out,
        "max": track.domain_max,
        "min": track.domain_min,
        "opacity": True,
        "type": track.kind,
        "value": encode_entries(track.entries),
    }


def _require(record: Dict[str, Any], key: str, types: Sequence[type]) -> Any:
    if key not in record:
        raise MalformedKeyframeText(f"Track record missing '{key}'", {"field": key})
    value = record[key]
    # bool is an int subclass; only "opacity" may be boolean
    if not isinstance(value, tuple(types)) or (isinstance(value, bool) and bool not in types):
        raise MalformedKeyframeText(
            f"Track field '{key}' has wrong type {type(value).__name__}",
            {"field": key},
        )
    return value


def decode_track(record: Dict[str, Any]) -> EffectTrack:
    """
    Parse a Kdenlive track record.

    Unknown names and type codes are kept as-is.

    Raises:
        MalformedKeyframeText: Missing fields, wrong field types, or bad value text
    """
    if not isinstance(record, dict):
        raise MalformedKeyframeText(f"Track record must be an object, got {type(record).__name__}")

    number = (int, float)
    _require(record, "opacity", (bool,))
    return EffectTrack(
        name=_require(record, "name", (str,)),
        display_name=_require(record, "DisplayName", (str,)),
        frame_in=_require(record, "in", number),
        frame_out=_require(record, "out", number),
        domain_max=_require(record, "max", number),
        domain_min=_require(record, "min", number),
        kind=_require(record, "type", number),
        entries=decode_entries(_require(record, "value", (str,))),
    )


def dumps_tracks(tracks: Iterable[EffectTrack], indent: Optional[int] = 2) -> str:
    """Serialize tracks to the JSON array Kdenlive pastes."""
    return json.dumps([encode_track(t) for t in tracks], indent=indent)


def loads_tracks(text: str) -> List[EffectTrack]:
    """
    Parse a pasted JSON array of track records.

    Raises:
        MalformedKeyframeText: Not JSON, not an array, or a bad record
    """
    try:
        data = json.loads(text)
    except (RecursionError, TypeError, ValueError) as e:
        raise MalformedKeyframeText(f"Keyframe text is not JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedKeyframeText(f"Keyframe JSON must be an array, got {type(data).__name__}")

    return [decode_track(record) for record in data]


__all__ = [
    "RECT_TYPE",
    "ROTATION_TYPE",
    "ROTATION_MIN",
    "ROTATION_MAX",
    "TRACK_FIELDS",
    "KeyframeEntry",
    "EffectTrack",
    "format_number",
    "encode_entry",
    "encode_entries",
    "decode_entry",
    "decode_entries",
    "encode_track",
    "decode_track",
    "dumps_tracks",
    "loads_tracks",
]
