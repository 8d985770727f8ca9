"""Frame rate / duration extraction from pasted Kdenlive clip XML."""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from .exceptions import MalformedClipDescriptor

# Leading integer, as Kdenlive writes "25" but some profiles carry "29.97"
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ClipMetadata:
    """Timing read from a clip descriptor root element."""
    fps: int
    duration_frames: Optional[int] = None

    @property
    def duration(self) -> Optional[float]:
        """Clip length in seconds, when the descriptor carries a duration."""
        if self.duration_frames is None:
            return None
        return self.duration_frames / self.fps


def _parse_int_prefix(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_clip(xml_text: str) -> ClipMetadata:
    """
    Parse clip XML and read the root element's fps / duration attributes.

    Args:
        xml_text: Clip descriptor, e.g. '<kdenlivedoc fps="25" duration="250"/>'

    Returns:
        ClipMetadata with integer fps and optional duration in frames

    Raises:
        MalformedClipDescriptor: No root element, or fps missing / not a positive integer
    """
    if not isinstance(xml_text, str) or not xml_text.strip():
        raise MalformedClipDescriptor("Clip XML is empty")

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise MalformedClipDescriptor(f"Clip XML has no root element: {e}") from e

    raw_fps = root.get("fps")
    fps = _parse_int_prefix(raw_fps)
    if fps is None or fps <= 0:
        raise MalformedClipDescriptor(
            f"Parsed clip XML has invalid fps: {raw_fps!r}",
            {"fps": raw_fps, "root": root.tag},
        )

    raw_duration = root.get("duration")
    duration_frames = None
    if raw_duration is not None:
        try:
            duration_frames = int(float(raw_duration))
        except (OverflowError, ValueError):
            raise MalformedClipDescriptor(
                f"Parsed clip XML has invalid duration: {raw_duration!r}",
                {"duration": raw_duration},
            ) from None

    return ClipMetadata(fps=fps, duration_frames=duration_frames)


__all__ = [
    "ClipMetadata",
    "parse_clip",
]
