"""Error kinds raised by the keyframe engine."""

from typing import Any, Dict, Optional


class KeyframeError(ValueError):
    """Base class for every keyframe engine failure."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnknownCurveName(KeyframeError):
    """Easing lookup against the catalog failed."""

    def __init__(self, name: str):
        super().__init__(f"Unknown easing curve: {name!r}", {"name": name})
        self.name = name


class InvalidRange(KeyframeError):
    """Frame range or frame rate cannot be sampled."""


class MalformedKeyframeText(KeyframeError):
    """Keyframe text or track record could not be parsed."""


class MalformedClipDescriptor(KeyframeError):
    """Clip XML has no root element or no usable fps."""


class AmbiguousExtraction(KeyframeError):
    """A track has too few entries to recover a start/end pair."""


class TrackKindMismatch(KeyframeError):
    """A track was read as a kind it is not."""


__all__ = [
    "KeyframeError",
    "UnknownCurveName",
    "InvalidRange",
    "MalformedKeyframeText",
    "MalformedClipDescriptor",
    "AmbiguousExtraction",
    "TrackKindMismatch",
]
