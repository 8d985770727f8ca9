"""
Infer generation settings from pasted text.

Candidates are tried in order: Kdenlive keyframe JSON, then clip XML. The
first decoder that succeeds wins; KeyframeError from the others is dropped.
Nothing recognized means the caller keeps its current settings.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from .clip import ClipMetadata, parse_clip
from .effects import extract_endpoints
from .exceptions import KeyframeError
from .generator import EndpointState, GenerationSettings
from .keyframe import loads_tracks

logger = logging.getLogger(__name__)

KIND_KEYFRAMES = "keyframes"
KIND_CLIP = "clip"
NOT_RECOGNIZED = "not recognized"


@dataclass(frozen=True)
class InferenceResult:
    """Outcome of the first decoder that accepted the text."""
    kind: str
    start: Optional[EndpointState] = None
    end: Optional[EndpointState] = None
    clip: Optional[ClipMetadata] = None


def infer_keyframes(text: str) -> InferenceResult:
    start, end = extract_endpoints(loads_tracks(text))
    return InferenceResult(kind=KIND_KEYFRAMES, start=start, end=end)


def infer_clip(text: str) -> InferenceResult:
    return InferenceResult(kind=KIND_CLIP, clip=parse_clip(text))


DECODERS: Tuple[Tuple[str, Callable[[str], InferenceResult]], ...] = (
    (KIND_KEYFRAMES, infer_keyframes),
    (KIND_CLIP, infer_clip),
)


def infer_from_text(text: str) -> Optional[InferenceResult]:
    """
    Run the candidate decoders in order.

    Returns:
        First successful result, or None if no decoder accepts the text
    """
    rejected: List[str] = []
    for kind, decoder in DECODERS:
        try:
            result = decoder(text)
        except KeyframeError as e:
            rejected.append(f"{kind}: {e}")
            continue
        logger.debug(f"[Koshi] Pasted text recognized as {kind}")
        return result

    logger.debug(f"[Koshi] Pasted text not recognized ({'; '.join(rejected)})")
    return None


def apply_inference(
    settings: GenerationSettings,
    result: Optional[InferenceResult],
) -> GenerationSettings:
    """
    Merge an inference result into settings.

    Keyframes replace both endpoints. A clip sets fps and, when it carries a
    duration, moves the end frame so the range covers the clip.
    """
    if result is None:
        return settings

    if result.kind == KIND_KEYFRAMES:
        return replace(settings, start=result.start, end=result.end)

    if result.kind == KIND_CLIP:
        clip = result.clip
        if clip.duration_frames is not None and clip.duration_frames > 0:
            end_frame = settings.start.frame + clip.duration_frames - 1
            return replace(settings, fps=clip.fps, end=replace(settings.end, frame=end_frame))
        return replace(settings, fps=clip.fps)

    return settings


def infer_settings(settings: GenerationSettings, text: str) -> Tuple[GenerationSettings, str]:
    """Infer from text and merge; returns (settings, kind or NOT_RECOGNIZED)."""
    result = infer_from_text(text)
    if result is None:
        return settings, NOT_RECOGNIZED
    return apply_inference(settings, result), result.kind


__all__ = [
    "KIND_KEYFRAMES",
    "KIND_CLIP",
    "NOT_RECOGNIZED",
    "InferenceResult",
    "DECODERS",
    "infer_keyframes",
    "infer_clip",
    "infer_from_text",
    "apply_inference",
    "infer_settings",
]
