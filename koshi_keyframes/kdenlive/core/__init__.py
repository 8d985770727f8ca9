"""Core keyframe engine for Koshi Kdenlive nodes."""

from .exceptions import (
    KeyframeError,
    UnknownCurveName,
    InvalidRange,
    MalformedKeyframeText,
    MalformedClipDescriptor,
    AmbiguousExtraction,
    TrackKindMismatch,
)
from .easing import (
    EASINGS,
    EASING_NAMES,
    DEFAULT_EASING,
    get_easing,
    evaluate,
    list_easings,
    repeat_curve,
    resolve_curve,
    sample_curve,
)
from .interpolation import lerp
from .keyframe import (
    RECT_TYPE,
    ROTATION_TYPE,
    KeyframeEntry,
    EffectTrack,
    encode_entries,
    decode_entries,
    encode_track,
    decode_track,
    dumps_tracks,
    loads_tracks,
)
from .generator import (
    EndpointState,
    GenerationSettings,
    generate,
    generate_keyframe_json,
)
from .effects import (
    RectangleEntry,
    RotationEntry,
    parse_rectangle,
    parse_rotation,
    extract_endpoints,
)
from .clip import ClipMetadata, parse_clip
from .presets import Preset, PRESETS, list_presets, get_preset, apply_preset
from .inference import (
    InferenceResult,
    NOT_RECOGNIZED,
    infer_from_text,
    apply_inference,
    infer_settings,
)

__all__ = [
    # Errors
    "KeyframeError",
    "UnknownCurveName",
    "InvalidRange",
    "MalformedKeyframeText",
    "MalformedClipDescriptor",
    "AmbiguousExtraction",
    "TrackKindMismatch",
    # Easing
    "EASINGS",
    "EASING_NAMES",
    "DEFAULT_EASING",
    "get_easing",
    "evaluate",
    "list_easings",
    "repeat_curve",
    "resolve_curve",
    "sample_curve",
    # Interpolation
    "lerp",
    # Codec
    "RECT_TYPE",
    "ROTATION_TYPE",
    "KeyframeEntry",
    "EffectTrack",
    "encode_entries",
    "decode_entries",
    "encode_track",
    "decode_track",
    "dumps_tracks",
    "loads_tracks",
    # Generator
    "EndpointState",
    "GenerationSettings",
    "generate",
    "generate_keyframe_json",
    # Extraction
    "RectangleEntry",
    "RotationEntry",
    "parse_rectangle",
    "parse_rotation",
    "extract_endpoints",
    # Clip
    "ClipMetadata",
    "parse_clip",
    # Presets
    "Preset",
    "PRESETS",
    "list_presets",
    "get_preset",
    "apply_preset",
    # Inference
    "InferenceResult",
    "NOT_RECOGNIZED",
    "infer_from_text",
    "apply_inference",
    "infer_settings",
]
