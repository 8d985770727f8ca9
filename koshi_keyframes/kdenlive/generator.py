"""Koshi Keyframe Generator - eased Kdenlive keyframe JSON."""

import logging

from .core import dumps_tracks, generate, sample_curve

logger = logging.getLogger(__name__)

# Samples of the eased curve sent to the node UI
PREVIEW_POINTS = 100


class KoshiKeyframeGenerator:
    """
    Generate rect and rotation keyframes ready to paste into Kdenlive.

    Invalid settings raise instead of returning the previous output.
    """
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Kdenlive"
    FUNCTION = "generate"
    RETURN_TYPES = ("STRING", "INT")
    RETURN_NAMES = ("keyframes_json", "keyframe_count")
    OUTPUT_NODE = True

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "settings": ("KOSHI_KEYFRAME_SETTINGS",),
            },
            "optional": {
                "pretty_print": ("BOOLEAN", {"default": True}),
            },
        }

    def generate(self, settings, pretty_print: bool = True):
        tracks = generate(settings)
        text = dumps_tracks(tracks, indent=2 if pretty_print else None)
        count = len(tracks[0].entries)
        logger.debug(f"[Koshi] Keyframe JSON: {len(tracks)} tracks, {count} keyframes each")
        return {
            "ui": {"text": [text], "curve": self.curve_preview(settings)},
            "result": (text, count),
        }

    @staticmethod
    def curve_preview(settings):
        """Eased curve as [x, y] pairs for the node's graph widget."""
        xs, ys = sample_curve(settings.easing, num_points=PREVIEW_POINTS, repeat=settings.repeat)
        return [[round(float(x), 4), round(float(y), 4)] for x, y in zip(xs, ys)]


NODE_CLASS_MAPPINGS = {
    "Koshi_KeyframeGenerator": KoshiKeyframeGenerator,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Koshi_KeyframeGenerator": "▀▄▀ KN Keyframe Generator",
}
