"""Koshi Paste Infer - fill keyframe settings from pasted Kdenlive text."""

import logging

from .core import infer_settings

logger = logging.getLogger(__name__)


class KoshiPasteInfer:
    """
    Infer settings from pasted keyframe JSON or clip XML.

    Unrecognized text passes the incoming settings through unchanged.
    """
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Kdenlive"
    FUNCTION = "infer"
    RETURN_TYPES = ("KOSHI_KEYFRAME_SETTINGS", "STRING")
    RETURN_NAMES = ("settings", "recognized_as")

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "settings": ("KOSHI_KEYFRAME_SETTINGS",),
                "pasted_text": ("STRING", {
                    "multiline": True,
                    "default": "",
                }),
            }
        }

    def infer(self, settings, pasted_text: str):
        updated, kind = infer_settings(settings, pasted_text)
        logger.debug(f"[Koshi] Paste infer: {kind}")
        return (updated, kind)


NODE_CLASS_MAPPINGS = {
    "Koshi_PasteInfer": KoshiPasteInfer,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Koshi_PasteInfer": "▀▄▀ KN Paste Infer",
}
