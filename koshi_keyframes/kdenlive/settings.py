"""Koshi Keyframe Settings - collect endpoint states for Kdenlive easing."""

from .core import (
    DEFAULT_EASING,
    EndpointState,
    GenerationSettings,
    apply_preset,
    get_preset,
    list_easings,
    list_presets,
)


def _channel_inputs(prefix: str, frame_default: int):
    return {
        f"{prefix}_frame": ("INT", {"default": frame_default, "min": 0, "max": 1000000}),
        f"{prefix}_x": ("FLOAT", {"default": 0.0, "min": -100000.0, "max": 100000.0, "step": 1.0}),
        f"{prefix}_y": ("FLOAT", {"default": 0.0, "min": -100000.0, "max": 100000.0, "step": 1.0}),
        f"{prefix}_width": ("FLOAT", {"default": 1920.0, "min": 0.0, "max": 100000.0, "step": 1.0}),
        f"{prefix}_height": ("FLOAT", {"default": 1080.0, "min": 0.0, "max": 100000.0, "step": 1.0}),
        f"{prefix}_opacity": ("FLOAT", {"default": 100.0, "min": 0.0, "max": 100.0, "step": 1.0}),
        f"{prefix}_rotation": ("FLOAT", {"default": 0.0, "min": -360.0, "max": 360.0, "step": 1.0}),
    }


class KoshiKeyframeSettings:
    """Build keyframe generation settings from widget values."""
    COLOR = "#1a1a1a"
    BGCOLOR = "#2d2d2d"

    CATEGORY = "Koshi/Kdenlive"
    FUNCTION = "build"
    RETURN_TYPES = ("KOSHI_KEYFRAME_SETTINGS",)
    RETURN_NAMES = ("settings",)

    @classmethod
    def INPUT_TYPES(cls):
        required = {
            "fps": ("INT", {"default": 60, "min": 1, "max": 240}),
            "easing": (list_easings(), {"default": DEFAULT_EASING}),
            "repeat": ("INT", {"default": 1, "min": 1, "max": 32}),
        }
        required.update(_channel_inputs("start", 0))
        required.update(_channel_inputs("end", 299))
        return {
            "required": required,
            "optional": {
                "preset": (["none"] + list_presets(),),
            },
        }

    def build(
        self,
        fps: int,
        easing: str,
        repeat: int,
        start_frame: int,
        start_x: float,
        start_y: float,
        start_width: float,
        start_height: float,
        start_opacity: float,
        start_rotation: float,
        end_frame: int,
        end_x: float,
        end_y: float,
        end_width: float,
        end_height: float,
        end_opacity: float,
        end_rotation: float,
        preset: str = "none",
    ):
        """Assemble settings; a preset overrides fps and frame size."""
        settings = GenerationSettings(
            fps=fps,
            easing=easing,
            repeat=repeat,
            start=EndpointState(
                frame=start_frame, x=start_x, y=start_y,
                width=start_width, height=start_height,
                opacity=start_opacity, rotation=start_rotation,
            ),
            end=EndpointState(
                frame=end_frame, x=end_x, y=end_y,
                width=end_width, height=end_height,
                opacity=end_opacity, rotation=end_rotation,
            ),
        )

        if preset != "none":
            settings = apply_preset(settings, get_preset(preset))

        return (settings,)


NODE_CLASS_MAPPINGS = {
    "Koshi_KeyframeSettings": KoshiKeyframeSettings,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "Koshi_KeyframeSettings": "▀▄▀ KN Keyframe Settings",
}
