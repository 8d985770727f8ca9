"""Koshi Kdenlive Nodes - eased keyframe generation for Kdenlive effects."""

import logging

logger = logging.getLogger("koshi.kdenlive")

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}

try:
    from .settings import NODE_CLASS_MAPPINGS as settings_nodes
    from .settings import NODE_DISPLAY_NAME_MAPPINGS as settings_names
    NODE_CLASS_MAPPINGS.update(settings_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(settings_names)
except ImportError as e:
    logger.debug(f"Failed to load keyframe settings nodes: {e}")

try:
    from .generator import NODE_CLASS_MAPPINGS as generator_nodes
    from .generator import NODE_DISPLAY_NAME_MAPPINGS as generator_names
    NODE_CLASS_MAPPINGS.update(generator_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(generator_names)
except ImportError as e:
    logger.debug(f"Failed to load keyframe generator nodes: {e}")

try:
    from .paste import NODE_CLASS_MAPPINGS as paste_nodes
    from .paste import NODE_DISPLAY_NAME_MAPPINGS as paste_names
    NODE_CLASS_MAPPINGS.update(paste_nodes)
    NODE_DISPLAY_NAME_MAPPINGS.update(paste_names)
except ImportError as e:
    logger.debug(f"Failed to load paste infer nodes: {e}")

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
