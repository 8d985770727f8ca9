"""
ComfyUI-Koshi-Keyframes
Settings, generator and paste-infer nodes for Kdenlive rect/rotation keyframes.
"""

import importlib.util
import logging
import os
import sys

logger = logging.getLogger("Koshi")

PACKAGE_DIR = os.path.join(os.path.dirname(__file__), "koshi_keyframes", "kdenlive")
MODULE_NAME = "koshi_keyframes_kdenlive"

NODE_CLASS_MAPPINGS = {}
NODE_DISPLAY_NAME_MAPPINGS = {}


def _load_kdenlive_nodes():
    """Import the kdenlive node package from its path; ComfyUI does not put this folder on sys.path."""
    init_path = os.path.join(PACKAGE_DIR, "__init__.py")
    spec = importlib.util.spec_from_file_location(MODULE_NAME, init_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[MODULE_NAME] = module
    spec.loader.exec_module(module)
    return module


try:
    _kdenlive = _load_kdenlive_nodes()
    NODE_CLASS_MAPPINGS.update(_kdenlive.NODE_CLASS_MAPPINGS)
    NODE_DISPLAY_NAME_MAPPINGS.update(_kdenlive.NODE_DISPLAY_NAME_MAPPINGS)
    logger.debug("[Koshi] Registered %d keyframe nodes", len(NODE_CLASS_MAPPINGS))
except Exception as e:
    logger.warning("Error loading Kdenlive keyframe nodes: %s", e)

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
