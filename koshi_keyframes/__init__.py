"""Koshi Keyframes - eased keyframe generation and parsing for Kdenlive."""

__version__ = "0.1.0"
