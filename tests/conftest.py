"""Shared fixtures for ComfyUI-Koshi-Keyframes test suite."""

import sys
import os
import pytest

# Ensure the package root is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from koshi_keyframes.kdenlive.core.generator import EndpointState, GenerationSettings


# ---------------------------------------------------------------------------
# Settings fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def linear_settings():
    """Frames 0..5, x 0 -> 100, everything else constant."""
    return GenerationSettings(
        fps=30,
        easing="LinearInOut",
        repeat=1,
        start=EndpointState(frame=0, x=0.0),
        end=EndpointState(frame=5, x=100.0),
    )


@pytest.fixture
def full_settings():
    """Every channel moves between start and end."""
    return GenerationSettings(
        fps=60,
        easing="CubicEaseInOut",
        repeat=1,
        start=EndpointState(
            frame=10, x=-200.0, y=50.0, width=1920.0, height=1080.0,
            opacity=0.0, rotation=-45.0,
        ),
        end=EndpointState(
            frame=70, x=300.0, y=-120.5, width=960.0, height=540.0,
            opacity=100.0, rotation=90.0,
        ),
    )


@pytest.fixture
def single_frame_settings():
    """Start and end on the same frame."""
    return GenerationSettings(
        fps=30,
        easing="QuadEaseIn",
        start=EndpointState(frame=12, x=5.0),
        end=EndpointState(frame=12, x=500.0),
    )


# ---------------------------------------------------------------------------
# Pasted text fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clip_xml():
    """Minimal Kdenlive clip descriptor."""
    return '<kdenlivedoc fps="25" duration="250"><producer id="p0"/></kdenlivedoc>'


@pytest.fixture
def rect_record():
    """Kdenlive rect track record as pasted from the effect stack."""
    return {
        "DisplayName": "Transform",
        "name": "rect",
        "in": 0,
        "out": 2,
        "max": 0,
        "min": 0,
        "opacity": True,
        "type": 7,
        "value": "0 = 0 0 1920 1080 1;1 = 50 25 1920 1080 0.5;2 = 100 50 1920 1080 0",
    }
