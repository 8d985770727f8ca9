"""Scalar interpolation used by the keyframe generator."""


def clamp01(t: float) -> float:
    """Clamp t into [0, 1]."""
    return max(0.0, min(t, 1.0))


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b.

        50 == lerp(0, 100, 0.5)
        4.2 == lerp(1, 5, 0.8)

    t is clamped into [0, 1]. Equal endpoints return a untouched so constant
    channels never pick up float roundoff.
    """
    t = clamp01(t)
    if a == b:
        return a
    return (1 - t) * a + t * b


__all__ = [
    "clamp01",
    "lerp",
]
