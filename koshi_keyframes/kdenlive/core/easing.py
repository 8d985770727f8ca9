"""Penner-style easing curves keyed by their Kdenlive preset names."""

import math
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple, Union

import numpy as np

from .exceptions import UnknownCurveName

EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    return t


# Quadratic

def quad_ease_in(t: float) -> float:
    return t * t


def quad_ease_out(t: float) -> float:
    return -(t * (t - 2))


def quad_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -2 * t * t + 4 * t - 1


# Cubic

def cubic_ease_in(t: float) -> float:
    return t * t * t


def cubic_ease_out(t: float) -> float:
    return (t - 1) * (t - 1) * (t - 1) + 1


def cubic_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    p = 2 * t - 2
    return 0.5 * p * p * p + 1


# Quartic

def quartic_ease_in(t: float) -> float:
    return t * t * t * t


def quartic_ease_out(t: float) -> float:
    return (t - 1) * (t - 1) * (t - 1) * (1 - t) + 1


def quartic_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    p = t - 1
    return -8 * p * p * p * p + 1


# Quintic

def quintic_ease_in(t: float) -> float:
    return t * t * t * t * t


def quintic_ease_out(t: float) -> float:
    return (t - 1) * (t - 1) * (t - 1) * (t - 1) * (t - 1) + 1


def quintic_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    p = 2 * t - 2
    return 0.5 * p * p * p * p * p + 1


# Sine

def sine_ease_in(t: float) -> float:
    return math.sin((t - 1) * math.pi / 2) + 1


def sine_ease_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_ease_in_out(t: float) -> float:
    return 0.5 * (1 - math.cos(t * math.pi))


# Circular

def circular_ease_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def circular_ease_out(t: float) -> float:
    return math.sqrt((2 - t) * t)


def circular_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1 - math.sqrt(1 - 4 * (t * t)))
    return 0.5 * (math.sqrt(-((2 * t) - 3) * ((2 * t) - 1)) + 1)


# Exponential

def exponential_ease_in(t: float) -> float:
    if t == 0:
        return 0.0
    return math.pow(2, 10 * (t - 1))


def exponential_ease_out(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - math.pow(2, -10 * t)


def exponential_ease_in_out(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return 0.5 * math.pow(2, (20 * t) - 10)
    return -0.5 * math.pow(2, (-20 * t) + 10) + 1


# Elastic

def elastic_ease_in(t: float) -> float:
    return math.sin(13 * math.pi / 2 * t) * math.pow(2, 10 * (t - 1))


def elastic_ease_out(t: float) -> float:
    return math.sin(-13 * math.pi / 2 * (t + 1)) * math.pow(2, -10 * t) + 1


def elastic_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 0.5 * math.sin(13 * math.pi / 2 * (2 * t)) * math.pow(2, 10 * ((2 * t) - 1))
    return 0.5 * (
        math.sin(-13 * math.pi / 2 * ((2 * t - 1) + 1)) * math.pow(2, -10 * (2 * t - 1)) + 2
    )


# Back

def back_ease_in(t: float) -> float:
    return t * t * t - t * math.sin(t * math.pi)


def back_ease_out(t: float) -> float:
    p = 1 - t
    return 1 - (p * p * p - p * math.sin(p * math.pi))


def back_ease_in_out(t: float) -> float:
    if t < 0.5:
        p = 2 * t
        return 0.5 * (p * p * p - p * math.sin(p * math.pi))
    p = 1 - (2 * t - 1)
    return 0.5 * (1 - (p * p * p - p * math.sin(p * math.pi))) + 0.5


# Bounce

def bounce_ease_out(t: float) -> float:
    if t < 4 / 11:
        return 121 * t * t / 16
    if t < 8 / 11:
        return (363 / 40.0 * t * t) - (99 / 10.0 * t) + 17 / 5.0
    if t < 9 / 10:
        return (4356 / 361.0 * t * t) - (35442 / 1805.0 * t) + 16061 / 1805.0
    return (54 / 5.0 * t * t) - (513 / 25.0 * t) + 268 / 25.0


def bounce_ease_in(t: float) -> float:
    return 1 - bounce_ease_out(1 - t)


def bounce_ease_in_out(t: float) -> float:
    if t < 0.5:
        return 0.5 * bounce_ease_in(t * 2)
    return 0.5 * bounce_ease_out(t * 2 - 1) + 0.5


# Catalog order matches the Kdenlive preset dropdown.
_CATALOG: Tuple[Tuple[str, EasingFunc], ...] = (
    ("LinearInOut", linear),
    ("QuadEaseIn", quad_ease_in),
    ("QuadEaseOut", quad_ease_out),
    ("QuadEaseInOut", quad_ease_in_out),
    ("CubicEaseIn", cubic_ease_in),
    ("CubicEaseOut", cubic_ease_out),
    ("CubicEaseInOut", cubic_ease_in_out),
    ("QuarticEaseIn", quartic_ease_in),
    ("QuarticEaseOut", quartic_ease_out),
    ("QuarticEaseInOut", quartic_ease_in_out),
    ("QuinticEaseIn", quintic_ease_in),
    ("QuinticEaseOut", quintic_ease_out),
    ("QuinticEaseInOut", quintic_ease_in_out),
    ("SineEaseIn", sine_ease_in),
    ("SineEaseOut", sine_ease_out),
    ("SineEaseInOut", sine_ease_in_out),
    ("CircularEaseIn", circular_ease_in),
    ("CircularEaseOut", circular_ease_out),
    ("CircularEaseInOut", circular_ease_in_out),
    ("ExponentialEaseIn", exponential_ease_in),
    ("ExponentialEaseOut", exponential_ease_out),
    ("ExponentialEaseInOut", exponential_ease_in_out),
    ("ElasticEaseIn", elastic_ease_in),
    ("ElasticEaseOut", elastic_ease_out),
    ("ElasticEaseInOut", elastic_ease_in_out),
    ("BackEaseIn", back_ease_in),
    ("BackEaseOut", back_ease_out),
    ("BackEaseInOut", back_ease_in_out),
    ("BounceEaseIn", bounce_ease_in),
    ("BounceEaseOut", bounce_ease_out),
    ("BounceEaseInOut", bounce_ease_in_out),
)

EASING_NAMES: Tuple[str, ...] = tuple(name for name, _ in _CATALOG)
EASINGS: Mapping[str, EasingFunc] = MappingProxyType(dict(_CATALOG))

DEFAULT_EASING = "LinearInOut"


def get_easing(name: str) -> EasingFunc:
    """Look up a catalog curve, raising UnknownCurveName if absent."""
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownCurveName(name) from None


def evaluate(name: str, t: float) -> float:
    """
    Evaluate named easing curve at t.

    t is not clamped; values outside [0, 1] follow each formula and may
    diverge (the exponential curves in particular).
    """
    return get_easing(name)(t)


def list_easings() -> List[str]:
    """Get catalog names in dropdown order."""
    return list(EASING_NAMES)


def repeat_curve(curve: EasingFunc, n: int) -> EasingFunc:
    """
    Tile a curve across n equal sub-ranges of [0, 1].

    Chunk k replays the curve shape scaled by 1/n on top of the k * curve(1) / n
    already accumulated, so each repetition continues from where the previous
    one ended instead of jumping back to curve(0).

    Args:
        curve: Base easing function
        n: Number of repetitions; n <= 1 returns curve unchanged

    Returns:
        Repeated easing function
    """
    if n <= 1:
        return curve

    end_value = curve(1)

    def repeated(x: float) -> float:
        k = min(max(math.floor(x * n), 0), n - 1)
        # rounding can push local just outside [0, 1]; circular curves need it inside
        local = min(max((x - k / n) * n, 0.0), 1.0)
        return end_value * k / n + curve(local) / n

    repeated.__name__ = f"{getattr(curve, '__name__', 'curve')}_x{n}"
    return repeated


def resolve_curve(curve: Union[str, EasingFunc], repeat: int = 1) -> EasingFunc:
    """Resolve a catalog name or function, wrapped by repeat_curve."""
    func = get_easing(curve) if isinstance(curve, str) else curve
    return repeat_curve(func, repeat)


def sample_curve(
    curve: Union[str, EasingFunc],
    num_points: int = 500,
    repeat: int = 1,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a curve for preview graphs.

    Args:
        curve: Catalog name or easing function
        num_points: Number of samples; x runs i / num_points for i < num_points
        repeat: Repetition count passed to repeat_curve

    Returns:
        (xs, ys) float64 arrays of length num_points
    """
    if num_points < 1:
        raise ValueError(f"num_points must be >= 1, got {num_points}")
    func = resolve_curve(curve, repeat)
    xs = np.arange(num_points, dtype=np.float64) / num_points
    ys = np.fromiter((func(float(x)) for x in xs), dtype=np.float64, count=num_points)
    return xs, ys


__all__ = [
    "EasingFunc",
    "EASINGS",
    "EASING_NAMES",
    "DEFAULT_EASING",
    "get_easing",
    "evaluate",
    "list_easings",
    "repeat_curve",
    "resolve_curve",
    "sample_curve",
    "bounce_ease_out",
    "bounce_ease_in",
    "bounce_ease_in_out",
]
