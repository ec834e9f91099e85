"""Total 3-vector helpers.

Every function here is defined for zero-length input and returns a
deterministic value instead of raising or producing NaN, so a degenerate
boid configuration can never stop the simulation.
"""

import math
import numpy as np


def length(v: np.ndarray) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def clamp_length(v: np.ndarray, max_length: float) -> np.ndarray:
    """
    Cap the magnitude of ``v`` in place, keeping its direction.

    Vectors already within ``max_length`` (including the zero vector) are
    left untouched.
    """
    mag = length(v)
    if mag > max_length:
        v *= max_length / mag
    return v


def angle_to(a: np.ndarray, b: np.ndarray) -> float:
    """
    Angle in radians between two vectors.

    Returns pi/2 when either vector has zero length.
    """
    denominator = math.sqrt(
        (a[0] * a[0] + a[1] * a[1] + a[2] * a[2]) *
        (b[0] * b[0] + b[1] * b[1] + b[2] * b[2])
    )
    if denominator == 0.0:
        return math.pi / 2
    theta = (a[0] * b[0] + a[1] * b[1] + a[2] * b[2]) / denominator
    return math.acos(max(-1.0, min(1.0, theta)))
