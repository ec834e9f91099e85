"""Steering rules as pure functions.

Each rule takes the steering boid's position and a sequence of neighbors
(anything with ``position`` and ``velocity`` arrays) and returns a new,
unweighted steering vector. Nothing here mutates its inputs; the caller
decides how to fold the result into an acceleration accumulator.
"""

from typing import Sequence

import numpy as np

from .vector import distance


def _distance_ratio(position: np.ndarray, other: np.ndarray, view_distance: float) -> float:
    return distance(other, position) / view_distance


def separation(position: np.ndarray, neighbors: Sequence, view_distance: float) -> np.ndarray:
    """
    Push away from neighbors, inversely weighted by distance.

    Each offset ``position - neighbor`` is divided by the neighbor's distance
    as a fraction of ``view_distance``, which turns it into a push of length
    ``view_distance`` away from that neighbor. The pushes are summed, not
    averaged, so crowding raises the total. A neighbor sitting exactly on
    ``position`` has no direction to push along and contributes nothing.
    """
    steering = np.zeros(3)
    for other in neighbors:
        ratio = _distance_ratio(position, other.position, view_distance)
        if ratio == 0.0:
            continue
        steering += (position - other.position) / ratio
    return steering


def alignment(position: np.ndarray, neighbors: Sequence, view_distance: float) -> np.ndarray:
    """Average of neighbor velocities, each inversely weighted by distance."""
    steering = np.zeros(3)
    if len(neighbors) == 0:
        return steering
    for other in neighbors:
        ratio = _distance_ratio(position, other.position, view_distance)
        if ratio == 0.0:
            continue
        steering += other.velocity / ratio
    steering /= len(neighbors)
    return steering


def cohesion(position: np.ndarray, neighbors: Sequence) -> np.ndarray:
    """Offset from ``position`` to the centroid of the neighbors."""
    if len(neighbors) == 0:
        return np.zeros(3)
    centroid = np.zeros(3)
    for other in neighbors:
        centroid += other.position
    centroid /= len(neighbors)
    return centroid - position
