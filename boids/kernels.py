"""Numba JIT-compiled flock tick over contiguous state arrays.

Mirrors Boid.update exactly, including the in-tick ordering: boids are
visited one after another and later boids see earlier boids' updated
state. The outer loop is therefore sequential (no prange).
"""

import math
import numpy as np
from numba import njit

from .pose import look_at_basis


@njit(cache=True)
def clamp_row(v: np.ndarray, max_length: float):
    """Cap the magnitude of a 3-vector in place."""
    mag = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if mag > max_length:
        scale = max_length / mag
        v[0] *= scale
        v[1] *= scale
        v[2] *= scale


@njit(cache=True)
def flock_tick(
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    rotations: np.ndarray,
    neighbor_counts: np.ndarray,
    max_force: float,
    max_speed: float,
    width: float,
    height: float,
    depth: float,
    view_distance: float,
    strength: float,
    fov: float,
    separation_factor: float,
    alignment_factor: float,
    cohesion_factor: float,
    reset_acceleration: bool,
):
    """Advance every boid by one tick, in index order."""
    num_boids = positions.shape[0]
    sep_strength = separation_factor * strength
    align_strength = alignment_factor * strength
    coh_strength = cohesion_factor * strength
    half_pi = math.pi / 2

    for i in range(num_boids):
        pos_i = positions[i]
        vel_i = velocities[i]
        acc_i = accelerations[i]

        if reset_acceleration:
            acc_i[0] = 0.0
            acc_i[1] = 0.0
            acc_i[2] = 0.0

        vel_sq = vel_i[0] * vel_i[0] + vel_i[1] * vel_i[1] + vel_i[2] * vel_i[2]

        sep_x, sep_y, sep_z = 0.0, 0.0, 0.0
        align_x, align_y, align_z = 0.0, 0.0, 0.0
        coh_x, coh_y, coh_z = 0.0, 0.0, 0.0
        count = 0

        for j in range(num_boids):
            if i == j:
                continue

            dx = positions[j, 0] - pos_i[0]
            dy = positions[j, 1] - pos_i[1]
            dz = positions[j, 2] - pos_i[2]
            dist = math.sqrt(dx * dx + dy * dy + dz * dz)
            if dist >= view_distance:
                continue

            # Angle between heading and direction to j; pi/2 when undefined
            denominator = math.sqrt(vel_sq * (dx * dx + dy * dy + dz * dz))
            if denominator == 0.0:
                angle = half_pi
            else:
                theta = (vel_i[0] * dx + vel_i[1] * dy + vel_i[2] * dz) / denominator
                angle = math.acos(max(-1.0, min(1.0, theta)))
            if angle >= fov:
                continue

            count += 1
            ratio = dist / view_distance
            if ratio != 0.0:
                sep_x += (pos_i[0] - positions[j, 0]) / ratio
                sep_y += (pos_i[1] - positions[j, 1]) / ratio
                sep_z += (pos_i[2] - positions[j, 2]) / ratio
                align_x += velocities[j, 0] / ratio
                align_y += velocities[j, 1] / ratio
                align_z += velocities[j, 2] / ratio
            coh_x += positions[j, 0]
            coh_y += positions[j, 1]
            coh_z += positions[j, 2]

        neighbor_counts[i] = count

        if count > 0:
            acc_i[0] += sep_x * sep_strength
            acc_i[1] += sep_y * sep_strength
            acc_i[2] += sep_z * sep_strength

            acc_i[0] += (align_x / count) * align_strength
            acc_i[1] += (align_y / count) * align_strength
            acc_i[2] += (align_z / count) * align_strength

            acc_i[0] += (coh_x / count - pos_i[0]) * coh_strength
            acc_i[1] += (coh_y / count - pos_i[1]) * coh_strength
            acc_i[2] += (coh_z / count - pos_i[2]) * coh_strength

        # Move
        clamp_row(vel_i, max_speed)
        clamp_row(acc_i, max_force)
        pos_i[0] += vel_i[0]
        pos_i[1] += vel_i[1]
        pos_i[2] += vel_i[2]
        vel_i[0] += acc_i[0]
        vel_i[1] += acc_i[1]
        vel_i[2] += acc_i[2]
        clamp_row(vel_i, max_speed)

        target_x = pos_i[0] - acc_i[0]
        target_y = pos_i[1] - acc_i[1]
        target_z = pos_i[2] - acc_i[2]
        look_at_basis(
            target_x - pos_i[0],
            target_y - pos_i[1],
            target_z - pos_i[2],
            rotations[i],
        )

        # Constrain (toroidal wrap)
        for axis in range(3):
            if axis == 0:
                bound = width
            elif axis == 1:
                bound = height
            else:
                bound = depth
            if pos_i[axis] > bound:
                pos_i[axis] = -bound
            if pos_i[axis] < -bound:
                pos_i[axis] = bound


def warmup():
    """Pre-compile the tick kernel on a tiny flock."""
    n = 4
    pos = np.random.rand(n, 3) * 10
    vel = np.random.rand(n, 3) * 0.1
    acc = np.zeros((n, 3))
    rot = np.zeros((n, 3, 3))
    counts = np.zeros(n, dtype=np.int64)
    flock_tick(
        pos, vel, acc, rot, counts,
        0.4, 0.6, 80.0, 50.0, 50.0, 15.0,
        0.006, math.pi * 0.8, 0.2, 4.0, 3.0, False
    )
