"""Renderable handle for a boid: a position plus a look-at rotation."""

import math
import numpy as np
from numba import njit

WORLD_UP = (0.0, 1.0, 0.0)


@njit(cache=True)
def look_at_basis(dx: float, dy: float, dz: float, out: np.ndarray) -> np.ndarray:
    """
    Write into ``out`` the rotation whose local +z axis points along (dx, dy, dz).

    Columns of ``out`` are the local x, y and z axes in world space. World up
    is +y. A zero direction faces +z; a direction parallel to up is nudged
    off-axis so the basis stays well defined.
    """
    ux, uy, uz = WORLD_UP

    if dx * dx + dy * dy + dz * dz == 0.0:
        dz = 1.0
    inv = 1.0 / math.sqrt(dx * dx + dy * dy + dz * dz)
    zx, zy, zz = dx * inv, dy * inv, dz * inv

    # x = up cross z
    xx = uy * zz - uz * zy
    xy = uz * zx - ux * zz
    xz = ux * zy - uy * zx
    if xx * xx + xy * xy + xz * xz == 0.0:
        if abs(uz) == 1.0:
            zx += 0.0001
        else:
            zz += 0.0001
        inv = 1.0 / math.sqrt(zx * zx + zy * zy + zz * zz)
        zx, zy, zz = zx * inv, zy * inv, zz * inv
        xx = uy * zz - uz * zy
        xy = uz * zx - ux * zz
        xz = ux * zy - uy * zx

    inv = 1.0 / math.sqrt(xx * xx + xy * xy + xz * xz)
    xx, xy, xz = xx * inv, xy * inv, xz * inv

    # y = z cross x
    yx = zy * xz - zz * xy
    yy = zz * xx - zx * xz
    yz = zx * xy - zy * xx

    out[0, 0], out[0, 1], out[0, 2] = xx, yx, zx
    out[1, 0], out[1, 1], out[1, 2] = xy, yy, zy
    out[2, 0], out[2, 1], out[2, 2] = xz, yz, zz
    return out


class Pose:
    """
    Position and orientation of a boid as seen by a renderer.

    ``position`` is shared with the owning boid, so the pose always reports
    the current location. ``rotation`` is only refreshed by ``look_at``.
    """

    def __init__(self, position: np.ndarray, rotation: np.ndarray = None):
        self.position = position
        self.rotation = np.eye(3) if rotation is None else rotation

    def look_at(self, target: np.ndarray):
        """Turn so the local +z axis points from ``position`` toward ``target``."""
        look_at_basis(
            target[0] - self.position[0],
            target[1] - self.position[1],
            target[2] - self.position[2],
            self.rotation,
        )

    @property
    def forward(self) -> np.ndarray:
        """Local +z axis in world space."""
        return self.rotation[:, 2].copy()

    def matrix(self) -> np.ndarray:
        """4x4 model matrix (row-major) combining rotation and translation."""
        m = np.eye(4)
        m[:3, :3] = self.rotation
        m[:3, 3] = self.position
        return m
