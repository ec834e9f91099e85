"""Flock rendering - oriented cones built with Numba and drawn from VBOs."""

import math
import numpy as np
from numba import njit, prange
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import boids as config


def build_cone_template(radius: float, length: float, segments: int) -> np.ndarray:
    """
    Triangles of a cone in boid-local space.

    The tip sits at local -z and the base ring at +z, so a boid whose pose
    faces ``position - acceleration`` points its tip along the acceleration.
    Each segment contributes a side triangle and a base-cap triangle.
    """
    half = length / 2
    tip = (0.0, 0.0, -half)
    center = (0.0, 0.0, half)
    ring = [
        (radius * math.cos(2 * math.pi * k / segments),
         radius * math.sin(2 * math.pi * k / segments),
         half)
        for k in range(segments)
    ]

    triangles = []
    for k in range(segments):
        a = ring[k]
        b = ring[(k + 1) % segments]
        triangles.extend([tip, a, b])
        triangles.extend([center, b, a])
    return np.array(triangles, dtype=np.float64)


@njit(parallel=True, cache=True)
def build_vertices_numba(
    positions: np.ndarray,
    rotations: np.ndarray,
    template: np.ndarray,
    vertices: np.ndarray,
    num_boids: int
):
    """Numba JIT-compiled vertex building: world = position + R @ local."""
    verts_per_boid = template.shape[0]
    for i in prange(num_boids):
        px, py, pz = positions[i, 0], positions[i, 1], positions[i, 2]
        r = rotations[i]
        base = i * verts_per_boid
        for v in range(verts_per_boid):
            lx, ly, lz = template[v, 0], template[v, 1], template[v, 2]
            vertices[base + v, 0] = px + r[0, 0] * lx + r[0, 1] * ly + r[0, 2] * lz
            vertices[base + v, 1] = py + r[1, 0] * lx + r[1, 1] * ly + r[1, 2] * lz
            vertices[base + v, 2] = pz + r[2, 0] * lx + r[2, 1] * ly + r[2, 2] * lz


class FlockRenderer:
    """Draws every boid of a flock as a small cone facing its pose."""

    def __init__(self, flock):
        self.flock = flock
        self.template = build_cone_template(
            config.MESH["radius"], config.MESH["length"], config.MESH["segments"]
        )
        self.verts_per_boid = self.template.shape[0]

        n = len(flock)
        self._vertices = np.zeros((n * self.verts_per_boid, 3), dtype=np.float32)
        self._vert_colors = self._build_colors(n)

        self._vbo_vertices = None
        self._vbo_colors = None
        self._vbos_initialized = False
        self._vbo_attempted = False
        self._scratch = np.zeros((n * self.verts_per_boid, 3), dtype=np.float64)

    def _build_colors(self, count: int) -> np.ndarray:
        """Flat mesh color; base caps slightly darker so the heading reads."""
        r, g, b = config.MESH["color"]
        per_boid = np.empty((self.verts_per_boid, 3), dtype=np.float32)
        for tri in range(self.verts_per_boid // 3):
            shade = 1.0 if tri % 2 == 0 else 0.7
            per_boid[tri * 3:tri * 3 + 3] = (r * shade, g * shade, b * shade)
        return np.tile(per_boid, (count, 1))

    def _init_vbos(self):
        """Initialize VBOs for fast GPU rendering."""
        if self._vbo_attempted:
            return
        self._vbo_attempted = True

        try:
            self._vbo_vertices = vbo.VBO(self._vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_colors = vbo.VBO(self._vert_colors, usage=GL_STATIC_DRAW)
            self._vbos_initialized = True
        except Exception as e:
            print(f"[Render] VBO init failed, using client arrays: {e}")
            self._vbos_initialized = False

    def _build_vertices(self) -> int:
        """Build vertex data using Numba."""
        n = len(self.flock)
        if n == 0:
            return 0

        build_vertices_numba(
            self.flock.positions,
            self.flock.rotations,
            self.template,
            self._scratch,
            n
        )
        self._vertices[:] = self._scratch
        return n * self.verts_per_boid

    def draw(self):
        """Render all boids."""
        self._init_vbos()

        total_verts = self._build_vertices()
        if total_verts == 0:
            return

        if self._vbos_initialized:
            self._vbo_vertices.set_array(self._vertices)
            self._vbo_colors.set_array(self._vert_colors)

            self._vbo_vertices.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(3, GL_FLOAT, 0, None)

            self._vbo_colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, None)

            glDrawArrays(GL_TRIANGLES, 0, total_verts)

            self._vbo_vertices.unbind()
            self._vbo_colors.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
        else:
            glEnableClientState(GL_VERTEX_ARRAY)
            glEnableClientState(GL_COLOR_ARRAY)

            glVertexPointer(3, GL_FLOAT, 0, self._vertices)
            glColorPointer(3, GL_FLOAT, 0, self._vert_colors)
            glDrawArrays(GL_TRIANGLES, 0, total_verts)

            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
