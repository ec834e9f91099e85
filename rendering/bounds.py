"""Wireframe box marking the flock's wrap volume."""

from OpenGL.GL import *
from config import boids as config


class BoundsBox:
    """Draws the axis-aligned box that boids wrap around."""

    def __init__(self, width: float, height: float, depth: float):
        self.extents = (width, height, depth)
        self.color = config.SCENE["grid_color"]

    def draw(self):
        """Draw the 12 box edges."""
        w, h, d = self.extents

        glBegin(GL_LINES)
        glColor3f(*self.color)

        # X-axis edges
        glVertex3f(-w, -h, -d); glVertex3f(w, -h, -d)
        glVertex3f(-w, h, -d); glVertex3f(w, h, -d)
        glVertex3f(-w, -h, d); glVertex3f(w, -h, d)
        glVertex3f(-w, h, d); glVertex3f(w, h, d)

        # Y-axis edges
        glVertex3f(-w, -h, -d); glVertex3f(-w, h, -d)
        glVertex3f(w, -h, -d); glVertex3f(w, h, -d)
        glVertex3f(-w, -h, d); glVertex3f(-w, h, d)
        glVertex3f(w, -h, d); glVertex3f(w, h, d)

        # Z-axis edges
        glVertex3f(-w, -h, -d); glVertex3f(-w, -h, d)
        glVertex3f(w, -h, -d); glVertex3f(w, -h, d)
        glVertex3f(-w, h, -d); glVertex3f(-w, h, d)
        glVertex3f(w, h, -d); glVertex3f(w, h, d)

        glEnd()
