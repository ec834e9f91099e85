"""Rendering components for the 3D boids viewer."""

from .bounds import BoundsBox
from .flock_renderer import FlockRenderer
from .text import TextRenderer

__all__ = ["BoundsBox", "FlockRenderer", "TextRenderer"]
