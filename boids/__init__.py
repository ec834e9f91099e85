"""Flocking simulation core: boids, steering rules and the flock."""

from .boid import Boid
from .flock import Flock
from .pose import Pose

__all__ = ["Boid", "Flock", "Pose"]
