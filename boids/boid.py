"""Individual boid entity with position, velocity, and behaviors."""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from . import steering
from .pose import Pose
from .vector import angle_to, clamp_length, distance

DEFAULT_FOV = math.pi * 0.8
DEFAULT_STRENGTH = 0.006
INITIAL_SPEED_SCALE = 0.1


@dataclass(eq=False)
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Attributes:
        position: 3D position vector
        velocity: 3D velocity vector (displacement per tick)
        acceleration: 3D steering accumulator (carried between ticks
            unless reset_acceleration is set)
        max_force: Maximum acceleration magnitude
        max_speed: Maximum velocity magnitude
        width, height, depth: Half-extents of the wrap volume
        view_distance: Perception radius
        reset_acceleration: Zero the accumulator at the start of update()
        pose: Renderable handle, shares ``position``

    The vectors may be row views into a Flock's arrays, so every update
    here writes in place.
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max_force: float = 0.4
    max_speed: float = 0.6
    width: float = 80.0
    height: float = 50.0
    depth: float = 50.0
    view_distance: float = 15.0
    reset_acceleration: bool = False
    pose: Optional[Pose] = None

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)
        self.acceleration = np.asarray(self.acceleration, dtype=np.float64)
        if self.pose is None:
            self.pose = Pose(self.position)

    @classmethod
    def spawn(cls, rng: np.random.Generator, **kwargs) -> "Boid":
        """
        Create a boid at a random spot with a small random velocity.

        Each position component is ``(r * 2 - 0.5) * extent`` and each
        velocity component ``(r * 2 - 0.5) * 0.1`` for uniform draws ``r``.
        Array fields passed in kwargs are used as storage and overwritten.
        """
        boid = cls(**kwargs)
        boid.position[:] = (rng.random(3) * 2 - 0.5) * boid.extents
        boid.velocity[:] = (rng.random(3) * 2 - 0.5) * INITIAL_SPEED_SCALE
        boid.acceleration[:] = 0.0
        return boid

    @property
    def extents(self) -> np.ndarray:
        return np.array([self.width, self.height, self.depth])

    def get_neighbors(self, boids: Sequence["Boid"], fov: float = DEFAULT_FOV) -> List["Boid"]:
        """
        Boids this one can perceive.

        A boid is perceived when it is closer than ``view_distance`` and the
        angle between our velocity and the direction to it is below ``fov``.
        Input order is preserved; this boid is never included.
        """
        neighbors = []
        for other in boids:
            if other is self:
                continue
            if distance(self.position, other.position) >= self.view_distance:
                continue
            if angle_to(self.velocity, other.position - self.position) < fov:
                neighbors.append(other)
        return neighbors

    def separate(self, neighbors: Sequence["Boid"], strength: float = 0.003) -> np.ndarray:
        """Add the separation force to the accumulator and return it."""
        if neighbors:
            self.acceleration += steering.separation(
                self.position, neighbors, self.view_distance
            ) * strength
        return self.acceleration

    def align(self, neighbors: Sequence["Boid"], strength: float = 0.011) -> np.ndarray:
        """Add the alignment force to the accumulator and return it."""
        if neighbors:
            self.acceleration += steering.alignment(
                self.position, neighbors, self.view_distance
            ) * strength
        return self.acceleration

    def cohese(self, neighbors: Sequence["Boid"], strength: float = 0.002) -> np.ndarray:
        """Add the cohesion force to the accumulator and return it."""
        if neighbors:
            self.acceleration += steering.cohesion(self.position, neighbors) * strength
        return self.acceleration

    def update(
        self,
        boids: Sequence["Boid"],
        strength: float = DEFAULT_STRENGTH,
        fov: float = DEFAULT_FOV,
        separation_factor: float = 0.2,
        alignment_factor: float = 4.0,
        cohesion_factor: float = 3.0,
    ) -> List["Boid"]:
        """Run one tick: perceive, steer, integrate and wrap. Returns the neighbors used."""
        if self.reset_acceleration:
            self.acceleration[:] = 0.0

        # Rules accumulate in order into the same vector
        neighbors = self.get_neighbors(boids, fov)
        self.separate(neighbors, separation_factor * strength)
        self.align(neighbors, alignment_factor * strength)
        self.cohese(neighbors, cohesion_factor * strength)

        self.move()
        self.constrain(self.width, self.height)
        return neighbors

    def move(self):
        """
        Integrate one tick.

        Position advances by the clamped pre-update velocity; the clamped
        acceleration then feeds velocity, which is clamped again so the
        speed limit holds between ticks. The pose looks toward
        ``position - acceleration``.
        """
        clamp_length(self.velocity, self.max_speed)
        clamp_length(self.acceleration, self.max_force)
        self.position += self.velocity
        self.velocity += self.acceleration
        clamp_length(self.velocity, self.max_speed)
        self.pose.look_at(self.position - self.acceleration)

    def constrain(self, width: Optional[float] = None, height: Optional[float] = None):
        """Wrap the position around the box; depth always uses ``self.depth``."""
        bounds = (
            self.width if width is None else width,
            self.height if height is None else height,
            self.depth,
        )
        for axis, bound in enumerate(bounds):
            if self.position[axis] > bound:
                self.position[axis] = -bound
            if self.position[axis] < -bound:
                self.position[axis] = bound
