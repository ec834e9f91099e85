"""Flock management - population container and per-tick dispatch."""

import numpy as np
from typing import Dict, Iterator, List, Optional

from config import boids as config
from .boid import Boid
from .pose import Pose
from . import kernels

BACKENDS = ("python", "numba")


class Flock:
    """
    Ordered, fixed-size population of boids.

    All kinematic state lives in contiguous arrays; each Boid's vectors are
    row views into them. ``update`` visits boids in insertion order without
    double-buffering, so later boids react to earlier boids' state from the
    same tick.
    """

    def __init__(
        self,
        num_boids: Optional[int] = None,
        seed: Optional[int] = None,
        backend: Optional[str] = None,
        **overrides,
    ):
        params = dict(config.BOIDS)
        flocking = dict(config.FLOCKING)
        for key, value in overrides.items():
            if key in flocking:
                flocking[key] = value
            elif key in params:
                params[key] = value
            else:
                raise ValueError(f"Unknown flock option: {key}")

        self.num_boids = params["count"] if num_boids is None else int(num_boids)
        if self.num_boids < 0:
            raise ValueError(f"num_boids must be >= 0, got {self.num_boids}")

        self.backend = params["backend"] if backend is None else backend
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}, expected one of {BACKENDS}")

        self.seed = params["seed"] if seed is None else seed
        self.rng = np.random.default_rng(self.seed)

        self.max_force = float(params["max_force"])
        self.max_speed = float(params["max_speed"])
        self.width = float(params["width"])
        self.height = float(params["height"])
        self.depth = float(params["depth"])
        self.view_distance = float(params["view_distance"])
        self.reset_acceleration = bool(params["reset_acceleration"])

        # Steering parameters passed to every Boid.update
        self.strength = float(flocking["strength"])
        self.fov = float(flocking["fov"])
        self.separation_factor = float(flocking["separation_factor"])
        self.alignment_factor = float(flocking["alignment_factor"])
        self.cohesion_factor = float(flocking["cohesion_factor"])

        n = self.num_boids
        self.positions = np.zeros((n, 3), dtype=np.float64)
        self.velocities = np.zeros((n, 3), dtype=np.float64)
        self.accelerations = np.zeros((n, 3), dtype=np.float64)
        self.rotations = np.tile(np.eye(3), (n, 1, 1))
        self.neighbor_counts = np.zeros(n, dtype=np.int64)

        self.boids: List[Boid] = [
            Boid.spawn(
                self.rng,
                position=self.positions[i],
                velocity=self.velocities[i],
                acceleration=self.accelerations[i],
                pose=Pose(self.positions[i], self.rotations[i]),
                max_force=self.max_force,
                max_speed=self.max_speed,
                width=self.width,
                height=self.height,
                depth=self.depth,
                view_distance=self.view_distance,
                reset_acceleration=self.reset_acceleration,
            )
            for i in range(n)
        ]
        self.tick = 0

        if self.backend == "numba":
            kernels.warmup()

        print(f"[Flock] Initialized {n:,} boids (seed={self.seed}, backend={self.backend})")

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def __getitem__(self, index: int) -> Boid:
        return self.boids[index]

    def update(self):
        """Advance every boid by one tick."""
        if self.backend == "numba":
            self._update_numba()
        else:
            self._update_python()
        self.tick += 1

    def _update_python(self):
        for i, boid in enumerate(self.boids):
            neighbors = boid.update(
                self.boids,
                strength=self.strength,
                fov=self.fov,
                separation_factor=self.separation_factor,
                alignment_factor=self.alignment_factor,
                cohesion_factor=self.cohesion_factor,
            )
            self.neighbor_counts[i] = len(neighbors)

    def _update_numba(self):
        kernels.flock_tick(
            self.positions,
            self.velocities,
            self.accelerations,
            self.rotations,
            self.neighbor_counts,
            self.max_force,
            self.max_speed,
            self.width,
            self.height,
            self.depth,
            self.view_distance,
            self.strength,
            self.fov,
            self.separation_factor,
            self.alignment_factor,
            self.cohesion_factor,
            self.reset_acceleration,
        )

    def stats(self) -> Dict[str, object]:
        """Summary of the current state for HUDs and headless reports."""
        if self.num_boids == 0:
            return {
                "tick": self.tick,
                "mean_speed": 0.0,
                "max_speed": 0.0,
                "mean_force": 0.0,
                "max_force": 0.0,
                "centroid": np.zeros(3),
                "mean_neighbors": 0.0,
            }

        speeds = np.linalg.norm(self.velocities, axis=1)
        forces = np.linalg.norm(self.accelerations, axis=1)
        return {
            "tick": self.tick,
            "mean_speed": float(speeds.mean()),
            "max_speed": float(speeds.max()),
            "mean_force": float(forces.mean()),
            "max_force": float(forces.max()),
            "centroid": self.positions.mean(axis=0),
            "mean_neighbors": float(self.neighbor_counts.mean()),
        }

    def check_invariants(self, tolerance: float = 1e-9) -> List[str]:
        """
        Describe every violated state invariant (empty list when healthy).

        Checks the speed and force limits and that each coordinate lies
        within its wrap bound. Freshly spawned boids may start outside the
        box, so this is meaningful once at least one tick has run.
        """
        problems = []
        bounds = np.array([self.width, self.height, self.depth])

        speeds = np.linalg.norm(self.velocities, axis=1)
        for i in np.nonzero(speeds > self.max_speed + tolerance)[0]:
            problems.append(f"boid {i}: speed {speeds[i]:.6f} > {self.max_speed}")

        forces = np.linalg.norm(self.accelerations, axis=1)
        for i in np.nonzero(forces > self.max_force + tolerance)[0]:
            problems.append(f"boid {i}: force {forces[i]:.6f} > {self.max_force}")

        outside = np.abs(self.positions) > bounds + tolerance
        for i in np.nonzero(outside.any(axis=1))[0]:
            problems.append(f"boid {i}: position {self.positions[i]} outside +/-{bounds}")

        return problems
