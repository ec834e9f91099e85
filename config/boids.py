"""Configuration for 3D Boids flocking simulation."""

import math

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "3D Boids"
}

CAMERA = {
    "fov": 50.0,
    "near_clip": 1.0,
    "far_clip": 1000.0,
    "initial_radius": 100.0,
    "initial_theta": 90.0,     # Looking down -z from +z
    "initial_phi": 0.0,
    "min_radius": 5.0,
    "max_radius": 600.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 20.0,
    "mouse_sensitivity": 0.3
}

SCENE = {
    "fog_density": 0.01,
    "grid_color": (0.55, 0.45, 0.38),
}

BOIDS = {
    "count": 125,
    "seed": None,               # None = fresh entropy each run
    "backend": "python",        # "python" or "numba"
    "max_force": 0.4,
    "max_speed": 0.6,
    "width": 80.0,              # Half-extents of the wrap volume
    "height": 50.0,
    "depth": 50.0,
    "view_distance": 15.0,      # Perception radius
    "reset_acceleration": False,
}

FLOCKING = {
    "strength": 0.006,          # Base steering strength
    "fov": math.pi * 0.8,       # Field of view (radians from heading)
    "separation_factor": 0.2,
    "alignment_factor": 4.0,
    "cohesion_factor": 3.0,
}

MESH = {
    "radius": 0.5,
    "length": 2.0,
    "segments": 5,
    "color": (0.545, 0.271, 0.075),  # saddlebrown
}

COLORS = {
    "background": (0.937, 0.820, 0.710, 1.0),  # #efd1b5
    "text": (40, 30, 20)
}
