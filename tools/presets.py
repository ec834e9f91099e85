"""
Flocking Presets Library
========================

Named parameter sets for the flock. Each preset lists only the options it
changes; everything else falls back to config.boids.

Categories:
- REFERENCE: The stock behavior
- VARIANT: Same population, different steering balance
- SCALE: Larger populations
"""

import math
from typing import Dict, List, Tuple

PRESETS: Dict[str, dict] = {}

PRESETS["reference"] = {
    "name": "Reference",
    "description": "Stock parameters, 125 boids",
    "category": "REFERENCE",
    "overrides": {},
}

PRESETS["reset"] = {
    "name": "Fresh Steering",
    "description": "Steering accumulator zeroed every tick",
    "category": "REFERENCE",
    "overrides": {
        "reset_acceleration": True,
    },
}

PRESETS["calm"] = {
    "name": "Calm",
    "description": "Half-strength steering, lazier turns",
    "category": "VARIANT",
    "overrides": {
        "strength": 0.003,
    },
}

PRESETS["loner"] = {
    "name": "Loners",
    "description": "Strong separation, weak cohesion",
    "category": "VARIANT",
    "overrides": {
        "separation_factor": 1.0,
        "cohesion_factor": 0.5,
    },
}

PRESETS["tunnel"] = {
    "name": "Tunnel Vision",
    "description": "Narrow field of view and short sight",
    "category": "VARIANT",
    "overrides": {
        "fov": 0.35 * math.pi,
        "view_distance": 8.0,
    },
}

PRESETS["swarm"] = {
    "name": "Swarm",
    "description": "400 boids with a shorter perception radius",
    "category": "SCALE",
    "overrides": {
        "count": 400,
        "view_distance": 10.0,
    },
}

PRESETS["murmuration"] = {
    "name": "Murmuration",
    "description": "1000 boids, use with the numba backend",
    "category": "SCALE",
    "overrides": {
        "count": 1000,
        "view_distance": 8.0,
        "backend": "numba",
    },
}


def get_preset_list() -> List[Tuple[str, dict]]:
    """Get list of all presets sorted by category."""
    category_order = ["REFERENCE", "VARIANT", "SCALE"]

    return sorted(
        PRESETS.items(),
        key=lambda x: (category_order.index(x[1]["category"]) if x[1]["category"] in category_order else 99, x[0])
    )


def get_preset_overrides(key: str) -> dict:
    """Copy of a preset's Flock keyword overrides; unknown keys raise KeyError."""
    return dict(PRESETS[key]["overrides"])
