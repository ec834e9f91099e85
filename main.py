"""
3D Boids Simulation
===================

A flocking simulation with an orbital 3D camera.

Controls:
    - W/S: Rotate camera up/down
    - A/D: Rotate camera left/right
    - Q/E: Zoom in/out
    - Mouse drag: Rotate camera
    - Mouse wheel: Zoom
    - Home: Reset camera
    - ESC: Quit
"""

from core.application import main


if __name__ == "__main__":
    main()
