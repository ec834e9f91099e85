"""Passive camera controls: the only input the viewer accepts."""

import pygame
from pygame.locals import *
from config import boids as config

from .camera import Camera

ROTATE_KEYS = {
    K_a: (-1, 0),
    K_d: (1, 0),
    K_w: (0, 1),
    K_s: (0, -1),
}

ZOOM_KEYS = {
    K_q: -1,
    K_e: 1,
}


class InputHandler:
    """Maps keyboard and mouse input onto the orbit camera."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.mouse_dragging = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            if event.key == K_HOME:
                self.camera.reset()
        elif event.type == MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_dragging = True
        elif event.type == MOUSEBUTTONUP and event.button == 1:
            self.mouse_dragging = False
        elif event.type == MOUSEMOTION and self.mouse_dragging:
            dx, dy = event.rel
            sensitivity = config.CAMERA["mouse_sensitivity"]
            self.camera.rotate(dx * sensitivity, -dy * sensitivity)
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(-event.y * config.CAMERA["keyboard_zoom_speed"] * 0.5)

        return True

    def handle_continuous_input(self, dt: float):
        """Apply held rotate/zoom keys (called each frame)."""
        keys = pygame.key.get_pressed()
        rot_speed = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_speed = config.CAMERA["keyboard_zoom_speed"] * dt

        for key, (d_theta, d_phi) in ROTATE_KEYS.items():
            if keys[key]:
                self.camera.rotate(d_theta * rot_speed, d_phi * rot_speed)

        for key, direction in ZOOM_KEYS.items():
            if keys[key]:
                self.camera.zoom(direction * zoom_speed)
