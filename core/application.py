"""Viewer host: window, render loop and one flock tick per frame."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import boids as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import BoundsBox, FlockRenderer, TextRenderer
from boids import Flock


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(self, num_boids=None, seed=None, backend=None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera()
        self.input_handler = InputHandler(self.camera)

        # Simulation
        self.flock = Flock(num_boids=num_boids, seed=seed, backend=backend)

        # Rendering components
        self.bounds = BoundsBox(self.flock.width, self.flock.height, self.flock.depth)
        self.flock_renderer = FlockRenderer(self.flock)
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glEnable(GL_FOG)
        glFogi(GL_FOG_MODE, GL_EXP2)
        glFogf(GL_FOG_DENSITY, config.SCENE["fog_density"])
        glFogfv(GL_FOG_COLOR, config.COLORS["background"])

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            config.WINDOW["width"] / config.WINDOW["height"],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Camera eases with wall time; the flock advances one tick per frame."""
        dt = min(dt, 0.05)

        self.input_handler.handle_continuous_input(dt)
        self.camera.update(dt)
        self.flock.update()

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()

        self.bounds.draw()
        self.flock_renderer.draw()

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.text_renderer.draw_text(
            f"Boids: {len(self.flock)}  |  Tick: {self.flock.tick}  |  FPS: {self.fps:.0f}",
            10, 10, screen_size
        )
        self.text_renderer.draw_text(
            f"θ: {self.camera.theta:.1f}°  φ: {self.camera.phi:.1f}°  Zoom: {self.camera.radius:.1f}",
            10, 35, screen_size
        )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(60) / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()


def main():
    app = Application()
    app.run()
