"""Main application class that ties everything together."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import goids as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import TextRenderer, TriangleRenderer
from goids import Ticker, World


class Application:
    """
    Window, render loop and simulation driver.
    
    By default the world is stepped and drawn in the same loop. With
    `threaded=True` a Ticker steps it in the background and each frame draws
    the latest published snapshot.
    """
    
    def __init__(self, preset: dict, seed: int = None, threaded: bool = False, time_scaled: bool = None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])
        
        self.camera = Camera()
        self.input_handler = InputHandler(self.camera)
        self.triangles = TriangleRenderer()
        self.text_renderer = TextRenderer()
        
        self.preset = preset
        self.seed = seed
        self.threaded = threaded
        self.time_scaled = time_scaled
        self.ticker = None

        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False
        self.show_help = True
        self._build_world()
        self.fps = 0
        
        self.aspect = config.WINDOW["width"] / config.WINDOW["height"]
        glClearColor(*config.COLORS["background"])
        print(f"[App] Ready! {len(self.world):,} goids ({'threaded' if threaded else 'single loop'})")
    
    def _build_world(self):
        if self.ticker is not None:
            self.ticker.stop()
            self.ticker = None
        
        self.world = World.populate(self.preset, seed=self.seed, time_scaled=self.time_scaled)
        if self.threaded:
            self.ticker = Ticker(self.world)
            if self.paused:
                self.ticker.pause()
            self.ticker.start()
    
    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == KEYDOWN and event.key == K_SPACE:
                self.paused = not self.paused
                if self.ticker is not None:
                    if self.paused:
                        self.ticker.pause()
                    else:
                        self.ticker.resume()
                print(f"[App] {'Paused' if self.paused else 'Running'}")
            elif event.type == KEYDOWN and event.key == K_r:
                print("[App] Resetting simulation...")
                self._build_world()
            elif event.type == KEYDOWN and event.key == K_c:
                self.camera.follow(self._current_snapshot().centroid)
            elif event.type == KEYDOWN and event.key == K_h:
                self.show_help = not self.show_help
            elif not self.input_handler.handle_event(event):
                self.running = False
    
    def _update(self, dt: float):
        """Advance camera and, in single-loop mode, the world."""
        dt = min(dt, config.SIMULATION["max_dt"])
        
        self.input_handler.handle_continuous_input(dt)
        self.camera.update(dt)
        
        if self.ticker is None and not self.paused:
            self.world.step(dt)
    
    def _current_snapshot(self):
        if self.ticker is not None:
            return self.ticker.latest()
        return self.world.snapshot()
    
    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply(self.aspect)
        
        snapshot = self._current_snapshot()
        self.triangles.draw(snapshot)
        
        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        status = "PAUSED" if self.paused else "RUNNING"
        lines = [
            f"Goids: {snapshot.count:,}  |  Tick: {snapshot.tick:,}  |  FPS: {self.fps:.0f}  |  {status}",
        ]
        if self.show_help:
            lines.append("Arrows: Pan | QE/Wheel: Zoom | C: Center | SPACE: Pause | R: Reset | H: Help")
        self.text_renderer.draw_lines(lines, screen_size)
        
        pygame.display.flip()
    
    def run(self):
        """Main application loop."""
        while self.running:
            dt = self.clock.tick() / 1000.0
            self.fps = self.clock.get_fps()
            
            self._handle_events()
            self._update(dt)
            self._render()
        
        if self.ticker is not None:
            self.ticker.stop()
        pygame.quit()
        print("[App] Shutdown complete")
