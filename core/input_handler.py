"""Input handling for keyboard and mouse events."""

import pygame
from pygame.locals import *
from config import goids as config

from .camera import Camera


class InputHandler:
    """Handles keyboard and mouse input for the 2D view."""
    
    def __init__(self, camera: Camera):
        self.camera = camera
    
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
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(-event.y * config.VIEW["zoom_speed"] * 0.1)
        
        return True
    
    def handle_continuous_input(self, dt: float):
        """Handle held keys (called each frame)."""
        keys = pygame.key.get_pressed()
        pan_speed = config.VIEW["pan_speed"] * dt
        zoom_speed = config.VIEW["zoom_speed"] * dt
        
        if keys[K_LEFT]:
            self.camera.pan(-pan_speed, 0)
        if keys[K_RIGHT]:
            self.camera.pan(pan_speed, 0)
        if keys[K_UP]:
            self.camera.pan(0, pan_speed)
        if keys[K_DOWN]:
            self.camera.pan(0, -pan_speed)
        
        if keys[K_q]:
            self.camera.zoom(-zoom_speed)
        if keys[K_e]:
            self.camera.zoom(zoom_speed)
