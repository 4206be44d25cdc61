"""2D view camera with pan and smooth zoom."""

import numpy as np
from OpenGL.GL import *
from config import goids as config


class Camera:
    """Orthographic camera centered on a point of the world plane."""
    
    def __init__(self):
        self.center = np.array([0.0, 0.0])
        self.half_extent = config.VIEW["half_extent"]
        self.target_half_extent = self.half_extent
        self.zoom_smoothing = config.VIEW["zoom_smoothing"]
    
    def _clamp(self, value: float) -> float:
        return max(
            config.VIEW["min_half_extent"],
            min(config.VIEW["max_half_extent"], value)
        )
    
    def pan(self, dx: float, dy: float):
        """Move the view center by a fraction of the visible half-extent."""
        self.center += np.array([dx, dy]) * self.half_extent
    
    def zoom(self, delta: float):
        """Immediately change the visible half-extent."""
        self.half_extent = self._clamp(self.half_extent + delta)
        self.target_half_extent = self.half_extent
    
    def zoom_smooth(self, delta: float):
        """Smoothly change the visible half-extent."""
        self.target_half_extent = self._clamp(self.target_half_extent + delta)
    
    def follow(self, point):
        """Recenter the view on a world point."""
        self.center = np.array([float(point[0]), float(point[1])])
    
    def update(self, dt: float):
        """Update camera state (called each frame)."""
        self.half_extent += (self.target_half_extent - self.half_extent) * self.zoom_smoothing * dt
        self.half_extent = self._clamp(self.half_extent)
    
    def apply(self, aspect: float):
        """Load the orthographic projection for the current view."""
        w = self.half_extent * aspect
        h = self.half_extent
        cx, cy = self.center
        
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(cx - w, cx + w, cy - h, cy + h, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
