"""Text rendering for HUD elements."""

import pygame
from OpenGL.GL import *
from config import goids as config


class TextRenderer:
    """Renders HUD lines using pygame fonts blitted through OpenGL."""
    
    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])
    
    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        """
        Draw text with its top-left corner at (x, y) pixels from the top-left.
        """
        text_surface = self.font.render(text, True, self.color)
        text_data = pygame.image.tobytes(text_surface, "RGBA", True)
        w, h = text_surface.get_size()
        
        # Pixel-space projection, restored afterwards
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, text_data)
        glDisable(GL_BLEND)
        
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
    
    def draw_lines(self, lines, screen_size: tuple, x: int = 10, y: int = 10, spacing: int = 22):
        """Draw several HUD lines stacked downward."""
        for i, line in enumerate(lines):
            self.draw_text(line, x, y + i * spacing, screen_size)
