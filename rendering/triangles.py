"""Goid rendering as one colored triangle each."""

from OpenGL.GL import *
from config import goids as config

# Outline points along +Y; headings are measured from +X
OUTLINE = (
    (-1.0, -1.0),
    (0.0, 2.0),
    (1.0, -1.0),
)


class TriangleRenderer:
    """Draws a flock snapshot with one model transform per goid."""
    
    def __init__(self, scale: float = None):
        self.scale = config.VIEW["goid_scale"] if scale is None else scale
    
    def draw(self, snapshot):
        """
        Draw every goid in the snapshot.
        
        Args:
            snapshot: FlockSnapshot providing positions, headings and colors
        """
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        
        for (x, y), heading, color in zip(snapshot.positions, snapshot.headings, snapshot.colors):
            glPushMatrix()
            glTranslatef(float(x), float(y), 0.0)
            glRotatef(float(heading) - 90.0, 0.0, 0.0, 1.0)
            glScalef(self.scale, self.scale, 1.0)
            
            glColor4f(*color)
            glBegin(GL_TRIANGLES)
            for vx, vy in OUTLINE:
                glVertex2f(vx, vy)
            glEnd()
            
            glPopMatrix()
        
        glDisable(GL_BLEND)
