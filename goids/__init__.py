"""2D goids flocking simulation."""

from .goid import Goid, new_goid
from .steering import Alignment, Cohesion, Separation, build_behaviors, centroid
from .world import FlockSnapshot, World
from .ticker import Ticker

__all__ = [
    "Goid", "new_goid",
    "Cohesion", "Separation", "Alignment", "build_behaviors", "centroid",
    "FlockSnapshot", "World", "Ticker",
]
