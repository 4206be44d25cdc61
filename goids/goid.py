"""Individual goid entity with position, velocity, and color."""

import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .vector import angle, angle_to_vector, length, normalize, vec2, zero

Color = Tuple[float, float, float, float]


@dataclass
class Goid:
    """
    A single goid in the flock.
    
    Heading and speed are never stored; both are read off the velocity vector
    so the two can't drift apart.
    
    Attributes:
        position: 2D world-space position
        velocity: 2D velocity, magnitude is the goid's speed per tick
        color: RGBA color tuple (0-1 range)
    """
    position: np.ndarray = field(default_factory=zero)
    velocity: np.ndarray = field(default_factory=zero)
    color: Color = (1.0, 1.0, 1.0, 1.0)
    
    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float32).copy()
        self.velocity = np.asarray(self.velocity, dtype=np.float32).copy()
        self.color = tuple(float(c) for c in self.color)
    
    @property
    def x(self) -> float:
        return float(self.position[0])
    
    @property
    def y(self) -> float:
        return float(self.position[1])
    
    def heading(self) -> float:
        """Heading in degrees, [-180, 180], 0 along +X."""
        return angle(self.velocity)
    
    def speed(self) -> float:
        return length(self.velocity)
    
    def step(self, accel: np.ndarray, scale: float = 1.0):
        """
        Turn toward the steering acceleration and advance one tick.
        
        The steering only rotates the velocity; its magnitude is kept. A
        steering that cancels the velocity outright leaves it unchanged.
        
        Args:
            accel: Summed steering acceleration for this tick
            scale: Multiplier on the position advance (1.0 = one velocity per tick)
        """
        speed = np.float32(self.speed())
        direction = normalize(self.velocity + accel)
        if length(direction) > 0.0:
            self.velocity = (direction * speed).astype(np.float32)
        self.position = (self.position + self.velocity * np.float32(scale)).astype(np.float32)


def new_goid(
    speed: float,
    rng: np.random.Generator,
    primary: Color,
    secondary: Color,
    threshold: float = 0.5,
    position: Optional[Tuple[float, float]] = None,
) -> Goid:
    """
    Create a goid with a random heading and a weighted random color.
    
    The heading is a whole number of degrees drawn uniformly from [0, 360).
    The secondary color is picked when a standard-normal draw exceeds
    `threshold` (about 31% of goids at the default 0.5).
    """
    color = primary
    if rng.standard_normal() > threshold:
        color = secondary
    x, y = position if position is not None else (0.0, 0.0)
    return Goid(
        position=vec2(x, y),
        velocity=angle_to_vector(float(rng.integers(0, 360)), speed),
        color=color,
    )
