"""
Steering behaviors.

Each behavior is a callable taking (index, snapshot) and returning the 2D
acceleration it contributes for the goid at `index`. Behaviors only read the
start-of-tick snapshot, so no goid sees another goid's update from the same
tick. The World sums the contributions in list order.
"""

import numpy as np
from typing import Callable, Dict, List, Optional, Sequence

from .vector import EPSILON, length, normalize, zero

MAX_FORCE = 0.0001

Behavior = Callable[[int, "FlockSnapshot"], np.ndarray]


def centroid(positions: np.ndarray) -> np.ndarray:
    """Arithmetic mean of an (n, 2) position array."""
    if len(positions) == 0:
        raise ValueError("cannot compute the centroid of an empty flock")
    total = np.asarray(positions, dtype=np.float64).sum(axis=0)
    return (total / len(positions)).astype(np.float32)


def mean_velocity(velocities: np.ndarray) -> np.ndarray:
    """Arithmetic mean of an (n, 2) velocity array."""
    if len(velocities) == 0:
        raise ValueError("cannot compute the mean velocity of an empty flock")
    total = np.asarray(velocities, dtype=np.float64).sum(axis=0)
    return (total / len(velocities)).astype(np.float32)


class Cohesion:
    """
    Steer toward the flock centroid.
    
    The correction is direction-only: normalize(desired - velocity) scaled to
    max_force, so it never exceeds max_force however far the goid is from
    the flock. A goid already sitting on its target gets no pull, so a lone
    goid keeps its heading.
    """
    
    name = "cohesion"
    
    def __init__(self, max_force: float = MAX_FORCE, include_self: bool = True):
        self.max_force = np.float32(max_force)
        self.include_self = include_self
    
    def target(self, index: int, snapshot) -> Optional[np.ndarray]:
        """Centroid this goid steers toward, or None when it has no flockmates."""
        if self.include_self:
            return snapshot.centroid
        others = snapshot.count - 1
        if others == 0:
            return None
        total = snapshot.position_sum - snapshot.positions[index].astype(np.float64)
        return (total / others).astype(np.float32)
    
    def __call__(self, index: int, snapshot) -> np.ndarray:
        target = self.target(index, snapshot)
        if target is None:
            return zero()
        desired = target - snapshot.positions[index]
        if length(desired) < EPSILON:
            return zero()
        return (normalize(desired - snapshot.velocities[index]) * self.max_force).astype(np.float32)


class Separation:
    """
    Steer away from nearby flockmates. Contributes nothing yet.
    
    Takes the same settings as Cohesion so the registry can build every
    behavior the same way.
    """
    
    name = "separation"
    
    def __init__(self, max_force: float = MAX_FORCE, include_self: bool = True):
        self.max_force = np.float32(max_force)
        self.include_self = include_self
    
    def __call__(self, index: int, snapshot) -> np.ndarray:
        return zero()


class Alignment:
    """
    Steer toward the flock's average velocity. Contributes nothing yet.
    
    Takes the same settings as Cohesion so the registry can build every
    behavior the same way.
    """
    
    name = "alignment"
    
    def __init__(self, max_force: float = MAX_FORCE, include_self: bool = True):
        self.max_force = np.float32(max_force)
        self.include_self = include_self
    
    def __call__(self, index: int, snapshot) -> np.ndarray:
        return zero()


BEHAVIORS: Dict[str, type] = {
    Cohesion.name: Cohesion,
    Separation.name: Separation,
    Alignment.name: Alignment,
}

DEFAULT_BEHAVIORS = ("cohesion", "separation", "alignment")


def build_behaviors(
    names: Sequence[str] = DEFAULT_BEHAVIORS,
    max_force: float = MAX_FORCE,
    include_self: bool = True,
) -> List[Behavior]:
    """Instantiate behaviors by name, keeping the given order."""
    behaviors = []
    for name in names:
        if name not in BEHAVIORS:
            raise ValueError(f"Unknown steering behavior: {name!r}")
        behaviors.append(BEHAVIORS[name](max_force=max_force, include_self=include_self))
    return behaviors
