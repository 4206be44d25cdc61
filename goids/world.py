"""Flock world: owns the goids and advances them one tick at a time."""

import math
import numpy as np
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator, List, Optional, Sequence

from config import goids as config
from .goid import Goid, new_goid
from .steering import build_behaviors, centroid, mean_velocity
from .vector import angle_to_vector, vec2, zero


@dataclass(frozen=True)
class FlockSnapshot:
    """
    Read-only view of the flock at the start of a tick.
    
    Steering behaviors read it during a tick, and renderers read the latest
    published one between ticks. The arrays are flagged non-writeable.
    
    Attributes:
        tick: Number of completed ticks when the snapshot was taken
        positions: (n, 2) float32 positions
        velocities: (n, 2) float32 velocities
        headings: (n,) headings in degrees, [-180, 180]
        colors: (n, 4) RGBA colors
        centroid: Mean position of the whole flock
        position_sum: Sum of positions in float64
        mean_velocity: Mean velocity of the whole flock
    """
    tick: int
    positions: np.ndarray
    velocities: np.ndarray
    headings: np.ndarray
    colors: np.ndarray
    centroid: np.ndarray
    position_sum: np.ndarray
    mean_velocity: np.ndarray
    
    @property
    def count(self) -> int:
        return len(self.positions)
    
    @classmethod
    def from_goids(cls, goids: Sequence[Goid], tick: int = 0) -> "FlockSnapshot":
        positions = np.array([g.position for g in goids], dtype=np.float32).reshape(-1, 2)
        velocities = np.array([g.velocity for g in goids], dtype=np.float32).reshape(-1, 2)
        colors = np.array([g.color for g in goids], dtype=np.float32).reshape(-1, 4)
        headings = np.degrees(np.arctan2(
            velocities[:, 1].astype(np.float64), velocities[:, 0].astype(np.float64)
        ))
        position_sum = positions.astype(np.float64).sum(axis=0)
        
        arrays = [positions, velocities, colors, headings, position_sum]
        snapshot = cls(
            tick=tick,
            positions=positions,
            velocities=velocities,
            headings=headings,
            colors=colors,
            centroid=centroid(positions),
            position_sum=position_sum,
            mean_velocity=mean_velocity(velocities),
        )
        for arr in arrays + [snapshot.centroid, snapshot.mean_velocity]:
            arr.setflags(write=False)
        return snapshot
    
    def mean_speed(self) -> float:
        return float(np.linalg.norm(self.velocities.astype(np.float64), axis=1).mean())


class World:
    """
    Ordered collection of goids advanced by summed steering behaviors.
    
    Every tick the world takes one snapshot, computes all steering from it,
    and only then moves the goids. The list order is rendering order only.
    """
    
    def __init__(
        self,
        goids: Sequence[Goid],
        behaviors: Optional[list] = None,
        time_scaled: Optional[bool] = None,
        reference_tick: Optional[float] = None,
        max_dt: Optional[float] = None,
    ):
        if len(goids) == 0:
            raise ValueError("a world needs at least one goid")
        
        sim = config.SIMULATION
        self.goids: List[Goid] = list(goids)
        if behaviors is None:
            behaviors = build_behaviors(sim["behaviors"], sim["max_force"], sim["include_self"])
        self.behaviors = list(behaviors)
        self.time_scaled = sim["time_scaled"] if time_scaled is None else time_scaled
        self.reference_tick = float(sim["reference_tick"] if reference_tick is None else reference_tick)
        self.max_dt = float(sim["max_dt"] if max_dt is None else max_dt)
        for name, value in (("reference_tick", self.reference_tick), ("max_dt", self.max_dt)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value}")
        self.tick = 0
    
    def __len__(self) -> int:
        return len(self.goids)
    
    def __iter__(self) -> Iterator[Goid]:
        return iter(self.goids)
    
    def snapshot(self) -> FlockSnapshot:
        return FlockSnapshot.from_goids(self.goids, self.tick)
    
    def steering(self, index: int, snapshot: FlockSnapshot) -> np.ndarray:
        """Sum every behavior's contribution for the goid at `index`."""
        accel = zero()
        for behavior in self.behaviors:
            accel = accel + behavior(index, snapshot)
        return accel.astype(np.float32)
    
    def _position_scale(self, dt) -> float:
        """How many velocity-lengths a goid advances this tick."""
        if not self.time_scaled:
            return 1.0
        if isinstance(dt, timedelta):
            dt = dt.total_seconds()
        dt = float(dt)
        if not math.isfinite(dt) or dt <= 0.0:
            return 0.0
        return min(dt, self.max_dt) / self.reference_tick
    
    def step(self, dt=0.0):
        """
        Advance the simulation by one tick.
        
        Args:
            dt: Elapsed time in seconds (or a timedelta). Ignored in fixed-step
                mode; in time-scaled mode it scales the position advance.
        """
        snapshot = self.snapshot()
        accels = [self.steering(i, snapshot) for i in range(len(self.goids))]
        scale = self._position_scale(dt)
        
        for goid, accel in zip(self.goids, accels):
            goid.step(accel, scale)
        
        self.tick += 1
    
    @classmethod
    def populate(
        cls,
        roster: dict,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        **kwargs,
    ) -> "World":
        """
        Build a world from a roster preset.
        
        Args:
            roster: Preset dict with "fixed" goids and generated "groups"
            rng: Random generator for headings and colors
            seed: Seed used when no rng is given
            **kwargs: Passed through to World()
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        
        palette = config.PALETTE
        primary = palette[roster.get("primary", "green")]
        secondary = palette[roster.get("secondary", "blue")]
        threshold = config.SIMULATION["color_threshold"]
        
        goids = []
        for entry in roster.get("fixed", []):
            x, y = entry.get("position", (0.0, 0.0))
            goids.append(Goid(
                position=vec2(x, y),
                velocity=angle_to_vector(entry["heading"], entry["speed"]),
                color=palette[entry.get("color", roster.get("primary", "green"))],
            ))
        
        for group in roster.get("groups", []):
            step = group.get("speed_step", 0.0)
            for i in range(group["count"]):
                speed = group["speed"] + step * i
                goids.append(new_goid(speed, rng, primary, secondary, threshold))
        
        if not goids:
            raise ValueError("roster produced no goids")
        
        return cls(goids, **kwargs)
