"""2D vector helpers over float32 numpy arrays."""

import math
import numpy as np

EPSILON = 1e-12


def vec2(x: float, y: float) -> np.ndarray:
    """Build a single-precision 2D vector."""
    return np.array([x, y], dtype=np.float32)


def zero() -> np.ndarray:
    return np.zeros(2, dtype=np.float32)


def length(v: np.ndarray) -> float:
    return float(math.hypot(float(v[0]), float(v[1])))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Return the unit vector pointing along v.
    
    Vectors shorter than EPSILON normalize to the zero vector instead of NaN.
    """
    mag = length(v)
    if mag < EPSILON:
        return zero()
    return (np.asarray(v, dtype=np.float32) / np.float32(mag)).astype(np.float32)


def angle(v: np.ndarray) -> float:
    """Angle of v in degrees, in the range [-180, 180]."""
    return math.degrees(math.atan2(float(v[1]), float(v[0])))


def angle_to_vector(degrees: float, speed: float) -> np.ndarray:
    """
    Convert a heading and speed into a velocity vector.
    
    Args:
        degrees: Heading, 0 points along +X and angles grow counter-clockwise
        speed: Magnitude of the resulting vector
        
    Returns:
        (cos θ, sin θ) * speed as a float32 vector
    """
    theta = math.radians(degrees)
    return vec2(math.cos(theta) * speed, math.sin(theta) * speed)


def is_finite(v: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(v)))
