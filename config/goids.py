"""Configuration for the 2D goids flocking simulation."""

WINDOW = {
    "width": 640,
    "height": 640,
    "title": "Goids!"
}

VIEW = {
    "half_extent": 2.07,       # Visible world units from center to edge
    "goid_scale": 0.06,        # Triangle size in world units
    "min_half_extent": 0.2,
    "max_half_extent": 50.0,
    "zoom_speed": 1.5,         # Half-extent change per second
    "pan_speed": 1.0,          # Fraction of the half-extent per second
    "zoom_smoothing": 8.0
}

COLORS = {
    "background": (0.1, 0.1, 0.1, 1.0),
    "text": (0.9, 0.9, 0.9)
}

PALETTE = {
    "red": (0.8, 0.1, 0.1, 0.8),
    "blue": (0.1, 0.1, 0.8, 0.8),
    "green": (0.1, 0.8, 0.1, 0.8),
    "opaque_blue": (0.1, 0.1, 0.8, 1.0),
    "opaque_green": (0.1, 0.8, 0.1, 1.0),
}

SIMULATION = {
    "max_force": 0.0001,       # Cap on the cohesion correction per tick
    "include_self": True,      # Cohesion centroid counts the goid itself
    "behaviors": ("cohesion", "separation", "alignment"),
    "time_scaled": False,      # False: advance one velocity per tick
    "reference_tick": 0.01,    # Seconds per tick when time_scaled is on
    "max_dt": 0.05,            # Cap on elapsed time per tick (seconds)
    "tick_interval": 0.01,     # Background ticker period (seconds)
    "color_threshold": 0.5,    # Normal draw above this picks the secondary color
}

# =============================================================================
# ROSTER PRESETS
# =============================================================================

PRESETS = {}

PRESETS["original"] = {
    "name": "Original",
    "description": "Three fixed goids plus a ramped-speed and a fast group",
    "primary": "opaque_green",
    "secondary": "opaque_blue",
    "fixed": [
        {"position": (0.0, 0.0), "heading": 0.0, "speed": 0.01, "color": "opaque_blue"},
        {"position": (0.0, 0.5), "heading": 90.0, "speed": 0.01, "color": "opaque_blue"},
        {"position": (0.0, 0.0), "heading": 180.0, "speed": 0.01, "color": "opaque_blue"},
    ],
    "groups": [
        {"count": 100, "speed": 0.01, "speed_step": 0.0001},
        {"count": 100, "speed": 0.02, "speed_step": 0.0},
    ],
}

PRESETS["trio"] = {
    "name": "Trio",
    "description": "Three goids converging on their centroid",
    "primary": "green",
    "secondary": "blue",
    "fixed": [
        {"position": (-0.5, -0.5), "heading": 0.0, "speed": 0.005, "color": "red"},
        {"position": (0.5, -0.5), "heading": 90.0, "speed": 0.005, "color": "green"},
        {"position": (0.0, 0.5), "heading": 180.0, "speed": 0.005, "color": "opaque_blue"},
    ],
    "groups": [],
}

PRESETS["swarm"] = {
    "name": "Swarm",
    "description": "A thousand goids with mixed speeds",
    "primary": "green",
    "secondary": "red",
    "fixed": [],
    "groups": [
        {"count": 500, "speed": 0.005, "speed_step": 0.00002},
        {"count": 500, "speed": 0.015, "speed_step": 0.0},
    ],
}

DEFAULT_PRESET = "original"


def get_preset_config(key: str) -> dict:
    """Get a copy of a roster preset by key, or None if unknown."""
    if key not in PRESETS:
        return None
    
    preset = PRESETS[key].copy()
    preset["key"] = key
    return preset
