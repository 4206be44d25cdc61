"""
2D Goids Flocking Simulation
============================

A flock of goids steering toward their centroid, drawn as colored triangles.

Usage:
    python main.py                        # Windowed, "original" roster
    python main.py --preset swarm         # Another roster preset
    python main.py --threaded             # Background ticker + snapshot rendering
    python main.py --headless --ticks 500 # No window, print flock status

Controls:
    - Arrows: Pan
    - Q/E, Mouse wheel: Zoom
    - SPACE: Pause/Resume
    - C: Center on the flock
    - R: Reset
    - H: Toggle help text
    - ESC: Quit
"""

import argparse

from config import goids as config


def list_presets():
    """Print all roster presets."""
    print("\nAvailable roster presets:")
    print("-" * 40)
    for key, preset in config.PRESETS.items():
        print(f"  {key:<10} - {preset['description']}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="2D goids flocking simulation")
    parser.add_argument("--preset", "-p", type=str, default=config.DEFAULT_PRESET, help="Roster preset name")
    parser.add_argument("--list-presets", action="store_true", help="List roster presets")
    parser.add_argument("--seed", type=int, help="Seed for headings and colors")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--ticks", "-t", type=int, default=1000, help="Ticks to run in headless mode")
    parser.add_argument("--report-every", type=int, default=100, help="Headless status interval in ticks")
    parser.add_argument("--threaded", action="store_true", help="Step the world on a background thread")
    parser.add_argument("--time-scaled", action="store_true", help="Scale movement by elapsed time")
    args = parser.parse_args(argv)
    
    if args.list_presets:
        list_presets()
        return
    
    preset = config.get_preset_config(args.preset)
    if preset is None:
        print(f"[Goids] Unknown preset: {args.preset}")
        list_presets()
        return
    
    time_scaled = True if args.time_scaled else None
    
    if args.headless:
        from goids import World
        from goids.headless import run_headless
        
        world = World.populate(preset, seed=args.seed, time_scaled=time_scaled)
        run_headless(world, args.ticks, dt=config.SIMULATION["tick_interval"], report_every=args.report_every)
        return
    
    # Imported here so headless runs don't need a display
    from core import Application
    
    app = Application(preset, seed=args.seed, threaded=args.threaded, time_scaled=time_scaled)
    app.run()


if __name__ == "__main__":
    main()
