"""Window-less run loop for scripted or CI runs."""

from .world import FlockSnapshot, World


def format_status(snapshot: FlockSnapshot) -> str:
    cx, cy = snapshot.centroid
    return (
        f"[World] tick {snapshot.tick:>6}  |  goids: {snapshot.count:,}  |  "
        f"centroid: ({cx:+.4f}, {cy:+.4f})  |  mean speed: {snapshot.mean_speed():.5f}"
    )


def run_headless(world: World, ticks: int, dt: float = 0.0, report_every: int = 0) -> FlockSnapshot:
    """
    Step a world a fixed number of times without rendering.
    
    Args:
        world: World to advance in place
        ticks: Number of ticks to run
        dt: Elapsed time passed to every step
        report_every: Print a status line every N ticks (0 disables)
        
    Returns:
        Snapshot of the world after the last tick
    """
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")
    
    print(f"[World] Running {ticks:,} ticks with {len(world):,} goids")
    for _ in range(ticks):
        world.step(dt)
        if report_every and world.tick % report_every == 0:
            print(format_status(world.snapshot()))
    
    snapshot = world.snapshot()
    print(format_status(snapshot))
    return snapshot
