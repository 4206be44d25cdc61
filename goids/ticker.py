"""
Background ticker.

Steps a World on its own thread and publishes an immutable FlockSnapshot
after every tick. Readers call latest() and never touch the live goids.
"""

import threading
import time
from typing import Optional

from config import goids as config
from .world import FlockSnapshot, World


class Ticker:
    """Advances a world every `interval` seconds on a daemon thread."""
    
    def __init__(self, world: World, interval: Optional[float] = None):
        if interval is None:
            interval = config.SIMULATION["tick_interval"]
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        
        self.world = world
        self.interval = float(interval)
        self.thread = None
        self.running = False
        self.paused = False
        self.lock = threading.Lock()  # Guards world.step and publication
        self._stop_event = threading.Event()
        self._latest = world.snapshot()
    
    def start(self):
        """Start the background ticking thread."""
        if self.thread is not None and self.thread.is_alive():
            return
        self.running = True
        self._stop_event.clear()
        self.thread = threading.Thread(target=self._worker, daemon=True)
        self.thread.start()
        print(f"[Ticker] Started ({self.interval * 1000:.0f}ms per tick)")
    
    def stop(self):
        """Stop the thread and wait for the current tick to finish."""
        self.running = False
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=5.0)
            self.thread = None
            print(f"[Ticker] Stopped after {self.world.tick} ticks")
    
    def pause(self):
        self.paused = True
    
    def resume(self):
        self.paused = False
    
    def latest(self) -> FlockSnapshot:
        """Most recently published snapshot."""
        with self.lock:
            return self._latest
    
    def tick_once(self, dt: Optional[float] = None) -> FlockSnapshot:
        """Step the world once under the lock and publish the result."""
        if dt is None:
            dt = self.interval
        with self.lock:
            self.world.step(dt)
            self._latest = self.world.snapshot()
            return self._latest
    
    def _worker(self):
        """Tick until stopped, measuring real elapsed time between ticks."""
        previous = time.perf_counter()
        while self.running:
            if self._stop_event.wait(self.interval):
                break
            now = time.perf_counter()
            elapsed = now - previous
            previous = now
            if not self.paused:
                self.tick_once(elapsed)
