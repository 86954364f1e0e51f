"""
Simulation driver - feeds frames and whole seconds into a GameSession
"""

import logging

from utils.constants import MAX_FRAME_DT

logger = logging.getLogger(__name__)


class SimulationDriver:
    """
    Owned frame driver with an explicit start/stop lifecycle

    The front-end calls advance() once per display frame. The driver
    forwards the frame to the session, turns unpaused frame time into
    one-second countdown ticks and stops itself once the session leaves
    the MEMORIZE / PLAYING / MAP_PEEK phases.
    """
    def __init__(self, session, max_dt=MAX_FRAME_DT):
        self.session = session
        self.max_dt = max_dt

        self._running = False
        self._second_accum = 0.0
        self.frames = 0

    @property
    def running(self):
        return self._running

    def start(self):
        if self._running:
            return
        if not self.session.state_manager.is_active():
            raise RuntimeError(
                f"cannot drive a session in phase {self.session.phase.name}")
        self._running = True
        self.frames = 0
        self.reset_clock()
        logger.debug("Driver started")

    def stop(self):
        if not self._running:
            return
        self._running = False
        self.reset_clock()
        logger.debug("Driver stopped after %d frames", self.frames)

    def reset_clock(self):
        """Drop the partial second, e.g. when a new countdown starts"""
        self._second_accum = 0.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def advance(self, dt, move=(0.0, 0.0), look=(0.0, 0.0)):
        """
        Run one frame

        Args:
            dt: Seconds since the previous frame
            move: (strafe, forward) input vector
            look: (yaw, unused) input vector

        Returns:
            True while the driver keeps running
        """
        if not self._running:
            raise RuntimeError("driver is not running")
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        # Clamp to avoid huge dt after pauses/minimize.
        # Countdowns keep following the raw frame time.
        step = min(dt, self.max_dt)

        try:
            self.session.update(step, move, look)

            if not self.session.paused:
                self._second_accum += dt
                while self._second_accum >= 1.0:
                    self._second_accum -= 1.0
                    self.session.tick_second()
        except Exception:
            self.stop()
            raise

        self.frames += 1
        if not self.session.state_manager.is_active():
            self.stop()
        return self._running
