import time

class FrameClock:
    """Monotonic millisecond clock that also measures frames per second."""

    def __init__(self, window_s: float = 1.0):
        self.window_s = window_s
        self._window_start = None
        self._frame_count = 0
        self.fps = 0.0

    def tick(self) -> float:
        """Register a frame and return the current time in milliseconds."""
        now = time.monotonic()
        if self._window_start is None:
            self._window_start = now

        self._frame_count += 1
        elapsed = now - self._window_start
        if elapsed > self.window_s:
            self.fps = self._frame_count / elapsed
            self._window_start = now
            self._frame_count = 0
        return now * 1000.0
