"""
frame_scheduler.py
------------------
Request-next-frame primitive driven by the game loop.

Scenes call request_frame() with a callback that receives the frame
timestamp in milliseconds. The game loop calls run_frame() once per
display refresh; callbacks requested during that run wait for the next
refresh, so a scene that re-requests at the end of its step runs exactly
once per frame.
"""

import itertools
import math

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Physics


class FrameScheduler:
    """One-shot per-frame callback registry."""

    def __init__(self):
        self._pending = {}  # {handle: callback}
        self._ids = itertools.count(1)
        DebugLogger.init_entry("FrameScheduler")

    # ===========================================================
    # Public API
    # ===========================================================

    def request_frame(self, callback) -> int:
        """
        Schedule ``callback(timestamp_ms)`` for the next frame.

        Returns:
            int: Handle accepted by cancel_frame()
        """
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle) -> bool:
        """Drop a pending request. Unknown or already-run handles are ignored."""
        if handle is None:
            return False
        return self._pending.pop(handle, None) is not None

    def run_frame(self, timestamp_ms) -> int:
        """
        Invoke every callback pending at the start of this frame.

        A callback cancelled by an earlier callback in the same frame does not
        run. Callbacks requested during this frame wait for the next one.

        Returns:
            int: Number of callbacks run
        """
        ran = 0
        for handle in list(self._pending):
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue  # cancelled earlier in this frame
            callback(timestamp_ms)
            ran += 1
        return ran

    def has_pending(self) -> bool:
        return bool(self._pending)

    def clear(self):
        self._pending.clear()


# ===========================================================
# Frame Delta
# ===========================================================

def frame_delta(last_timestamp, timestamp) -> float:
    """
    Milliseconds elapsed between two frame timestamps.

    The first frame (no previous timestamp) has a delta of 0. Negative,
    non-finite or absurdly large deltas are treated as 0.
    """
    if last_timestamp is None:
        return 0.0

    delta = timestamp - last_timestamp
    if not math.isfinite(delta) or delta < 0 or delta > Physics.MAX_FRAME_DELTA_MS:
        DebugLogger.warn(f"Ignoring frame delta of {delta} ms", category="timing")
        return 0.0
    return float(delta)
