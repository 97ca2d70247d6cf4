"""
scoring.py
----------
Elapsed-time score accrual.

Score grows by one point per full SCORE_INTERVAL_MS contained in a single
frame delta. Obstacles passed and distance travelled do not count.
"""

import math

from jumpgame.core.runtime.game_settings import Physics


def accrue_score(score: int, delta_ms: float) -> int:
    """Return the score after a frame of ``delta_ms`` milliseconds."""
    if delta_ms > 0:
        score += math.floor(delta_ms / Physics.SCORE_INTERVAL_MS)
    return score
