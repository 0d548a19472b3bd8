"""Randomness Source — the RandomSource handed to Room.draw by the API layer.

Invariants:
    - Without draw_seed every draw uses the OS entropy pool (SystemRandom)
    - With draw_seed every process starts from the same seeded generator
"""

import random

from gift_exchange.config import get_settings
from gift_exchange.core.derangement import RandomSource

_seeded: random.Random | None = None


def get_random_source() -> RandomSource:
    """FastAPI dependency for the draw's randomness source."""
    global _seeded
    seed = get_settings().draw_seed
    if seed is None:
        return random.SystemRandom()
    if _seeded is None:
        _seeded = random.Random(seed)
    return _seeded
