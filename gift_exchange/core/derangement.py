"""Gift Assignment — random single-cycle permutation over participant ids.

Invariants:
    - Output is a bijection on the input ids with zero fixed points
    - The permutation is a single N-cycle (Sattolo's shuffle)
    - O(N) time, one swap per position, safe for thousands of participants
    - Randomness comes ONLY from the injected source; nothing global is read
    - Fewer than 2 ids, or duplicate ids, raise InvalidDrawInputError:
      callers (Room.draw) must reject such input before calling

Design Decisions:
    - Uniform over cyclic permutations, not over all derangements: any
      fixed-point-free bijection is acceptable for a gift exchange
    - RandomSource is a Protocol: random.Random, random.SystemRandom and test
      doubles all satisfy it structurally
"""

from collections.abc import Hashable, Sequence
from typing import Protocol, TypeVar

from gift_exchange.core.domain_types import MIN_DRAWABLE_USERS
from gift_exchange.core.errors import InvalidDrawInputError

K = TypeVar("K", bound=Hashable)


class RandomSource(Protocol):
    """Anything that can pick a uniform int in [0, stop)."""
    def randrange(self, stop: int, /) -> int: ...


def generate_cyclic_assignment(
    ids: Sequence[K], rng: RandomSource,
) -> dict[K, K]:
    """Map every id to a distinct recipient id, never itself."""
    if len(ids) < MIN_DRAWABLE_USERS:
        raise InvalidDrawInputError(
            f"Assignment needs at least {MIN_DRAWABLE_USERS} participants, "
            f"got {len(ids)}",
        )
    if len(set(ids)) != len(ids):
        raise InvalidDrawInputError("Assignment ids must be distinct")

    shuffled = list(ids)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i)  # strictly below i: no element stays put
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return dict(zip(ids, shuffled))
