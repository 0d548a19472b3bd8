"""Gift Assignment — tests for the single-cycle assignment generator.

Tests cover:
    - No id is assigned to itself
    - Assignment is a bijection over the input ids
    - Assignment is one cycle through every participant
    - Randomness comes only from the injected source
    - Input the caller must reject (< 2 ids, duplicates) raises
"""

import random

import pytest

from gift_exchange.core.derangement import generate_cyclic_assignment
from gift_exchange.core.errors import InvalidDrawInputError


class _RecordingRandom:
    """Always picks index 0 and records every bound it was asked for."""

    def __init__(self):
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return 0


def _cycle_length(assignment: dict) -> int:
    start = next(iter(assignment))
    current, length = assignment[start], 1
    while current != start:
        current = assignment[current]
        length += 1
    return length


# ─── Properties ──────────────────────────────────────────────────

@pytest.mark.parametrize("size", [2, 3, 4, 7, 50, 500])
def test_no_participant_is_assigned_to_themselves(size):
    ids = list(range(1, size + 1))
    assignment = generate_cyclic_assignment(ids, random.Random(size))
    assert all(giver != receiver for giver, receiver in assignment.items())


@pytest.mark.parametrize("size", [2, 3, 4, 7, 50, 500])
def test_assignment_is_a_bijection(size):
    ids = list(range(1, size + 1))
    assignment = generate_cyclic_assignment(ids, random.Random(size))
    assert set(assignment) == set(ids)
    assert sorted(assignment.values()) == ids


@pytest.mark.parametrize("seed", range(20))
def test_assignment_is_a_single_cycle(seed):
    ids = list(range(10))
    assignment = generate_cyclic_assignment(ids, random.Random(seed))
    assert _cycle_length(assignment) == len(ids)


def test_two_participants_swap():
    assert generate_cyclic_assignment([1, 2], random.Random(0)) == {1: 2, 2: 1}


def test_handles_thousands_of_participants():
    ids = list(range(1, 5001))
    assignment = generate_cyclic_assignment(ids, random.Random(42))
    assert len(assignment) == 5000
    assert all(g != r for g, r in assignment.items())
    assert len(set(assignment.values())) == 5000


def test_works_with_non_integer_ids():
    assignment = generate_cyclic_assignment(["ann", "bob", "eve"], random.Random(1))
    assert set(assignment.values()) == {"ann", "bob", "eve"}
    assert all(g != r for g, r in assignment.items())


# ─── Injected randomness ─────────────────────────────────────────

def test_asks_source_for_each_position_below_its_index():
    rng = _RecordingRandom()
    generate_cyclic_assignment([1, 2, 3, 4, 5], rng)
    assert rng.calls == [4, 3, 2, 1]


def test_fixed_source_gives_known_rotation():
    # i=2 swaps with 0 -> [c, b, a]; i=1 swaps with 0 -> [b, c, a]
    assignment = generate_cyclic_assignment(["a", "b", "c"], _RecordingRandom())
    assert assignment == {"a": "b", "b": "c", "c": "a"}


def test_same_seed_gives_same_assignment():
    ids = list(range(30))
    first = generate_cyclic_assignment(ids, random.Random(123))
    second = generate_cyclic_assignment(ids, random.Random(123))
    assert first == second


def test_input_sequence_is_not_mutated():
    ids = [1, 2, 3, 4]
    generate_cyclic_assignment(ids, random.Random(3))
    assert ids == [1, 2, 3, 4]


# ─── Rejected input ──────────────────────────────────────────────

@pytest.mark.parametrize("ids", [[], [1]])
def test_fewer_than_two_ids_raises(ids):
    with pytest.raises(InvalidDrawInputError) as exc_info:
        generate_cyclic_assignment(ids, random.Random(0))
    assert exc_info.value.code == "INVALID_DRAW_INPUT"
    assert exc_info.value.http_status == 500


def test_duplicate_ids_raise():
    with pytest.raises(InvalidDrawInputError):
        generate_cyclic_assignment([1, 2, 2], random.Random(0))
