"""Random primitives used by the character generator.

Every function takes the random source as an argument so callers can pass a
seeded ``random.Random`` and get reproducible results.
"""

import random
from collections.abc import Sequence
from typing import Protocol

from banditgen.generator.tables import LEVEL_MAX, LEVEL_MIN


class RandomSource(Protocol):
    """The subset of ``random.Random`` the generator relies on."""

    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> random.Random:
    """Create a random source, seeded when ``seed`` is given."""
    return random.Random(seed)


def weighted_choice(weights: Sequence[int], rng: RandomSource) -> int:
    """
    Pick an index with probability proportional to its weight.

    Draws a number in [1, sum(weights)] and walks the weights, subtracting each
    one until the running total reaches zero.

    Args:
        weights: Non-negative integer weights
        rng: Random source

    Returns:
        The chosen index. Returns 0 when every weight is zero.
    """
    total = sum(weights)
    if total <= 0:
        return 0

    remaining = rng.randint(1, total)
    for index, weight in enumerate(weights):
        remaining -= weight
        if remaining <= 0:
            return index

    return 0


def random_increase(chance: float, max_increase: int, rng: RandomSource) -> int:
    """
    Roll a bonus where each extra point is exponentially less likely.

    The first point is gained with probability ``chance``; every later point
    multiplies the required probability by ``chance`` again. Rolling stops on
    the first failed draw or when ``max_increase`` is reached.

    Args:
        chance: Probability of the first increment (0.0-1.0)
        max_increase: Upper bound on the result
        rng: Random source

    Returns:
        An integer in [0, max_increase]
    """
    threshold = chance
    increase = 0
    while increase < max_increase and threshold > rng.random():
        increase += 1
        threshold *= chance
    return increase


def roll_level(rng: RandomSource) -> int:
    """Roll a character level uniformly between LEVEL_MIN and LEVEL_MAX."""
    return rng.randint(LEVEL_MIN, LEVEL_MAX)


def clamp_level(level: int) -> int:
    """Force a level into [LEVEL_MIN, LEVEL_MAX] without raising."""
    return max(LEVEL_MIN, min(LEVEL_MAX, level))
