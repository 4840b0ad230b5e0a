"""Candidate sampler: draws one structurally valid setup.

Heroes are an unordered uniform subset of the eligible heroes; any draw
containing two heroes with the same base identity is thrown away whole and
redrawn. The villain and environment are each one uniform pick.

Randomness comes from an injected Rng so tests can replay exact sequences.
random.Random satisfies the protocol; production callers pass a fresh
instance per search.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .catalog import EligiblePool
from .errors import StructuralError
from .models import Candidate, CharacterRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDRAWS = 10_000


class Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


def pick(n: int, m: int, rng: Rng) -> list[int]:
    """Pick m distinct indices in [0, n) uniformly (partial Fisher-Yates)."""
    if n <= 0 or m <= 0 or m > n:
        raise ValueError(f"can't pick {m} numbers between 0 and {n - 1}")
    vals = list(range(n))
    for i in range(m):
        j = i + rng.randrange(n - i)
        vals[i], vals[j] = vals[j], vals[i]
    return vals[:m]


def check_pool(pool: EligiblePool, player_count: int) -> None:
    """Raise StructuralError if no draw from `pool` could ever succeed."""
    if player_count < 1:
        raise StructuralError(f"Player count must be positive, got {player_count}.")
    if player_count > len(pool.heroes):
        raise StructuralError("Too many players for the selected heroes.")
    if player_count > len({h.base for h in pool.heroes}):
        raise StructuralError("Too many players for the distinct heroes selected.")
    if not pool.villains:
        raise StructuralError("No villains in the selected card sets.")
    if not pool.environments:
        raise StructuralError("No environments in the selected card sets.")


def _draw_heroes(
    heroes: tuple[CharacterRecord, ...], player_count: int, rng: Rng, max_redraws: int
) -> tuple[CharacterRecord, ...]:
    for attempt in range(max_redraws):
        chosen = [heroes[i] for i in pick(len(heroes), player_count, rng)]
        if len({h.base for h in chosen}) == player_count:
            return tuple(chosen)
        logger.debug("duplicate base in draw %d: %s", attempt + 1, [h.name for h in chosen])
    raise StructuralError(
        f"Couldn't draw {player_count} heroes with distinct bases in {max_redraws} attempts."
    )


def draw(
    pool: EligiblePool,
    player_count: int,
    offset: int,
    rng: Rng,
    max_redraws: int = DEFAULT_MAX_REDRAWS,
) -> Candidate:
    """Draw one candidate and score it.

    score = offset + hero points + villain points + environment points
    """
    check_pool(pool, player_count)
    heroes = _draw_heroes(pool.heroes, player_count, rng, max_redraws)
    villain = pool.villains[rng.randrange(len(pool.villains))]
    environment = pool.environments[rng.randrange(len(pool.environments))]
    return Candidate(heroes=heroes, villain=villain, environment=environment, offset=offset)
