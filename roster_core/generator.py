# roster_core/generator.py
from __future__ import annotations
import logging
from typing import List, MutableSequence, Optional, Protocol, Sequence, Tuple

import numpy as np

from .constants import SEATS, TEAM_SIZES, identifier_pool
from .models import Member, Team

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with numpy Generator's ``integers(low, high)`` (high exclusive)."""

    def integers(self, low: int, high: int): ...


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def fisher_yates_shuffle(items: MutableSequence[int], rng: RandomSource) -> MutableSequence[int]:
    """In-place shuffle: i from last down to 1, j uniform in [0, i], swap."""
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        items[i], items[j] = items[j], items[i]
    return items


def partition(order: Sequence[int], sizes: Sequence[int] = TEAM_SIZES) -> Tuple[Team, ...]:
    """
    Split ``order`` into consecutive chunks; team ids follow chunk order from 1.
    Entries past the last chunk are left out of every team.
    """
    teams: List[Team] = []
    start = 0
    for team_id, size in enumerate(sizes, start=1):
        chunk = order[start:start + size]
        teams.append(Team(id=team_id, members=tuple(Member(identifier=int(x)) for x in chunk)))
        start += size
    return tuple(teams)


def generate_teams(rng: RandomSource) -> Tuple[Team, ...]:
    order = fisher_yates_shuffle(identifier_pool(), rng)
    teams = partition(order)
    logger.debug("Generated %d teams sized %s", len(teams), [len(t.members) for t in teams])
    logger.debug("Roll numbers without a team: %s", sorted(order[SEATS:]))
    return teams
