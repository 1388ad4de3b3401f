"""
Randomized team formation.

Each round draws three distinct names from the primary pool and one each from
the secondary and tertiary pools. Rounds continue while primary has at least
three names left and the other two pools are non-empty; whatever remains is
returned as leftovers.
"""

import random
from dataclasses import dataclass, field
from typing import Iterator, Sequence

PRIMARY_PER_TEAM = 3


@dataclass(frozen=True)
class Team:
    """Five names: three from primary, one from secondary, one from tertiary."""
    primary: tuple[str, str, str]
    secondary: str
    tertiary: str

    @property
    def members(self) -> tuple[str, ...]:
        return (*self.primary, self.secondary, self.tertiary)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)


@dataclass
class AssignmentResult:
    """Teams in order of formation plus the names no team could take."""
    teams: list[Team] = field(default_factory=list)
    leftover_primary: list[str] = field(default_factory=list)
    leftover_secondary: list[str] = field(default_factory=list)
    leftover_tertiary: list[str] = field(default_factory=list)

    @property
    def leftovers(self) -> list[str]:
        return self.leftover_primary + self.leftover_secondary + self.leftover_tertiary


def _draw(pool: list[str], rng: random.Random) -> str:
    # Swap the chosen slot with the last one and pop: O(1), still uniform.
    i = rng.randrange(len(pool))
    pool[i], pool[-1] = pool[-1], pool[i]
    return pool.pop()


def _can_form_team(primary: list[str], secondary: list[str], tertiary: list[str]) -> bool:
    return len(primary) >= PRIMARY_PER_TEAM and bool(secondary) and bool(tertiary)


def assign_teams(
    primary: Sequence[str],
    secondary: Sequence[str],
    tertiary: Sequence[str],
    *,
    rng: random.Random | None = None,
) -> AssignmentResult:
    """
    Form teams until one of the pools runs short. Zero teams is a valid result.
    Pass a seeded random.Random for reproducible output; the input sequences are
    copied, never mutated.
    """
    rng = rng if rng is not None else random.Random()
    primary_pool = list(primary)
    secondary_pool = list(secondary)
    tertiary_pool = list(tertiary)

    teams: list[Team] = []
    while _can_form_team(primary_pool, secondary_pool, tertiary_pool):
        picked = tuple(_draw(primary_pool, rng) for _ in range(PRIMARY_PER_TEAM))
        teams.append(
            Team(
                primary=picked,
                secondary=_draw(secondary_pool, rng),
                tertiary=_draw(tertiary_pool, rng),
            )
        )

    return AssignmentResult(
        teams=teams,
        leftover_primary=primary_pool,
        leftover_secondary=secondary_pool,
        leftover_tertiary=tertiary_pool,
    )
