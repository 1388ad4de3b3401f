import random
from collections import Counter
from dataclasses import FrozenInstanceError

import pytest

from team_builder.assigner import AssignmentResult, Team, assign_teams


def _all_placed(result: AssignmentResult) -> Counter:
    placed = Counter()
    for team in result.teams:
        placed.update(team.members)
    return placed


class TestAssignTeams:
    def test_four_primary_two_each_gives_one_team(self):
        result = assign_teams(["A", "B", "C", "D"], ["X", "Y"], ["P", "Q"], rng=random.Random(1))
        assert len(result.teams) == 1
        team = result.teams[0]
        assert len(team) == 5
        assert set(team.primary) < {"A", "B", "C", "D"}
        assert len(result.leftover_primary) == 1
        assert len(result.leftover_secondary) == 1
        assert len(result.leftover_tertiary) == 1
        placed = sorted(team.primary) + result.leftover_primary
        assert sorted(placed) == ["A", "B", "C", "D"]

    @pytest.mark.parametrize(
        "secondary,tertiary", [([], ["P", "Q"]), (["X", "Y"], []), ([], [])]
    )
    def test_empty_secondary_or_tertiary_gives_no_teams(self, secondary, tertiary):
        primary = [f"p{i}" for i in range(30)]
        result = assign_teams(primary, secondary, tertiary, rng=random.Random(0))
        assert result.teams == []
        assert result.leftover_primary == primary

    def test_too_few_primary_gives_no_teams(self):
        result = assign_teams(["A", "B"], ["X"], ["P"], rng=random.Random(0))
        assert result.teams == []
        assert result.leftovers == ["A", "B", "X", "P"]

    @pytest.mark.parametrize("seed", range(25))
    def test_bounds_and_accounting(self, seed):
        rng = random.Random(seed)
        primary = [f"p{i}" for i in range(rng.randint(0, 40))]
        secondary = [f"s{i}" for i in range(rng.randint(0, 15))]
        tertiary = [f"t{i}" for i in range(rng.randint(0, 15))]

        result = assign_teams(primary, secondary, tertiary, rng=random.Random(seed))

        n = len(result.teams)
        assert n == min(len(primary) // 3, len(secondary), len(tertiary))
        assert n * 3 <= len(primary)
        assert n <= len(secondary)
        assert n <= len(tertiary)
        for team in result.teams:
            assert all(name in primary for name in team.primary)
            assert team.secondary in secondary
            assert team.tertiary in tertiary
        everything = Counter(primary + secondary + tertiary)
        assert _all_placed(result) + Counter(result.leftovers) == everything

    def test_duplicate_entries_are_distinct(self):
        result = assign_teams(["Sam", "Sam", "Sam"], ["X"], ["P"], rng=random.Random(3))
        assert result.teams[0].primary == ("Sam", "Sam", "Sam")

    def test_seeded_runs_are_reproducible(self):
        args = ([f"p{i}" for i in range(12)], ["a", "b", "c"], ["x", "y", "z", "w"])
        first = assign_teams(*args, rng=random.Random(42))
        second = assign_teams(*args, rng=random.Random(42))
        assert first == second

    def test_inputs_are_not_mutated(self):
        primary, secondary, tertiary = ["A", "B", "C", "D"], ["X"], ["P"]
        assign_teams(primary, secondary, tertiary, rng=random.Random(0))
        assert (primary, secondary, tertiary) == (["A", "B", "C", "D"], ["X"], ["P"])

    def test_works_without_explicit_rng(self):
        result = assign_teams(["A", "B", "C"], ["X"], ["P"])
        assert sorted(result.teams[0].primary) == ["A", "B", "C"]

    def test_primary_draw_is_uniform(self):
        rng = random.Random(2024)
        left_out = Counter()
        trials = 4000
        for _ in range(trials):
            result = assign_teams(["A", "B", "C", "D"], ["X"], ["P"], rng=rng)
            left_out.update(result.leftover_primary)
        for name in "ABCD":
            assert 800 < left_out[name] < 1200

    def test_secondary_draw_is_uniform(self):
        rng = random.Random(7)
        chosen = Counter()
        for _ in range(3000):
            chosen[assign_teams(["A", "B", "C"], ["X", "Y", "Z"], ["P"], rng=rng).teams[0].secondary] += 1
        for name in "XYZ":
            assert 850 < chosen[name] < 1150


class TestTeam:
    def test_members_order(self):
        team = Team(primary=("A", "B", "C"), secondary="X", tertiary="P")
        assert team.members == ("A", "B", "C", "X", "P")
        assert list(team) == ["A", "B", "C", "X", "P"]

    def test_is_immutable(self):
        team = Team(primary=("A", "B", "C"), secondary="X", tertiary="P")
        with pytest.raises(FrozenInstanceError):
            team.secondary = "Y"
