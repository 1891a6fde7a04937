from collections import Counter

import numpy as np
from roster_core.constants import POOL_SIZE, SEATS, TEAM_SIZES
from roster_core.generator import fisher_yates_shuffle, generate_teams, partition
from helpers import LastIndexRng, ScriptedRng

def test_team_size_schedule():
    assert TEAM_SIZES == [5, 5, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4]
    assert SEATS == 54
    assert POOL_SIZE == 58

def test_shuffle_visits_indices_high_to_low():
    rng = ScriptedRng([0, 0, 0])
    items = [1, 2, 3, 4]
    fisher_yates_shuffle(items, rng)
    assert rng.calls == [(0, 4), (0, 3), (0, 2)]
    # swaps: (3,0) -> [4,2,3,1]; (2,0) -> [3,2,4,1]; (1,0) -> [2,3,4,1]
    assert items == [2, 3, 4, 1]

def test_partition_identity_order():
    teams = generate_teams(LastIndexRng())
    assert [t.id for t in teams] == list(range(1, 13))
    assert teams[0].identifiers() == (1, 2, 3, 4, 5)
    assert teams[5].identifiers() == (26, 27, 28, 29, 30)
    assert teams[6].identifiers() == (31, 32, 33, 34)
    assert teams[11].identifiers() == (51, 52, 53, 54)

def test_last_four_shuffled_roll_numbers_get_no_team():
    teams = generate_teams(LastIndexRng())
    seated = {m.identifier for t in teams for m in t.members}
    assert set(range(1, 59)) - seated == {55, 56, 57, 58}

def test_sizes_and_distinct_roll_numbers_for_many_seeds():
    for seed in range(25):
        teams = generate_teams(np.random.default_rng(seed))
        assert [len(t.members) for t in teams] == [5] * 6 + [4] * 6
        rolls = Counter(m.identifier for t in teams for m in t.members)
        assert set(rolls.values()) == {1}
        assert len(rolls) == 54
        assert set(rolls) <= set(range(1, 59))

def test_all_names_start_empty():
    teams = generate_teams(np.random.default_rng(3))
    assert all(m.name == "" for t in teams for m in t.members)

def test_seeded_generation_is_reproducible():
    a = generate_teams(np.random.default_rng(7))
    b = generate_teams(np.random.default_rng(7))
    assert a == b

def test_partition_custom_sizes():
    teams = partition([9, 8, 7, 6], sizes=[2, 1])
    assert teams[0].identifiers() == (9, 8)
    assert teams[1].identifiers() == (7,)
