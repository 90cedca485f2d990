from gridmaze.random_lib import SeededRandom
import pytest


@pytest.mark.parametrize(
    "seed,bound,expected",
    [
        (42, 10, [0, 3, 8, 4, 0]),
        (0, 4, [2, 3, 0, 2, 2]),
        (-1, 100, [13, 25, 79]),
    ],
)
def test_known_sequences(seed, bound, expected):
    rnd = SeededRandom(seed)

    assert [rnd.next_int(bound) for _ in expected] == expected


@pytest.mark.parametrize("seed", [0, 1, 42, 32767])
def test_same_seed_same_sequence(seed):
    bounds = [2, 3, 4, 3, 2, 7, 4, 4, 3]
    rnd1 = SeededRandom(seed)
    rnd2 = SeededRandom(seed)

    assert [rnd1.next_int(b) for b in bounds] == [rnd2.next_int(b) for b in bounds]


@pytest.mark.parametrize("bound", [1, 2, 3, 4, 5, 1000, 2**31 - 1])
def test_values_in_range(bound):
    rnd = SeededRandom(7)
    for _ in range(200):
        assert 0 <= rnd.next_int(bound) < bound


@pytest.mark.parametrize("bound", [0, -3])
def test_non_positive_bound(bound):
    with pytest.raises(ValueError):
        SeededRandom(1).next_int(bound)
