import random
from collections import Counter

import pytest

from errors import BankUnderflowError
from sampler import sample


def test_sample_returns_distinct_bank_members() -> None:
    bank = list(range(10))
    rng = random.Random(7)
    for _ in range(500):
        picked = sample(bank, 4, rng)
        assert len(picked) == 4
        assert len(set(picked)) == 4
        assert set(picked) <= set(bank)


def test_sample_does_not_mutate_bank() -> None:
    bank = ["a", "b", "c", "d", "e"]
    snapshot = list(bank)
    sample(bank, 3, random.Random(1))
    sample(bank, 5, random.Random(2))
    assert bank == snapshot


def test_full_sample_is_a_permutation() -> None:
    bank = tuple(range(8))
    picked = sample(bank, len(bank), random.Random(3))
    assert sorted(picked) == list(bank)


def test_same_seed_gives_same_draw() -> None:
    bank = list(range(30))
    assert sample(bank, 10, random.Random(99)) == sample(bank, 10, random.Random(99))


def test_default_random_source() -> None:
    picked = sample(list(range(6)), 6)
    assert sorted(picked) == list(range(6))


def test_count_larger_than_bank_fails_fast() -> None:
    with pytest.raises(BankUnderflowError) as exc:
        sample([1, 2, 3], 4)
    assert exc.value.requested == 4
    assert exc.value.available == 3
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("count", [0, -1])
def test_count_must_be_positive(count: int) -> None:
    with pytest.raises(ValueError):
        sample([1, 2, 3], count)


def test_inclusion_and_order_are_uniform() -> None:
    bank = list(range(5))
    rng = random.Random(2024)
    trials = 10000
    included: Counter[int] = Counter()
    first: Counter[int] = Counter()
    pairs: Counter[tuple[int, ...]] = Counter()
    for _ in range(trials):
        picked = sample(bank, 2, rng)
        included.update(picked)
        first[picked[0]] += 1
        pairs[picked] += 1

    for item in bank:
        assert 0.35 < included[item] / trials < 0.45
        assert 0.16 < first[item] / trials < 0.24
    # every ordered pair of distinct items shows up at roughly 1/20
    assert len(pairs) == 20
    assert all(0.03 < n / trials < 0.07 for n in pairs.values())
