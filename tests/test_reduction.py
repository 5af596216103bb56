import math
import random

import hypothesis.strategies as st
import pytest
from hypothesis import given

from runningmoments.reduction import combine_all, from_values, partitioned
from runningmoments.runningstats import RunningStats


def test_from_values():
    s = from_values([1, 2, 3])
    assert s.size() == 3
    assert s.mean() == 2
    assert s.std() == 1


def test_from_values_accepts_generators():
    s = from_values(float(i) for i in range(10))
    assert s.size() == 10
    assert math.isclose(s.mean(), 4.5)


def test_combine_all_empty():
    assert combine_all([]) == RunningStats()


def test_combine_all_single_is_a_copy():
    s = from_values([1, 2, 3])
    c = combine_all([s])
    assert c == s
    assert c is not s


def test_combine_all_does_not_mutate_inputs():
    parts = [from_values([1, 2]), from_values([3]), from_values([4, 5, 6])]
    before = [p.moments() for p in parts]
    combine_all(parts)
    assert [p.moments() for p in parts] == before


def test_combine_all_matches_single_pass():
    rng = random.Random(17)
    values = [rng.gauss(10.0, 3.0) for _ in range(1000)]
    expected = from_values(values)
    got = combine_all(partitioned(values, 7))
    assert got.size() == expected.size()
    assert math.isclose(got.mean(), expected.mean(), rel_tol=1e-12)
    assert math.isclose(got.std(), expected.std(), rel_tol=1e-10)
    assert math.isclose(got.skewness(), expected.skewness(), rel_tol=1e-6, abs_tol=1e-9)
    assert math.isclose(
        got.excess_kurtosis(), expected.excess_kurtosis(), rel_tol=1e-6, abs_tol=1e-9
    )


def test_partitioned_sizes():
    parts = partitioned(list(range(10)), 3)
    assert [p.size() for p in parts] == [4, 3, 3]


def test_partitioned_more_partitions_than_values():
    parts = partitioned([1.0, 2.0], 4)
    assert [p.size() for p in parts] == [1, 1, 0, 0]
    assert combine_all(parts) == combine_all(parts[:2])


@pytest.mark.parametrize("partitions", [0, -3])
def test_partitioned_rejects_bad_count(partitions):
    with pytest.raises(ValueError):
        partitioned([1.0], partitions)


@given(
    st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1),
    st.integers(min_value=1, max_value=16),
)
def test_partition_then_combine(ints, partitions):
    values = [float(i) for i in ints]
    expected = from_values(values)
    got = combine_all(partitioned(values, partitions))
    assert got.size() == len(values)
    assert math.isclose(got.mean(), expected.mean(), rel_tol=1e-9, abs_tol=1e-9)
    assert math.isclose(got.var(), expected.var(), rel_tol=1e-9, abs_tol=1e-6)
