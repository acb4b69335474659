import random

import pytest

from algosolve.sorting import (
    array_hash,
    count_inversions,
    generate_data,
    max_gap,
    radix_sort,
    xorshift,
)


def test_xorshift_zero_is_fixed_point():
    assert xorshift(0) == 0


@pytest.mark.parametrize("seed", [1, 12345, 2**31, 2**32 - 1])
def test_xorshift_stays_in_32_bits(seed):
    value = xorshift(seed)
    assert 0 <= value < 2**32
    assert value > 0


@pytest.mark.parametrize("k", [1, 16, 32])
def test_generate_data_range_and_length(k):
    data = generate_data(50, k, 7)
    assert len(data) == 50
    assert all(0 <= v < 2**k for v in data)


def test_generate_data_follows_generator():
    data = generate_data(3, 32, 99)
    first = xorshift(99)
    assert data[0] == first
    assert data[1] == xorshift(first)


def test_generate_data_is_deterministic():
    data = generate_data(20, 16, 5)
    assert len(data) == 20
    assert data[0] == xorshift(5) >> 16
    assert data == generate_data(20, 16, 5)


def test_generate_data_rejects_bad_k():
    with pytest.raises(ValueError):
        generate_data(5, 0, 1)
    with pytest.raises(ValueError):
        generate_data(5, 33, 1)


def test_array_hash_empty():
    assert array_hash([]) == 0


def test_array_hash_single_zero_is_start_constant():
    assert array_hash([0]) == 998244353


@pytest.mark.parametrize("k", [8, 16, 24, 32])
def test_radix_sort_matches_sorted(k):
    data = generate_data(500, k, 2024)
    assert radix_sort(data) == sorted(data)


def test_radix_sort_hash_matches_sorted_hash():
    data = generate_data(300, 32, 17)
    assert array_hash(radix_sort(data)) == array_hash(sorted(data))


def test_radix_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        radix_sort([1, -1])
    with pytest.raises(ValueError):
        radix_sort([2**32])


def test_max_gap_single_value():
    assert max_gap([5], 3) == 0


def test_max_gap_two_values():
    assert max_gap([7, 0], 3) == 7


@pytest.mark.parametrize("k", [8, 16])
def test_max_gap_matches_sorted_neighbours(k):
    data = generate_data(200, k, 31)
    ordered = sorted(data)
    expected = max(b - a for a, b in zip(ordered, ordered[1:]))
    assert max_gap(data, k) == expected


def test_max_gap_rejects_values_wider_than_k():
    with pytest.raises(ValueError):
        max_gap([8], 3)


def test_count_inversions_sorted_is_zero():
    assert count_inversions(range(1, 30)) == 0


@pytest.mark.parametrize("n", [1, 2, 7, 40])
def test_count_inversions_reversed(n):
    assert count_inversions(reversed(range(n))) == n * (n - 1) // 2


def test_count_inversions_complement_invariant():
    rng = random.Random(3)
    values = rng.sample(range(1000), 60)
    n = len(values)
    assert count_inversions(values) + count_inversions(values[::-1]) == n * (n - 1) // 2


def test_count_inversions_does_not_mutate_input():
    values = [3, 1, 2]
    assert count_inversions(values) == 2
    assert values == [3, 1, 2]