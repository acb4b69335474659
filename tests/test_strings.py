import pytest

from algosolve.strings import (
    Dictionary,
    MaxXorIndex,
    PrefixCounter,
    alignment_score,
    count_approximate_matches,
    count_distinct_subsequences,
    count_palindromes,
    find_submatrix,
    kmp_match,
    prefix_suffix_product,
)


@pytest.mark.parametrize(
    "text, pattern",
    [("abababa", "aba"), ("aaaaa", "aa"), ("xyz", "q"), ("abc", "abcd"), ("mississippi", "issi")],
)
def test_kmp_match_finds_exactly_the_occurrences(text, pattern):
    result = kmp_match(text, pattern)
    assert result == sorted(result)
    for i in range(len(text) + 1):
        assert (i in result) == text.startswith(pattern, i)


def test_kmp_match_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_match("abc", "")


def test_prefix_suffix_product_known_values():
    assert prefix_suffix_product("aaaaa") == 36
    assert prefix_suffix_product("abcababc") == 32


@pytest.mark.parametrize("s", ["", "a", "ab", "abcdef"])
def test_prefix_suffix_product_without_borders_is_one(s):
    assert prefix_suffix_product(s) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 9])
def test_count_palindromes_uniform_string(n):
    assert count_palindromes("z" * n) == n * (n + 1) // 2


def test_count_palindromes_distinct_and_mixed():
    assert count_palindromes("abcd") == len("abcd")
    assert count_palindromes("") == 0
    assert count_palindromes("abba") == 6


def test_count_palindromes_ignores_separator_like_characters():
    assert count_palindromes("###") == count_palindromes("aaa")


def test_approximate_matches_with_zero_k_equals_exact_matches():
    pattern, text = "abab", "abababxabab"
    assert count_approximate_matches(pattern, text, 0) == len(kmp_match(text, pattern))


@pytest.mark.parametrize("diffs", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("k", [0, 1, 2, 3])
def test_approximate_matches_single_window(diffs, k):
    pattern = "abcdefghijkl"
    text = "".join("Z" if i < diffs * 3 and i % 3 == 0 else ch for i, ch in enumerate(pattern))
    expected = 1 if diffs <= k else 0
    assert count_approximate_matches(pattern, text, k) == expected


def test_approximate_matches_bounds():
    assert count_approximate_matches("abcdef", "abc", 1) == 0
    text = "qwertyuiop"
    assert count_approximate_matches("abc", text, 3) == len(text) - len("abc") + 1
    with pytest.raises(ValueError):
        count_approximate_matches("a", "a", -1)


def test_approximate_matches_monotonic_in_k():
    pattern, text = "abcab", "abcabxabcaaabcbbabzab"
    counts = [count_approximate_matches(pattern, text, k) for k in range(6)]
    assert counts == sorted(counts)
    assert counts[-1] == len(text) - len(pattern) + 1


def test_find_submatrix_locates_embedded_blocks():
    block = [[1, 2], [3, 4]]
    grid = [[0] * 7 for _ in range(6)]
    positions = [(1, 2), (4, 5)]
    for r, c in positions:
        for dr, row in enumerate(block):
            for dc, value in enumerate(row):
                grid[r + dr][c + dc] = value
    assert find_submatrix(grid, block) == positions


def test_find_submatrix_whole_and_too_large():
    grid = [[5, 6], [7, 8]]
    assert find_submatrix(grid, grid) == [(0, 0)]
    assert find_submatrix(grid, [[5, 6, 7]]) == []


def test_find_submatrix_errors():
    with pytest.raises(ValueError):
        find_submatrix([[1, 2]], [])
    with pytest.raises(ValueError):
        find_submatrix([[1, 2], [3]], [[1]])


@pytest.mark.parametrize("s", ["a", "ab", "abc", "abcdefg"])
def test_distinct_subsequences_of_distinct_letters(s):
    assert count_distinct_subsequences(s) == 2 ** len(s) - 1


@pytest.mark.parametrize("n", [0, 1, 4, 10])
def test_distinct_subsequences_of_repeated_letter(n):
    assert count_distinct_subsequences("a" * n) == n


def test_distinct_subsequences_is_reduced_modulo():
    assert 0 <= count_distinct_subsequences("abcdefghijklmnopqrstuvwxyz" * 3) < 23333


def test_alignment_score_invariants():
    assert alignment_score("", "AGCT") == len("AGCT")
    assert alignment_score("GATTACA", "") == len("GATTACA")
    assert alignment_score("AGCT", "AGCT") == 4 * len("AGCT")
    assert alignment_score("AAA", "CCC") == 2 * len("AAA")
    assert alignment_score("AGGCT", "ACT") == alignment_score("ACT", "AGGCT")


def test_prefix_counter():
    counter = PrefixCounter()
    for word in ["apple", "app", "banana"]:
        counter.add(word)
    assert counter.count("app") == 2
    assert counter.count("apple") == 1
    assert counter.count("b") == 1
    assert counter.count("c") == 0
    assert counter.count("") == 3


def test_dictionary_longest_prefix():
    words = Dictionary()
    words.add("a")
    words.add("abc")
    assert words.longest_prefix("abcd") == len("abc")
    assert words.longest_prefix("abx") == len("a")
    assert words.longest_prefix("xyz") == 0
    assert words.longest_prefix("") == 0


@pytest.mark.parametrize("y", [0, 1, 7, 12345, 2**31, 2**32 - 1])
def test_max_xor_index_gives_best_partner(y):
    values = [3, 10, 5, 25, 2, 8, 2**31 + 4, 77777]
    index = MaxXorIndex(values)
    result = index.query(y)
    assert result ^ y in values
    assert all(result >= v ^ y for v in values)


def test_max_xor_index_single_value_and_errors():
    assert MaxXorIndex([9]).query(9) == 0
    with pytest.raises(ValueError):
        MaxXorIndex([])
    with pytest.raises(ValueError):
        MaxXorIndex([-1])
    with pytest.raises(ValueError):
        MaxXorIndex([1]).query(2**32)