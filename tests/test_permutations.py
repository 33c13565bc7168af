from math import factorial

import pytest

from bubble_ist.permutations import (
    factorials,
    is_identity,
    lex_permutations,
    perm_to_str,
    rank_of,
    unrank,
)


def test_factorials_values():
    assert factorials(5) == [1, 1, 2, 6, 24, 120]


def test_factorials_rejects_negative():
    with pytest.raises(ValueError):
        factorials(-1)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_unrank_rank_round_trip(n):
    for index in range(factorial(n)):
        assert rank_of(unrank(index, n)) == index


def test_unrank_ends():
    assert unrank(0, 4) == (1, 2, 3, 4)
    assert unrank(factorial(4) - 1, 4) == (4, 3, 2, 1)


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_lex_permutations_match_unrank(n):
    perms = list(lex_permutations(n))
    assert perms == [unrank(i, n) for i in range(factorial(n))]
    assert perms == sorted(perms)


@pytest.mark.parametrize("index", [-1, 6])
def test_unrank_out_of_range(index):
    with pytest.raises(ValueError):
        unrank(index, 3)


def test_rank_of_rejects_non_permutation():
    with pytest.raises(ValueError):
        rank_of((1, 1, 3))


def test_perm_to_str():
    assert perm_to_str((1, 2, 10, 3)) == "1-2-10-3"
    assert perm_to_str([7]) == "7"


def test_is_identity():
    assert is_identity((1, 2, 3, 4))
    assert not is_identity((1, 3, 2))
    assert sum(is_identity(p) for p in lex_permutations(5)) == 1