"""Parents of a vertex of the bubble-sort graph in each of its n-1 independent spanning trees."""

from __future__ import annotations

from collections.abc import Sequence

from .permutations import Perm, is_identity, rank_of


def swap_symbol(perm: Sequence[int], symbol: int) -> Perm:
    """Swap the given symbol with its right-hand neighbour."""
    try:
        position = perm.index(symbol)
    except ValueError:
        raise ValueError(f"symbol {symbol} is not in {list(perm)}") from None
    if position == len(perm) - 1:
        raise ValueError(f"symbol {symbol} has no right-hand neighbour")
    result = list(perm)
    result[position], result[position + 1] = result[position + 1], result[position]
    return tuple(result)


def _rightmost_misplaced(perm: Sequence[int]) -> int:
    """Index of the rightmost symbol not in its place, or -1 for the identity."""
    return next(
        (i for i in range(len(perm) - 1, -1, -1) if perm[i] != i + 1),
        -1,
    )


def find_position(perm: Sequence[int], t: int, rpos: int) -> Perm:
    """Parent of a vertex ending in n, in tree t other than n-1."""
    n = len(perm)
    if t == 2 and is_identity(swap_symbol(perm, 2)):
        return swap_symbol(perm, 1)
    if perm[n - 2] in (t, n - 1):
        return swap_symbol(perm, rpos + 1)
    return swap_symbol(perm, t)


def _validate(perm: Sequence[int], t: int) -> None:
    n = len(perm)
    if n < 2:
        raise ValueError(f"permutations must have at least 2 symbols, got {n}")
    if sorted(perm) != list(range(1, n + 1)):
        raise ValueError(f"not a permutation of 1..{n}: {list(perm)}")
    if not 1 <= t <= n - 1:
        raise ValueError(f"tree index must be in 1..{n - 1}, got {t}")


def get_parent(perm: Sequence[int], t: int) -> Perm:
    """Return the parent of a non-root vertex in spanning tree t."""
    _validate(perm, t)
    if is_identity(perm):
        raise ValueError("the identity is the root and has no parent")
    n = len(perm)
    rpos = _rightmost_misplaced(perm)

    if perm[-1] == n:
        if t != n - 1:
            return find_position(perm, t, rpos)
        return swap_symbol(perm, perm[-2])

    if perm[-1] == n - 1 and perm[-2] == n:
        swapped = swap_symbol(perm, n)
        if not is_identity(swapped):
            return swapped if t == 1 else swap_symbol(perm, t - 1)

    if perm[-1] == t:
        return swap_symbol(perm, n)
    return swap_symbol(perm, t)


def parent_ids(perm: Sequence[int]) -> list[int]:
    """Ranks of the parents in trees 1..n-1; -1 for each tree at the root."""
    n = len(perm)
    _validate(perm, 1)
    if is_identity(perm):
        return [-1] * (n - 1)
    return [rank_of(get_parent(perm, t)) for t in range(1, n)]