"""Lexicographic ranking and formatting of permutations of 1..n."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import permutations
from math import factorial

Perm = tuple[int, ...]


def factorials(n: int) -> list[int]:
    """Return the factorials 0!, 1!, ..., n!."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    result = [1]
    for i in range(1, n + 1):
        result.append(result[-1] * i)
    return result


def _check_permutation(perm: Sequence[int]) -> None:
    if sorted(perm) != list(range(1, len(perm) + 1)):
        raise ValueError(f"not a permutation of 1..{len(perm)}: {list(perm)}")


def unrank(index: int, n: int) -> Perm:
    """Return the permutation of 1..n with the given lexicographic rank."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0 <= index < factorial(n):
        raise ValueError(f"index {index} out of range for n={n}")
    remaining = list(range(1, n + 1))
    perm = []
    for weight in reversed(factorials(n)[:n]):
        slot, index = divmod(index, weight)
        perm.append(remaining.pop(slot))
    return tuple(perm)


def rank_of(perm: Sequence[int]) -> int:
    """Return the lexicographic rank of a permutation of 1..n."""
    _check_permutation(perm)
    n = len(perm)
    remaining = list(range(1, n + 1))
    index = 0
    for value, weight in zip(perm, reversed(factorials(n)[:n])):
        slot = remaining.index(value)
        index += slot * weight
        remaining.pop(slot)
    return index


def perm_to_str(perm: Sequence[int]) -> str:
    """Format a permutation as its symbols joined by dashes."""
    return "-".join(str(symbol) for symbol in perm)


def is_identity(perm: Sequence[int]) -> bool:
    """Tell whether the permutation is 1, 2, ..., n."""
    return all(symbol == position for position, symbol in enumerate(perm, start=1))


def lex_permutations(n: int) -> Iterator[Perm]:
    """Yield every permutation of 1..n in lexicographic order."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    yield from permutations(range(1, n + 1))