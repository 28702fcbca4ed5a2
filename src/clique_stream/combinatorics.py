"""Fixed-size subset enumeration.

Index combinations are produced with Knuth's Algorithm T (TAOCP 7.2.1.3),
which walks an index vector in place and moves to the next combination in
amortised constant time.  Combinations come out in colexicographic order,
each one as an ascending tuple of indices.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from clique_stream.errors import InvalidArgumentError

T = TypeVar("T")


def generate_combinations(t: int, n: int) -> Iterator[tuple[int, ...]]:
    """Return an iterator over every size-``t`` subset of ``range(n)``.

    Arguments are validated immediately, not on first iteration.

    Args:
        t: Size of each combination.
        n: Size of the index range to choose from.

    Returns:
        Iterator of ascending index tuples in colexicographic order.

    Raises:
        InvalidArgumentError: If ``t > n``, ``t < 1`` or ``n < 1``.
    """
    if t > n or n < 1 or t < 1:
        raise InvalidArgumentError(
            f"need n >= t >= 1, got n={n}, t={t}"
        )
    if t == n:
        return iter([tuple(range(t))])
    return _algorithm_t(t, n)


def _algorithm_t(t: int, n: int) -> Iterator[tuple[int, ...]]:
    # c is 1-indexed as in the published algorithm; c[0] is unused and
    # c[t + 1], c[t + 2] are sentinels.
    c = [0] * (t + 3)
    for j in range(1, t + 1):
        c[j] = j - 1
    c[t + 1] = n
    c[t + 2] = 0
    j = t

    while True:
        # T2: visit.  j is the smallest index with c[j + 1] > j.
        yield tuple(c[1 : t + 1])

        if j > 0:
            x = j
        else:
            # T3: easy case
            if c[1] + 1 < c[2]:
                c[1] += 1
                continue
            j = 2

            # T4: find j
            while True:
                c[j - 1] = j - 2
                x = c[j] + 1
                if x != c[j + 1]:
                    break
                j += 1

            # T5: done?
            if j > t:
                return

        # T6: increase c[j]
        c[j] = x
        j -= 1


def all_subsets_in_range(
    min_size: int, max_size: int, items: Sequence[T]
) -> list[tuple[T, ...]]:
    """All subsets of ``items`` with size in ``[min_size, max_size]``.

    Subsets are grouped by size (ascending) and keep the relative order of
    ``items`` inside each tuple.  An empty size range returns ``[]``.
    """
    subsets: list[tuple[T, ...]] = []
    for size in range(min_size, max_size + 1):
        for indices in generate_combinations(size, len(items)):
            subsets.append(tuple(items[i] for i in indices))
    return subsets
