"""Integer partitions of a prime's exponent.

Each partition [a1, a2, ...] of e describes one way of splitting the p^e part
of an abelian group into cyclic factors Z_{p^a1} x Z_{p^a2} x ...
"""

from __future__ import annotations

from typing import Iterator


def integer_partitions(n: int) -> Iterator[list[int]]:
    """Yield every partition of n exactly once, starting from [n].

    Each step finds the rightmost part greater than 1, decrements it and
    redistributes the freed unit together with the trailing 1's as parts no
    larger than the decremented value. Stops once only 1's remain.

    >>> list(integer_partitions(3))
    [[3], [2, 1], [1, 1, 1]]
    """
    if n < 1:
        raise ValueError(f"can only partition positive integers, got {n}")

    current = [n]
    cursor = 0
    while True:
        yield list(current)

        freed = 0
        while cursor >= 0 and current[cursor] == 1:
            freed += 1
            cursor -= 1
        if cursor < 0:
            return

        current[cursor] -= 1
        freed += 1
        part = current[cursor]
        del current[cursor + 1:]
        while freed > part:
            current.append(part)
            freed -= part
            cursor += 1
        current.append(freed)
        cursor += 1


def partition_count(n: int) -> int:
    """Number of partitions p(n), by the usual coin-change recurrence."""
    if n < 0:
        return 0
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n]
