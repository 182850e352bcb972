"""Trial-division prime factorization."""

from __future__ import annotations

import math


def prime_factorize(n: int) -> dict[int, int]:
    """Factor n into a prime -> exponent mapping, primes ascending.

    Twos are divided out first, then every odd p up to sqrt of what remains.
    Since each factor is divided out completely before advancing, composite p
    never divide. Whatever is left above 1 is itself prime. prime_factorize(1)
    is the empty mapping.
    """
    if n < 1:
        raise ValueError(f"can only factor positive integers, got {n}")

    primes: dict[int, int] = {}
    while n % 2 == 0:
        primes[2] = primes.get(2, 0) + 1
        n //= 2

    p = 3
    while p <= math.isqrt(n):
        while n % p == 0:
            primes[p] = primes.get(p, 0) + 1
            n //= p
        p += 2

    if n != 1:
        primes[n] = primes.get(n, 0) + 1
    return primes


def multiply_out(factors: dict[int, int]) -> int:
    """Inverse of prime_factorize."""
    return math.prod(p ** e for p, e in factors.items())
