"""Candidate isomorphism classes of a given order.

By the fundamental theorem, an abelian group of order p1^e1 * ... * pr^er is
a direct sum over primes of groups Z_{p^a1} x Z_{p^a2} x ... with
a1 + a2 + ... = e. Choosing one partition of each exponent independently
enumerates every isomorphism class of that order exactly once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from abelian.arith.partitions import integer_partitions
from abelian.arith.primes import prime_factorize
from abelian.core.group import Element, Group
from abelian.engine.cosets import order_of_generator

log = logging.getLogger(__name__)


@dataclass
class PrimePartitions:
    """All partitions of one prime's exponent."""

    prime: int
    exponent: int
    partitions: list[list[int]] = field(default_factory=list)

    @classmethod
    def of(cls, prime: int, exponent: int) -> PrimePartitions:
        return cls(prime, exponent, list(integer_partitions(exponent)))

    def cyclic_factors(self, index: int) -> list[int]:
        return [self.prime ** part for part in self.partitions[index]]

    def __len__(self) -> int:
        return len(self.partitions)


def odometer(radices: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Mixed-radix counter over [0, r0) x [0, r1) x ..., first digit fastest.

    With no digits a single empty combination is produced.
    """
    index = [0] * len(radices)
    while True:
        yield tuple(index)
        for pos, radix in enumerate(radices):
            index[pos] += 1
            if index[pos] < radix:
                break
            index[pos] = 0
        else:
            return


class CandidateGroupBuilder:
    """Builds one representative Group per isomorphism class of a given order.

    Usage:
        builder = CandidateGroupBuilder(prime_factorize(12), bound=6)
        groups = builder.build()   # [(Z_2 x Z_2 x Z_3)], Z_4 x Z_3 has exponent 12
    """

    def __init__(self, factors: dict[int, int], bound: int | None = None):
        self.nodes = [PrimePartitions.of(p, e) for p, e in sorted(factors.items())]
        self.bound = bound

    def combinations(self) -> Iterator[Group]:
        """Every combination of per-prime partitions, unpruned."""
        for index in odometer([len(node) for node in self.nodes]):
            products: list[int] = []
            for node, i in zip(self.nodes, index):
                products.extend(node.cyclic_factors(i))
            yield Group(products)

    def build(self) -> list[Group]:
        groups = []
        for candidate in self.combinations():
            if self.bound is not None and candidate.largest_order_element > self.bound:
                log.debug(
                    "Pruned %s: largest element order %d exceeds %d",
                    candidate, candidate.largest_order_element, self.bound,
                )
                continue
            groups.append(candidate)
        return groups


def quotient_order(group: Group, generator: Element) -> int:
    return group.order // order_of_generator(group, generator)


def find_possible_iso_groups(
    group: Group,
    generator: Element,
    prune: bool = True,
) -> list[Group]:
    """Candidate representatives for G/<generator>.

    Candidates whose largest element order exceeds G's are dropped, since a
    quotient cannot have elements of larger order than G itself.
    """
    order = quotient_order(group, generator)
    factors = prime_factorize(order)
    log.debug("Quotient order %d factors as %s", order, factors)

    bound = group.largest_order_element if prune else None
    candidates = CandidateGroupBuilder(factors, bound).build()
    log.debug("%d candidate(s) of order %d", len(candidates), order)
    return candidates


def narrow_by_max_order(candidates: list[Group], max_order: int) -> list[Group]:
    """Keep candidates that have an element of order max_order or larger."""
    kept = []
    for g in candidates:
        if g.largest_order_element < max_order:
            log.debug("Narrowed out %s: no element of order %d", g, max_order)
            continue
        kept.append(g)
    return kept
