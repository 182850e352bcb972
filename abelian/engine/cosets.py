"""Coset enumeration and the element-order fingerprint of a quotient G/<g>.

The fingerprint of a finite abelian group is its order histogram: for each
element order that occurs, how many elements have it. Two finite abelian
groups are isomorphic exactly when their histograms agree, which is what the
matcher relies on.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator

from abelian.core.group import Coset, Element, Group

log = logging.getLogger(__name__)


@dataclass
class Histogram:
    """Maps element (or coset) order -> number of elements of that order."""

    counts: dict[int, int] = field(default_factory=dict)

    def tally(self, order: int) -> None:
        self.counts[order] = self.counts.get(order, 0) + 1

    def orders(self) -> list[int]:
        return sorted(self.counts)

    def items(self) -> list[tuple[int, int]]:
        return sorted(self.counts.items())

    def total(self) -> int:
        return sum(self.counts.values())

    def max_order(self) -> int:
        return max(self.counts) if self.counts else 0

    def __getitem__(self, order: int) -> int:
        return self.counts.get(order, 0)

    def to_dict(self) -> dict[int, int]:
        return dict(self.items())

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.items()) + "}"


def order_of_generator(group: Group, generator: Element) -> int:
    """Order of <generator> in group, without enumerating the subgroup.

    Component i has order n_i / gcd(n_i, g_i); the element's order is the
    lcm over all components.
    """
    group.check_arity(generator)
    order = 1
    for n, g in zip(group.products, generator.x):
        order = math.lcm(order, n // math.gcd(n, g))
    return order


def cyclic_subgroup(group: Group, generator: Element) -> Coset:
    """The subgroup <generator> as the identity coset (order 1 in G/H).

    Elements are listed generator, 2*generator, ... ending at the identity.
    """
    identity = group.identity()
    element = group.mod(generator)
    members = [element]
    while element != identity:
        element = group.add(element, generator)
        members.append(element)
    return Coset(elements=members, order=1)


def order_of_coset(group: Group, subgroup: set[Element], rep: Element) -> int:
    """Smallest k >= 1 such that k*rep lies in the subgroup."""
    order = 1
    conductor = rep
    while conductor not in subgroup:
        order += 1
        conductor = group.add(conductor, rep)
    return order


def enumerate_cosets(group: Group, generator: Element) -> Iterator[Coset]:
    """Partition group into cosets of <generator>, each with its order.

    The subgroup itself is yielded first. Remaining cosets are formed from
    the lexicographically smallest element not yet placed.
    """
    group.check_arity(generator)

    # dict keeps lexicographic order and gives O(1) removal
    pool = dict.fromkeys(group.elements())

    H = cyclic_subgroup(group, generator)
    for h in H.elements:
        del pool[h]
    yield H

    members = set(H.elements)
    while pool:
        element = next(iter(pool))
        gH = Coset()
        for h in H.elements:
            e = group.add(h, element)
            gH.elements.append(e)
            del pool[e]
        gH.order = order_of_coset(group, members, gH.representative)
        yield gH


def calc_element_orders(group: Group, generator: Element) -> Histogram:
    """Order histogram of G/<generator>.

    With the identity as generator the subgroup is trivial and this is the
    ordinary element-order histogram of the group.
    """
    group.check_arity(generator)
    histogram = Histogram()
    for coset in enumerate_cosets(group, generator):
        histogram.tally(coset.order)
    log.debug(
        "%s / <%s>: %d cosets, histogram %s",
        group, generator, histogram.total(), histogram,
    )
    return histogram
