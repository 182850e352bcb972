"""Direct sums of cyclic groups and their elements.

A group Z_n1 x Z_n2 x ... x Z_nk is stored as the ordered list of its cyclic
factor orders. Elements are k-tuples of integers; addition is component-wise
and reduction modulo each factor is done by the group, not the element.
"""

from __future__ import annotations

import itertools
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from abelian.arith.primes import prime_factorize
from abelian.core.errors import ArityMismatchError, InvalidComponentError


@dataclass(frozen=True)
class Element:
    """An n-tuple of non-negative integers, one element of a direct sum."""

    x: tuple[int, ...]

    def __init__(self, x: Iterable[int]):
        object.__setattr__(self, "x", tuple(int(v) for v in x))

    @classmethod
    def zeros(cls, n: int) -> Element:
        return cls((0,) * n)

    @property
    def n(self) -> int:
        return len(self.x)

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[int]:
        return iter(self.x)

    def __getitem__(self, i: int) -> int:
        return self.x[i]

    def __add__(self, other: Element) -> Element:
        if not isinstance(other, Element):
            return NotImplemented
        if other.n != self.n:
            raise ArityMismatchError(self.n, other.n, what="element")
        return Element(a + b for a, b in zip(self.x, other.x))

    def is_zero(self) -> bool:
        return not any(self.x)

    def __str__(self) -> str:
        return "(" + ",".join(str(v) for v in self.x) + ")"


@dataclass
class Group:
    """A finite abelian group given as a direct sum of cyclic groups.

    products[i] is the order of the i-th cyclic factor. An empty product list
    is the trivial group.
    """

    products: list[int] = field(default_factory=list)

    def __init__(self, products: Iterable[int] = ()):
        self.products = [int(p) for p in products]

    @property
    def arity(self) -> int:
        return len(self.products)

    @property
    def order(self) -> int:
        return math.prod(self.products)

    @property
    def largest_order_element(self) -> int:
        """The exponent of the group: lcm of the factor orders."""
        return math.lcm(*self.products) if self.products else 1

    def identity(self) -> Element:
        return Element.zeros(self.arity)

    def check_arity(self, element: Element, what: str = "generator") -> None:
        if element.n != self.arity:
            raise ArityMismatchError(self.arity, element.n, what=what)

    def mod(self, element: Element) -> Element:
        """Reduce each component modulo its factor order."""
        self.check_arity(element, what="element")
        return Element(v % n for v, n in zip(element.x, self.products))

    def add(self, a: Element, b: Element) -> Element:
        return self.mod(a + b)

    def elements(self) -> Iterator[Element]:
        """All elements in lexicographic order."""
        for x in itertools.product(*(range(n) for n in self.products)):
            yield Element(x)

    def invariant_factors(self) -> list[int]:
        """Invariant-factor form d1 | d2 | ... | dm of this group.

        Each factor is first split into prime powers; the i-th largest power of
        every prime goes into the i-th largest invariant factor.
        """
        powers: dict[int, list[int]] = defaultdict(list)
        for n in self.products:
            for p, e in prime_factorize(n).items():
                powers[p].append(p ** e)
        if not powers:
            return []
        depth = max(len(v) for v in powers.values())
        factors = [1] * depth
        for p, pp in powers.items():
            pp.sort(reverse=True)
            for i, q in enumerate(pp):
                factors[i] *= q
        return sorted(factors)

    def __str__(self) -> str:
        if not self.products:
            return "(Z_1)"
        return "(" + " x ".join(f"Z_{n}" for n in self.products) + ")"


@dataclass
class Coset:
    """One coset of a subgroup H in G, with its order in G/H."""

    elements: list[Element] = field(default_factory=list)
    order: int = 1

    @property
    def representative(self) -> Element:
        return self.elements[0]

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        body = ",".join(str(e) for e in self.elements)
        return f"{{{body}}}, order {self.order}"


def validate_generator(group: Group, generator: Element) -> None:
    """Check arity and component ranges of a generator before classification."""
    group.check_arity(generator)
    for i, (v, n) in enumerate(zip(generator.x, group.products)):
        if not 0 <= v < n:
            raise InvalidComponentError(i, v, n)
