"""Closed-form element orders of a direct sum of cyclic groups.

The order of x in Z_n1 x ... x Z_nk is lcm_i(n_i / gcd(n_i, x_i)), so the whole
order table can be computed with array operations instead of repeated
addition. Used to cross-check the coset enumerator.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from abelian.core.group import Element, Group
from abelian.engine.cosets import Histogram


@dataclass
class OrderTable:
    """Element orders of a group, indexed by element coordinates.

    orders[x1, ..., xk] is the order of (x1, ..., xk).
    """

    group: Group
    orders: np.ndarray

    @classmethod
    def of(cls, group: Group) -> OrderTable:
        if group.arity == 0:
            return cls(group, np.ones((), dtype=np.int64))
        moduli = np.array(group.products, dtype=np.int64)
        coords = np.indices(group.products, dtype=np.int64)
        shape = (group.arity,) + (1,) * group.arity
        component_orders = moduli.reshape(shape) // np.gcd(moduli.reshape(shape), coords)
        return cls(group, np.lcm.reduce(component_orders, axis=0))

    def histogram(self) -> Histogram:
        values, counts = np.unique(self.orders, return_counts=True)
        return Histogram({int(v): int(c) for v, c in zip(values, counts)})

    def max_order(self) -> int:
        return int(self.orders.max())

    def order_of(self, element: Element) -> int:
        self.group.check_arity(element, what="element")
        return int(self.orders[element.x])

    def elements_of_order(self, order: int) -> list[Element]:
        return [Element(row) for row in np.argwhere(self.orders == order)]

    def __repr__(self) -> str:
        return f"OrderTable({self.group}, max_order={self.max_order()})"
