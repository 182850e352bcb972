"""Matching a quotient's fingerprint against candidate groups.

classify() runs the whole pipeline:
1. CANDIDATES - enumerate isomorphism classes of |G|/|H|, pruned by G's exponent
2. FINGERPRINT - order histogram of the cosets of H in G
3. NARROW     - drop candidates lacking an element of the quotient's top order
4. MATCH      - first candidate whose own histogram equals the quotient's
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from abelian.core.errors import (
    EmptyCandidateListError, NoIsomorphismFoundError, SearchLimitExceeded,
)
from abelian.core.group import Element, Group
from abelian.engine.candidates import (
    find_possible_iso_groups, narrow_by_max_order, quotient_order,
)
from abelian.engine.cosets import Histogram, calc_element_orders, order_of_generator

log = logging.getLogger(__name__)


@dataclass
class ClassifierConfig:
    """Configuration for classify()."""

    max_group_order: int = 1_000_000
    narrow_by_max_order: bool = True
    prune_by_exponent: bool = True


@dataclass
class ClassificationResult:
    """Everything computed while classifying G/<generator>."""

    group: Group
    generator: Element
    subgroup_order: int
    quotient_order: int
    candidates: list[Group]
    narrowed: list[Group]
    histogram: Histogram
    match: Group
    rejected: list[Group] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "group": self.group.products,
            "generator": list(self.generator.x),
            "subgroup_order": self.subgroup_order,
            "quotient_order": self.quotient_order,
            "candidates": [g.products for g in self.candidates],
            "narrowed": [g.products for g in self.narrowed],
            "histogram": self.histogram.to_dict(),
            "match": self.match.products,
        }


class Matcher:
    """Finds the candidate whose element-order histogram equals a target."""

    def __init__(self, target: Histogram):
        self.target = target
        self.rejected: list[Group] = []

    def fingerprint(self, candidate: Group) -> Histogram:
        return calc_element_orders(candidate, candidate.identity())

    def matches(self, candidate: Group) -> bool:
        return self.fingerprint(candidate) == self.target

    def match(self, candidates: list[Group]) -> Group:
        if not candidates:
            raise EmptyCandidateListError(self.target.total(), stage="matching")
        self.rejected = []
        for candidate in candidates:
            if self.matches(candidate):
                return candidate
            log.debug("Rejected %s", candidate)
            self.rejected.append(candidate)
        raise NoIsomorphismFoundError(self.target, len(candidates))


def classify(
    group: Group,
    generator: Element,
    config: ClassifierConfig | None = None,
) -> ClassificationResult:
    """Identify the isomorphism class of group / <generator>."""
    config = config or ClassifierConfig()
    group.check_arity(generator)
    if group.order > config.max_group_order:
        raise SearchLimitExceeded(group.order, config.max_group_order)

    q = quotient_order(group, generator)
    candidates = find_possible_iso_groups(group, generator, prune=config.prune_by_exponent)
    if not candidates:
        raise EmptyCandidateListError(q)

    histogram = calc_element_orders(group, generator)

    narrowed = candidates
    if config.narrow_by_max_order:
        narrowed = narrow_by_max_order(candidates, histogram.max_order())
        if not narrowed:
            raise EmptyCandidateListError(q, stage="narrowing")

    matcher = Matcher(histogram)
    match = matcher.match(narrowed)
    log.debug("%s / <%s> is isomorphic to %s", group, generator, match)

    return ClassificationResult(
        group=group,
        generator=generator,
        subgroup_order=order_of_generator(group, generator),
        quotient_order=q,
        candidates=candidates,
        narrowed=narrowed,
        histogram=histogram,
        match=match,
        rejected=matcher.rejected,
    )
