"""Error kinds raised by the classification engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from abelian.engine.cosets import Histogram


class ClassificationError(Exception):
    """Base class for every failure the classifier reports."""


class ArityMismatchError(ClassificationError, ValueError):
    """An element's component count differs from the group's factor count."""

    def __init__(self, expected: int, got: int, what: str = "generator"):
        self.expected = expected
        self.got = got
        super().__init__(
            f"n-tuple size mismatch: {what} has {got} component(s), group has {expected} factor(s)"
        )


class InvalidComponentError(ClassificationError, ValueError):
    """A generator component lies outside [0, modulus)."""

    def __init__(self, index: int, value: int, modulus: int):
        self.index = index
        self.value = value
        self.modulus = modulus
        super().__init__(
            f"component {index} of the generator is {value}, expected 0 <= value < {modulus}"
        )


class EmptyCandidateListError(ClassificationError):
    """Pruning removed every candidate group."""

    def __init__(self, quotient_order: int, stage: str = "pruning"):
        self.quotient_order = quotient_order
        self.stage = stage
        super().__init__(
            f"no candidate groups of order {quotient_order} survived {stage}"
        )


class NoIsomorphismFoundError(ClassificationError):
    """No candidate's fingerprint equals the quotient's fingerprint."""

    def __init__(self, histogram: Histogram, tried: int):
        self.histogram = histogram
        self.tried = tried
        super().__init__(
            f"none of {tried} candidate(s) matches the quotient fingerprint {histogram}"
        )


class SearchLimitExceeded(ClassificationError):
    """The ambient group is larger than the configured enumeration bound."""

    def __init__(self, order: int, limit: int):
        self.order = order
        self.limit = limit
        super().__init__(f"group order {order} exceeds the configured limit of {limit}")
