from abelian.engine.cosets import (
    Histogram, calc_element_orders, enumerate_cosets, order_of_coset, order_of_generator,
)
from abelian.engine.candidates import CandidateGroupBuilder, find_possible_iso_groups
from abelian.engine.matcher import ClassificationResult, ClassifierConfig, Matcher, classify

__all__ = [
    "Histogram", "calc_element_orders", "enumerate_cosets", "order_of_coset",
    "order_of_generator", "CandidateGroupBuilder", "find_possible_iso_groups",
    "ClassificationResult", "ClassifierConfig", "Matcher", "classify",
]
