from abelian.core.group import Coset, Element, Group, validate_generator
from abelian.core.errors import (
    ArityMismatchError, ClassificationError, EmptyCandidateListError,
    InvalidComponentError, NoIsomorphismFoundError, SearchLimitExceeded,
)

__all__ = [
    "Coset", "Element", "Group", "validate_generator",
    "ArityMismatchError", "ClassificationError", "EmptyCandidateListError",
    "InvalidComponentError", "NoIsomorphismFoundError", "SearchLimitExceeded",
]
