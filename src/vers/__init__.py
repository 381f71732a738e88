"""vers range algebra."""

from .comparator import Comparator
from .constraint import Constraint
from .pairwise import Pair, PairwiseIterator
from .range import Builder, Vers

__all__ = ["Builder", "Comparator", "Constraint", "Pair", "PairwiseIterator", "Vers"]
