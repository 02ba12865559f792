"""
Core pitch-class set algebra.

Single pitch-class operations, set transformations and canonical forms,
subset search and set pairing.
"""

from .pitch_class import (
    transpose_pc,
    invert_pc,
    pc_from_alpha,
    pc_to_alpha,
    pc_to_chromatic,
    CHROMATIC_NAMES,
)
from .forte_set import (
    ForteSet,
    transpose,
    invert,
    complement,
    zero,
    normalize,
    reduce,
    prime,
    compare_compact,
    from_alpha,
    to_alpha,
    to_chromatic,
)
from .search import search_for_subsets
from .generator import permutate_set_pairs

__all__ = [
    "transpose_pc",
    "invert_pc",
    "pc_from_alpha",
    "pc_to_alpha",
    "pc_to_chromatic",
    "CHROMATIC_NAMES",
    "ForteSet",
    "transpose",
    "invert",
    "complement",
    "zero",
    "normalize",
    "reduce",
    "prime",
    "compare_compact",
    "from_alpha",
    "to_alpha",
    "to_chromatic",
    "search_for_subsets",
    "permutate_set_pairs",
]
