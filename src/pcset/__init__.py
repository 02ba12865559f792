"""
PCSet: pitch-class set theory toolkit

A Python library for modulo-12 pitch-class set operations used in musical
composition: transposition, inversion, complement, normal and prime forms,
alphanumeric and chromatic encoding, and subset search.
"""

__version__ = "0.1.0"
__author__ = "PCSet Development Team"

from .config import get_config, set_config
from .logger import get_logger
from .core import (
    ForteSet,
    transpose_pc,
    invert_pc,
    pc_from_alpha,
    pc_to_alpha,
    pc_to_chromatic,
    transpose,
    invert,
    complement,
    zero,
    normalize,
    reduce,
    prime,
    compare_compact,
    search_for_subsets,
    permutate_set_pairs,
)

__all__ = [
    "get_config",
    "set_config",
    "get_logger",
    "ForteSet",
    "transpose_pc",
    "invert_pc",
    "pc_from_alpha",
    "pc_to_alpha",
    "pc_to_chromatic",
    "transpose",
    "invert",
    "complement",
    "zero",
    "normalize",
    "reduce",
    "prime",
    "compare_compact",
    "search_for_subsets",
    "permutate_set_pairs",
    "__version__"
]
