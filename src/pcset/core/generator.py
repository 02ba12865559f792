"""
Pairing of candidate pitch-class sets for compositional material.
"""

from itertools import product
from typing import Iterable, List, Sequence, Tuple


def permutate_set_pairs(working_sets: Sequence[Iterable[int]]) -> List[Tuple]:
    """
    Pair every set with every set, dropping pairs of equivalent content.
    
    Pairs come from the ordered cross product of ``working_sets`` with
    itself. A pair is dropped when both halves hold the same pitch classes
    regardless of order, which removes a set paired with itself or with its
    retrograde.
    
    Examples:
        >>> permutate_set_pairs([[0, 1, 2], [2, 1, 0], [3, 4, 5]])
        [([0, 1, 2], [3, 4, 5]), ([2, 1, 0], [3, 4, 5]), ([3, 4, 5], [0, 1, 2]), ([3, 4, 5], [2, 1, 0])]
    """
    return [
        (first, second)
        for first, second in product(working_sets, repeat=2)
        if set(first) != set(second)
    ]
