"""
Subset search across candidate pitch-class sets.
"""

from typing import Iterable, List, Sequence, Tuple

from ..logger import get_logger

logger = get_logger('core.search')


def search_for_subsets(source_set: Iterable[int],
                       search_sets: Sequence[Iterable[int]]) -> Tuple[list, List[bool]]:
    """
    Report which candidate sets are contained in a source set.
    
    Order and duplicates are ignored on both sides: a candidate is found
    when every distinct pitch class in it occurs somewhere in the source.
    
    Args:
        source_set: Pitch classes to search in
        search_sets: Candidate sets to look for
        
    Returns:
        Tuple of (copy of the candidate list, found flag per candidate)
        
    Examples:
        >>> search_for_subsets([2, 3, 4, 6, 7, 9], [[2, 3, 7], [1, 5, 8]])
        ([[2, 3, 7], [1, 5, 8]], [True, False])
    """
    sonority = set(source_set)
    results = [set(search_set).issubset(sonority) for search_set in search_sets]
    
    logger.debug(f"Found {sum(results)} of {len(results)} subsets in {sorted(sonority)}")
    return list(search_sets), results
