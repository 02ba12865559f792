"""
Set algebra over pitch-class sets.

Transposition, inversion, complementation, zero-anchoring, normal form,
reduced form and prime form of ordered pitch-class sets, together with the
compactness comparator that every canonical form is built on.

The module-level functions never modify their input and always return a new
list. :class:`ForteSet` wraps a list of pitch classes and exposes the same
operations as methods that either return a new ``ForteSet`` or, with
``inplace=True``, replace its own contents and return itself.
"""

import operator
from collections import Counter
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..exceptions import EmptySetError, LengthMismatchError
from ..logger import get_logger
from .pitch_class import (
    MODULUS,
    invert_pc,
    pc_from_alpha,
    pc_to_alpha,
    pc_to_chromatic,
    transpose_pc,
)

logger = get_logger('core.forte_set')


def _as_pcs(pitch_classes: Iterable[int]) -> List[int]:
    """
    Copy any iterable of pitch classes into a list of plain ints.
    
    Members must be integers (Python or numpy); floats and strings raise
    TypeError rather than being truncated.
    """
    return [operator.index(pc) for pc in pitch_classes]


def _require_members(pcs: Sequence[int], operation: str) -> None:
    if len(pcs) == 0:
        raise EmptySetError(f"Cannot {operation} an empty set")


def transpose(pitch_classes: Iterable[int], n: int = 0) -> List[int]:
    """Return the set transposed by ``n`` half steps (Tn)."""
    return [transpose_pc(pc, n) for pc in _as_pcs(pitch_classes)]


def invert(pitch_classes: Iterable[int]) -> List[int]:
    """Return the inversion of the set around 0."""
    return [invert_pc(pc) for pc in _as_pcs(pitch_classes)]


def complement(pitch_classes: Iterable[int]) -> List[int]:
    """
    Return the pitch classes of the 12-tone universe missing from the set.
    
    The result is in ascending order. The complement is only meaningful for
    a set without duplicates whose members lie in [0, 11]; for other input
    the difference is still taken against 0..11 and a warning is logged.
    
    Examples:
        >>> complement([0, 3, 5, 6, 9])
        [1, 2, 4, 7, 8, 10, 11]
    """
    pcs = _as_pcs(pitch_classes)
    
    duplicates = sorted(pc for pc, count in Counter(pcs).items() if count > 1)
    out_of_range = sorted({pc for pc in pcs if not 0 <= pc < MODULUS})
    if duplicates or out_of_range:
        logger.warning(
            f"Complement of malformed set {pcs} "
            f"(duplicates: {duplicates}, out of range: {out_of_range})"
        )
    
    members = set(pcs)
    return [pc for pc in range(MODULUS) if pc not in members]


def zero(pitch_classes: Iterable[int]) -> List[int]:
    """
    Return the set transposed so that its first element is 0.
    
    Raises:
        EmptySetError: If the set is empty
    """
    pcs = _as_pcs(pitch_classes)
    _require_members(pcs, 'zero')
    
    shift = 0 if pcs[0] == 0 else MODULUS - pcs[0]
    return transpose(pcs, shift)


def compare_compact(first: Iterable[int], second: Iterable[int]) -> List[int]:
    """
    Return a copy of whichever of two sets is more compact.
    
    Spans are measured from the first element of each set to every other
    element, starting with the last element and moving toward the front.
    The first pair of unequal spans decides; the smaller span wins. When
    every span is equal, ``first`` wins.
    
    Args:
        first: Ordered pitch-class set
        second: Ordered pitch-class set of the same length
        
    Returns:
        Copy of the more compact set, in its original order
        
    Raises:
        LengthMismatchError: If the sets differ in length
        
    Examples:
        >>> compare_compact([1, 4, 6, 7, 10], [4, 6, 7, 10, 1])
        [4, 6, 7, 10, 1]
    """
    a = _as_pcs(first)
    b = _as_pcs(second)
    if len(a) != len(b):
        raise LengthMismatchError(
            f"Cannot compare sets, length mismatch: {len(a)} != {len(b)}"
        )
    
    for index in range(len(a) - 1, -1, -1):
        span_a = (a[index] - a[0]) % MODULUS
        span_b = (b[index] - b[0]) % MODULUS
        if span_a == span_b:
            continue
        if span_b < span_a:
            return b
        break
    
    return a


def normalize(pitch_classes: Iterable[int]) -> List[int]:
    """
    Return the normal form: the most compact rotation of the sorted set.
    
    The ascending set is rotated left one step at a time and each rotation
    is played off against the current winner with :func:`compare_compact`.
    
    Raises:
        EmptySetError: If the set is empty
        
    Examples:
        >>> normalize([1, 4, 6, 7, 10])
        [4, 6, 7, 10, 1]
    """
    ordered = sorted(_as_pcs(pitch_classes))
    _require_members(ordered, 'normalize')
    
    rotation = list(ordered)
    winner = list(ordered)
    for _ in range(len(rotation) - 1):
        rotation = rotation[1:] + rotation[:1]
        winner = compare_compact(winner, rotation)
    
    logger.debug(f"Normal form of {ordered}: {winner}")
    return winner


def reduce(pitch_classes: Iterable[int]) -> List[int]:
    """Return the normal form transposed to start on 0."""
    pcs = _as_pcs(pitch_classes)
    _require_members(pcs, 'reduce')
    return zero(normalize(pcs))


def prime(pitch_classes: Iterable[int]) -> List[int]:
    """
    Return the prime form of the set.
    
    The reduced form of the set and the reduced form of its inversion are
    compared with :func:`compare_compact`, the set's own form winning ties.
    
    Raises:
        EmptySetError: If the set is empty
        
    Examples:
        >>> prime([1, 4, 6, 7, 10])
        [0, 1, 3, 6, 9]
    """
    pcs = _as_pcs(pitch_classes)
    _require_members(pcs, 'take the prime form of')
    
    prime_form = zero(normalize(pcs))
    inverted_form = zero(normalize(invert(pcs)))
    winner = compare_compact(prime_form, inverted_form)
    
    logger.debug(f"Prime of {pcs}: {prime_form} vs inverted {inverted_form} -> {winner}")
    return winner


def from_alpha(symbols: Iterable, strict: Optional[bool] = None) -> List[int]:
    """Convert alpha symbols (0-9, A, B, C) to integer pitch classes."""
    return [pc_from_alpha(symbol, strict=strict) for symbol in symbols]


def to_alpha(pitch_classes: Iterable[int]) -> List[str]:
    """Convert pitch classes to alpha symbols."""
    return [pc_to_alpha(pc) for pc in pitch_classes]


def to_chromatic(pitch_classes: Iterable[int]) -> List[str]:
    """Convert pitch classes to chromatic note names."""
    return [pc_to_chromatic(pc) for pc in pitch_classes]


class ForteSet:
    """
    Ordered pitch-class set with modulo-12 set operations.
    
    Holds its pitch classes in a private list. Indexing, item assignment,
    iteration and ``len`` work as for a list, but members cannot be
    inserted or removed directly.
    
    Each operation returns a new ``ForteSet`` by default. With
    ``inplace=True`` the contents are replaced and the same object is
    returned, so every holder of a reference sees the result.
    
    Examples:
        >>> major = ForteSet([0, 4, 7])
        >>> major.transpose(3, inplace=True)
        ForteSet([3, 7, 10])
    """
    
    __hash__ = None
    
    def __init__(self, pitch_classes: Iterable[int] = ()):
        self._pcs = _as_pcs(pitch_classes)
    
    @classmethod
    def from_alpha(cls, symbols: Iterable, strict: Optional[bool] = None) -> 'ForteSet':
        """Build a set from alpha symbols such as ``['0', '4', 'B']``."""
        return cls(from_alpha(symbols, strict=strict))
    
    def __len__(self) -> int:
        return len(self._pcs)
    
    def __iter__(self):
        return iter(self._pcs)
    
    def __getitem__(self, index):
        return self._pcs[index]
    
    def __setitem__(self, index: int, pitch_class: int) -> None:
        if isinstance(index, slice):
            raise TypeError("ForteSet members must be assigned one at a time")
        self._pcs[index] = operator.index(pitch_class)
    
    def __delitem__(self, index) -> None:
        raise TypeError("ForteSet members cannot be removed")
    
    def __eq__(self, other) -> bool:
        if isinstance(other, ForteSet):
            return self._pcs == other._pcs
        if isinstance(other, np.ndarray):
            return self._pcs == other.tolist()
        if isinstance(other, (list, tuple)):
            return self._pcs == list(other)
        return NotImplemented
    
    def __repr__(self) -> str:
        return f"ForteSet({self._pcs})"
    
    def to_list(self) -> List[int]:
        return list(self._pcs)
    
    def _apply(self, result: List[int], inplace: bool) -> 'ForteSet':
        if inplace:
            self._pcs[:] = result
            return self
        return ForteSet(result)
    
    def transpose(self, n: int = 0, inplace: bool = False) -> 'ForteSet':
        return self._apply(transpose(self._pcs, n), inplace)
    
    def invert(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(invert(self._pcs), inplace)
    
    def complement(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(complement(self._pcs), inplace)
    
    def zero(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(zero(self._pcs), inplace)
    
    def normalize(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(normalize(self._pcs), inplace)
    
    def reduce(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(reduce(self._pcs), inplace)
    
    def prime(self, inplace: bool = False) -> 'ForteSet':
        return self._apply(prime(self._pcs), inplace)
    
    def compare_compact(self, other: Iterable[int]) -> 'ForteSet':
        """Return the more compact of this set and ``other``; ties go to this set."""
        return ForteSet(compare_compact(self._pcs, other))
    
    def to_alpha(self) -> List[str]:
        return to_alpha(self._pcs)
    
    def to_chromatic(self) -> List[str]:
        return to_chromatic(self._pcs)
