"""
Single pitch-class operations under modulo-12 arithmetic.

Transposition and inversion of individual pitch classes, plus conversion
between integer pitch classes and their alphanumeric (0-9, A, B, C) and
chromatic note-name representations.
"""

import operator
import re
from typing import Optional, Union

import numpy as np

from ..config import get_config
from ..exceptions import AlphaParseError
from ..logger import get_logger

logger = get_logger('core.pitch_class')

MODULUS = 12

CHROMATIC_NAMES = (
    'C', 'C#/Db', 'D', 'D#/Eb', 'E', 'F',
    'F#/Gb', 'G', 'G#/Ab', 'A', 'A#/Bb', 'B'
)

UNKNOWN_NAME = 'unknown'

# 10, 11 and 12 have letter names; 12 is used by 13-element systems
ALPHA_TO_PC = {'A': 10, 'a': 10, 'B': 11, 'b': 11, 'C': 12, 'c': 12}
PC_TO_ALPHA = {10: 'A', 11: 'B', 12: 'C'}

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
_WHOLE_INT = re.compile(r'\s*[+-]?\d+\s*')

PitchClass = Union[int, np.ndarray]


def transpose_pc(pitch_class: PitchClass, n: int = 0) -> PitchClass:
    """
    Transpose pitch class(es) by ``n`` half steps.
    
    Args:
        pitch_class: Pitch class (int or integer ndarray), any integer
        n: Number of half steps to transpose by
        
    Returns:
        (pitch_class + n) mod 12, as int for scalar input
        
    Examples:
        >>> transpose_pc(11, 2)
        1
    """
    if isinstance(pitch_class, np.ndarray):
        return np.mod(pitch_class + n, MODULUS)
    return (operator.index(pitch_class) + operator.index(n)) % MODULUS


def invert_pc(pitch_class: PitchClass) -> PitchClass:
    """
    Invert pitch class(es) around 0.
    
    Args:
        pitch_class: Pitch class (scalar or array), any integer
        
    Returns:
        (12 - pitch_class) mod 12, as int for scalar input
        
    Examples:
        >>> invert_pc(3)
        9
    """
    if isinstance(pitch_class, np.ndarray):
        return np.mod(MODULUS - pitch_class, MODULUS)
    return (MODULUS - operator.index(pitch_class)) % MODULUS


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def pc_from_alpha(symbol, strict: Optional[bool] = None) -> int:
    """
    Convert an alpha symbol to its integer pitch class.
    
    ``A``/``a`` is 10, ``B``/``b`` is 11 and ``C``/``c`` is 12. Anything else
    is read as an integer literal from its leading sign and digits, so
    ``"7"`` gives 7 and ``"12x"`` gives 12. A symbol with no leading digits
    gives 0 unless strict parsing is on.
    
    Args:
        symbol: Alpha symbol (str) or integer pitch class
        strict: Raise on unparseable symbols; defaults to the
            ``alpha.strict_parsing`` config value
        
    Returns:
        Integer pitch class
        
    Raises:
        AlphaParseError: If strict and the symbol is not a whole integer
            or letter name
    """
    text = str(symbol)
    if text in ALPHA_TO_PC:
        return ALPHA_TO_PC[text]
    
    if strict is None:
        strict = bool(get_config('alpha', 'strict_parsing'))
    
    if strict:
        if not _WHOLE_INT.fullmatch(text):
            raise AlphaParseError(f"Cannot read pitch class from {symbol!r}")
        return int(text)
    
    value = _leading_int(text)
    if value is None:
        logger.warning(f"Alpha symbol {symbol!r} is not numeric, reading it as 0")
        return 0
    return value


def pc_to_alpha(pitch_class) -> str:
    """
    Convert an integer pitch class to its alpha symbol.
    
    10, 11 and 12 become ``"A"``, ``"B"`` and ``"C"``; every other value is
    rendered with ``str``.
    """
    value = _leading_int(str(pitch_class))
    if value in PC_TO_ALPHA:
        return PC_TO_ALPHA[value]
    return str(pitch_class)


def pc_to_chromatic(pitch_class) -> str:
    """
    Look up the chromatic note name of a pitch class.
    
    Args:
        pitch_class: Integer pitch class
        
    Returns:
        Note name such as ``"D#/Eb"``, or ``"unknown"`` outside [0, 11]
        
    Examples:
        >>> pc_to_chromatic(3)
        'D#/Eb'
        >>> pc_to_chromatic(13)
        'unknown'
    """
    if isinstance(pitch_class, (bool, str, bytes)):
        return UNKNOWN_NAME
    if pitch_class in range(MODULUS):
        return CHROMATIC_NAMES[int(pitch_class)]
    return UNKNOWN_NAME
