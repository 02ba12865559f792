"""
Exception hierarchy for the PCSet toolkit.
"""


class PCSetError(Exception):
    """Base exception for PCSet toolkit."""
    pass


class EmptySetError(PCSetError):
    """Operation needs at least one pitch class."""
    pass


class LengthMismatchError(PCSetError):
    """Compared sets differ in cardinality."""
    pass


class AlphaParseError(PCSetError):
    """Alpha symbol could not be read as a pitch class."""
    pass


class ConfigError(PCSetError):
    """Configuration file loading or validation errors."""
    pass
