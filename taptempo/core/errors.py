"""Exceptions raised by the tap tempo engine and its command line."""


class TapTempoError(Exception):
    """Base class for all TapTempo errors."""


class EmptyWindowError(TapTempoError, IndexError):
    """Raised when reading the oldest or newest tap of an empty window."""


class ArgumentError(TapTempoError):
    """Raised when the command line cannot be parsed."""
