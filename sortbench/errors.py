"""Error types raised while preparing benchmark input."""


class SortBenchError(ValueError):
    """Base class for input validation failures."""


class InvalidSizeError(SortBenchError):
    """Requested sequence length is not a positive integer."""


class InvalidRangeError(SortBenchError):
    """Lower bound of the value range exceeds the upper bound."""
