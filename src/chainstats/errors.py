"""
Error taxonomy for chain statistics.

All errors subclass ValueError so callers that already guard numeric input
with ``except ValueError`` keep working.
"""


class ChainStatsError(ValueError):
    """Base class for chainstats input errors."""


class EmptyInputError(ChainStatsError):
    """A moment statistic was requested on an empty sequence."""


class EmptyChainSetError(ChainStatsError):
    """split_chains was given zero chains."""


class NoDrawsError(ChainStatsError):
    """split_chains was given chains whose shortest length is zero."""
