"""reclaim exception hierarchy.

All reclaim-specific exceptions inherit from ReclaimError.
"""


class ReclaimError(Exception):
    """Base exception for all reclaim errors."""


class PoolStartupError(ReclaimError):
    """The worker pool could not start its threads."""
