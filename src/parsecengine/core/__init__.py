"""Core utilities shared across the syntax and combinator layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]
