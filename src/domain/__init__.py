"""Domain layer: errors and constants."""

from .errors import ErrorCodes, PolicyRejectError

__all__ = [
    "ErrorCodes",
    "PolicyRejectError",
]
