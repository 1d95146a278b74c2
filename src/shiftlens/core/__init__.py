"""Core utilities shared across shiftlens modules."""

from .errors import ShiftLensValueError

__all__ = ["ShiftLensValueError"]
