"""Common shiftlens-specific exceptions."""


class ShiftLensValueError(ValueError):
    """Raised when a caller passes an option outside the supported set."""


__all__ = ["ShiftLensValueError"]
