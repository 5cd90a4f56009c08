class NaiveInstantError(ValueError):
    """Raised when a reference instant has no timezone and cannot be compared to the schedule."""
