"""Wendler planner exceptions."""


class WendlerError(Exception):
    """Base exception for planner errors."""
    pass


class ProfileRequiredError(WendlerError):
    """Raised when an operation needs a user profile and none is available."""
    pass


class NoWorkoutHistoryError(WendlerError):
    """Raised when a lift has no logged workouts to work from."""
    pass


class StoreError(WendlerError):
    """Raised when the profile or log store cannot be written."""
    pass


class AdviceError(WendlerError):
    """Raised when a call to the advice service fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
