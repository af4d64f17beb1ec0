"""Domain errors surfaced to callers."""


class FitnessTrackerError(Exception):
    """Base class for recoverable application errors."""


class InvalidInputError(FitnessTrackerError):
    """Raised when caller input is empty or malformed."""


class ImageUnavailableError(FitnessTrackerError):
    """Raised when an image handle cannot be read."""


class NotFoundError(FitnessTrackerError):
    """Raised when a referenced record does not exist."""


class ConflictError(FitnessTrackerError):
    """Raised when an operation conflicts with current state."""
