"""Exceptions for the DSP transform library."""

from .constants import status_name


class DspError(RuntimeError):
    """Raised by the array-returning helpers when a transform reports failure."""

    def __init__(self, status: int, message: str = None):
        self.status = status
        if message is None:
            message = f"DSP operation failed with status {status_name(status)}"
        super().__init__(message)
