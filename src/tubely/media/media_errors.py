"""Errors raised by media tool adapters."""

from ..exceptions import AppError


class MediaError(AppError):
    """Base class for media inspection and remux failures."""


class TranscodeError(MediaError):
    """Raised when the remux process fails."""


class ProbeError(MediaError):
    """Raised when stream geometry cannot be read from a file."""


class InvalidDimensionsError(MediaError):
    """Raised when probed dimensions cannot be classified."""
