"""Exceptions raised by pitchside."""

from typing import Union


class PitchsideError(Exception):
    """Base exception for pitchside errors."""
    pass


class UnknownEventTypeError(PitchsideError):
    """Raised when asked to build an event of an unknown kind."""
    pass


class InvalidControlMessageError(PitchsideError):
    """Raised when an inbound control frame cannot be decoded."""

    def __init__(self, message: str, raw: Union[str, bytes] = ""):
        super().__init__(message)
        self.raw = raw


class ReconnectExhaustedError(PitchsideError):
    """Raised when the feed client runs out of reconnect attempts."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts
