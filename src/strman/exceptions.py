__docformat__ = 'google'

__all__ = [
    'DecodeErrorReason',
    'DecodeError'
]

from enum import Enum


class DecodeErrorReason(Enum):
    """
    Enumeration of the ways decoding can fail, used in `DecodeError`.
    """
    INVALID_ENCODING = "invalid-encoding"
    INVALID_NUMERAL = "invalid-numeral"
    INVALID_LENGTH = "invalid-length"


class DecodeError(ValueError):
    """
    Raised when encoded text cannot be turned back into a string.

    Args:
        message: Human-readable description of the failure
        reason: Which kind of malformed input was found
        value: The encoded input that failed to decode

    Example:
        >>> from strman.encoding import decode
        >>> try:
        ...     decode('012', 2, 2)
        ... except DecodeError as e:
        ...     e.reason
        <DecodeErrorReason.INVALID_LENGTH: 'invalid-length'>
    """
    def __init__(self, message: str, reason: DecodeErrorReason, value: str = None):
        super().__init__(message)
        self.reason = reason
        self.value = value
