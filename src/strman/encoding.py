"""Encoding and decoding of text as base64 or as fixed-width numerals.

`encode` turns every UTF-16 code unit into a zero-padded numeral, so the
output of `encode('hi', 3, 16)` is two three-digit hex tokens with no
separator ('068069'). `decode` reverses it by cutting the input into equal
chunks. A character outside the Basic Multilingual Plane is written as the
two tokens of its surrogate pair.

Decoding functions raise `strman.exceptions.DecodeError` for malformed input.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'base64_encode',
    'base64_decode',
    'encode',
    'decode',
    'bin_encode',
    'bin_decode'
]

import base64
import logging
from strman.exceptions import DecodeError, DecodeErrorReason
from strman.patterns import (
    TEXT_ENCODING,
    CODE_UNIT_ENCODING,
    RADIX_DIGITS,
    MIN_RADIX,
    MAX_RADIX,
    BIN_DIGITS,
    BIN_RADIX
)

logger = logging.getLogger(__name__)

def base64_encode(value: str) -> str:
    """
    Encode the UTF-8 bytes of a string as base64.

    Example:
        >>> base64_encode('strman')
        'c3RybWFu'
    """
    return base64.b64encode(value.encode(TEXT_ENCODING)).decode('ascii')

def base64_decode(value: str) -> str:
    """
    Decode base64 back into a string.

    Trailing '=' padding is optional. Bytes that are not valid UTF-8 are
    replaced with U+FFFD.

    Args:
        value: Base64 text using the standard alphabet

    Returns:
        Decoded string

    Raises:
        DecodeError: If `value` contains characters outside the base64
            alphabet or has an impossible length

    Example:
        >>> base64_decode('c3RybWFu')
        'strman'
        >>> base64_decode('Zm9vYg')
        'foob'
    """
    if '=' not in value:
        value += '=' * (-len(value) % 4)
    try:
        data = base64.b64decode(value, validate=True)
    except ValueError as e:
        logger.debug("Invalid base64 input %r: %s", value, e)
        raise DecodeError(f'Invalid base64 input: {e}', DecodeErrorReason.INVALID_ENCODING, value) from e
    return data.decode(TEXT_ENCODING, errors='replace')

def encode(value: str, digits: int, radix: int) -> str:
    """
    Encode each UTF-16 code unit as a numeral in `radix`, zero-padded to `digits`.

    Args:
        value: String to encode
        digits: Width of each token
        radix: Numeric base, 2 to 36

    Returns:
        Concatenated fixed-width tokens

    Raises:
        ValueError: If `digits` is not positive, `radix` is out of range, or
            a code unit needs more than `digits` digits in `radix`

    Example:
        >>> encode('abc', 16, 2)
        '000000000110000100000000011000100000000001100011'
        >>> encode('abc', 4, 16)
        '006100620063'
        >>> encode('\\U0001F600', 4, 16)
        'd83dde00'
    """
    _check_arguments(digits, radix)
    tokens = []
    for unit in _code_units(value):
        numeral = _to_numeral(unit, radix)
        if len(numeral) > digits:
            raise ValueError(f'Code unit {unit:#06x} needs {len(numeral)} base {radix} digits, more than {digits}')
        tokens.append(numeral.zfill(digits))
    return ''.join(tokens)

def decode(value: str, digits: int, radix: int) -> str:
    """
    Decode a string of fixed-width numerals produced by `encode`.

    Adjacent surrogate tokens are joined back into a single character. A token
    may also hold a whole code point above U+FFFF.

    Args:
        value: Encoded string
        digits: Width of each token
        radix: Numeric base, 2 to 36

    Returns:
        Decoded string

    Raises:
        DecodeError: If the length of `value` is not a multiple of `digits`,
            or a token is not a numeral in `radix` or not a valid code point
        ValueError: If `digits` is not positive or `radix` is out of range

    Example:
        >>> decode('006100620063', 4, 16)
        'abc'
    """
    _check_arguments(digits, radix)
    if len(value) % digits:
        logger.debug("Cannot split %d characters into %d-digit tokens", len(value), digits)
        raise DecodeError(
            f'Length {len(value)} is not a multiple of {digits}',
            DecodeErrorReason.INVALID_LENGTH,
            value
        )

    decoded = []
    for start in range(0, len(value), digits):
        token = value[start:start + digits]
        try:
            decoded.append(chr(_parse_numeral(token, radix)))
        except ValueError as e:
            logger.debug("Invalid base %d token %r at index %d", radix, token, start)
            raise DecodeError(
                f'Invalid base {radix} token {token!r} at index {start}',
                DecodeErrorReason.INVALID_NUMERAL,
                value
            ) from e
    return _join_surrogates(''.join(decoded))

def bin_encode(value: str) -> str:
    """
    Encode each character as a sixteen-digit binary numeral.

    Example:
        >>> bin_encode('A')
        '0000000001000001'
    """
    return encode(value, BIN_DIGITS, BIN_RADIX)

def bin_decode(value: str) -> str:
    """
    Decode sixteen-digit binary numerals produced by `bin_encode`.

    Example:
        >>> bin_decode('0000000001000001')
        'A'
    """
    return decode(value, BIN_DIGITS, BIN_RADIX)

def _check_arguments(digits: int, radix: int):
    if digits < 1:
        raise ValueError(f'digits must be positive, got {digits}')
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f'radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}')

def _code_units(value: str):
    data = value.encode(CODE_UNIT_ENCODING, 'surrogatepass')
    for start in range(0, len(data), 2):
        yield int.from_bytes(data[start:start + 2], 'big')

def _join_surrogates(value: str) -> str:
    # lone surrogates are kept as they are
    return value.encode(CODE_UNIT_ENCODING, 'surrogatepass').decode(CODE_UNIT_ENCODING, 'surrogatepass')

def _to_numeral(number: int, radix: int) -> str:
    numeral = []
    while True:
        number, remainder = divmod(number, radix)
        numeral.append(RADIX_DIGITS[remainder])
        if number == 0:
            return ''.join(reversed(numeral))

def _parse_numeral(token: str, radix: int) -> int:
    # int() alone would also accept signs, underscores and whitespace
    valid = RADIX_DIGITS[:radix]
    if not all(c in valid for c in token.lower()):
        raise ValueError(f'{token!r} is not a base {radix} numeral')
    return int(token, radix)
