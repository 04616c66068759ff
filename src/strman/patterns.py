"""Regex patterns and constants shared by the string and encoding functions.
"""

__docformat__ = 'google'

import re
from string import digits, ascii_lowercase

## Normalization
# Building blocks
WHITESPACE_RUN: str = "\\s\\s+"
""" Uncompiled regex building block representing two or more consecutive whitespace characters."""

# Patterns
WHITESPACE_RUN_PATTERN: re.Pattern = re.compile(WHITESPACE_RUN, re.ASCII)
"""Compiled regex matching a run of two or more whitespace characters.

Single whitespace characters are not matched, so a lone tab between two
words survives collapsing. Only ASCII whitespace counts, so runs of
non-breaking spaces are left alone.

Used in `strman.strings.collapse_whitespace`."""

## Encoding
TEXT_ENCODING: str = 'utf-8'
"""Byte encoding used for base64 encoding and decoding of text."""

CODE_UNIT_ENCODING: str = 'utf-16-be'
"""Encoding used to split text into sixteen-bit code units for `strman.encoding.encode`.

Characters outside the Basic Multilingual Plane become two units (a surrogate pair)."""

RADIX_DIGITS: str = digits + ascii_lowercase
"""Numeral characters in ascending value, covering every radix up to 36.

Encoded output always uses the lowercase letters. Decoding accepts either case."""

MIN_RADIX: int = 2
MAX_RADIX: int = len(RADIX_DIGITS)
"""Inclusive bounds for the `radix` argument of `strman.encoding.encode` and `strman.encoding.decode`."""

BIN_DIGITS: int = 16
BIN_RADIX: int = 2
"""Token width and radix used by `strman.encoding.bin_encode` and `strman.encoding.bin_decode`.

Each character becomes a sixteen-digit binary numeral (e.g. 'h' is '0000000001101000')."""


def delimiter_pattern(*delimiters: str) -> re.Pattern:
    """
    Compile a pattern matching any of the literal delimiters.

    Alternatives are tried in argument order, so where two delimiters match at
    the same position the earlier argument wins.

    Args:
        delimiters: One or more literal strings

    Returns:
        Compiled regex alternation of the escaped delimiters

    Example:
        >>> delimiter_pattern('[', ']').split('a[b]c')
        ['a', 'b', 'c']
    """
    return re.compile('|'.join(map(re.escape, delimiters)))
