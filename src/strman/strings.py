"""String manipulation functions for searching, extracting and formatting text.

Every function in this module takes one or more strings (plus optional flags)
and returns a new value; inputs are never modified.

Case-insensitive comparisons lower-case both operands with `str.lower`. Note
that the default case sensitivity differs between functions:
    * `contains`, `contains_all` and `contains_any` ignore case by default.
    * `count_substr`, `ends_with` and `ensure_left` respect case by default.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'append',
    'between',
    'chars',
    'collapse_whitespace',
    'contains',
    'contains_all',
    'contains_any',
    'count_substr',
    'ends_with',
    'ensure_left',
    'left_pad'
]

from typing import List, Iterable, Optional
from strman.patterns import WHITESPACE_RUN_PATTERN, delimiter_pattern

def append(value: str, *appends: str) -> str:
    """
    Append any number of strings to a value.

    Args:
        value: Initial string
        appends: Strings to append, in order

    Returns:
        Concatenated string, or `value` unchanged if nothing is appended

    Example:
        >>> append('f', 'o', 'o', 'bar')
        'foobar'
        >>> append('foo')
        'foo'
    """
    return value + ''.join(appends)

def between(value: str, start: str, end: str) -> List[str]:
    """
    Extract the parts of a string that sit between `start` and `end`.

    The string is split on every occurrence of either delimiter and every
    second fragment is kept. Delimiters are not paired or nested, so
    unbalanced input gives fragments based on position alone.

    Args:
        value: String to search
        start: Opening delimiter
        end: Closing delimiter

    Returns:
        List of the odd-indexed split fragments, or `[value]` if there are none

    Example:
        >>> between('hello [123] world', '[', ']')
        ['123']
        >>> between('[abc][def]', '[', ']')
        ['abc', 'def']
        >>> between('hello world', '[', ']')
        ['hello world']
    """
    fragments = delimiter_pattern(start, end).split(value)
    return fragments[1::2] or [value]

def chars(value: str) -> List[str]:
    """
    Split a string into its characters.

    Example:
        >>> chars('title')
        ['t', 'i', 't', 'l', 'e']
    """
    return list(value)

def collapse_whitespace(value: str) -> str:
    """
    Trim a string and replace consecutive whitespace characters with a single space.

    Example:
        >>> collapse_whitespace('  foo    bar  ')
        'foo bar'
    """
    return WHITESPACE_RUN_PATTERN.sub(' ', value.strip())

def contains(value: str, needle: str, case_sensitive: bool = False) -> bool:
    """
    Check if a string contains a substring.

    Args:
        value: String to search
        needle: Substring to find
        case_sensitive: Compare without lower-casing (default False)

    Returns:
        True if `needle` occurs in `value`, else False

    Example:
        >>> contains('Hello World', 'world')
        True
        >>> contains('Hello World', 'world', case_sensitive=True)
        False
    """
    if case_sensitive:
        return needle in value
    else:
        return needle.lower() in value.lower()

def contains_all(value: str, needles: Iterable[str], case_sensitive: bool = False) -> bool:
    """
    Check if a string contains every one of the needles.

    Example:
        >>> contains_all('Hello World', ['hello', 'world'])
        True
    """
    return all(contains(value, needle, case_sensitive) for needle in needles)

def contains_any(value: str, needles: Iterable[str], case_sensitive: bool = False) -> bool:
    """
    Check if a string contains at least one of the needles.

    Example:
        >>> contains_any('Hello World', ['foo', 'WORLD'])
        True
        >>> contains_any('Hello World', ['foo', 'WORLD'], case_sensitive=True)
        False
    """
    return any(contains(value, needle, case_sensitive) for needle in needles)

def count_substr(value: str, sub_str: str, case_sensitive: bool = True, allow_overlapping: bool = False) -> int:
    """
    Count the occurrences of a substring.

    Scans left to right. After each match the scan resumes just past the
    match, or one character after where it started when overlapping
    matches are allowed.

    Args:
        value: String to search
        sub_str: Substring to count
        case_sensitive: Compare without lower-casing (default True)
        allow_overlapping: Count matches that share characters (default False)

    Returns:
        Number of occurrences. An empty `sub_str` has none.

    Example:
        >>> count_substr('aaa', 'aa')
        1
        >>> count_substr('aaa', 'aa', allow_overlapping=True)
        2
        >>> count_substr('Hello hello', 'hello', case_sensitive=False)
        2
    """
    if not sub_str:
        return 0
    if not case_sensitive:
        value, sub_str = value.lower(), sub_str.lower()

    step = 1 if allow_overlapping else len(sub_str)
    count = 0
    position = value.find(sub_str)
    while position != -1:
        count += 1
        position = value.find(sub_str, position + step)
    return count

def ends_with(value: str, search: str, position: Optional[int] = None, case_sensitive: bool = True) -> bool:
    """
    Check if `search` occurs in `value` no earlier than `len(search)` characters before `position`.

    With the default `position` this is a suffix test. With a smaller
    `position` it tests whether `value` would end with `search` if it were cut
    at `position`, but any later occurrence also counts: the check is a
    forward search starting at `position - len(search)`.

    If the third argument is a bool it is read as `case_sensitive` and the
    call is an exact suffix test against the end of `value`, so
    `ends_with(value, search, False)` ignores case.

    Args:
        value: String to search
        search: Ending to look for
        position: Index the ending is measured from (default `len(value)`)
        case_sensitive: Compare without lower-casing (default True)

    Returns:
        True if the ending is found, else False

    Example:
        >>> ends_with('hello world', 'world')
        True
        >>> ends_with('hello world', 'hello', 5)
        True
        >>> ends_with('hello world', 'WORLD', False)
        True
    """
    if isinstance(position, bool):
        return _ends_with_suffix(value, search, case_sensitive=position)
    if position is None:
        position = len(value)
    if not search:
        return True
    if not case_sensitive:
        value, search = value.lower(), search.lower()
    return value.find(search, max(0, position - len(search))) > -1

def _ends_with_suffix(value: str, search: str, case_sensitive: bool = True) -> bool:
    if case_sensitive:
        return value.endswith(search)
    else:
        return value.lower().endswith(search.lower())

def ensure_left(value: str, prefix: str, case_sensitive: bool = True) -> str:
    """
    Prepend `prefix` to `value` unless `value` already starts with it.

    Example:
        >>> ensure_left('foobar', 'foo')
        'foobar'
        >>> ensure_left('bar', 'foo')
        'foobar'
        >>> ensure_left('FOObar', 'foo', case_sensitive=False)
        'FOObar'
    """
    if case_sensitive:
        has_prefix = value.startswith(prefix)
    else:
        has_prefix = value.lower().startswith(prefix.lower())
    return value if has_prefix else prefix + value

def left_pad(value: str, pad: str, length: int) -> str:
    """
    Pad the start of a string up to `length`.

    One copy of the whole `pad` string is added per missing character, so a
    multi-character pad gives a result longer than `length`. Strings that are
    already long enough are returned unchanged, never truncated.

    Args:
        value: String to pad
        pad: Padding unit
        length: Target length

    Returns:
        Padded string

    Example:
        >>> left_pad('5', '0', 3)
        '005'
        >>> left_pad('5', 'ab', 3)
        'abab5'
        >>> left_pad('abcdef', '0', 3)
        'abcdef'
    """
    if len(value) >= length:
        return value
    return pad * (length - len(value)) + value
