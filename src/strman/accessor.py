"""Element-wise access to the strman functions from a pandas Series.

Importing `strman` registers a `strman` accessor on `pandas.Series`:

    >>> import pandas as pd
    >>> import strman
    >>> pd.Series(['  foo    bar ', 'baz']).strman.collapse_whitespace().tolist()
    ['foo bar', 'baz']

Each method applies the function of the same name in `strman.strings` or
`strman.encoding` to every element and returns a new Series with the same
index. Missing values are passed through untouched.
"""

__docformat__ = 'google'

__all__ = [
    'StrmanAccessor'
]

from typing import Callable, Iterable, Optional
import pandas as pd
from strman import strings, encoding

@pd.api.extensions.register_series_accessor('strman')
class StrmanAccessor:
    """
    Series accessor exposing the strman functions as `Series.strman.<function>`.

    Args:
        series: Series of strings (missing values allowed)

    Example:
        >>> pd.Series(['bar', 'foobar']).strman.ensure_left('foo').tolist()
        ['foobar', 'foobar']
    """
    def __init__(self, series: pd.Series):
        self._series = series

    def _apply(self, func: Callable, *args, **kwargs) -> pd.Series:
        return self._series.map(lambda value: func(value, *args, **kwargs), na_action='ignore')

    def append(self, *appends: str) -> pd.Series:
        return self._apply(strings.append, *appends)

    def between(self, start: str, end: str) -> pd.Series:
        return self._apply(strings.between, start, end)

    def chars(self) -> pd.Series:
        return self._apply(strings.chars)

    def collapse_whitespace(self) -> pd.Series:
        return self._apply(strings.collapse_whitespace)

    def contains(self, needle: str, case_sensitive: bool = False) -> pd.Series:
        return self._apply(strings.contains, needle, case_sensitive)

    def contains_all(self, needles: Iterable[str], case_sensitive: bool = False) -> pd.Series:
        needles = list(needles)
        return self._apply(strings.contains_all, needles, case_sensitive)

    def contains_any(self, needles: Iterable[str], case_sensitive: bool = False) -> pd.Series:
        needles = list(needles)
        return self._apply(strings.contains_any, needles, case_sensitive)

    def count_substr(self, sub_str: str, case_sensitive: bool = True, allow_overlapping: bool = False) -> pd.Series:
        return self._apply(strings.count_substr, sub_str, case_sensitive, allow_overlapping)

    def ends_with(self, search: str, position: Optional[int] = None, case_sensitive: bool = True) -> pd.Series:
        return self._apply(strings.ends_with, search, position, case_sensitive)

    def ensure_left(self, prefix: str, case_sensitive: bool = True) -> pd.Series:
        return self._apply(strings.ensure_left, prefix, case_sensitive)

    def left_pad(self, pad: str, length: int) -> pd.Series:
        return self._apply(strings.left_pad, pad, length)

    def base64_encode(self) -> pd.Series:
        return self._apply(encoding.base64_encode)

    def base64_decode(self) -> pd.Series:
        return self._apply(encoding.base64_decode)

    def encode(self, digits: int, radix: int) -> pd.Series:
        return self._apply(encoding.encode, digits, radix)

    def decode(self, digits: int, radix: int) -> pd.Series:
        return self._apply(encoding.decode, digits, radix)

    def bin_encode(self) -> pd.Series:
        return self._apply(encoding.bin_encode)

    def bin_decode(self) -> pd.Series:
        return self._apply(encoding.bin_decode)
