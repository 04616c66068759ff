"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import patterns
from . import exceptions
from . import strings
from . import encoding
from . import accessor

from .exceptions import DecodeError, DecodeErrorReason
from .strings import *
from .encoding import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'patterns',
    'exceptions',
    'strings',
    'encoding',
    'accessor',
    'DecodeError',
    'DecodeErrorReason'
] + strings.__all__ + encoding.__all__
