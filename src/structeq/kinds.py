"""
Classification of values into the closed set of kinds used to pick comparison behavior

Python's own type reflection is far too fine-grained (and tuples, lists and arrays are all different types), so every
value is first mapped onto one :class:`Kind`. Priority order:

    1. ``None`` is 'null'
    2. ordered sequences (list, tuple, range, numpy arrays, other ``Sequence`` types, but not strings) are 'array'
    3. everything else falls back on its native type, with mappings, sets and plain objects all being 'object'
"""

import numpy as np
from enum import Enum
from .pytypes import UNDEFINED, MAX_SAFE_INTEGER, BooleanTypes, NumberTypes, IntegerTypes, StringTypes, \
    SequenceTypes, AtomTypes
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any


class Kind(Enum):
    """Semantic kind of a value. The values are the labels shown in failure messages."""
    UNDEFINED = 'undefined'
    NULL = 'null'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    BIG_INTEGER = 'bigint'
    SYMBOL = 'symbol'
    SEQUENCE = 'array'
    RECORD = 'object'

    def __str__(self) -> 'str':
        return self.value

    @property
    def is_leaf(self) -> 'bool':
        return self not in (Kind.SEQUENCE, Kind.RECORD)


LEAF_KINDS = frozenset(k for k in Kind if k.is_leaf)


def classify(value: 'Any') -> 'Kind':
    """
    Returns the :class:`Kind` of the given value. Never fails, every value has exactly one kind.
    """
    if value is None:
        return Kind.NULL

    if _is_sequence(value):
        return Kind.SEQUENCE

    # Zero-dimensional arrays hold a single scalar, classify that instead
    if isinstance(value, np.ndarray):
        return classify(value[()])

    if value is UNDEFINED:
        return Kind.UNDEFINED

    # Enum members are atoms even when they are also ints (IntEnum, IntFlag)
    if isinstance(value, AtomTypes):
        return Kind.SYMBOL

    # Check for bool first so that True is never a number
    if isinstance(value, BooleanTypes):
        return Kind.BOOLEAN

    if isinstance(value, NumberTypes):
        if isinstance(value, IntegerTypes) and abs(int(value)) > MAX_SAFE_INTEGER:
            return Kind.BIG_INTEGER
        return Kind.NUMBER

    if isinstance(value, StringTypes):
        return Kind.STRING

    # Functions, classes and other callables are never compared structurally, only by identity
    if callable(value):
        return Kind.SYMBOL

    return Kind.RECORD


def _is_sequence(value):
    """ordered, index-addressed containers. Strings are sequences to python, but not to us"""
    if isinstance(value, StringTypes):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, SequenceTypes)

