"""
Python types and special objects used when classifying values

Python has no native 'undefined' value and no native symbol type, so both are provided here. Everything else maps onto
builtin (or numpy) types.
"""

import numpy as np
import numbers
from collections.abc import Sequence, ValuesView
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Optional


# Largest integer magnitude that can be stored exactly in a double. Integers past this are 'big integers'.
MAX_SAFE_INTEGER = 2 ** 53 - 1


class _UndefinedType:
    """
    Type of the :data:`UNDEFINED` singleton, a marker for 'no value at all' as opposed to ``None`` which is 'the null
        value'. Only one instance ever exists.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> 'str':
        return 'UNDEFINED'

    def __str__(self) -> 'str':
        return 'undefined'

    def __bool__(self) -> 'bool':
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_UndefinedType, ())


UNDEFINED = _UndefinedType()


class Symbol:
    """
    A unique atom. Two symbols are only ever equal if they are the exact same instance, the description is just a label
        and plays no part in equality.
    """
    __slots__ = ('description',)

    def __init__(self, description: 'Optional[str]' = None):
        self.description = description

    def __repr__(self) -> 'str':
        return 'Symbol(%s)' % ('' if self.description is None else repr(self.description))

    def __str__(self) -> 'str':
        return 'Symbol(%s)' % ('' if self.description is None else self.description)

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)


# Types grouped by the kind they belong to. Order of checks matters (bool before numbers), see kinds.classify()
BooleanTypes = (bool, np.bool_)
NumberTypes = (int, float, complex, np.number, numbers.Number)
IntegerTypes = (int, np.integer)
StringTypes = (str, bytes, bytearray)
SequenceTypes = (list, tuple, range, np.ndarray, Sequence, ValuesView)
AtomTypes = (Symbol, Enum)
