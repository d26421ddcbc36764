"""
Deep structural comparison of two values, reporting the first place where they diverge

Comparison is always 'expected'-driven and stops at the first divergence found, in this traversal order:

    - arrays: lengths first, then index by index from 0 upwards
    - objects: keys of the expected object in their natural iteration order. Keys only present in the actual object are
      never looked at, so extra keys in the actual object never cause a mismatch

Paths to the divergence are built while unwinding: each level prepends its own accessor ('[i]' for arrays, '.key' for
objects) to the path returned by the level below it.

Handled kinds (see :mod:`structeq.kinds`):
    - undefined, null, boolean, number, bigint, string, symbol (leaves)
    - array (list, tuple, range, numpy ndarray, other sequences)
    - object (mappings, sets, and any other object through its attributes). Objects with no attributes to look at
      (Decimal-like C types, dates, generators, etc.) fall back on built-in __eq__
"""

import logging
from .kinds import Kind, classify
from typing import TYPE_CHECKING
from collections.abc import Mapping, Set


if TYPE_CHECKING:
    from typing import Any, Optional
    from typing_extensions import Self


logger = logging.getLogger(__name__)

# Kinds whose values are only ever equal to themselves
_IDENTITY_KINDS = (Kind.UNDEFINED, Kind.NULL, Kind.SYMBOL)

# Longest a single value is allowed to be when shown in a message
MAX_STR_LEN = 1000


class ComparisonResult:
    """
    Outcome of a comparison. When ``equal`` is True, the other fields carry no meaning. Otherwise ``path`` locates the
        first divergence relative to the comparison root, and ``expected``/``actual`` describe what was found there.
        Those descriptions are either raw leaf values, or strings like 'type "array"' and 'length 3'.
    """
    __slots__ = ('equal', 'expected', 'actual', 'path')

    def __init__(self: 'Self', equal: 'bool' = True, expected: 'Any' = None, actual: 'Any' = None, path: 'str' = ''):
        self.equal = equal
        self.expected = expected
        self.actual = actual
        self.path = path

    def prefixed(self: 'Self', accessor: 'str') -> 'Self':
        """Prepends the given accessor to this result's path (in place), returning self"""
        self.path = accessor + self.path
        return self

    def __bool__(self) -> 'bool':
        return self.equal

    def __eq__(self, other):
        if not isinstance(other, ComparisonResult):
            return NotImplemented
        if self.equal or other.equal:
            return self.equal == other.equal
        return self.path == other.path and _same(self.expected, other.expected) and _same(self.actual, other.actual)

    __hash__ = None

    def __repr__(self) -> 'str':
        if self.equal:
            return 'ComparisonResult(equal=True)'
        return 'ComparisonResult(equal=False, expected=%r, actual=%r, path=%r)' % \
            (self.expected, self.actual, self.path)


def _same(a, b):
    return a is b or (type(a) == type(b) and a == b)


def mismatch(expected: 'Any', actual: 'Any', path: 'str' = '') -> 'ComparisonResult':
    """Builds a non-equal result"""
    return ComparisonResult(False, expected, actual, path)


def type_mismatch(kind_expected: 'Kind', kind_actual: 'Kind', path: 'str' = '') -> 'ComparisonResult':
    return mismatch('type "%s"' % kind_expected, 'type "%s"' % kind_actual, path)


def compare(expected: 'Any', actual: 'Any') -> 'ComparisonResult':
    """
    Deeply compares the two values, returning a :class:`ComparisonResult` for the first divergence found (or an equal
        result if there is none).

    Values of different kinds are never equal, and that mismatch is always reported at the root (empty path).
    """
    try:
        kind_expected, kind_actual = classify(expected), classify(actual)
        if kind_expected != kind_actual:
            logger.debug("Kinds differ at root: %s != %s", kind_expected, kind_actual)
            return type_mismatch(kind_expected, kind_actual)
        return _dispatch(kind_expected, expected, actual)
    except ComparisonError:
        raise
    except Exception as e:
        raise ComparisonError("", expected, actual) from e


def compare_primitive(expected: 'Any', actual: 'Any') -> 'ComparisonResult':
    """
    Strict equality of two leaf values of the same kind. No coercion happens: null, undefined and symbols are only equal
        to themselves, everything else is compared by value. On a mismatch the raw values are returned unchanged with an
        empty path, the caller decides how they are shown.
    """
    if _leaf_equal(classify(expected), expected, actual):
        return ComparisonResult()
    return mismatch(expected, actual)


def compare_sequence(expected: 'Any', actual: 'Any') -> 'ComparisonResult':
    """
    Index-aligned deep comparison of two arrays.

    A difference in length is reported straight away (as 'length N' against the actual length), without looking for
        the first differing element.
    """
    len_expected, len_actual = len(expected), len(actual)
    if len_expected != len_actual:
        logger.debug("Array lengths differ: %d != %d", len_expected, len_actual)
        return mismatch('length %d' % len_expected, len_actual)

    for i, (_expected_item, _actual_item) in enumerate(zip(expected, actual)):
        result = _compare_child('[%d]' % i, _expected_item, _actual_item)
        if not result:
            return result

    return ComparisonResult()


def compare_record(expected: 'Any', actual: 'Any') -> 'ComparisonResult':
    """
    Key-aligned deep comparison of two objects, driven by the keys of ``expected`` only.

    A key missing from ``actual`` is reported as 'key to be present' against 'none'. Keys that only ``actual`` has are
        ignored.

    Objects with no key/value view at all (see :func:`record_items`) are compared with built-in ``==`` instead, and a
        mismatch then gives back the raw objects with an empty path.
    """
    expected_items, actual_items = record_items(expected), record_items(actual)

    if expected_items is None or actual_items is None:
        if _leaf_equal(Kind.RECORD, expected, actual):
            return ComparisonResult()
        logger.debug("Opaque objects differ using built-in __eq__")
        return mismatch(expected, actual)

    for key, _expected_item in expected_items.items():
        accessor = '.%s' % (key,)
        if key not in actual_items:
            logger.debug("Key %r missing from actual object", key)
            return mismatch('key to be present', 'none', accessor)

        result = _compare_child(accessor, _expected_item, actual_items[key])
        if not result:
            return result

    return ComparisonResult()


def record_items(value: 'Any') -> 'Optional[Mapping]':
    """
    Returns the key/value view of an 'object' kind value: mappings are used as they are, sets map each element to True,
        and any other object exposes its instance attributes (``__dict__``, then ``__slots__``).

    Returns None for objects that have neither a ``__dict__`` nor any declared ``__slots__`` (dates, generators and
        other C-level types), as there is nothing to compare key by key.
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, Set):
        return dict.fromkeys(value, True)

    attrs = getattr(value, '__dict__', None)
    if attrs is not None:
        return attrs

    slot_items, has_slots = {}, False
    for cls in type(value).__mro__:
        if '__slots__' not in cls.__dict__:
            continue
        slots = cls.__dict__['__slots__']
        for name in ((slots,) if isinstance(slots, str) else slots):
            has_slots = True
            if name != '__weakref__' and name not in slot_items and hasattr(value, name):
                slot_items[name] = getattr(value, name)
    return slot_items if has_slots else None


def _compare_child(accessor, expected, actual):
    """compares one element/value pair of a container, prefixing any divergence with the accessor of that element"""
    try:
        kind_expected, kind_actual = classify(expected), classify(actual)
        if kind_expected != kind_actual:
            logger.debug("Kinds differ at %s: %s != %s", accessor, kind_expected, kind_actual)
            return type_mismatch(kind_expected, kind_actual, accessor)

        if kind_expected.is_leaf:
            if _leaf_equal(kind_expected, expected, actual):
                return ComparisonResult()
            logger.debug("Values differ at %s", accessor)
            return mismatch(expected, actual, accessor)

        result = _dispatch(kind_expected, expected, actual)
        return result if result else result.prefixed(accessor)

    except ComparisonError as e:
        raise e.prefixed(accessor)
    except Exception as e:
        raise ComparisonError(accessor, expected, actual) from e


def _dispatch(kind, expected, actual):
    """picks the comparator for two values known to share the given kind"""
    if kind == Kind.SEQUENCE:
        return compare_sequence(expected, actual)
    elif kind == Kind.RECORD:
        return compare_record(expected, actual)
    elif kind.is_leaf:
        return compare_primitive(expected, actual)
    raise ComparisonError('', expected, actual, message="Unknown kind %r" % kind)


def _leaf_equal(kind, a, b):
    """strict equality on two leaves of the same kind"""
    if a is b:
        return True
    if kind in _IDENTITY_KINDS:
        return False
    return bool(a == b)


def limit_str(text: 'str', limit: 'int' = MAX_STR_LEN) -> 'str':
    """Cuts the given string short after `limit` characters, ending it with '...'"""
    return text if len(text) <= limit else (text[:limit] + '...')


class ComparisonError(Exception):
    """
    Error raised whenever comparing two values fails unexpectedly (eg: a custom ``__eq__`` or ``__len__`` raising), as
        opposed to the values simply being unequal. The original error is chained as ``__cause__``.
    """

    def __init__(self, path: 'str', expected: 'Any', actual: 'Any', message: 'Optional[str]' = None):
        super().__init__(path, expected, actual, message)
        self.path = path
        self.expected = expected
        self.actual = actual
        self.message = message

    def prefixed(self, accessor: 'str') -> 'ComparisonError':
        self.path = accessor + self.path
        return self

    def __str__(self) -> 'str':
        message = "Could not determine equality" if self.message is None else self.message
        return "%s at path %s\nexpected: %s\nactual: %s" % \
            (message, repr(self.path or '<root>'), limit_str(repr(self.expected)), limit_str(repr(self.actual)))
