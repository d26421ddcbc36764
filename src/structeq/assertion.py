"""
Assertions on deep equality, turning the first divergence between two values into a readable failure message

Message formats (``message`` is the caller's label for the check):

    - different kinds:  '<message>: Expected type "<kind>" but found type "<kind>"'
    - leaves:           '<message>: Expected "<expected>" but found "<actual>"'
    - arrays:           '<message>: Expected Array<path> <expected> but found <actual>'
    - objects:          '<message>: Expected Object<path> <expected> but found <actual>'
"""

import logging
import math
import numpy as np
from .kinds import Kind, classify
from .comparison import MAX_STR_LEN, ComparisonResult, compare, limit_str
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional


logger = logging.getLogger(__name__)

# Past this magnitude, integral floats are shown in exponent notation
_MAX_PLAIN_FLOAT = 1e21


def assert_equals(message: 'str', expected: 'Any', actual: 'Any') -> 'None':
    """
    Asserts that ``actual`` is deeply equal to ``expected``, raising an :class:`AssertionFailure` describing the first
        divergence otherwise.

    Args:
        message (str): label for this check, put at the start of the failure message
        expected (Any): the value that was expected
        actual (Any): the value that was actually produced
    """
    text, result = _check(message, expected, actual)
    if text is not None:
        raise AssertionFailure(text, result)


def failure_message(message: 'str', expected: 'Any', actual: 'Any') -> 'Optional[str]':
    """Same as :func:`assert_equals`, but returns the failure message (or None if equal) instead of raising"""
    return _check(message, expected, actual)[0]


def deep_equal(expected: 'Any', actual: 'Any', raise_err: 'bool' = False) -> 'bool':
    """
    Returns True if the two values are deeply equal, False otherwise.

    Args:
        expected (Any): the value that was expected
        actual (Any): the value to check against it
        raise_err (bool): if True, then an :class:`AssertionFailure` will be raised instead of returning False, with a
            message pinpointing the first divergence. Defaults to False.
    """
    text, result = _check('Values differ', expected, actual)
    if text is None:
        return True
    if raise_err:
        raise AssertionFailure(text, result)
    return False


def _check(message, expected, actual):
    """compares both values, and formats the failure message if there is one"""
    result = compare(expected, actual)
    if result:
        return None, result

    kind_expected, kind_actual = classify(expected), classify(actual)

    # Different kinds are always reported at the root
    if kind_expected != kind_actual:
        text = '%s: Expected type "%s" but found type "%s"' % (message, kind_expected, kind_actual)

    elif kind_expected.is_leaf:
        text = '%s: Expected "%s" but found "%s"' % (message, display(result.expected), display(result.actual))

    elif kind_expected == Kind.SEQUENCE:
        text = '%s: Expected Array%s %s but found %s' % \
            (message, result.path, display(result.expected), display(result.actual))

    elif kind_expected == Kind.RECORD:
        text = '%s: Expected Object%s %s but found %s' % \
            (message, result.path, display(result.expected), display(result.actual))

    else:
        return '%s: Assertion failed.' % message, ComparisonResult(False)

    logger.debug("Assertion %r failed at path %r", message, result.path)
    return text, result


def display(value: 'Any', limit: 'int' = MAX_STR_LEN) -> 'str':
    """
    Returns the string shown for a value in failure messages: ``true``/``false`` for booleans, ``null`` for None,
        ``undefined``, ``NaN``/``Infinity`` and integral floats without a trailing '.0'. Anything else uses str().
        Strings longer than ``limit`` are cut short and end with '...'
    """
    if isinstance(value, (bool, np.bool_)):
        value_str = 'true' if value else 'false'
    elif value is None:
        value_str = 'null'
    elif isinstance(value, (float, np.floating)):
        value_str = _display_float(float(value))
    else:
        value_str = str(value)
    return limit_str(value_str, limit)


def _display_float(value):
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
        return '%d' % value
    return repr(value)


class AssertionFailure(AssertionError):
    """
    Error raised whenever an :func:`assert_equals` check (or :func:`deep_equal` with ``raise_err=True``) finds that two
        values are not deeply equal. ``str()`` gives the full formatted message, and the location and fragments of the
        first divergence are kept on the error.
    """

    def __init__(self, message: 'str', result: 'Optional[ComparisonResult]' = None):
        super().__init__(message)
        self.message = message
        self.result = result if result is not None else ComparisonResult(False)

    @property
    def path(self) -> 'str':
        return self.result.path

    @property
    def expected(self) -> 'Any':
        return self.result.expected

    @property
    def actual(self) -> 'Any':
        return self.result.actual
