"""
Tests for the structeq.assertion file: the exact failure message formats, and the boolean/pure variants of the check.
"""

import numpy as np
import pytest
from datetime import date
from decimal import Decimal
from structeq.assertion import MAX_STR_LEN, AssertionFailure, assert_equals, deep_equal, display, failure_message
from structeq.comparison import ComparisonError, compare
from structeq.pytypes import UNDEFINED, Symbol


def _check_fails(expected, actual, message, label='t'):
    with pytest.raises(AssertionFailure) as e:
        assert_equals(label, expected, actual)
    assert str(e.value) == message
    assert e.value.message == message
    assert failure_message(label, expected, actual) == message
    return e.value


def _check_passes(expected, actual):
    assert_equals('t', expected, actual)
    assert failure_message('t', expected, actual) is None
    assert deep_equal(expected, actual)


def test_passes():
    """Tests pairs that are deeply equal"""
    s = Symbol('foo')
    _check_passes('abc', 'abc')
    _check_passes(None, None)
    _check_passes(UNDEFINED, UNDEFINED)
    _check_passes(s, s)
    _check_passes([1, {'a': 'a', 'b': 'b'}, 3], [1, {'a': 'a', 'b': 'b'}, 3])
    _check_passes({'a': 1}, {'a': 1, 'b': 2})
    _check_passes(np.array([[1, 2], [3, 4]]), [[1, 2], [3, 4]])


def test_type_mismatch():
    """Different kinds at the root fail before any value is looked at"""
    _check_fails(['a'], {0: 'a'}, 't: Expected type "array" but found type "object"')
    _check_fails(None, {}, 't: Expected type "null" but found type "object"')
    _check_fails({}, [], 't: Expected type "object" but found type "array"')
    _check_fails(1, True, 't: Expected type "number" but found type "boolean"')
    e = _check_fails(UNDEFINED, None, 't: Expected type "undefined" but found type "null"')
    assert e.path == ''


def test_primitive_mismatch():
    """Leaves are quoted, and shown the way they are written in the message formats"""
    _check_fails('abcdef', 'abc', 't: Expected "abcdef" but found "abc"')
    _check_fails(True, False, 't: Expected "true" but found "false"')
    _check_fails(1.0, 2.5, 't: Expected "1" but found "2.5"')
    _check_fails(Symbol('foo'), Symbol('foo'), 't: Expected "Symbol(foo)" but found "Symbol(foo)"')
    e = _check_fails(1, 2, 't: Expected "1" but found "2"')
    assert (e.expected, e.actual, e.path) == (1, 2, '')


def test_sequence_mismatch():
    """Array failures carry the path to the divergence"""
    _check_fails(['a', 'b'], ['a', 'b', 'c'], 't: Expected Array length 2 but found 3')
    _check_fails([1, [2, 3]], [1, [2, 4]], 't: Expected Array[1][1] 3 but found 4')
    _check_fails([1, 'x'], [1, None], 't: Expected Array[1] type "string" but found type "null"')
    e = _check_fails([{'a': False}], [{'a': True}], 't: Expected Array[0].a false but found true')
    assert e.path == '[0].a'


def test_record_mismatch():
    """Object failures carry the path to the divergence"""
    expected = {'a': 1, 'b': {'x': [1, {'p': 'a', 'q': 'b'}, 3], 'y': 1, 'z': 2}}
    actual = {'a': 1, 'b': {'x': [1, {'p': 'a', 'q': 'c'}, 3], 'y': 1, 'z': 2}}
    e = _check_fails(expected, actual, 't: Expected Object.b.x[1].q b but found c')
    assert (e.expected, e.actual, e.path) == ('b', 'c', '.b.x[1].q')

    _check_fails({'a': 123}, {'a': UNDEFINED}, 't: Expected Object.a type "number" but found type "undefined"')
    _check_fails({'a': 1, 'b': 2}, {'a': 1}, 't: Expected Object.b key to be present but found none')
    _check_passes({'a': None}, {'a': None, 'b': 1, 'c': []})


def test_message_label():
    """The caller's label always starts the message"""
    assert failure_message('Test 02', 'abcdef', 'abc') == 'Test 02: Expected "abcdef" but found "abc"'
    assert failure_message('', [], {}) == ': Expected type "array" but found type "object"'


def test_deep_equal():
    """Tests the boolean variant"""
    assert deep_equal([1, 2], [1, 2])
    assert not deep_equal([1, 2], [2, 1])
    assert not deep_equal({'a': 1}, None)
    with pytest.raises(AssertionFailure) as e:
        deep_equal({'a': [1]}, {'a': [2]}, raise_err=True)
    assert e.value.path == '.a[0]'
    assert isinstance(e.value, AssertionError)


def test_comparison_error_propagates():
    """Errors while comparing are not assertion failures"""
    class _TempBadLen(list):
        def __len__(self):
            raise RuntimeError("no length")

    with pytest.raises(ComparisonError):
        assert_equals('t', [1], _TempBadLen([1]))
    with pytest.raises(ComparisonError):
        failure_message('t', {'a': [1]}, {'a': _TempBadLen([1])})


def test_display():
    """Tests how values are shown in failure messages"""
    assert display(True) == 'true'
    assert display(np.bool_(False)) == 'false'
    assert display(None) == 'null'
    assert display(UNDEFINED) == 'undefined'
    assert display(3) == '3'
    assert display(3.0) == '3'
    assert display(np.float64(-2.0)) == '-2'
    assert display(0.5) == '0.5'
    assert display(float('nan')) == 'NaN'
    assert display(float('inf')) == 'Infinity'
    assert display(float('-inf')) == '-Infinity'
    assert display(1e300) == '1e+300'
    assert display('length 2') == 'length 2'
    assert display(Symbol('x')) == 'Symbol(x)'

    long_str = 'a' * (MAX_STR_LEN + 10)
    assert display(long_str) == 'a' * MAX_STR_LEN + '...'
    assert display('abcdef', limit=3) == 'abc...'


def test_values_without_attributes():
    """Decimals, dates and dict views fail on their values, never pass as empty objects"""
    assert not deep_equal(Decimal('1'), Decimal('2'))
    assert deep_equal(Decimal('2.50'), Decimal('2.5'))
    assert not deep_equal(date(2020, 1, 1), date(2021, 1, 1))
    assert not deep_equal({1: 2}.values(), {1: 3}.values())

    _check_fails(Decimal('1'), Decimal('2'), 't: Expected "1" but found "2"')
    _check_fails(date(2020, 1, 1), date(2021, 1, 1), 't: Expected Object 2020-01-01 but found 2021-01-01')
    e = _check_fails({'when': date(2020, 1, 1)}, {'when': date(2021, 1, 1)},
        't: Expected Object.when 2020-01-01 but found 2021-01-01')
    assert e.path == '.when'
    _check_fails({'v': {1: 2}.values()}, {'v': {1: 3}.values()}, 't: Expected Object.v[0] 2 but found 3')


def test_failure_carries_comparison():
    """The failure keeps exactly what the structural comparison found"""
    for expected, actual in [({'a': [1, {'b': 'x'}]}, {'a': [1, {'b': 'y'}]}), ([1, 2], [1]), (None, []), (1, 2)]:
        with pytest.raises(AssertionFailure) as e:
            assert_equals('t', expected, actual)
        assert e.value.result == compare(expected, actual)
