"""
Running batches of equality assertions

Every case is run on its own: a failing case never stops the ones after it. The runner only collects failure messages,
showing them (printing, rendering a page, etc.) is left to the caller.
"""

import logging
from .assertion import AssertionFailure, assert_equals
from .pytypes import Symbol, UNDEFINED
from typing import NamedTuple, TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Iterable, List, Optional


logger = logging.getLogger(__name__)


class Case(NamedTuple):
    """A single labelled assertion: ``actual`` is expected to be deeply equal to ``expected``"""
    message: str
    expected: 'Any'
    actual: 'Any'


def run_case(case: 'Case') -> 'Optional[str]':
    """Runs one case, returning its failure message, or None if it passed"""
    message, expected, actual = case
    try:
        assert_equals(message, expected, actual)
    except AssertionFailure as e:
        return e.message
    return None


def run_all(cases: 'Iterable[Case]') -> 'List[str]':
    """Runs all cases in order, returning the failure messages of those that failed (in the same order)"""
    failures, total = [], 0
    for case in cases:
        total += 1
        failure = run_case(case)
        if failure is not None:
            failures.append(failure)

    logger.info("Ran %d cases: %d passed, %d failed", total, total - len(failures), len(failures))
    return failures


def _canonical_cases():
    complex_object_1 = {
        'propA': 1,
        'propB': {
            'propA': [1, {'propA': 'a', 'propB': 'b'}, 3],
            'propB': 1,
            'propC': 2,
        },
    }

    complex_object_1_copy = {
        'propA': 1,
        'propB': {
            'propA': [1, {'propA': 'a', 'propB': 'b'}, 3],
            'propB': 1,
            'propC': 2,
        },
    }

    # Same as complex_object_1 but with a different key order and one different leaf
    complex_object_2 = {
        'propA': 1,
        'propB': {
            'propB': 1,
            'propA': [1, {'propA': 'a', 'propB': 'c'}, 3],
            'propC': 2,
        },
    }

    complex_object_3 = {
        'propA': 1,
        'propB': {
            'propA': [1, {'propA': 'a', 'propB': 'b'}, 3],
            'propB': 1,
        },
    }

    my_symbol = Symbol('foo')

    return (
        Case('Test 01', 'abc', 'abc'),
        Case('Test 02', 'abcdef', 'abc'),
        Case('Test 03', ['a'], {0: 'a'}),
        Case('Test 04', ['a', 'b'], ['a', 'b', 'c']),
        Case('Test 05', ['a', 'b', 'c'], ['a', 'b', 'c']),
        Case('Test 06', complex_object_1, complex_object_1_copy),
        Case('Test 07', complex_object_1, complex_object_2),
        Case('Test 08', complex_object_1, complex_object_3),
        Case('Test 09', None, {}),
        Case('Test 10', None, 'abc'),
        Case('Test 11', None, None),
        Case('Test 12', {}, None),
        Case('Test 13', [], None),
        Case('Test 14', [], {}),
        Case('Test 15', {}, []),
        Case('Test 16', my_symbol, Symbol('foo')),
        Case('Test 17', my_symbol, my_symbol),
        Case('Test 18', complex_object_1, complex_object_1),
        Case('Test 19', complex_object_2, complex_object_1),
        Case('Test 20', {'a': 123}, {'a': UNDEFINED}),
    )


# The reference set of cases, covering kind mismatches, nested paths, missing keys and symbols
CANONICAL_CASES = _canonical_cases()
