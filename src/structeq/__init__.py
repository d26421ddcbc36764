"""Deep structural equality of untyped values, reporting the first divergence between them."""

from .pytypes import UNDEFINED, Symbol
from .kinds import Kind, classify
from .comparison import ComparisonResult, ComparisonError, compare, compare_primitive, compare_sequence, compare_record
from .assertion import AssertionFailure, assert_equals, deep_equal, failure_message, display
from .runner import Case, run_case, run_all, CANONICAL_CASES

__all__ = ['UNDEFINED', 'Symbol', 'Kind', 'classify', 'ComparisonResult', 'ComparisonError', 'compare',
    'compare_primitive', 'compare_sequence', 'compare_record', 'AssertionFailure', 'assert_equals', 'deep_equal',
    'failure_message', 'display', 'Case', 'run_case', 'run_all', 'CANONICAL_CASES']
__version__ = '0.1.0'
