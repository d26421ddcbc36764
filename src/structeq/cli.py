"""
Command line entry point: deep-compares two JSON documents

    python -m structeq EXPECTED.json ACTUAL.json [--message MSG] [--verbose]

Exit codes: 0 if the documents are deeply equal, 1 if they are not (the failure message is printed), 2 if either
document could not be read.
"""

import argparse
import json
import logging
import sys
from .assertion import AssertionFailure, assert_equals
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, List, Optional


logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_NOT_EQUAL = 1
EXIT_BAD_INPUT = 2


def _parse_args(argv: 'Optional[List[str]]') -> 'argparse.Namespace':
    p = argparse.ArgumentParser(prog='structeq', description='Report the first difference between two JSON documents.')
    p.add_argument('expected', help='path to the expected JSON document')
    p.add_argument('actual', help='path to the actual JSON document')
    p.add_argument('-m', '--message', default=None, help='label put at the start of the failure message '
        '(defaults to the name of the actual document)')
    p.add_argument('-v', '--verbose', action='store_true', help='log every comparison step')
    return p.parse_args(argv)


def _load_json(path: 'str') -> 'Any':
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def main(argv: 'Optional[List[str]]' = None) -> 'int':
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    documents = []
    for path in (args.expected, args.actual):
        try:
            documents.append(_load_json(path))
        except (OSError, ValueError) as e:
            logger.debug("Failed to load %s", path, exc_info=True)
            print("Could not read JSON document %r: %s" % (path, e), file=sys.stderr)
            return EXIT_BAD_INPUT

    message = args.message if args.message is not None else args.actual
    try:
        assert_equals(message, *documents)
    except AssertionFailure as e:
        print(e.message)
        return EXIT_NOT_EQUAL
    return EXIT_EQUAL
