"""Command-line front end: select the size from a `sizes` attribute value.

E.g. `python -m imgsizes '(min-width: 30em) 50vw, 100vw' '(min-width: 30em)'` prints `50vw`. Media conditions given after the value are considered true, every other condition false.
"""

from .syntax.parsing import matching, media_conditions, select
from .syntax.tokenizing import tokenize
from .utils import ignore_parse_error, report_parse_error

import argparse
import sys
from collections.abc import Sequence

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='imgsizes', description='Select the applicable size from the value of a `sizes` attribute.')
    parser.add_argument('value', nargs='?', default='-', help="the attribute value; '-' (the default) reads it from standard input")
    parser.add_argument('conditions', nargs='*', metavar='condition', help='a media condition to consider true, verbatim as it appears in the value')
    parser.add_argument('-l', '--list', action='store_true', help='list the media conditions in the value instead of selecting a size')
    parser.add_argument('-v', '--verbose', action='store_true', help='report parse errors on standard error')
    return parser

def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    value = sys.stdin.read().rstrip('\n') if args.value == '-' else args.value
    parse_error = report_parse_error if args.verbose else ignore_parse_error
    groups = tokenize(value, parse_error=parse_error)
    if args.list:
        sys.stdout.writelines(condition + '\n' for condition in media_conditions(groups, parse_error=parse_error))
    else:
        sys.stdout.write(select(groups, matching(*args.conditions), parse_error=parse_error) + '\n')
    return 0

if __name__ == '__main__':
    sys.exit(main())
