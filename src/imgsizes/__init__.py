"""Parsing of the `sizes` attribute of HTML `img` and `source` elements, aligned with the [HTML] specification.

The principal procedure is `parse_sizes`, which returns the size applicable for the current viewport given a media condition evaluator:

    >>> parse_sizes('(min-width: 30em) 50vw, 100vw', matching('(min-width: 30em)'))
    '50vw'
"""

from .syntax.parsing import DEFAULT_SIZE, Evaluator, matching, media_conditions, parse_sizes, select, SourceSize
from .syntax.tokenizing import tokenize
from .utils import ignore_parse_error, ParseErrorHandler, report_parse_error
from .values import is_valid_non_negative_source_size_value, LENGTH_UNITS
