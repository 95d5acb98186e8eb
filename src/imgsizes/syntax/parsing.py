"""Implements the ["parse a sizes attribute"](http://html.spec.whatwg.org/multipage/images.html#parse-a-sizes-attribute) algorithm of the HTML specification, selecting the size applicable for the current viewport.

The grammar of the attribute value is:

    <source-size-list> = <source-size># [ , <source-size-value> ]? | <source-size-value>
    <source-size> = <media-condition> <source-size-value>
    <source-size-value> = <length>

E.g. `(max-width: 30em) 100vw, (max-width: 50em) 70vw, 100vw` or just `30vw`.

NOTE: Evaluating a media condition requires knowledge of the viewport and the device, which is the domain of the host (e.g. a browser or a headless renderer), _and_ parsing of arbitrary media condition syntax. Neither is attempted here -- media conditions are passed as text to an _evaluator_ supplied by the caller (see `Evaluator`).

# Deviations

* The media condition text passed to the evaluator is the component values preceding the size, joined with single spaces, as opposed to a parsed `<media-condition>`; a condition the evaluator cannot parse is expected to evaluate to false, which is the outcome the specification mandates for a condition that does not parse
"""

from .tokenizing import tokenize
from ..utils import ignore_parse_error, ParseErrorHandler
from ..values import is_valid_non_negative_source_size_value

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

DEFAULT_SIZE = '100vw' # The size selected when no source size in the list applies

@runtime_checkable
class Evaluator(Protocol):
    """The interface of media condition evaluators.

    An evaluator is called with the text of a media condition, e.g. `(min-width: 30em)` or `not print`, and returns whether the condition is true for the current viewport. For any condition it cannot parse or evaluate, including unknown media features and malformed text, an evaluator must return `False` rather than raise.
    """
    def __call__(self, condition: str) -> bool: raise NotImplementedError

def matching(*conditions: str) -> Evaluator:
    """Create an evaluator which considers true exactly the specified media conditions (compared verbatim), and every other condition false.

    Useful where there is no media query engine at hand but the set of conditions that hold is known in advance, and for testing.
    """
    return frozenset(conditions).__contains__

class SourceSize(list[str]):
    """Class of parse products that represent a `<source-size>`, or a `<source-size-value>` with no media condition.

    The elements are the component values of the group the source size was parsed from, the last of which is the size.
    """
    @property
    def size(self) -> str:
        return self[-1]
    @property
    def media_condition(self) -> str | None:
        """The text of the media condition, or `None` if the size is unconditional."""
        return ' '.join(self[:-1]) or None

def consume_source_size(group: Sequence[str], *, parse_error: ParseErrorHandler = ignore_parse_error) -> SourceSize | None:
    """Parse a group of component values into a source size.

    Implements steps 1 and 2 of the algorithm, for a single group.

    :returns: The source size, or `None` if the group does not end with a valid non-negative `<source-size-value>` (that is a parse error)
    """
    if not group:
        parse_error('Empty source size')
        return None
    if not is_valid_non_negative_source_size_value(group[-1]):
        parse_error(f'Invalid source size value {group[-1]!r} in {" ".join(group)!r}')
        return None
    return SourceSize(group)

def select(groups: Sequence[Sequence[str]], evaluate: Evaluator, *, parse_error: ParseErrorHandler = ignore_parse_error) -> str:
    """Select the size from a tokenized `sizes` attribute value.

    The first source size that is unconditional or has its media condition evaluate to true, wins. Malformed source sizes are skipped, reporting a parse error for each.

    :param groups: Groups of component values, as returned by `tokenize`
    :param evaluate: The evaluator to call with the text of each media condition encountered, until one evaluates to true
    :param parse_error: A callable to notify of parse errors
    :returns: The selected size, verbatim, or `DEFAULT_SIZE` if none of the source sizes apply
    """
    for i, group in enumerate(groups):
        if (source_size := consume_source_size(group, parse_error=parse_error)) is None:
            continue
        match source_size.media_condition:
            case None:
                if i != len(groups) - 1:
                    parse_error(f'Trailing content after unconditional size {source_size.size!r}')
                return source_size.size
            case condition if evaluate(condition):
                return source_size.size
    return DEFAULT_SIZE

def parse_sizes(value: str | None, evaluate: Evaluator, *, parse_error: ParseErrorHandler = ignore_parse_error) -> str:
    """Parse the value of a `sizes` attribute and return the size applicable for the current viewport.

    E.g. `parse_sizes('(min-width: 30em) 50vw, 100vw', matching('(min-width: 30em)'))` returns `'50vw'`.

    :param value: The attribute value, or `None` if the attribute is absent
    :param evaluate: See `select`
    :param parse_error: See `select`
    """
    return select(tokenize(value, parse_error=parse_error), evaluate, parse_error=parse_error)

def media_conditions(groups: Iterable[Sequence[str]], *, parse_error: ParseErrorHandler = ignore_parse_error) -> Iterable[str]:
    """Yield the text of every media condition in the tokenized value, in order, skipping groups that do not form a source size.

    Lets a host learn which conditions a value depends on, e.g. to register listeners for viewport changes affecting the selected size.

    :param parse_error: A callable to notify of parse errors, one for every group skipped
    """
    for group in groups:
        if (source_size := consume_source_size(group, parse_error=parse_error)) is not None and source_size.media_condition is not None:
            yield source_size.media_condition
