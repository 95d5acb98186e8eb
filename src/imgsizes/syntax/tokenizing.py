"""Tokenization of the value of a `sizes` attribute into comma-separated groups of component values.

The HTML specification instructs to "parse a comma-separated list of component values" (see http://drafts.csswg.org/css-syntax/#parse-comma-separated-list-of-component-values) from the attribute value. A full CSS tokenizer and parser is not needed for what the `sizes` grammar permits, so this module implements a toy variant of the procedure where a component value is plain _text_ rather than a token object:

* a component value is a maximal run of code points that are neither white-space nor a comma, save for runs inside parentheses, where white-space is kept (collapsed to a single space) as part of the component value -- `calc(5px + 5px)` is one component value and not three
* comments (`/* ... */`) are discarded, but separate component values the same way white-space does -- `1/* */px` is two component values
* commas separate groups regardless of parenthesis nesting, and empty groups are dropped

# Deviations

* Commas inside parentheses split groups, e.g. `attr(data-foo, 1px)` is tokenized into the groups `attr(data-foo` and `1px)`; this matches the reference polyfill behaviour the test suite was written against, while a conforming CSS parser would keep the commas inside the function
* The parenthesis nesting depth is reset with every group, which follows from the above
"""

from ..utils import CP, BufferedPeekingReader, ignore_parse_error, IteratorReader, join, ParseErrorHandler

from collections.abc import Iterator

def component_value_groups(input: str, *, parse_error: ParseErrorHandler = ignore_parse_error) -> Iterator[list[str]]:
    """Generate the non-empty groups of component values in the value of a `sizes` attribute, in order of appearance.

    :param input: The attribute value
    :param parse_error: A callable to notify of parse errors; the only parse error this procedure reports is that of an unterminated comment, which otherwise is discarded just the same
    :returns: An iterator of groups, each a list of [non-empty] component values in order of appearance in the group
    """
    stream = BufferedPeekingReader(IteratorReader(iter(input)))
    def next(n: int) -> str:
        """Return (without consuming) the next `n` code points in the stream, fewer if the stream is exhausted."""
        return join(stream.peek(n))
    def consume(n: int) -> str:
        """Consume and return the next `n` code points in the stream; the empty string is returned once the stream is exhausted."""
        return join(stream.read(n))
    group: list[str] = []
    value = '' # The component value being accumulated
    depth = 0 # Parenthesis nesting depth
    while True:
        match cp := consume(1):
            case '' | ',':
                if value := value.rstrip(' '):
                    group.append(value)
                if group:
                    yield group
                if not cp:
                    return
                group, value, depth = [], '', 0
            case _ if is_whitespace(cp):
                while is_whitespace(next(1)):
                    consume(1)
                if depth > 0:
                    if value:
                        value += ' ' # A plain space, whatever the white-space was, for legibility
                elif value:
                    group.append(value)
                    value = ''
            case '/' if next(1) == '*':
                consume(1)
                while next(2) != '*/':
                    if not consume(1):
                        parse_error(f'Unterminated comment in {input!r}')
                        break
                else:
                    consume(2)
                if value := value.rstrip(' '): # Joined component values never hold a doubled space
                    group.append(value)
                    value = ''
            case _:
                if cp == '(':
                    depth += 1
                elif cp == ')':
                    depth -= 1
                value += cp

def tokenize(input: str | None, *, parse_error: ParseErrorHandler = ignore_parse_error) -> list[list[str]]:
    """Tokenize the value of a `sizes` attribute into a list of groups of component values.

    E.g. `tokenize('(max-width: 30em) 100vw, /* default */ 50vw')` returns `[['(max-width: 30em)', '100vw'], ['50vw']]`.

    :param input: The attribute value; `None` (the attribute being absent) is treated as the empty string
    :param parse_error: See `component_value_groups`
    """
    return list(component_value_groups(input or '', parse_error=parse_error))

def is_whitespace(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-whitespace."""
    return cp in ('\t', '\n', '\f', '\r', ' ')
