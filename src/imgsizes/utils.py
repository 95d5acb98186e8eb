"""Set of constructs to aid the rest of the package, of both the package-specific and the general kind that would otherwise warrant third-party dependencies."""

import sys

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable, TypeAlias, TypeVar

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)

CP: TypeAlias = str # [Unicode] code points are strings of length 1, with the empty string signifying the end-of-stream condition

@runtime_checkable
class Reader(Protocol[T_co]):
    """An interface to readable/readers, to assist type checking for the most part."""
    def read(self, size: int = -1, /) -> Sequence[T_co]:
        """See Python's own `IOBase.read` in the `io` module."""
        raise NotImplementedError

@runtime_checkable
class Peeker(Protocol[T_co]):
    def peek(self, size: int, /) -> Sequence[T_co]:
        """Peek into the stream (without consuming/changing it).

        The tokenizer uses this to look at the code point(s) following the one it is currently considering, e.g. to tell the start of a comment (`/*`) from a lone solidus.

        :param size: maximum number of items to return
        :returns: a sequence of items available for reading from the stream with the next `read` operation; the length of the sequence may be smaller than `size` if end of stream was encountered
        """
        raise NotImplementedError

@runtime_checkable
class PeekingReader(Peeker[T], Reader[T], Protocol[T]):
    """A protocol that defines readers that also support peeking ahead (at what will be consumed next)."""
    pass # The protocol is simply a union of its super-types.

class BufferedPeekingReader(PeekingReader[T]):
    """Class of stream consumers (readers) that conform to the `PeekingReader` protocol through employing a buffer."""
    _source: Reader[T]
    _buffer: list[T]
    def __init__(self, source: Reader[T]):
        self._source = source
        self._buffer = []
    def peek(self, size: int, /) -> Sequence[T]:
        assert size >= 0 # The tokenizer never peeks with negative sizes
        r = size - len(self._buffer)
        if r > 0:
            self._buffer += [*self._source.read(r)]
        return self._buffer[:size]
    def read(self, size: int = -1, /) -> Sequence[T]:
        elements = self.peek(size)
        del self._buffer[:size]
        return elements

class IteratorReader(Reader[T]):
    """Class of readers (objects featuring the eponymous `read` method) which "feed off" an iterator.

    In other words, constructing an object of this class given an `Iterator` as `source` allows to effectively utilize the `Iterator` through a `Reader` interface, which is essentially about the ability to read _multiple_ items vended by the iterator with a single call (to `read`).
    """
    _source: Iterator[T]
    def __init__(self, source: Iterator[T]):
        self._source = source
    def read(self, /, size=-1) -> Sequence[T]:
        result: list[T] = []
        while len(result) != size:
            try:
                result.append(next(self._source))
            except StopIteration:
                break
        return result

def join(iterable: Sequence[str]) -> str:
    """Join a sequence into a string."""
    return ''.join(iterable)

@runtime_checkable
class ParseErrorHandler(Protocol):
    """The interface of parse error handlers, callables that get notified of every [non-fatal] parse error encountered.

    Parsing of a `sizes` attribute never fails -- malformed parts of the value are skipped -- so a parse error is something that is _reported_ rather than raised. Which, if any, reporting is appropriate is for the caller to decide, hence the handler being a parameter of every procedure that may encounter a parse error.

    See also http://html.spec.whatwg.org/multipage/images.html#parse-a-sizes-attribute where the conditions constituting a parse error are defined.
    """
    def __call__(self, message: str) -> None: raise NotImplementedError

def ignore_parse_error(message: str) -> None:
    """The "default" parse error handler procedure, which does nothing.

    Library code is used in non-interactive contexts (e.g. on a server) just as often as not, where writing to the terminal is undesirable, so we stay silent unless asked otherwise.
    """
    pass

def report_parse_error(message: str) -> None:
    """A parse error handler which writes the error message to the standard error stream."""
    sys.stderr.write(f'Parse error: {message}\n')
