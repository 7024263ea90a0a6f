"""urikit.parse
A permissive, single-pass URI scanner.

The scanner walks the source once with a cursor, moving through the states
below and filling in a URI field by field. It only backs up twice: to the
start of the input when what looked like a scheme is not one, and to the start
of the authority after looking ahead for "@". The one input it rejects is a
port containing something other than digits.
"""

import enum
import logging

from typing import Callable, Self

from .result import BadPortError, Err, Ok, Result
from .uri import URI

logger = logging.getLogger(__name__)

_SCHEME_PUNCTUATION: str = "-.+"
_AUTHORITY_TERMINATORS: str = "/?#"


class Cursor:
    """An offset into an immutable source string."""

    def __init__(self: Self, source: str, offset: int = 0) -> None:
        self.source: str = source
        self.offset: int = offset

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self.source!r}, offset={self.offset})"

    def at_end(self: Self) -> bool:
        return self.offset >= len(self.source)

    def peek(self: Self, ahead: int = 0) -> str | None:
        """The character ahead characters past the offset, or None past the end"""
        pos: int = self.offset + ahead
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self: Self, count: int = 1) -> None:
        self.offset = min(self.offset + count, len(self.source))

    def rewind(self: Self, offset: int) -> None:
        self.offset = offset

    def startswith(self: Self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)

    def span(self: Self, start: int) -> str:
        return self.source[start : self.offset]


class State(enum.Enum):
    START = "start"
    SCHEME = "scheme"
    NO_SCHEME = "no-scheme"
    RELATIVE = "relative"
    RELATIVE_SLASH = "relative-slash"
    PATH_OR_AUTHORITY = "path-or-authority"
    AUTHORITY = "authority"
    USER_INFO = "user-info"
    HOST = "host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"
    DONE = "done"
    FAILED = "failed"


def _is_alpha(c: str | None) -> bool:
    return c is not None and c.isascii() and c.isalpha()


def _is_digit(c: str | None) -> bool:
    return c is not None and "0" <= c <= "9"


def _start(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    if cursor.at_end():
        return State.DONE, uri
    if _is_alpha(cursor.peek()):
        return State.SCHEME, uri
    return State.NO_SCHEME, uri


def _scheme(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    while not cursor.at_end():
        c: str = cursor.source[cursor.offset]
        if c.isascii() and (c.isalnum() or c in _SCHEME_PUNCTUATION):
            cursor.advance()
            continue
        if c == ":":
            uri = uri.replace(scheme=cursor.span(start))
            cursor.advance()
            if cursor.startswith("//"):
                cursor.advance(2)
                return State.PATH_OR_AUTHORITY, uri
            return State.DONE, uri.replace(opaque=cursor.source[cursor.offset :])
        break
    # Not a scheme after all; reread everything as a relative reference.
    cursor.rewind(0)
    return State.NO_SCHEME, uri


def _no_scheme(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    if cursor.peek() == "#":
        cursor.advance()
        return State.FRAGMENT, uri
    return State.RELATIVE, uri


def _relative(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    c: str | None = cursor.peek()
    if c == "/":
        return State.RELATIVE_SLASH, uri
    if c == "?":
        cursor.advance()
        return State.QUERY, uri
    if c == "#":
        cursor.advance()
        return State.FRAGMENT, uri
    return State.PATH, uri


def _relative_slash(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    cursor.advance()
    if cursor.at_end():
        return State.DONE, uri.replace(path="")
    if cursor.peek() == "/":
        cursor.advance()
        return State.AUTHORITY, uri
    return State.PATH, uri


def _path_or_authority(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    if cursor.at_end():
        return State.DONE, uri
    if cursor.peek() == "/":
        # scheme:///path has an empty authority
        cursor.advance()
        return State.PATH, uri
    return State.AUTHORITY, uri


def _authority(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    has_userinfo: bool = False
    while not cursor.at_end():
        c: str = cursor.source[cursor.offset]
        if c in _AUTHORITY_TERMINATORS:
            break
        if c == "@":
            has_userinfo = True
            break
        cursor.advance()
    cursor.rewind(start)
    if has_userinfo:
        return State.USER_INFO, uri
    return State.HOST, uri


def _user_info(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    password_start: int | None = None
    while not cursor.at_end():
        c: str = cursor.source[cursor.offset]
        if c == ":" and password_start is None:
            uri = uri.replace(user=cursor.span(start))
            cursor.advance()
            password_start = cursor.offset
            continue
        if c == "@":
            if password_start is None:
                uri = uri.replace(user=cursor.span(start))
            else:
                uri = uri.replace(password=cursor.span(password_start))
            cursor.advance()
            return State.HOST, uri
        cursor.advance()
    # The authority lookahead guarantees an "@"; nothing else to record.
    return State.HOST, uri


def _after_authority(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    c: str | None = cursor.peek()
    if c is None:
        return State.DONE, uri
    # "?" and "#" stay put so the path is recorded as empty.
    if c == "/":
        cursor.advance()
    return State.PATH, uri


def _host(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    if cursor.peek() == "/":
        cursor.advance()
        return State.PATH, uri
    start: int = cursor.offset
    bracketed: bool = False
    while not cursor.at_end():
        c: str = cursor.source[cursor.offset]
        if c == "[":
            bracketed = True
        elif c == "]":
            bracketed = False
        elif c == ":" and not bracketed:
            uri = uri.replace(host=cursor.span(start))
            cursor.advance()
            return State.PORT, uri
        elif c in _AUTHORITY_TERMINATORS:
            break
        cursor.advance()
    return _after_authority(cursor, uri.replace(host=cursor.span(start)))


def _port(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    while not cursor.at_end():
        c: str = cursor.source[cursor.offset]
        if c in _AUTHORITY_TERMINATORS:
            break
        if not _is_digit(c):
            logger.debug("non-digit %r in port of %r at %d", c, cursor.source, cursor.offset)
            return State.FAILED, uri
        cursor.advance()
    digits: str = cursor.span(start)
    if len(digits) > 0:
        uri = uri.replace(port=int(digits, base=10))
    return _after_authority(cursor, uri)


def _path(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    while not cursor.at_end() and cursor.source[cursor.offset] not in "?#":
        cursor.advance()
    uri = uri.replace(path=cursor.span(start))
    c: str | None = cursor.peek()
    if c is None:
        return State.DONE, uri
    cursor.advance()
    if c == "?":
        return State.QUERY, uri
    return State.FRAGMENT, uri


def _query(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    start: int = cursor.offset
    while not cursor.at_end() and cursor.source[cursor.offset] != "#":
        cursor.advance()
    uri = uri.replace(query=cursor.span(start))
    if cursor.at_end():
        return State.DONE, uri
    cursor.advance()
    return State.FRAGMENT, uri


def _fragment(cursor: Cursor, uri: URI) -> tuple[State, URI]:
    return State.DONE, uri.replace(fragment=cursor.source[cursor.offset :])


_HANDLERS: dict[State, Callable[[Cursor, URI], tuple[State, URI]]] = {
    State.START: _start,
    State.SCHEME: _scheme,
    State.NO_SCHEME: _no_scheme,
    State.RELATIVE: _relative,
    State.RELATIVE_SLASH: _relative_slash,
    State.PATH_OR_AUTHORITY: _path_or_authority,
    State.AUTHORITY: _authority,
    State.USER_INFO: _user_info,
    State.HOST: _host,
    State.PORT: _port,
    State.PATH: _path,
    State.QUERY: _query,
    State.FRAGMENT: _fragment,
}


def parse(source: str) -> Result[URI, BadPortError]:
    """Parse source into a URI.

    Never raises for str input. Anything the scanner can make sense of is accepted;
    the only failure is a port with a non-digit in it, returned as Err(BadPortError).
    """
    cursor: Cursor = Cursor(source)
    state: State = State.START
    uri: URI = URI()
    while state not in (State.DONE, State.FAILED):
        state, uri = _HANDLERS[state](cursor, uri)
    if state is State.FAILED:
        # The cursor is left on the offending character.
        return Err(BadPortError(cursor.offset))
    return Ok(uri)


def parse_or_raise(source: str) -> URI:
    """Like parse, but raises urikit.BadPortError instead of returning it."""
    return parse(source).unwrap()
