"""urikit.escape
Percent-encoding and decoding of arbitrary text.
"""

import codecs
import string

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED: frozenset[str] = frozenset(string.ascii_letters + string.digits + "-_.~")

_HEX_ALPHABET: str = "0123456789abcdef"

# Anything missing from the table decodes as 0.
_NIBBLES: dict[str, int] = {c: int(c, 16) for c in string.hexdigits}

_UNRESERVED_BYTES: frozenset[int] = frozenset(ord(c) for c in UNRESERVED)

_ERRORS: str = "urikit.surrogates"


def _surrogates(error: UnicodeError) -> tuple[str | bytes, int]:
    """surrogateescape where it applies, surrogatepass for every other lone surrogate"""
    first: str = "surrogateescape"
    second: str = "surrogatepass"
    if isinstance(error, UnicodeDecodeError):
        first, second = second, first
    try:
        return codecs.lookup_error(first)(error)
    except UnicodeError:
        return codecs.lookup_error(second)(error)


codecs.register_error(_ERRORS, _surrogates)


def escape(text: str) -> str:
    """Percent-encode every byte of text's UTF-8 form that is not unreserved.
    e.g. escape("abcd efg") == "abcd%20efg"

    Lone surrogates are encoded too: U+DC80-U+DCFF as the byte they stand for,
    any other as its three-byte UTF-8 form.
    """
    result: list[str] = []
    for b in text.encode("utf-8", _ERRORS):
        if b in _UNRESERVED_BYTES:
            result.append(chr(b))
        else:
            result.append(f"%{_HEX_ALPHABET[b >> 4]}{_HEX_ALPHABET[b & 0xF]}")
    return "".join(result)


def unescape_to_bytes(text: str) -> bytes:
    """Decode percent escapes in text without interpreting the resulting bytes.

    Escapes are not validated: a non-hex digit counts as 0, so "%zz" decodes to a NUL byte.
    A "%" with fewer than two characters after it is kept as is.
    """
    result: bytearray = bytearray()
    pos: int = 0
    end: int = len(text)
    while pos < end:
        c: str = text[pos]
        if c == "%" and end - pos > 2:
            result.append((_NIBBLES.get(text[pos + 1], 0) << 4) | _NIBBLES.get(text[pos + 2], 0))
            pos += 3
        else:
            result += c.encode("utf-8", _ERRORS)
            pos += 1
    return bytes(result)


def unescape(text: str) -> str:
    """Inverse of escape.
    e.g. unescape("abcd%20efg") == "abcd efg"

    Bytes that are not UTF-8 come back as the lone surrogates escape produces for them.
    """
    return unescape_to_bytes(text).decode("utf-8", _ERRORS)
