import pytest

from urikit import UNRESERVED, escape, unescape, unescape_to_bytes


def test_escape_space():
    assert escape("abcd efg") == "abcd%20efg"


def test_unescape_space():
    assert unescape("abcd%20efg") == "abcd efg"


def test_unreserved_passes_through():
    text: str = "".join(sorted(UNRESERVED))
    assert escape(text) == text


@pytest.mark.parametrize(
    "text, escaped",
    [
        ("a/b", "a%2fb"),
        ("?&=#", "%3f%26%3d%23"),
        ("100%", "100%25"),
        ("é", "%c3%a9"),
        ("", ""),
    ],
)
def test_escape_uses_lowercase_hex(text, escaped):
    assert escape(text) == escaped


@pytest.mark.parametrize(
    "escaped, text",
    [
        ("%41%4a%4A", "AJJ"),
        ("%C3%A9", "é"),
        ("%c3%a9", "é"),
        ("a+b", "a+b"),
        ("plain", "plain"),
    ],
)
def test_unescape(escaped, text):
    assert unescape(escaped) == text


def test_invalid_hex_digits_decode_as_zero():
    assert unescape_to_bytes("%zz") == b"\x00"
    assert unescape_to_bytes("%z1") == b"\x01"
    assert unescape_to_bytes("%1z") == b"\x10"


def test_truncated_escape_is_kept():
    assert unescape("abc%") == "abc%"
    assert unescape("%4") == "%4"
    assert unescape("%41%") == "A%"


def test_unescape_to_bytes():
    assert unescape_to_bytes("%ff%00a") == b"\xff\x00a"
    assert unescape_to_bytes("é") == "é".encode("utf-8")


def test_undecodable_bytes_survive():
    assert unescape("%ff") == "\udcff"
    assert escape(unescape("%ff")) == "%ff"


@pytest.mark.parametrize(
    "text",
    ["abcd efg", "a b c", "  ", "Ῥόδος", "key=value&other=1", "100% sure", "~user/path"],
)
def test_unescape_inverts_escape(text):
    assert unescape(escape(text)) == text


def test_lone_surrogate():
    assert escape("\ud800") == "%ed%a0%80"
    assert unescape(escape("\ud800")) == "\ud800"


@pytest.mark.parametrize("text", ["a\ud800b", "\udfff", "𐃿", "x\udc80\ud83dy"])
def test_lone_surrogates_survive_round_trip(text):
    assert unescape(escape(text)) == text
