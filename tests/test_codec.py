import codecs

import pytest

from ebconv import codec
from ebconv.errors import ConverterError, DecodeError, EncodeError, EncodingError


def test_decode_ebcdic_letters():
    assert codec.decode(b"\xc8\xc5\xd3\xd3\xd6", "cp037") == "HELLO"


def test_decode_cp1047_is_registered():
    # Letters, digits and space share positions across EBCDIC code pages
    assert codec.decode(b"\xc1\x40\xf1", "cp1047") == "A 1"


def test_decode_keeps_control_characters():
    assert codec.decode(b"\x00\xc1\x3d\xc2", "cp037") == "\x00A\x15B"


def test_encode_roundtrip():
    data = "HELLO, WORLD 123".encode("cp037")
    assert codec.encode(codec.decode(data, "cp037"), "cp037") == data


def test_unknown_encoding():
    with pytest.raises(EncodingError) as excinfo:
        codec.decode(b"abc", "no-such-codepage")
    assert excinfo.value.encoding == "no-such-codepage"
    assert isinstance(excinfo.value, LookupError)
    assert isinstance(excinfo.value, ConverterError)


def test_lookup_is_cached():
    assert codec.lookup("cp037") is codec.lookup("cp037")
    assert codec.lookup("cp037").name == codecs.lookup("cp037").name


def test_decode_error_is_strict():
    with pytest.raises(DecodeError) as excinfo:
        codec.decode(b"ok\xffno", "utf-8")
    assert excinfo.value.position == 2
    assert excinfo.value.get_context("encoding") == "utf-8"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_encode_error():
    with pytest.raises(EncodeError) as excinfo:
        codec.encode("A€B", "cp037")
    assert excinfo.value.position == 1
    assert excinfo.value.character == "€"
    assert "U+20AC" in str(excinfo.value)


def test_encode_unknown_encoding():
    with pytest.raises(EncodingError):
        codec.encode("A", "no-such-codepage")


def test_default_encoding_resolves():
    assert codec.lookup(codec.default_encoding())


def test_codec_names():
    names = codec.codec_names()
    assert "cp1047" in names
    assert names == sorted(names)


@pytest.mark.parametrize("name", ["base64", "hex", "zlib", "rot13"])
def test_non_text_codecs_are_rejected(name):
    with pytest.raises(EncodingError) as excinfo:
        codec.lookup(name)
    assert "not a text encoding" in str(excinfo.value)


@pytest.mark.parametrize("name", [["cp037"], None, 1047])
def test_non_string_encoding_name(name):
    with pytest.raises(EncodingError):
        codec.lookup(name)


def test_ebcdic_byte_15_is_not_the_newline_control():
    # NEL (byte 0x15) decodes to U+0085; U+0015 comes from byte 0x3D
    assert codec.decode(b"\x15\x3d", "cp037") == "\x85\x15"
