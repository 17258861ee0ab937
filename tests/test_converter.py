import codecs

import pytest

import ebconv
from ebconv import FileConverter
from ebconv.errors import (ConversionError, DecodeError, EncodeError,
                           EncodingError)


def test_convert_bytes_scenario():
    conv = FileConverter("cp037", "utf-8")
    assert conv.convert_bytes(b"\x00\xc1\x3d\xc2") == b" A\nB"


def test_convert_bytes_scenario_folded():
    conv = FileConverter("cp037", "utf-8", fold_width=2)
    assert conv.convert_bytes(b"\x00\xc1\x3d\xc2") == b" A\n\x15B"


def test_convert_text():
    conv = FileConverter("cp037", "utf-8", fold_width=3)
    assert conv.convert_text("ABCDEFG") == "ABC\nDEF\nG"


def test_roundtrip_printable():
    original = "PAYROLL RECORD 0042 SMITH, JOHN".encode("cp037")
    to_utf8 = FileConverter("cp037", "utf-8")
    to_ebcdic = FileConverter("utf-8", "cp037")
    assert to_ebcdic.convert_bytes(to_utf8.convert_bytes(original)) == original


def test_fixed_records_to_lines():
    records = "RECORD1 RECORD2 RECORD3 ".encode("cp037")
    conv = FileConverter("cp037", "utf-8", fold_width=8)
    assert conv.convert_bytes(records) == b"RECORD1 \nRECORD2 \nRECORD3 "


def test_defaults():
    conv = FileConverter()
    assert conv.source_encoding == codecs.lookup("cp1047").name
    assert conv.target_encoding == codecs.lookup(ebconv.default_encoding()).name
    assert conv.fold_width is None


def test_unknown_encoding_fails_fast():
    with pytest.raises(EncodingError):
        FileConverter("cp037", "no-such-codepage")
    with pytest.raises(EncodingError):
        FileConverter("no-such-codepage", "utf-8")


def test_invalid_fold_width():
    with pytest.raises(ValueError):
        FileConverter("cp037", "utf-8", fold_width=0)


def test_convert_file(tmp_path):
    source = tmp_path / "in.ebc"
    dest = tmp_path / "out.txt"
    source.write_bytes("HELLO".encode("cp037") + b"\x3d" + "WORLD".encode("cp037"))
    written = FileConverter("cp037", "utf-8").convert(source, dest)
    assert dest.read_bytes() == b"HELLO\nWORLD"
    assert written == len(b"HELLO\nWORLD")


def test_convert_file_overwrites(tmp_path):
    source = tmp_path / "in.ebc"
    dest = tmp_path / "out.txt"
    source.write_bytes("NEW".encode("cp037"))
    dest.write_bytes(b"old content that is longer")
    FileConverter("cp037", "utf-8").convert(str(source), str(dest))
    assert dest.read_bytes() == b"NEW"


def test_missing_source(tmp_path):
    source = tmp_path / "missing.ebc"
    with pytest.raises(ConversionError) as excinfo:
        FileConverter("cp037", "utf-8").convert(source, tmp_path / "out.txt")
    assert excinfo.value.path == source
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert str(source) in str(excinfo.value)


def test_missing_destination_folder(tmp_path):
    source = tmp_path / "in.ebc"
    source.write_bytes(b"\xc1")
    with pytest.raises(ConversionError) as excinfo:
        FileConverter("cp037", "utf-8").convert(source, tmp_path / "nope" / "out.txt")
    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.get_context("destination") == tmp_path / "nope" / "out.txt"


def test_decode_failure_is_tagged_with_path(tmp_path):
    source = tmp_path / "bad.txt"
    source.write_bytes(b"\xff\xfe\xfa")
    dest = tmp_path / "out.ebc"
    with pytest.raises(ConversionError) as excinfo:
        FileConverter("utf-8", "cp037").convert(source, dest)
    assert excinfo.value.path == source
    assert isinstance(excinfo.value.cause, DecodeError)
    assert not dest.exists()


def test_encode_failure_is_tagged_with_path(tmp_path):
    source = tmp_path / "euro.txt"
    source.write_bytes("price: 5€".encode("utf-8"))
    with pytest.raises(ConversionError) as excinfo:
        FileConverter("utf-8", "cp037").convert(source, tmp_path / "out.ebc")
    assert excinfo.value.path == source
    assert isinstance(excinfo.value.cause, EncodeError)
    assert excinfo.value.cause.character == "€"


def test_convert_ebcdic_helper():
    assert ebconv.convert_ebcdic(b"\xc1\xc2\xc3\xc4", lrecl=2, encoding="cp037") == "AB\nCD"
    assert ebconv.convert_ebcdic(b"\xc1\x3d\xc2", encoding="cp037") == "A\nB"


def test_convert_file_helper(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.ebc"
    source.write_bytes(b"ABC")
    ebconv.convert_file(source, dest, source_encoding="utf-8", target_encoding="cp037")
    assert dest.read_bytes() == b"\xc1\xc2\xc3"


@pytest.mark.parametrize("name", ["base64", "hex", "zlib", "rot13"])
def test_non_text_codec_fails_fast(name):
    with pytest.raises(EncodingError):
        FileConverter(name, "utf-8")
    with pytest.raises(EncodingError):
        FileConverter("utf-8", name)
