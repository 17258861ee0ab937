import pytest


@pytest.fixture
def ebcdic_tree(tmp_path):
    """A source folder of cp037 files, with hidden entries that must be skipped."""
    source = tmp_path / "src"
    (source / "sub" / "deeper").mkdir(parents=True)
    (source / ".git").mkdir()
    (source / "a.txt").write_bytes("HELLO".encode("cp037"))
    (source / "sub" / "b.txt").write_bytes("WORLD\x00".encode("cp037"))
    (source / "sub" / "deeper" / "c.txt").write_bytes("ABCDEF".encode("cp037"))
    (source / ".hidden").write_bytes(b"skip me")
    (source / ".git" / "config").write_bytes(b"skip me too")
    return source
