import os
import stat

import pytest

from relicfs.antink import AntinkFS, is_dangerous, reverse_name, rot13, write_log


@pytest.fixture
def fs(tmp_path):
    host = tmp_path / "host"
    host.mkdir()
    return AntinkFS(host, tmp_path / "it24.log")


def last_log(fs):
    return fs.log_file.read_text().splitlines()[-1]


@pytest.mark.parametrize("name", ["nafis.txt", "xkimcunx", "/a/nafis"])
def test_dangerous(name):
    assert is_dangerous(name) is True


@pytest.mark.parametrize("name", ["safe.txt", "naf.is", ""])
def test_not_dangerous(name):
    assert is_dangerous(name) is False


def test_reverse_name_round_trip():
    name = "kimcun.txt"
    assert reverse_name(reverse_name(name)) == name
    assert reverse_name(name)[0] == name[-1]


def test_rot13_known():
    assert rot13("Hello") == "Uryyb"


def test_rot13_round_trip():
    text = "The Quick Brown Fox, 123!"
    assert rot13(rot13(text)) == text
    assert rot13(rot13(text.encode())) == text.encode()


def test_rot13_stops_at_nul():
    assert rot13(b"ab\0ab") == b"no\0ab"


def test_write_log_format(tmp_path):
    log = tmp_path / "l.log"
    write_log(log, "READ", "READ: /x")
    assert log.read_text().split("] ", 1)[1] == "READ: READ: /x\n"


def test_getattr(fs):
    (fs.full_path("/a.bin")).write_bytes(b"12345")
    assert fs.getattr("/a.bin").st_size == 5
    with pytest.raises(FileNotFoundError):
        fs.getattr("/missing")


def test_readdir_reverses_dangerous(fs):
    fs.full_path("/nafis.txt").write_text("x")
    fs.full_path("/plain.txt").write_text("x")
    fs.full_path("/dir").mkdir()
    entries = {e.name: e for e in fs.readdir("/")}
    assert set(entries) == {".", "..", reverse_name("nafis.txt"), "plain.txt", "dir"}
    assert entries["dir"].mode == stat.S_IFDIR
    assert entries["plain.txt"].mode == stat.S_IFREG


def test_read_rot13_for_txt(fs):
    fs.full_path("/note.txt").write_bytes(b"Secret Message")
    assert fs.read("/note.txt", 100) == rot13(b"Secret Message")
    assert fs.read("/note.txt", 3, 7) == rot13(b"Mes")


def test_read_dangerous_untouched(fs):
    fs.full_path("/kimcun.txt").write_bytes(b"raw text")
    assert fs.read("/kimcun.txt", 100) == b"raw text"
    fs.full_path("/data.bin").write_bytes(b"raw text")
    assert fs.read("/data.bin", 100) == b"raw text"


def test_create_write_unlink(fs):
    fs.create("/new.bin", 0o600)
    assert fs.full_path("/new.bin").exists()
    assert last_log(fs).endswith("CREATE: CREATE: /new.bin")
    assert fs.write("/new.bin", b"hello", 0) == 5
    assert fs.write("/new.bin", b"J", 0) == 1
    assert fs.full_path("/new.bin").read_bytes() == b"Jello"
    assert last_log(fs).endswith("WRITE: WRITE: /new.bin")
    fs.unlink("/new.bin")
    assert not fs.full_path("/new.bin").exists()
    assert last_log(fs).endswith("DELETE: DELETE: /new.bin")


def test_open_logs_and_errors(fs):
    fs.full_path("/f").write_bytes(b"")
    fs.open("/f", os.O_RDONLY)
    assert last_log(fs).endswith("READ: READ: /f")
    with pytest.raises(FileNotFoundError):
        fs.open("/missing")


def test_unlink_missing(fs):
    with pytest.raises(FileNotFoundError):
        fs.unlink("/missing")