"""A pass-through view of a host directory that hides and scrambles names."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

LOG_FILE = "/var/log/it24.log"
HOST_DIR = "/it24_host"
_DANGEROUS_WORDS = ("nafis", "kimcun")

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()
_ROT = _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13]
_STR_TABLE = str.maketrans(_LOWER + _UPPER, _ROT)
_BYTES_TABLE = bytes.maketrans((_LOWER + _UPPER).encode(), _ROT.encode())


def write_log(log_file, action: str, details: str) -> None:
    """Append ``[timestamp] action: details`` to ``log_file``; failures are ignored."""
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        with open(log_file, "a") as fp:
            fp.write(f"[{stamp}] {action}: {details}\n")
    except OSError:
        pass


def reverse_name(name: str) -> str:
    return name[::-1]


def is_dangerous(name: str) -> bool:
    return any(word in name for word in _DANGEROUS_WORDS)


def rot13(text):
    """ROT13 the ASCII letters of ``text`` (str or bytes) up to the first NUL."""
    if isinstance(text, (bytes, bytearray)):
        head, nul, tail = bytes(text).partition(b"\0")
        return head.translate(_BYTES_TABLE) + nul + tail
    head, nul, tail = text.partition("\0")
    return head.translate(_STR_TABLE) + nul + tail


@dataclass(frozen=True)
class DirEntry:
    """A directory listing entry."""

    name: str
    inode: int
    mode: int


class AntinkFS:
    """Operations over ``host_dir`` that log activity and disguise content."""

    def __init__(self, host_dir=HOST_DIR, log_file=LOG_FILE):
        self.host_dir = os.fspath(host_dir)
        self.log_file = log_file

    def full_path(self, path: str) -> Path:
        return Path(f"{self.host_dir}{path}")

    def getattr(self, path: str) -> os.stat_result:
        return os.lstat(self.full_path(path))

    def readdir(self, path: str) -> list[DirEntry]:
        full = self.full_path(path)
        entries = [
            DirEntry(".", os.stat(full).st_ino, stat.S_IFDIR),
            DirEntry("..", os.stat(full / "..").st_ino, stat.S_IFDIR),
        ]
        with os.scandir(full) as it:
            for entry in it:
                mode = stat.S_IFMT(entry.stat(follow_symlinks=False).st_mode)
                name = reverse_name(entry.name) if is_dangerous(entry.name) else entry.name
                entries.append(DirEntry(name, entry.inode(), mode))
        return entries

    def open(self, path: str, flags: int = os.O_RDONLY) -> None:
        os.close(os.open(self.full_path(path), flags))
        write_log(self.log_file, "READ", f"READ: {path}")

    def read(self, path: str, size: int, offset: int = 0) -> bytes:
        with open(self.full_path(path), "rb") as fp:
            fp.seek(offset)
            data = fp.read(size)
        if not is_dangerous(path) and ".txt" in path:
            data = rot13(data)
        return data

    def create(self, path: str, mode: int = 0o644, flags: int = os.O_WRONLY | os.O_CREAT) -> None:
        os.close(os.open(self.full_path(path), flags, mode))
        write_log(self.log_file, "CREATE", f"CREATE: {path}")

    def write(self, path: str, data: bytes, offset: int = 0) -> int:
        fd = os.open(self.full_path(path), os.O_WRONLY)
        try:
            os.lseek(fd, offset, os.SEEK_SET)
            written = os.write(fd, data)
        finally:
            os.close(fd)
        write_log(self.log_file, "WRITE", f"WRITE: {path}")
        return written

    def unlink(self, path: str) -> None:
        os.unlink(self.full_path(path))
        write_log(self.log_file, "DELETE", f"DELETE: {path}")